"""CLI exit codes and mapping of SDK errors onto them."""
from __future__ import annotations

import sys
from dataclasses import dataclass
from enum import IntEnum
from typing import Optional

from .errors import APIError, FormatError, OmiseError, TransportError


class ExitCode(IntEnum):
    """Standard CLI exit codes."""
    SUCCESS = 0
    ERROR = 1
    USAGE = 2
    CONFIG_ERROR = 3
    AUTH_ERROR = 4
    NETWORK_ERROR = 5
    NOT_FOUND = 6
    INTERRUPTED = 130  # Standard for Ctrl+C


@dataclass
class CLIError(Exception):
    """CLI error with exit code and message."""
    message: str
    code: ExitCode = ExitCode.ERROR
    hint: Optional[str] = None

    def __str__(self) -> str:
        return self.message


class ConfigError(CLIError):
    """Configuration-related error."""
    def __init__(self, message: str, hint: Optional[str] = None):
        super().__init__(message, ExitCode.CONFIG_ERROR, hint)


class AuthError(CLIError):
    """Authentication-related error."""
    def __init__(self, message: str, hint: Optional[str] = None):
        super().__init__(message, ExitCode.AUTH_ERROR, hint)


class NetworkError(CLIError):
    """Network-related error."""
    def __init__(self, message: str, hint: Optional[str] = None):
        super().__init__(message, ExitCode.NETWORK_ERROR, hint)


class NotFoundError(CLIError):
    """Resource not found error."""
    def __init__(self, message: str, hint: Optional[str] = None):
        super().__init__(message, ExitCode.NOT_FOUND, hint)


class UsageError(CLIError):
    """Usage/argument error."""
    def __init__(self, message: str, hint: Optional[str] = None):
        super().__init__(message, ExitCode.USAGE, hint)


def from_sdk_error(error: OmiseError) -> CLIError:
    """Translate an SDK exception into the matching CLI error."""
    if isinstance(error, FormatError):
        return UsageError(str(error), hint=f"{error.field} must be {error.expected}")
    if isinstance(error, APIError):
        if error.status_code == 401:
            return AuthError(str(error), hint="Check the secret key for this profile")
        if error.status_code == 404:
            return NotFoundError(str(error))
        return CLIError(str(error))
    if isinstance(error, TransportError):
        return NetworkError(str(error))
    return CLIError(str(error))


def handle_error(error: BaseException, verbose: bool = False) -> int:
    """Print an error and return the exit code to use."""
    if isinstance(error, OmiseError):
        error = from_sdk_error(error)

    if isinstance(error, CLIError):
        print(f"Error: {error.message}", file=sys.stderr)
        if error.hint:
            print(f"Hint: {error.hint}", file=sys.stderr)
        return error.code

    if isinstance(error, KeyboardInterrupt):
        print("\nInterrupted.", file=sys.stderr)
        return ExitCode.INTERRUPTED

    # Unexpected error
    print(f"Error: {error}", file=sys.stderr)
    if verbose:
        import traceback
        traceback.print_exc()
    return ExitCode.ERROR
