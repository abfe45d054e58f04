"""Errors raised while building or sending provider API requests."""
from __future__ import annotations

from typing import Any, Optional


class OmiseError(Exception):
    """Base class for all SDK errors."""


class FormatError(OmiseError, ValueError):
    """A field value does not match its wire format.

    Raised while encoding, before any bytes are produced or sent. Not
    retryable: the caller has to fix the input.
    """

    def __init__(self, field: str, value: Any, expected: str = "YYYY-MM-DD") -> None:
        self.field = field
        self.value = value
        self.expected = expected
        super().__init__(f"invalid {field}: {value!r} (expected {expected})")


class APIError(OmiseError):
    """The provider answered with an error object."""

    def __init__(
        self,
        status_code: int,
        code: str = "",
        message: str = "",
        location: Optional[str] = None,
    ) -> None:
        self.status_code = status_code
        self.code = code
        self.message = message
        self.location = location
        super().__init__(f"{status_code} {code or 'error'}: {message}".rstrip(": "))

    @classmethod
    def from_response(cls, status_code: int, body: Any, text: str = "") -> "APIError":
        """Build from a decoded error body, falling back to the raw text."""
        if isinstance(body, dict):
            return cls(
                status_code,
                code=str(body.get("code") or ""),
                message=str(body.get("message") or text or ""),
                location=body.get("location"),
            )
        return cls(status_code, message=text)


class TransportError(OmiseError):
    """The request could not be completed or the response was unreadable."""
