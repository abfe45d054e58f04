"""Credential resolution for the schedules CLI.

Resolution order: CLI arg > environment > INI profile.

INI layout (any file from ``core.constants.credential_ini_paths()``)::

    [omise]
    secret_key = skey_test_...
    public_key = pkey_test_...

    [omise.staging]
    secret_key = skey_test_...
    api_version = 2019-05-29
"""
from __future__ import annotations

import configparser
import os
from dataclasses import dataclass
from typing import Dict, List, Optional

from core.cli_errors import ConfigError
from core.constants import (
    ENV_API_VERSION,
    ENV_PUBLIC_KEY,
    ENV_SECRET_KEY,
    credential_ini_paths,
)

_SECTION = "omise"


@dataclass
class Credentials:
    secret_key: str
    public_key: Optional[str] = None
    api_version: Optional[str] = None


def _read_ini(paths: Optional[List[str]] = None) -> Dict[str, Dict[str, str]]:
    """Merge all readable credential files; earlier files win per key."""
    merged: Dict[str, Dict[str, str]] = {}
    for p in paths if paths is not None else credential_ini_paths():
        if not os.path.exists(p):
            continue
        cp = configparser.ConfigParser(interpolation=None)
        try:
            cp.read(p, encoding="utf-8")
        except configparser.Error as exc:
            raise ConfigError(f"Unreadable credentials file {p}: {exc}") from exc
        for section in cp.sections():
            sec = merged.setdefault(section, {})
            for k, v in cp.items(section):
                sec.setdefault(k, v)
    return merged


def _profile_section(ini: Dict[str, Dict[str, str]], profile: Optional[str]) -> Dict[str, str]:
    if profile:
        name = f"{_SECTION}.{profile}"
        if name not in ini:
            raise ConfigError(f"Profile '{profile}' not found", hint=f"Add a [{name}] section to credentials.ini")
        return ini[name]
    return ini.get(_SECTION, {})


def resolve_credentials(
    profile: Optional[str] = None,
    secret_key: Optional[str] = None,
    public_key: Optional[str] = None,
    api_version: Optional[str] = None,
    ini_paths: Optional[List[str]] = None,
) -> Credentials:
    """Return credentials folded over env and INI defaults.

    Raises:
        ConfigError: no secret key could be found.
    """
    section = _profile_section(_read_ini(ini_paths), profile)

    resolved_secret = secret_key or os.environ.get(ENV_SECRET_KEY) or section.get("secret_key")
    if not resolved_secret:
        raise ConfigError(
            "No secret key configured",
            hint=f"Set {ENV_SECRET_KEY} or add secret_key to credentials.ini",
        )
    return Credentials(
        secret_key=resolved_secret,
        public_key=public_key or os.environ.get(ENV_PUBLIC_KEY) or section.get("public_key"),
        api_version=api_version or os.environ.get(ENV_API_VERSION) or section.get("api_version"),
    )
