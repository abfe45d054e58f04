"""Shared constants for the schedules SDK and its CLI."""

from __future__ import annotations

import os
from typing import Dict, Tuple

# -----------------------------------------------------------------------------
# Credential paths
# -----------------------------------------------------------------------------

def _config_roots() -> list[str]:
    """Return ordered list of config root directories."""
    roots: list[str] = []
    env_cfg = os.environ.get("CREDENTIALS")
    if env_cfg:
        roots.append(os.path.expanduser(os.path.dirname(env_cfg)))
    xdg = os.environ.get("XDG_CONFIG_HOME")
    if xdg:
        roots.append(os.path.expanduser(xdg))
    roots.append(os.path.expanduser("~/.config"))
    return roots


def credential_ini_paths() -> list[str]:
    """Return ordered list of credentials.ini paths to search."""
    paths: list[str] = []

    # Environment override first
    env_creds = os.environ.get("CREDENTIALS")
    if env_creds:
        paths.append(os.path.expanduser(env_creds))

    for root in _config_roots():
        paths.append(os.path.join(root, "credentials.ini"))
        paths.append(os.path.join(root, "omise", "credentials.ini"))

    seen: set[str] = set()
    unique: list[str] = []
    for p in paths:
        if p and p not in seen:
            seen.add(p)
            unique.append(p)
    return unique


# -----------------------------------------------------------------------------
# Provider API
# -----------------------------------------------------------------------------

API_URL = "https://api.omise.co"
VAULT_URL = "https://vault.omise.co"

USER_AGENT = "omise-schedules-python/0.1.0"

ENV_SECRET_KEY = "OMISE_SECRET_KEY"
ENV_PUBLIC_KEY = "OMISE_PUBLIC_KEY"
ENV_API_VERSION = "OMISE_API_VERSION"

CONTENT_TYPE_JSON = "application/json"


def default_base_urls() -> Dict[str, str]:
    """Map endpoint names to base URLs."""
    return {"api": API_URL, "vault": VAULT_URL}


# -----------------------------------------------------------------------------
# HTTP and timeouts
# -----------------------------------------------------------------------------

# Default timeout for HTTP requests: (connect_seconds, read_seconds)
DEFAULT_REQUEST_TIMEOUT: Tuple[int, int] = (10, 30)


# -----------------------------------------------------------------------------
# Wire formats
# -----------------------------------------------------------------------------

# Date-only wire format used for start_date / end_date
FMT_DATE = "%Y-%m-%d"
# Timestamps in list filters are sent as RFC 3339 in UTC
FMT_DATETIME_UTC = "%Y-%m-%dT%H:%M:%SZ"
# What an unset date encodes to when the field cannot be omitted
ZERO_DATE = "0001-01-01"
