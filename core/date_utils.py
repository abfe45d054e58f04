"""Date adapters between Python dates and the provider's wire formats.

Request-side dates are date-only strings (``YYYY-MM-DD``) with no time of day
and no timezone. Response-side values may be dates or RFC 3339 timestamps.
"""
from __future__ import annotations

import datetime as _dt
import re
from typing import Any, Optional

from .constants import FMT_DATE, FMT_DATETIME_UTC
from .errors import FormatError

__all__ = [
    "DAY_MAP",
    "decode_date",
    "decode_datetime",
    "encode_date_field",
    "format_date",
    "normalize_weekday",
    "parse_date",
    "to_iso_str",
]

# Strict shape check; strptime alone would accept "2017-5-1"
_DATE_RE = re.compile(r"^\d{4}-\d{2}-\d{2}$")

# Day-of-week name/abbreviation to the weekday names the API expects
DAY_MAP = {
    "monday": "monday",
    "mon": "monday",
    "mo": "monday",
    "tuesday": "tuesday",
    "tue": "tuesday",
    "tues": "tuesday",
    "tu": "tuesday",
    "wednesday": "wednesday",
    "wed": "wednesday",
    "we": "wednesday",
    "thursday": "thursday",
    "thu": "thursday",
    "thur": "thursday",
    "thurs": "thursday",
    "th": "thursday",
    "friday": "friday",
    "fri": "friday",
    "fr": "friday",
    "saturday": "saturday",
    "sat": "saturday",
    "sa": "saturday",
    "sunday": "sunday",
    "sun": "sunday",
    "su": "sunday",
}


def parse_date(value: str, field: str = "date") -> _dt.date:
    """Parse a ``YYYY-MM-DD`` string into a calendar date.

    Raises:
        FormatError: if the string has the wrong shape or is not a real date.
    """
    if not isinstance(value, str) or not _DATE_RE.match(value):
        raise FormatError(field, value)
    try:
        return _dt.datetime.strptime(value, FMT_DATE).date()
    except ValueError as exc:
        raise FormatError(field, value) from exc


def format_date(d: _dt.date) -> str:
    """Format a date for the wire: ``YYYY-MM-DD``, nothing else."""
    return f"{d.year:04d}-{d.month:02d}-{d.day:02d}"


def encode_date_field(value: Optional[str], field: str) -> Optional[str]:
    """Validate and re-encode an optional date string; ``None`` when unset."""
    if not value:
        return None
    return format_date(parse_date(value, field))


def decode_date(value: Any) -> Optional[_dt.date]:
    """Decode a response date. Timestamps keep only their date part."""
    if value is None or value == "":
        return None
    if isinstance(value, _dt.datetime):
        return value.date()
    if isinstance(value, _dt.date):
        return value
    s = str(value).strip()
    if "T" in s:
        s = s.split("T", 1)[0]
    return _dt.date.fromisoformat(s)


def decode_datetime(value: Any) -> Optional[_dt.datetime]:
    """Decode an RFC 3339 timestamp into an aware datetime (UTC if unzoned)."""
    if value is None or value == "":
        return None
    if isinstance(value, _dt.datetime):
        dt = value
    else:
        s = str(value).strip()
        if s.endswith("Z"):
            s = s[:-1] + "+00:00"
        dt = _dt.datetime.fromisoformat(s)
    if dt.tzinfo is None:
        dt = dt.replace(tzinfo=_dt.timezone.utc)
    return dt


def to_iso_str(v: Any) -> Optional[str]:
    """Convert a list-filter bound to an RFC 3339 UTC string.

    Naive datetimes are taken as UTC. Dates become midnight UTC. Strings pass
    through untouched.
    """
    if v is None:
        return None
    if isinstance(v, str):
        return v
    if isinstance(v, _dt.datetime):
        if v.tzinfo is not None:
            v = v.astimezone(_dt.timezone.utc)
        return v.strftime(FMT_DATETIME_UTC)
    if isinstance(v, _dt.date):
        return _dt.datetime(v.year, v.month, v.day).strftime(FMT_DATETIME_UTC)
    return str(v)


def normalize_weekday(name: str) -> str:
    """Map 'Mon', 'MO', 'monday' -> 'monday'; unknown names pass through lowercased."""
    key = (name or "").strip().lower()
    return DAY_MAP.get(key, key)
