"""Enumerations used by schedule requests and responses."""
from __future__ import annotations

from enum import Enum
from typing import List, Union


class Period(str, Enum):
    """Unit of a cadence: the schedule fires every N of these."""
    DAY = "day"
    WEEK = "week"
    MONTH = "month"


class Weekday(str, Enum):
    MONDAY = "monday"
    TUESDAY = "tuesday"
    WEDNESDAY = "wednesday"
    THURSDAY = "thursday"
    FRIDAY = "friday"
    SATURDAY = "saturday"
    SUNDAY = "sunday"


class ScheduleStatus(str, Enum):
    ACTIVE = "active"
    EXPIRING = "expiring"
    EXPIRED = "expired"
    DELETED = "deleted"
    SUSPENDED = "suspended"


Weekdays = List[Union[Weekday, str]]
DaysOfMonth = List[int]


def enum_value(v: Union[Enum, str]) -> str:
    """Plain string for an enum member or a raw string."""
    return v.value if isinstance(v, Enum) else str(v)
