"""Resolution of the ``on`` sub-object of a schedule.

A schedule fires on every day of its period unless a selector narrows it:
explicit weekdays for weekly schedules, explicit days or a symbolic weekday
(``last_thursday``) for monthly ones. At most one selector is ever sent.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional, Union

from .types import DaysOfMonth, Period, Weekdays, enum_value


@dataclass(frozen=True)
class WeekdaysSelector:
    weekdays: List[str] = field(default_factory=list)

    def to_payload(self) -> Dict[str, Any]:
        # An empty list still yields an (empty) "on" object
        if not self.weekdays:
            return {}
        return {"weekdays": list(self.weekdays)}


@dataclass(frozen=True)
class DaysOfMonthSelector:
    days_of_month: List[int]

    def to_payload(self) -> Dict[str, Any]:
        return {"days_of_month": list(self.days_of_month)}


@dataclass(frozen=True)
class WeekdayOfMonthSelector:
    weekday_of_month: str

    def to_payload(self) -> Dict[str, Any]:
        return {"weekday_of_month": self.weekday_of_month}


Selector = Union[WeekdaysSelector, DaysOfMonthSelector, WeekdayOfMonthSelector]


def resolve_selector(
    period: Union[Period, str],
    weekdays: Optional[Weekdays] = None,
    days_of_month: Optional[DaysOfMonth] = None,
    weekday_of_month: str = "",
) -> Optional[Selector]:
    """Pick the single selector that applies to ``period``; first match wins.

    - week: weekdays, always (possibly empty)
    - month: days_of_month if any, else weekday_of_month if set
    - anything else: no selector
    """
    unit = enum_value(period)
    if unit == Period.WEEK.value:
        return WeekdaysSelector([enum_value(d) for d in weekdays or ()])
    if unit == Period.MONTH.value:
        if days_of_month:
            return DaysOfMonthSelector([int(d) for d in days_of_month])
        if weekday_of_month:
            return WeekdayOfMonthSelector(weekday_of_month)
    return None
