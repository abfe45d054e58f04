"""Schedule records as returned by the API.

These are decode targets only; nothing here is sent back to the server.
"""
from __future__ import annotations

import datetime as _dt
from dataclasses import dataclass, field
from typing import Any, Dict, List, Mapping, Optional

from core.date_utils import decode_date, decode_datetime

from .types import ScheduleStatus


def _opt_int(value: Any) -> Optional[int]:
    return None if value is None else int(value)


def _opt_float(value: Any) -> Optional[float]:
    return None if value is None else float(value)


@dataclass
class ScheduleOn:
    weekdays: List[str] = field(default_factory=list)
    days_of_month: List[int] = field(default_factory=list)
    weekday_of_month: str = ""

    @classmethod
    def from_dict(cls, data: Optional[Mapping[str, Any]]) -> "ScheduleOn":
        data = data or {}
        return cls(
            weekdays=list(data.get("weekdays") or []),
            days_of_month=[int(d) for d in data.get("days_of_month") or []],
            weekday_of_month=data.get("weekday_of_month") or "",
        )


@dataclass
class ScheduleCharge:
    customer: str = ""
    card: str = ""
    amount: int = 0
    currency: str = ""
    description: str = ""

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "ScheduleCharge":
        return cls(
            customer=data.get("customer") or "",
            card=data.get("card") or "",
            amount=int(data.get("amount") or 0),
            currency=data.get("currency") or "",
            description=data.get("description") or "",
        )


@dataclass
class ScheduleTransfer:
    """Either ``amount`` or ``percentage_of_balance`` is set, the other is None."""

    recipient: str = ""
    amount: Optional[int] = None
    currency: str = ""
    percentage_of_balance: Optional[float] = None

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "ScheduleTransfer":
        return cls(
            recipient=data.get("recipient") or "",
            amount=_opt_int(data.get("amount")),
            currency=data.get("currency") or "",
            percentage_of_balance=_opt_float(data.get("percentage_of_balance")),
        )


@dataclass
class Schedule:
    id: str
    object: str = "schedule"
    livemode: bool = False
    location: str = ""
    created: Optional[_dt.datetime] = None
    status: Optional[ScheduleStatus] = None
    every: int = 0
    period: str = ""
    on: ScheduleOn = field(default_factory=ScheduleOn)
    in_words: str = ""
    start_date: Optional[_dt.date] = None
    end_date: Optional[_dt.date] = None
    charge: Optional[ScheduleCharge] = None
    transfer: Optional[ScheduleTransfer] = None
    next_occurrences: List[_dt.date] = field(default_factory=list)

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "Schedule":
        status = data.get("status")
        charge = data.get("charge")
        transfer = data.get("transfer")
        occurrences = data.get("next_occurrence_dates")
        if occurrences is None:
            occurrences = data.get("next_occurrences") or []
        return cls(
            id=data.get("id") or "",
            object=data.get("object") or "schedule",
            livemode=bool(data.get("livemode")),
            location=data.get("location") or "",
            created=decode_datetime(data.get("created_at") or data.get("created")),
            status=ScheduleStatus(status) if status else None,
            every=int(data.get("every") or 0),
            period=data.get("period") or "",
            on=ScheduleOn.from_dict(data.get("on")),
            in_words=data.get("in_words") or "",
            start_date=decode_date(data.get("start_date")),
            end_date=decode_date(data.get("end_date")),
            charge=ScheduleCharge.from_dict(charge) if charge else None,
            transfer=ScheduleTransfer.from_dict(transfer) if transfer else None,
            next_occurrences=[d for d in (decode_date(v) for v in occurrences) if d is not None],
        )

    def summary(self) -> Dict[str, Any]:
        """Short flat view for text output."""
        action = "charge" if self.charge else "transfer" if self.transfer else ""
        return {
            "id": self.id,
            "status": self.status.value if self.status else "",
            "every": f"{self.every} {self.period}",
            "action": action,
            "start_date": self.start_date.isoformat() if self.start_date else "",
            "end_date": self.end_date.isoformat() if self.end_date else "",
        }


@dataclass
class ScheduleList:
    data: List[Schedule] = field(default_factory=list)
    object: str = "list"
    offset: int = 0
    limit: int = 0
    total: int = 0
    order: Optional[str] = None
    from_: Optional[_dt.datetime] = None
    to: Optional[_dt.datetime] = None

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "ScheduleList":
        return cls(
            data=[Schedule.from_dict(item) for item in data.get("data") or []],
            object=data.get("object") or "list",
            offset=int(data.get("offset") or 0),
            limit=int(data.get("limit") or 0),
            total=int(data.get("total") or 0),
            order=data.get("order"),
            from_=decode_datetime(data.get("from")),
            to=decode_datetime(data.get("to")),
        )
