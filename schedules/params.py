"""Request-side building blocks: the cadence and the action payloads.

Each ``to_payload`` states its own presence rules field by field, so the
sparse-encoding contract is visible here instead of hidden in a serializer.
"""
from __future__ import annotations

import math
from dataclasses import dataclass, field
from typing import Any, Dict, Optional, Union

from core.constants import ZERO_DATE
from core.date_utils import encode_date_field
from core.errors import FormatError

from .selectors import Selector, resolve_selector
from .types import DaysOfMonth, Period, Weekdays, enum_value


@dataclass
class Cadence:
    """When a schedule fires: every N periods between two dates.

    ``start_date`` / ``end_date`` are ``YYYY-MM-DD`` strings; ``""`` means
    unset. Only the selector matching ``period`` is ever sent, see
    :func:`schedules.selectors.resolve_selector`.
    """

    every: int
    period: Union[Period, str]
    start_date: str = ""
    end_date: str = ""
    weekdays: Weekdays = field(default_factory=list)
    days_of_month: DaysOfMonth = field(default_factory=list)
    weekday_of_month: str = ""

    def selector(self) -> Optional[Selector]:
        return resolve_selector(self.period, self.weekdays, self.days_of_month, self.weekday_of_month)

    def to_payload(self) -> Dict[str, Any]:
        # Both dates are validated before anything is assembled
        start = encode_date_field(self.start_date, "start_date")
        end = encode_date_field(self.end_date, "end_date")

        payload: Dict[str, Any] = {
            "every": int(self.every),
            "period": enum_value(self.period),
        }
        if start is not None:
            payload["start_date"] = start
        # end_date is never omitted; unset encodes as the zero date
        payload["end_date"] = end if end is not None else ZERO_DATE
        sel = self.selector()
        if sel is not None:
            payload["on"] = sel.to_payload()
        return payload


@dataclass
class ChargeAction:
    """Charge created on each occurrence."""

    customer: str
    amount: int
    currency: str = ""
    card: str = ""
    description: str = ""

    def to_payload(self) -> Dict[str, Any]:
        payload: Dict[str, Any] = {"customer": self.customer, "amount": int(self.amount)}
        if self.currency:
            payload["currency"] = self.currency
        if self.card:
            payload["card"] = self.card
        if self.description:
            payload["description"] = self.description
        return payload


@dataclass
class TransferAction:
    """Transfer created on each occurrence.

    Set exactly one of ``amount`` (smallest currency unit) or
    ``percentage_of_balance``. Zero means unset for both, so a zero-amount
    transfer cannot be expressed.
    """

    recipient: str
    amount: int = 0
    percentage_of_balance: float = 0.0

    def to_payload(self) -> Dict[str, Any]:
        payload: Dict[str, Any] = {"recipient": self.recipient}
        if self.amount:
            payload["amount"] = int(self.amount)
        if self.percentage_of_balance:
            if not math.isfinite(self.percentage_of_balance):
                raise FormatError("percentage_of_balance", self.percentage_of_balance, expected="finite number")
            payload["percentage_of_balance"] = _number(self.percentage_of_balance)
        return payload


def _number(value: float) -> Union[int, float]:
    """50.0 -> 50, 50.55 -> 50.55 (matches the API's number formatting)."""
    f = float(value)
    return int(f) if f.is_integer() else f
