"""Request encoding and a thin client for the provider's schedule resource.

- params.py / selectors.py: cadence, selector and action payload encoding
- operations.py: create/list/retrieve/destroy request objects
- models.py: schedule records decoded from responses
- client.py: ScheduleClient (ApiClientBase + SchedulesMixin)

Usage:
    from schedules import Cadence, ChargeAction, CreateChargeSchedule, Period

    create = CreateChargeSchedule(
        cadence=Cadence(every=1, period=Period.MONTH, days_of_month=[1], end_date="2026-12-31"),
        charge=ChargeAction(customer="cust_test_123", amount=100000),
    )
    body = create.to_json()
"""

from core.errors import APIError, FormatError, OmiseError, TransportError
from core.listing import ListParams, Ordering

from .client import ScheduleClient, SchedulesMixin
from .models import Schedule, ScheduleCharge, ScheduleList, ScheduleOn, ScheduleTransfer
from .operations import (
    CreateChargeSchedule,
    CreateTransferSchedule,
    DestroySchedule,
    ListSchedules,
    RetrieveSchedule,
)
from .params import Cadence, ChargeAction, TransferAction
from .selectors import (
    DaysOfMonthSelector,
    WeekdayOfMonthSelector,
    WeekdaysSelector,
    resolve_selector,
)
from .types import Period, ScheduleStatus, Weekday

__all__ = [
    "ScheduleClient",
    "SchedulesMixin",
    # Requests
    "Cadence",
    "ChargeAction",
    "TransferAction",
    "CreateChargeSchedule",
    "CreateTransferSchedule",
    "ListSchedules",
    "RetrieveSchedule",
    "DestroySchedule",
    "ListParams",
    "Ordering",
    # Selectors
    "WeekdaysSelector",
    "DaysOfMonthSelector",
    "WeekdayOfMonthSelector",
    "resolve_selector",
    # Responses
    "Schedule",
    "ScheduleCharge",
    "ScheduleTransfer",
    "ScheduleOn",
    "ScheduleList",
    # Enums
    "Period",
    "Weekday",
    "ScheduleStatus",
    # Errors
    "OmiseError",
    "FormatError",
    "APIError",
    "TransportError",
]
