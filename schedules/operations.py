"""Schedule API operations.

Each request object knows its HTTP descriptor (``op()``) and, where it has
one, its body (``to_payload()`` / ``to_json()``) or query (``to_params()``).

Usage:
    from schedules.operations import CreateChargeSchedule
    from schedules.params import Cadence, ChargeAction
    from schedules.types import Period, Weekday

    create = CreateChargeSchedule(
        cadence=Cadence(
            every=3,
            period=Period.WEEK,
            weekdays=[Weekday.MONDAY, Weekday.SATURDAY],
            start_date="2017-05-15",
            end_date="2018-05-15",
        ),
        charge=ChargeAction(customer="cust_test_123", amount=100000),
    )
    create.to_json()
"""
from __future__ import annotations

import json
from dataclasses import dataclass, field
from typing import Any, Dict

from core.constants import CONTENT_TYPE_JSON
from core.listing import ListParams
from core.operation import Endpoint, Op

from .params import Cadence, ChargeAction, TransferAction

SCHEDULES_PATH = "/schedules"


def _compact_json(payload: Dict[str, Any]) -> str:
    return json.dumps(payload, separators=(",", ":"), ensure_ascii=False, allow_nan=False)


def _schedule_path(schedule_id: str) -> str:
    if not schedule_id:
        raise ValueError("schedule_id is required")
    return f"{SCHEDULES_PATH}/{schedule_id}"


@dataclass
class CreateChargeSchedule:
    """POST /schedules creating a recurring charge."""

    cadence: Cadence
    charge: ChargeAction

    def to_payload(self) -> Dict[str, Any]:
        payload = self.cadence.to_payload()
        payload["charge"] = self.charge.to_payload()
        return payload

    def to_json(self) -> str:
        return _compact_json(self.to_payload())

    def op(self) -> Op:
        return Op(method="POST", path=SCHEDULES_PATH, endpoint=Endpoint.API, content_type=CONTENT_TYPE_JSON)


@dataclass
class CreateTransferSchedule:
    """POST /schedules creating a recurring transfer."""

    cadence: Cadence
    transfer: TransferAction

    def to_payload(self) -> Dict[str, Any]:
        payload = self.cadence.to_payload()
        payload["transfer"] = self.transfer.to_payload()
        return payload

    def to_json(self) -> str:
        return _compact_json(self.to_payload())

    def op(self) -> Op:
        return Op(method="POST", path=SCHEDULES_PATH, endpoint=Endpoint.API, content_type=CONTENT_TYPE_JSON)


@dataclass
class ListSchedules:
    """GET /schedules; the query is the shared list window unchanged."""

    list_params: ListParams = field(default_factory=ListParams)

    def to_params(self) -> Dict[str, Any]:
        return self.list_params.to_params()

    def op(self) -> Op:
        return Op(method="GET", path=SCHEDULES_PATH, endpoint=Endpoint.API, values=self.to_params())


@dataclass
class RetrieveSchedule:
    schedule_id: str

    def op(self) -> Op:
        return Op(method="GET", path=_schedule_path(self.schedule_id), endpoint=Endpoint.API)


@dataclass
class DestroySchedule:
    schedule_id: str

    def op(self) -> Op:
        return Op(method="DELETE", path=_schedule_path(self.schedule_id), endpoint=Endpoint.API)
