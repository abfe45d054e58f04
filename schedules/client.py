"""Typed schedule calls on top of the base API client."""

from __future__ import annotations

import logging
from typing import Optional

from core.client import ApiClientBase
from core.listing import ListParams

from .models import Schedule, ScheduleList
from .operations import (
    CreateChargeSchedule,
    CreateTransferSchedule,
    DestroySchedule,
    ListSchedules,
    RetrieveSchedule,
)

LOG = logging.getLogger(__name__)


class SchedulesMixin:
    """Schedule operations.

    Requires ApiClientBase.do
    """

    def create_charge_schedule(self: ApiClientBase, request: CreateChargeSchedule) -> Schedule:
        schedule = Schedule.from_dict(self.do(request))
        LOG.info("created charge schedule %s", schedule.id)
        return schedule

    def create_transfer_schedule(self: ApiClientBase, request: CreateTransferSchedule) -> Schedule:
        schedule = Schedule.from_dict(self.do(request))
        LOG.info("created transfer schedule %s", schedule.id)
        return schedule

    def list_schedules(self: ApiClientBase, params: Optional[ListParams] = None) -> ScheduleList:
        return ScheduleList.from_dict(self.do(ListSchedules(params or ListParams())))

    def retrieve_schedule(self: ApiClientBase, schedule_id: str) -> Schedule:
        return Schedule.from_dict(self.do(RetrieveSchedule(schedule_id)))

    def destroy_schedule(self: ApiClientBase, schedule_id: str) -> Schedule:
        schedule = Schedule.from_dict(self.do(DestroySchedule(schedule_id)))
        LOG.info("destroyed schedule %s (status=%s)", schedule.id, schedule.status)
        return schedule


class ScheduleClient(ApiClientBase, SchedulesMixin):
    """API client with schedule operations.

    Usage:
        client = ScheduleClient(secret_key="skey_test_...")
        schedule = client.retrieve_schedule("schd_test_...")
    """
