"""Shared fake/mock objects for testing.

Modules:
    schedules - FakeSession, FakeResponse and canned schedule payloads
"""

from __future__ import annotations

from tests.fakes.schedules import (
    CHARGE_SCHEDULE,
    SCHEDULE_LIST,
    TRANSFER_SCHEDULE,
    FakeResponse,
    FakeSession,
)

__all__ = [
    "FakeSession",
    "FakeResponse",
    "CHARGE_SCHEDULE",
    "TRANSFER_SCHEDULE",
    "SCHEDULE_LIST",
]
