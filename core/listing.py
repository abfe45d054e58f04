"""Pagination and filter parameters shared by every list operation."""
from __future__ import annotations

import datetime as _dt
from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict, Optional, Union

from .date_utils import to_iso_str

Bound = Union[_dt.datetime, _dt.date, str]


class Ordering(str, Enum):
    CHRONOLOGICAL = "chronological"
    REVERSE_CHRONOLOGICAL = "reverse_chronological"


@dataclass
class ListParams:
    """Offset/limit window plus an optional creation-time range and ordering.

    Zero offset/limit and ``None`` bounds mean "unset" and are left out of the
    query, so the server applies its own defaults.
    """

    offset: int = 0
    limit: int = 0
    from_: Optional[Bound] = None
    to: Optional[Bound] = None
    order: Optional[Union[Ordering, str]] = None

    def to_params(self) -> Dict[str, Any]:
        params: Dict[str, Any] = {}
        if self.offset:
            params["offset"] = int(self.offset)
        if self.limit:
            params["limit"] = int(self.limit)
        if self.from_ is not None:
            params["from"] = to_iso_str(self.from_)
        if self.to is not None:
            params["to"] = to_iso_str(self.to)
        if self.order:
            params["order"] = Ordering(self.order).value
        return params
