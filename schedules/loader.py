"""Create requests described as YAML documents.

Example file::

    every: 3
    period: week
    start_date: 2017-05-15
    end_date: 2018-05-15
    weekdays: [monday, saturday]
    charge:
      customer: cust_test_123
      amount: 100000
"""
from __future__ import annotations

import datetime as _dt
from typing import Any, Dict, Mapping, Union

from core.cli_errors import ConfigError
from core.date_utils import format_date
from core.yamlio import dump_config, load_config

from .operations import CreateChargeSchedule, CreateTransferSchedule
from .params import Cadence, ChargeAction, TransferAction
from .types import enum_value

CreateRequest = Union[CreateChargeSchedule, CreateTransferSchedule]


def _date_str(value: Any) -> str:
    # Unquoted YAML dates arrive as datetime.date
    if isinstance(value, _dt.date):
        return format_date(value)
    return "" if value is None else str(value)


def _cadence_from_mapping(data: Mapping[str, Any], source: str) -> Cadence:
    if "every" not in data or "period" not in data:
        raise ConfigError(f"{source} needs 'every' and 'period'")
    return Cadence(
        every=int(data["every"]),
        period=str(data["period"]),
        start_date=_date_str(data.get("start_date")),
        end_date=_date_str(data.get("end_date")),
        weekdays=[str(d) for d in data.get("weekdays") or []],
        days_of_month=[int(d) for d in data.get("days_of_month") or []],
        weekday_of_month=str(data.get("weekday_of_month") or ""),
    )


def request_from_mapping(data: Mapping[str, Any], source: str = "Request") -> CreateRequest:
    """Build a charge or transfer schedule request from a plain mapping.

    ``source`` names the document in error messages (a file path when loaded
    from disk).

    Raises:
        ConfigError: a field is missing or has a value of the wrong type.
    """
    charge = data.get("charge")
    transfer = data.get("transfer")
    if bool(charge) == bool(transfer):
        raise ConfigError(f"{source} needs exactly one of 'charge' or 'transfer'")
    if not isinstance(charge or transfer, Mapping):
        raise ConfigError(f"{source}: 'charge' / 'transfer' must be a mapping")
    try:
        cadence = _cadence_from_mapping(data, source)
        if charge:
            return CreateChargeSchedule(
                cadence=cadence,
                charge=ChargeAction(
                    customer=str(charge["customer"]),
                    amount=int(charge["amount"]),
                    currency=str(charge.get("currency") or ""),
                    card=str(charge.get("card") or ""),
                    description=str(charge.get("description") or ""),
                ),
            )
        return CreateTransferSchedule(
            cadence=cadence,
            transfer=TransferAction(
                recipient=str(transfer["recipient"]),
                amount=int(transfer.get("amount") or 0),
                percentage_of_balance=float(transfer.get("percentage_of_balance") or 0),
            ),
        )
    except KeyError as exc:
        raise ConfigError(f"{source} is missing field {exc.args[0]!r}") from exc
    except (TypeError, ValueError) as exc:
        raise ConfigError(f"{source} has an invalid value: {exc}") from exc


def request_to_mapping(request: CreateRequest) -> Dict[str, Any]:
    """Inverse of :func:`request_from_mapping`; empty fields are left out."""
    c = request.cadence
    out: Dict[str, Any] = {"every": c.every, "period": enum_value(c.period)}
    if c.start_date:
        out["start_date"] = c.start_date
    if c.end_date:
        out["end_date"] = c.end_date
    if c.weekdays:
        out["weekdays"] = [enum_value(d) for d in c.weekdays]
    if c.days_of_month:
        out["days_of_month"] = list(c.days_of_month)
    if c.weekday_of_month:
        out["weekday_of_month"] = c.weekday_of_month
    if isinstance(request, CreateChargeSchedule):
        out["charge"] = request.charge.to_payload()
    else:
        out["transfer"] = request.transfer.to_payload()
    return out


def load_request(path: str) -> CreateRequest:
    data = load_config(path)
    if not data:
        raise ConfigError(f"Request file {path} is missing or empty")
    return request_from_mapping(data, source=path)


def save_request(path: str, request: CreateRequest) -> None:
    dump_config(path, request_to_mapping(request))
