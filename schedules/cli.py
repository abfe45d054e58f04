"""Command line for recurring charge and transfer schedules.

  omise-schedules create charge --every 1 --period month --day-of-month 1 \\
      --end-date 2026-12-31 --customer cust_test_123 --amount 100000
  omise-schedules create transfer --file payout.yaml --dry-run
  omise-schedules encode --file payout.yaml
  omise-schedules list --limit 20 --order reverse_chronological
  omise-schedules get schd_test_123
  omise-schedules delete schd_test_123

Credentials come from --profile / OMISE_SECRET_KEY / credentials.ini, see
schedules.config. --dry-run never needs them.
"""
from __future__ import annotations

import argparse
from typing import Any, Callable, List, Optional, Sequence, Tuple

from core.cli_errors import ExitCode, UsageError
from core.cli_framework import CLIApp
from core.cli_output import OutputFormat
from core.date_utils import normalize_weekday
from core.listing import ListParams, Ordering

from .client import ScheduleClient
from .config import resolve_credentials
from .loader import CreateRequest, load_request, save_request
from .operations import CreateChargeSchedule, CreateTransferSchedule, ListSchedules
from .params import Cadence, ChargeAction, TransferAction
from .types import Period

app = CLIApp("omise-schedules", "Create and manage recurring charge/transfer schedules", version="0.1.0")
create = app.group("create", help="Create a schedule")

_CADENCE_ARGS: List[Tuple[tuple, dict]] = [
    (("--file", "-f"), {"help": "YAML request file (other request flags are ignored)"}),
    (("--every",), {"type": int, "help": "Fire every N periods"}),
    (("--period",), {"choices": [p.value for p in Period], "help": "Period unit"}),
    (("--start-date",), {"default": "", "help": "First day (YYYY-MM-DD)"}),
    (("--end-date",), {"default": "", "help": "Last day (YYYY-MM-DD)"}),
    (("--weekday",), {"action": "append", "default": [], "help": "Weekday for weekly schedules (repeatable)"}),
    (("--day-of-month",), {"action": "append", "type": int, "default": [],
                           "help": "Day of month for monthly schedules (repeatable)"}),
    (("--weekday-of-month",), {"default": "", "help": "e.g. last_thursday, 2nd_monday"}),
    (("--save",), {"help": "Also write the request to this YAML file"}),
]


def _cadence_arguments(func: Callable) -> Callable:
    for flags, kwargs in reversed(_CADENCE_ARGS):
        func = create.argument(*flags, **kwargs)(func)
    return func


def _cadence_from_args(args: argparse.Namespace) -> Cadence:
    if args.every is None or not args.period:
        raise UsageError("--every and --period are required", hint="Or pass --file request.yaml")
    return Cadence(
        every=args.every,
        period=Period(args.period),
        start_date=args.start_date,
        end_date=args.end_date,
        weekdays=[normalize_weekday(d) for d in args.weekday],
        days_of_month=list(args.day_of_month),
        weekday_of_month=args.weekday_of_month,
    )


def _client(args: argparse.Namespace) -> ScheduleClient:
    creds = resolve_credentials(profile=args.profile)
    return ScheduleClient(creds.secret_key, creds.public_key, api_version=creds.api_version)


def _emit(args: argparse.Namespace, data: Any, text_view: Optional[Any] = None) -> None:
    out = args._output
    if out.config.format == OutputFormat.TEXT and text_view is not None:
        out.print_data(text_view)
    else:
        out.print_data(data)


def _submit(args: argparse.Namespace, request: CreateRequest) -> int:
    # Encode first: a bad date fails here, before credentials or network
    body = request.to_json()
    if args.save:
        save_request(args.save, request)
    if args.dry_run:
        op = request.op()
        args._output.print_dry_run(f"{op.method} {op.path}")
        args._output.print(body)
        return ExitCode.SUCCESS
    client = _client(args)
    if isinstance(request, CreateChargeSchedule):
        schedule = client.create_charge_schedule(request)
    else:
        schedule = client.create_transfer_schedule(request)
    _emit(args, schedule, schedule.summary())
    return ExitCode.SUCCESS


def _from_file(args: argparse.Namespace, expected: type) -> Optional[CreateRequest]:
    if not args.file:
        return None
    request = load_request(args.file)
    if not isinstance(request, expected):
        kind = "charge" if expected is CreateChargeSchedule else "transfer"
        raise UsageError(f"{args.file} does not describe a {kind} schedule")
    return request


@create.command("charge", help="Schedule a recurring charge")
@_cadence_arguments
@create.argument("--customer", help="Customer id")
@create.argument("--amount", type=int, help="Amount in the smallest currency unit")
@create.argument("--currency", default="", help="Currency code (defaults to the account's)")
@create.argument("--card", default="", help="Card id (defaults to the customer's default card)")
@create.argument("--description", default="", help="Charge description")
def cmd_create_charge(args: argparse.Namespace) -> int:
    request = _from_file(args, CreateChargeSchedule)
    if request is None:
        if not args.customer or args.amount is None:
            raise UsageError("--customer and --amount are required")
        request = CreateChargeSchedule(
            cadence=_cadence_from_args(args),
            charge=ChargeAction(
                customer=args.customer,
                amount=args.amount,
                currency=args.currency,
                card=args.card,
                description=args.description,
            ),
        )
    return _submit(args, request)


@create.command("transfer", help="Schedule a recurring transfer")
@_cadence_arguments
@create.argument("--recipient", help="Recipient id")
@create.argument("--amount", type=int, default=0, help="Fixed amount in the smallest currency unit")
@create.argument("--percentage-of-balance", type=float, default=0.0, help="Share of the balance to transfer")
def cmd_create_transfer(args: argparse.Namespace) -> int:
    request = _from_file(args, CreateTransferSchedule)
    if request is None:
        if not args.recipient:
            raise UsageError("--recipient is required")
        if bool(args.amount) == bool(args.percentage_of_balance):
            raise UsageError("Pass exactly one of --amount or --percentage-of-balance")
        request = CreateTransferSchedule(
            cadence=_cadence_from_args(args),
            transfer=TransferAction(
                recipient=args.recipient,
                amount=args.amount,
                percentage_of_balance=args.percentage_of_balance,
            ),
        )
    return _submit(args, request)


@app.command("encode", help="Print the JSON body for a request file")
@app.argument("--file", "-f", required=True, help="YAML request file")
def cmd_encode(args: argparse.Namespace) -> int:
    args._output.print(load_request(args.file).to_json())
    return ExitCode.SUCCESS


@app.command("list", help="List schedules")
@app.argument("--limit", type=int, default=0)
@app.argument("--offset", type=int, default=0)
@app.argument("--from", dest="from_", default=None, help="Created at or after (RFC 3339)")
@app.argument("--to", default=None, help="Created at or before (RFC 3339)")
@app.argument("--order", choices=[o.value for o in Ordering], default=None)
def cmd_list(args: argparse.Namespace) -> int:
    params = ListParams(offset=args.offset, limit=args.limit, from_=args.from_, to=args.to, order=args.order)
    if args.dry_run:
        op = ListSchedules(params).op()
        args._output.print_dry_run(f"{op.method} {op.path} {op.values}")
        return ExitCode.SUCCESS
    schedules = _client(args).list_schedules(params)
    _emit(args, schedules, [_row(s.summary()) for s in schedules.data])
    return ExitCode.SUCCESS


def _row(summary: dict) -> str:
    return "  ".join(str(summary[k]) for k in ("id", "status", "every", "action", "end_date"))


@app.command("get", help="Show one schedule")
@app.argument("schedule_id")
def cmd_get(args: argparse.Namespace) -> int:
    if args.dry_run:
        args._output.print_dry_run(f"GET /schedules/{args.schedule_id}")
        return ExitCode.SUCCESS
    schedule = _client(args).retrieve_schedule(args.schedule_id)
    _emit(args, schedule, schedule.summary())
    return ExitCode.SUCCESS


@app.command("delete", help="Delete (stop) a schedule")
@app.argument("schedule_id")
def cmd_delete(args: argparse.Namespace) -> int:
    if args.dry_run:
        args._output.print_dry_run(f"DELETE /schedules/{args.schedule_id}")
        return ExitCode.SUCCESS
    schedule = _client(args).destroy_schedule(args.schedule_id)
    _emit(args, schedule, schedule.summary())
    return ExitCode.SUCCESS


def main(argv: Optional[Sequence[str]] = None) -> int:
    return app.run(argv)
