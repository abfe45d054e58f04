"""Small declarative layer over argparse for the SDK command line.

Provides:
- Command registration via decorators
- Command groups ("create charge", "create transfer")
- Common arguments (--profile, --dry-run, --verbose, --output)
- Logging setup and consistent error handling
"""
from __future__ import annotations

import argparse
import logging
import sys
from dataclasses import dataclass, field
from typing import Any, Callable, Dict, List, Optional, Sequence

from .cli_errors import ExitCode, handle_error
from .cli_output import OutputConfig, OutputFormat, OutputWriter


CommandFunc = Callable[[argparse.Namespace], int]


@dataclass
class Argument:
    """Definition of a CLI argument."""
    name_or_flags: tuple
    kwargs: Dict[str, Any] = field(default_factory=dict)


@dataclass
class CommandDef:
    """Definition of a CLI command."""
    name: str
    func: CommandFunc
    help: str = ""
    description: str = ""
    arguments: List[Argument] = field(default_factory=list)
    parent: Optional[str] = None


class CLIApp:
    """Collects commands and runs them with shared error handling.

    Example usage:
        app = CLIApp("omise-schedules", "Manage recurring schedules")

        @app.command("get", help="Show one schedule")
        @app.argument("schedule_id")
        def cmd_get(args):
            ...
            return 0
    """

    def __init__(
        self,
        name: str,
        description: str = "",
        *,
        version: Optional[str] = None,
        add_common_args: bool = True,
    ):
        self.name = name
        self.description = description
        self.version = version
        self.add_common_args = add_common_args

        self._commands: Dict[str, CommandDef] = {}
        self._groups: Dict[str, "CommandGroup"] = {}
        self._parser: Optional[argparse.ArgumentParser] = None
        self._pending_arguments: List[Argument] = []

    def command(
        self,
        name: str,
        *,
        help: str = "",
        description: str = "",
    ) -> Callable[[CommandFunc], CommandFunc]:
        """Decorator to register a top-level command."""
        def decorator(func: CommandFunc) -> CommandFunc:
            arguments = list(reversed(self._pending_arguments))
            self._pending_arguments.clear()
            self._commands[name] = CommandDef(
                name=name,
                func=func,
                help=help,
                description=description or help,
                arguments=arguments,
            )
            return func
        return decorator

    def argument(self, *name_or_flags: str, **kwargs: Any) -> Callable[[CommandFunc], CommandFunc]:
        """Decorator to add an argument to the next command.

        Must sit BELOW the @command decorator (decorators apply bottom-up).
        """
        def decorator(func: CommandFunc) -> CommandFunc:
            self._pending_arguments.append(Argument(name_or_flags, kwargs))
            return func
        return decorator

    def group(self, name: str, *, help: str = "", description: str = "") -> "CommandGroup":
        """Create a command group for nested commands."""
        group = CommandGroup(self, name, help=help, description=description)
        self._groups[name] = group
        return group

    def build_parser(self) -> argparse.ArgumentParser:
        parser = argparse.ArgumentParser(
            prog=self.name,
            description=self.description,
            formatter_class=argparse.RawDescriptionHelpFormatter,
        )
        if self.version:
            parser.add_argument("--version", "-V", action="version", version=f"%(prog)s {self.version}")
        if self.add_common_args:
            self._add_common_arguments(parser)

        subparsers = parser.add_subparsers(dest="command", metavar="<command>")
        for group_name, group in self._groups.items():
            group_parser = subparsers.add_parser(group_name, help=group.help, description=group.description)
            group._build_subparsers(group_parser)
        for cmd_def in self._commands.values():
            if cmd_def.parent is not None:
                continue
            cmd_parser = subparsers.add_parser(cmd_def.name, help=cmd_def.help, description=cmd_def.description)
            if self.add_common_args:
                self._add_common_arguments(cmd_parser)
            self._add_command_arguments(cmd_parser, cmd_def)
            cmd_parser.set_defaults(_cmd_func=cmd_def.func)

        self._parser = parser
        return parser

    def _add_common_arguments(self, parser: argparse.ArgumentParser) -> None:
        # SUPPRESS keeps a value given before the subcommand from being reset
        parser.add_argument("--profile", "-p", default=argparse.SUPPRESS, help="Credentials profile name")
        parser.add_argument("--verbose", "-v", action="store_true", default=argparse.SUPPRESS,
                            help="Enable debug logging")
        parser.add_argument("--dry-run", action="store_true", default=argparse.SUPPRESS,
                            help="Print the request instead of sending it")
        parser.add_argument("--output", "-o", choices=["text", "json", "yaml"], default=argparse.SUPPRESS,
                            help="Output format (default: text)")

    @staticmethod
    def _add_command_arguments(parser: argparse.ArgumentParser, cmd_def: CommandDef) -> None:
        for arg in cmd_def.arguments:
            parser.add_argument(*arg.name_or_flags, **arg.kwargs)

    def run(self, argv: Optional[Sequence[str]] = None) -> int:
        """Parse arguments and run the selected command; returns the exit code."""
        parser = self._parser or self.build_parser()
        args = parser.parse_args(argv)
        for name, default in (("profile", None), ("verbose", False), ("dry_run", False), ("output", "text")):
            if not hasattr(args, name):
                setattr(args, name, default)

        logging.basicConfig(
            level=logging.DEBUG if args.verbose else logging.WARNING,
            format="%(levelname)s %(name)s: %(message)s",
        )
        args._output = OutputWriter(OutputConfig(format=OutputFormat(args.output)))

        cmd_func = getattr(args, "_cmd_func", None)
        if cmd_func is None:
            parser.print_help()
            return ExitCode.USAGE

        try:
            return int(cmd_func(args))
        except KeyboardInterrupt:
            print("\nInterrupted.", file=sys.stderr)
            return ExitCode.INTERRUPTED
        except Exception as e:
            return handle_error(e, verbose=args.verbose)

    def main(self, argv: Optional[Sequence[str]] = None) -> None:
        """Run the CLI and exit with the return code."""
        sys.exit(self.run(argv))


class CommandGroup:
    """A group of related commands (e.g. "create" holding "charge" and "transfer")."""

    def __init__(self, app: CLIApp, name: str, *, help: str = "", description: str = ""):
        self.app = app
        self.name = name
        self.help = help
        self.description = description or help
        self._commands: Dict[str, CommandDef] = {}

    def command(self, name: str, *, help: str = "", description: str = "") -> Callable[[CommandFunc], CommandFunc]:
        def decorator(func: CommandFunc) -> CommandFunc:
            arguments = list(reversed(self.app._pending_arguments))
            self.app._pending_arguments.clear()
            cmd_def = CommandDef(
                name=name,
                func=func,
                help=help,
                description=description or help,
                arguments=arguments,
                parent=self.name,
            )
            self._commands[name] = cmd_def
            self.app._commands[f"{self.name}.{name}"] = cmd_def
            return func
        return decorator

    def argument(self, *name_or_flags: str, **kwargs: Any) -> Callable[[CommandFunc], CommandFunc]:
        """Decorator to add an argument. Delegates to app."""
        return self.app.argument(*name_or_flags, **kwargs)

    def _build_subparsers(self, parser: argparse.ArgumentParser) -> None:
        subparsers = parser.add_subparsers(dest=f"{self.name}_cmd", metavar="<subcommand>")
        for cmd_name, cmd_def in self._commands.items():
            cmd_parser = subparsers.add_parser(cmd_name, help=cmd_def.help, description=cmd_def.description)
            if self.app.add_common_args:
                self.app._add_common_arguments(cmd_parser)
            self.app._add_command_arguments(cmd_parser, cmd_def)
            cmd_parser.set_defaults(_cmd_func=cmd_def.func)
