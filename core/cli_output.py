"""CLI output formatting: plain text, JSON or YAML."""
from __future__ import annotations

import datetime as _dt
import json
import sys
from dataclasses import dataclass, fields, is_dataclass
from enum import Enum
from typing import Any, Dict, Optional, TextIO

import yaml


class OutputFormat(str, Enum):
    """Output format options."""
    TEXT = "text"
    JSON = "json"
    YAML = "yaml"


@dataclass
class OutputConfig:
    """Configuration for output formatting."""
    format: OutputFormat = OutputFormat.TEXT
    file: Optional[TextIO] = None

    @property
    def stream(self) -> TextIO:
        """Get the output stream."""
        return self.file or sys.stdout


def to_plain(data: Any) -> Any:
    """Reduce dataclasses, enums and dates to JSON/YAML-safe values.

    Dataclass fields ending in ``_`` (``from_``) drop the underscore.
    """
    if is_dataclass(data) and not isinstance(data, type):
        return {f.name.rstrip("_"): to_plain(getattr(data, f.name)) for f in fields(data)}
    if isinstance(data, dict):
        return {k: to_plain(v) for k, v in data.items()}
    if isinstance(data, (list, tuple)):
        return [to_plain(v) for v in data]
    if isinstance(data, Enum):
        return data.value
    if isinstance(data, (_dt.date, _dt.datetime)):
        return data.isoformat()
    return data


class OutputWriter:
    """Handles formatted output for CLI commands."""

    def __init__(self, config: Optional[OutputConfig] = None):
        self.config = config or OutputConfig()

    def print(self, *args, **kwargs) -> None:
        """Print to the configured output stream."""
        kwargs.setdefault("file", self.config.stream)
        print(*args, **kwargs)

    def print_dry_run(self, message: str) -> None:
        self.print(f"[dry-run] {message}")

    def print_data(self, data: Any) -> None:
        """Print data in the configured format."""
        fmt = self.config.format
        if fmt == OutputFormat.JSON:
            self.print(json.dumps(to_plain(data), indent=2, default=str))
        elif fmt == OutputFormat.YAML:
            self.print(yaml.safe_dump(to_plain(data), default_flow_style=False, sort_keys=False).rstrip("\n"))
        else:
            self._print_text(data)

    def print_dict(self, data: Dict[str, Any], *, separator: str = ": ", indent: int = 0) -> None:
        prefix = " " * indent
        for key, value in data.items():
            if isinstance(value, dict):
                self.print(f"{prefix}{key}:")
                self.print_dict(value, separator=separator, indent=indent + 2)
            else:
                self.print(f"{prefix}{key}{separator}{value}")

    def _print_text(self, data: Any) -> None:
        if isinstance(data, str):
            self.print(data)
            return
        plain = to_plain(data)
        if isinstance(plain, dict):
            self.print_dict({k: v for k, v in plain.items() if v not in (None, "", [], {})})
        elif isinstance(plain, list):
            for item in plain:
                self.print(item)
        else:
            self.print(str(plain))
