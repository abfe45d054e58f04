"""YAML read/write helpers for request files."""
from __future__ import annotations

from pathlib import Path
from typing import Any, Dict, Optional

import yaml

from .cli_errors import ConfigError

__all__ = ["load_config", "dump_config"]


def load_config(path: Optional[str]) -> Dict[str, Any]:
    """Load a YAML mapping; returns {} for a missing path or an empty file.

    Raises:
        ConfigError: the file is not valid YAML or its root is not a mapping.
    """
    if not path:
        return {}
    p = Path(path)
    if not p.exists():
        return {}
    text = p.read_text(encoding="utf-8")
    if not text.strip():
        return {}
    try:
        data = yaml.safe_load(text)
    except yaml.YAMLError as exc:
        raise ConfigError(f"Invalid YAML in {p}: {exc}") from exc
    if data is None:
        return {}
    if not isinstance(data, dict):
        raise ConfigError(f"Top-level YAML in {p} must be a mapping")
    return data


def dump_config(path: str, data: Dict[str, Any]) -> None:
    """Write a dict to YAML keeping insertion order."""
    target = Path(path)
    target.parent.mkdir(parents=True, exist_ok=True)
    target.write_text(
        yaml.safe_dump(data, sort_keys=False, allow_unicode=True), encoding="utf-8"
    )
