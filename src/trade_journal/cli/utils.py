"""Shared utilities for CLI commands (console output, atomic JSON writes)."""

from __future__ import annotations

import json
import os
import uuid
from typing import TYPE_CHECKING, Any

from rich.console import Console

if TYPE_CHECKING:
    from pathlib import Path

console = Console()


def atomic_write_json(path: Path, data: dict[str, Any]) -> None:
    """Write JSON atomically (temp file + fsync + rename)."""
    path.parent.mkdir(parents=True, exist_ok=True)
    tmp_path = path.with_suffix(f"{path.suffix}.tmp.{uuid.uuid4().hex}")
    with tmp_path.open("w", encoding="utf-8") as f:
        json.dump(data, f, indent=2)
        f.flush()
        os.fsync(f.fileno())
    tmp_path.replace(path)
