"""
Centralized path defaults for Trade Journal.

All paths are expressed relative to the current working directory. Every path default
can be overridden via CLI options or environment variables (see `trade_journal.config`).
"""

from pathlib import Path

DEFAULT_DATA_DIR = Path("data")
DEFAULT_EXPORTS_DIR = DEFAULT_DATA_DIR / "exports"
DEFAULT_EXPORT_FILENAME = "monthly_pnl.json"

__all__ = [
    "DEFAULT_DATA_DIR",
    "DEFAULT_EXPORTS_DIR",
    "DEFAULT_EXPORT_FILENAME",
]
