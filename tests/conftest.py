"""
Shared test fixtures.

PHILOSOPHY: Use REAL objects wherever possible.
- Real TradeRecord models built through the real CSV parser
- Real CSV files on disk (tmp_path) for CLI tests
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

import pytest

from tests.csv_fixtures import SAMPLE_CSV, build_csv, build_csv_row

if TYPE_CHECKING:
    from collections.abc import Callable
    from pathlib import Path

    from trade_journal.journal import TradeRecord


@pytest.fixture(autouse=True)
def _clear_journal_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep user environment settings out of tests."""
    for name in ("TRADE_JOURNAL_ENCODING", "TRADE_JOURNAL_MARKET", "TRADE_JOURNAL_EXPORTS_DIR"):
        monkeypatch.delenv(name, raising=False)


@pytest.fixture
def make_trade() -> Callable[..., TradeRecord]:
    """Factory for TradeRecord objects parsed from a single CSV row."""
    from trade_journal.journal import parse_csv

    def _make(**overrides: Any) -> TradeRecord:
        (record,) = parse_csv(build_csv(build_csv_row(**overrides)))
        return record

    return _make


@pytest.fixture
def write_csv(tmp_path: Path) -> Callable[..., Path]:
    """Write CSV text to a temp file and return its path."""

    def _write(text: str = SAMPLE_CSV, name: str = "trades.csv") -> Path:
        path = tmp_path / name
        path.write_text(text, encoding="utf-8")
        return path

    return _write
