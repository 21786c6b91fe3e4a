"""Configuration for the trade journal (environment handling)."""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path

from trade_journal.constants import ALL_MARKETS
from trade_journal.paths import DEFAULT_EXPORTS_DIR


@dataclass(frozen=True)
class JournalConfig:
    """Runtime configuration for loading and exporting trade history."""

    encoding: str = "utf-8"
    default_market: str | None = None
    exports_dir: Path = DEFAULT_EXPORTS_DIR

    @classmethod
    def from_env(cls) -> JournalConfig:
        """Load configuration from environment variables.

        Optional:
            TRADE_JOURNAL_ENCODING: Text encoding of CSV exports (default: utf-8)
            TRADE_JOURNAL_MARKET: Market filter applied when --market is omitted
                (default: all markets)
            TRADE_JOURNAL_EXPORTS_DIR: Directory for `journal export` output
                (default: data/exports)
        """
        market = os.environ.get("TRADE_JOURNAL_MARKET", "").strip()
        if market.lower() == ALL_MARKETS:
            market = ""

        return cls(
            encoding=os.environ.get("TRADE_JOURNAL_ENCODING", "").strip() or "utf-8",
            default_market=market or None,
            exports_dir=Path(os.environ.get("TRADE_JOURNAL_EXPORTS_DIR") or DEFAULT_EXPORTS_DIR),
        )

    def resolve_market(self, market: str | None) -> str | None:
        """Pick the CLI market filter over the configured default."""
        if market is not None:
            return None if market.strip().lower() == ALL_MARKETS else market
        return self.default_market
