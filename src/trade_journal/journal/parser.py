"""CSV parsing for trade history exports.

Parsing is best-effort: malformed rows (fewer than 16 fields), blank lines and
duplicate references are dropped without raising, and an unparseable or
non-finite P&L amount becomes 0. Only the file boundary (`read_csv_file`) raises.
"""

from __future__ import annotations

import math
import re
from typing import TYPE_CHECKING

import structlog

from trade_journal.constants import CSV_MIN_FIELDS, CSV_PL_AMOUNT_COLUMN, CSV_REFERENCE_COLUMN
from trade_journal.exceptions import JournalFileError
from trade_journal.journal.models import TradeRecord

if TYPE_CHECKING:
    from pathlib import Path

logger = structlog.get_logger()

_BOM = "\ufeff"
_NON_AMOUNT_CHARS = re.compile(r"[^0-9.\-]")
# Longest leading float, mirroring the browser's parseFloat().
_LEADING_FLOAT = re.compile(r"\s*([+-]?(?:\d+(?:\.\d*)?|\.\d+)(?:[eE][+-]?\d+)?)")


def parse_leading_float(text: str) -> float | None:
    """Parse the longest numeric prefix of `text`.

    Examples:
        "12.5" -> 12.5, "1.2.3" -> 1.2, "12-5" -> 12.0, "-" -> None, "" -> None
    """
    match = _LEADING_FLOAT.match(text)
    if match is None:
        return None
    return float(match.group(1))


def parse_pl_amount(text: str) -> float:
    """Parse a P&L amount such as "£1,234.50" or "-$12.00"; unparseable text is 0."""
    value = parse_leading_float(_NON_AMOUNT_CHARS.sub("", text))
    if value is None or not math.isfinite(value):
        return 0.0
    # `or 0.0` folds -0.0 into 0.0
    return value or 0.0


def parse_csv(text: str) -> list[TradeRecord]:
    """Parse trade history CSV text into records, keeping the first row per reference.

    The first line is a header and is not used beyond BOM removal. Fields are split
    on bare commas (quoted fields with embedded commas are not supported).
    """
    lines = text.split("\n")
    header = lines[0].removeprefix(_BOM).split(",")

    records: list[TradeRecord] = []
    seen_references: set[str] = set()
    skipped_short = 0
    skipped_duplicate = 0

    for raw_line in lines[1:]:
        line = raw_line.strip()
        if not line:
            continue

        values = line.split(",")
        if len(values) < CSV_MIN_FIELDS:
            skipped_short += 1
            continue

        reference = values[CSV_REFERENCE_COLUMN]
        if reference in seen_references:
            skipped_duplicate += 1
            continue
        seen_references.add(reference)

        records.append(
            TradeRecord(
                text_date=values[0],
                summary=values[1],
                market_name=values[2],
                period=values[3],
                profit_and_loss=values[4],
                transaction_type=values[5],
                reference=reference,
                open_level=values[7],
                close_level=values[8],
                size=values[9],
                currency=values[10],
                pl_amount=parse_pl_amount(values[CSV_PL_AMOUNT_COLUMN]),
                cash_transaction=values[12],
                date_utc=values[13],
                open_date_utc=values[14],
                currency_iso_code=values[15],
            )
        )

    logger.debug(
        "Parsed trade history CSV",
        header_columns=len(header),
        records=len(records),
        skipped_short=skipped_short,
        skipped_duplicate=skipped_duplicate,
    )
    return records


def read_csv_file(path: Path, *, encoding: str = "utf-8") -> str:
    """Read a trade history export from disk.

    Raises:
        JournalFileError: If the file does not exist, can't be read, or can't be decoded.
    """
    try:
        return path.read_text(encoding=encoding)
    except FileNotFoundError:
        raise JournalFileError(f"File not found: {path}", path=path) from None
    except UnicodeDecodeError as e:
        raise JournalFileError(
            f"Could not decode {path} as {encoding}: {e.reason}", path=path
        ) from e
    except LookupError:
        raise JournalFileError(f"Unknown encoding '{encoding}'", path=path) from None
    except OSError as e:
        raise JournalFileError(f"Could not read {path}: {e.strerror or e}", path=path) from e


def load_trades(path: Path, *, encoding: str = "utf-8") -> list[TradeRecord]:
    """Read and parse a trade history export."""
    records = parse_csv(read_csv_file(path, encoding=encoding))
    logger.info("Loaded trade history", path=str(path), records=len(records))
    return records
