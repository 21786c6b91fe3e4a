"""Timestamp parsing for trade export date columns.

Calendar bucketing uses the local time zone of the running process. Timestamps that
carry an offset (or a trailing ``Z``) are converted to local time; naive timestamps
are taken as already local.
"""

from __future__ import annotations

from datetime import datetime

_FALLBACK_FORMATS = (
    "%Y/%m/%d %H:%M:%S",
    "%Y/%m/%d %H:%M",
    "%Y/%m/%d",
    "%d/%m/%Y %H:%M:%S",
    "%d/%m/%Y %H:%M",
    "%d/%m/%Y",
)


def parse_timestamp(text: str) -> datetime | None:
    """Parse an export timestamp into a naive local datetime.

    Returns:
        The parsed datetime, or None when the text is not a recognizable timestamp.
    """
    raw = text.strip()
    if not raw:
        return None

    iso = raw[:-1] + "+00:00" if raw.endswith(("Z", "z")) else raw
    try:
        parsed = datetime.fromisoformat(iso)
    except ValueError:
        parsed = None

    if parsed is None:
        for fmt in _FALLBACK_FORMATS:
            try:
                parsed = datetime.strptime(raw, fmt)
                break
            except ValueError:
                continue

    if parsed is None:
        return None

    if parsed.tzinfo is None:
        return parsed

    try:
        local = parsed.astimezone()
    except (OverflowError, ValueError, OSError):
        # offset pushes the value outside the representable date range
        return None
    return local.replace(tzinfo=None)
