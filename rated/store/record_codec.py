"""Encoding and decoding of per-item rating records.

A record is UTF-8 text with one entry per line::

    2024-03-21T14:05:00Z<TAB>4

Decoding is lenient line by line: a malformed line is skipped and the rest of
the record still loads.
"""

from __future__ import annotations

import logging
import re
from datetime import datetime, timedelta, timezone
from typing import Iterable, List, Optional

from .models import RatingEntry, sorted_entries

logger = logging.getLogger(__name__)

_TIMESTAMP_PATTERN = re.compile(
    r"^\d{4}-\d{2}-\d{2}T\d{2}:\d{2}:\d{2}(?:\.\d{1,6})?(?:Z|[+-]\d{2}:\d{2})$", re.ASCII
)
_INTEGER_PATTERN = re.compile(r"^[+-]?\d+$", re.ASCII)
_EARLIEST_INSTANT = datetime.min.replace(tzinfo=timezone.utc) + timedelta(days=1)
_LATEST_INSTANT = datetime.max.replace(tzinfo=timezone.utc) - timedelta(days=1)


def format_timestamp(moment: datetime) -> str:
    """Render an aware datetime as a second-precision UTC ISO-8601 string."""

    return (
        moment.astimezone(timezone.utc)
        .replace(microsecond=0)
        .isoformat()
        .replace("+00:00", "Z")
    )


def parse_timestamp(text: str) -> Optional[datetime]:
    """Parse a full ISO-8601 date-time with an explicit offset.

    Date-only values and timestamps without a zone designator are rejected.
    """

    if not _TIMESTAMP_PATTERN.match(text):
        return None
    normalized = text[:-1] + "+00:00" if text.endswith("Z") else text
    try:
        parsed = datetime.fromisoformat(normalized)
        instant = parsed.astimezone(timezone.utc)
    except (ValueError, OverflowError):
        return None
    # Must stay representable in every calendar zone (offsets are under a day).
    if not _EARLIEST_INSTANT <= instant <= _LATEST_INSTANT:
        return None
    return parsed


def parse_line(line: str) -> Optional[RatingEntry]:
    parts = line.split("\t", 1)
    if len(parts) != 2 or not parts[0] or not parts[1]:
        return None
    date = parse_timestamp(parts[0])
    if date is None or not _INTEGER_PATTERN.match(parts[1]):
        return None
    return RatingEntry(date=date, value=int(parts[1]))


def decode_record(text: str) -> List[RatingEntry]:
    """Decode record text into entries, in file order.

    Args:
        text (str): Full record contents.

    Returns:
        list[RatingEntry]: Every well-formed entry; malformed lines are dropped.
    """

    entries: List[RatingEntry] = []
    for number, line in enumerate(text.split("\n"), start=1):
        if not line:
            continue
        entry = parse_line(line)
        if entry is None:
            logger.debug("Skipping malformed record line.", extra={"line_number": number})
            continue
        entries.append(entry)
    return entries


def encode_record(entries: Iterable[RatingEntry]) -> str:
    """Encode entries as record text, oldest first, newline-joined."""

    return "\n".join(
        f"{format_timestamp(entry.date)}\t{entry.value}" for entry in sorted_entries(entries)
    )
