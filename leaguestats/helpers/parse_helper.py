"""
Lenient field parsing shared by every layer.

Each field type has exactly one parse function with a documented default on failure,
so ingestion and the award rules agree on how bad input degrades:

- parse_points: leading integer of the cell, 0 otherwise
- parse_timestamp: ISO-8601 datetime, None otherwise
- timestamp_sort_key: chronological key where unparseable values sort first
- split_artists: comma-separated credits, trimmed
"""

from __future__ import annotations

import logging
import re
from datetime import datetime, tzinfo
from decimal import ROUND_HALF_UP, Decimal
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

logger = logging.getLogger(__name__)

_LEADING_INT_PATTERN = re.compile(r"^\s*([+-]?\d+)")


def parse_points(value: str | None) -> int:
    """
    Parse a points cell.

    Reads the leading integer ("5", " -2", "3.7" -> 3, "8pts" -> 8).
    Anything without a leading integer yields 0.
    """
    if not value:
        return 0
    match = _LEADING_INT_PATTERN.match(value)
    if not match:
        return 0
    return int(match.group(1))


def parse_timestamp(value: str | None, assume_tz: tzinfo | None = None) -> datetime | None:
    """
    Parse an ISO-8601 timestamp into an aware datetime.

    Args:
        value: Raw cell text (e.g. "2024-03-25T20:07:03Z")
        assume_tz: Zone for timestamps without an offset; system local time when None

    Returns:
        Aware datetime, or None when the value is blank or unparseable
    """
    if not value or not value.strip():
        return None
    text = value.strip()
    if text[-1] in ("Z", "z"):
        text = text[:-1] + "+00:00"
    try:
        parsed = datetime.fromisoformat(text)
        if parsed.tzinfo is None:
            return parsed.replace(tzinfo=assume_tz) if assume_tz else parsed.astimezone()
        return parsed
    except (ValueError, OverflowError, OSError):
        return None


def timestamp_sort_key(value: str | None, assume_tz: tzinfo | None = None) -> tuple[int, float]:
    """Sort key for chronological ordering; unparseable timestamps sort first."""
    parsed = parse_timestamp(value, assume_tz)
    if parsed is None:
        return (0, 0.0)
    return (1, parsed.timestamp())


def split_artists(artists: str) -> list[str]:
    """Split a comma-separated artist credit into trimmed names."""
    return [artist.strip() for artist in artists.split(",")]


def resolve_timezone(name: str | None) -> tzinfo | None:
    """
    Resolve an IANA zone name.

    Returns None (system local time) when unset or unknown.
    """
    if not name:
        return None
    try:
        return ZoneInfo(name)
    except (ZoneInfoNotFoundError, ValueError):
        logger.warning("Unknown timezone %r, falling back to system local time", name)
        return None


def to_fixed(value: float, digits: int) -> str:
    """Fixed-point text with halves rounded away from zero (2.125 -> "2.13")."""
    quantum = Decimal(1).scaleb(-digits)
    return f"{Decimal(value).quantize(quantum, rounding=ROUND_HALF_UP):f}"


def format_number(value: float) -> str:
    """Shortest text for a number; integral floats drop the fraction (3.0 -> "3")."""
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)
