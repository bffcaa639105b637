"""Custom exceptions used across multiple layers.

Rules:
- Only put exceptions here if they need to be raised in one layer and caught in another.
- Keep exceptions simple and focused.
- No I/O, no config loading, no complex logic.
"""

from __future__ import annotations


class LeagueDataError(Exception):
    """Raised when an input table cannot be read (missing file, unreadable directory)."""


class UnknownAwardError(LookupError):
    """Raised when an award id is requested that the engine does not define."""
