"""
Helpers package.
"""

from .exceptions import LeagueDataError, UnknownAwardError
from .logging_helper import (
    LeagueLogFilter,
    clear_log_context,
    configure_logging,
    sanitize_exception_message,
    set_log_context,
)
from .parse_helper import (
    format_number,
    parse_points,
    parse_timestamp,
    resolve_timezone,
    split_artists,
    timestamp_sort_key,
    to_fixed,
)

__all__ = [
    "LeagueDataError",
    "LeagueLogFilter",
    "UnknownAwardError",
    "clear_log_context",
    "configure_logging",
    "format_number",
    "parse_points",
    "parse_timestamp",
    "resolve_timezone",
    "sanitize_exception_message",
    "set_log_context",
    "split_artists",
    "timestamp_sort_key",
    "to_fixed",
]
