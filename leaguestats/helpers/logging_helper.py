"""
Logging helpers: identity/role tagging, per-thread context and message sanitization.

Logger names follow module names, and module names carry their layer suffix
(`league_svc`, `compute_report_wf`, `round_results_comp`, ...). LeagueLogFilter turns
that suffix into readable tags so a log line says which part of the system spoke:

    2026-01-01 12:00:00 INFO [Round Results] [Component] Computed 12 rounds
"""

from __future__ import annotations

import logging
import threading
from typing import Any

logger = logging.getLogger(__name__)

LOG_FORMAT = "%(asctime)s %(levelname)s %(league_identity_tag)s %(league_role_tag)s%(context_str)s%(message)s"

_ROLE_SUFFIXES: dict[str, str] = {
    "_svc": "[Service]",
    "_wf": "[Workflow]",
    "_comp": "[Component]",
    "_helper": "[Helper]",
    "_dto": "[DTO]",
    "_if": "[Interface]",
    "_cli": "[CLI]",
}

_context = threading.local()


def set_log_context(**values: Any) -> None:
    """Attach key/value context to every record logged from the current thread."""
    current = getattr(_context, "values", {})
    _context.values = {**current, **values}


def clear_log_context() -> None:
    """Remove all context for the current thread."""
    _context.values = {}


def _context_str() -> str:
    values = getattr(_context, "values", {})
    if not values:
        return ""
    return "[" + " ".join(f"{key}={value}" for key, value in values.items()) + "] "


def _identity_and_role(name: str) -> tuple[str, str]:
    module = name.rsplit(".", 1)[-1]
    for suffix, role in _ROLE_SUFFIXES.items():
        if module.endswith(suffix):
            stem = module[: -len(suffix)]
            if not stem:
                break
            return f"[{stem.replace('_', ' ').title()}]", role
    return name, ""


class LeagueLogFilter(logging.Filter):
    """
    Adds `league_identity_tag`, `league_role_tag` and `context_str` to records.

    Never suppresses a record and never raises: a malformed record gets its raw
    logger name as identity and empty tags.
    """

    def filter(self, record: logging.LogRecord) -> bool:
        try:
            identity, role = _identity_and_role(str(record.name or ""))
            record.league_identity_tag = identity
            record.league_role_tag = role
            record.context_str = _context_str()
        except Exception:
            record.league_identity_tag = getattr(record, "name", "")
            record.league_role_tag = ""
            record.context_str = ""
        return True


def configure_logging(level: str | int = "INFO") -> None:
    """
    Install the league log format on the root logger.

    Safe to call more than once: the handler is replaced, not duplicated.
    """
    root = logging.getLogger()
    for handler in list(root.handlers):
        if getattr(handler, "_league_handler", False):
            root.removeHandler(handler)

    handler = logging.StreamHandler()
    handler.setFormatter(logging.Formatter(LOG_FORMAT))
    handler.addFilter(LeagueLogFilter())
    handler._league_handler = True  # type: ignore[attr-defined]
    root.addHandler(handler)
    root.setLevel(level.upper() if isinstance(level, str) else level)


def sanitize_exception_message(e: Exception, safe_message: str = "An error occurred") -> str:
    """
    Sanitize exception message for user display.

    The full exception is logged; only `safe_message` leaves the process.

    Args:
        e: The exception to sanitize
        safe_message: Generic message to return to users

    Returns:
        Safe error message for user display
    """
    logger.exception(f"[security] Exception sanitized: {e}")
    return safe_message
