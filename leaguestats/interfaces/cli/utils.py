"""
Shared helpers for CLI commands.
"""

from __future__ import annotations

import argparse
import logging

from leaguestats.services.cli_bootstrap_svc import get_league_service
from leaguestats.services.league_svc import LeagueService


def league_service_from_args(args: argparse.Namespace) -> LeagueService:
    """Bootstrap a LeagueService with the global CLI flags applied as config overrides."""
    overrides = {
        "data_dir": getattr(args, "data_dir", None),
        "timezone": getattr(args, "timezone", None),
    }
    return get_league_service(overrides, getattr(args, "config", None))


def log_level_for(verbosity: int) -> int:
    """-v shows info logs, -vv debug logs; warnings only otherwise."""
    if verbosity >= 2:
        return logging.DEBUG
    if verbosity == 1:
        return logging.INFO
    return logging.WARNING


def truncate(text: str, width: int = 40) -> str:
    return text if len(text) <= width else text[: width - 1] + "…"
