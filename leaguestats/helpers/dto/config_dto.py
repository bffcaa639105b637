"""
Config domain DTOs.

Data transfer objects for configuration service results.
These form cross-layer contracts between services and interfaces.

Rules:
- Import only stdlib and typing (no leaguestats.* imports)
- Pure data structures only (no I/O, no business logic)
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any


@dataclass
class ConfigResult:
    """Result from config_svc.get_config and reload - wraps configuration dict."""

    config: dict[str, Any]


@dataclass(frozen=True)
class LeagueSettings:
    """Resolved settings the league service needs to load and compute a report."""

    data_dir: str
    competitors_file: str
    rounds_file: str
    submissions_file: str
    votes_file: str
    timezone: str | None
    genre_map_path: str | None
    top_tracks_limit: int
