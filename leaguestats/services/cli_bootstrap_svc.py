"""CLI Bootstrap Service - Service Container for CLI Commands.

Provides DI for CLI commands without starting the API application.

Architecture:
- This is a SERVICE layer module (interfaces → services)
- CLI commands should NOT use app.application (that's the running server)
- CLI commands SHOULD use these bootstrap functions to get service instances
- Global CLI flags arrive as config overrides, so YAML and env still apply
"""

from __future__ import annotations

import logging
from typing import Any

from leaguestats.services.config_svc import ConfigService
from leaguestats.services.league_svc import LeagueService

logger = logging.getLogger(__name__)


def get_config_service(overrides: dict[str, Any] | None = None, config_path: str | None = None) -> ConfigService:
    """Get ConfigService instance for CLI operations.

    Args:
        overrides: Values from CLI flags (None values are ignored)
        config_path: YAML file given with --config

    Returns:
        ConfigService instance
    """
    return ConfigService(overrides=overrides, config_path=config_path)


def get_league_service(overrides: dict[str, Any] | None = None, config_path: str | None = None) -> LeagueService:
    """Get LeagueService instance for CLI operations.

    Example:
        >>> service = get_league_service({"data_dir": "exports/season-3"})
        >>> service.get_leaderboard()[0].competitor.name
        'Alice'
    """
    config_service = get_config_service(overrides, config_path)
    logger.debug("Bootstrapped league service for CLI")
    return LeagueService(config_service)
