"""
Services package.
"""

from .cli_bootstrap_svc import get_config_service, get_league_service
from .config_svc import (
    INTERNAL_CONFIG_PATH_ENV,
    INTERNAL_ENV_PREFIX,
    INTERNAL_HOST,
    INTERNAL_PORT,
    INTERNAL_SYSTEM_CONFIG_PATH,
    USER_CONFIG_KEYS,
    ConfigService,
)
from .league_svc import LeagueService

__all__ = [
    "INTERNAL_CONFIG_PATH_ENV",
    "INTERNAL_ENV_PREFIX",
    "INTERNAL_HOST",
    "INTERNAL_PORT",
    "INTERNAL_SYSTEM_CONFIG_PATH",
    "USER_CONFIG_KEYS",
    "ConfigService",
    "LeagueService",
    "get_config_service",
    "get_league_service",
]
