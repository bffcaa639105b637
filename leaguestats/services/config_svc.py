#!/usr/bin/env python3
# ======================================================================
#  Config Service - Configuration loading and caching
#  - Loads config from YAML files and LEAGUESTATS_* env vars
#  - Caches composed config for performance
#  - Provides reload() for runtime changes
# ======================================================================

from __future__ import annotations

import logging
import os
from typing import Any

import yaml

from leaguestats.helpers.dto.config_dto import ConfigResult, LeagueSettings

# ======================================================================
# Internal Constants (Not User-Configurable)
# ======================================================================
# These values control internal behaviour and are not exposed in
# config.yaml or environment variables.

# API settings
INTERNAL_HOST = "0.0.0.0"
INTERNAL_PORT = 8357

# Config file locations
INTERNAL_SYSTEM_CONFIG_PATH = "/etc/leaguestats/config.yaml"
INTERNAL_ENV_PREFIX = "LEAGUESTATS_"
INTERNAL_CONFIG_PATH_ENV = "LEAGUESTATS_CONFIG_PATH"

# Whitelist of user-configurable keys (YAML, overrides and env)
USER_CONFIG_KEYS = frozenset(
    {
        "data_dir",
        "competitors_file",
        "rounds_file",
        "submissions_file",
        "votes_file",
        "timezone",
        "genre_map_path",
        "top_tracks_limit",
        "log_level",
    }
)


class ConfigService:
    """
    Service for loading and caching application configuration.

    Loads config from multiple sources (defaults → YAML → overrides → env),
    caches the result, and provides reload capability.

    This is a service because it:
    - Answers questions about configuration
    - Is long-lived (cached state)
    - Can reload when needed (runtime changes)
    """

    def __init__(self, overrides: dict[str, Any] | None = None, config_path: str | None = None) -> None:
        """
        Initialize ConfigService with empty cache.

        Args:
            config_path: Extra YAML file loaded after $LEAGUESTATS_CONFIG_PATH (e.g. --config)
            overrides: Values applied after YAML files and before environment variables
                (e.g. CLI flags). None values are ignored.
        """
        self._overrides = {k: v for k, v in (overrides or {}).items() if v is not None}
        self._config_path = config_path
        self._config: dict[str, Any] | None = None
        self._logger = logging.getLogger(__name__)

    def get_config(self, force_reload: bool = False) -> ConfigResult:
        """
        Get the composed configuration.

        Args:
            force_reload: If True, bypass cache and reload from sources

        Returns:
            ConfigResult wrapping the complete configuration dict
        """
        if self._config is None or force_reload:
            self._config = self._compose()
        return ConfigResult(config=self._config)

    def get(self, key_path: str, default: Any = None) -> Any:
        """
        Get a config value by dotted path.

        Args:
            key_path: Dotted path like "timezone" or "api.port"
            default: Default value if key not found

        Returns:
            Config value or default

        Example:
            >>> service.get("top_tracks_limit")
            20
            >>> service.get("missing.key", "fallback")
            'fallback'
        """
        node: Any = self.get_config().config
        for part in key_path.split("."):
            if not isinstance(node, dict) or part not in node:
                return default
            node = node[part]
        return node

    def reload(self) -> ConfigResult:
        """
        Force reload configuration from all sources.

        Returns:
            Newly composed config
        """
        self._logger.info("Reloading configuration from all sources")
        return self.get_config(force_reload=True)

    def make_league_settings(self) -> LeagueSettings:
        """
        Build LeagueSettings from the current configuration.

        This is the boundary where raw config values are validated and typed.
        """
        cfg = self.get_config().config

        try:
            top_tracks_limit = int(cfg.get("top_tracks_limit", 20))
        except (TypeError, ValueError):
            self._logger.warning("Invalid top_tracks_limit %r, using 20", cfg.get("top_tracks_limit"))
            top_tracks_limit = 20

        return LeagueSettings(
            data_dir=str(cfg["data_dir"]),
            competitors_file=str(cfg["competitors_file"]),
            rounds_file=str(cfg["rounds_file"]),
            submissions_file=str(cfg["submissions_file"]),
            votes_file=str(cfg["votes_file"]),
            timezone=str(cfg["timezone"]) if cfg.get("timezone") else None,
            genre_map_path=str(cfg["genre_map_path"]) if cfg.get("genre_map_path") else None,
            top_tracks_limit=max(top_tracks_limit, 0),
        )

    # ----------------------------------------------------------------------
    # Private composition logic
    # ----------------------------------------------------------------------

    def _compose(self) -> dict[str, Any]:
        """
        Load final configuration from:
          1) Built-in defaults
          2) /etc/leaguestats/config.yaml  (if present)
          3) ./config/config.yaml          (if present)
          4) $LEAGUESTATS_CONFIG_PATH      (if set)
          5) config_path passed to __init__ (if set)
          6) overrides passed to __init__
          7) Environment variables (LEAGUESTATS_*)

        Returns merged config as dict.
        """
        cfg = self._default_config()

        # 1) System-wide YAML
        self._deep_merge(cfg, self._load_yaml(INTERNAL_SYSTEM_CONFIG_PATH))

        # 2) Repo-local config
        self._deep_merge(cfg, self._load_yaml(os.path.join(os.getcwd(), "config", "config.yaml")))

        # 3) Optional path via env
        env_path = os.getenv(INTERNAL_CONFIG_PATH_ENV)
        if env_path:
            self._deep_merge(cfg, self._load_yaml(env_path))

        # 3b) Explicit config file
        if self._config_path:
            if not os.path.exists(self._config_path):
                self._logger.warning(f"Config file not found: {self._config_path}")
            self._deep_merge(cfg, self._load_yaml(self._config_path))

        # 4) Direct overrides
        if self._overrides:
            self._deep_merge(cfg, dict(self._overrides))

        # 5) Environment variable overrides
        self._apply_env_overrides(cfg)

        self._logger.debug("compose() loaded config; keys: %s", list(cfg.keys()))
        return cfg

    def _default_config(self) -> dict[str, Any]:
        """
        Base defaults for USER-CONFIGURABLE settings only.

        All other operational parameters are internal constants defined at
        module level.
        """
        return {
            # League data location
            "data_dir": "data",
            "competitors_file": "competitors.csv",
            "rounds_file": "rounds.csv",
            "submissions_file": "submissions.csv",
            "votes_file": "votes.csv",
            # Time-of-day rules and the activity calendar (None = system local time)
            "timezone": None,
            # Custom artist -> genre table (None = bundled table)
            "genre_map_path": None,
            # Presentation
            "top_tracks_limit": 20,
            "log_level": "INFO",
        }

    def _deep_merge(self, a: dict[str, Any], b: dict[str, Any]) -> dict[str, Any]:
        """
        Recursively merge dict b into dict a (mutates a, returns it).
        """
        for k, v in b.items():
            if isinstance(v, dict) and isinstance(a.get(k), dict):
                self._deep_merge(a[k], v)
            else:
                a[k] = v
        return a

    def _load_yaml(self, path: str) -> dict[str, Any]:
        """
        Load a YAML file; returns {} if not found or invalid.
        """
        if not path or not os.path.exists(path):
            return {}
        try:
            with open(path, encoding="utf-8") as f:
                loaded = yaml.safe_load(f) or {}
        except (OSError, yaml.YAMLError) as e:
            self._logger.warning(f"Ignoring unreadable config file {path}: {e}")
            return {}
        if not isinstance(loaded, dict):
            self._logger.warning(f"Ignoring config file {path}: top level is not a mapping")
            return {}
        return loaded

    def _apply_env_overrides(self, cfg: dict[str, Any]) -> None:
        """
        Support environment overrides for the user-configurable keys only.

        Supported formats:
          LEAGUESTATS_DATA_DIR=/srv/league
          LEAGUESTATS_TIMEZONE=Europe/Dublin
          LEAGUESTATS_TOP_TRACKS_LIMIT=50
          LEAGUESTATS_GENRE_MAP_PATH=/srv/league/genres.yaml
          LEAGUESTATS_LOG_LEVEL=DEBUG

        Internal constants cannot be overridden via environment.
        """
        for k, v in os.environ.items():
            if not k.startswith(INTERNAL_ENV_PREFIX) or k == INTERNAL_CONFIG_PATH_ENV:
                continue

            key = k[len(INTERNAL_ENV_PREFIX) :].lower()
            if key not in USER_CONFIG_KEYS:
                self._logger.debug(f"Ignoring environment override for unknown key: {key}")
                continue

            val: Any
            if v.isdigit():
                val = int(v)
            else:
                val = v
            cfg[key] = val
