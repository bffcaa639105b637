"""
Application composition root and dependency injection container.

This module defines the Application class, which owns the services the API
serves from. CLI commands do not use it; they bootstrap their own services
through leaguestats.services.cli_bootstrap_svc.

Architecture:
- Application owns: config service, league service
- Configuration values are instance attributes (no module-level config globals)
- Access services via: application.get_service("name") or application.services["name"]
- Do NOT construct services directly outside of this class (tests excepted)

The singleton instance is available as `application` at module level.
"""

from __future__ import annotations

import logging
from typing import Any

from leaguestats.helpers.logging_helper import configure_logging
from leaguestats.services.config_svc import INTERNAL_HOST, INTERNAL_PORT, ConfigService
from leaguestats.services.league_svc import LeagueService


# ----------------------------------------------------------------------
#  Application Class - Composition Root & DI Container
# ----------------------------------------------------------------------
class Application:
    """
    Application composition root and dependency injection container.

    Configuration Access:
    - Raw config is PRIVATE (_config) and used only internally in Application
    - To access config outside app.py, use: application.get_service("config").get_config()
    """

    def __init__(self, config_service: ConfigService | None = None) -> None:
        """
        Initialize application with its services.

        Nothing is read from the league data directory until the first request.
        """
        config_service = config_service or ConfigService()
        self._config = config_service.get_config().config

        # User-configurable settings
        self.log_level: str = str(self._config.get("log_level", "INFO"))

        # Internal constants (not user-configurable)
        self.api_host: str = INTERNAL_HOST
        self.api_port: int = INTERNAL_PORT

        # Services container (DI registry)
        self.services: dict[str, Any] = {}
        self.register_service("config", config_service)
        self.register_service("league", LeagueService(config_service))

        self._running = False

    def register_service(self, name: str, service: Any) -> None:
        """
        Register a service in the DI container.

        Args:
            name: Service name for lookup
            service: Service instance
        """
        self.services[name] = service

    def get_service(self, name: str) -> Any:
        """
        Get a service from the DI container.

        Raises:
            KeyError: If service not found
        """
        if name not in self.services:
            raise KeyError(f"Service '{name}' not found. Available services: {list(self.services.keys())}")
        return self.services[name]

    def start(self) -> None:
        """Configure logging and warm the league report so the first request is fast."""
        if self._running:
            logging.warning("[Application] Already running, ignoring start() call")
            return

        configure_logging(self.log_level)
        logging.info("[Application] Starting...")
        self._running = True

        league_service: LeagueService = self.get_service("league")
        try:
            league_service.get_report()
        except Exception as e:
            # API stays up; league endpoints report the data error per request
            logging.error(f"[Application] League data not loaded at startup: {e}")

        logging.info("[Application] Started")

    def stop(self) -> None:
        if not self._running:
            return
        logging.info("[Application] Stopping...")
        self._running = False

    def is_running(self) -> bool:
        return self._running


application = Application()
