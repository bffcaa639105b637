"""
FastAPI dependency injection helpers for league endpoints.

ARCHITECTURE:
- Endpoints should ONLY inject services, never workflows or components
- Tests replace these with api_app.dependency_overrides
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from fastapi import HTTPException

if TYPE_CHECKING:
    from leaguestats.services.config_svc import ConfigService
    from leaguestats.services.league_svc import LeagueService


def get_league_service() -> LeagueService:
    """Get LeagueService instance."""
    from leaguestats.app import application

    service = application.services.get("league")
    if service is None:
        raise HTTPException(status_code=503, detail="League service not available")
    return service  # type: ignore[no-any-return]


def get_config_service() -> ConfigService:
    """Get ConfigService instance."""
    from leaguestats.app import application

    return application.get_service("config")  # type: ignore[no-any-return]
