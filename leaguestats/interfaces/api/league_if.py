"""League statistics endpoints (read-only)."""

from __future__ import annotations

import logging
from collections.abc import Callable
from typing import TypeVar

from fastapi import APIRouter, Depends, HTTPException, Query

from leaguestats.helpers.exceptions import LeagueDataError, UnknownAwardError
from leaguestats.helpers.logging_helper import sanitize_exception_message
from leaguestats.interfaces.api.dependencies import get_league_service
from leaguestats.interfaces.api.types.awards_types import AwardResponse, AwardsResponse
from leaguestats.interfaces.api.types.catalog_types import (
    AlbumStatsResponse,
    ArtistStatsResponse,
    DayActivityResponse,
    GenreStatsResponse,
    TrackWithStatsResponse,
)
from leaguestats.interfaces.api.types.league_types import (
    LeaderboardEntryResponse,
    LeagueStatsResponse,
    RoundResultResponse,
)
from leaguestats.interfaces.api.types.report_types import LeagueReportResponse, ReloadResponse
from leaguestats.interfaces.api.types.taste_types import TasteProfileResponse
from leaguestats.services.league_svc import LeagueService

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/league", tags=["League"])

T = TypeVar("T")

LEAGUE_DATA_UNAVAILABLE = "League data unavailable"


def _serve(fetch: Callable[[], T]) -> T:
    """Run a service call, mapping unreadable league data to 503."""
    try:
        return fetch()
    except LeagueDataError as e:
        raise HTTPException(status_code=503, detail=sanitize_exception_message(e, LEAGUE_DATA_UNAVAILABLE)) from e


# ──────────────────────────────────────────────────────────────────────
# Standings
# ──────────────────────────────────────────────────────────────────────


@router.get("/stats")
def league_stats(league_service: LeagueService = Depends(get_league_service)) -> LeagueStatsResponse:
    """Get table totals for the league."""
    return LeagueStatsResponse.from_dto(_serve(league_service.get_stats))


@router.get("/rounds")
def league_rounds(league_service: LeagueService = Depends(get_league_service)) -> list[RoundResultResponse]:
    """Get standings for every round, in round table order."""
    return [RoundResultResponse.from_dto(r) for r in _serve(league_service.get_round_results)]


@router.get("/leaderboard")
def league_leaderboard(league_service: LeagueService = Depends(get_league_service)) -> list[LeaderboardEntryResponse]:
    """Get overall standings, total points descending."""
    return [LeaderboardEntryResponse.from_dto(e) for e in _serve(league_service.get_leaderboard)]


# ──────────────────────────────────────────────────────────────────────
# Awards and profiles
# ──────────────────────────────────────────────────────────────────────


@router.get("/awards")
def league_awards(league_service: LeagueService = Depends(get_league_service)) -> AwardsResponse:
    """Get all awards in declaration order."""
    return AwardsResponse.from_dto(_serve(league_service.get_awards))


@router.get("/awards/{award_id}")
def league_award(award_id: str, league_service: LeagueService = Depends(get_league_service)) -> AwardResponse:
    """Get a single award by id."""
    try:
        award = _serve(lambda: league_service.get_award(award_id))
    except UnknownAwardError as e:
        raise HTTPException(status_code=404, detail=f"Unknown award: {award_id}") from e
    return AwardResponse.from_dto(award)


@router.get("/profiles")
def league_profiles(league_service: LeagueService = Depends(get_league_service)) -> list[TasteProfileResponse]:
    """Get taste profiles, most submissions first."""
    return [TasteProfileResponse.from_dto(p) for p in _serve(league_service.get_taste_profiles)]


# ──────────────────────────────────────────────────────────────────────
# Music catalog
# ──────────────────────────────────────────────────────────────────────


@router.get("/music/tracks")
def league_top_tracks(
    limit: int | None = Query(None, ge=0, description="Number of tracks (configured default when omitted)"),
    league_service: LeagueService = Depends(get_league_service),
) -> list[TrackWithStatsResponse]:
    """Get the highest-scoring tracks."""
    return [TrackWithStatsResponse.from_dto(t) for t in _serve(lambda: league_service.get_top_tracks(limit))]


@router.get("/music/artists")
def league_artists(league_service: LeagueService = Depends(get_league_service)) -> list[ArtistStatsResponse]:
    """Get artist statistics, most submitted first."""
    return [ArtistStatsResponse.from_dto(a) for a in _serve(league_service.get_artists)]


@router.get("/music/albums")
def league_albums(league_service: LeagueService = Depends(get_league_service)) -> list[AlbumStatsResponse]:
    """Get album statistics, most submitted first."""
    return [AlbumStatsResponse.from_dto(a) for a in _serve(league_service.get_albums)]


@router.get("/music/genres")
def league_genres(league_service: LeagueService = Depends(get_league_service)) -> list[GenreStatsResponse]:
    """Get genre statistics, most submitted first."""
    return [GenreStatsResponse.from_dto(g) for g in _serve(league_service.get_genres)]


@router.get("/activity")
def league_activity(league_service: LeagueService = Depends(get_league_service)) -> list[DayActivityResponse]:
    """Get the activity calendar, one entry per day."""
    return [DayActivityResponse.from_dto(d) for d in _serve(league_service.get_activity)]


# ──────────────────────────────────────────────────────────────────────
# Whole report
# ──────────────────────────────────────────────────────────────────────


@router.get("/report")
def league_report(league_service: LeagueService = Depends(get_league_service)) -> LeagueReportResponse:
    """Get every derived table in one response."""
    return LeagueReportResponse.from_dto(_serve(league_service.get_report))


@router.post("/reload")
def league_reload(league_service: LeagueService = Depends(get_league_service)) -> ReloadResponse:
    """Re-read configuration and league data."""
    report = _serve(league_service.reload)
    logger.info("League data reloaded via API")
    return ReloadResponse.from_dto(report)
