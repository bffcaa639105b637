"""
API types - Pydantic response models.

Thin adapters around DTOs from helpers/dto; every model converts with .from_dto().
"""

from .awards_types import AwardRankingResponse, AwardResponse, AwardsResponse, AwardValueResponse
from .catalog_types import (
    AlbumStatsResponse,
    ArtistStatsResponse,
    DayActivityResponse,
    GenreStatsResponse,
    MusicStatsResponse,
    SubmissionActivityResponse,
    TrackWithStatsResponse,
    VoteActivityResponse,
)
from .league_types import (
    CompetitorResponse,
    LeaderboardEntryResponse,
    LeagueStatsResponse,
    RoundResponse,
    RoundResultResponse,
    StandingResponse,
    SubmissionResponse,
)
from .report_types import LeagueReportResponse, ReloadResponse
from .taste_types import GenrePointsResponse, GenreShareResponse, TasteProfileResponse

__all__ = [
    "AlbumStatsResponse",
    "ArtistStatsResponse",
    "AwardRankingResponse",
    "AwardResponse",
    "AwardValueResponse",
    "AwardsResponse",
    "CompetitorResponse",
    "DayActivityResponse",
    "GenrePointsResponse",
    "GenreShareResponse",
    "GenreStatsResponse",
    "LeaderboardEntryResponse",
    "LeagueReportResponse",
    "LeagueStatsResponse",
    "MusicStatsResponse",
    "ReloadResponse",
    "RoundResponse",
    "RoundResultResponse",
    "StandingResponse",
    "SubmissionActivityResponse",
    "SubmissionResponse",
    "TasteProfileResponse",
    "TrackWithStatsResponse",
    "VoteActivityResponse",
]
