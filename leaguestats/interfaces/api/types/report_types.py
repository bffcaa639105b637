"""
Report API types - the complete league report in one response.

Also the JSON layout written by `league export`.
"""

from __future__ import annotations

from pydantic import BaseModel, Field

from leaguestats.helpers.dto.report_dto import LeagueReport
from leaguestats.interfaces.api.types.awards_types import AwardResponse
from leaguestats.interfaces.api.types.catalog_types import (
    AlbumStatsResponse,
    ArtistStatsResponse,
    DayActivityResponse,
    GenreStatsResponse,
    MusicStatsResponse,
    TrackWithStatsResponse,
)
from leaguestats.interfaces.api.types.league_types import (
    LeaderboardEntryResponse,
    LeagueStatsResponse,
    RoundResultResponse,
)
from leaguestats.interfaces.api.types.taste_types import TasteProfileResponse


class LeagueReportResponse(BaseModel):
    """Pydantic model for LeagueReport DTO."""

    stats: LeagueStatsResponse = Field(..., description="Table totals")
    round_results: list[RoundResultResponse] = Field(default_factory=list, description="Standings per round")
    leaderboard: list[LeaderboardEntryResponse] = Field(default_factory=list, description="Overall standings")
    awards: list[AwardResponse] = Field(default_factory=list, description="All awards in declaration order")
    taste_profiles: list[TasteProfileResponse] = Field(default_factory=list, description="Per-competitor taste")
    music_stats: MusicStatsResponse = Field(..., description="Catalog headline numbers")
    artists: list[ArtistStatsResponse] = Field(default_factory=list, description="Artist statistics")
    albums: list[AlbumStatsResponse] = Field(default_factory=list, description="Album statistics")
    genres: list[GenreStatsResponse] = Field(default_factory=list, description="Genre statistics")
    tracks: list[TrackWithStatsResponse] = Field(default_factory=list, description="All tracks, input order")
    activity: list[DayActivityResponse] = Field(default_factory=list, description="Activity calendar")

    @classmethod
    def from_dto(cls, dto: LeagueReport) -> LeagueReportResponse:
        return cls(
            stats=LeagueStatsResponse.from_dto(dto.stats),
            round_results=[RoundResultResponse.from_dto(r) for r in dto.round_results],
            leaderboard=[LeaderboardEntryResponse.from_dto(e) for e in dto.leaderboard],
            awards=[AwardResponse.from_dto(a) for a in dto.awards],
            taste_profiles=[TasteProfileResponse.from_dto(p) for p in dto.taste_profiles],
            music_stats=MusicStatsResponse.from_dto(dto.music_stats),
            artists=[ArtistStatsResponse.from_dto(a) for a in dto.artists],
            albums=[AlbumStatsResponse.from_dto(a) for a in dto.albums],
            genres=[GenreStatsResponse.from_dto(g) for g in dto.genres],
            tracks=[TrackWithStatsResponse.from_dto(t) for t in dto.tracks],
            activity=[DayActivityResponse.from_dto(d) for d in dto.activity],
        )


class ReloadResponse(BaseModel):
    """Response for the reload endpoint."""

    reloaded: bool = Field(..., description="Whether data was re-read")
    stats: LeagueStatsResponse = Field(..., description="Table totals after reload")

    @classmethod
    def from_dto(cls, dto: LeagueReport) -> ReloadResponse:
        return cls(reloaded=True, stats=LeagueStatsResponse.from_dto(dto.stats))
