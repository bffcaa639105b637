"""
League API types - Pydantic models for records, standings and totals.

External API contracts for the league endpoints.
These models are thin adapters around DTOs from helpers/dto/league_dto.py and
helpers/dto/results_dto.py.

Architecture:
- Response models use .from_dto() to convert DTOs to Pydantic
- Services continue using DTOs (no Pydantic imports in services layer)
"""

from __future__ import annotations

from pydantic import BaseModel, Field

from leaguestats.helpers.dto.league_dto import Competitor, Round, Submission
from leaguestats.helpers.dto.results_dto import LeaderboardEntry, LeagueStats, RoundResult, Standing

# ──────────────────────────────────────────────────────────────────────
# Records
# ──────────────────────────────────────────────────────────────────────


class CompetitorResponse(BaseModel):
    """Pydantic model for Competitor DTO."""

    id: str = Field(..., description="Competitor id")
    name: str = Field(..., description="Display name")

    @classmethod
    def from_dto(cls, dto: Competitor) -> CompetitorResponse:
        return cls(id=dto.id, name=dto.name)


class RoundResponse(BaseModel):
    """Pydantic model for Round DTO."""

    id: str = Field(..., description="Round id")
    created: str = Field(..., description="Creation timestamp as exported (ISO-8601)")
    name: str = Field(..., description="Round name")
    description: str = Field("", description="Round description")
    playlist_url: str = Field("", description="Playlist URL")

    @classmethod
    def from_dto(cls, dto: Round) -> RoundResponse:
        return cls(
            id=dto.id,
            created=dto.created,
            name=dto.name,
            description=dto.description,
            playlist_url=dto.playlist_url,
        )


class SubmissionResponse(BaseModel):
    """Pydantic model for Submission DTO."""

    spotify_uri: str = Field(..., description="Track URI (e.g., 'spotify:track:...')")
    title: str = Field(..., description="Track title")
    album: str = Field(..., description="Album name")
    artists: str = Field(..., description="Artist credit as exported")
    submitter_id: str = Field(..., description="Submitting competitor id")
    created: str = Field(..., description="Submission timestamp as exported")
    comment: str = Field("", description="Submitter comment")
    round_id: str = Field(..., description="Round id")
    visible_to_voters: str = Field("", description="Visibility flag as exported")

    @classmethod
    def from_dto(cls, dto: Submission) -> SubmissionResponse:
        return cls(
            spotify_uri=dto.spotify_uri,
            title=dto.title,
            album=dto.album,
            artists=dto.artists,
            submitter_id=dto.submitter_id,
            created=dto.created,
            comment=dto.comment,
            round_id=dto.round_id,
            visible_to_voters=dto.visible_to_voters,
        )


# ──────────────────────────────────────────────────────────────────────
# Standings
# ──────────────────────────────────────────────────────────────────────


class StandingResponse(BaseModel):
    """Pydantic model for Standing DTO."""

    competitor: CompetitorResponse = Field(..., description="Competitor")
    points: int = Field(..., description="Points received in the round")
    submission: SubmissionResponse | None = Field(None, description="Competitor's first submission in the round")

    @classmethod
    def from_dto(cls, dto: Standing) -> StandingResponse:
        return cls(
            competitor=CompetitorResponse.from_dto(dto.competitor),
            points=dto.points,
            submission=SubmissionResponse.from_dto(dto.submission) if dto.submission else None,
        )


class RoundResultResponse(BaseModel):
    """Pydantic model for RoundResult DTO."""

    round: RoundResponse = Field(..., description="Round")
    standings: list[StandingResponse] = Field(default_factory=list, description="Standings, points descending")

    @classmethod
    def from_dto(cls, dto: RoundResult) -> RoundResultResponse:
        return cls(
            round=RoundResponse.from_dto(dto.round),
            standings=[StandingResponse.from_dto(s) for s in dto.standings],
        )


class LeaderboardEntryResponse(BaseModel):
    """Pydantic model for LeaderboardEntry DTO."""

    competitor: CompetitorResponse = Field(..., description="Competitor")
    total_points: int = Field(..., description="Points across all rounds")
    rounds_played: int = Field(..., description="Rounds with at least one vote received")
    average_points: float = Field(..., description="Points per round played")
    wins: int = Field(..., description="Rounds finished first")
    top_three_finishes: int = Field(..., description="Rounds finished in the top three")

    @classmethod
    def from_dto(cls, dto: LeaderboardEntry) -> LeaderboardEntryResponse:
        return cls(
            competitor=CompetitorResponse.from_dto(dto.competitor),
            total_points=dto.total_points,
            rounds_played=dto.rounds_played,
            average_points=dto.average_points,
            wins=dto.wins,
            top_three_finishes=dto.top_three_finishes,
        )


class LeagueStatsResponse(BaseModel):
    """Pydantic model for LeagueStats DTO."""

    total_competitors: int = Field(..., description="Rows in the competitors table")
    total_rounds: int = Field(..., description="Rows in the rounds table")
    total_submissions: int = Field(..., description="Rows in the submissions table")
    total_votes: int = Field(..., description="Rows in the votes table")
    total_points: int = Field(..., description="Sum of all vote points")

    @classmethod
    def from_dto(cls, dto: LeagueStats) -> LeagueStatsResponse:
        return cls(
            total_competitors=dto.total_competitors,
            total_rounds=dto.total_rounds,
            total_submissions=dto.total_submissions,
            total_votes=dto.total_votes,
            total_points=dto.total_points,
        )
