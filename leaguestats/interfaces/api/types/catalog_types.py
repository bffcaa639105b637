"""
Catalog API types - Pydantic models for music catalog and activity outputs.
"""

from __future__ import annotations

from datetime import date, datetime

from pydantic import BaseModel, Field

from leaguestats.helpers.dto.catalog_dto import (
    AlbumStats,
    ArtistStats,
    DayActivity,
    GenreStats,
    MusicStats,
    SubmissionActivity,
    TrackWithStats,
    VoteActivity,
)
from leaguestats.interfaces.api.types.league_types import SubmissionResponse

# ──────────────────────────────────────────────────────────────────────
# Catalog
# ──────────────────────────────────────────────────────────────────────


class ArtistStatsResponse(BaseModel):
    """Pydantic model for ArtistStats DTO."""

    name: str = Field(..., description="Artist name")
    submission_count: int = Field(..., description="Submissions crediting this artist")
    total_points: int = Field(..., description="Points received by those submissions")
    submitters: list[str] = Field(default_factory=list, description="Submitter names, first-seen order")
    genres: list[str] = Field(default_factory=list, description="Classified genres")

    @classmethod
    def from_dto(cls, dto: ArtistStats) -> ArtistStatsResponse:
        return cls(
            name=dto.name,
            submission_count=dto.submission_count,
            total_points=dto.total_points,
            submitters=list(dto.submitters),
            genres=list(dto.genres),
        )


class AlbumStatsResponse(BaseModel):
    """Pydantic model for AlbumStats DTO."""

    name: str = Field(..., description="Album name")
    artist: str = Field(..., description="Artist credit")
    submission_count: int = Field(..., description="Submissions from this album")
    total_points: int = Field(..., description="Points received by those submissions")

    @classmethod
    def from_dto(cls, dto: AlbumStats) -> AlbumStatsResponse:
        return cls(
            name=dto.name,
            artist=dto.artist,
            submission_count=dto.submission_count,
            total_points=dto.total_points,
        )


class GenreStatsResponse(BaseModel):
    """Pydantic model for GenreStats DTO."""

    genre: str = Field(..., description="Genre label")
    submission_count: int = Field(..., description="Artist submissions in this genre")
    total_points: int = Field(..., description="Points for those submissions")
    top_artists: list[str] = Field(default_factory=list, description="Most submitted artists in this genre")

    @classmethod
    def from_dto(cls, dto: GenreStats) -> GenreStatsResponse:
        return cls(
            genre=dto.genre,
            submission_count=dto.submission_count,
            total_points=dto.total_points,
            top_artists=list(dto.top_artists),
        )


class TrackWithStatsResponse(BaseModel):
    """Pydantic model for TrackWithStats DTO."""

    submission: SubmissionResponse = Field(..., description="Submitted track")
    points: int = Field(..., description="Points received")
    voter_count: int = Field(..., description="Votes received")
    submitter_name: str = Field(..., description="Submitter display name")
    spotify_embed_url: str = Field(..., description="Embeddable player URL")

    @classmethod
    def from_dto(cls, dto: TrackWithStats) -> TrackWithStatsResponse:
        return cls(
            submission=SubmissionResponse.from_dto(dto.submission),
            points=dto.points,
            voter_count=dto.voter_count,
            submitter_name=dto.submitter_name,
            spotify_embed_url=dto.spotify_embed_url,
        )


class MusicStatsResponse(BaseModel):
    """Pydantic model for MusicStats DTO."""

    total_tracks: int = Field(..., description="Submissions in the league")
    unique_artists: int = Field(..., description="Distinct credited artists")
    unique_albums: int = Field(..., description="Distinct albums")
    unique_genres: int = Field(..., description="Distinct genres")
    most_submitted_artist: str = Field(..., description="Artist with most submissions, or 'N/A'")
    most_submitted_album: str = Field(..., description="Album with most submissions, or 'N/A'")
    top_genre: str = Field(..., description="Genre with most submissions, or 'N/A'")

    @classmethod
    def from_dto(cls, dto: MusicStats) -> MusicStatsResponse:
        return cls(
            total_tracks=dto.total_tracks,
            unique_artists=dto.unique_artists,
            unique_albums=dto.unique_albums,
            unique_genres=dto.unique_genres,
            most_submitted_artist=dto.most_submitted_artist,
            most_submitted_album=dto.most_submitted_album,
            top_genre=dto.top_genre,
        )


# ──────────────────────────────────────────────────────────────────────
# Activity
# ──────────────────────────────────────────────────────────────────────


class SubmissionActivityResponse(BaseModel):
    """Pydantic model for SubmissionActivity DTO."""

    time: datetime = Field(..., description="Submission time")
    title: str = Field(..., description="Track title")
    artists: str = Field(..., description="Artist credit")
    submitter: str = Field(..., description="Submitter display name")
    round: str = Field(..., description="Round name")

    @classmethod
    def from_dto(cls, dto: SubmissionActivity) -> SubmissionActivityResponse:
        return cls(time=dto.time, title=dto.title, artists=dto.artists, submitter=dto.submitter, round=dto.round)


class VoteActivityResponse(BaseModel):
    """Pydantic model for VoteActivity DTO."""

    time: datetime = Field(..., description="Vote time")
    voter: str = Field(..., description="Voter display name")
    points: int = Field(..., description="Points given")
    round: str = Field(..., description="Round name")

    @classmethod
    def from_dto(cls, dto: VoteActivity) -> VoteActivityResponse:
        return cls(time=dto.time, voter=dto.voter, points=dto.points, round=dto.round)


class DayActivityResponse(BaseModel):
    """Pydantic model for DayActivity DTO."""

    day: date = Field(..., description="Calendar day")
    submissions: list[SubmissionActivityResponse] = Field(default_factory=list, description="Submissions that day")
    votes: list[VoteActivityResponse] = Field(default_factory=list, description="Votes that day")

    @classmethod
    def from_dto(cls, dto: DayActivity) -> DayActivityResponse:
        return cls(
            day=dto.day,
            submissions=[SubmissionActivityResponse.from_dto(s) for s in dto.submissions],
            votes=[VoteActivityResponse.from_dto(v) for v in dto.votes],
        )
