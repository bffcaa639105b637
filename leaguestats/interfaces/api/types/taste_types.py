"""
Taste API types - Pydantic models for taste profiles.
"""

from __future__ import annotations

from pydantic import BaseModel, Field

from leaguestats.helpers.dto.taste_dto import GenrePoints, GenreShare, TasteProfile


class GenreShareResponse(BaseModel):
    """Pydantic model for GenreShare DTO."""

    genre: str = Field(..., description="Genre label")
    count: int = Field(..., description="Occurrences among submitted artists")
    percentage: int = Field(..., description="Rounded share of the histogram (0-100)")

    @classmethod
    def from_dto(cls, dto: GenreShare) -> GenreShareResponse:
        return cls(genre=dto.genre, count=dto.count, percentage=dto.percentage)


class GenrePointsResponse(BaseModel):
    """Pydantic model for GenrePoints DTO."""

    genre: str = Field(..., description="Genre label")
    points_given: int = Field(..., description="Positive points given to this genre")

    @classmethod
    def from_dto(cls, dto: GenrePoints) -> GenrePointsResponse:
        return cls(genre=dto.genre, points_given=dto.points_given)


class TasteProfileResponse(BaseModel):
    """Pydantic model for TasteProfile DTO."""

    competitor_id: str = Field(..., description="Competitor id")
    competitor_name: str = Field(..., description="Competitor display name")
    unique_artists: int = Field(..., description="Distinct credited artists submitted")
    top_artists: list[str] = Field(default_factory=list, description="First distinct artists submitted")
    submission_count: int = Field(..., description="Tracks submitted")
    genre_breakdown: list[GenreShareResponse] = Field(default_factory=list, description="Top submitted genres")
    top_genres: list[str] = Field(default_factory=list, description="Top three submitted genres")
    voting_genre_preference: list[GenrePointsResponse] = Field(
        default_factory=list, description="Genres this competitor rewards with points"
    )
    personality_name: str = Field(..., description="Assigned archetype")
    personality_emoji: str = Field(..., description="Archetype emoji")

    @classmethod
    def from_dto(cls, dto: TasteProfile) -> TasteProfileResponse:
        return cls(
            competitor_id=dto.competitor_id,
            competitor_name=dto.competitor_name,
            unique_artists=dto.unique_artists,
            top_artists=list(dto.top_artists),
            submission_count=dto.submission_count,
            genre_breakdown=[GenreShareResponse.from_dto(g) for g in dto.genre_breakdown],
            top_genres=list(dto.top_genres),
            voting_genre_preference=[GenrePointsResponse.from_dto(g) for g in dto.voting_genre_preference],
            personality_name=dto.personality_name,
            personality_emoji=dto.personality_emoji,
        )
