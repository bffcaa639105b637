"""
Awards API types - Pydantic models for award results.

Architecture:
- Response models use .from_dto() to convert DTOs to Pydantic
- The tagged headline value keeps its tag: `kind` says which of value/text is set
"""

from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, Field

from leaguestats.helpers.dto.awards_dto import Award, AwardRanking, AwardValue, NumericValue
from leaguestats.interfaces.api.types.league_types import CompetitorResponse


class AwardValueResponse(BaseModel):
    """Pydantic model for the tagged AwardValue."""

    kind: Literal["numeric", "formatted"] = Field(..., description="Which field carries the headline")
    value: float | None = Field(None, description="Numeric headline (kind == 'numeric')")
    text: str | None = Field(None, description="Display headline (kind == 'formatted')")

    @classmethod
    def from_dto(cls, dto: AwardValue) -> AwardValueResponse:
        if isinstance(dto, NumericValue):
            return cls(kind="numeric", value=dto.value)
        return cls(kind="formatted", text=dto.text)


class AwardRankingResponse(BaseModel):
    """Pydantic model for AwardRanking DTO."""

    competitor: CompetitorResponse = Field(..., description="Ranked competitor")
    value: float = Field(..., description="Raw metric value")
    formatted_value: str = Field(..., description="Metric rendered for display")

    @classmethod
    def from_dto(cls, dto: AwardRanking) -> AwardRankingResponse:
        return cls(
            competitor=CompetitorResponse.from_dto(dto.competitor),
            value=dto.value,
            formatted_value=dto.formatted_value,
        )


class AwardResponse(BaseModel):
    """Pydantic model for Award DTO."""

    id: str = Field(..., description="Stable award id (e.g., 'best-buddies')")
    name: str = Field(..., description="Award title")
    description: str = Field(..., description="What the award recognises")
    icon: str = Field(..., description="Icon name")
    winner: CompetitorResponse | None = Field(None, description="Winner, absent when nobody qualifies")
    winner_secondary: CompetitorResponse | None = Field(None, description="Second member of a pairwise award")
    value: AwardValueResponse = Field(..., description="Headline value")
    rankings: list[AwardRankingResponse] = Field(default_factory=list, description="Full ranking")
    metric_label: str = Field(..., description="Column label for ranking values")
    sort_order: Literal["desc", "asc"] = Field(..., description="Ranking direction")

    @classmethod
    def from_dto(cls, dto: Award) -> AwardResponse:
        return cls(
            id=dto.id,
            name=dto.name,
            description=dto.description,
            icon=dto.icon,
            winner=CompetitorResponse.from_dto(dto.winner) if dto.winner else None,
            winner_secondary=CompetitorResponse.from_dto(dto.winner_secondary) if dto.winner_secondary else None,
            value=AwardValueResponse.from_dto(dto.value),
            rankings=[AwardRankingResponse.from_dto(r) for r in dto.rankings],
            metric_label=dto.metric_label,
            sort_order=dto.sort_order,
        )


class AwardsResponse(BaseModel):
    """Response for the awards endpoint."""

    awards: list[AwardResponse] = Field(default_factory=list, description="All awards in declaration order")

    @classmethod
    def from_dto(cls, awards: list[Award]) -> AwardsResponse:
        return cls(awards=[AwardResponse.from_dto(a) for a in awards])
