"""
Awards domain DTOs.

Award results and their rankings.

Rules:
- Import only stdlib, typing and sibling DTO modules
- Pure data structures only (no I/O, no business logic)
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import tzinfo
from typing import Literal

from leaguestats.helpers.dto.league_dto import Competitor, JoinIndex, Round, Submission
from leaguestats.helpers.dto.results_dto import RoundResult

SortOrder = Literal["desc", "asc"]


@dataclass(frozen=True)
class NumericValue:
    """Headline value carried as a number (rendering left to the presentation layer)."""

    value: float

    @property
    def kind(self) -> Literal["numeric"]:
        return "numeric"


@dataclass(frozen=True)
class FormattedValue:
    """Headline value carried as canonical display text."""

    text: str

    @property
    def kind(self) -> Literal["formatted"]:
        return "formatted"


AwardValue = NumericValue | FormattedValue


@dataclass(frozen=True)
class AwardRanking:
    """One competitor's row in an award ranking."""

    competitor: Competitor
    value: float  # int for counting rules
    formatted_value: str


@dataclass(frozen=True)
class Award:
    """Result of one award rule."""

    id: str
    name: str
    description: str
    icon: str
    winner: Competitor | None
    value: AwardValue
    rankings: tuple[AwardRanking, ...]
    metric_label: str
    sort_order: SortOrder
    # Only set by pairwise awards
    winner_secondary: Competitor | None = None


@dataclass(frozen=True)
class AwardContext:
    """
    Shared, read-only inputs handed to every award rule.

    Attributes:
        competitors: Competitor table (its order breaks ranking ties)
        rounds: Rounds table
        submissions: Submissions table
        index: Join index for the same snapshot
        round_results: Standings per round, Rounds table order
        tz: Zone for time-of-day rules; system local time when None
    """

    competitors: tuple[Competitor, ...]
    rounds: tuple[Round, ...]
    submissions: tuple[Submission, ...]
    index: JoinIndex
    round_results: tuple[RoundResult, ...]
    tz: tzinfo | None = None
