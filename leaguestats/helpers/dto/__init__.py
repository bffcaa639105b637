"""
Domain-specific DTOs (Data Transfer Objects) used across multiple layers.

Domain-specific DTOs live in helpers/dto/<domain>_dto.py and form cross-layer contracts
within that domain (interfaces → services → workflows → components).

Rules for DTO modules:
- Import only stdlib, typing and sibling DTO modules
- Contain ONLY dataclass/type definitions and simple type aliases
- No I/O, no business logic
- Pure data structures with optional simple properties
"""

from __future__ import annotations

from leaguestats.helpers.dto.awards_dto import (
    Award,
    AwardContext,
    AwardRanking,
    AwardValue,
    FormattedValue,
    NumericValue,
    SortOrder,
)
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
from leaguestats.helpers.dto.config_dto import ConfigResult, LeagueSettings
from leaguestats.helpers.dto.league_dto import (
    Competitor,
    JoinIndex,
    LeagueSnapshot,
    Round,
    Submission,
    TrackKey,
    Vote,
)
from leaguestats.helpers.dto.report_dto import LeagueReport
from leaguestats.helpers.dto.results_dto import LeaderboardEntry, LeagueStats, RoundResult, Standing
from leaguestats.helpers.dto.taste_dto import (
    Archetype,
    ArchetypeCandidate,
    GenreCount,
    GenrePoints,
    GenreShare,
    TasteProfile,
)

__all__ = [
    "AlbumStats",
    "Archetype",
    "ArchetypeCandidate",
    "ArtistStats",
    "Award",
    "AwardContext",
    "AwardRanking",
    "AwardValue",
    "Competitor",
    "ConfigResult",
    "DayActivity",
    "FormattedValue",
    "GenreCount",
    "GenrePoints",
    "GenreShare",
    "GenreStats",
    "JoinIndex",
    "LeaderboardEntry",
    "LeagueReport",
    "LeagueSettings",
    "LeagueSnapshot",
    "LeagueStats",
    "MusicStats",
    "NumericValue",
    "Round",
    "RoundResult",
    "SortOrder",
    "Standing",
    "Submission",
    "SubmissionActivity",
    "TasteProfile",
    "TrackKey",
    "TrackWithStats",
    "Vote",
    "VoteActivity",
]
