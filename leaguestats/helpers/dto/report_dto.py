"""
Report DTO.

Bundles every output of one engine run so interfaces can render or export it.

Rules:
- Import only stdlib, typing and sibling DTO modules
- Pure data structures only (no I/O, no business logic)
"""

from __future__ import annotations

from dataclasses import dataclass

from leaguestats.helpers.dto.awards_dto import Award
from leaguestats.helpers.dto.catalog_dto import (
    AlbumStats,
    ArtistStats,
    DayActivity,
    GenreStats,
    MusicStats,
    TrackWithStats,
)
from leaguestats.helpers.dto.results_dto import LeaderboardEntry, LeagueStats, RoundResult
from leaguestats.helpers.dto.taste_dto import TasteProfile


@dataclass(frozen=True)
class LeagueReport:
    """Complete set of derived tables for one snapshot."""

    stats: LeagueStats
    round_results: tuple[RoundResult, ...]
    leaderboard: tuple[LeaderboardEntry, ...]
    awards: tuple[Award, ...]
    taste_profiles: tuple[TasteProfile, ...]
    music_stats: MusicStats
    artists: tuple[ArtistStats, ...]
    albums: tuple[AlbumStats, ...]
    genres: tuple[GenreStats, ...]
    tracks: tuple[TrackWithStats, ...]
    activity: tuple[DayActivity, ...]
