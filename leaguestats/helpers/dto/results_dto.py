"""
Results domain DTOs.

Round standings, leaderboard rows and league totals.

Rules:
- Import only stdlib, typing and sibling DTO modules
- Pure data structures only (no I/O, no business logic)
"""

from __future__ import annotations

from dataclasses import dataclass

from leaguestats.helpers.dto.league_dto import Competitor, Round, Submission


@dataclass(frozen=True)
class Standing:
    """A competitor's points within one round."""

    competitor: Competitor
    points: int
    submission: Submission | None = None


@dataclass(frozen=True)
class RoundResult:
    """Standings for one round, sorted by points descending."""

    round: Round
    standings: tuple[Standing, ...]

    def position_of(self, competitor_id: str) -> int:
        """0-based standing index of a competitor, -1 when absent."""
        for index, standing in enumerate(self.standings):
            if standing.competitor.id == competitor_id:
                return index
        return -1


@dataclass(frozen=True)
class LeaderboardEntry:
    """Aggregated totals for one competitor across all rounds."""

    competitor: Competitor
    total_points: int
    rounds_played: int
    average_points: float
    wins: int
    top_three_finishes: int


@dataclass(frozen=True)
class LeagueStats:
    """Raw table totals for the snapshot."""

    total_competitors: int
    total_rounds: int
    total_submissions: int
    total_votes: int
    total_points: int
