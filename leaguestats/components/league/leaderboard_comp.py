"""
Global leaderboard.

Totals come from replaying every resolved vote onto its submitter, grouped by round.
Wins and podiums are read off the round standings, so the two views always agree.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence

from leaguestats.helpers.dto.league_dto import Competitor, JoinIndex
from leaguestats.helpers.dto.results_dto import LeaderboardEntry, RoundResult

logger = logging.getLogger(__name__)

PODIUM_SIZE = 3


def points_by_competitor_by_round(index: JoinIndex) -> dict[str, dict[str, int]]:
    """Replay resolved votes into {submitter_id: {round_id: points}}."""
    rounds_by_competitor: dict[str, dict[str, int]] = {}
    for vote in index.resolved_votes:
        submitter_id = index.submitter_of[vote.key]
        rounds_map = rounds_by_competitor.setdefault(submitter_id, {})
        rounds_map[vote.round_id] = rounds_map.get(vote.round_id, 0) + vote.points
    return rounds_by_competitor


def compute_leaderboard(
    competitors: Sequence[Competitor],
    index: JoinIndex,
    round_results: Sequence[RoundResult],
) -> list[LeaderboardEntry]:
    """
    Aggregate per-competitor totals across all rounds.

    Args:
        competitors: Competitor table (its order breaks ties)
        index: Join index for the snapshot
        round_results: Standings from compute_round_results

    Returns:
        Entries sorted by total points descending
    """
    rounds_by_competitor = points_by_competitor_by_round(index)

    entries: list[LeaderboardEntry] = []
    for competitor in competitors:
        rounds_map = rounds_by_competitor.get(competitor.id, {})
        total_points = sum(rounds_map.values())
        rounds_played = len(rounds_map)

        wins = 0
        top_three = 0
        for result in round_results:
            position = result.position_of(competitor.id)
            if position == 0:
                wins += 1
            if 0 <= position < PODIUM_SIZE:
                top_three += 1

        entries.append(
            LeaderboardEntry(
                competitor=competitor,
                total_points=total_points,
                rounds_played=rounds_played,
                average_points=total_points / rounds_played if rounds_played > 0 else 0.0,
                wins=wins,
                top_three_finishes=top_three,
            )
        )

    entries.sort(key=lambda entry: entry.total_points, reverse=True)
    return entries
