"""
Leaderboard command: overall standings.
"""

from __future__ import annotations

import argparse

from leaguestats.interfaces.cli.ui import TableDisplay
from leaguestats.interfaces.cli.utils import league_service_from_args


def cmd_leaderboard(args: argparse.Namespace) -> int:
    """Show the leaderboard, total points descending."""
    service = league_service_from_args(args)
    rows = [
        (
            place,
            entry.competitor.name,
            entry.total_points,
            entry.rounds_played,
            f"{entry.average_points:.1f}",
            entry.wins,
            entry.top_three_finishes,
        )
        for place, entry in enumerate(service.get_leaderboard(), start=1)
    ]
    TableDisplay.show_rows(
        "Leaderboard",
        ("#", "Competitor", "Points", "Rounds", "Avg", "Wins", "Top 3"),
        rows,
        "No competitors",
    )
    return 0
