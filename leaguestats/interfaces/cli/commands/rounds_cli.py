"""
Rounds command: standings for every round.
"""

from __future__ import annotations

import argparse

from leaguestats.interfaces.cli.ui import TableDisplay, console
from leaguestats.interfaces.cli.utils import league_service_from_args, truncate


def cmd_rounds(args: argparse.Namespace) -> int:
    """Show one standings table per round, in round table order."""
    service = league_service_from_args(args)
    results = service.get_round_results()
    if not results:
        console.print("[dim]No rounds[/dim]")
        return 0

    for result in results:
        rows = [
            (
                place,
                standing.competitor.name,
                standing.points,
                truncate(f"{standing.submission.title} - {standing.submission.artists}") if standing.submission else "",
            )
            for place, standing in enumerate(result.standings, start=1)
        ]
        TableDisplay.show_rows(result.round.name, ("#", "Competitor", "Points", "Track"), rows, "No votes")
    return 0
