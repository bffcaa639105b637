"""
Awards command: all awards, or one award with its full ranking.
"""

from __future__ import annotations

import argparse

from leaguestats.helpers.dto.awards_dto import Award
from leaguestats.interfaces.cli.ui import InfoPanel, TableDisplay, award_value_text, competitor_label
from leaguestats.interfaces.cli.utils import league_service_from_args


def _winner_text(award: Award) -> str:
    if award.winner is None:
        return "[dim]-[/dim]"
    if award.winner_secondary is not None:
        return f"{award.winner.name} & {award.winner_secondary.name}"
    return award.winner.name


def _show_award(award: Award) -> None:
    InfoPanel.show(
        award.name,
        f"{award.description}\n\n"
        f"[bold]Winner:[/bold] {_winner_text(award)}\n"
        f"[bold]Value:[/bold] {award_value_text(award.value)}",
    )
    rows = [
        (place, competitor_label(ranking.competitor), ranking.formatted_value)
        for place, ranking in enumerate(award.rankings, start=1)
    ]
    TableDisplay.show_rows(f"{award.name} ranking", ("#", "Competitor", award.metric_label), rows, "Nobody qualifies")


def cmd_awards(args: argparse.Namespace) -> int:
    """
    Show every award's winner and headline value.

    With --award ID, show that award's full ranking instead.
    Raises UnknownAwardError for an unknown id (reported by main).
    """
    service = league_service_from_args(args)

    award_id = getattr(args, "award", None)
    if award_id:
        _show_award(service.get_award(award_id))
        return 0

    rows = [
        (award.id, award.name, _winner_text(award), award_value_text(award.value)) for award in service.get_awards()
    ]
    TableDisplay.show_rows("Awards", ("Id", "Award", "Winner", "Value"), rows)
    return 0
