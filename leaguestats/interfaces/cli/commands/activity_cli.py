"""
Activity command: submissions and votes per calendar day.
"""

from __future__ import annotations

import argparse

from leaguestats.helpers.dto.catalog_dto import DayActivity
from leaguestats.interfaces.cli.ui import TableDisplay
from leaguestats.interfaces.cli.utils import league_service_from_args


def _round_names(day: DayActivity) -> str:
    names = dict.fromkeys([s.round for s in day.submissions] + [v.round for v in day.votes])
    return ", ".join(names)


def cmd_activity(args: argparse.Namespace) -> int:
    """Show the activity calendar, oldest day first."""
    service = league_service_from_args(args)
    rows = [
        (day.day.isoformat(), len(day.submissions), len(day.votes), _round_names(day))
        for day in service.get_activity()
    ]
    TableDisplay.show_rows("Activity", ("Day", "Submissions", "Votes", "Rounds"), rows, "No dated activity")
    return 0
