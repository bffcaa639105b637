"""
Profiles command: taste profiles and archetypes.
"""

from __future__ import annotations

import argparse

from leaguestats.interfaces.cli.ui import TableDisplay
from leaguestats.interfaces.cli.utils import league_service_from_args


def cmd_profiles(args: argparse.Namespace) -> int:
    """Show each competitor's archetype, top genres and top artists."""
    service = league_service_from_args(args)
    rows = [
        (
            profile.submission_count,
            profile.competitor_name,
            f"{profile.personality_emoji} {profile.personality_name}",
            ", ".join(f"{share.genre} {share.percentage}%" for share in profile.genre_breakdown[:3]),
            ", ".join(profile.top_artists[:3]),
        )
        for profile in service.get_taste_profiles()
    ]
    TableDisplay.show_rows(
        "Taste Profiles", ("Subs", "Competitor", "Archetype", "Top Genres", "Top Artists"), rows, "No competitors"
    )
    return 0
