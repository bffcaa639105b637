"""
Summary command: league totals and music catalog headline numbers.
"""

from __future__ import annotations

import argparse

from leaguestats.interfaces.cli.ui import TableDisplay
from leaguestats.interfaces.cli.utils import league_service_from_args


def cmd_summary(args: argparse.Namespace) -> int:
    """Show table totals and catalog headlines."""
    service = league_service_from_args(args)
    stats = service.get_stats()
    music = service.get_music_stats()

    TableDisplay.show_summary(
        "League Summary",
        {
            "Competitors": stats.total_competitors,
            "Rounds": stats.total_rounds,
            "Submissions": stats.total_submissions,
            "Votes": stats.total_votes,
            "Points awarded": stats.total_points,
        },
    )
    TableDisplay.show_summary(
        "Music",
        {
            "Tracks": music.total_tracks,
            "Unique artists": music.unique_artists,
            "Unique albums": music.unique_albums,
            "Unique genres": music.unique_genres,
            "Most submitted artist": music.most_submitted_artist,
            "Most submitted album": music.most_submitted_album,
            "Top genre": music.top_genre,
        },
    )
    return 0
