"""
CLI commands package.
"""

from .activity_cli import cmd_activity
from .awards_cli import cmd_awards
from .export_cli import cmd_export
from .leaderboard_cli import cmd_leaderboard
from .music_cli import cmd_music
from .profiles_cli import cmd_profiles
from .rounds_cli import cmd_rounds
from .summary_cli import cmd_summary

__all__ = [
    "cmd_activity",
    "cmd_awards",
    "cmd_export",
    "cmd_leaderboard",
    "cmd_music",
    "cmd_profiles",
    "cmd_rounds",
    "cmd_summary",
]
