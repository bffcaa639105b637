#!/usr/bin/env python3
"""
Main CLI entry point with argument parser and command dispatch.
"""

from __future__ import annotations

import argparse

from leaguestats.__version__ import __version__
from leaguestats.helpers.exceptions import LeagueDataError, UnknownAwardError
from leaguestats.helpers.logging_helper import clear_log_context, configure_logging, set_log_context
from leaguestats.interfaces.cli.commands import (
    cmd_activity,
    cmd_awards,
    cmd_export,
    cmd_leaderboard,
    cmd_music,
    cmd_profiles,
    cmd_rounds,
    cmd_summary,
)
from leaguestats.interfaces.cli.ui import print_error
from leaguestats.interfaces.cli.utils import log_level_for


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser with all subcommands."""
    p = argparse.ArgumentParser(
        prog="league",
        description="LeagueStats - Standings, awards and taste profiles for a music league export",
        epilog="Examples:\n"
        "  league --data-dir exports/season-3 summary   # Table totals\n"
        "  league leaderboard                           # Overall standings\n"
        "  league awards --award best-buddies           # One award with its full ranking\n"
        "  league music tracks --limit 10               # Ten highest-scoring tracks\n"
        "  league --timezone Europe/Dublin activity     # Activity calendar in local days\n"
        "  league export --output report.json           # Whole report as JSON",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    p.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    p.add_argument("--data-dir", help="directory holding competitors.csv, rounds.csv, submissions.csv, votes.csv")
    p.add_argument("--timezone", help="IANA zone for night-owl hours and activity days (default: system local)")
    p.add_argument("--config", help="extra YAML config file")
    p.add_argument("-v", "--verbose", action="count", default=0, help="show logs (-vv for debug)")

    sub = p.add_subparsers(
        dest="cmd",
        title="commands",
        description="Available commands (use 'league <command> --help' for command-specific help)",
    )

    # summary: Table totals
    s = sub.add_parser("summary", help="Show league totals and music headlines")
    s.set_defaults(func=cmd_summary)

    # rounds: Per-round standings
    s = sub.add_parser("rounds", help="Show standings for every round")
    s.set_defaults(func=cmd_rounds)

    # leaderboard: Overall standings
    s = sub.add_parser("leaderboard", help="Show overall standings")
    s.set_defaults(func=cmd_leaderboard)

    # awards: All awards or one in detail
    s = sub.add_parser("awards", help="Show award winners")
    s.add_argument("--award", metavar="ID", help="show one award with its full ranking (e.g. best-buddies)")
    s.set_defaults(func=cmd_awards)

    # profiles: Taste profiles
    s = sub.add_parser("profiles", help="Show taste profiles and archetypes")
    s.set_defaults(func=cmd_profiles)

    # music: Catalog views
    s = sub.add_parser("music", help="Show music catalog statistics")
    music_sub = s.add_subparsers(dest="music_cmd", title="music views", required=True)
    for view, help_text in (
        ("tracks", "Highest-scoring tracks"),
        ("artists", "Artists by submissions"),
        ("albums", "Albums by submissions"),
        ("genres", "Genres by submissions"),
    ):
        ms = music_sub.add_parser(view, help=help_text)
        ms.add_argument("--limit", type=int, help="number of rows (tracks default: top_tracks_limit)")
        ms.set_defaults(func=cmd_music)

    # activity: Calendar
    s = sub.add_parser("activity", help="Show submissions and votes per day")
    s.set_defaults(func=cmd_activity)

    # export: JSON report
    s = sub.add_parser("export", help="Write the complete report as JSON")
    s.add_argument("--output", "-o", required=True, help="output file")
    s.set_defaults(func=cmd_export)

    return p


def main(argv: list[str] | None = None) -> int:
    """Main entry point for CLI."""
    parser = build_parser()
    args = parser.parse_args(argv)

    # If no command provided, show help
    if args.cmd is None:
        parser.print_help()
        return 0

    configure_logging(log_level_for(args.verbose))
    set_log_context(command=args.cmd)

    try:
        return int(args.func(args))
    except LeagueDataError as e:
        print_error(str(e))
        return 1
    except UnknownAwardError as e:
        print_error(f"Unknown award: {e.args[0] if e.args else ''}")
        return 1
    finally:
        clear_log_context()


if __name__ == "__main__":
    raise SystemExit(main())
