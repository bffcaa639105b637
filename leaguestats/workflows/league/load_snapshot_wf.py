"""Workflow for loading a league snapshot from exported CSV tables.

Reads the four tables from a data directory and freezes them into a LeagueSnapshot.
"""

from __future__ import annotations

import logging
from pathlib import Path

from leaguestats.components.ingest.csv_reader_comp import (
    parse_competitors,
    parse_rounds,
    parse_submissions,
    parse_votes,
    read_rows,
)
from leaguestats.helpers.dto.config_dto import LeagueSettings
from leaguestats.helpers.dto.league_dto import LeagueSnapshot
from leaguestats.helpers.exceptions import LeagueDataError

logger = logging.getLogger(__name__)


def load_snapshot_workflow(settings: LeagueSettings) -> LeagueSnapshot:
    """Load all four league tables.

    Args:
        settings: Data directory and per-table file names.

    Returns:
        Frozen snapshot of competitors, rounds, submissions and votes.

    Raises:
        LeagueDataError: If the data directory or any table is missing or unreadable.
    """
    data_dir = Path(settings.data_dir)
    if not data_dir.is_dir():
        raise LeagueDataError(f"League data directory not found: {data_dir}")

    # Step 1: Read each table (header dropped, blank rows skipped)
    competitors = parse_competitors(read_rows(data_dir / settings.competitors_file))
    rounds = parse_rounds(read_rows(data_dir / settings.rounds_file))
    submissions = parse_submissions(read_rows(data_dir / settings.submissions_file))
    votes = parse_votes(read_rows(data_dir / settings.votes_file))

    logger.info(
        "Loaded league data: %d competitors, %d rounds, %d submissions, %d votes",
        len(competitors),
        len(rounds),
        len(submissions),
        len(votes),
    )

    # Step 2: Freeze
    return LeagueSnapshot(competitors=competitors, rounds=rounds, submissions=submissions, votes=votes)
