"""
CSV ingestion for the four exported league tables.

Row handling is lenient: the header row is discarded, missing trailing cells read
as "", blank lines are skipped and malformed points read as 0. Only an unreadable
file is an error.

Column order per table:
- competitors: id, name
- rounds: id, created, name, description, playlist_url
- submissions: spotify_uri, title, album, artists, submitter_id, created, comment, round_id, visible_to_voters
- votes: spotify_uri, voter_id, created, points, comment, round_id
"""

from __future__ import annotations

import csv
import logging
from pathlib import Path

from leaguestats.helpers.dto.league_dto import Competitor, Round, Submission, Vote
from leaguestats.helpers.exceptions import LeagueDataError
from leaguestats.helpers.parse_helper import parse_points

logger = logging.getLogger(__name__)


def _is_blank(row: list[str]) -> bool:
    return not row or (len(row) == 1 and not row[0].strip())


def read_rows(path: str | Path) -> list[list[str]]:
    """
    Read a CSV file into data rows (header dropped, blank lines skipped).

    Quoted cells may contain commas, newlines and doubled quotes.

    Raises:
        LeagueDataError: If the file is missing or cannot be decoded
    """
    csv_path = Path(path)
    try:
        with open(csv_path, encoding="utf-8-sig", newline="") as f:
            rows = [row for row in csv.reader(f) if not _is_blank(row)]
    except FileNotFoundError as e:
        raise LeagueDataError(f"Missing league table: {csv_path}") from e
    except (OSError, UnicodeDecodeError, csv.Error) as e:
        raise LeagueDataError(f"Unreadable league table: {csv_path}") from e

    data_rows = rows[1:]
    logger.debug("Read %d row(s) from %s", len(data_rows), csv_path.name)
    return data_rows


def _cell(row: list[str], index: int) -> str:
    return row[index] if index < len(row) else ""


def parse_competitors(rows: list[list[str]]) -> tuple[Competitor, ...]:
    return tuple(Competitor(id=_cell(row, 0), name=_cell(row, 1)) for row in rows)


def parse_rounds(rows: list[list[str]]) -> tuple[Round, ...]:
    return tuple(
        Round(
            id=_cell(row, 0),
            created=_cell(row, 1),
            name=_cell(row, 2).strip(),
            description=_cell(row, 3),
            playlist_url=_cell(row, 4),
        )
        for row in rows
    )


def parse_submissions(rows: list[list[str]]) -> tuple[Submission, ...]:
    return tuple(
        Submission(
            spotify_uri=_cell(row, 0),
            title=_cell(row, 1),
            album=_cell(row, 2),
            artists=_cell(row, 3),
            submitter_id=_cell(row, 4),
            created=_cell(row, 5),
            comment=_cell(row, 6),
            round_id=_cell(row, 7),
            visible_to_voters=_cell(row, 8),
        )
        for row in rows
    )


def parse_votes(rows: list[list[str]]) -> tuple[Vote, ...]:
    return tuple(
        Vote(
            spotify_uri=_cell(row, 0),
            voter_id=_cell(row, 1),
            created=_cell(row, 2),
            points=parse_points(_cell(row, 3)),
            comment=_cell(row, 4),
            round_id=_cell(row, 5),
        )
        for row in rows
    )
