"""
Ingest package: CSV tables -> immutable league records.
"""

from .csv_reader_comp import (
    parse_competitors,
    parse_rounds,
    parse_submissions,
    parse_votes,
    read_rows,
)

__all__ = [
    "parse_competitors",
    "parse_rounds",
    "parse_submissions",
    "parse_votes",
    "read_rows",
]
