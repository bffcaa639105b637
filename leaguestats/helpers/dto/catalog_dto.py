"""
Music catalog DTOs.

Artist, album, genre and track statistics plus the activity calendar.

Rules:
- Import only stdlib, typing and sibling DTO modules
- Pure data structures only (no I/O, no business logic)
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date, datetime

from leaguestats.helpers.dto.league_dto import Submission


@dataclass(frozen=True)
class ArtistStats:
    """Submission and points totals for one credited artist."""

    name: str
    submission_count: int
    total_points: int
    submitters: tuple[str, ...]  # display names, first-seen order
    genres: tuple[str, ...]


@dataclass(frozen=True)
class AlbumStats:
    """Submission and points totals for one (album, artists) pair."""

    name: str
    artist: str
    submission_count: int
    total_points: int


@dataclass(frozen=True)
class GenreStats:
    """Totals for one genre, aggregated over artist statistics."""

    genre: str
    submission_count: int
    total_points: int
    top_artists: tuple[str, ...]


@dataclass(frozen=True)
class TrackWithStats:
    """A submission joined with its vote totals."""

    submission: Submission
    points: int
    voter_count: int
    submitter_name: str
    spotify_embed_url: str


@dataclass(frozen=True)
class MusicStats:
    """Headline numbers for the music catalog."""

    total_tracks: int
    unique_artists: int
    unique_albums: int
    unique_genres: int
    most_submitted_artist: str
    most_submitted_album: str
    top_genre: str


@dataclass(frozen=True)
class SubmissionActivity:
    """A submission placed on the activity calendar."""

    time: datetime
    title: str
    artists: str
    submitter: str
    round: str


@dataclass(frozen=True)
class VoteActivity:
    """A vote placed on the activity calendar."""

    time: datetime
    voter: str
    points: int
    round: str


@dataclass(frozen=True)
class DayActivity:
    """Everything that happened on one calendar day."""

    day: date
    submissions: tuple[SubmissionActivity, ...]
    votes: tuple[VoteActivity, ...]
