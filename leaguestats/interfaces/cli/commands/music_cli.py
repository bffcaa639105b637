"""
Music command: top tracks and artist / album / genre statistics.
"""

from __future__ import annotations

import argparse
from collections.abc import Sequence
from typing import TypeVar

from leaguestats.interfaces.cli.ui import TableDisplay
from leaguestats.interfaces.cli.utils import league_service_from_args, truncate
from leaguestats.services.league_svc import LeagueService

T = TypeVar("T")


def _limited(items: Sequence[T], limit: int | None) -> Sequence[T]:
    return items if limit is None else items[: max(limit, 0)]


def _show_tracks(service: LeagueService, limit: int | None) -> None:
    rows = [
        (
            place,
            truncate(track.submission.title),
            truncate(track.submission.artists, 30),
            track.submitter_name,
            track.points,
            track.voter_count,
        )
        for place, track in enumerate(service.get_top_tracks(limit), start=1)
    ]
    TableDisplay.show_rows("Top Tracks", ("#", "Title", "Artists", "Submitter", "Points", "Votes"), rows, "No tracks")


def _show_artists(service: LeagueService, limit: int | None) -> None:
    rows = [
        (artist.submission_count, artist.name, artist.total_points, ", ".join(artist.genres))
        for artist in _limited(service.get_artists(), limit)
    ]
    TableDisplay.show_rows("Artists", ("Subs", "Artist", "Points", "Genres"), rows, "No artists")


def _show_albums(service: LeagueService, limit: int | None) -> None:
    rows = [
        (album.submission_count, truncate(album.name), truncate(album.artist, 30), album.total_points)
        for album in _limited(service.get_albums(), limit)
    ]
    TableDisplay.show_rows("Albums", ("Subs", "Album", "Artist", "Points"), rows, "No albums")


def _show_genres(service: LeagueService, limit: int | None) -> None:
    rows = [
        (genre.submission_count, genre.genre, genre.total_points, ", ".join(genre.top_artists[:3]))
        for genre in _limited(service.get_genres(), limit)
    ]
    TableDisplay.show_rows("Genres", ("Subs", "Genre", "Points", "Top Artists"), rows, "No genres")


_VIEWS = {
    "tracks": _show_tracks,
    "artists": _show_artists,
    "albums": _show_albums,
    "genres": _show_genres,
}


def cmd_music(args: argparse.Namespace) -> int:
    """Show one music catalog view (tracks, artists, albums or genres)."""
    service = league_service_from_args(args)
    _VIEWS[args.music_cmd](service, getattr(args, "limit", None))
    return 0
