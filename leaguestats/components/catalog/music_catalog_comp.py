"""
Music catalog: artist, album, genre and track statistics.

Points for a track entry come from the join index, so votes that reference no
submission never inflate a track, album or artist.
"""

from __future__ import annotations

from collections.abc import Sequence

from leaguestats.components.genres.genre_classifier_comp import GenreClassifier
from leaguestats.helpers.dto.catalog_dto import (
    AlbumStats,
    ArtistStats,
    GenreStats,
    MusicStats,
    TrackWithStats,
)
from leaguestats.helpers.dto.league_dto import JoinIndex, Submission
from leaguestats.helpers.parse_helper import split_artists

SPOTIFY_TRACK_PREFIX = "spotify:track:"
SPOTIFY_EMBED_URL = "https://open.spotify.com/embed/track/{track_id}?utm_source=generator&theme=0"
GENRE_TOP_ARTISTS_SIZE = 5
DEFAULT_TOP_TRACKS_LIMIT = 20
NOT_AVAILABLE = "N/A"


def spotify_embed_url(spotify_uri: str) -> str:
    """Embeddable player URL for a `spotify:track:<id>` URI."""
    return SPOTIFY_EMBED_URL.format(track_id=spotify_uri.replace(SPOTIFY_TRACK_PREFIX, ""))


def compute_artist_stats(
    submissions: Sequence[Submission],
    index: JoinIndex,
    classifier: GenreClassifier,
) -> list[ArtistStats]:
    """
    Totals per credited artist (credits split on ",").

    Returns:
        Stats sorted by submission count descending, first-seen order on ties
    """
    counts: dict[str, int] = {}
    points: dict[str, int] = {}
    submitters: dict[str, dict[str, None]] = {}

    for submission in submissions:
        track_points = index.points_of.get(submission.key, 0)
        submitter_name = index.competitor_name(submission.submitter_id)
        for artist in split_artists(submission.artists):
            counts[artist] = counts.get(artist, 0) + 1
            points[artist] = points.get(artist, 0) + track_points
            submitters.setdefault(artist, {})[submitter_name] = None

    stats = [
        ArtistStats(
            name=artist,
            submission_count=count,
            total_points=points[artist],
            submitters=tuple(submitters[artist]),
            genres=tuple(classifier.classify(artist)),
        )
        for artist, count in counts.items()
    ]
    stats.sort(key=lambda s: s.submission_count, reverse=True)
    return stats


def compute_album_stats(submissions: Sequence[Submission], index: JoinIndex) -> list[AlbumStats]:
    """Totals per (album, artist credit), sorted by submission count descending."""
    counts: dict[tuple[str, str], int] = {}
    points: dict[tuple[str, str], int] = {}
    for submission in submissions:
        key = (submission.album, submission.artists)
        counts[key] = counts.get(key, 0) + 1
        points[key] = points.get(key, 0) + index.points_of.get(submission.key, 0)

    stats = [
        AlbumStats(name=album, artist=artists, submission_count=count, total_points=points[(album, artists)])
        for (album, artists), count in counts.items()
    ]
    stats.sort(key=lambda s: s.submission_count, reverse=True)
    return stats


def compute_genre_stats(artist_stats: Sequence[ArtistStats]) -> list[GenreStats]:
    """
    Totals per genre, aggregated over artist statistics.

    `top_artists` holds the first artists seen for the genre in artist-stats order,
    which is by submission count.
    """
    counts: dict[str, int] = {}
    points: dict[str, int] = {}
    top_artists: dict[str, list[str]] = {}
    for artist in artist_stats:
        for genre in artist.genres:
            counts[genre] = counts.get(genre, 0) + artist.submission_count
            points[genre] = points.get(genre, 0) + artist.total_points
            names = top_artists.setdefault(genre, [])
            if len(names) < GENRE_TOP_ARTISTS_SIZE:
                names.append(artist.name)

    stats = [
        GenreStats(
            genre=genre,
            submission_count=count,
            total_points=points[genre],
            top_artists=tuple(top_artists[genre]),
        )
        for genre, count in counts.items()
    ]
    stats.sort(key=lambda s: s.submission_count, reverse=True)
    return stats


def compute_tracks(submissions: Sequence[Submission], index: JoinIndex) -> list[TrackWithStats]:
    """Every submission with its vote totals, in input order."""
    return [
        TrackWithStats(
            submission=submission,
            points=index.points_of.get(submission.key, 0),
            voter_count=index.voter_count_of.get(submission.key, 0),
            submitter_name=index.competitor_name(submission.submitter_id),
            spotify_embed_url=spotify_embed_url(submission.spotify_uri),
        )
        for submission in submissions
    ]


def top_tracks(tracks: Sequence[TrackWithStats], limit: int = DEFAULT_TOP_TRACKS_LIMIT) -> list[TrackWithStats]:
    """Highest-scoring tracks first; equal points keep input order."""
    ranked = sorted(tracks, key=lambda track: track.points, reverse=True)
    return ranked[: max(limit, 0)]


def compute_music_stats(
    submissions: Sequence[Submission],
    artist_stats: Sequence[ArtistStats],
    album_stats: Sequence[AlbumStats],
    genre_stats: Sequence[GenreStats],
) -> MusicStats:
    """Headline catalog numbers; "N/A" names when a list is empty."""
    return MusicStats(
        total_tracks=len(submissions),
        unique_artists=len(artist_stats),
        unique_albums=len(album_stats),
        unique_genres=len(genre_stats),
        most_submitted_artist=artist_stats[0].name if artist_stats and artist_stats[0].name else NOT_AVAILABLE,
        most_submitted_album=album_stats[0].name if album_stats and album_stats[0].name else NOT_AVAILABLE,
        top_genre=genre_stats[0].genre if genre_stats else NOT_AVAILABLE,
    )
