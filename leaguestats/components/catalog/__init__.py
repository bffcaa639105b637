"""
Catalog package: music statistics and the activity calendar.
"""

from .activity_comp import compute_activity
from .music_catalog_comp import (
    compute_album_stats,
    compute_artist_stats,
    compute_genre_stats,
    compute_music_stats,
    compute_tracks,
    spotify_embed_url,
    top_tracks,
)

__all__ = [
    "compute_activity",
    "compute_album_stats",
    "compute_artist_stats",
    "compute_genre_stats",
    "compute_music_stats",
    "compute_tracks",
    "spotify_embed_url",
    "top_tracks",
]
