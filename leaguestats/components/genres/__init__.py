"""
Genres package.
"""

from .genre_classifier_comp import (
    DEFAULT_GENRE_TABLE_PATH,
    GenreClassifier,
    GenreTable,
    classify_artist,
    default_classifier,
    load_genre_table,
)

__all__ = [
    "DEFAULT_GENRE_TABLE_PATH",
    "GenreClassifier",
    "GenreTable",
    "classify_artist",
    "default_classifier",
    "load_genre_table",
]
