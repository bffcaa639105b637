"""
Genre classifier.

Maps an artist credit to an ordered, non-empty list of genre labels using a YAML
artist table plus keyword fallbacks. Classification is total: anything unmatched
gets the table's fallback label ("Other").

Resolution order:
1. Exact artist name
2. Case-insensitive substring match either way, against every entry in file order
3. Each credited artist of a compound credit ("A, B" / "A & B"): exact, then substring
4. Keyword rules on the lowercased credit
5. Fallback
"""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass
from functools import lru_cache
from pathlib import Path
from typing import Any

import yaml

from leaguestats.helpers.exceptions import LeagueDataError

logger = logging.getLogger(__name__)

DEFAULT_GENRE_TABLE_PATH = Path(__file__).resolve().parent / "data" / "artist_genres.yaml"

_CREDIT_SEPARATORS = re.compile(r"[,&]")


@dataclass(frozen=True)
class KeywordRule:
    fragments: tuple[str, ...]
    genres: tuple[str, ...]


@dataclass(frozen=True)
class GenreTable:
    """Parsed artist table. `artists` keeps file order."""

    artists: dict[str, tuple[str, ...]]
    keywords: tuple[KeywordRule, ...]
    fallback: tuple[str, ...]


def parse_genre_table(raw: dict[str, Any]) -> GenreTable:
    """Build a GenreTable from the loaded YAML mapping."""
    artists = {
        str(name): tuple(str(g) for g in genres)
        for name, genres in (raw.get("artists") or {}).items()
        if str(name).strip() and genres
    }
    keywords = tuple(
        KeywordRule(
            fragments=tuple(str(f).lower() for f in rule.get("fragments", [])),
            genres=tuple(str(g) for g in rule.get("genres", [])),
        )
        for rule in raw.get("keywords") or []
        if rule.get("genres")
    )
    fallback = tuple(str(g) for g in raw.get("fallback") or ["Other"])
    return GenreTable(artists=artists, keywords=keywords, fallback=fallback)


def load_genre_table(path: str | Path | None = None) -> GenreTable:
    """
    Load an artist table from YAML.

    Args:
        path: YAML file; the bundled table when None

    Raises:
        LeagueDataError: If the file is missing or is not a YAML mapping
    """
    table_path = Path(path) if path else DEFAULT_GENRE_TABLE_PATH
    try:
        with open(table_path, encoding="utf-8") as f:
            raw = yaml.safe_load(f) or {}
    except FileNotFoundError as e:
        raise LeagueDataError(f"Genre table not found: {table_path}") from e
    except (OSError, yaml.YAMLError) as e:
        raise LeagueDataError(f"Genre table unreadable: {table_path}") from e

    if not isinstance(raw, dict):
        raise LeagueDataError(f"Genre table must be a mapping: {table_path}")

    table = parse_genre_table(raw)
    logger.debug("Loaded %d artist entries from %s", len(table.artists), table_path)
    return table


class GenreClassifier:
    """Deterministic artist -> genres lookup over one GenreTable."""

    def __init__(self, table: GenreTable) -> None:
        self._table = table
        self._lowered = [(name.lower(), genres) for name, genres in table.artists.items()]
        self._cache: dict[str, tuple[str, ...]] = {}

    def classify(self, artist: str) -> list[str]:
        """Genre labels for an artist credit, never empty."""
        cached = self._cache.get(artist)
        if cached is None:
            cached = self._cache[artist] = tuple(self._resolve(artist))
        return list(cached)

    def _resolve(self, artist: str) -> list[str]:
        if not artist or not artist.strip():
            return list(self._table.fallback)

        genres = self._match(artist)
        if genres is not None:
            return list(genres)

        for part in _CREDIT_SEPARATORS.split(artist):
            part = part.strip()
            if not part:
                continue
            genres = self._match(part)
            if genres is not None:
                return list(genres)

        lowered = artist.lower()
        for rule in self._table.keywords:
            if any(fragment in lowered for fragment in rule.fragments):
                return list(rule.genres)

        return list(self._table.fallback)

    def _match(self, name: str) -> tuple[str, ...] | None:
        exact = self._table.artists.get(name)
        if exact is not None:
            return exact
        lowered = name.lower()
        for known, genres in self._lowered:
            if known in lowered or lowered in known:
                return genres
        return None


@lru_cache(maxsize=1)
def default_classifier() -> GenreClassifier:
    """Classifier over the bundled artist table, loaded once."""
    return GenreClassifier(load_genre_table())


def classify_artist(artist: str) -> list[str]:
    """Classify with the bundled artist table."""
    return default_classifier().classify(artist)
