"""
Taste profile DTOs.

Archetypes and per-competitor genre profiles.

Rules:
- Import only stdlib and typing (no leaguestats.* imports)
- Pure data structures only (no I/O, no business logic)
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Archetype:
    """A named personality with its genre affinities (lowercase labels)."""

    name: str
    emoji: str
    genres: tuple[str, ...]


@dataclass(frozen=True)
class GenreCount:
    """Genre with its occurrence count in a submission histogram."""

    genre: str
    count: int


@dataclass(frozen=True)
class GenreShare:
    """Genre with count and rounded share of the whole histogram (0-100)."""

    genre: str
    count: int
    percentage: int


@dataclass(frozen=True)
class GenrePoints:
    """Genre with the positive points a voter gave to it."""

    genre: str
    points_given: int


@dataclass(frozen=True)
class ArchetypeCandidate:
    """Input row for archetype assignment: a competitor and their top genres."""

    competitor_id: str
    genre_breakdown: tuple[GenreCount, ...]


@dataclass(frozen=True)
class TasteProfile:
    """Musical taste summary for one competitor."""

    competitor_id: str
    competitor_name: str
    unique_artists: int
    top_artists: tuple[str, ...]
    submission_count: int
    genre_breakdown: tuple[GenreShare, ...]
    top_genres: tuple[str, ...]
    voting_genre_preference: tuple[GenrePoints, ...]
    personality_name: str
    personality_emoji: str
