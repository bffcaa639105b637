"""
League domain DTOs.

Immutable input records (the Record Store) and the join index derived from them.
These form cross-layer contracts between ingestion, components, workflows and interfaces.

Rules:
- Import only stdlib and typing (no leaguestats.* imports)
- Pure data structures only (no I/O, no business logic)
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field

# (spotify_uri, round_id) - natural key of a track entry
TrackKey = tuple[str, str]

UNKNOWN_COMPETITOR_NAME = "Unknown"
UNKNOWN_ROUND_NAME = "Unknown Round"


@dataclass(frozen=True)
class Competitor:
    """A league participant."""

    id: str
    name: str


@dataclass(frozen=True)
class Round:
    """A voting period. `created` is the raw timestamp string."""

    id: str
    created: str
    name: str
    description: str = ""
    playlist_url: str = ""


@dataclass(frozen=True)
class Submission:
    """One track entered by one competitor into one round."""

    spotify_uri: str
    title: str
    album: str
    artists: str
    submitter_id: str
    created: str
    comment: str
    round_id: str
    visible_to_voters: str = ""

    @property
    def key(self) -> TrackKey:
        return (self.spotify_uri, self.round_id)


@dataclass(frozen=True)
class Vote:
    """One point allocation by one voter toward one track entry."""

    spotify_uri: str
    voter_id: str
    created: str
    points: int
    comment: str
    round_id: str

    @property
    def key(self) -> TrackKey:
        return (self.spotify_uri, self.round_id)


@dataclass(frozen=True)
class LeagueSnapshot:
    """
    Frozen snapshot of the four input tables for one computation pass.

    Table order is meaningful: it drives stable tie-breaks downstream.
    """

    competitors: tuple[Competitor, ...] = ()
    rounds: tuple[Round, ...] = ()
    submissions: tuple[Submission, ...] = ()
    votes: tuple[Vote, ...] = ()


@dataclass(frozen=True)
class JoinIndex:
    """
    Named lookup tables built once per snapshot and shared by every rule.

    Attributes:
        competitors_by_id: Competitor table keyed by id
        submitter_of: Track entry -> submitter id (last write wins)
        submission_of: Track entry -> submission (last write wins)
        points_of: Track entry -> sum of vote points
        voter_count_of: Track entry -> number of votes
        resolved_votes: Votes whose track entry exists, in input order
        submissions_by_round: Round id -> submissions, first-seen round order
        votes_by_round: Round id -> resolved votes, first-seen round order
    """

    competitors_by_id: Mapping[str, Competitor] = field(default_factory=dict)
    submitter_of: Mapping[TrackKey, str] = field(default_factory=dict)
    submission_of: Mapping[TrackKey, Submission] = field(default_factory=dict)
    points_of: Mapping[TrackKey, int] = field(default_factory=dict)
    voter_count_of: Mapping[TrackKey, int] = field(default_factory=dict)
    resolved_votes: tuple[Vote, ...] = ()
    submissions_by_round: Mapping[str, tuple[Submission, ...]] = field(default_factory=dict)
    votes_by_round: Mapping[str, tuple[Vote, ...]] = field(default_factory=dict)

    def competitor_name(self, competitor_id: str) -> str:
        """Display name for an id, placeholder when the competitor is unknown."""
        competitor = self.competitors_by_id.get(competitor_id)
        return competitor.name if competitor else UNKNOWN_COMPETITOR_NAME
