"""
Join index construction.

Every rule in the engine needs the same question answered: "who submitted the track
a vote points at?". The index answers it once per snapshot, keyed by the composite
track-entry key (spotify_uri, round_id), along with per-entry vote totals.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence

from leaguestats.helpers.dto.league_dto import (
    Competitor,
    JoinIndex,
    LeagueSnapshot,
    Submission,
    TrackKey,
    Vote,
)

logger = logging.getLogger(__name__)


def build_join_index(
    competitors: Sequence[Competitor],
    submissions: Sequence[Submission],
    votes: Sequence[Vote],
) -> JoinIndex:
    """
    Build the lookup tables shared by every downstream calculation.

    Duplicate track entries resolve last-write-wins. Votes whose key matches no
    submission are left out of `resolved_votes`, `points_of` and `votes_by_round`.

    Args:
        competitors: Competitor table
        submissions: Submissions table in input order
        votes: Votes table in input order

    Returns:
        JoinIndex over the given tables
    """
    competitors_by_id = {competitor.id: competitor for competitor in competitors}

    submitter_of: dict[TrackKey, str] = {}
    submission_of: dict[TrackKey, Submission] = {}
    submissions_by_round: dict[str, list[Submission]] = {}
    for submission in submissions:
        submitter_of[submission.key] = submission.submitter_id
        submission_of[submission.key] = submission
        submissions_by_round.setdefault(submission.round_id, []).append(submission)

    points_of: dict[TrackKey, int] = {}
    voter_count_of: dict[TrackKey, int] = {}
    resolved: list[Vote] = []
    votes_by_round: dict[str, list[Vote]] = {}
    for vote in votes:
        key = vote.key
        if key not in submitter_of:
            continue
        resolved.append(vote)
        points_of[key] = points_of.get(key, 0) + vote.points
        voter_count_of[key] = voter_count_of.get(key, 0) + 1
        votes_by_round.setdefault(vote.round_id, []).append(vote)

    dropped = len(votes) - len(resolved)
    if dropped:
        logger.debug("Dropped %d vote(s) that reference no submission", dropped)

    return JoinIndex(
        competitors_by_id=competitors_by_id,
        submitter_of=submitter_of,
        submission_of=submission_of,
        points_of=points_of,
        voter_count_of=voter_count_of,
        resolved_votes=tuple(resolved),
        submissions_by_round={round_id: tuple(items) for round_id, items in submissions_by_round.items()},
        votes_by_round={round_id: tuple(items) for round_id, items in votes_by_round.items()},
    )


def build_join_index_from_snapshot(snapshot: LeagueSnapshot) -> JoinIndex:
    """Convenience wrapper over build_join_index for a whole snapshot."""
    return build_join_index(snapshot.competitors, snapshot.submissions, snapshot.votes)
