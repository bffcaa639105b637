"""
Round standings.

Points are replayed from resolved votes into per-submitter totals for each round.
Ties keep the order in which the submitter was first credited with a vote; there is
no secondary key.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence

from leaguestats.helpers.dto.league_dto import JoinIndex, Round
from leaguestats.helpers.dto.results_dto import RoundResult, Standing

logger = logging.getLogger(__name__)


def points_by_submitter(index: JoinIndex, round_id: str) -> dict[str, int]:
    """Sum of points per submitter in one round, keyed in first-vote order."""
    totals: dict[str, int] = {}
    for vote in index.votes_by_round.get(round_id, ()):
        submitter_id = index.submitter_of[vote.key]
        totals[submitter_id] = totals.get(submitter_id, 0) + vote.points
    return totals


def compute_round_results(rounds: Sequence[Round], index: JoinIndex) -> list[RoundResult]:
    """
    Compute standings for every round, in Rounds table order.

    Submitters missing from the Competitor table are left out of the standings.
    Competitors who submitted but received no resolved vote do not appear.

    Args:
        rounds: Rounds table
        index: Join index for the same snapshot

    Returns:
        One RoundResult per round
    """
    results: list[RoundResult] = []
    for round_ in rounds:
        round_submissions = index.submissions_by_round.get(round_.id, ())
        standings: list[Standing] = []
        for submitter_id, points in points_by_submitter(index, round_.id).items():
            competitor = index.competitors_by_id.get(submitter_id)
            if competitor is None:
                continue
            submission = next((s for s in round_submissions if s.submitter_id == submitter_id), None)
            standings.append(Standing(competitor=competitor, points=points, submission=submission))

        standings.sort(key=lambda standing: standing.points, reverse=True)
        results.append(RoundResult(round=round_, standings=tuple(standings)))

    logger.debug("Computed standings for %d round(s)", len(results))
    return results
