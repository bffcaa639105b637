"""
Pairwise awards: best-buddies, one-sided-love, sworn-enemies.

Only votes between two different competitors count; self-votes are ignored here
even though they still count toward round points.
"""

from __future__ import annotations

from leaguestats.components.awards.ranking_comp import AwardInfo, build_award, create_rankings, seeded
from leaguestats.helpers.dto.awards_dto import Award, AwardContext, FormattedValue
from leaguestats.helpers.dto.league_dto import Competitor, JoinIndex
from leaguestats.helpers.parse_helper import format_number

BEST_BUDDIES = AwardInfo("best-buddies", "Best Buddies", "Gave each other the most points combined", "heart", "Pts Given")
ONE_SIDED_LOVE = AwardInfo(
    "one-sided-love",
    "One Sided Love",
    "Gave lots of points to someone who didn't reciprocate",
    "heart-crack",
    "Max Diff",
)
SWORN_ENEMIES = AwardInfo(
    "sworn-enemies", "Sworn Enemies", "Gave each other the lowest combined points", "swords", "Pts Received", "asc"
)

Pair = tuple[str, str]


def _non_self_votes(index: JoinIndex) -> list[tuple[str, str, int]]:
    """(voter_id, submitter_id, points) for every resolved vote between two different people."""
    edges = []
    for vote in index.resolved_votes:
        submitter_id = index.submitter_of[vote.key]
        if submitter_id != vote.voter_id:
            edges.append((vote.voter_id, submitter_id, vote.points))
    return edges


def pair_points(index: JoinIndex) -> dict[Pair, int]:
    """Combined points per unordered pair, keyed by the id-sorted pair in first-seen order."""
    totals: dict[Pair, int] = {}
    for voter_id, submitter_id, points in _non_self_votes(index):
        low, high = sorted((voter_id, submitter_id))
        totals[(low, high)] = totals.get((low, high), 0) + points
    return totals


def directed_points(index: JoinIndex) -> dict[str, dict[str, int]]:
    """Points given per ordered pair: {giver_id: {receiver_id: points}}."""
    given: dict[str, dict[str, int]] = {}
    for voter_id, submitter_id, points in _non_self_votes(index):
        targets = given.setdefault(voter_id, {})
        targets[submitter_id] = targets.get(submitter_id, 0) + points
    return given


def _pair_members(index: JoinIndex, pair: Pair | None) -> tuple[Competitor | None, Competitor | None]:
    if pair is None:
        return None, None
    return index.competitors_by_id.get(pair[0]), index.competitors_by_id.get(pair[1])


def best_buddies_award(ctx: AwardContext) -> Award:
    index = ctx.index
    pairs = pair_points(index)
    best = max(pairs.items(), key=lambda item: item[1]) if pairs else None

    given_to_others = seeded(ctx.competitors)
    for voter_id, _, points in _non_self_votes(index):
        given_to_others[voter_id] = given_to_others.get(voter_id, 0) + points

    rankings = create_rankings(given_to_others, index.competitors_by_id, lambda v: f"{format_number(v)} pts given")
    winner, secondary = _pair_members(index, best[0] if best else None)
    value = FormattedValue(f"{best[1]} combined points" if best else "0")
    return build_award(BEST_BUDDIES, rankings, value, winner, secondary, use_top_ranking=False)


def one_sided_love_award(ctx: AwardContext) -> Award:
    index = ctx.index
    given = directed_points(index)

    max_by_giver = seeded(ctx.competitors)
    best_asymmetry = 0
    best_pair: Pair | None = None
    for giver_id, targets in given.items():
        for receiver_id, points in targets.items():
            asymmetry = points - given.get(receiver_id, {}).get(giver_id, 0)
            if asymmetry > max_by_giver.get(giver_id, 0):
                max_by_giver[giver_id] = asymmetry
            if asymmetry > best_asymmetry:
                best_asymmetry = asymmetry
                best_pair = (giver_id, receiver_id)

    rankings = create_rankings(max_by_giver, index.competitors_by_id, lambda v: f"+{format_number(v)} diff")
    winner, secondary = _pair_members(index, best_pair)
    value = FormattedValue(f"{best_asymmetry} point difference")
    return build_award(ONE_SIDED_LOVE, rankings, value, winner, secondary, use_top_ranking=False)


def sworn_enemies_award(ctx: AwardContext) -> Award:
    index = ctx.index
    pairs = pair_points(index)
    worst = min(pairs.items(), key=lambda item: item[1]) if pairs else None

    received_from_others = seeded(ctx.competitors)
    for _, submitter_id, points in _non_self_votes(index):
        received_from_others[submitter_id] = received_from_others.get(submitter_id, 0) + points

    rankings = create_rankings(
        received_from_others, index.competitors_by_id, lambda v: f"{format_number(v)} pts", sort_order="asc"
    )
    winner, secondary = _pair_members(index, worst[0] if worst else None)
    value = FormattedValue(f"{worst[1]} combined points" if worst else "0")
    return build_award(SWORN_ENEMIES, rankings, value, winner, secondary, use_top_ranking=False)
