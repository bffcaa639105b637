"""
Standing-position awards: most-consistent, fall-from-grace, redemption-arc.

Positions are 1-indexed places in a round's standings. Competitors below the
sample threshold are left out of the rankings entirely.
"""

from __future__ import annotations

import math

import numpy as np

from leaguestats.components.awards.ranking_comp import AwardInfo, build_award, create_rankings, headline
from leaguestats.helpers.dto.awards_dto import Award, AwardContext
from leaguestats.helpers.parse_helper import timestamp_sort_key, to_fixed

MIN_ROUNDS_FOR_CONSISTENCY = 5
MIN_ROUNDS_PER_HALF = 3

MOST_CONSISTENT = AwardInfo(
    "most-consistent", "Most Consistent", "Finished in similar positions across rounds", "target", "Variance", "asc"
)
FALL_FROM_GRACE = AwardInfo(
    "fall-from-grace", "Fall From Grace", "Started strong but dropped off", "trending-down", "Position Δ"
)
REDEMPTION_ARC = AwardInfo(
    "redemption-arc", "Redemption Arc", "Started slow but rose to the top", "trending-up", "Position Δ"
)


def positions_by_competitor(ctx: AwardContext, round_ids: set[str] | None = None) -> dict[str, list[int]]:
    """1-indexed standing positions per competitor, optionally limited to some rounds."""
    positions: dict[str, list[int]] = {}
    for result in ctx.round_results:
        if round_ids is not None and result.round.id not in round_ids:
            continue
        for place, standing in enumerate(result.standings, start=1):
            positions.setdefault(standing.competitor.id, []).append(place)
    return positions


def split_rounds_chronologically(ctx: AwardContext) -> tuple[set[str], set[str]]:
    """
    Split round ids into an earlier and a later half by creation time.

    The first half holds floor(n / 2) rounds; unparseable timestamps sort first.
    """
    ordered = sorted(ctx.rounds, key=lambda round_: timestamp_sort_key(round_.created, ctx.tz))
    cut = math.floor(len(ordered) / 2)
    first_half = {round_.id for round_ in ordered[:cut]}
    second_half = {round_.id for round_ in ctx.rounds} - first_half
    return first_half, second_half


def _signed_positions(value: float) -> str:
    return f"{'+' if value > 0 else ''}{to_fixed(value, 1)} pos"


def most_consistent_award(ctx: AwardContext) -> Award:
    variances: dict[str, float] = {}
    for competitor_id, positions in positions_by_competitor(ctx).items():
        if len(positions) >= MIN_ROUNDS_FOR_CONSISTENCY:
            variances[competitor_id] = float(np.var(positions))

    rankings = create_rankings(
        variances, ctx.index.competitors_by_id, lambda v: f"σ²={to_fixed(v, 2)}", sort_order="asc"
    )
    return build_award(MOST_CONSISTENT, rankings, headline(rankings, lambda v: f"σ² = {to_fixed(v, 2)}", "N/A"))


def half_average_positions(ctx: AwardContext) -> dict[str, tuple[float, float]]:
    """
    Average position in the earlier and the later half of the season.

    Only competitors with enough standings in both halves appear, in Competitor
    table order.
    """
    first_half, second_half = split_rounds_chronologically(ctx)
    early = positions_by_competitor(ctx, first_half)
    late = positions_by_competitor(ctx, second_half)

    averages: dict[str, tuple[float, float]] = {}
    for competitor in ctx.competitors:
        before = early.get(competitor.id, [])
        after = late.get(competitor.id, [])
        if len(before) >= MIN_ROUNDS_PER_HALF and len(after) >= MIN_ROUNDS_PER_HALF:
            averages[competitor.id] = (float(np.mean(before)), float(np.mean(after)))
    return averages


def fall_from_grace_award(ctx: AwardContext) -> Award:
    falls = {competitor_id: after - before for competitor_id, (before, after) in half_average_positions(ctx).items()}
    rankings = create_rankings(falls, ctx.index.competitors_by_id, _signed_positions)
    value = headline(rankings, lambda v: f"{to_fixed(v, 1)} positions lower", "N/A")
    return build_award(FALL_FROM_GRACE, rankings, value)


def redemption_arc_award(ctx: AwardContext) -> Award:
    rises = {competitor_id: before - after for competitor_id, (before, after) in half_average_positions(ctx).items()}
    rankings = create_rankings(rises, ctx.index.competitors_by_id, _signed_positions)
    value = headline(rankings, lambda v: f"{to_fixed(v, 1)} positions higher", "N/A")
    return build_award(REDEMPTION_ARC, rankings, value)
