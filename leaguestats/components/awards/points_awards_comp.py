"""
Point and placement awards.

Counting rules over resolved votes and round standings:
- overall-winner: total points received
- most-wins: rounds finished first
- octopus / generous-octopus: 8-point votes received / given
- close-shaver: rounds finished second
- public-enemy: downvote points received
"""

from __future__ import annotations

from leaguestats.components.awards.ranking_comp import (
    AwardInfo,
    build_award,
    create_rankings,
    headline,
    seeded,
)
from leaguestats.helpers.dto.awards_dto import Award, AwardContext, NumericValue
from leaguestats.helpers.parse_helper import format_number

MAX_POINTS = 8

OVERALL_WINNER = AwardInfo("overall-winner", "Overall Winner", "The most points across all rounds", "trophy", "Points")
MOST_WINS = AwardInfo("most-wins", "Most 1st Place Finishes", "Won the most rounds", "crown", "Wins")
OCTOPUS = AwardInfo("octopus", "The Octopus", "Received the most 8-point votes", "star", "8s Received")
GENEROUS_OCTOPUS = AwardInfo(
    "generous-octopus", "The Generous Octopus", "Gave out the most 8-point votes", "gift", "8s Given"
)
CLOSE_SHAVER = AwardInfo("close-shaver", "Close Shaver", "Came 2nd place the most times", "medal", "2nd Places")
PUBLIC_ENEMY = AwardInfo("public-enemy", "Public Enemy", "Received the most downvotes", "skull", "Downvote Pts")


def overall_winner_award(ctx: AwardContext) -> Award:
    totals = seeded(ctx.competitors)
    for vote in ctx.index.resolved_votes:
        submitter_id = ctx.index.submitter_of[vote.key]
        totals[submitter_id] = totals.get(submitter_id, 0) + vote.points

    rankings = create_rankings(totals, ctx.index.competitors_by_id, lambda v: f"{format_number(v)} pts")
    value = NumericValue(rankings[0].value if rankings else 0)
    return build_award(OVERALL_WINNER, rankings, value)


def _placement_award(
    ctx: AwardContext,
    info: AwardInfo,
    position: int,
    unit: str,
    headline_unit: str,
    empty: str,
) -> Award:
    counts = seeded(ctx.competitors)
    for result in ctx.round_results:
        if len(result.standings) > position:
            competitor_id = result.standings[position].competitor.id
            counts[competitor_id] = counts.get(competitor_id, 0) + 1

    rankings = create_rankings(counts, ctx.index.competitors_by_id, lambda v: f"{format_number(v)} {unit}")
    return build_award(info, rankings, headline(rankings, lambda v: f"{format_number(v)} {headline_unit}", empty))


def most_wins_award(ctx: AwardContext) -> Award:
    return _placement_award(ctx, MOST_WINS, 0, "wins", "wins", "0 wins")


def close_shaver_award(ctx: AwardContext) -> Award:
    return _placement_award(ctx, CLOSE_SHAVER, 1, "silvers", "silver medals", "0")


def octopus_award(ctx: AwardContext) -> Award:
    received = seeded(ctx.competitors)
    for vote in ctx.index.resolved_votes:
        if vote.points == MAX_POINTS:
            submitter_id = ctx.index.submitter_of[vote.key]
            received[submitter_id] = received.get(submitter_id, 0) + 1

    rankings = create_rankings(received, ctx.index.competitors_by_id, lambda v: f"{format_number(v)} eights")
    return build_award(OCTOPUS, rankings, headline(rankings, lambda v: f"{format_number(v)} eights", "0 eights"))


def generous_octopus_award(ctx: AwardContext) -> Award:
    given = seeded(ctx.competitors)
    for vote in ctx.index.resolved_votes:
        if vote.points == MAX_POINTS:
            given[vote.voter_id] = given.get(vote.voter_id, 0) + 1

    rankings = create_rankings(given, ctx.index.competitors_by_id, lambda v: f"{format_number(v)} eights")
    value = headline(rankings, lambda v: f"{format_number(v)} eights given", "0 eights")
    return build_award(GENEROUS_OCTOPUS, rankings, value)


def public_enemy_award(ctx: AwardContext) -> Award:
    downvotes = seeded(ctx.competitors)
    for vote in ctx.index.resolved_votes:
        if vote.points < 0:
            submitter_id = ctx.index.submitter_of[vote.key]
            downvotes[submitter_id] = downvotes.get(submitter_id, 0) + abs(vote.points)

    rankings = create_rankings(downvotes, ctx.index.competitors_by_id, lambda v: f"{format_number(v)} pts")
    value = headline(rankings, lambda v: f"{format_number(v)} downvote points", "0")
    return build_award(PUBLIC_ENEMY, rankings, value)
