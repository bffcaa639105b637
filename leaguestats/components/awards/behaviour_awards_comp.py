"""
Behaviour awards: how competitors vote, comment and time their activity.

- contrarian: lowest average points per vote cast
- narrator: most characters written in vote comments
- night-owl: submissions made late at night
- dunce / eager-beaver: last / first to submit or vote in a round
"""

from __future__ import annotations

from collections.abc import Callable, Iterable
from datetime import datetime

from leaguestats.components.awards.ranking_comp import AwardInfo, build_award, create_rankings, headline, seeded
from leaguestats.helpers.dto.awards_dto import Award, AwardContext
from leaguestats.helpers.dto.league_dto import Submission, Vote
from leaguestats.helpers.parse_helper import format_number, parse_timestamp, to_fixed


MIN_VOTES_FOR_CONTRARIAN = 5
NIGHT_STARTS_AT_HOUR = 22
NIGHT_ENDS_AT_HOUR = 4

CONTRARIAN = AwardInfo(
    "contrarian", "The Contrarian", "Gives the lowest scores on average", "thumbs-down", "Avg Given", "asc"
)
NARRATOR = AwardInfo("narrator", "The Narrator", "Left the most extensive comments", "message-square", "Characters")
NIGHT_OWL = AwardInfo("night-owl", "The Night Owl", "Submits songs between 10pm and 4am", "moon", "Late Subs")
DUNCE = AwardInfo(
    "dunce", "The Dunce", "Consistently submits or votes last in rounds", "alarm-clock-off", "Times Last"
)
EAGER_BEAVER = AwardInfo(
    "eager-beaver", "The Eager Beaver", "Consistently submits or votes first in rounds", "zap", "Times First"
)


def contrarian_award(ctx: AwardContext) -> Award:
    counts: dict[str, int] = {}
    totals: dict[str, int] = {}
    for vote in ctx.index.resolved_votes:
        counts[vote.voter_id] = counts.get(vote.voter_id, 0) + 1
        totals[vote.voter_id] = totals.get(vote.voter_id, 0) + vote.points

    averages: dict[str, float] = {}
    for competitor in ctx.competitors:
        count = counts.get(competitor.id, 0)
        if count >= MIN_VOTES_FOR_CONTRARIAN:
            averages[competitor.id] = totals[competitor.id] / count

    rankings = create_rankings(averages, ctx.index.competitors_by_id, lambda v: to_fixed(v, 2), sort_order="asc")
    value = headline(rankings, lambda v: f"{to_fixed(v, 2)} avg points given", "N/A")
    return build_award(CONTRARIAN, rankings, value)


def narrator_award(ctx: AwardContext) -> Award:
    characters = seeded(ctx.competitors)
    for vote in ctx.index.resolved_votes:
        if vote.comment:
            characters[vote.voter_id] = characters.get(vote.voter_id, 0) + len(vote.comment)

    rankings = create_rankings(characters, ctx.index.competitors_by_id, lambda v: f"{int(v):,}")
    return build_award(NARRATOR, rankings, headline(rankings, lambda v: f"{int(v):,} characters", "0"))


def is_night_hour(hour: int) -> bool:
    return hour >= NIGHT_STARTS_AT_HOUR or hour < NIGHT_ENDS_AT_HOUR


def night_owl_award(ctx: AwardContext) -> Award:
    late = seeded(ctx.competitors)
    for submission in ctx.submissions:
        created = parse_timestamp(submission.created, ctx.tz)
        if created is not None and is_night_hour(created.astimezone(ctx.tz).hour):
            late[submission.submitter_id] = late.get(submission.submitter_id, 0) + 1

    rankings = create_rankings(late, ctx.index.competitors_by_id, lambda v: f"{format_number(v)} subs")
    value = headline(rankings, lambda v: f"{format_number(v)} late-night submissions", "0")
    return build_award(NIGHT_OWL, rankings, value)


# ──────────────────────────────────────────────────────────────────────
# Timing (dunce / eager-beaver)
# ──────────────────────────────────────────────────────────────────────

Pick = Callable[[Iterable[tuple[datetime, str]]], tuple[datetime, str]]


def _latest(entries: Iterable[tuple[datetime, str]]) -> tuple[datetime, str]:
    return max(entries, key=lambda entry: entry[0])


def _earliest(entries: Iterable[tuple[datetime, str]]) -> tuple[datetime, str]:
    return min(entries, key=lambda entry: entry[0])


def _timed_submissions(submissions: Iterable[Submission], ctx: AwardContext) -> list[tuple[datetime, str]]:
    timed = []
    for submission in submissions:
        created = parse_timestamp(submission.created, ctx.tz)
        if created is not None:
            timed.append((created, submission.submitter_id))
    return timed


def _timed_voters(votes: Iterable[Vote], ctx: AwardContext, pick: Pick) -> list[tuple[datetime, str]]:
    """Each voter's latest (or earliest) vote time in a round, in first-seen voter order."""
    times_by_voter: dict[str, list[datetime]] = {}
    for vote in votes:
        created = parse_timestamp(vote.created, ctx.tz)
        if created is not None:
            times_by_voter.setdefault(vote.voter_id, []).append(created)
    return [pick((time, voter_id) for time in times) for voter_id, times in times_by_voter.items()]


def round_timing_counts(ctx: AwardContext, pick: Pick) -> dict[str, int]:
    """
    Count, per competitor, rounds where they were the extreme submitter plus
    rounds where they were the extreme voter.

    `pick` chooses the extreme (latest or earliest); on equal times the first
    record in input order wins. Records without a parseable timestamp are skipped.
    """
    counts = seeded(ctx.competitors)

    for submissions in ctx.index.submissions_by_round.values():
        timed = _timed_submissions(submissions, ctx)
        if timed:
            _, submitter_id = pick(timed)
            counts[submitter_id] = counts.get(submitter_id, 0) + 1

    for votes in ctx.index.votes_by_round.values():
        timed = _timed_voters(votes, ctx, pick)
        if timed:
            _, voter_id = pick(timed)
            counts[voter_id] = counts.get(voter_id, 0) + 1

    return counts


def dunce_award(ctx: AwardContext) -> Award:
    rankings = create_rankings(
        round_timing_counts(ctx, _latest), ctx.index.competitors_by_id, lambda v: f"{format_number(v)}× last"
    )
    return build_award(DUNCE, rankings, headline(rankings, lambda v: f"{format_number(v)} times last", "0"))


def eager_beaver_award(ctx: AwardContext) -> Award:
    rankings = create_rankings(
        round_timing_counts(ctx, _earliest), ctx.index.competitors_by_id, lambda v: f"{format_number(v)}× first"
    )
    return build_award(EAGER_BEAVER, rankings, headline(rankings, lambda v: f"{format_number(v)} times first", "0"))
