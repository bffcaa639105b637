"""
Activity calendar: submissions and votes grouped by calendar day.
"""

from __future__ import annotations

from collections.abc import Sequence
from datetime import date, tzinfo

from leaguestats.helpers.dto.catalog_dto import DayActivity, SubmissionActivity, VoteActivity
from leaguestats.helpers.dto.league_dto import UNKNOWN_ROUND_NAME, JoinIndex, Round, Submission
from leaguestats.helpers.parse_helper import parse_timestamp


def compute_activity(
    rounds: Sequence[Round],
    submissions: Sequence[Submission],
    index: JoinIndex,
    tz: tzinfo | None = None,
) -> list[DayActivity]:
    """
    Group submissions and resolved votes by local calendar date.

    Records with a blank or unparseable timestamp are skipped. Entries within a
    day are sorted by time; days are returned in ascending order.

    Args:
        rounds: Rounds table (for round names)
        submissions: Submissions table
        index: Join index for the snapshot
        tz: Zone that defines calendar days; system local time when None
    """
    round_names = {round_.id: round_.name for round_ in rounds}
    submissions_by_day: dict[date, list[SubmissionActivity]] = {}
    votes_by_day: dict[date, list[VoteActivity]] = {}

    for submission in submissions:
        created = parse_timestamp(submission.created, tz)
        if created is None:
            continue
        local = created.astimezone(tz)
        submissions_by_day.setdefault(local.date(), []).append(
            SubmissionActivity(
                time=local,
                title=submission.title,
                artists=submission.artists,
                submitter=index.competitor_name(submission.submitter_id),
                round=round_names.get(submission.round_id, UNKNOWN_ROUND_NAME),
            )
        )

    for vote in index.resolved_votes:
        created = parse_timestamp(vote.created, tz)
        if created is None:
            continue
        local = created.astimezone(tz)
        votes_by_day.setdefault(local.date(), []).append(
            VoteActivity(
                time=local,
                voter=index.competitor_name(vote.voter_id),
                points=vote.points,
                round=round_names.get(vote.round_id, UNKNOWN_ROUND_NAME),
            )
        )

    days = sorted(submissions_by_day.keys() | votes_by_day.keys())
    return [
        DayActivity(
            day=day,
            submissions=tuple(sorted(submissions_by_day.get(day, []), key=lambda entry: entry.time)),
            votes=tuple(sorted(votes_by_day.get(day, []), key=lambda entry: entry.time)),
        )
        for day in days
    ]
