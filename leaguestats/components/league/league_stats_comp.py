"""League-wide totals."""

from __future__ import annotations

from leaguestats.helpers.dto.league_dto import LeagueSnapshot
from leaguestats.helpers.dto.results_dto import LeagueStats


def compute_league_stats(snapshot: LeagueSnapshot) -> LeagueStats:
    """Count the raw tables; total_points sums every vote, resolved or not."""
    return LeagueStats(
        total_competitors=len(snapshot.competitors),
        total_rounds=len(snapshot.rounds),
        total_submissions=len(snapshot.submissions),
        total_votes=len(snapshot.votes),
        total_points=sum(vote.points for vote in snapshot.votes),
    )
