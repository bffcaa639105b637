"""Unit tests for the leaderboard."""

from __future__ import annotations

import pytest

from leaguestats.components.awards.points_awards_comp import overall_winner_award
from leaguestats.components.league.leaderboard_comp import compute_leaderboard, points_by_competitor_by_round
from leaguestats.components.league.league_stats_comp import compute_league_stats
from leaguestats.components.league.round_results_comp import compute_round_results


def _two_round_league(league):
    league.competitor("a", "Ann").competitor("b", "Ben").competitor("c", "Cy")
    league.round("r1").round("r2")
    league.submit("a1", "a", "r1").submit("b1", "b", "r1").submit("c1", "c", "r1")
    league.submit("a2", "a", "r2").submit("b2", "b", "r2")
    league.vote("a1", "b", 5, "r1").vote("b1", "a", 3, "r1").vote("c1", "a", 1, "r1")
    league.vote("b2", "a", 6, "r2").vote("a2", "b", 2, "r2")
    return league


class TestComputeLeaderboard:
    """Tests for compute_leaderboard."""

    @pytest.mark.unit
    def test_totals_wins_and_podiums(self, league) -> None:
        _two_round_league(league)
        index = league.index()
        results = compute_round_results(league.rounds, index)

        entries = compute_leaderboard(league.competitors, index, results)

        rows = [
            (e.competitor.name, e.total_points, e.rounds_played, e.average_points, e.wins, e.top_three_finishes)
            for e in entries
        ]
        assert rows == [
            ("Ben", 9, 2, 4.5, 1, 2),
            ("Ann", 7, 2, 3.5, 1, 2),
            ("Cy", 1, 1, 1.0, 0, 1),
        ]

    @pytest.mark.unit
    def test_no_rounds_played_has_zero_average(self, league) -> None:
        league.competitor("a").competitor("b")

        entries = compute_leaderboard(league.competitors, league.index(), [])

        assert [e.average_points for e in entries] == [0.0, 0.0]
        assert [e.competitor.id for e in entries] == ["a", "b"]

    @pytest.mark.unit
    def test_wins_agree_with_round_standings(self, league) -> None:
        _two_round_league(league)
        index = league.index()
        results = compute_round_results(league.rounds, index)

        entries = compute_leaderboard(league.competitors, index, results)

        assert sum(e.wins for e in entries) == sum(1 for r in results if r.standings)
        for entry in entries:
            assert entry.wins == sum(1 for r in results if r.standings and r.standings[0].competitor == entry.competitor)

    @pytest.mark.unit
    def test_totals_match_overall_winner(self, league) -> None:
        _two_round_league(league)
        ctx = league.context()

        entries = compute_leaderboard(league.competitors, ctx.index, ctx.round_results)
        award = overall_winner_award(ctx)

        by_id = {r.competitor.id: r.value for r in award.rankings}
        assert {e.competitor.id: e.total_points for e in entries} == by_id

    @pytest.mark.unit
    def test_rounds_map(self, league) -> None:
        _two_round_league(league)

        assert points_by_competitor_by_round(league.index()) == {
            "a": {"r1": 5, "r2": 2},
            "b": {"r1": 3, "r2": 6},
            "c": {"r1": 1},
        }


class TestComputeLeagueStats:
    """Tests for compute_league_stats."""

    @pytest.mark.unit
    def test_counts_raw_tables(self, league) -> None:
        league.competitor("a").competitor("b").round("r1")
        league.submit("t1", "a", "r1").vote("t1", "b", 5, "r1").vote("missing", "b", 2, "r1")

        stats = compute_league_stats(league.snapshot())

        assert (stats.total_competitors, stats.total_rounds, stats.total_submissions) == (2, 1, 1)
        assert stats.total_votes == 2
        assert stats.total_points == 7
