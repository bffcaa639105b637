"""Unit tests for the activity calendar."""

from __future__ import annotations

from datetime import date, timedelta, timezone

import pytest

from leaguestats.components.catalog.activity_comp import compute_activity


@pytest.fixture
def busy_league(league):
    league.competitor("a", "Ann").competitor("b", "Ben").round("r1", name="Opening")
    league.submit("t1", "a", "r1", created="2024-01-01T23:30:00Z", title="Late One")
    league.submit("t2", "b", "r1", created="2024-01-02T01:00:00Z", title="Early Two")
    league.submit("t3", "b", "r9", created="", title="Undated")
    league.vote("t1", "b", 5, "r1", created="2024-01-02T12:00:00Z")
    league.vote("t2", "a", 3, "r1", created="2024-01-02T09:00:00Z")
    league.vote("t2", "b", 1, "r1", created="bad")
    league.vote("t7", "a", 8, "r1", created="2024-01-05T09:00:00Z")
    return league


class TestComputeActivity:
    """Tests for compute_activity."""

    @pytest.mark.unit
    def test_days_in_utc(self, busy_league) -> None:
        days = compute_activity(busy_league.rounds, busy_league.submissions, busy_league.index(), timezone.utc)

        assert [day.day for day in days] == [date(2024, 1, 1), date(2024, 1, 2)]
        assert [s.title for s in days[0].submissions] == ["Late One"]
        assert days[0].votes == ()
        assert [(v.voter, v.points) for v in days[1].votes] == [("Ann", 3), ("Ben", 5)]

    @pytest.mark.unit
    def test_zone_moves_records_across_midnight(self, busy_league) -> None:
        two_hours_ahead = timezone(timedelta(hours=2))

        days = compute_activity(busy_league.rounds, busy_league.submissions, busy_league.index(), two_hours_ahead)

        assert [day.day for day in days] == [date(2024, 1, 2)]
        assert [s.title for s in days[0].submissions] == ["Late One", "Early Two"]
        assert days[0].submissions[0].time.hour == 1

    @pytest.mark.unit
    def test_entries_carry_names(self, busy_league) -> None:
        days = compute_activity(busy_league.rounds, busy_league.submissions, busy_league.index(), timezone.utc)

        first = days[0].submissions[0]
        assert (first.submitter, first.round, first.artists) == ("Ann", "Opening", "Somebody")
        assert days[1].votes[0].round == "Opening"

    @pytest.mark.unit
    def test_unknown_round_name(self, league) -> None:
        league.competitor("a").submit("t", "a", "r404", created="2024-03-01T10:00:00Z")

        days = compute_activity(league.rounds, league.submissions, league.index(), timezone.utc)

        assert days[0].submissions[0].round == "Unknown Round"

    @pytest.mark.unit
    def test_empty(self, league) -> None:
        assert compute_activity([], [], league.index(), timezone.utc) == []
