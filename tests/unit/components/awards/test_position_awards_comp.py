"""Unit tests for standing-position awards."""

from __future__ import annotations

import pytest

from leaguestats.components.awards.position_awards_comp import (
    fall_from_grace_award,
    half_average_positions,
    most_consistent_award,
    positions_by_competitor,
    redemption_arc_award,
    split_rounds_chronologically,
)
from leaguestats.helpers.dto.awards_dto import FormattedValue


def _season(league, rounds: int):
    """
    Ann leads the first half of the season and Ben the second; Cy only votes.

    Rounds are listed latest first so that table order and time order disagree.
    """
    league.competitor("a", "Ann").competitor("b", "Ben").competitor("c", "Cy")
    cut = rounds // 2
    for number in range(rounds, 0, -1):
        round_id = f"r{number}"
        league.round(round_id, created=f"2024-01-{number:02d}T12:00:00Z")
        league.submit(f"a{number}", "a", round_id).submit(f"b{number}", "b", round_id)
        early = number <= cut
        league.vote(f"a{number}", "c", 5 if early else 3, round_id)
        league.vote(f"b{number}", "c", 3 if early else 5, round_id)
    return league


class TestSplitRounds:
    """Tests for the chronological half split."""

    @pytest.mark.unit
    def test_split_follows_creation_time(self, league) -> None:
        first, second = split_rounds_chronologically(_season(league, 6).context())

        assert first == {"r1", "r2", "r3"}
        assert second == {"r4", "r5", "r6"}

    @pytest.mark.unit
    def test_odd_count_puts_extra_round_late(self, league) -> None:
        first, second = split_rounds_chronologically(_season(league, 5).context())

        assert first == {"r1", "r2"}
        assert second == {"r3", "r4", "r5"}

    @pytest.mark.unit
    def test_unparseable_timestamps_sort_first(self, league) -> None:
        league.round("late", created="2024-02-01T00:00:00Z").round("unknown", created="garbage")

        first, second = split_rounds_chronologically(league.context())

        assert first == {"unknown"}
        assert second == {"late"}

    @pytest.mark.unit
    def test_positions_are_one_indexed(self, league) -> None:
        positions = positions_by_competitor(_season(league, 6).context())

        assert positions == {"b": [1, 1, 1, 2, 2, 2], "a": [2, 2, 2, 1, 1, 1]}


class TestMostConsistent:
    """Tests for most-consistent."""

    @pytest.mark.unit
    def test_population_variance(self, league) -> None:
        award = most_consistent_award(_season(league, 6).context())

        assert [(r.competitor.id, r.formatted_value) for r in award.rankings] == [
            ("b", "σ²=0.25"),
            ("a", "σ²=0.25"),
        ]
        assert award.value == FormattedValue("σ² = 0.25")
        assert award.winner.id == "b"

    @pytest.mark.unit
    def test_needs_five_rounds(self, league) -> None:
        award = most_consistent_award(_season(league, 4).context())

        assert award.winner is None
        assert award.rankings == ()
        assert award.value == FormattedValue("N/A")


class TestHalfSeasonAwards:
    """Tests for fall-from-grace and redemption-arc."""

    @pytest.mark.unit
    def test_half_averages(self, league) -> None:
        averages = half_average_positions(_season(league, 6).context())

        assert averages == {"a": (1.0, 2.0), "b": (2.0, 1.0)}

    @pytest.mark.unit
    def test_fall_from_grace(self, league) -> None:
        award = fall_from_grace_award(_season(league, 6).context())

        assert award.winner.id == "a"
        assert award.value == FormattedValue("1.0 positions lower")
        assert [r.formatted_value for r in award.rankings] == ["+1.0 pos", "-1.0 pos"]

    @pytest.mark.unit
    def test_redemption_arc(self, league) -> None:
        award = redemption_arc_award(_season(league, 6).context())

        assert award.winner.id == "b"
        assert award.value == FormattedValue("1.0 positions higher")

    @pytest.mark.unit
    def test_needs_three_rounds_per_half(self, league) -> None:
        ctx = _season(league, 5).context()

        assert half_average_positions(ctx) == {}
        assert fall_from_grace_award(ctx).value == FormattedValue("N/A")
        assert redemption_arc_award(ctx).winner is None
