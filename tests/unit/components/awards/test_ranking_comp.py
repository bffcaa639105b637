"""Unit tests for the shared ranking helper."""

from __future__ import annotations

import pytest

from leaguestats.components.awards.ranking_comp import AwardInfo, build_award, create_rankings, headline, seeded
from leaguestats.helpers.dto.awards_dto import FormattedValue
from leaguestats.helpers.dto.league_dto import Competitor

ANN = Competitor("a", "Ann")
BEN = Competitor("b", "Ben")
CY = Competitor("c", "Cy")
BY_ID = {c.id: c for c in (ANN, BEN, CY)}
INFO = AwardInfo("test-award", "Test Award", "For testing", "flask", "Things")


class TestCreateRankings:
    """Tests for create_rankings."""

    @pytest.mark.unit
    def test_descending_and_stable(self) -> None:
        rankings = create_rankings({"a": 2, "b": 5, "c": 2}, BY_ID, str)

        assert [(r.competitor.id, r.value) for r in rankings] == [("b", 5), ("a", 2), ("c", 2)]

    @pytest.mark.unit
    def test_ascending(self) -> None:
        rankings = create_rankings({"a": 2, "b": 5, "c": 1}, BY_ID, str, sort_order="asc")

        assert [r.competitor.id for r in rankings] == ["c", "a", "b"]

    @pytest.mark.unit
    def test_unknown_ids_are_dropped(self) -> None:
        rankings = create_rankings({"ghost": 99, "a": 1}, BY_ID, str)

        assert [r.competitor.id for r in rankings] == ["a"]

    @pytest.mark.unit
    def test_formatter_applied(self) -> None:
        rankings = create_rankings({"a": 3}, BY_ID, lambda v: f"{v} pts")

        assert rankings[0].formatted_value == "3 pts"

    @pytest.mark.unit
    def test_seeded_breaks_ties_by_table_order(self) -> None:
        counts = seeded([CY, ANN, BEN])
        counts["b"] += 1

        rankings = create_rankings(counts, BY_ID, str)

        assert [r.competitor.id for r in rankings] == ["b", "c", "a"]


class TestBuildAward:
    """Tests for build_award and headline."""

    @pytest.mark.unit
    def test_winner_is_top_ranking(self) -> None:
        rankings = create_rankings({"a": 1, "b": 4}, BY_ID, str)

        award = build_award(INFO, rankings, headline(rankings, lambda v: f"{v} things", "none"))

        assert award.winner == BEN
        assert award.value == FormattedValue("4 things")
        assert award.winner_secondary is None
        assert (award.id, award.metric_label, award.sort_order) == ("test-award", "Things", "desc")

    @pytest.mark.unit
    def test_empty_rankings(self) -> None:
        award = build_award(INFO, [], headline([], str, "N/A"))

        assert award.winner is None
        assert award.rankings == ()
        assert award.value == FormattedValue("N/A")

    @pytest.mark.unit
    def test_explicit_winner_pair(self) -> None:
        rankings = create_rankings({"a": 1, "b": 4}, BY_ID, str)

        award = build_award(INFO, rankings, FormattedValue("x"), ANN, CY, use_top_ranking=False)

        assert (award.winner, award.winner_secondary) == (ANN, CY)
