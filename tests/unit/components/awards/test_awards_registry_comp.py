"""Unit tests for the awards registry."""

from __future__ import annotations

import pytest

from leaguestats.components.awards.awards_registry_comp import (
    AWARD_IDS,
    compute_award,
    compute_awards,
    get_award,
)
from leaguestats.helpers.exceptions import UnknownAwardError

EXPECTED_ORDER = (
    "overall-winner",
    "most-wins",
    "octopus",
    "generous-octopus",
    "close-shaver",
    "public-enemy",
    "best-buddies",
    "one-sided-love",
    "sworn-enemies",
    "contrarian",
    "most-consistent",
    "narrator",
    "fall-from-grace",
    "redemption-arc",
    "night-owl",
    "dunce",
    "eager-beaver",
)


class TestAwardsRegistry:
    """Tests for running and looking up award rules."""

    @pytest.mark.unit
    def test_declaration_order(self) -> None:
        assert AWARD_IDS == EXPECTED_ORDER

    @pytest.mark.unit
    def test_compute_awards_on_empty_league(self, league) -> None:
        awards = compute_awards(league.context())

        assert tuple(award.id for award in awards) == EXPECTED_ORDER
        assert all(award.winner is None for award in awards)

    @pytest.mark.unit
    def test_compute_single_award(self, league) -> None:
        league.competitor("a").competitor("b").round("r1").submit("t", "a", "r1").vote("t", "b", 8, "r1")

        award = compute_award(league.context(), "octopus")

        assert award.id == "octopus"
        assert award.winner.id == "a"

    @pytest.mark.unit
    def test_compute_unknown_award(self, league) -> None:
        with pytest.raises(UnknownAwardError):
            compute_award(league.context(), "best-dressed")

    @pytest.mark.unit
    def test_get_award(self, league) -> None:
        awards = compute_awards(league.context())

        assert get_award(awards, "narrator").name == "The Narrator"
        with pytest.raises(UnknownAwardError, match="nope"):
            get_award(awards, "nope")
