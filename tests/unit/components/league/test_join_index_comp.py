"""Unit tests for the join index."""

from __future__ import annotations

import pytest

from leaguestats.components.league.join_index_comp import build_join_index_from_snapshot


class TestBuildJoinIndex:
    """Tests for build_join_index."""

    @pytest.mark.unit
    def test_votes_resolve_to_submitter(self, league) -> None:
        league.competitor("a").competitor("b").round("r1")
        league.submit("t1", "a", "r1").vote("t1", "b", 5, "r1").vote("t1", "a", 3, "r1")

        index = league.index()

        assert index.submitter_of[("t1", "r1")] == "a"
        assert index.points_of[("t1", "r1")] == 8
        assert index.voter_count_of[("t1", "r1")] == 2
        assert len(index.resolved_votes) == 2

    @pytest.mark.unit
    def test_dangling_votes_are_dropped(self, league) -> None:
        """A vote for a track that was never submitted is silently ignored."""
        league.competitor("a").competitor("b").round("r1")
        league.submit("t1", "a", "r1").vote("t9", "b", 5, "r1").vote("t1", "b", 2, "r1")

        index = league.index()

        assert [v.spotify_uri for v in index.resolved_votes] == ["t1"]
        assert ("t9", "r1") not in index.points_of
        assert len(index.votes_by_round["r1"]) == 1

    @pytest.mark.unit
    def test_same_track_in_another_round_is_a_different_entry(self, league) -> None:
        """The key is (uri, round): a vote in r2 does not resolve to the r1 submission."""
        league.competitor("a").competitor("b")
        league.submit("t1", "a", "r1").vote("t1", "b", 5, "r2")

        assert league.index().resolved_votes == ()

    @pytest.mark.unit
    def test_duplicate_entry_last_write_wins(self, league) -> None:
        league.competitor("a").competitor("b")
        league.submit("t1", "a", "r1").submit("t1", "b", "r1").vote("t1", "a", 4, "r1")

        index = league.index()

        assert index.submitter_of[("t1", "r1")] == "b"
        assert index.submission_of[("t1", "r1")].submitter_id == "b"

    @pytest.mark.unit
    def test_groups_keep_first_seen_round_order(self, league) -> None:
        league.submit("t1", "a", "r2").submit("t2", "a", "r1").submit("t3", "b", "r2")

        index = league.index()

        assert list(index.submissions_by_round) == ["r2", "r1"]
        assert [s.spotify_uri for s in index.submissions_by_round["r2"]] == ["t1", "t3"]

    @pytest.mark.unit
    def test_unknown_competitor_name(self, league) -> None:
        league.competitor("a", "Alice")
        index = league.index()

        assert index.competitor_name("a") == "Alice"
        assert index.competitor_name("ghost") == "Unknown"

    @pytest.mark.unit
    def test_from_snapshot(self, league) -> None:
        league.competitor("a").submit("t1", "a", "r1").vote("t1", "a", 1, "r1")

        assert build_join_index_from_snapshot(league.snapshot()) == league.index()
