"""Unit tests for LeagueService."""

from __future__ import annotations

import shutil
from pathlib import Path
from zoneinfo import ZoneInfo

import pytest

from leaguestats.helpers.exceptions import LeagueDataError, UnknownAwardError
from leaguestats.services.config_svc import ConfigService
from leaguestats.services.league_svc import LeagueService


@pytest.fixture
def service(fixture_dir: Path) -> LeagueService:
    return LeagueService(ConfigService(overrides={"data_dir": str(fixture_dir), "timezone": "UTC"}))


class TestLeagueService:
    """Tests for the cached report and its accessors."""

    @pytest.mark.unit
    def test_settings_and_zone(self, service, fixture_dir: Path) -> None:
        assert service.settings.data_dir == str(fixture_dir)
        assert service.timezone == ZoneInfo("UTC")

    @pytest.mark.unit
    def test_report_is_cached(self, service) -> None:
        assert service.get_report() is service.get_report()
        assert service.get_snapshot() is service.get_snapshot()

    @pytest.mark.unit
    def test_accessors(self, service) -> None:
        assert service.get_stats().total_points == 38
        assert [r.round.name for r in service.get_round_results()] == ["Opening Round", "Covers, Please"]
        assert service.get_leaderboard()[0].competitor.name == "Bob"
        assert len(service.get_awards()) == 17
        assert len(service.get_taste_profiles()) == 3
        assert service.get_music_stats().top_genre == "Electronic"
        assert len(service.get_artists()) == 4
        assert len(service.get_albums()) == 4
        assert len(service.get_genres()) == 7
        assert len(service.get_activity()) == 7

    @pytest.mark.unit
    def test_get_award(self, service) -> None:
        assert service.get_award("narrator").winner.name == "Bob"

        with pytest.raises(UnknownAwardError):
            service.get_award("best-dressed")

    @pytest.mark.unit
    def test_top_tracks_limits(self, service) -> None:
        assert [t.submission.title for t in service.get_top_tracks(2)] == ["HUMBLE.", "One More Time"]
        assert len(service.get_top_tracks()) == 5
        assert service.get_top_tracks(-1) == []

    @pytest.mark.unit
    def test_configured_top_tracks_limit(self, fixture_dir: Path) -> None:
        config = ConfigService(overrides={"data_dir": str(fixture_dir), "top_tracks_limit": 3})

        assert len(LeagueService(config).get_top_tracks()) == 3

    @pytest.mark.unit
    def test_missing_data_directory(self, tmp_path: Path) -> None:
        service = LeagueService(ConfigService(overrides={"data_dir": str(tmp_path / "nowhere")}))

        with pytest.raises(LeagueDataError):
            service.get_report()

    @pytest.mark.unit
    def test_custom_genre_table(self, fixture_dir: Path, tmp_path: Path) -> None:
        table = tmp_path / "genres.yaml"
        table.write_text('artists:\n  "Daft Punk": ["French House"]\nfallback: ["Misc"]\n', encoding="utf-8")
        config = ConfigService(overrides={"data_dir": str(fixture_dir), "genre_map_path": str(table)})

        genres = [g.genre for g in LeagueService(config).get_genres()]

        assert genres == ["Misc", "French House"]

    @pytest.mark.unit
    def test_reload_reads_new_data(self, fixture_dir: Path, tmp_path: Path) -> None:
        data_dir = tmp_path / "league"
        shutil.copytree(fixture_dir, data_dir)
        service = LeagueService(ConfigService(overrides={"data_dir": str(data_dir), "timezone": "UTC"}))
        first = service.get_report()

        with open(data_dir / "competitors.csv", "a", encoding="utf-8") as f:
            f.write("c4,Dev\n")
        assert service.get_stats().total_competitors == 3

        reloaded = service.reload()

        assert reloaded is not first
        assert reloaded.stats.total_competitors == 4
        assert service.get_report() is reloaded
