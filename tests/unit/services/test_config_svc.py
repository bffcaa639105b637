"""Unit tests for ConfigService."""

from __future__ import annotations

from pathlib import Path

import pytest

from leaguestats.services.config_svc import ConfigService


def _write_yaml(path: Path, text: str) -> Path:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(text, encoding="utf-8")
    return path


class TestConfigComposition:
    """Tests for layering defaults, YAML, overrides and environment."""

    @pytest.mark.unit
    def test_defaults(self) -> None:
        settings = ConfigService().make_league_settings()

        assert settings.data_dir == "data"
        assert settings.votes_file == "votes.csv"
        assert settings.timezone is None
        assert settings.genre_map_path is None
        assert settings.top_tracks_limit == 20

    @pytest.mark.unit
    def test_repo_local_yaml(self, tmp_path: Path) -> None:
        _write_yaml(tmp_path / "config" / "config.yaml", "data_dir: /srv/league\ntimezone: Europe/Dublin\n")

        settings = ConfigService().make_league_settings()

        assert settings.data_dir == "/srv/league"
        assert settings.timezone == "Europe/Dublin"

    @pytest.mark.unit
    def test_config_path_env_and_explicit_file(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        env_file = _write_yaml(tmp_path / "env.yaml", "data_dir: from-env-file\ntop_tracks_limit: 5\n")
        explicit = _write_yaml(tmp_path / "explicit.yaml", "data_dir: from-explicit\n")
        monkeypatch.setenv("LEAGUESTATS_CONFIG_PATH", str(env_file))

        settings = ConfigService(config_path=str(explicit)).make_league_settings()

        assert settings.data_dir == "from-explicit"
        assert settings.top_tracks_limit == 5

    @pytest.mark.unit
    def test_overrides_beat_yaml(self, tmp_path: Path) -> None:
        explicit = _write_yaml(tmp_path / "explicit.yaml", "data_dir: from-yaml\ntimezone: UTC\n")

        service = ConfigService(overrides={"data_dir": "from-flag", "timezone": None}, config_path=str(explicit))
        settings = service.make_league_settings()

        assert settings.data_dir == "from-flag"
        assert settings.timezone == "UTC"

    @pytest.mark.unit
    def test_environment_beats_overrides(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("LEAGUESTATS_DATA_DIR", "from-env")
        monkeypatch.setenv("LEAGUESTATS_TOP_TRACKS_LIMIT", "50")

        service = ConfigService(overrides={"data_dir": "from-flag"})

        assert service.get("data_dir") == "from-env"
        assert service.get("top_tracks_limit") == 50

    @pytest.mark.unit
    def test_unknown_environment_keys_ignored(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("LEAGUESTATS_API_PORT", "9999")

        assert ConfigService().get("api_port") is None

    @pytest.mark.unit
    def test_missing_explicit_file_keeps_defaults(self, tmp_path: Path) -> None:
        service = ConfigService(config_path=str(tmp_path / "absent.yaml"))

        assert service.get("data_dir") == "data"

    @pytest.mark.unit
    @pytest.mark.parametrize("text", ["data_dir: [unclosed\n", "- a\n- list\n"])
    def test_bad_yaml_ignored(self, tmp_path: Path, text: str) -> None:
        explicit = _write_yaml(tmp_path / "bad.yaml", text)

        assert ConfigService(config_path=str(explicit)).get("data_dir") == "data"


class TestConfigAccess:
    """Tests for get, reload and settings validation."""

    @pytest.mark.unit
    def test_dotted_get(self, tmp_path: Path) -> None:
        explicit = _write_yaml(tmp_path / "nested.yaml", "extra:\n  depth:\n    value: 3\n")
        service = ConfigService(config_path=str(explicit))

        assert service.get("extra.depth.value") == 3
        assert service.get("extra.missing", "fallback") == "fallback"
        assert service.get("data_dir.deeper", "fallback") == "fallback"

    @pytest.mark.unit
    def test_config_is_cached_until_reload(self, tmp_path: Path) -> None:
        explicit = _write_yaml(tmp_path / "live.yaml", "data_dir: first\n")
        service = ConfigService(config_path=str(explicit))
        assert service.get("data_dir") == "first"

        explicit.write_text("data_dir: second\n", encoding="utf-8")
        assert service.get("data_dir") == "first"

        assert service.reload().config["data_dir"] == "second"
        assert service.get("data_dir") == "second"

    @pytest.mark.unit
    @pytest.mark.parametrize(("raw", "expected"), [("many", 20), (-4, 0), ("7", 7)])
    def test_top_tracks_limit_validated(self, tmp_path: Path, raw, expected: int) -> None:
        service = ConfigService(overrides={"top_tracks_limit": raw})

        assert service.make_league_settings().top_tracks_limit == expected

    @pytest.mark.unit
    def test_blank_timezone_means_local(self) -> None:
        settings = ConfigService(overrides={"timezone": ""}).make_league_settings()

        assert settings.timezone is None
