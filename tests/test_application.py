"""
Smoke tests for the Application lifecycle.

The league service is pointed at the fixture export or at a missing directory;
start() must not raise either way.
"""

import logging
from pathlib import Path

import pytest

from leaguestats.services.config_svc import INTERNAL_PORT, ConfigService


@pytest.fixture(autouse=True)
def restore_root_logger():
    root = logging.getLogger()
    handlers, level = list(root.handlers), root.level
    yield
    root.handlers[:] = handlers
    root.setLevel(level)


def _application(data_dir: Path):
    from leaguestats.app import Application

    return Application(ConfigService(overrides={"data_dir": str(data_dir), "log_level": "warning"}))


def test_application_services(fixture_dir):
    """Config and league services are registered at construction."""
    app = _application(fixture_dir)

    assert set(app.services) == {"config", "league"}
    assert app.get_service("config").get("data_dir") == str(fixture_dir)
    assert app.api_port == INTERNAL_PORT
    assert app.log_level == "warning"


def test_unknown_service(fixture_dir):
    """Unknown service names raise KeyError."""
    app = _application(fixture_dir)

    with pytest.raises(KeyError, match="queue"):
        app.get_service("queue")


def test_application_lifecycle(fixture_dir):
    """start() warms the report; stop() is idempotent."""
    app = _application(fixture_dir)
    assert not app.is_running()

    app.start()
    assert app.is_running()
    assert app.get_service("league").get_report().stats.total_votes == 9

    app.stop()
    app.stop()
    assert not app.is_running()


def test_start_survives_missing_data(tmp_path):
    """Missing league data is logged at startup, not raised."""
    app = _application(tmp_path / "nowhere")

    app.start()

    assert app.is_running()
