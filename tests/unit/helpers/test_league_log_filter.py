"""Unit tests for LeagueLogFilter.

Tests verify automatic identity/role tag derivation and context injection.
"""

from __future__ import annotations

import logging

import pytest

from leaguestats.helpers.logging_helper import (
    LOG_FORMAT,
    LeagueLogFilter,
    clear_log_context,
    configure_logging,
    sanitize_exception_message,
    set_log_context,
)


def _make_record(name: str = "test_svc") -> logging.LogRecord:
    """Create a minimal LogRecord with given logger name."""
    return logging.LogRecord(
        name=name,
        level=logging.INFO,
        pathname="",
        lineno=0,
        msg="Test message",
        args=(),
        exc_info=None,
    )


class TestLeagueLogFilterIdentityRole:
    """Tests for identity and role tag derivation from logger names."""

    @pytest.fixture
    def log_filter(self) -> LeagueLogFilter:
        """Create a fresh filter instance."""
        return LeagueLogFilter()

    @pytest.mark.unit
    @pytest.mark.parametrize(
        ("name", "identity", "role"),
        [
            ("leaguestats.services.league_svc", "[League]", "[Service]"),
            ("leaguestats.workflows.league.compute_report_wf", "[Compute Report]", "[Workflow]"),
            ("leaguestats.components.league.round_results_comp", "[Round Results]", "[Component]"),
            ("leaguestats.helpers.parse_helper", "[Parse]", "[Helper]"),
            ("leaguestats.helpers.dto.awards_dto", "[Awards]", "[DTO]"),
            ("leaguestats.interfaces.api.league_if", "[League]", "[Interface]"),
            ("leaguestats.interfaces.cli.commands.export_cli", "[Export]", "[CLI]"),
        ],
    )
    def test_layer_suffixes(self, log_filter: LeagueLogFilter, name: str, identity: str, role: str) -> None:
        """Each layer suffix should produce [Identity] [Role] tags."""
        record = _make_record(name)
        log_filter.filter(record)

        assert record.league_identity_tag == identity
        assert record.league_role_tag == role

    @pytest.mark.unit
    def test_unknown_suffix_uses_full_name(self, log_filter: LeagueLogFilter) -> None:
        """Unknown suffix should preserve full logger name, empty role tag."""
        record = _make_record("leaguestats.app")
        log_filter.filter(record)

        assert record.league_identity_tag == "leaguestats.app"
        assert record.league_role_tag == ""

    @pytest.mark.unit
    def test_empty_stem_falls_back(self, log_filter: LeagueLogFilter) -> None:
        """Empty stem (e.g., '_svc') should fall back to full name."""
        record = _make_record("leaguestats.weird._svc")
        log_filter.filter(record)

        assert record.league_identity_tag == "leaguestats.weird._svc"
        assert record.league_role_tag == ""

    @pytest.mark.unit
    def test_third_party_logger(self, log_filter: LeagueLogFilter) -> None:
        """Third-party logger should show full name."""
        record = _make_record("uvicorn.access")
        log_filter.filter(record)

        assert record.league_identity_tag == "uvicorn.access"
        assert record.league_role_tag == ""


class TestLeagueLogFilterContext:
    """Tests for dynamic context injection."""

    @pytest.fixture(autouse=True)
    def clear_context(self):
        """Clear context before and after each test."""
        clear_log_context()
        yield
        clear_log_context()

    @pytest.mark.unit
    def test_no_context_empty_string(self) -> None:
        """No context should produce empty context_str."""
        record = _make_record()
        LeagueLogFilter().filter(record)

        assert record.context_str == ""

    @pytest.mark.unit
    def test_context_values_are_formatted(self) -> None:
        """Context values should be rendered in insertion order."""
        set_log_context(command="awards", award="dunce")
        record = _make_record()
        LeagueLogFilter().filter(record)

        assert record.context_str == "[command=awards award=dunce] "

    @pytest.mark.unit
    def test_context_accumulates(self) -> None:
        """Later calls add to, and override, earlier context."""
        set_log_context(command="awards")
        set_log_context(command="rounds", verbose=1)
        record = _make_record()
        LeagueLogFilter().filter(record)

        assert record.context_str == "[command=rounds verbose=1] "


class TestLeagueLogFilterSafety:
    """Tests for filter safety (never suppresses, never crashes)."""

    @pytest.mark.unit
    def test_always_returns_true(self) -> None:
        assert LeagueLogFilter().filter(_make_record()) is True

    @pytest.mark.unit
    def test_non_string_name(self) -> None:
        """A record whose name is not a string still gets tags."""
        record = _make_record()
        record.name = None  # type: ignore[assignment]

        assert LeagueLogFilter().filter(record) is True
        assert record.league_role_tag == ""


class TestConfigureLogging:
    """Tests for root logger configuration."""

    @pytest.fixture(autouse=True)
    def restore_root(self):
        root = logging.getLogger()
        handlers, level = list(root.handlers), root.level
        yield
        root.handlers[:] = handlers
        root.setLevel(level)

    @pytest.mark.unit
    def test_handler_not_duplicated(self) -> None:
        """Calling twice should leave exactly one league handler."""
        configure_logging("INFO")
        configure_logging("DEBUG")

        root = logging.getLogger()
        league_handlers = [h for h in root.handlers if getattr(h, "_league_handler", False)]
        assert len(league_handlers) == 1
        assert root.level == logging.DEBUG
        assert league_handlers[0].formatter._fmt == LOG_FORMAT  # type: ignore[union-attr]

    @pytest.mark.unit
    def test_accepts_numeric_level(self) -> None:
        configure_logging(logging.WARNING)
        assert logging.getLogger().level == logging.WARNING


class TestSanitizeExceptionMessage:
    """Tests for sanitize_exception_message."""

    @pytest.mark.unit
    def test_returns_safe_message(self) -> None:
        error = ValueError("/secret/path/votes.csv")
        assert sanitize_exception_message(error, "League data unavailable") == "League data unavailable"

    @pytest.mark.unit
    def test_logs_original(self, caplog: pytest.LogCaptureFixture) -> None:
        with caplog.at_level(logging.ERROR):
            sanitize_exception_message(ValueError("boom"))
        assert "boom" in caplog.text
