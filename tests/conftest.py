"""
Pytest fixtures and configuration for the test suite.

Strategy:
- Unit tests build tiny leagues in memory with the `league` builder
- Workflow, service and interface tests read the CSV export in fixtures/league
- Configuration never leaks in from the machine running the tests
"""

from __future__ import annotations

import os
import sys
from datetime import timezone
from pathlib import Path

import pytest

# Add project root to path so tests can import leaguestats package
project_root = Path(__file__).parent.parent
if str(project_root) not in sys.path:
    sys.path.insert(0, str(project_root))

from leaguestats.components.league.join_index_comp import build_join_index  # noqa: E402
from leaguestats.components.league.round_results_comp import compute_round_results  # noqa: E402
from leaguestats.helpers.dto.awards_dto import AwardContext  # noqa: E402
from leaguestats.helpers.dto.config_dto import LeagueSettings  # noqa: E402
from leaguestats.helpers.dto.league_dto import (  # noqa: E402
    Competitor,
    JoinIndex,
    LeagueSnapshot,
    Round,
    Submission,
    Vote,
)

FIXTURE_LEAGUE_DIR = Path(__file__).parent / "fixtures" / "league"


# ──────────────────────────────────────────────────────────────────────
# In-memory league builder
# ──────────────────────────────────────────────────────────────────────


class LeagueBuilder:
    """Accumulates records in input order and derives the engine inputs from them."""

    def __init__(self) -> None:
        self.competitors: list[Competitor] = []
        self.rounds: list[Round] = []
        self.submissions: list[Submission] = []
        self.votes: list[Vote] = []

    def competitor(self, competitor_id: str, name: str | None = None) -> LeagueBuilder:
        self.competitors.append(Competitor(id=competitor_id, name=name or competitor_id.title()))
        return self

    def round(self, round_id: str, created: str = "", name: str | None = None) -> LeagueBuilder:
        self.rounds.append(Round(id=round_id, created=created, name=name or round_id.upper()))
        return self

    def submit(
        self,
        uri: str,
        submitter_id: str,
        round_id: str,
        artists: str = "Somebody",
        created: str = "",
        album: str = "Album",
        title: str | None = None,
    ) -> LeagueBuilder:
        self.submissions.append(
            Submission(
                spotify_uri=uri,
                title=title or uri,
                album=album,
                artists=artists,
                submitter_id=submitter_id,
                created=created,
                comment="",
                round_id=round_id,
            )
        )
        return self

    def vote(
        self,
        uri: str,
        voter_id: str,
        points: int,
        round_id: str,
        created: str = "",
        comment: str = "",
    ) -> LeagueBuilder:
        self.votes.append(
            Vote(
                spotify_uri=uri,
                voter_id=voter_id,
                created=created,
                points=points,
                comment=comment,
                round_id=round_id,
            )
        )
        return self

    def snapshot(self) -> LeagueSnapshot:
        return LeagueSnapshot(
            competitors=tuple(self.competitors),
            rounds=tuple(self.rounds),
            submissions=tuple(self.submissions),
            votes=tuple(self.votes),
        )

    def index(self) -> JoinIndex:
        return build_join_index(self.competitors, self.submissions, self.votes)

    def context(self, tz=timezone.utc) -> AwardContext:
        index = self.index()
        return AwardContext(
            competitors=tuple(self.competitors),
            rounds=tuple(self.rounds),
            submissions=tuple(self.submissions),
            index=index,
            round_results=tuple(compute_round_results(self.rounds, index)),
            tz=tz,
        )


# ──────────────────────────────────────────────────────────────────────
# Fixtures
# ──────────────────────────────────────────────────────────────────────


@pytest.fixture(autouse=True)
def isolated_config(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    """Drop LEAGUESTATS_* variables and run from an empty directory (no ./config/config.yaml)."""
    for key in list(os.environ):
        if key.startswith("LEAGUESTATS_"):
            monkeypatch.delenv(key, raising=False)
    monkeypatch.chdir(tmp_path)


@pytest.fixture
def league() -> LeagueBuilder:
    """Empty in-memory league."""
    return LeagueBuilder()


@pytest.fixture
def fixture_dir() -> Path:
    """Directory holding the four-table CSV export used across the suite."""
    return FIXTURE_LEAGUE_DIR


@pytest.fixture
def league_settings(fixture_dir: Path) -> LeagueSettings:
    """Settings pointing at the fixture export, evaluated in UTC."""
    return LeagueSettings(
        data_dir=str(fixture_dir),
        competitors_file="competitors.csv",
        rounds_file="rounds.csv",
        submissions_file="submissions.csv",
        votes_file="votes.csv",
        timezone="UTC",
        genre_map_path=None,
        top_tracks_limit=20,
    )
