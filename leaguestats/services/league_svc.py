"""
League service - owns the loaded snapshot and the computed report.

ARCHITECTURE:
- Loads the four CSV tables through load_snapshot_workflow
- Computes every derived table through compute_report_workflow
- Caches both until reload(); interfaces never touch workflows directly
"""

from __future__ import annotations

import logging
import threading
from datetime import tzinfo
from typing import TYPE_CHECKING

from leaguestats.components.awards.awards_registry_comp import get_award
from leaguestats.components.catalog.music_catalog_comp import top_tracks
from leaguestats.components.genres.genre_classifier_comp import (
    GenreClassifier,
    default_classifier,
    load_genre_table,
)
from leaguestats.helpers.dto.awards_dto import Award
from leaguestats.helpers.dto.catalog_dto import (
    AlbumStats,
    ArtistStats,
    DayActivity,
    GenreStats,
    MusicStats,
    TrackWithStats,
)
from leaguestats.helpers.dto.config_dto import LeagueSettings
from leaguestats.helpers.dto.league_dto import LeagueSnapshot
from leaguestats.helpers.dto.report_dto import LeagueReport
from leaguestats.helpers.dto.results_dto import LeaderboardEntry, LeagueStats, RoundResult
from leaguestats.helpers.dto.taste_dto import TasteProfile
from leaguestats.helpers.parse_helper import resolve_timezone
from leaguestats.workflows.league import compute_report_workflow, load_snapshot_workflow

if TYPE_CHECKING:
    from leaguestats.services.config_svc import ConfigService

logger = logging.getLogger(__name__)


class LeagueService:
    """
    Service answering every league question from one cached report.

    The snapshot is read on first use and the report computed once per
    snapshot. reload() drops both and re-reads configuration.
    """

    def __init__(self, config_service: ConfigService) -> None:
        """
        Initialize league service.

        Args:
            config_service: Source of data location, timezone and genre table settings
        """
        self._config_service = config_service
        self._lock = threading.RLock()
        self._settings: LeagueSettings | None = None
        self._snapshot: LeagueSnapshot | None = None
        self._report: LeagueReport | None = None
        self._classifier: GenreClassifier | None = None

    # ----------------------------------------------------------------------
    # Settings-derived state
    # ----------------------------------------------------------------------

    @property
    def settings(self) -> LeagueSettings:
        if self._settings is None:
            self._settings = self._config_service.make_league_settings()
        return self._settings

    @property
    def timezone(self) -> tzinfo | None:
        """Configured zone, None for system local time."""
        return resolve_timezone(self.settings.timezone)

    @property
    def classifier(self) -> GenreClassifier:
        """Classifier over the configured genre table (bundled table by default)."""
        if self._classifier is None:
            if self.settings.genre_map_path:
                logger.info("Using custom genre table: %s", self.settings.genre_map_path)
                self._classifier = GenreClassifier(load_genre_table(self.settings.genre_map_path))
            else:
                self._classifier = default_classifier()
        return self._classifier

    # ----------------------------------------------------------------------
    # Snapshot and report
    # ----------------------------------------------------------------------

    def get_snapshot(self) -> LeagueSnapshot:
        """
        Get the loaded league tables, reading them on first use.

        Raises:
            LeagueDataError: If the data directory or a table is missing or unreadable
        """
        with self._lock:
            if self._snapshot is None:
                self._snapshot = load_snapshot_workflow(self.settings)
            return self._snapshot

    def get_report(self) -> LeagueReport:
        """
        Get the full computed report, computing it on first use.

        Raises:
            LeagueDataError: If the league data cannot be loaded
        """
        with self._lock:
            if self._report is None:
                self._report = compute_report_workflow(self.get_snapshot(), self.classifier, self.timezone)
            return self._report

    def reload(self) -> LeagueReport:
        """
        Re-read configuration and league data, then recompute the report.

        Returns:
            The freshly computed report
        """
        with self._lock:
            logger.info("Reloading league data")
            self._config_service.reload()
            self._settings = None
            self._snapshot = None
            self._report = None
            self._classifier = None
            return self.get_report()

    # ----------------------------------------------------------------------
    # Report accessors
    # ----------------------------------------------------------------------

    def get_stats(self) -> LeagueStats:
        return self.get_report().stats

    def get_round_results(self) -> list[RoundResult]:
        return list(self.get_report().round_results)

    def get_leaderboard(self) -> list[LeaderboardEntry]:
        return list(self.get_report().leaderboard)

    def get_awards(self) -> list[Award]:
        return list(self.get_report().awards)

    def get_award(self, award_id: str) -> Award:
        """
        Get one award by id.

        Raises:
            UnknownAwardError: If no award rule has this id
        """
        return get_award(self.get_report().awards, award_id)

    def get_taste_profiles(self) -> list[TasteProfile]:
        return list(self.get_report().taste_profiles)

    def get_music_stats(self) -> MusicStats:
        return self.get_report().music_stats

    def get_top_tracks(self, limit: int | None = None) -> list[TrackWithStats]:
        """
        Get the highest-scoring tracks.

        Args:
            limit: Number of tracks; the configured top_tracks_limit when None
        """
        size = self.settings.top_tracks_limit if limit is None else max(limit, 0)
        return top_tracks(self.get_report().tracks, size)

    def get_artists(self) -> list[ArtistStats]:
        return list(self.get_report().artists)

    def get_albums(self) -> list[AlbumStats]:
        return list(self.get_report().albums)

    def get_genres(self) -> list[GenreStats]:
        return list(self.get_report().genres)

    def get_activity(self) -> list[DayActivity]:
        return list(self.get_report().activity)
