"""Workflow for computing the complete league report.

Builds the join index once, then runs every calculator over the same snapshot:
standings, leaderboard, awards, taste profiles, music catalog and activity.
"""

from __future__ import annotations

import logging
from datetime import tzinfo

from leaguestats.components.awards.awards_registry_comp import compute_awards
from leaguestats.components.catalog.activity_comp import compute_activity
from leaguestats.components.catalog.music_catalog_comp import (
    compute_album_stats,
    compute_artist_stats,
    compute_genre_stats,
    compute_music_stats,
    compute_tracks,
)
from leaguestats.components.genres.genre_classifier_comp import GenreClassifier
from leaguestats.components.league.join_index_comp import build_join_index
from leaguestats.components.league.leaderboard_comp import compute_leaderboard
from leaguestats.components.league.league_stats_comp import compute_league_stats
from leaguestats.components.league.round_results_comp import compute_round_results
from leaguestats.components.taste.taste_profile_comp import compute_taste_profiles
from leaguestats.helpers.dto.awards_dto import AwardContext
from leaguestats.helpers.dto.league_dto import LeagueSnapshot
from leaguestats.helpers.dto.report_dto import LeagueReport

logger = logging.getLogger(__name__)


def compute_report_workflow(
    snapshot: LeagueSnapshot,
    classifier: GenreClassifier,
    tz: tzinfo | None = None,
) -> LeagueReport:
    """Compute every derived table for a snapshot.

    Pure: the same snapshot, classifier and zone always give an equal report.

    Args:
        snapshot: Frozen league tables.
        classifier: Genre classifier for artist credits.
        tz: Zone for time-of-day and calendar-day rules; system local time when None.

    Returns:
        LeagueReport bundling all outputs.
    """
    # Step 1: Shared join index
    index = build_join_index(snapshot.competitors, snapshot.submissions, snapshot.votes)

    # Step 2: Standings and leaderboard
    round_results = tuple(compute_round_results(snapshot.rounds, index))
    leaderboard = tuple(compute_leaderboard(snapshot.competitors, index, round_results))

    # Step 3: Awards over one shared context
    ctx = AwardContext(
        competitors=snapshot.competitors,
        rounds=snapshot.rounds,
        submissions=snapshot.submissions,
        index=index,
        round_results=round_results,
        tz=tz,
    )
    awards = tuple(compute_awards(ctx))

    # Step 4: Taste and catalog
    taste_profiles = tuple(compute_taste_profiles(snapshot.competitors, snapshot.submissions, index, classifier))
    artists = compute_artist_stats(snapshot.submissions, index, classifier)
    albums = compute_album_stats(snapshot.submissions, index)
    genres = compute_genre_stats(artists)

    report = LeagueReport(
        stats=compute_league_stats(snapshot),
        round_results=round_results,
        leaderboard=leaderboard,
        awards=awards,
        taste_profiles=taste_profiles,
        music_stats=compute_music_stats(snapshot.submissions, artists, albums, genres),
        artists=tuple(artists),
        albums=tuple(albums),
        genres=tuple(genres),
        tracks=tuple(compute_tracks(snapshot.submissions, index)),
        activity=tuple(compute_activity(snapshot.rounds, snapshot.submissions, index, tz)),
    )
    logger.info("Computed league report: %d rounds, %d awards", len(round_results), len(awards))
    return report
