"""
League package: join index, round standings, leaderboard and totals.
"""

from .join_index_comp import build_join_index, build_join_index_from_snapshot
from .leaderboard_comp import compute_leaderboard, points_by_competitor_by_round
from .league_stats_comp import compute_league_stats
from .round_results_comp import compute_round_results, points_by_submitter

__all__ = [
    "build_join_index",
    "build_join_index_from_snapshot",
    "compute_leaderboard",
    "compute_league_stats",
    "compute_round_results",
    "points_by_competitor_by_round",
    "points_by_submitter",
]
