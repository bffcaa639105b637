"""
Awards package.
"""

from .awards_registry_comp import AWARD_IDS, AWARD_RULES, compute_award, compute_awards, get_award
from .ranking_comp import AwardInfo, build_award, create_rankings, seeded

__all__ = [
    "AWARD_IDS",
    "AWARD_RULES",
    "AwardInfo",
    "build_award",
    "compute_award",
    "compute_awards",
    "create_rankings",
    "get_award",
    "seeded",
]
