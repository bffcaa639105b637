"""
Taste package.
"""

from .taste_profile_comp import (
    ARCHETYPE_POOL,
    FALLBACK_ARCHETYPE,
    assign_archetypes,
    compute_taste_profiles,
    score_archetype,
)

__all__ = [
    "ARCHETYPE_POOL",
    "FALLBACK_ARCHETYPE",
    "assign_archetypes",
    "compute_taste_profiles",
    "score_archetype",
]
