"""
Awards registry.

Fixes the declaration order of the seventeen award rules and runs them over one
shared AwardContext. Rules are independent: none reads another's output.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Sequence

from leaguestats.components.awards.behaviour_awards_comp import (
    contrarian_award,
    dunce_award,
    eager_beaver_award,
    narrator_award,
    night_owl_award,
)
from leaguestats.components.awards.pairwise_awards_comp import (
    best_buddies_award,
    one_sided_love_award,
    sworn_enemies_award,
)
from leaguestats.components.awards.points_awards_comp import (
    close_shaver_award,
    generous_octopus_award,
    most_wins_award,
    octopus_award,
    overall_winner_award,
    public_enemy_award,
)
from leaguestats.components.awards.position_awards_comp import (
    fall_from_grace_award,
    most_consistent_award,
    redemption_arc_award,
)
from leaguestats.helpers.dto.awards_dto import Award, AwardContext
from leaguestats.helpers.exceptions import UnknownAwardError

logger = logging.getLogger(__name__)

AwardRule = Callable[[AwardContext], Award]

AWARD_RULES: tuple[tuple[str, AwardRule], ...] = (
    ("overall-winner", overall_winner_award),
    ("most-wins", most_wins_award),
    ("octopus", octopus_award),
    ("generous-octopus", generous_octopus_award),
    ("close-shaver", close_shaver_award),
    ("public-enemy", public_enemy_award),
    ("best-buddies", best_buddies_award),
    ("one-sided-love", one_sided_love_award),
    ("sworn-enemies", sworn_enemies_award),
    ("contrarian", contrarian_award),
    ("most-consistent", most_consistent_award),
    ("narrator", narrator_award),
    ("fall-from-grace", fall_from_grace_award),
    ("redemption-arc", redemption_arc_award),
    ("night-owl", night_owl_award),
    ("dunce", dunce_award),
    ("eager-beaver", eager_beaver_award),
)

AWARD_IDS: tuple[str, ...] = tuple(award_id for award_id, _ in AWARD_RULES)


def compute_awards(ctx: AwardContext) -> list[Award]:
    """Run every award rule, in declaration order."""
    awards = [rule(ctx) for _, rule in AWARD_RULES]
    logger.debug("Computed %d awards", len(awards))
    return awards


def compute_award(ctx: AwardContext, award_id: str) -> Award:
    """
    Run a single award rule.

    Raises:
        UnknownAwardError: If no rule has this id
    """
    for rule_id, rule in AWARD_RULES:
        if rule_id == award_id:
            return rule(ctx)
    raise UnknownAwardError(award_id)


def get_award(awards: Sequence[Award], award_id: str) -> Award:
    """
    Find an already computed award by id.

    Raises:
        UnknownAwardError: If the id is not among the awards
    """
    for award in awards:
        if award.id == award_id:
            return award
    raise UnknownAwardError(award_id)
