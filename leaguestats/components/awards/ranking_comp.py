"""
Shared ranking machinery for award rules.

Every rule reduces the snapshot to a {competitor_id: value} mapping, then hands it
to create_rankings. The mapping's insertion order is the tie-break: rules that seed
every competitor with 0 therefore break ties by Competitor table order.
"""

from __future__ import annotations

from collections.abc import Callable, Iterable, Mapping
from dataclasses import dataclass

from leaguestats.helpers.dto.awards_dto import (
    Award,
    AwardRanking,
    AwardValue,
    FormattedValue,
    SortOrder,
)
from leaguestats.helpers.dto.league_dto import Competitor

Formatter = Callable[[float], str]


@dataclass(frozen=True)
class AwardInfo:
    """Static description of an award."""

    id: str
    name: str
    description: str
    icon: str
    metric_label: str
    sort_order: SortOrder = "desc"


def seeded(competitors: Iterable[Competitor]) -> dict[str, int]:
    """Counter keyed by every competitor id, starting at 0."""
    return {competitor.id: 0 for competitor in competitors}


def create_rankings(
    values: Mapping[str, float],
    competitors_by_id: Mapping[str, Competitor],
    formatter: Formatter,
    sort_order: SortOrder = "desc",
) -> list[AwardRanking]:
    """
    Turn a value mapping into a sorted ranking.

    Keys absent from the Competitor table are dropped. The sort is stable, so equal
    values keep the mapping's insertion order.

    Args:
        values: competitor_id -> metric value
        competitors_by_id: Competitor table keyed by id
        formatter: Renders a value for display
        sort_order: "desc" for highest first, "asc" for lowest first

    Returns:
        Rankings, best first
    """
    entries = [(competitor_id, value) for competitor_id, value in values.items() if competitor_id in competitors_by_id]
    entries.sort(key=lambda entry: entry[1], reverse=sort_order == "desc")
    return [
        AwardRanking(
            competitor=competitors_by_id[competitor_id],
            value=value,
            formatted_value=formatter(value),
        )
        for competitor_id, value in entries
    ]


def build_award(
    info: AwardInfo,
    rankings: list[AwardRanking],
    value: AwardValue,
    winner: Competitor | None = None,
    winner_secondary: Competitor | None = None,
    use_top_ranking: bool = True,
) -> Award:
    """
    Assemble an Award.

    By default the winner is the first ranking entry (None when rankings are empty).
    Pairwise rules pass their own winner pair with use_top_ranking=False.
    """
    if use_top_ranking:
        winner = rankings[0].competitor if rankings else None
    return Award(
        id=info.id,
        name=info.name,
        description=info.description,
        icon=info.icon,
        winner=winner,
        value=value,
        rankings=tuple(rankings),
        metric_label=info.metric_label,
        sort_order=info.sort_order,
        winner_secondary=winner_secondary,
    )


def headline(rankings: list[AwardRanking], render: Formatter, empty: str) -> FormattedValue:
    """Headline text from the top ranking value, `empty` when nobody ranks."""
    if not rankings:
        return FormattedValue(empty)
    return FormattedValue(render(rankings[0].value))
