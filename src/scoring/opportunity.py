"""
Opportunity Score Calculator

Calculates a bounded score (3-10) representing how worthwhile it is for a
team to create content targeting a keyword, considering:

1. Keyword intent - first-timer, parking, tickets/cheap, seating bonuses
2. Team position - not ranking / page two / bottom of page one / top three
3. Competitors - ticket resellers occupying the top results

Formula:
    Opportunity_Score = clamp(
        5 + Keyword_Bonuses + Rank_Adjustment + Reseller_Bonus,
        3, 10
    )

All terms are additive; the clamp is applied once at the end.
"""

import logging
from dataclasses import dataclass, field
from typing import Dict, List

from src.utils.domain_filter import has_ticket_reseller
from .helpers import (
    BASE_SCORE,
    KEYWORD_BONUS_GROUPS,
    RESELLER_BONUS,
    clamp_score,
    get_rank_adjustment,
)
from .keywords import categorize_keyword

logger = logging.getLogger(__name__)


@dataclass
class OpportunityBreakdown:
    """Score with its additive components."""
    keyword: str
    score: int
    raw_score: int
    keyword_bonus: int
    rank_adjustment: int
    reseller_bonus: int
    components: Dict[str, int] = field(default_factory=dict)


def calculate_opportunity_breakdown(
    keyword: str,
    team_rank: int,
    competitors: List[str],
) -> OpportunityBreakdown:
    """
    Calculate the opportunity score together with its components.

    Args:
        keyword: Search keyword
        team_rank: 1-based SERP position of the team, or TEAM_RANK_NOT_FOUND
        competitors: Top competitor domains

    Returns:
        OpportunityBreakdown with the clamped score
    """
    categories = categorize_keyword(keyword)

    components: Dict[str, int] = {}
    for group, bonus in KEYWORD_BONUS_GROUPS:
        if any(category in categories for category in group):
            components[group[0].value] = bonus
    keyword_bonus = sum(components.values())

    rank_adjustment = get_rank_adjustment(team_rank)
    reseller_bonus = RESELLER_BONUS if has_ticket_reseller(competitors) else 0

    raw_score = BASE_SCORE + keyword_bonus + rank_adjustment + reseller_bonus

    return OpportunityBreakdown(
        keyword=keyword,
        score=clamp_score(raw_score),
        raw_score=raw_score,
        keyword_bonus=keyword_bonus,
        rank_adjustment=rank_adjustment,
        reseller_bonus=reseller_bonus,
        components=components,
    )


def calculate_opportunity_score(
    keyword: str,
    team_rank: int,
    competitors: List[str],
) -> int:
    """
    Calculate the Opportunity Score for a keyword.

    Pure and deterministic: identical inputs always give the same score.

    Args:
        keyword: Search keyword
        team_rank: 1-based SERP position of the team, or TEAM_RANK_NOT_FOUND
        competitors: Top competitor domains

    Returns:
        Integer score in [3, 10]
    """
    breakdown = calculate_opportunity_breakdown(keyword, team_rank, competitors)
    logger.debug(
        f"Opportunity for '{keyword}': {breakdown.score} "
        f"(raw={breakdown.raw_score}, rank_adj={breakdown.rank_adjustment})"
    )
    return breakdown.score
