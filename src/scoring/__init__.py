"""
Scoring Module for the Hockey SEO Opportunity Analyzer

1. **Keyword categories**
   One classifier shared by every consumer of keyword semantics.

2. **Opportunity Score** (3-10)
   Additive score from keyword intent, team position and reseller presence.

Example Usage:
    from src.scoring import calculate_opportunity_score

    score = calculate_opportunity_score(
        "first time at td garden",
        team_rank=-1,
        competitors=["reddit.com", "tripadvisor.com"],
    )
"""

from .keywords import (
    KeywordCategory,
    CATEGORY_PHRASES,
    categorize_keyword,
    is_first_timer,
)

from .helpers import (
    BASE_SCORE,
    MIN_SCORE,
    MAX_SCORE,
    RANK_ADJUSTMENTS,
    get_rank_tier,
    get_rank_adjustment,
    clamp_score,
)

from .opportunity import (
    OpportunityBreakdown,
    calculate_opportunity_breakdown,
    calculate_opportunity_score,
)

__all__ = [
    # Keywords
    "KeywordCategory",
    "CATEGORY_PHRASES",
    "categorize_keyword",
    "is_first_timer",

    # Helpers
    "BASE_SCORE",
    "MIN_SCORE",
    "MAX_SCORE",
    "RANK_ADJUSTMENTS",
    "get_rank_tier",
    "get_rank_adjustment",
    "clamp_score",

    # Opportunity
    "OpportunityBreakdown",
    "calculate_opportunity_breakdown",
    "calculate_opportunity_score",
]
