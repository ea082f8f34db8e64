"""
Scoring Helper Functions and Constants

Score bounds, keyword bonuses and rank adjustments used by the
opportunity scorer.
"""

from typing import Dict

from src.models import TEAM_RANK_NOT_FOUND
from .keywords import KeywordCategory


# ============================================================================
# SCORE BOUNDS
# ============================================================================

BASE_SCORE = 5
MIN_SCORE = 3
MAX_SCORE = 10

# Bonus for any competitor that is a known ticket reseller
RESELLER_BONUS = 1


# ============================================================================
# KEYWORD BONUSES
# ============================================================================

# Applied once per group; "first time" and "what to expect" share one bonus,
# as do "tickets" and "cheap".
FIRST_TIMER_BONUS = 3
PARKING_BONUS = 2
TICKETS_OR_CHEAP_BONUS = 2
SEATING_BONUS = 1

KEYWORD_BONUS_GROUPS = (
    ((KeywordCategory.FIRST_TIME, KeywordCategory.WHAT_TO_EXPECT), FIRST_TIMER_BONUS),
    ((KeywordCategory.PARKING,), PARKING_BONUS),
    ((KeywordCategory.TICKETS, KeywordCategory.CHEAP), TICKETS_OR_CHEAP_BONUS),
    ((KeywordCategory.SEATING,), SEATING_BONUS),
)


# ============================================================================
# RANK ADJUSTMENTS
# ============================================================================

RANK_ADJUSTMENTS: Dict[str, int] = {
    "not_found": 3,     # Team not ranking at all
    "page_two": 2,      # Position > 10
    "bottom_page": 1,   # Positions 6-10
    "mid_page": 0,      # Positions 4-5
    "top_three": -1,    # Already ranking well
}


def get_rank_tier(team_rank: int) -> str:
    """
    Bucket a team rank into an adjustment tier.

    Args:
        team_rank: 1-based SERP position or TEAM_RANK_NOT_FOUND

    Returns:
        Key into RANK_ADJUSTMENTS
    """
    if team_rank == TEAM_RANK_NOT_FOUND:
        return "not_found"
    if team_rank > 10:
        return "page_two"
    if team_rank > 5:
        return "bottom_page"
    if team_rank <= 3:
        return "top_three"
    return "mid_page"


def get_rank_adjustment(team_rank: int) -> int:
    """Score adjustment for the team's current position."""
    return RANK_ADJUSTMENTS[get_rank_tier(team_rank)]


def clamp_score(score: int) -> int:
    """Clamp a raw score into [MIN_SCORE, MAX_SCORE]."""
    return min(max(score, MIN_SCORE), MAX_SCORE)
