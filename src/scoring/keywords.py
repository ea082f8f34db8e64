"""
Keyword Category Classifier

Single place where keyword text is inspected. Every consumer (opportunity
score, gap type, content suggestion, LLM strategy, simulated volume and
competitors) asks for the category set and applies its own priority order.

Categories are not mutually exclusive: "cheap bruins tickets parking"
is CHEAP, TICKETS and PARKING at once.
"""

from enum import Enum
from typing import Dict, FrozenSet, Tuple


class KeywordCategory(str, Enum):
    """Keyword signals that drive scoring and strategy."""
    FIRST_TIME = "first_time"
    WHAT_TO_EXPECT = "what_to_expect"
    PARKING = "parking"
    TICKETS = "tickets"
    CHEAP = "cheap"
    SEATING = "seating"
    ARENA = "arena"


# Phrase that must occur in the keyword for each category (case-sensitive)
CATEGORY_PHRASES: Dict[KeywordCategory, str] = {
    KeywordCategory.FIRST_TIME: "first time",
    KeywordCategory.WHAT_TO_EXPECT: "what to expect",
    KeywordCategory.PARKING: "parking",
    KeywordCategory.TICKETS: "tickets",
    KeywordCategory.CHEAP: "cheap",
    KeywordCategory.SEATING: "seating",
    KeywordCategory.ARENA: "arena",
}

FIRST_TIMER: Tuple[KeywordCategory, ...] = (
    KeywordCategory.FIRST_TIME,
    KeywordCategory.WHAT_TO_EXPECT,
)


def categorize_keyword(keyword: str) -> FrozenSet[KeywordCategory]:
    """
    Classify a keyword into every category whose phrase it contains.

    Args:
        keyword: Search keyword (matching is case-sensitive)

    Returns:
        Frozen set of matching categories (empty for generic keywords)
    """
    return frozenset(
        category for category, phrase in CATEGORY_PHRASES.items()
        if phrase in keyword
    )


def is_first_timer(categories: FrozenSet[KeywordCategory]) -> bool:
    """First-timer intent: "first time" or "what to expect"."""
    return any(category in categories for category in FIRST_TIMER)
