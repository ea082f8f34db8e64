"""
Content & AI Search Strategy

Fixed content suggestions and LLM (AI search) strategy notes keyed off
keyword semantics. No randomness: the same keyword always yields the same
suggestion and strategy.
"""

from src.models import ContentSuggestion
from src.scoring.keywords import KeywordCategory, categorize_keyword, is_first_timer


# ============================================================================
# CONTENT SUGGESTIONS
# ============================================================================

FIRST_TIMER_GUIDE = ContentSuggestion(
    title="Complete First-Timer's Hockey Guide",
    format="FAQ-style guide with arena tips and terminology",
    cta="Buy Official Tickets",
)

PARKING_GUIDE = ContentSuggestion(
    title="Ultimate Arena Parking Guide",
    format="Interactive map with pricing and walking times",
    cta="Reserve Parking & Tickets",
)

SEATING_GUIDE = ContentSuggestion(
    title="Interactive Arena Seating Guide",
    format="Visual seating chart with ice view photos",
    cta="Find Your Perfect Seats",
)

FAN_GUIDE = ContentSuggestion(
    title="Comprehensive Fan Guide",
    format="Detailed FAQ with local tips",
    cta="Get Tickets",
)


# ============================================================================
# LLM STRATEGIES
# ============================================================================

CONVERSATIONAL_STRATEGY = (
    "Create conversational Q&A content optimized for voice search and AI assistants"
)
LOCAL_CONTEXT_STRATEGY = (
    "Use structured data and local context for location-based AI search"
)
TERMINOLOGY_STRATEGY = (
    "Optimize with natural language and hockey-specific terminology for AI search"
)


def get_content_suggestion(keyword: str) -> ContentSuggestion:
    """
    Pick the content piece to build for a keyword.

    Priority: first-timer, parking, seating, then the generic fan guide.
    """
    categories = categorize_keyword(keyword)

    if is_first_timer(categories):
        return FIRST_TIMER_GUIDE
    if KeywordCategory.PARKING in categories:
        return PARKING_GUIDE
    if KeywordCategory.SEATING in categories:
        return SEATING_GUIDE
    return FAN_GUIDE


def get_llm_strategy(keyword: str) -> str:
    """AI search strategy note for a keyword."""
    categories = categorize_keyword(keyword)

    if is_first_timer(categories):
        return CONVERSATIONAL_STRATEGY
    if KeywordCategory.PARKING in categories or KeywordCategory.SEATING in categories:
        return LOCAL_CONTEXT_STRATEGY
    return TERMINOLOGY_STRATEGY
