"""
Gap & Content Strategy

Pure mappings from keyword (and competitors, for gap type) to:
- Gap type classification
- Content suggestion (title, format, call-to-action)
- LLM / AI search strategy note

Each mapping keeps its own priority order; they are not required to agree.
"""

from .gaps import determine_gap_type
from .records import build_analysis_record
from .content import (
    ContentSuggestion,
    get_content_suggestion,
    get_llm_strategy,
    FIRST_TIMER_GUIDE,
    PARKING_GUIDE,
    SEATING_GUIDE,
    FAN_GUIDE,
    CONVERSATIONAL_STRATEGY,
    LOCAL_CONTEXT_STRATEGY,
    TERMINOLOGY_STRATEGY,
)

__all__ = [
    "determine_gap_type",
    "build_analysis_record",
    "ContentSuggestion",
    "get_content_suggestion",
    "get_llm_strategy",
    "FIRST_TIMER_GUIDE",
    "PARKING_GUIDE",
    "SEATING_GUIDE",
    "FAN_GUIDE",
    "CONVERSATIONAL_STRATEGY",
    "LOCAL_CONTEXT_STRATEGY",
    "TERMINOLOGY_STRATEGY",
]
