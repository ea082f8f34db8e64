"""
Content Gap Classification

Decides why a keyword is an unmet content need. First match wins:

1. First-timer keywords          -> First-Timer Experience Gap
2. Parking keywords              -> Arena Information Gap
3. Reseller owns a top result    -> Ticket Reseller Dominance
4. Seating / arena keywords      -> Venue Experience Gap
5. Anything else                 -> General Content Gap

Parking is checked before reseller dominance, so "bruins parking" stays an
Arena Information Gap even when stubhub.com ranks first.
"""

from typing import List

from src.models import GapType
from src.scoring.keywords import KeywordCategory, categorize_keyword, is_first_timer
from src.utils.domain_filter import has_dominant_reseller


def determine_gap_type(keyword: str, competitors: List[str]) -> GapType:
    """
    Classify the content gap for a keyword.

    Args:
        keyword: Search keyword
        competitors: Top competitor domains (exact-matched against resellers)

    Returns:
        GapType
    """
    categories = categorize_keyword(keyword)

    if is_first_timer(categories):
        return GapType.FIRST_TIMER_EXPERIENCE
    if KeywordCategory.PARKING in categories:
        return GapType.ARENA_INFORMATION
    if has_dominant_reseller(competitors):
        return GapType.TICKET_RESELLER_DOMINANCE
    if KeywordCategory.SEATING in categories or KeywordCategory.ARENA in categories:
        return GapType.VENUE_EXPERIENCE
    return GapType.GENERAL_CONTENT
