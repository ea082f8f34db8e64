"""
Domain Matching Utilities

Shared domain logic used by the real SERP path and the simulation:
- Team-owned site detection (is the ranking domain the team's own property?)
- Ticket reseller domain sets used by scoring and gap classification
- Competitor extraction from SERP items

Team-site matching is loose: a domain belongs to
the team if it contains any word of the team name. "Boston Bruins" therefore
also claims "bostonglobe.com", and a doubled space in the team name yields an
empty word that matches every domain.
"""

import logging
from typing import Any, Dict, FrozenSet, List, Optional

from src.models import TEAM_RANK_NOT_FOUND

logger = logging.getLogger(__name__)


# =============================================================================
# TICKET RESELLERS
# =============================================================================

# Substring-matched against competitor domains by the opportunity scorer
TICKET_RESELLERS: FrozenSet[str] = frozenset({
    "ticketmaster.com",
    "stubhub.com",
    "seatgeek.com",
    "vividseats.com",
})

# Exact-matched by gap classification (vividseats is not part of this set)
DOMINANT_RESELLERS: FrozenSet[str] = frozenset({
    "ticketmaster.com",
    "stubhub.com",
    "seatgeek.com",
})

MAX_COMPETITORS = 3


def is_team_site(domain: Optional[str], team_name: str) -> bool:
    """
    Check if a domain belongs to the analyzed team.

    Args:
        domain: Ranking domain (e.g., "nhl.com/bruins", "bostonbruins.com")
        team_name: Team name as submitted (e.g., "Boston Bruins")

    Returns:
        True if any lowercase word of the team name occurs in the domain
    """
    if not domain:
        return False

    domain_lower = domain.lower()
    team_words = team_name.lower().split(" ")

    return any(word in domain_lower for word in team_words)


def has_ticket_reseller(competitors: List[str]) -> bool:
    """True if any competitor domain contains a known reseller domain."""
    return any(
        reseller in competitor
        for competitor in competitors
        for reseller in TICKET_RESELLERS
    )


def has_dominant_reseller(competitors: List[str]) -> bool:
    """True if any competitor domain is exactly one of the dominant resellers."""
    return any(competitor in DOMINANT_RESELLERS for competitor in competitors)


def extract_competitors(items: List[Dict[str, Any]], limit: int = MAX_COMPETITORS) -> List[str]:
    """
    Take the domains of the top SERP items.

    Only the first `limit` items are considered; items without a domain are
    dropped afterwards, so fewer than `limit` domains may come back.

    Args:
        items: Ordered SERP items (dicts with an optional 'domain' key)
        limit: Number of top positions to look at

    Returns:
        Competitor domains in SERP order
    """
    competitors = [item.get("domain") for item in items[:limit]]
    return [domain for domain in competitors if domain]


def find_team_rank(items: List[Dict[str, Any]], team_name: str) -> int:
    """
    Find the 1-based SERP position of the first team-owned result.

    Args:
        items: Ordered SERP items
        team_name: Team name used for matching

    Returns:
        Position of the first matching item, or TEAM_RANK_NOT_FOUND (-1)
    """
    for index, item in enumerate(items):
        domain = item.get("domain")
        if is_team_site(domain, team_name):
            logger.debug(f"Team site {domain} found at position {index + 1}")
            return index + 1

    return TEAM_RANK_NOT_FOUND
