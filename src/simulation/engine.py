"""
Simulation Fallback Engine

Produces complete analysis records without touching DataForSEO. Used when:
- Credentials are not configured
- The keyword is past the live-lookup cap (cost control)
- The live lookup failed or returned nothing

Synthetic data:
- Competitors: fixed 3-site set per keyword category
- Team rank: "not found" with probability 0.6, otherwise uniform 1-10
- Search volume: uniform integer in a category-dependent half-open range

Search volume is simulated for live records too, so the volume helpers are
also used by the orchestrator's real path.
"""

import logging
import random
from typing import Dict, List, Optional, Tuple

from src.models import AnalysisRecord, TEAM_RANK_NOT_FOUND
from src.scoring.keywords import KeywordCategory, categorize_keyword, is_first_timer
from src.strategy import build_analysis_record

logger = logging.getLogger(__name__)


# ============================================================================
# SYNTHETIC DATA
# ============================================================================

SIMULATED_COMPETITORS: Dict[str, List[str]] = {
    "tickets": ["stubhub.com", "ticketmaster.com", "seatgeek.com"],
    "parking": ["spothero.com", "parkwhiz.com", "yelp.com"],
    "first_time": ["reddit.com", "tripadvisor.com", "hockeyforum.com"],
    "default": ["reddit.com", "yelp.com", "hockeydb.com"],
}

# [low, high) monthly search volume per keyword category
VOLUME_RANGES: Dict[str, Tuple[int, int]] = {
    "tickets": (200, 1000),
    "first_timer": (150, 550),
    "parking": (100, 400),
    "default": (50, 250),
}

NOT_FOUND_PROBABILITY = 0.6
MAX_SIMULATED_RANK = 10


def get_volume_range(keyword: str) -> Tuple[int, int]:
    """
    Volume range for a keyword.

    Priority: tickets/cheap, first-timer, parking, default.
    """
    categories = categorize_keyword(keyword)

    if KeywordCategory.TICKETS in categories or KeywordCategory.CHEAP in categories:
        return VOLUME_RANGES["tickets"]
    if is_first_timer(categories):
        return VOLUME_RANGES["first_timer"]
    if KeywordCategory.PARKING in categories:
        return VOLUME_RANGES["parking"]
    return VOLUME_RANGES["default"]


def get_simulated_competitors(keyword: str) -> List[str]:
    """
    Synthetic top-3 competitors for a keyword.

    Priority: tickets, parking, "first time" (not "what to expect"), default.
    """
    categories = categorize_keyword(keyword)

    if KeywordCategory.TICKETS in categories:
        key = "tickets"
    elif KeywordCategory.PARKING in categories:
        key = "parking"
    elif KeywordCategory.FIRST_TIME in categories:
        key = "first_time"
    else:
        key = "default"

    return list(SIMULATED_COMPETITORS[key])


class SimulationEngine:
    """
    Builds simulated analysis records.

    Usage:
        engine = SimulationEngine(rng=random.Random(42))
        record = engine.create_analysis("bruins parking", "Boston Bruins")
    """

    def __init__(self, rng: Optional[random.Random] = None):
        """
        Initialize simulation engine.

        Args:
            rng: Random source (a fresh random.Random if omitted)
        """
        self.rng = rng or random.Random()

    def simulate_search_volume(self, keyword: str) -> int:
        """Uniform integer volume from the keyword's [low, high) range."""
        low, high = get_volume_range(keyword)
        return self.rng.randrange(low, high)

    def simulate_team_rank(self) -> int:
        """Random team position: not found (p=0.6) or 1-10."""
        if self.rng.random() < NOT_FOUND_PROBABILITY:
            return TEAM_RANK_NOT_FOUND
        return self.rng.randint(1, MAX_SIMULATED_RANK)

    def create_analysis(self, keyword: str, team_name: str) -> AnalysisRecord:
        """
        Create a fully simulated record for a keyword.

        Args:
            keyword: Search keyword
            team_name: Team being analyzed (only used for logging)

        Returns:
            AnalysisRecord with is_real_data=False and cost=0
        """
        competitors = get_simulated_competitors(keyword)
        team_rank = self.simulate_team_rank()

        logger.debug(f"Simulating '{keyword}' for {team_name}: rank={team_rank}")

        return build_analysis_record(
            keyword=keyword,
            team_rank=team_rank,
            competitors=competitors,
            search_volume=self.simulate_search_volume(keyword),
            is_real_data=False,
            cost=0.0,
        )
