"""
Analysis Record Assembly

Both the live SERP path and the simulation feed keyword, team rank and
competitors through here, so real and simulated records share one schema.
"""

from typing import List

from src.models import AnalysisRecord
from src.scoring import calculate_opportunity_score
from src.utils.domain_filter import MAX_COMPETITORS
from .content import get_content_suggestion, get_llm_strategy
from .gaps import determine_gap_type


def build_analysis_record(
    keyword: str,
    team_rank: int,
    competitors: List[str],
    search_volume: int,
    is_real_data: bool = False,
    cost: float = 0.0,
) -> AnalysisRecord:
    """
    Score and classify a keyword into a complete AnalysisRecord.

    Args:
        keyword: Search keyword
        team_rank: 1-based SERP position or TEAM_RANK_NOT_FOUND
        competitors: Competitor domains (only the first three are kept)
        search_volume: Monthly search volume estimate
        is_real_data: True when rank and competitors came from a live SERP
        cost: Provider cost of the lookup (0 for simulated records)
    """
    competitors = list(competitors[:MAX_COMPETITORS])

    return AnalysisRecord(
        keyword=keyword,
        opportunity=calculate_opportunity_score(keyword, team_rank, competitors),
        gap_type=determine_gap_type(keyword, competitors),
        team_rank=team_rank,
        competitors=competitors,
        content_suggestion=get_content_suggestion(keyword),
        llm_strategy=get_llm_strategy(keyword),
        search_volume=search_volume,
        is_real_data=is_real_data,
        cost=cost if is_real_data else 0.0,
    )
