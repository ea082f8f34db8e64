"""
Hockey SEO Opportunity Analyzer - Data Models

Shared data models used across the system. Everything here is built fresh
per request and discarded once the response is sent.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Dict, Any, List


# Sentinel for "team does not rank in the returned SERP"
TEAM_RANK_NOT_FOUND = -1

# Records scoring at or above this count as high opportunity in the summary
HIGH_OPPORTUNITY_THRESHOLD = 7


class GapType(str, Enum):
    """Why a keyword represents an unmet content need."""
    FIRST_TIMER_EXPERIENCE = "First-Timer Experience Gap"
    ARENA_INFORMATION = "Arena Information Gap"
    TICKET_RESELLER_DOMINANCE = "Ticket Reseller Dominance"
    VENUE_EXPERIENCE = "Venue Experience Gap"
    GENERAL_CONTENT = "General Content Gap"


def format_team_rank(team_rank: int) -> str:
    """Render a team rank for display ("Not found" or "#<n>")."""
    if team_rank == TEAM_RANK_NOT_FOUND:
        return "Not found"
    return f"#{team_rank}"


@dataclass(frozen=True)
class ContentSuggestion:
    """Suggested piece of content for a keyword."""
    title: str
    format: str
    cta: str

    def to_dict(self) -> Dict[str, str]:
        return {"title": self.title, "format": self.format, "cta": self.cta}


@dataclass
class AnalysisRecord:
    """SEO opportunity analysis for a single keyword."""
    keyword: str
    opportunity: int
    gap_type: GapType
    team_rank: int
    competitors: List[str]
    content_suggestion: ContentSuggestion
    llm_strategy: str
    search_volume: int
    is_real_data: bool = False
    cost: float = 0.0

    @property
    def team_rank_display(self) -> str:
        return format_team_rank(self.team_rank)

    def to_dict(self) -> Dict[str, Any]:
        """Serialize with the camelCase keys used by the HTTP API."""
        return {
            "keyword": self.keyword,
            "opportunity": self.opportunity,
            "gapType": self.gap_type.value,
            "teamRank": self.team_rank_display,
            "competitors": list(self.competitors),
            "contentSuggestion": self.content_suggestion.to_dict(),
            "llmStrategy": self.llm_strategy,
            "searchVolume": self.search_volume,
            "isRealData": self.is_real_data,
            "cost": self.cost,
        }


@dataclass
class AnalysisSummary:
    """Aggregates over all records of a response."""
    high_opportunity: int = 0
    total_search_volume: int = 0
    real_data_count: int = 0

    @classmethod
    def from_records(cls, records: List[AnalysisRecord]) -> "AnalysisSummary":
        return cls(
            high_opportunity=sum(1 for r in records if r.opportunity >= HIGH_OPPORTUNITY_THRESHOLD),
            total_search_volume=sum(r.search_volume for r in records),
            real_data_count=sum(1 for r in records if r.is_real_data),
        )

    def to_dict(self) -> Dict[str, int]:
        return {
            "highOpportunity": self.high_opportunity,
            "totalSearchVolume": self.total_search_volume,
            "realDataCount": self.real_data_count,
        }


@dataclass
class AnalysisResult:
    """Complete result of one analysis request."""
    team_name: str
    league: Any
    total_keywords: int
    analyses: List[AnalysisRecord] = field(default_factory=list)
    summary: AnalysisSummary = field(default_factory=AnalysisSummary)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "success": True,
            "teamName": self.team_name,
            "league": self.league,
            "totalKeywords": self.total_keywords,
            "analyses": [record.to_dict() for record in self.analyses],
            "summary": self.summary.to_dict(),
        }
