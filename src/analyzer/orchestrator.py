"""
Analysis Orchestrator

Coordinates one keyword opportunity analysis request:

1. Validate team name and keyword list
2. For each of the first MAX_KEYWORDS keywords, in order:
   - live SERP lookup for the first MAX_REAL_ANALYSES, if credentials exist
   - simulation for the rest, and for any lookup that yields no data
3. Sort records by opportunity (descending, ties keep keyword order)
4. Summarize

Keywords are processed sequentially; each live lookup includes the
DataForSEO task wait, so request latency grows with the number of lookups.
"""

import logging
from dataclasses import dataclass
from datetime import datetime
from typing import Any, Callable, List, Optional

from src.collector.client import DataForSEOClient, SerpResult, create_client
from src.models import AnalysisRecord, AnalysisResult, AnalysisSummary
from src.simulation import SimulationEngine
from src.strategy import build_analysis_record
from src.utils.config import Settings
from src.utils.domain_filter import extract_competitors, find_team_rank

logger = logging.getLogger(__name__)


class AnalysisValidationError(ValueError):
    """Request is missing the team name or keyword list."""


@dataclass
class KeywordPlan:
    """Processing decision for one keyword."""
    index: int
    keyword: str
    use_real_data: bool


class AnalysisOrchestrator:
    """
    Runs the keyword opportunity analysis for one team.

    Usage:
        orchestrator = AnalysisOrchestrator(get_settings())
        result = await orchestrator.analyze(
            "Boston Bruins", "NHL", ["bruins tickets", "bruins parking"]
        )
        print(result.to_dict())
    """

    def __init__(
        self,
        settings: Settings,
        simulation: Optional[SimulationEngine] = None,
        client_factory: Optional[Callable[[Settings], DataForSEOClient]] = None,
    ):
        """
        Initialize orchestrator.

        Args:
            settings: Application settings (credentials, limits, wait time)
            simulation: Simulation engine (new unseeded engine if omitted)
            client_factory: Builds the DataForSEO client from settings
        """
        self.settings = settings
        self.simulation = simulation or SimulationEngine()
        self.client_factory = client_factory or create_client

    def plan(self, keywords: List[str]) -> List[KeywordPlan]:
        """
        Decide per keyword whether a live lookup is attempted.

        Only the first MAX_KEYWORDS keywords are planned; only the first
        MAX_REAL_ANALYSES of those are eligible, and only with credentials.
        """
        has_credentials = self.settings.has_dataforseo_credentials
        return [
            KeywordPlan(
                index=i,
                keyword=keyword,
                use_real_data=has_credentials and i < self.settings.MAX_REAL_ANALYSES,
            )
            for i, keyword in enumerate(keywords[:self.settings.MAX_KEYWORDS])
        ]

    async def analyze(
        self,
        team_name: str,
        league: Any,
        keywords: Any,
    ) -> AnalysisResult:
        """
        Analyze keywords for a team.

        Args:
            team_name: Team being analyzed (e.g., "Boston Bruins")
            league: League label, echoed back only
            keywords: Candidate keywords in priority order

        Returns:
            AnalysisResult with one record per processed keyword

        Raises:
            AnalysisValidationError: Missing team name or keyword list
        """
        if not team_name or not isinstance(keywords, list):
            raise AnalysisValidationError(
                "Missing required fields: teamName and keywords array"
            )

        start_time = datetime.now()
        logger.info(f"Starting analysis for: {team_name} ({league})")

        plans = self.plan(keywords)
        records: List[AnalysisRecord] = []

        if any(p.use_real_data for p in plans):
            async with self.client_factory(self.settings) as client:
                for p in plans:
                    records.append(await self._analyze_keyword(p, team_name, client))
        else:
            for p in plans:
                records.append(await self._analyze_keyword(p, team_name, None))

        analyses = sorted(records, key=lambda r: r.opportunity, reverse=True)
        summary = AnalysisSummary.from_records(analyses)

        elapsed = (datetime.now() - start_time).total_seconds()
        logger.info(
            f"Analysis complete for {team_name} in {elapsed:.1f}s. "
            f"Real data: {summary.real_data_count}/{len(analyses)}"
        )

        return AnalysisResult(
            team_name=team_name,
            league=league,
            total_keywords=len(keywords),
            analyses=analyses,
            summary=summary,
        )

    async def _analyze_keyword(
        self,
        plan: KeywordPlan,
        team_name: str,
        client: Optional[DataForSEOClient],
    ) -> AnalysisRecord:
        """Produce the record for one keyword, falling back to simulation."""
        if not plan.use_real_data or client is None:
            return self.simulation.create_analysis(plan.keyword, team_name)

        try:
            serp = await client.get_serp_results(plan.keyword)
            if serp is None or not serp.items:
                logger.info(f"No SERP data for {plan.keyword}, using simulation")
                return self.simulation.create_analysis(plan.keyword, team_name)

            record = self._build_real_record(plan.keyword, team_name, serp)
        except Exception as e:
            logger.warning(f"Real API failed for {plan.keyword}, using simulation: {e}")
            return self.simulation.create_analysis(plan.keyword, team_name)

        logger.info(f"Real data analysis complete for: {plan.keyword}")
        return record

    def _build_real_record(
        self,
        keyword: str,
        team_name: str,
        serp: SerpResult,
    ) -> AnalysisRecord:
        """Turn a live SERP into a record; search volume is still simulated."""
        return build_analysis_record(
            keyword=keyword,
            team_rank=find_team_rank(serp.items, team_name),
            competitors=extract_competitors(serp.items),
            search_volume=self.simulation.simulate_search_volume(keyword),
            is_real_data=True,
            cost=serp.cost,
        )
