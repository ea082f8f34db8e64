#!/usr/bin/env python3
"""
Keyword Opportunity Analysis Runner

Runs one analysis from the command line, without the HTTP server.

Usage:
    # Optional - enables live SERP lookups for the first three keywords:
    export DATAFORSEO_LOGIN=your_login
    export DATAFORSEO_PASSWORD=your_password

    python scripts/run_analysis.py "Boston Bruins" "bruins tickets" "bruins parking"

    # Options:
    python scripts/run_analysis.py "Boston Bruins" "first time at td garden" \
        --league NHL \
        --simulate-only \
        --json
"""

import asyncio
import argparse
import json
import logging
import sys
from pathlib import Path

# Add project root to path
sys.path.insert(0, str(Path(__file__).parent.parent))

from dotenv import load_dotenv

# Configure logging
logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s"
)
logger = logging.getLogger(__name__)


async def run_analysis(
    team_name: str,
    keywords: list,
    league: str = "NHL",
    simulate_only: bool = False,
):
    """Run the orchestrator once and return the result."""

    load_dotenv()

    from src.analyzer import AnalysisOrchestrator
    from src.utils.config import get_settings

    settings = get_settings()
    if simulate_only:
        settings = settings.model_copy(
            update={"DATAFORSEO_LOGIN": None, "DATAFORSEO_PASSWORD": None}
        )
    elif not settings.has_dataforseo_credentials:
        logger.warning("DataForSEO credentials missing - all keywords will be simulated")

    orchestrator = AnalysisOrchestrator(settings)
    return await orchestrator.analyze(team_name, league, keywords)


def print_report(result) -> None:
    """Print a plain-text summary table."""
    print(f"\n{'='*70}")
    print(f"KEYWORD OPPORTUNITIES - {result.team_name} ({result.league})")
    print(f"{'='*70}")

    for record in result.analyses:
        source = "live" if record.is_real_data else "sim"
        print(
            f"{record.opportunity:>3}/10  {record.keyword:<35} "
            f"{record.team_rank_display:<10} {source:<5} {record.gap_type.value}"
        )
        print(f"        -> {record.content_suggestion.title} ({record.content_suggestion.format})")

    summary = result.summary
    print(f"{'='*70}")
    print(f"High opportunity:    {summary.high_opportunity}")
    print(f"Total search volume: {summary.total_search_volume}")
    print(f"Real data:           {summary.real_data_count}/{len(result.analyses)}")


def main():
    """Main entry point."""
    parser = argparse.ArgumentParser(
        description="Rank keyword content opportunities for a sports team"
    )
    parser.add_argument("team", help="Team name (e.g., 'Boston Bruins')")
    parser.add_argument("keywords", nargs="+", help="Candidate keywords (first 5 are analyzed)")
    parser.add_argument(
        "--league",
        default="NHL",
        help="League label (default: NHL)"
    )
    parser.add_argument(
        "--simulate-only",
        action="store_true",
        help="Skip DataForSEO even if credentials are configured"
    )
    parser.add_argument(
        "--json",
        action="store_true",
        help="Print the raw JSON response instead of a table"
    )

    args = parser.parse_args()

    result = asyncio.run(run_analysis(
        team_name=args.team,
        keywords=args.keywords,
        league=args.league,
        simulate_only=args.simulate_only,
    ))

    if args.json:
        print(json.dumps(result.to_dict(), indent=2))
    else:
        print_report(result)


if __name__ == "__main__":
    main()
