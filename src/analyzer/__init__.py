"""
Hockey SEO Opportunity Analyzer - Analysis Orchestration

Blends live DataForSEO SERP lookups (capped per request) with simulated
records into one ranked list of keyword opportunities.
"""

from .orchestrator import (
    AnalysisOrchestrator,
    AnalysisValidationError,
    KeywordPlan,
)

__all__ = [
    "AnalysisOrchestrator",
    "AnalysisValidationError",
    "KeywordPlan",
]
