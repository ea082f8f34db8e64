"""
Hockey SEO Opportunity Analyzer - Data Collection Package

This package handles live data collection from the DataForSEO SERP API:
- task_post / task_get workflow for Google organic results
- Normalized SerpResult with ranked items and cost
"""

from .client import (
    DataForSEOClient,
    DataForSEOError,
    SerpResult,
    create_client,
    safe_get_result,
)

__all__ = [
    "DataForSEOClient",
    "DataForSEOError",
    "SerpResult",
    "create_client",
    "safe_get_result",
]
