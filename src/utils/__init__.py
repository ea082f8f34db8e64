"""Utility modules for the Hockey SEO Opportunity Analyzer."""

from .config import Settings, get_settings
from .domain_filter import (
    TICKET_RESELLERS,
    DOMINANT_RESELLERS,
    is_team_site,
    extract_competitors,
    find_team_rank,
)

__all__ = [
    "Settings",
    "get_settings",
    # Domain matching
    "TICKET_RESELLERS",
    "DOMINANT_RESELLERS",
    "is_team_site",
    "extract_competitors",
    "find_team_rank",
]
