"""
Hockey SEO Opportunity Analyzer

Ranks keyword content opportunities for a sports team:
1. Looks up live Google SERPs via DataForSEO (capped per request)
2. Falls back to simulated data when live data is unavailable
3. Scores opportunity and classifies the content gap
4. Suggests content formats and AI search strategy
"""

__version__ = "0.1.0"
