"""
Simulation Fallback

Synthetic analysis records with the same schema as live SERP records.
"""

from .engine import (
    SimulationEngine,
    SIMULATED_COMPETITORS,
    VOLUME_RANGES,
    get_simulated_competitors,
    get_volume_range,
)

__all__ = [
    "SimulationEngine",
    "SIMULATED_COMPETITORS",
    "VOLUME_RANGES",
    "get_simulated_competitors",
    "get_volume_range",
]
