"""
Pytest Configuration and Shared Fixtures

Provides common fixtures and configuration for all test modules.
"""

import pytest
from typing import Any, Dict, List
from unittest.mock import AsyncMock, MagicMock

from src.collector.client import SerpResult
from src.simulation import SimulationEngine
from src.utils.config import Settings


# ============================================================================
# Settings Fixtures
# ============================================================================

@pytest.fixture
def settings_without_credentials() -> Settings:
    """Settings with the live SERP path disabled."""
    return Settings(
        _env_file=None,
        DATAFORSEO_LOGIN=None,
        DATAFORSEO_PASSWORD=None,
        SERP_TASK_WAIT_SECONDS=0,
    )


@pytest.fixture
def settings_with_credentials() -> Settings:
    """Settings with DataForSEO credentials and no task wait."""
    return Settings(
        _env_file=None,
        DATAFORSEO_LOGIN="test@example.com",
        DATAFORSEO_PASSWORD="secret",
        SERP_TASK_WAIT_SECONDS=0,
    )


# ============================================================================
# Simulation Fixtures
# ============================================================================

@pytest.fixture
def fixed_rng() -> MagicMock:
    """
    Deterministic random source.

    random() -> 0.0 means the team is always "not found";
    randrange() returns the lower bound of the volume range.
    """
    rng = MagicMock()
    rng.random.return_value = 0.0
    rng.randint.return_value = 4
    rng.randrange.side_effect = lambda low, high: low
    return rng


@pytest.fixture
def fixed_simulation(fixed_rng) -> SimulationEngine:
    """Simulation engine with deterministic output."""
    return SimulationEngine(rng=fixed_rng)


# ============================================================================
# Mock SERP Data
# ============================================================================

@pytest.fixture
def bruins_serp_items() -> List[Dict[str, Any]]:
    """SERP items where the team ranks third."""
    return [
        {"type": "organic", "rank_absolute": 1, "domain": "www.ticketmaster.com"},
        {"type": "organic", "rank_absolute": 2, "domain": "www.nhl.com"},
        {"type": "organic", "rank_absolute": 3, "domain": "www.bostonbruins.com"},
        {"type": "organic", "rank_absolute": 4, "domain": "www.stubhub.com"},
        {"type": "organic", "rank_absolute": 5, "domain": "en.wikipedia.org"},
    ]


@pytest.fixture
def mock_serp_response(bruins_serp_items) -> Dict[str, Any]:
    """Raw task_get response from DataForSEO."""
    return {
        "status_code": 20000,
        "status_message": "Ok.",
        "cost": 0.0,
        "tasks": [
            {
                "id": "11061234-1535-0066-0000-64d4f5b2c9a1",
                "status_code": 20000,
                "status_message": "Ok.",
                "cost": 0.0006,
                "result": [
                    {
                        "keyword": "bruins tickets",
                        "location_code": 2840,
                        "language_code": "en",
                        "items_count": len(bruins_serp_items),
                        "items": bruins_serp_items,
                    }
                ],
            }
        ],
    }


@pytest.fixture
def mock_task_post_response() -> Dict[str, Any]:
    """Raw task_post response from DataForSEO."""
    return {
        "status_code": 20000,
        "status_message": "Ok.",
        "cost": 0.0006,
        "tasks_count": 1,
        "tasks": [
            {
                "id": "11061234-1535-0066-0000-64d4f5b2c9a1",
                "status_code": 20100,
                "status_message": "Task Created.",
                "cost": 0.0006,
                "result": None,
            }
        ],
    }


# ============================================================================
# Mock API Client
# ============================================================================

@pytest.fixture
def mock_dataforseo_client(bruins_serp_items):
    """
    Mock DataForSEO client usable as an async context manager.

    get_serp_results returns a SERP for every keyword by default.
    """
    client = MagicMock()
    client.__aenter__ = AsyncMock(return_value=client)
    client.__aexit__ = AsyncMock(return_value=False)

    async def serp_for(keyword: str) -> SerpResult:
        return SerpResult(
            keyword=keyword,
            task_id="task-1",
            items=list(bruins_serp_items),
            cost=0.0006,
        )

    client.get_serp_results = AsyncMock(side_effect=serp_for)
    return client


# ============================================================================
# Test Markers
# ============================================================================

def pytest_configure(config):
    """Configure custom markers."""
    config.addinivalue_line(
        "markers", "slow: marks tests as slow (deselect with '-m \"not slow\"')"
    )
    config.addinivalue_line(
        "markers", "integration: marks tests as integration tests"
    )
    config.addinivalue_line(
        "markers", "unit: marks tests as unit tests"
    )
