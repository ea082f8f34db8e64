"""
Test Suite for the HTTP API

Tests the FastAPI contract:
- POST /api/analyze success, 400 and 500 responses
- GET /api/health
"""

from datetime import datetime

import pytest
from fastapi.testclient import TestClient
from unittest.mock import AsyncMock, MagicMock

from api.analyze import app, get_orchestrator
from src.utils.config import get_settings


@pytest.fixture
def client(settings_without_credentials):
    """Test client with DataForSEO disabled."""
    app.dependency_overrides[get_settings] = lambda: settings_without_credentials
    with TestClient(app) as test_client:
        yield test_client
    app.dependency_overrides.clear()


class TestHealth:
    """Test health endpoints."""

    def test_health(self, client):
        response = client.get("/api/health")

        assert response.status_code == 200
        data = response.json()
        assert data["status"] == "OK"
        assert data["hasDataForSEOCredentials"] is False
        assert isinstance(datetime.fromisoformat(data["timestamp"]), datetime)

    def test_health_with_credentials(self, client, settings_with_credentials):
        app.dependency_overrides[get_settings] = lambda: settings_with_credentials

        response = client.get("/api/health")

        assert response.json()["hasDataForSEOCredentials"] is True

    def test_root(self, client):
        assert client.get("/").json()["status"] == "ok"


class TestAnalyze:
    """Test POST /api/analyze."""

    def test_bruins_scenario(self, client):
        response = client.post("/api/analyze", json={
            "teamName": "Boston Bruins",
            "league": "NHL",
            "keywords": ["bruins tickets", "bruins parking", "first time at td garden"],
        })

        assert response.status_code == 200
        data = response.json()
        assert data["success"] is True
        assert data["teamName"] == "Boston Bruins"
        assert data["league"] == "NHL"
        assert data["totalKeywords"] == 3
        assert len(data["analyses"]) == 3
        assert all(a["isRealData"] is False for a in data["analyses"])
        assert all(a["cost"] == 0 for a in data["analyses"])

        first_time = next(a for a in data["analyses"] if a["keyword"] == "first time at td garden")
        assert first_time["gapType"] == "First-Timer Experience Gap"

    def test_non_string_league_is_echoed(self, client):
        """League is informational only and never rejected."""
        response = client.post("/api/analyze", json={
            "teamName": "Boston Bruins",
            "league": 2024,
            "keywords": ["bruins tickets"],
        })

        assert response.status_code == 200
        assert response.json()["league"] == 2024

    def test_response_properties(self, client):
        keywords = [
            "cheap bruins tickets",
            "td garden parking",
            "what to expect at td garden",
            "td garden seating",
            "bruins schedule",
            "bruins roster",
        ]
        data = client.post("/api/analyze", json={
            "teamName": "Boston Bruins",
            "league": "NHL",
            "keywords": keywords,
        }).json()

        analyses = data["analyses"]
        assert len(analyses) == 5
        assert data["totalKeywords"] == 6

        opportunities = [a["opportunity"] for a in analyses]
        assert opportunities == sorted(opportunities, reverse=True)
        assert all(3 <= o <= 10 for o in opportunities)
        assert all(len(a["competitors"]) <= 3 for a in analyses)
        assert all(a["teamRank"] == "Not found" or a["teamRank"].startswith("#") for a in analyses)

        summary = data["summary"]
        assert summary["totalSearchVolume"] == sum(a["searchVolume"] for a in analyses)
        assert summary["highOpportunity"] == sum(1 for a in analyses if a["opportunity"] >= 7)
        assert summary["realDataCount"] == 0

    def test_missing_team_name(self, client):
        response = client.post("/api/analyze", json={"league": "NHL", "keywords": ["bruins tickets"]})

        assert response.status_code == 400
        data = response.json()
        assert "teamName" in data["error"]
        assert "analyses" not in data

    def test_empty_team_name(self, client):
        response = client.post("/api/analyze", json={"teamName": "", "keywords": ["bruins tickets"]})
        assert response.status_code == 400

    def test_missing_keywords(self, client):
        response = client.post("/api/analyze", json={"teamName": "Boston Bruins"})

        assert response.status_code == 400
        assert "keywords" in response.json()["error"]

    def test_keywords_not_an_array(self, client):
        response = client.post("/api/analyze", json={
            "teamName": "Boston Bruins",
            "keywords": "bruins tickets",
        })

        assert response.status_code == 400
        assert "error" in response.json()

    def test_malformed_json(self, client):
        response = client.post(
            "/api/analyze",
            content="{not json",
            headers={"Content-Type": "application/json"},
        )
        assert response.status_code == 400

    def test_unexpected_failure_is_500(self, client):
        orchestrator = MagicMock()
        orchestrator.analyze = AsyncMock(side_effect=RuntimeError("scorer exploded"))
        app.dependency_overrides[get_orchestrator] = lambda: orchestrator

        response = client.post("/api/analyze", json={
            "teamName": "Boston Bruins",
            "keywords": ["bruins tickets"],
        })

        assert response.status_code == 500
        assert response.json() == {"error": "Analysis failed", "message": "scorer exploded"}
