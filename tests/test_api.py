"""
API Tests

Exercises the FastAPI routes with TestClient.

Run with: pytest tests/test_api.py -v
"""
import sys
from pathlib import Path

# Add parent directory to path
sys.path.insert(0, str(Path(__file__).parent.parent))

import random

import pytest
from fastapi.testclient import TestClient

from api.main import app, get_cors_origins, DEFAULT_CORS_ORIGINS
from api.routes.sessions import get_random_source


@pytest.fixture
def client():
    app.dependency_overrides[get_random_source] = lambda: random.Random(1234)
    yield TestClient(app)
    app.dependency_overrides.clear()


def test_health(client):
    assert client.get("/").json()["status"] == "ok"
    assert client.get("/health").json() == {"status": "healthy"}


def test_list_modes(client):
    response = client.get("/api/modes")
    assert response.status_code == 200
    modes = response.json()
    assert [m["id"] for m in modes] == ["quick", "full", "stress", "confidence", "custom"]
    assert modes[1]["phases"] == ["oath", "civics", "n400", "reading", "writing", "closing"]


def test_get_mode(client):
    response = client.get("/api/modes/stress")
    assert response.status_code == 200
    assert response.json()["supported_difficulties"] == ["advanced", "expert"]

    assert client.get("/api/modes/marathon").status_code == 404


def test_list_difficulties(client):
    levels = [d["level"] for d in client.get("/api/difficulties").json()]
    assert levels == ["beginner", "intermediate", "advanced", "expert"]


def test_list_categories(client):
    categories = client.get("/api/categories").json()
    assert len(categories) == 8
    assert categories[0] == {"id": "american_government", "label": "American Government & System"}


def test_scenarios(client):
    scenarios = client.get("/api/scenarios").json()
    assert len(scenarios) == 13
    assert scenarios[0]["id"] == "first_time_standard"

    response = client.get("/api/scenarios/senior_65plus")
    assert response.status_code == 200
    assert response.json()["recommended_difficulty"] == "beginner"

    assert client.get("/api/scenarios/astronaut").status_code == 404


def test_random_scenario_uses_injected_source(client):
    expected = random.Random(1234).choice([s["id"] for s in client.get("/api/scenarios").json()])
    assert client.get("/api/scenarios/random").json()["id"] == expected


def test_seeded_random_scenario(client):
    first = client.get("/api/scenarios/random", params={"seed": 99}).json()
    second = client.get("/api/scenarios/random", params={"seed": 99}).json()
    assert first["id"] == second["id"]


def test_recommendations(client):
    response = client.post(
        "/api/recommendations",
        json={"age": 70, "years_in_us": 25, "is_military": True, "accuracy": 85, "total_sessions": 6},
    )
    assert response.status_code == 200
    assert response.json() == {"scenario": "senior_65plus", "mode": "stress", "difficulty": "advanced"}


def test_validate_custom_settings_always_200(client):
    response = client.post("/api/custom-settings/validate", json={"question_count": 10, "categories": ["geography"]})
    assert response.status_code == 200
    assert response.json() == {"valid": True, "errors": []}

    response = client.post("/api/custom-settings/validate", json={"question_count": 0, "categories": []})
    assert response.status_code == 200
    assert response.json()["errors"] == [
        "Question count must be at least 1",
        "At least one category must be selected",
    ]


def test_create_session_plan(client):
    response = client.post(
        "/api/session-plans",
        json={"profile": {"years_in_us": 3}, "mode": "full", "difficulty": "beginner"},
    )
    assert response.status_code == 200
    plan = response.json()
    assert plan["scenario_id"] == "recent_arrival"
    assert plan["mode_id"] == "full"
    assert plan["difficulty_id"] == "beginner"
    assert plan["estimated_duration"] == 26
    assert plan["score_weights"]["civics"] == 40
    assert "Applicant Scenario: Recent Arrival (5 years)" in plan["system_prompt"]


def test_create_session_plan_defaults(client):
    response = client.post("/api/session-plans", json={})
    assert response.status_code == 200
    assert response.json()["mode_id"] == "confidence"


def test_session_plan_errors(client):
    response = client.post("/api/session-plans", json={"mode": "custom", "custom_settings": {"question_count": 0, "categories": ["geography"]}})
    assert response.status_code == 422
    assert response.json()["detail"] == ["Question count must be at least 1"]

    response = client.post("/api/session-plans", json={"scenario": "astronaut"})
    assert response.status_code == 404

    response = client.post("/api/session-plans", json={"mode": "stress", "difficulty": "beginner"})
    assert response.status_code == 400


def test_cors_origins_from_env(monkeypatch):
    monkeypatch.setenv("CORS_ORIGINS", "https://learn.example.org, https://app.example.org")
    assert get_cors_origins() == ["https://learn.example.org", "https://app.example.org"]

    monkeypatch.setenv("CORS_ORIGINS", "")
    assert get_cors_origins() == DEFAULT_CORS_ORIGINS


def test_session_plan_malformed_custom_settings(client):
    response = client.post(
        "/api/session-plans",
        json={
            "mode": "custom",
            "custom_settings": {"categories": ["american_history"], "question_count": 10, "focus_areas": "history"},
        },
    )
    assert response.status_code == 422
    assert response.json()["detail"] == ["Focus areas must be a list of topics"]
