"""
Test the scholarship API routes.
"""

import pytest
from fastapi.testclient import TestClient

from main import app
from scholarship_matching.catalog import SCHOLARSHIP_PROGRAMS


@pytest.fixture
def client():
    return TestClient(app)


PHD_REQUEST = {
    "profile": {
        "full_name": "Ana Lima",
        "desired_level": "PhD",
        "fields_of_study": ["Computer Science"],
        "languages": [{"name": "English", "proficiency": "Fluent"}],
    },
    "preferences": {
        "financial": {"minimum_coverage": "Full"},
    },
    "limit": 5,
}


def test_app_health(client):
    response = client.get("/health")
    assert response.status_code == 200
    assert response.json()["status"] == "ok"


def test_engine_health(client):
    body = client.get("/scholarships/health").json()
    assert body["status"] == "ok"
    assert body["version"] == "1.0.0"
    assert body["programs"] == len(SCHOLARSHIP_PROGRAMS)


def test_matches_returns_ranked_recommendations(client):
    response = client.post("/scholarships/matches", json=PHD_REQUEST)

    assert response.status_code == 200
    body = response.json()
    assert 0 < body["count"] <= 5
    assert body["count"] == len(body["recommendations"])
    assert [r["rank"] for r in body["recommendations"]] == list(range(1, body["count"] + 1))
    assert body["summary"]["profile_overview"].startswith("Report prepared for Ana Lima")


def test_matches_with_empty_body_uses_defaults(client):
    response = client.post("/scholarships/matches", json={})

    assert response.status_code == 200
    assert response.json()["count"] == 8


@pytest.mark.parametrize("payload", [
    {"limit": 0},
    {"profile": {"desired_level": "Kindergarten"}},
    {"profile": {"fields_of_study": ["a", "b", "c", "d", "e", "f"]}},
])
def test_matches_rejects_invalid_input(client, payload):
    response = client.post("/scholarships/matches", json=payload)
    assert response.status_code == 422


def test_report_includes_summary_and_version(client):
    response = client.post("/scholarships/report", json=PHD_REQUEST)

    assert response.status_code == 200
    body = response.json()
    assert body["engine_version"] == "1.0.0"
    assert len(body["executive_summary"]["key_findings"]) == 4
    assert body["user_profile"]["desired_level"] == "PhD"


def test_list_and_get_programs(client):
    programs = client.get("/scholarships/programs").json()
    assert len(programs) == len(SCHOLARSHIP_PROGRAMS)

    first_id = programs[0]["id"]
    detail = client.get(f"/scholarships/programs/{first_id}")
    assert detail.status_code == 200
    assert detail.json()["id"] == first_id


@pytest.mark.parametrize("path", [
    "/scholarships/programs/no-such-program",
    "/scholarships/programs/no-such-program/guidance",
])
def test_unknown_program_is_404(client, path):
    assert client.get(path).status_code == 404


def test_score_unknown_program_is_404(client):
    response = client.post("/scholarships/programs/no-such-program/score", json={})
    assert response.status_code == 404


def test_score_program(client):
    response = client.post(
        "/scholarships/programs/gates-cambridge/score",
        json={"profile": PHD_REQUEST["profile"], "preferences": PHD_REQUEST["preferences"]},
    )

    assert response.status_code == 200
    score = response.json()
    assert set(score) == {
        "overall", "academic_fit", "financial_feasibility",
        "career_alignment", "acceptance_probability", "long_term_value",
    }
    assert all(0 <= value <= 100 for value in score.values())


def test_program_guidance(client):
    response = client.get("/scholarships/programs/chevening/guidance")

    assert response.status_code == 200
    guidance = response.json()
    assert len(guidance["timeline"]) == 7
    assert len(guidance["tips"]) == 7
    assert "United Kingdom" in guidance["visa_considerations"][0]
