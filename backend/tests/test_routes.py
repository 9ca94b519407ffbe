"""Tests for the score API endpoints."""

from __future__ import annotations

from unittest.mock import patch

import pytest
from fastapi.testclient import TestClient

from feasibility.main import app


@pytest.fixture
def client():
    return TestClient(app)


class TestProjectScores:
    def test_generated_scores(self, client):
        resp = client.get("/api/v1/projects/1/scores", params={"name": "Maple Court"})
        assert resp.status_code == 200
        assert resp.json() == {
            "overall": "4.6",
            "individual": {
                "zoning": "4.5",
                "massing": "4.5",
                "sustainability": "4.9",
                "cost": "4.5",
                "logistics": "4.5",
                "buildTime": "4.9",
            },
        }

    def test_sample_project(self, client):
        resp = client.get(
            "/api/v1/projects/1/scores",
            params={"name": "Serenity Village", "stored_overall_score": "3.7"},
        )
        assert resp.status_code == 200
        body = resp.json()
        assert body["overall"] == "3.7"
        assert set(body["individual"].values()) == {"4.0"}

    def test_negative_id(self, client):
        a = client.get("/api/v1/projects/-1/scores", params={"name": "X"}).json()
        b = client.get("/api/v1/projects/1/scores", params={"name": "X"}).json()
        assert a == b

    def test_non_integer_id_rejected(self, client):
        resp = client.get("/api/v1/projects/abc/scores", params={"name": "X"})
        assert resp.status_code == 422

    def test_name_required(self, client):
        resp = client.get("/api/v1/projects/1/scores")
        assert resp.status_code == 422

    def test_post_scores(self, client):
        resp = client.post("/api/v1/scores", json={"project_id": 2, "project_name": "X"})
        assert resp.status_code == 200
        assert resp.json()["overall"] == "4.7"

    def test_post_scores_sample_default(self, client):
        resp = client.post(
            "/api/v1/scores", json={"project_id": 2, "project_name": "Workforce Commons"},
        )
        assert resp.json()["overall"] == "4.0"


class TestAssessments:
    def test_assessment(self, client):
        resp = client.post("/api/v1/assessments", json={
            "project_type": "affordable",
            "one_bed_units": 6,
            "two_bed_units": 12,
            "three_bed_units": 6,
            "target_floors": 3,
        })
        assert resp.status_code == 200
        body = resp.json()
        assert body["overall_score"] == "4.2"
        assert body["sustainability"]["score"] == "5.0"
        assert body["timeline"]["time_savings_months"] == 4

    def test_invalid_floors(self, client):
        resp = client.post("/api/v1/assessments", json={"target_floors": 0})
        assert resp.status_code == 422


class TestSampleProjectEndpoints:
    def test_list(self, client):
        resp = client.get("/api/v1/sample-projects")
        assert resp.status_code == 200
        body = resp.json()
        assert len(body) == 4
        names = [entry["project"]["name"] for entry in body]
        assert names[0] == "Serenity Village"
        for entry in body:
            assert entry["scores"]["overall"] == entry["project"]["overall_score"]
            assert entry["band"] == "green"

    def test_get_one(self, client):
        resp = client.get("/api/v1/sample-projects/Workforce Commons")
        assert resp.status_code == 200
        assert resp.json()["scores"]["overall"] == "4.6"
        assert resp.json()["cost_breakdowns"] == []

    def test_curated_detail_and_breakdowns(self, client):
        body = client.get("/api/v1/sample-projects/Serenity Village").json()
        project = body["project"]
        assert project["logistics"] == {
            "score": "5.0",
            "justification": (
                "Score of 5/5 due to easy access from the highway and available open "
                "space for the staging site."
            ),
        }
        assert project["time_savings_months"] == 4
        assert project["transportation_notes"].startswith("Within 1/2 mile of highway 70")
        assert len(body["cost_breakdowns"]) == 5
        assert body["cost_breakdowns"][1]["category"] == "06 Wood & Plastics"
        assert body["cost_breakdowns"][1]["modular_fab_cost"] == 2137612

    def test_unknown_404(self, client):
        resp = client.get("/api/v1/sample-projects/Harbor Lofts")
        assert resp.status_code == 404
        assert "Unknown sample project" in resp.json()["detail"]


class TestServiceInfo:
    def test_health(self, client):
        resp = client.get("/health")
        assert resp.json()["status"] == "healthy"

    def test_root(self, client):
        resp = client.get("/")
        assert "endpoints" in resp.json()


class TestRunner:
    def test_run_serves_app_with_settings(self):
        from feasibility import main

        with patch.object(main.uvicorn, "run") as serve, \
                patch.object(main.logging, "basicConfig") as configure:
            main.run()
        configure.assert_called_once()
        serve.assert_called_once_with(
            main.app,
            host=main.settings.host,
            port=main.settings.port,
            log_level=main.settings.log_level.lower(),
        )

    def test_import_leaves_logging_to_host(self):
        import importlib

        from feasibility import main

        with patch("logging.basicConfig") as configure:
            importlib.reload(main)
        configure.assert_not_called()
