"""HTTP-level tests for /exam-profiles/calculate."""

from datetime import datetime, timezone

import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient

from exam_profiles.routes import get_clock
from exam_profiles.routes import router as exam_profiles_router

NOW = datetime(2026, 3, 2, 9, 30, tzinfo=timezone.utc)


@pytest.fixture
def client():
    app = FastAPI()
    app.include_router(exam_profiles_router)
    app.dependency_overrides[get_clock] = lambda: NOW
    return TestClient(app)


def _body(**overrides):
    body = {
        "name": "TRF - Analista",
        "examDate": "2026-03-30",
        "weeklyHours": 30,
        "subjects": [
            {"subject": "Math", "weight": 1.5, "currentLevel": 3, "goalLevel": 8},
            {"subject": "History", "weight": 1.0, "currentLevel": 7, "goalLevel": 7},
        ],
    }
    body.update(overrides)
    return body


def test_calculate_returns_camel_case_allocation(client):
    resp = client.post("/exam-profiles/calculate", json=_body())

    assert resp.status_code == 200
    data = resp.json()
    assert data["metadata"] == {
        "weeksUntilExam": 4,
        "totalAvailableHours": 120,
        "weeklyHours": 30,
        "examDate": "2026-03-30",
    }
    assert data["results"][0] == {
        "subject": "Math",
        "totalHours": 120,
        "hoursPerWeek": 30,
        "gap": 5,
        "percentage": 100,
    }
    assert data["results"][1]["totalHours"] == 0


def test_calculate_without_exam_date_is_bad_request(client):
    body = _body()
    del body["examDate"]

    resp = client.post("/exam-profiles/calculate", json=body)

    assert resp.status_code == 400
    assert resp.json()["detail"] == "Exam date is required for allocation calculation"


def test_calculate_with_empty_subjects(client):
    resp = client.post("/exam-profiles/calculate", json=_body(subjects=[], weeklyHours=10))

    assert resp.status_code == 200
    assert resp.json()["results"] == []
    assert resp.json()["metadata"]["totalAvailableHours"] == 40


@pytest.mark.parametrize("subject", [
    {"subject": "Math", "weight": 0, "currentLevel": 3, "goalLevel": 8},
    {"subject": "Math", "weight": -2, "currentLevel": 3, "goalLevel": 8},
    {"subject": "Math", "weight": 1, "currentLevel": 3, "goalLevel": 12},
    {"subject": "", "weight": 1, "currentLevel": 3, "goalLevel": 8},
])
def test_calculate_rejects_invalid_subjects(client, subject):
    resp = client.post("/exam-profiles/calculate", json=_body(subjects=[subject]))

    assert resp.status_code == 422


def test_calculate_rejects_weekly_hours_over_a_week(client):
    resp = client.post("/exam-profiles/calculate", json=_body(weeklyHours=169))

    assert resp.status_code == 422


def test_health():
    from server import app

    resp = TestClient(app).get("/health")

    assert resp.status_code == 200
    assert resp.json()["status"] == "ok"


def test_calculate_lists_subjects_by_position(client):
    subjects = [
        {"subject": "Third", "weight": 1, "currentLevel": 1, "goalLevel": 2, "position": 2},
        {"subject": "First", "weight": 1, "currentLevel": 1, "goalLevel": 2, "position": 0},
        {"subject": "Second", "weight": 1, "currentLevel": 1, "goalLevel": 2, "position": 1},
    ]

    resp = client.post("/exam-profiles/calculate", json=_body(subjects=subjects))

    assert resp.status_code == 200
    assert [r["subject"] for r in resp.json()["results"]] == ["First", "Second", "Third"]
