"""
Tests for Student API Endpoints

Profiles, stored results, result reports and practice history.
"""

from datetime import UTC, datetime
from uuid import uuid4

import pytest
from httpx import ASGITransport, AsyncClient

from adaptivemath.core.database import get_db
from adaptivemath.diagnostic import DiagnosticResult
from adaptivemath.diagnostic.result_store import save_diagnostic_result, save_practice_session
from adaptivemath.main import app
from helpers import make_attempt


@pytest.fixture
async def client(db_session):
    """Create test client with database dependency override."""

    async def override_get_db():
        yield db_session

    app.dependency_overrides[get_db] = override_get_db
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac
    app.dependency_overrides.clear()


@pytest.fixture
async def stored_results(db_session, sample_student):
    """Two arithmetic results (older weaker, newer stronger) and one geometry result."""
    older = DiagnosticResult.from_attempts(
        "arithmetic", [make_attempt(4, correct=False), make_attempt(3)]
    )
    newer = DiagnosticResult.from_attempts(
        "arithmetic", [make_attempt(6, time_taken=20), make_attempt(7, time_taken=20)]
    )
    geometry = DiagnosticResult.from_attempts("geometry", [make_attempt(5)])

    records = []
    for minutes, result in enumerate((older, newer, geometry)):
        record = await save_diagnostic_result(db_session, result, sample_student.id)
        record.completed_at = datetime(2026, 1, 1, 9, minutes, tzinfo=UTC)
        records.append(record)
    await db_session.commit()
    return records


class TestProfiles:
    async def test_create_student(self, client):
        response = await client.post("/api/v1/students/", json={"name": "  Grace "})

        assert response.status_code == 201
        data = response.json()
        assert data["name"] == "Grace"
        assert data["is_teacher"] is False
        assert data["learning_style"] is None

    async def test_create_teacher(self, client):
        response = await client.post(
            "/api/v1/students/", json={"name": "Mr. Euler", "is_teacher": True}
        )
        assert response.json()["is_teacher"] is True

    async def test_get_student(self, client, sample_student):
        response = await client.get(f"/api/v1/students/{sample_student.id}")

        assert response.status_code == 200
        assert response.json()["name"] == "Ada"

    async def test_missing_student(self, client):
        response = await client.get(f"/api/v1/students/{uuid4()}")
        assert response.status_code == 404


class TestResults:
    async def test_list_results_most_recent_first(self, client, sample_student, stored_results):
        response = await client.get(f"/api/v1/students/{sample_student.id}/results")

        assert response.status_code == 200
        ids = [result["id"] for result in response.json()]
        assert ids == [str(record.id) for record in reversed(stored_results)]

    async def test_filter_results_by_course(self, client, sample_student, stored_results):
        response = await client.get(
            f"/api/v1/students/{sample_student.id}/results", params={"course_id": "geometry"}
        )

        data = response.json()
        assert len(data) == 1
        assert data[0]["course_id"] == "geometry"
        assert len(data[0]["attempts"]) == 1

    async def test_latest_report(self, client, sample_student, stored_results):
        response = await client.get(
            f"/api/v1/students/{sample_student.id}/results/arithmetic/latest"
        )

        assert response.status_code == 200
        data = response.json()
        assert data["result"]["id"] == str(stored_results[1].id)
        assert data["summary"]["correct_percentage"] == 100
        assert data["summary"]["speed_remark"] == "Quick response time"
        assert data["performance"]["labels"] == ["Q1", "Q2"]
        assert data["performance"]["difficulty"] == [6, 7]

    async def test_latest_report_without_results(self, client, sample_student):
        response = await client.get(
            f"/api/v1/students/{sample_student.id}/results/arithmetic/latest"
        )
        assert response.status_code == 404

    async def test_results_for_missing_student(self, client):
        response = await client.get(f"/api/v1/students/{uuid4()}/results")
        assert response.status_code == 404


class TestPracticeHistory:
    async def test_list_practice(self, client, db_session, sample_student):
        await save_practice_session(
            db_session,
            student_id=sample_student.id,
            course_id="arithmetic",
            attempts=[make_attempt(5), make_attempt(6)],
            started_at=datetime.now(UTC),
        )

        response = await client.get(f"/api/v1/students/{sample_student.id}/practice")

        assert response.status_code == 200
        data = response.json()
        assert len(data) == 1
        assert [attempt["difficulty"] for attempt in data[0]["attempts"]] == [5, 6]
