"""
Tests for Course API Endpoints
"""

import pytest
from httpx import ASGITransport, AsyncClient

from adaptivemath.core.database import get_db
from adaptivemath.main import app


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


class TestCourses:
    async def test_create_course_slugs_name(self, client):
        response = await client.post(
            "/api/v1/courses/", json={"name": "Linear Algebra", "description": "Vectors"}
        )

        assert response.status_code == 201
        data = response.json()
        assert data["id"] == "linear-algebra"
        assert data["name"] == "Linear Algebra"

    async def test_create_course_with_explicit_id(self, client):
        response = await client.post(
            "/api/v1/courses/", json={"id": "la", "name": "Linear Algebra", "description": "x"}
        )
        assert response.json()["id"] == "la"

    async def test_duplicate_course_conflicts(self, client, sample_course):
        response = await client.post(
            "/api/v1/courses/", json={"name": "Arithmetic", "description": "Again"}
        )
        assert response.status_code == 409

    async def test_blank_name_rejected(self, client):
        response = await client.post("/api/v1/courses/", json={"name": "   ", "description": "x"})
        assert response.status_code == 422

    async def test_list_courses(self, client, sample_course):
        response = await client.get("/api/v1/courses/")

        assert response.status_code == 200
        assert [course["id"] for course in response.json()] == ["arithmetic"]

    async def test_get_missing_course(self, client):
        response = await client.get("/api/v1/courses/nope")
        assert response.status_code == 404

    async def test_update_course_keeps_id(self, client, sample_course):
        response = await client.put(
            "/api/v1/courses/arithmetic", json={"name": "Arithmetic Basics"}
        )

        assert response.status_code == 200
        assert response.json()["id"] == "arithmetic"
        assert response.json()["name"] == "Arithmetic Basics"

    async def test_delete_course_removes_questions(self, client, sample_course):
        response = await client.delete("/api/v1/courses/arithmetic")
        assert response.status_code == 204

        assert (await client.get("/api/v1/courses/arithmetic")).status_code == 404
        assert (await client.get("/api/v1/courses/questions/arith-3")).status_code == 404


class TestQuestions:
    async def test_list_questions_easiest_first(self, client, sample_course):
        response = await client.get("/api/v1/courses/arithmetic/questions")

        assert response.status_code == 200
        assert [q["difficulty"] for q in response.json()] == list(range(1, 11))

    async def test_filter_by_difficulty(self, client, sample_course):
        response = await client.get("/api/v1/courses/arithmetic/questions?difficulty=7")
        assert [q["id"] for q in response.json()] == ["arith-7"]

    async def test_create_question_generates_id(self, client, sample_course):
        response = await client.post(
            "/api/v1/courses/arithmetic/questions",
            json={"statement": "What is 3 x 3?", "correct_answer": "9", "difficulty": 4},
        )

        assert response.status_code == 201
        data = response.json()
        assert data["id"].startswith("q-")
        assert data["course_id"] == "arithmetic"
        assert data["target_time"] == 60

    async def test_create_question_out_of_range_difficulty(self, client, sample_course):
        response = await client.post(
            "/api/v1/courses/arithmetic/questions",
            json={"statement": "?", "correct_answer": "1", "difficulty": 11},
        )
        assert response.status_code == 422

    async def test_create_question_blank_statement(self, client, sample_course):
        response = await client.post(
            "/api/v1/courses/arithmetic/questions",
            json={"statement": "   ", "correct_answer": "1"},
        )
        assert response.status_code == 422

    async def test_duplicate_question_id_conflicts(self, client, sample_course):
        response = await client.post(
            "/api/v1/courses/arithmetic/questions",
            json={"id": "arith-1", "statement": "?", "correct_answer": "1"},
        )
        assert response.status_code == 409

    async def test_question_for_missing_course(self, client):
        response = await client.post(
            "/api/v1/courses/nope/questions", json={"statement": "?", "correct_answer": "1"}
        )
        assert response.status_code == 404

    async def test_edit_question(self, client, sample_course):
        response = await client.put(
            "/api/v1/courses/questions/arith-2", json={"difficulty": 3, "target_time": 20}
        )

        assert response.status_code == 200
        data = response.json()
        assert data["difficulty"] == 3
        assert data["target_time"] == 20
        assert data["correct_answer"] == "4"

    async def test_delete_question(self, client, sample_course):
        assert (await client.delete("/api/v1/courses/questions/arith-2")).status_code == 204

        response = await client.get("/api/v1/courses/arithmetic/questions")
        assert "arith-2" not in [q["id"] for q in response.json()]
