"""
Pytest Configuration and Fixtures

Shared test fixtures for unit, API and integration tests. Each test gets a
fresh in-memory SQLite database.
"""

import pytest
from sqlalchemy import event
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.orm import configure_mappers
from sqlalchemy.pool import StaticPool

from adaptivemath.core.models import (  # noqa: F401 - imported for SQLAlchemy registration
    BankQuestion,
    Base,
    Course,
    StudentProfile,
)
from adaptivemath.diagnostic import QuestionBank
from helpers import make_question

# Ensure all mappers are configured
configure_mappers()


@pytest.fixture
async def async_engine():
    """Create an in-memory async engine with all tables."""
    engine = create_async_engine(
        "sqlite+aiosqlite://",
        echo=False,
        poolclass=StaticPool,
        connect_args={"check_same_thread": False},
    )

    @event.listens_for(engine.sync_engine, "connect")
    def _enable_foreign_keys(dbapi_connection, connection_record):  # type: ignore[no-untyped-def]
        cursor = dbapi_connection.cursor()
        cursor.execute("PRAGMA foreign_keys=ON")
        cursor.close()

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    yield engine

    await engine.dispose()


@pytest.fixture
async def db_session(async_engine) -> AsyncSession:
    """Create database session for testing."""
    session_maker = async_sessionmaker(async_engine, class_=AsyncSession, expire_on_commit=False)

    async with session_maker() as session:
        yield session


@pytest.fixture
async def sample_course(db_session):
    """Arithmetic course with one question per difficulty 1-10."""
    course = Course(id="arithmetic", name="Arithmetic", description="Basic operations")
    db_session.add(course)
    await db_session.flush()

    for level in range(1, 11):
        db_session.add(
            BankQuestion(
                id=f"arith-{level}",
                course_id=course.id,
                statement=f"What is {level} + {level}?",
                correct_answer=str(level * 2),
                difficulty=level,
                target_time=30,
            )
        )
    await db_session.commit()

    return course


@pytest.fixture
async def sample_student(db_session):
    """A student profile."""
    student = StudentProfile(name="Ada")
    db_session.add(student)
    await db_session.commit()
    return student


@pytest.fixture
def full_bank() -> QuestionBank:
    """In-memory bank with one question per difficulty 1-10."""
    return QuestionBank("arithmetic", [make_question(level) for level in range(1, 11)])
