"""
Syllabus API Endpoints

Teacher-authored structured courses with chapters and concepts.
"""
# ruff: noqa: B008 - FastAPI Depends in function defaults is standard pattern

from uuid import UUID

from fastapi import APIRouter, Depends, HTTPException, Query, status
from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from adaptivemath.core.database import get_db
from adaptivemath.core.models import Syllabus
from adaptivemath.core.schemas import SyllabusCreate, SyllabusSchema

router = APIRouter()


@router.post("/", response_model=SyllabusSchema, status_code=status.HTTP_201_CREATED)
async def create_syllabus(
    syllabus_data: SyllabusCreate, db: AsyncSession = Depends(get_db)
) -> Syllabus:
    """Create a structured course."""
    syllabus = Syllabus(
        name=syllabus_data.name.strip(),
        description=syllabus_data.description.strip(),
        teacher_id=syllabus_data.teacher_id,
        chapters=[chapter.model_dump() for chapter in syllabus_data.chapters],
    )
    db.add(syllabus)
    await db.commit()
    await db.refresh(syllabus)

    return syllabus


@router.get("/", response_model=list[SyllabusSchema])
async def list_syllabi(
    teacher_id: str | None = Query(None, description="Filter by author"),
    db: AsyncSession = Depends(get_db),
) -> list[Syllabus]:
    """List structured courses."""
    query = select(Syllabus)

    if teacher_id:
        query = query.where(Syllabus.teacher_id == teacher_id)

    result = await db.execute(query.order_by(Syllabus.name))
    return list(result.scalars().all())


@router.get("/{syllabus_id}", response_model=SyllabusSchema)
async def get_syllabus(syllabus_id: UUID, db: AsyncSession = Depends(get_db)) -> Syllabus:
    """Get a structured course by ID."""
    result = await db.execute(select(Syllabus).where(Syllabus.id == syllabus_id))
    syllabus = result.scalar_one_or_none()

    if not syllabus:
        raise HTTPException(status_code=404, detail="Syllabus not found")

    return syllabus


@router.delete("/{syllabus_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_syllabus(syllabus_id: UUID, db: AsyncSession = Depends(get_db)) -> None:
    """Delete a structured course."""
    result = await db.execute(select(Syllabus).where(Syllabus.id == syllabus_id))
    syllabus = result.scalar_one_or_none()

    if not syllabus:
        raise HTTPException(status_code=404, detail="Syllabus not found")

    await db.delete(syllabus)
    await db.commit()
