#!/usr/bin/env python3
"""
Course Loader: seed JSON → database

Reads the initial course and question bank and loads it into the database.

Usage:
    python scripts/load_courses.py              # Load from SEED_DATA_PATH
    python scripts/load_courses.py --reload     # Delete all courses first
    python scripts/load_courses.py --path=/custom/seed.json
"""

import argparse
import asyncio
from pathlib import Path

from sqlalchemy import delete
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine

from adaptivemath.config import settings
from adaptivemath.core.models import Base, BankQuestion, Course
from adaptivemath.core.seed import load_seed_data, read_seed_file


async def main() -> None:
    """Main entry point."""
    parser = argparse.ArgumentParser(description="Load seed courses into the database")
    parser.add_argument(
        "--reload",
        action="store_true",
        help="Delete existing courses and questions before loading",
    )
    parser.add_argument(
        "--path",
        type=Path,
        help="Custom path to seed JSON",
    )
    parser.add_argument(
        "--db-url",
        type=str,
        help="Custom database URL (default from settings)",
    )
    args = parser.parse_args()

    db_url = args.db_url or settings.DATABASE_URL
    seed_path = args.path or settings.SEED_DATA_PATH

    print("🚀 AdaptiveMath Course Loader")
    print(f"📁 Seed: {seed_path}")
    print(f"🗄️  Database: {db_url.split('@')[1] if '@' in db_url else db_url}\n")

    engine = create_async_engine(db_url, echo=False)
    session_maker = async_sessionmaker(engine, class_=AsyncSession, expire_on_commit=False)

    try:
        async with engine.begin() as conn:
            await conn.run_sync(Base.metadata.create_all)
        print("✅ Database tables created/verified")

        data = read_seed_file(seed_path)

        async with session_maker() as session:
            if args.reload:
                print("⚠️  RELOAD mode: deleting existing courses and questions...")
                await session.execute(delete(BankQuestion))
                await session.execute(delete(Course))
                await session.commit()

            courses, questions = await load_seed_data(session, data)

        print(f"✅ Loaded {courses} courses and {questions} questions")

    except Exception as e:
        print(f"\n❌ Error: {e}")
        raise
    finally:
        await engine.dispose()


if __name__ == "__main__":
    asyncio.run(main())
