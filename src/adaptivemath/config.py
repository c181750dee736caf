"""
Application Configuration

Uses Pydantic Settings for type-safe environment variable management.
"""

from __future__ import annotations

from pathlib import Path
from typing import Literal

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env", env_file_encoding="utf-8", case_sensitive=True, extra="ignore"
    )

    # ========================================================================
    # APPLICATION
    # ========================================================================

    ENVIRONMENT: Literal["local", "staging", "production"] = "local"
    LOG_LEVEL: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = "INFO"
    DEBUG: bool = False

    # ========================================================================
    # DATABASE
    # ========================================================================

    DATABASE_URL: str = Field(
        default="sqlite+aiosqlite:///./adaptivemath.db",
        description="Async SQLAlchemy connection string (postgresql+asyncpg in production)",
    )

    # ========================================================================
    # ADAPTIVE ENGINE
    # ========================================================================

    DIAGNOSTIC_LENGTH: int = Field(
        default=8, ge=7, le=10, description="Questions asked in one diagnostic session"
    )
    PRACTICE_MAX_QUESTIONS: int | None = Field(
        default=None, ge=1, description="Optional cap on practice session length"
    )
    STARTING_DIFFICULTY: int = Field(
        default=5, ge=1, le=10, description="Difficulty of the first question"
    )
    DIFFICULTY_WINDOW: int = Field(
        default=3, ge=1, le=10, description="Trailing attempts inspected by the selector"
    )
    SESSION_IDLE_TIMEOUT: int = Field(
        default=3600, ge=60, description="Seconds before an untouched session is dropped"
    )

    # ========================================================================
    # SEED DATA
    # ========================================================================

    SEED_DATA_PATH: Path = Field(
        default=Path("data/seed_courses.json"),
        description="JSON file with the initial course and question bank",
    )

    @field_validator("SEED_DATA_PATH", mode="before")
    @classmethod
    def validate_seed_path(cls: type[Settings], v: str | Path) -> Path:  # noqa: ARG003
        """Convert string to Path and require a .json file name."""
        path = Path(v) if isinstance(v, str) else v

        if path.suffix != ".json":
            raise ValueError(f"SEED_DATA_PATH must point to a .json file: {path}")

        return path

    # ========================================================================
    # COMPUTED PROPERTIES
    # ========================================================================

    @property
    def is_production(self) -> bool:
        """Check if running in production."""
        return self.ENVIRONMENT == "production"

    @property
    def is_local(self) -> bool:
        """Check if running locally."""
        return self.ENVIRONMENT == "local"


# Global settings instance
settings = Settings()
