"""
AdaptiveMath FastAPI Application

Adaptive math diagnostics and practice for students; course management for teachers.
"""

import logging
from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager
from datetime import timedelta
from typing import Any

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from sqlalchemy import text

from adaptivemath import __version__
from adaptivemath.config import settings
from adaptivemath.core.database import close_db, engine, init_db
from adaptivemath.diagnostic import SessionRegistry

logger = logging.getLogger(__name__)


def configure_logging() -> None:
    """Apply LOG_LEVEL to the root logger."""
    logging.basicConfig(
        level=settings.LOG_LEVEL,
        format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
    )
    logging.getLogger().setLevel(settings.LOG_LEVEL)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Application lifespan events.

    Startup:
    - Configure logging
    - Create missing tables and verify the database connection

    Shutdown:
    - Close database connections
    """
    configure_logging()
    logger.info("AdaptiveMath starting (environment=%s)", settings.ENVIRONMENT)

    try:
        await init_db()
        async with engine.connect() as conn:
            await conn.execute(text("SELECT 1"))
        logger.info("Database connection verified")
    except Exception:
        logger.exception("Database connection failed")
        raise

    logger.info("AdaptiveMath ready")

    yield

    logger.info("AdaptiveMath shutting down (%d active sessions)", len(app.state.session_registry))
    await close_db()


def create_app() -> FastAPI:
    """Create and configure FastAPI application.

    Returns:
        Configured FastAPI app instance
    """
    app = FastAPI(
        title="AdaptiveMath",
        description="Adaptive math diagnostics and practice",
        version=__version__,
        docs_url="/docs" if not settings.is_production else None,
        redoc_url="/redoc" if not settings.is_production else None,
        lifespan=lifespan,
    )

    # Active sessions belong to this app instance
    app.state.session_registry = SessionRegistry(
        idle_timeout=timedelta(seconds=settings.SESSION_IDLE_TIMEOUT)
    )

    # CORS middleware
    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"] if settings.is_local else [],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # Health check endpoints
    @app.get("/", tags=["Health"])
    async def root() -> dict[str, str]:
        """Root endpoint."""
        return {
            "service": "AdaptiveMath",
            "status": "operational",
            "version": __version__,
            "environment": settings.ENVIRONMENT,
        }

    @app.get("/health", tags=["Health"], response_model=None)
    async def health_check() -> JSONResponse:
        """Health check endpoint for load balancers.

        Returns:
            - status: healthy/unhealthy
            - checks: Individual health checks
        """
        checks: dict[str, dict[str, Any]] = {}

        # Database health
        try:
            async with engine.connect() as conn:
                await conn.execute(text("SELECT 1"))
            checks["database"] = {"status": "healthy"}
        except Exception as e:
            checks["database"] = {"status": "unhealthy", "error": str(e)}

        checks["sessions"] = {
            "status": "healthy",
            "active": len(app.state.session_registry),
        }

        all_healthy = all(check["status"] == "healthy" for check in checks.values())
        status_code = 200 if all_healthy else 503

        return JSONResponse(
            status_code=status_code,
            content={
                "status": "healthy" if all_healthy else "unhealthy",
                "environment": settings.ENVIRONMENT,
                "checks": checks,
            },
        )

    @app.get("/health/ready", tags=["Health"], response_model=None)
    async def readiness_check() -> dict[str, str] | JSONResponse:
        """Readiness check. Returns 200 when the database is reachable."""
        try:
            async with engine.connect() as conn:
                await conn.execute(text("SELECT 1"))
            return {"status": "ready"}
        except Exception:
            return JSONResponse(
                status_code=503,
                content={"status": "not_ready"},
            )

    @app.get("/health/live", tags=["Health"])
    async def liveness_check() -> dict[str, str]:
        """Liveness check. Returns 200 if the process is up."""
        return {"status": "alive"}

    # Register API routers
    from adaptivemath.api.v1 import courses, learning_styles, sessions, students, syllabi

    app.include_router(courses.router, prefix="/api/v1/courses", tags=["Courses"])
    app.include_router(sessions.router, prefix="/api/v1/sessions", tags=["Sessions"])
    app.include_router(students.router, prefix="/api/v1/students", tags=["Students"])
    app.include_router(syllabi.router, prefix="/api/v1/syllabi", tags=["Syllabi"])
    app.include_router(
        learning_styles.router, prefix="/api/v1/learning-styles", tags=["Learning Styles"]
    )

    return app


# Create app instance
app = create_app()


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "adaptivemath.main:app",
        host="0.0.0.0",  # nosec B104 - Intentional for containerized deployment
        port=8000,
        reload=settings.DEBUG,
        log_level=settings.LOG_LEVEL.lower(),
    )
