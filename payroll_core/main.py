"""Payroll Core — FastAPI Application Factory."""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from payroll_core.common.exceptions import register_exception_handlers
from payroll_core.config import settings
from payroll_core.cycle.router import router as cycle_router
from payroll_core.database import engine, init_models
from payroll_core.fnf.router import router as fnf_router
from payroll_core.salary.router import router as salary_router
from payroll_core.settings_store.router import router as settings_router

logger = logging.getLogger(__name__)


def configure_logging() -> None:
    """Root logging setup driven by ``LOG_LEVEL``."""
    logging.basicConfig(
        level=settings.LOG_LEVEL.upper(),
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    )


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application startup and shutdown events."""
    # Startup
    await init_models()
    logger.info("Payroll core started (%s)", settings.ENVIRONMENT)
    yield
    # Shutdown
    await engine.dispose()


def create_app() -> FastAPI:
    """Create and configure the FastAPI application."""
    configure_logging()

    app = FastAPI(
        title="Payroll Core",
        description="Salary cycles, pro-rata, overtime, CTC breakdown and FnF settlement",
        version="1.0.0",
        docs_url="/api/docs" if settings.ENVIRONMENT != "production" else None,
        redoc_url="/api/redoc" if settings.ENVIRONMENT != "production" else None,
        lifespan=lifespan,
    )

    # Exception handlers (RFC 7807)
    register_exception_handlers(app)

    # CORS
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins_list,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # Health check
    @app.get("/api/v1/health", tags=["system"])
    async def health_check():
        return {
            "status": "healthy",
            "version": "1.0.0",
            "environment": settings.ENVIRONMENT,
        }

    # Register routers
    app.include_router(cycle_router, prefix="/api/v1/cycle", tags=["cycle"])
    app.include_router(salary_router, prefix="/api/v1/salary", tags=["salary"])
    app.include_router(fnf_router, prefix="/api/v1/fnf", tags=["fnf"])
    app.include_router(settings_router, prefix="/api/v1/settings", tags=["settings"])

    return app


app = create_app()
