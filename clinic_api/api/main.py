"""
clinic_api/api/main.py — FastAPI application entry point.

Configures middleware and error handlers, mounts all routers under the
versioned prefix, and serves the interactive API reference at
``{api_prefix}/docs``.
"""
from __future__ import annotations

from contextlib import asynccontextmanager
from typing import AsyncGenerator

import structlog
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import PlainTextResponse

from clinic_api import __version__
from clinic_api.api.errors import register_error_handlers
from clinic_api.api.routers import doctors, patients, visits
from clinic_api.config import Settings, get_settings
from clinic_api.logging_config import configure_logging
from clinic_api.store.memory import ClinicStore

logger = structlog.get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Application lifespan: logs startup confirmation and shutdown."""
    settings: Settings = app.state.settings
    logger.info(
        "startup",
        message=f"Hello World, I'm listening on port {settings.port}!",
        env=settings.environment,
        **app.state.store.counts(),
    )
    yield
    logger.info("shutdown", message="Shutting down API")


def create_app(settings: Settings | None = None, store: ClinicStore | None = None) -> FastAPI:
    """
    Build the app. Without an explicit ``store`` a fresh one is loaded from
    ``settings.seed_path``, so every app starts from the seed dataset.
    """
    settings = settings or get_settings()
    configure_logging(settings.log_level, json=settings.log_json)

    prefix = settings.api_prefix
    app = FastAPI(
        title="Clinic Records API",
        description="Doctors, patients and visits held in memory and reset on every start.",
        version=__version__,
        docs_url=f"{prefix}/docs",
        redoc_url=f"{prefix}/redoc",
        openapi_url=f"{prefix}/openapi.json",
        lifespan=lifespan,
    )
    app.state.settings = settings
    app.state.store = store if store is not None else ClinicStore.from_seed(settings.seed_path)

    # ── Middleware ────────────────────────────────────────────────────────────
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    register_error_handlers(app)

    # ── Routers ───────────────────────────────────────────────────────────────
    app.include_router(doctors.router,  prefix=f"{prefix}/doctors",  tags=["Doctors"])
    app.include_router(patients.router, prefix=f"{prefix}/patients", tags=["Patients"])
    app.include_router(visits.router,   prefix=f"{prefix}/visits",   tags=["Visits"])

    # ── Liveness ──────────────────────────────────────────────────────────────
    @app.get("/", response_class=PlainTextResponse, tags=["System"])
    def hello() -> str:
        return "Hello World!"

    @app.get("/health", tags=["System"])
    def health_check() -> dict:
        return {
            "status": "healthy",
            "version": __version__,
            "environment": settings.environment,
            "records": app.state.store.counts(),
        }

    return app


app = create_app()
