"""FastAPI application factory.

Builds the FastAPI app with middleware, routes, and lifespan events.
All routes are served from the in-memory mock store: no database, no
external calls, no API keys.

Called by: Uvicorn (``uv run uvicorn app.main:app``)
Depends on: config.py, environment.py, routes/*, middleware.py
"""

from __future__ import annotations

import logging
from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager

import structlog
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from app.api.middleware import register_middleware
from app.config import get_settings
from app.core.environment import APP_VERSION, validate_environment
from app.mock.store import get_store

_settings = get_settings()
_log_level = getattr(logging, _settings.log_level.upper(), logging.INFO)

structlog.configure(
    processors=[
        structlog.contextvars.merge_contextvars,
        structlog.processors.add_log_level,
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.dev.ConsoleRenderer() if not _settings.is_production
        else structlog.processors.JSONRenderer(),
    ],
    wrapper_class=structlog.make_filtering_bound_logger(_log_level),
    context_class=dict,
    logger_factory=structlog.PrintLoggerFactory(),
    cache_logger_on_first_use=True,
)

logger = structlog.get_logger()


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Application startup and shutdown events.

    Validates the environment configuration and loads the seed data.
    """
    validate_environment()
    store = get_store()
    logger.info(
        "app_startup",
        env=get_settings().app_env,
        users=len(store.users),
        papers=len(store.papers),
        mock_latency_ms=get_settings().mock_latency_ms,
    )
    yield
    logger.info("app_shutdown")


def _register_routes(app: FastAPI) -> None:
    from app.api.routes import (
        admin,
        auth,
        dashboard,
        health,
        notifications,
        papers,
        reviews,
    )

    app.include_router(health.router)
    app.include_router(auth.router)
    app.include_router(papers.router)
    app.include_router(reviews.router)
    app.include_router(dashboard.router)
    app.include_router(admin.router)
    app.include_router(notifications.router)


def create_app() -> FastAPI:
    """Build and configure the FastAPI application.

    Returns:
        Configured FastAPI application instance.
    """
    settings = get_settings()

    app = FastAPI(
        title="Paper Review Portal",
        description="Submission and peer-review backend served from an in-memory mock store",
        version=APP_VERSION,
        lifespan=lifespan,
        docs_url="/docs" if not settings.is_production else None,
        redoc_url="/redoc" if not settings.is_production else None,
    )

    # CORS
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.allowed_origins_list,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # Custom middleware (logging, request IDs, error handling)
    register_middleware(app)

    _register_routes(app)

    return app


app = create_app()
