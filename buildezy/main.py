"""Buildezy API — FastAPI application factory."""

from __future__ import annotations

import logging
import sys
from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import PlainTextResponse

from buildezy.core.config import Settings, settings as default_settings
from buildezy.core.exceptions import register_exception_handlers
from buildezy.db.base import Database
from buildezy.middleware.cors_gate import (
    ALLOWED_HEADERS,
    ALLOWED_METHODS,
    CorsGateMiddleware,
    CorsPolicy,
)
from buildezy.middleware.request_log import RequestLoggingMiddleware
from buildezy.routers.enquiries import router as enquiries_router
from buildezy.routers.vendors import router as vendors_router
from buildezy.schemas.common import HealthResponse

logger = logging.getLogger(__name__)


def configure_logging(settings: Settings) -> None:
    """Set up structured logging for the application."""
    logging.basicConfig(
        level=settings.resolved_log_level,
        format="%(asctime)s | %(levelname)-8s | %(name)s | %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
        stream=sys.stdout,
        force=True,
    )
    # Quiet noisy libraries
    logging.getLogger("sqlalchemy.engine").setLevel(logging.WARNING)
    logging.getLogger("httpcore").setLevel(logging.WARNING)
    logging.getLogger("httpx").setLevel(logging.WARNING)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    database: Database = app.state.database
    settings: Settings = app.state.settings

    # A dead database doesn't stop the server; requests report it as 500s.
    try:
        await database.ping()
        logger.info("Connected to database successfully")
        if settings.db_create_tables:
            await database.create_tables()
            logger.info("Database tables ensured")
    except Exception as exc:
        logger.error("Error connecting to database: %s", exc)

    logger.info("Server running on http://%s:%d", settings.host, settings.port)
    yield

    await database.dispose()


def create_app(
    settings: Settings | None = None,
    database: Database | None = None,
    cors_policy: CorsPolicy | None = None,
) -> FastAPI:
    settings = settings or default_settings
    configure_logging(settings)

    app = FastAPI(
        title=settings.app_name,
        version="1.0.0",
        docs_url="/docs" if settings.app_env == "development" else None,
        redoc_url="/redoc" if settings.app_env == "development" else None,
        lifespan=lifespan,
    )
    app.state.settings = settings
    app.state.database = database or Database.from_settings(settings)

    policy = cors_policy or CorsPolicy.from_origins(settings.cors_origins)
    app.state.cors_policy = policy

    # Last added runs first: logging → CORS gate (403 / OPTIONS) → CORS headers → routes
    app.add_middleware(
        CORSMiddleware,
        allow_origins=sorted(policy.allow_origins),
        allow_credentials=True,
        allow_methods=ALLOWED_METHODS,
        allow_headers=ALLOWED_HEADERS,
    )
    app.add_middleware(CorsGateMiddleware, policy=policy)
    app.add_middleware(RequestLoggingMiddleware)

    register_exception_handlers(app)

    app.include_router(vendors_router, prefix="/api")
    app.include_router(enquiries_router, prefix="/api")

    @app.get("/", response_class=PlainTextResponse, include_in_schema=False)
    async def banner():
        return f"{settings.app_name} Running Successfully!"

    @app.get("/health", response_model=HealthResponse, tags=["Health"])
    async def health():
        return HealthResponse(app=settings.app_name, env=settings.app_env)

    return app


app = create_app()
