"""OSS Register API — FastAPI application entry point.

Invariants:
    - Routes registered explicitly (no auto-discovery)
    - Global error handlers map RejectionError → {message, detail} JSON responses
    - CORS configured from settings (not hardcoded)
    - Mock registry loaded on startup via lifespan context manager

Design Decisions:
    - Lifespan over @app.on_event: FastAPI recommended pattern
    - Mock registry lives on app.state and reaches handlers through a dependency
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from oss_register.api.error_handlers import register_error_handlers
from oss_register.api.middleware import API_VERSION_HEADER, register_api_version_header
from oss_register.api.routes import (
    git_organisations, health, organisations, publishers, repositories,
)
from oss_register.config import get_settings
from oss_register.infrastructure.mock_loader import load_mock_registry
from oss_register.infrastructure.observability import setup_logging

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Startup/shutdown lifecycle."""
    settings = get_settings()
    setup_logging(settings.log_level, settings.log_format)
    app.state.mock_registry = load_mock_registry(settings.mock_responses_file)
    logger.info("OSS Register API started")
    yield
    logger.info("OSS Register API shutting down")


def create_app() -> FastAPI:
    settings = get_settings()
    app = FastAPI(
        title="OSS Register API", version=settings.api_version, lifespan=lifespan,
    )
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_methods=["*"],
        allow_headers=["*"],
        expose_headers=[
            API_VERSION_HEADER, "Link", "Total-Count", "Total-Pages",
            "Per-Page", "Current-Page",
        ],
    )
    register_api_version_header(app, settings.api_version)

    app.include_router(health.router)
    app.include_router(organisations.router)
    app.include_router(publishers.router)
    app.include_router(repositories.router)
    app.include_router(git_organisations.router)

    register_error_handlers(app)
    return app


app = create_app()
