"""Weather API: FastAPI application entry point.

Invariants:
    - Routes registered explicitly (no auto-discovery)
    - Global error handlers registered from api/error_handlers.py
    - CORS configured from settings (not hardcoded)
    - Database initialized on startup via lifespan context manager (SQL backend only)
    - OpenAPI schema and docs served only in development

Design Decisions:
    - Lifespan over @app.on_event: FastAPI recommended pattern, cleaner cleanup
    - HTTPS redirect opt-in: TLS usually terminates at the proxy in front of the app
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.middleware.httpsredirect import HTTPSRedirectMiddleware

from weather_api.api.error_handlers import register_error_handlers
from weather_api.api.routes import health, weathers
from weather_api.config import get_settings
from weather_api.core.domain_types import RepositoryBackend
from weather_api.infrastructure import database
from weather_api.infrastructure.observability import setup_logging

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Startup/shutdown lifecycle."""
    settings = get_settings()
    setup_logging(settings.log_level, settings.log_format)
    if settings.repository_backend == RepositoryBackend.SQL:
        database.init_db(
            settings.database_url,
            pool_size=settings.database_pool_size,
            max_overflow=settings.database_max_overflow,
        )
        if settings.database_create_schema:
            await database.db_manager.create_schema()
    logger.info(
        f"Weather API started (repository={settings.repository_backend.value})",
    )
    yield
    await database.close_db()
    logger.info("Weather API shutting down")


settings = get_settings()
app = FastAPI(
    title="Weather API", version=health.SERVICE_VERSION, lifespan=lifespan,
    openapi_url="/openapi.json" if settings.is_development else None,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_methods=["*"],
    allow_headers=["*"],
)
if settings.https_redirect:
    app.add_middleware(HTTPSRedirectMiddleware)

register_error_handlers(app)

app.include_router(health.router)
app.include_router(weathers.router)
