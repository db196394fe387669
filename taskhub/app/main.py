"""
TaskHub FastAPI application entrypoint.
Builds the application container and configures lifespan, CORS, rate
limiting, exception handlers, and routers.
"""
from __future__ import annotations

import logging
from contextlib import asynccontextmanager
from typing import AsyncGenerator

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from slowapi import _rate_limit_exceeded_handler
from slowapi.errors import RateLimitExceeded
from slowapi.middleware import SlowAPIMiddleware

from app.api.v1.auth import limiter
from app.api.v1.router import api_router
from app.core.cache import CacheGateway
from app.core.config import Settings, settings
from app.core.container import Container
from app.core.exceptions import register_exception_handlers
from app.core.logging import configure_logging
from app.db.session import Database

logger = logging.getLogger(__name__)


# ── Lifespan ──────────────────────────────────────────────────────────────────
@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """
    Application lifespan handler.
    Runs startup logic before yield and teardown logic after.
    """
    container: Container = app.state.container
    logger.info("Starting %s v%s", app.title, app.version)
    if container.cache.enabled and not await container.cache.ping():
        logger.warning("Cache is unreachable; list endpoints will read through")
    yield
    logger.info("Shutting down %s", app.title)
    await container.close()


# ── Application factory ───────────────────────────────────────────────────────
def create_application(
    app_settings: Settings = settings,
    *,
    database: Database | None = None,
    cache: CacheGateway | None = None,
) -> FastAPI:
    """
    Build the FastAPI app. The database and cache gateways are created here
    unless supplied, and every service receives them through the container.
    """
    configure_logging(app_settings.LOG_LEVEL)

    if database is None:
        database = Database.from_url(app_settings.DATABASE_URL, echo=app_settings.DEBUG)
    if cache is None:
        cache = (
            CacheGateway.from_url(
                app_settings.REDIS_URL, default_ttl=app_settings.CACHE_TTL_SECONDS
            )
            if app_settings.CACHE_ENABLED
            else CacheGateway.disabled()
        )

    app = FastAPI(
        title=app_settings.APP_NAME,
        version=app_settings.APP_VERSION,
        description=(
            "Multi-tenant project management REST API: organizations, projects, "
            "teams, tasks, attachments, comments, tags and activity."
        ),
        docs_url="/docs",
        redoc_url="/redoc",
        openapi_url="/openapi.json",
        lifespan=lifespan,
    )
    app.state.container = Container.build(database, cache)

    # ── CORS ──────────────────────────────────────────────────────────────────
    app.add_middleware(
        CORSMiddleware,
        allow_origins=app_settings.ALLOWED_ORIGINS,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # ── Rate limiting middleware ───────────────────────────────────────────────
    limiter.enabled = app_settings.RATE_LIMIT_ENABLED
    app.state.limiter = limiter
    app.add_middleware(SlowAPIMiddleware)
    app.add_exception_handler(RateLimitExceeded, _rate_limit_exceeded_handler)  # type: ignore[arg-type]

    # ── Custom exception handlers ─────────────────────────────────────────────
    register_exception_handlers(app)

    # ── API routers ───────────────────────────────────────────────────────────
    app.include_router(api_router, prefix=app_settings.API_V1_STR)

    return app


app = create_application()
