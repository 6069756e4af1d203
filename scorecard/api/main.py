"""
Scorecard API Application Entry Point

    uvicorn scorecard.api.main:app --host 0.0.0.0 --port 8000 --workers 4

Several workers may serve the same user at once; rating mutations stay
serialized per (user, content) through the Redis locks, so the only shared
state between workers is the database and Redis.

Request path:
=============
    CORS → request context (request_id, path) → route
         → auth (user_id) → RatingService → validator / repository
    errors → exception handlers → {"error": {...}}
"""

from contextlib import asynccontextmanager
from typing import AsyncGenerator

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from scorecard.config.settings import settings
from scorecard.shared.adapters.redis_adapter import close_redis
from scorecard.shared.db import close_db, init_db
from scorecard.shared.core.logging import logger
from scorecard.api.middleware import setup_exception_handlers, setup_request_context
from scorecard.api.routes import register_routes


@asynccontextmanager
async def lifespan(_app: FastAPI) -> AsyncGenerator[None, None]:
    """Check the database at startup; release the database and Redis at shutdown."""
    logger.info(
        "Starting Scorecard API",
        version=settings.APP_VERSION,
        environment=settings.APP_ENV,
    )
    await init_db()

    yield

    await close_redis()
    await close_db()
    logger.info("Scorecard API stopped")


def create_application() -> FastAPI:
    """Build the app: middleware, exception handlers, then routes."""
    app = FastAPI(
        title=settings.APP_NAME,
        description="Per-user, per-category content ratings",
        version=settings.APP_VERSION,
        docs_url="/docs" if settings.is_development else None,
        redoc_url=None,
        lifespan=lifespan,
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.CORS_ORIGINS,
        allow_credentials=True,
        allow_methods=["GET", "POST", "PUT", "DELETE"],
        allow_headers=["Authorization", "Content-Type"],
    )
    setup_request_context(app)
    setup_exception_handlers(app)
    register_routes(app)

    return app


app = create_application()
