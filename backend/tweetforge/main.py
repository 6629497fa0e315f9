"""FastAPI application factory wiring routes, services, and shared state."""
from __future__ import annotations

import logging
import time
from typing import Optional

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from tweetforge.api import routes_health, routes_tweets
from tweetforge.core.config import Settings, get_settings
from tweetforge.core.db import Base, build_engine, build_session_factory
from tweetforge.core.errors import ConfigurationError, TweetForgeError
from tweetforge.models import tweet, user  # noqa: F401 - ensure models are registered
from tweetforge.repositories.storage import DatabaseStorage, Storage
from tweetforge.schemas.common import ErrorResponse
from tweetforge.services.inference_client import InferenceClient, InferenceConfig
from tweetforge.services.tweet_service import TweetService

LOGGER = logging.getLogger(__name__)


def _build_inference_client(settings: Settings) -> Optional[InferenceClient]:
    try:
        return InferenceClient(InferenceConfig.from_settings(settings))
    except ConfigurationError as exc:
        if settings.INFERENCE_STRICT_STARTUP:
            raise
        LOGGER.warning("⚠️ %s; /api/generate will answer 500 until configured", exc.detail)
        return None


def _error_response(status_code: int, message: str) -> JSONResponse:
    return JSONResponse(status_code=status_code, content=ErrorResponse(error=message).model_dump())


def create_app(
    settings: Optional[Settings] = None,
    storage: Optional[Storage] = None,
    inference_client: Optional[InferenceClient] = None,
) -> FastAPI:
    settings = settings or get_settings()
    logging.basicConfig(
        level=settings.LOG_LEVEL.upper(),
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    )
    app = FastAPI(title="TweetForge", version="0.1.0")

    # Initialize persistence and services
    if storage is None:
        engine = build_engine(settings)
        Base.metadata.create_all(bind=engine)
        storage = DatabaseStorage(build_session_factory(engine))
    if inference_client is None:
        inference_client = _build_inference_client(settings)

    app.state.tweet_service = TweetService(
        storage,
        inference_client,
        default_style=settings.DEFAULT_TWEET_STYLE,
        default_limit=settings.DEFAULT_TWEETS_LIMIT,
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.CORS_ALLOW_ORIGINS,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.include_router(routes_tweets.router)
    app.include_router(routes_health.router)

    @app.exception_handler(TweetForgeError)
    async def handle_tweetforge_error(request: Request, exc: TweetForgeError) -> JSONResponse:
        if exc.status_code >= 500:
            LOGGER.error("❌ %s %s failed: %s", request.method, request.url.path, exc.detail)
        return _error_response(exc.status_code, exc.public_message)

    @app.exception_handler(RequestValidationError)
    async def handle_validation_error(request: Request, exc: RequestValidationError) -> JSONResponse:
        errors = exc.errors()
        LOGGER.info("Rejected %s %s: %s", request.method, request.url.path, errors)
        if any(err.get("loc", ())[-1:] in (("message",), ("body",)) for err in errors):
            return _error_response(status.HTTP_400_BAD_REQUEST, "Message is required")
        return _error_response(status.HTTP_400_BAD_REQUEST, "Invalid request body")

    @app.middleware("http")
    async def log_requests(request: Request, call_next):
        start = time.perf_counter()
        logging.info("📥 %s %s START", request.method, request.url.path)
        response = await call_next(request)
        elapsed = (time.perf_counter() - start) * 1000
        logging.info("🚀 %s %s -> %s (%.1f ms)", request.method, request.url.path, response.status_code, elapsed)
        return response

    return app
