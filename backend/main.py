"""
Application factory for FastAPI.

This module provides a factory function for creating FastAPI application instances.
The factory pattern allows for:
- Easy testing with custom settings
- Multiple app instances with different configurations
- Clear separation of app creation from route definitions

Usage:
    from backend.main import create_app
    from backend.settings import Settings

    # Default app (uses get_settings())
    app = create_app()

    # Test app with custom settings
    test_settings = Settings(environment="test", _env_file=None)
    test_app = create_app(settings=test_settings)
"""

import logging
from contextlib import asynccontextmanager
from typing import Optional

import sentry_sdk
from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from application.exceptions import WorkoutTrackerError
from backend.settings import Settings, get_settings

logger = logging.getLogger(__name__)


def create_app(settings: Optional[Settings] = None) -> FastAPI:
    """
    Create and configure a FastAPI application instance.

    Args:
        settings: Optional Settings instance. If not provided, uses get_settings()
                  which loads from environment variables.

    Returns:
        Configured FastAPI application instance.
    """
    if settings is None:
        settings = get_settings()

    # Initialize Sentry for error tracking
    _init_sentry(settings)

    # Create FastAPI app
    app = FastAPI(
        title="Workout Tracker API",
        description="Personal workout tracking API",
        version="1.0.0",
        lifespan=_lifespan,
    )
    app.state.settings = settings

    # Configure CORS middleware
    _configure_cors(app, settings)

    # Map application errors to JSON responses
    _register_exception_handlers(app, settings)

    # Include API routers
    _include_routers(app)

    return app


@asynccontextmanager
async def _lifespan(app: FastAPI):
    """Verify the store before serving traffic."""
    _verify_store(app.state.settings)
    yield


def _verify_store(settings: Settings) -> None:
    """
    Ping the store; raise to abort startup if it is unreachable.

    Skipped in the test environment and when VERIFY_STORE_ON_STARTUP is off.
    """
    if settings.is_test or not settings.verify_store_on_startup:
        return

    from api.deps import _create_supabase_client
    from infrastructure import SupabaseUserRepository

    if not settings.supabase_url or not settings.supabase_key:
        logger.critical("Supabase credentials not configured; refusing to start")
        raise RuntimeError("SUPABASE_URL and a Supabase key are required")

    client = _create_supabase_client(settings.supabase_url, settings.supabase_key)
    try:
        SupabaseUserRepository(client).ping()
    except WorkoutTrackerError as e:
        logger.critical(f"Store connection error: {e.detail}")
        raise RuntimeError("Could not connect to the store") from e
    logger.info("Connected to Supabase")


def _init_sentry(settings: Settings) -> None:
    """Initialize Sentry SDK if DSN is configured."""
    if settings.sentry_dsn:
        sentry_sdk.init(
            dsn=settings.sentry_dsn,
            environment=settings.environment,
            traces_sample_rate=0.1,  # 10% of transactions for performance monitoring
            profiles_sample_rate=0.1,
            enable_tracing=True,
        )
        logger.info("Sentry initialized for workout-tracker-api")


def _configure_cors(app: FastAPI, settings: Settings) -> None:
    """Configure CORS middleware for the application."""
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins_list,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )


def _error_body(message: str, detail: Optional[str], settings: Settings) -> dict:
    body = {"message": message}
    # Diagnostic detail is only exposed outside production
    if detail and not settings.is_production:
        body["error"] = detail
    return body


def _register_exception_handlers(app: FastAPI, settings: Settings) -> None:
    """Render every failure as {"message": ..., "error": ...} JSON."""

    @app.exception_handler(WorkoutTrackerError)
    async def workout_tracker_error_handler(request: Request, exc: WorkoutTrackerError):
        if exc.status_code >= 500:
            logger.error(f"{request.method} {request.url.path} failed: {exc.message} ({exc.detail})")
        return JSONResponse(
            status_code=exc.status_code,
            content=_error_body(exc.message, exc.detail, settings),
        )

    @app.exception_handler(RequestValidationError)
    async def request_validation_error_handler(request: Request, exc: RequestValidationError):
        errors = exc.errors()
        first = errors[0] if errors else {}
        location = ".".join(str(part) for part in first.get("loc", ()) if part != "body")
        if first.get("type") == "json_invalid":
            message = "Invalid JSON body"
        elif location:
            message = f"Invalid request: {location} {first.get('msg', '')}".strip()
        else:
            message = "Invalid request body"
        return JSONResponse(
            status_code=400,
            content=_error_body(message, str(errors), settings),
        )

    @app.exception_handler(StarletteHTTPException)
    async def http_exception_handler(request: Request, exc: StarletteHTTPException):
        if exc.status_code == 404 and exc.detail == "Not Found":
            content = {"message": "Route not found", "path": request.url.path}
        else:
            content = {"message": str(exc.detail)}
        return JSONResponse(status_code=exc.status_code, content=content, headers=exc.headers)

    @app.exception_handler(Exception)
    async def unhandled_exception_handler(request: Request, exc: Exception):
        logger.exception(f"Unhandled error on {request.method} {request.url.path}")
        return JSONResponse(
            status_code=500,
            content=_error_body("Something went wrong!", repr(exc), settings),
        )


def _include_routers(app: FastAPI) -> None:
    """Include all API routers in the application."""
    from api.routers import (
        auth_router,
        health_router,
        workouts_router,
    )

    # Health router (no prefix - / and /health at root)
    app.include_router(health_router)

    # Domain routers (with prefixes defined in each router)
    app.include_router(auth_router)
    app.include_router(workouts_router)


# Default app instance for uvicorn
# This allows: uvicorn backend.main:app --reload
app = create_app()
