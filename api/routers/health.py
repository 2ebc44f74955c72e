"""
Health check router.

This router provides the service root and a health check endpoint for
monitoring and load balancers. Neither touches the store.
"""

import logging
import time
from datetime import datetime, timezone

from fastapi import APIRouter, Depends

from api.deps import get_settings
from backend.settings import Settings

logger = logging.getLogger(__name__)

_STARTED_AT = time.monotonic()

router = APIRouter(
    tags=["Health"],
)


@router.get("/")
def root():
    """
    Service discovery endpoint.

    Returns:
        dict: Service name, version and the main endpoint groups
    """
    return {
        "message": "Welcome to Workout Tracker API",
        "version": "1.0.0",
        "status": "active",
        "endpoints": {
            "auth": "/auth",
            "workouts": "/workouts",
            "health": "/health",
        },
    }


@router.get("/health")
def health(settings: Settings = Depends(get_settings)):
    """
    Liveness endpoint that also reports missing required configuration.

    Returns:
        dict: "ok" when fully configured, "degraded" otherwise
    """
    missing = settings.missing_config
    if missing:
        logger.warning(f"Health check: missing configuration {missing}")
    return {
        "status": "degraded" if missing else "ok",
        "timestamp": datetime.now(timezone.utc).isoformat(),
        "uptime_seconds": round(time.monotonic() - _STARTED_AT, 3),
        "environment": settings.environment,
        "missing_config": missing,
    }
