"""
Router package for the Workout Tracker API.

This package contains all API routers organized by domain:
- health: Service root and health check
- auth: Signup, login and current-user profile
- workouts: Workout CRUD scoped to the authenticated user
"""

from api.routers.auth import router as auth_router
from api.routers.health import router as health_router
from api.routers.workouts import router as workouts_router

__all__ = [
    "auth_router",
    "health_router",
    "workouts_router",
]
