"""
Domain layer for the Workout Tracker API.

This package contains pure domain models that are independent of
infrastructure concerns (database, API, external services).
"""

from domain.models import (
    AuthResult,
    Exercise,
    UserProfile,
    Workout,
    WorkoutDraft,
)

__all__ = [
    "AuthResult",
    "Exercise",
    "UserProfile",
    "Workout",
    "WorkoutDraft",
]
