"""
Domain models for the Workout Tracker API.

This package contains pure domain models that are independent of
infrastructure concerns (database, API, external services).

These models represent the core business concepts:
- Workout: The aggregate root, a named ordered list of exercises owned by one user
- WorkoutDraft: The user-editable part of a workout (create/update input)
- Exercise: A single exercise with sets, reps and an optional weight
- UserProfile: The public view of a registered user

Usage:
    >>> from domain.models import WorkoutDraft, Exercise

    >>> draft = WorkoutDraft(
    ...     name="Leg Day",
    ...     exercises=[Exercise(name="Squat", sets=3, reps=8, weight=60)],
    ... )

    >>> # Serialize to JSON
    >>> json_str = draft.model_dump_json(indent=2)
"""

from domain.models.exercise import Exercise
from domain.models.user import AuthResult, UserProfile
from domain.models.workout import Workout, WorkoutDraft

__all__ = [
    "Exercise",
    "Workout",
    "WorkoutDraft",
    "UserProfile",
    "AuthResult",
]
