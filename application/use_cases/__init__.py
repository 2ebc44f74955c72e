"""
Application Use Cases for the Workout Tracker API.

This package contains application-level use cases that orchestrate domain logic
and coordinate between ports/adapters. Use cases are the entry points for
business operations and contain the application's workflow logic.

Architecture follows Clean Architecture / Hexagonal pattern:
- Use cases orchestrate domain objects and repository ports
- Dependencies are injected via constructors for testability
- Use cases return domain models, not API responses
- Failures are raised as application.exceptions errors

Usage:
    from application.use_cases import SaveWorkoutUseCase, ListWorkoutsUseCase

    save = SaveWorkoutUseCase(workout_repo=workout_repo)
    workout = save.execute_create(
        user_id="user-123",
        name="Leg Day",
        exercises=[{"name": "Squat", "sets": 3, "reps": 8, "weight": 60}],
    )

    workouts = ListWorkoutsUseCase(workout_repo=workout_repo).execute("user-123")
"""

from application.use_cases.delete_workout import DeleteWorkoutUseCase
from application.use_cases.get_profile import GetProfileUseCase
from application.use_cases.get_workout import ListWorkoutsUseCase
from application.use_cases.login_user import LoginUserUseCase
from application.use_cases.register_user import RegisterUserUseCase
from application.use_cases.save_workout import SaveWorkoutUseCase, build_draft

__all__ = [
    # Auth
    "RegisterUserUseCase",
    "LoginUserUseCase",
    "GetProfileUseCase",
    # Workouts
    "ListWorkoutsUseCase",
    "SaveWorkoutUseCase",
    "DeleteWorkoutUseCase",
    "build_draft",
]
