"""
Repository Interfaces (Ports) for the Workout Tracker API.

This package defines abstract interfaces that decouple domain logic from
infrastructure (database, external services). Implementations are provided
in the infrastructure layer.

Architecture follows the Ports & Adapters (Hexagonal) pattern:
- Ports: Abstract interfaces defined here (what the domain needs)
- Adapters: Concrete implementations in infrastructure/ (how it's provided)

Usage:
    from application.ports import WorkoutRepository

    class ListWorkoutsUseCase:
        def __init__(self, workout_repo: WorkoutRepository):
            self._workout_repo = workout_repo
"""

# Credential store
from application.ports.user_repository import UserRepository

# Workout store
from application.ports.workout_repository import WorkoutRepository

__all__ = [
    "UserRepository",
    "WorkoutRepository",
]
