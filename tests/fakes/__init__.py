"""
Fake Repository Implementations for Testing.

This package provides in-memory fake implementations of repository interfaces
for fast, isolated testing. No database or external dependencies required.

Features:
- All fakes implement the same Protocol interfaces as real implementations
- Supports seeding with test data
- Supports reset() for test isolation
- Factory functions for common test scenarios

Usage:
    from tests.fakes import FakeWorkoutRepository, create_workout_repo

    # Direct instantiation
    repo = FakeWorkoutRepository()
    repo.seed([{"id": "w1", "user_id": "user1", "name": "Leg Day"}])

    # Factory function with pre-populated data
    repo = create_workout_repo(user_id="user1", num_workouts=5)
"""
from tests.fakes.user_repository import FakeUserRepository
from tests.fakes.workout_repository import FakeWorkoutRepository


# =============================================================================
# Factory Functions
# =============================================================================


def create_workout_repo(
    *,
    user_id: str = "test_user",
    num_workouts: int = 0,
) -> FakeWorkoutRepository:
    """
    Create a FakeWorkoutRepository with optional pre-populated workouts.

    Args:
        user_id: Owner of the generated workouts
        num_workouts: Number of sample workouts to create

    Returns:
        Pre-populated FakeWorkoutRepository
    """
    repo = FakeWorkoutRepository()
    for i in range(num_workouts):
        repo.create(
            owner_id=user_id,
            name=f"Test Workout {i + 1}",
            exercises=[{"name": "Squat", "sets": 3, "reps": 8, "weight": 60.0}],
        )
    return repo


__all__ = [
    "FakeUserRepository",
    "FakeWorkoutRepository",
    "create_workout_repo",
]
