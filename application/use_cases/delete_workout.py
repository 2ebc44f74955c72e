"""
Delete Workout Use Case.

Deletion is permanent; there is no archive or undo.
"""
import logging

from application.exceptions import NotFoundError
from application.ports import WorkoutRepository

logger = logging.getLogger(__name__)


class DeleteWorkoutUseCase:
    """Use case for deleting one of the acting user's workouts."""

    def __init__(self, workout_repo: WorkoutRepository):
        self._workout_repo = workout_repo

    def execute(self, workout_id: str, user_id: str) -> str:
        """
        Delete a workout.

        Returns:
            The deleted workout's ID

        Raises:
            NotFoundError: If user_id owns no workout with this ID
        """
        logger.info(f"Attempting to delete workout {workout_id} for user {user_id}")
        if not self._workout_repo.delete(workout_id, user_id):
            logger.warning(f"No workout {workout_id} owned by user {user_id}")
            raise NotFoundError("Workout not found")

        logger.info(f"Workout {workout_id} deleted")
        return workout_id
