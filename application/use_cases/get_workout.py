"""
Get Workout Use Case.

This use case handles listing the acting user's workouts.
"""
import logging
from typing import List

from application.ports import WorkoutRepository
from domain.models import Workout

logger = logging.getLogger(__name__)


class ListWorkoutsUseCase:
    """
    Use case for listing workouts.

    Only workouts owned by the given user are ever returned, newest first.
    An empty list is a normal result.
    """

    def __init__(self, workout_repo: WorkoutRepository):
        """
        Initialize with required dependencies.

        Args:
            workout_repo: Repository for workout persistence
        """
        self._workout_repo = workout_repo

    def execute(self, user_id: str) -> List[Workout]:
        """
        List workouts for a user.

        Args:
            user_id: Current user ID

        Returns:
            Workouts ordered by creation time, descending
        """
        records = self._workout_repo.get_list(user_id)
        workouts = [Workout.from_record(r) for r in records]
        workouts.sort(key=lambda w: w.created_at, reverse=True)
        logger.debug(f"Found {len(workouts)} workouts for user {user_id}")
        return workouts
