"""
Workout Repository Interface (Port).

This module defines the abstract interface for workout persistence operations.
Implementations may use Supabase, in-memory storage, or other backends.
"""
from typing import Any, Dict, List, Optional, Protocol


class WorkoutRepository(Protocol):
    """
    Abstract interface for workout persistence operations.

    Every method is scoped to an owner: a workout that exists but belongs to
    another user behaves exactly like a workout that does not exist.

    Records are plain dicts with the keys id, user_id, name, exercises,
    created_at and updated_at. Store failures raise InternalError.
    """

    def get_list(self, owner_id: str) -> List[Dict[str, Any]]:
        """
        Get all workouts owned by a user.

        Args:
            owner_id: Acting user ID

        Returns:
            List of workout records, ordered by created_at desc
        """
        ...

    def create(
        self,
        owner_id: str,
        name: str,
        exercises: List[Dict[str, Any]],
    ) -> Dict[str, Any]:
        """
        Persist a new workout.

        Args:
            owner_id: Acting user ID, stored as the workout owner
            name: Workout name
            exercises: Ordered exercise dicts (name, sets, reps, weight)

        Returns:
            The stored workout record with its generated id and created_at
        """
        ...

    def update(
        self,
        workout_id: str,
        owner_id: str,
        name: str,
        exercises: List[Dict[str, Any]],
    ) -> Optional[Dict[str, Any]]:
        """
        Replace a workout's name and full exercise list.

        Args:
            workout_id: Workout UUID
            owner_id: Acting user ID (for authorization)
            name: New workout name
            exercises: New exercise list; the previous list is discarded

        Returns:
            Updated workout record, or None if not found/not owned
        """
        ...

    def delete(self, workout_id: str, owner_id: str) -> bool:
        """
        Permanently delete a workout.

        Args:
            workout_id: Workout UUID
            owner_id: Acting user ID (for authorization)

        Returns:
            True if deleted, False if not found or not owned
        """
        ...
