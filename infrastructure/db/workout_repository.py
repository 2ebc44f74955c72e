"""
Supabase implementation of WorkoutRepository.

This module provides the concrete Supabase implementation for workout persistence.
Exercises are stored as a JSONB document column, so a workout is read and
written as a single row.
"""
import logging
import uuid
from datetime import datetime, timezone
from typing import Any, Dict, List, Optional

from supabase import Client

from application.exceptions import InternalError

logger = logging.getLogger(__name__)

TABLE = "workouts"


def _is_uuid(value: str) -> bool:
    try:
        uuid.UUID(str(value))
    except ValueError:
        return False
    return True


class SupabaseWorkoutRepository:
    """
    Supabase implementation of WorkoutRepository protocol.

    All Supabase query logic for workouts is encapsulated here.
    The client is injected via constructor for testability.
    """

    def __init__(self, client: Client):
        """
        Initialize with Supabase client.

        Args:
            client: Supabase client instance (injected, not global)
        """
        self._client = client

    def get_list(self, owner_id: str) -> List[Dict[str, Any]]:
        """Get workouts for a user, newest first."""
        try:
            result = (
                self._client.table(TABLE)
                .select("*")
                .eq("user_id", owner_id)
                .order("created_at", desc=True)
                .execute()
            )
        except Exception as e:
            logger.error(f"Failed to get workouts for user {owner_id}: {e}")
            raise InternalError("Error fetching workouts", str(e)) from e
        return result.data if result.data else []

    def create(
        self,
        owner_id: str,
        name: str,
        exercises: List[Dict[str, Any]],
    ) -> Dict[str, Any]:
        """Insert a new workout row."""
        data = {
            "user_id": owner_id,
            "name": name,
            "exercises": exercises,
        }
        try:
            result = self._client.table(TABLE).insert(data).execute()
        except Exception as e:
            logger.error(f"Failed to create workout for user {owner_id}: {e}")
            raise InternalError("Error creating workout", str(e)) from e

        if not result.data:
            raise InternalError("Error creating workout", "insert returned no rows")
        return result.data[0]

    def update(
        self,
        workout_id: str,
        owner_id: str,
        name: str,
        exercises: List[Dict[str, Any]],
    ) -> Optional[Dict[str, Any]]:
        """Replace name and exercises of a workout owned by owner_id."""
        # A malformed id can't match any row; Postgres would reject the cast.
        if not _is_uuid(workout_id):
            return None

        data = {
            "name": name,
            "exercises": exercises,
            "updated_at": datetime.now(timezone.utc).isoformat(),
        }
        try:
            result = (
                self._client.table(TABLE)
                .update(data)
                .eq("id", workout_id)
                .eq("user_id", owner_id)
                .execute()
            )
        except Exception as e:
            logger.error(f"Failed to update workout {workout_id}: {e}")
            raise InternalError("Error updating workout", str(e)) from e

        if result.data and len(result.data) > 0:
            return result.data[0]
        return None

    def delete(self, workout_id: str, owner_id: str) -> bool:
        """Delete a workout owned by owner_id."""
        if not _is_uuid(workout_id):
            return False

        try:
            result = (
                self._client.table(TABLE)
                .delete()
                .eq("id", workout_id)
                .eq("user_id", owner_id)
                .execute()
            )
        except Exception as e:
            logger.error(f"Failed to delete workout {workout_id}: {e}")
            raise InternalError("Error deleting workout", str(e)) from e

        deleted_count = len(result.data) if result.data else 0
        return deleted_count > 0
