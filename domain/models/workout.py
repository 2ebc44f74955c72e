"""
Workout aggregate root - the main domain entity.
"""

from datetime import datetime
from typing import Any, Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field

from domain.models.exercise import Exercise


class WorkoutDraft(BaseModel):
    """
    The user-editable part of a workout.

    Used as the validated input of both create and update: an update
    replaces the name and the whole exercise list with a new draft.

    Examples:
        >>> draft = WorkoutDraft(
        ...     name="Leg Day",
        ...     exercises=[Exercise(name="Squat", sets=3, reps=8, weight=60)],
        ... )
        >>> draft.exercise_count
        1
    """

    model_config = ConfigDict(str_strip_whitespace=True)

    name: str = Field(..., min_length=1, description="Workout name")
    exercises: List[Exercise] = Field(
        ...,
        min_length=1,
        description="Ordered exercises; at least one",
    )

    @property
    def exercise_count(self) -> int:
        return len(self.exercises)

    def exercises_payload(self) -> List[Dict[str, Any]]:
        """Exercises as plain dicts, in order, ready for storage."""
        return [exercise.model_dump() for exercise in self.exercises]


class Workout(WorkoutDraft):
    """
    A stored workout owned by exactly one user.

    Examples:
        >>> record = {
        ...     "id": "7b0c...",
        ...     "user_id": "u1",
        ...     "name": "Leg Day",
        ...     "exercises": [{"name": "Squat", "sets": 3, "reps": 8, "weight": 60}],
        ...     "created_at": "2024-01-01T10:00:00+00:00",
        ...     "updated_at": None,
        ... }
        >>> Workout.from_record(record).name
        'Leg Day'
    """

    id: str = Field(..., description="Workout identifier")
    user_id: str = Field(..., description="Owning user identifier")
    created_at: datetime = Field(..., description="Creation timestamp")
    updated_at: Optional[datetime] = Field(
        default=None, description="Timestamp of the last update"
    )

    @classmethod
    def from_record(cls, record: Dict[str, Any]) -> "Workout":
        """Build a Workout from a repository record."""
        return cls(
            id=str(record["id"]),
            user_id=str(record["user_id"]),
            name=record["name"],
            exercises=record.get("exercises") or [],
            created_at=record["created_at"],
            updated_at=record.get("updated_at"),
        )
