"""
SaveWorkout Use Case.

Orchestrates workout persistence with validation, handling both
create (new workout) and update (existing workout) operations.
An update replaces the name and the entire exercise list; nothing from
the previous exercise list survives.
"""

import logging
from typing import Any, Dict, List, Optional

from pydantic import ValidationError as PydanticValidationError

from application.exceptions import NotFoundError, ValidationError
from application.ports import WorkoutRepository
from domain.models import Workout, WorkoutDraft

logger = logging.getLogger(__name__)

_FIELD_MESSAGES = {
    ("name", "missing"): "name is required",
    ("name", "string_too_short"): "name is required",
    ("sets", "missing"): "sets is required",
    ("sets", "greater_than_equal"): "sets must be at least 1",
    ("sets", "int_type"): "sets must be a whole number",
    ("reps", "missing"): "reps is required",
    ("reps", "greater_than_equal"): "reps must be at least 1",
    ("reps", "int_type"): "reps must be a whole number",
    ("weight", "greater_than_equal"): "weight cannot be negative",
    ("weight", "float_type"): "weight must be a number",
    ("weight", "finite_number"): "weight must be a finite number",
}


def _describe_error(exc: PydanticValidationError) -> str:
    """Turn the first pydantic error into a message a form can show."""
    error = exc.errors()[0]
    loc = error.get("loc", ())
    if len(loc) >= 3 and loc[0] == "exercises" and isinstance(loc[1], int):
        field = str(loc[2])
        text = _FIELD_MESSAGES.get((field, error.get("type")), f"{field}: {error.get('msg')}")
        return f"Exercise {loc[1] + 1}: {text}"
    if len(loc) == 2 and loc[0] == "exercises":
        return f"Exercise {loc[1] + 1}: {error.get('msg')}"
    if loc and loc[0] == "name":
        return "Workout name is required"
    return error.get("msg", "Invalid workout")


def build_draft(name: Any, exercises: Any) -> WorkoutDraft:
    """
    Validate raw request input into a WorkoutDraft.

    Raises:
        ValidationError: With a message naming the first problem found
    """
    if not isinstance(name, str) or not name.strip():
        raise ValidationError("Workout name is required")
    if not isinstance(exercises, list) or len(exercises) == 0:
        raise ValidationError("At least one exercise is required")

    try:
        return WorkoutDraft(name=name, exercises=exercises)
    except PydanticValidationError as e:
        raise ValidationError(_describe_error(e), str(e)) from e


class SaveWorkoutUseCase:
    """
    Use case for creating and replacing workouts.

    Dependencies are injected via constructor for testability.

    Usage:
        >>> use_case = SaveWorkoutUseCase(workout_repo=workout_repo)
        >>> workout = use_case.execute_create(
        ...     user_id="user-123",
        ...     name="Leg Day",
        ...     exercises=[{"name": "Squat", "sets": 3, "reps": 8, "weight": 60}],
        ... )
    """

    def __init__(self, workout_repo: WorkoutRepository) -> None:
        """
        Initialize the use case with required dependencies.

        Args:
            workout_repo: Repository for persisting workouts
        """
        self._workout_repo = workout_repo

    def execute_create(
        self,
        user_id: str,
        name: Any,
        exercises: Optional[List[Dict[str, Any]]],
    ) -> Workout:
        """
        Create a workout owned by user_id.

        Raises:
            ValidationError: If the name is empty, there are no exercises,
                or an exercise breaks its field rules
        """
        draft = build_draft(name, exercises)
        record = self._workout_repo.create(
            owner_id=user_id,
            name=draft.name,
            exercises=draft.exercises_payload(),
        )
        logger.info(f"Workout created for user {user_id}: {record.get('id')}")
        return Workout.from_record(record)

    def execute_update(
        self,
        workout_id: str,
        user_id: str,
        name: Any,
        exercises: Optional[List[Dict[str, Any]]],
    ) -> Workout:
        """
        Replace a workout's name and exercises.

        Raises:
            ValidationError: Same rules as execute_create
            NotFoundError: If user_id owns no workout with this ID
        """
        draft = build_draft(name, exercises)
        record = self._workout_repo.update(
            workout_id=workout_id,
            owner_id=user_id,
            name=draft.name,
            exercises=draft.exercises_payload(),
        )
        if record is None:
            logger.warning(f"Update of workout {workout_id} by user {user_id}: not found")
            raise NotFoundError("Workout not found")

        logger.info(f"Workout updated: {workout_id}")
        return Workout.from_record(record)
