"""
Form state and parsing for the client.

Fields hold strings exactly as a user typed them. to_payload() turns a
WorkoutForm into the request body the API expects and raises FormError with
a message naming the first bad field; the server validates again on its side.
"""

import math
import re
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

from domain.models import Workout

EMAIL_PATTERN = re.compile(r"\S+@\S+\.\S+")


class FormError(ValueError):
    """User input that cannot be submitted."""

    pass


@dataclass
class ExerciseForm:
    name: str = ""
    sets: str = ""
    reps: str = ""
    weight: str = ""


@dataclass
class WorkoutForm:
    """
    Editable workout: a name plus a list of exercise rows.

    A new form starts with one blank exercise row.
    """

    name: str = ""
    exercises: List[ExerciseForm] = field(default_factory=lambda: [ExerciseForm()])

    def add_exercise(self, exercise: Optional[ExerciseForm] = None) -> None:
        self.exercises.append(exercise or ExerciseForm())

    def remove_exercise(self, index: int) -> None:
        """Drop the row at index; an out-of-range index raises FormError."""
        if not 0 <= index < len(self.exercises):
            raise FormError(f"No exercise at position {index + 1}")
        del self.exercises[index]

    def to_payload(self) -> Dict[str, Any]:
        """
        Build the create/update request body.

        Raises:
            FormError: If the name is blank, there are no exercises, or a
                row has a blank name or non-numeric sets, reps or weight
        """
        name = self.name.strip()
        if not name:
            raise FormError("Workout name is required")
        if not self.exercises:
            raise FormError("At least one exercise is required")

        return {
            "name": name,
            "exercises": [
                _exercise_payload(position, exercise)
                for position, exercise in enumerate(self.exercises, start=1)
            ],
        }


def _exercise_payload(position: int, exercise: ExerciseForm) -> Dict[str, Any]:
    name = exercise.name.strip()
    if not name:
        raise FormError(f"Exercise {position}: name is required")

    payload: Dict[str, Any] = {
        "name": name,
        "sets": _parse_count(position, "sets", exercise.sets),
        "reps": _parse_count(position, "reps", exercise.reps),
        "weight": None,
    }

    weight = exercise.weight.strip()
    if weight:
        try:
            payload["weight"] = float(weight)
        except ValueError:
            raise FormError(f"Exercise {position}: weight must be a number")
        if not math.isfinite(payload["weight"]):
            raise FormError(f"Exercise {position}: weight must be a finite number")
        if payload["weight"] < 0:
            raise FormError(f"Exercise {position}: weight cannot be negative")
    return payload


def _parse_count(position: int, label: str, raw: str) -> int:
    try:
        value = int(raw.strip())
    except ValueError:
        raise FormError(f"Exercise {position}: {label} must be a whole number")
    if value < 1:
        raise FormError(f"Exercise {position}: {label} must be at least 1")
    return value


def from_workout(workout: Workout) -> WorkoutForm:
    """Pre-fill an edit form from a stored workout."""
    return WorkoutForm(
        name=workout.name,
        exercises=[
            ExerciseForm(
                name=exercise.name,
                sets=str(exercise.sets),
                reps=str(exercise.reps),
                weight="" if exercise.weight is None else f"{exercise.weight:g}",
            )
            for exercise in workout.exercises
        ],
    )


def validate_login_form(email: str, password: str) -> str:
    """
    Check a login form before it is sent.

    Returns:
        The trimmed email

    Raises:
        FormError: On a missing field or an email without the a@b.c shape
    """
    email = email.strip()
    if not email:
        raise FormError("Email is required")
    if not password:
        raise FormError("Password is required")
    if not EMAIL_PATTERN.search(email):
        raise FormError("Please enter a valid email address")
    return email


def filter_workouts(workouts: List[Workout], query: str) -> List[Workout]:
    """Keep workouts whose name or any exercise name contains query, ignoring case."""
    needle = query.strip().lower()
    if not needle:
        return list(workouts)
    return [
        workout
        for workout in workouts
        if needle in workout.name.lower()
        or any(needle in exercise.name.lower() for exercise in workout.exercises)
    ]
