"""
Exercise value object for workout exercises.
"""

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


class Exercise(BaseModel):
    """
    Value object representing an exercise within a workout.

    An exercise has no identity of its own: it exists only inside the
    workout that owns it and is replaced in full whenever that workout is
    updated.

    Examples:
        >>> exercise = Exercise(name="Squat", sets=3, reps=8, weight=60)
        >>> exercise.weight
        60.0

        >>> Exercise(name="Pull Up", sets=4, reps=10).weight is None
        True
    """

    model_config = ConfigDict(str_strip_whitespace=True)

    name: str = Field(..., min_length=1, description="Exercise name")
    sets: int = Field(..., ge=1, strict=True, description="Number of sets")
    reps: int = Field(..., ge=1, strict=True, description="Reps per set")
    weight: Optional[float] = Field(
        default=None,
        ge=0,
        strict=True,
        allow_inf_nan=False,
        description="Working weight; null for bodyweight exercises",
    )
