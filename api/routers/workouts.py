"""
Workouts router for workout CRUD.

This router contains endpoints for:
- GET /workouts - List the user's workouts, newest first
- POST /workouts - Create a workout
- PUT /workouts/{workout_id} - Replace a workout's name and exercises
- DELETE /workouts/{workout_id} - Delete a workout

Every endpoint is behind the Access Guard and scoped to the token's user.
A workout owned by someone else answers 404, exactly like a missing one.
"""

import logging
from typing import Any, List

from fastapi import APIRouter, Depends
from pydantic import BaseModel

from api.deps import (
    get_current_user,
    get_delete_workout_use_case,
    get_list_workouts_use_case,
    get_save_workout_use_case,
)
from application.use_cases import DeleteWorkoutUseCase, ListWorkoutsUseCase, SaveWorkoutUseCase
from domain.models import Workout

logger = logging.getLogger(__name__)

router = APIRouter(
    prefix="/workouts",
    tags=["Workouts"],
)


# =============================================================================
# Request/Response Models
# =============================================================================


class WorkoutRequest(BaseModel):
    """
    Body of create and update.

    Fields are loosely typed so the use case can report missing names and
    exercises with its own messages.
    """
    name: Any = None
    exercises: Any = None


class DeleteWorkoutResponse(BaseModel):
    """Confirmation of a deletion."""
    message: str = "Workout deleted"
    id: str


# =============================================================================
# Workout CRUD Endpoints
# =============================================================================


@router.get("", response_model=List[Workout])
def list_workouts(
    user_id: str = Depends(get_current_user),
    use_case: ListWorkoutsUseCase = Depends(get_list_workouts_use_case),
) -> List[Workout]:
    """List all workouts of the authenticated user."""
    return use_case.execute(user_id)


@router.post("", response_model=Workout, status_code=201)
def create_workout(
    request: WorkoutRequest,
    user_id: str = Depends(get_current_user),
    use_case: SaveWorkoutUseCase = Depends(get_save_workout_use_case),
) -> Workout:
    """Create a workout owned by the authenticated user."""
    return use_case.execute_create(
        user_id=user_id,
        name=request.name,
        exercises=request.exercises,
    )


@router.put("/{workout_id}", response_model=Workout)
def update_workout(
    workout_id: str,
    request: WorkoutRequest,
    user_id: str = Depends(get_current_user),
    use_case: SaveWorkoutUseCase = Depends(get_save_workout_use_case),
) -> Workout:
    """Replace name and exercises; the previous exercise list is discarded."""
    return use_case.execute_update(
        workout_id=workout_id,
        user_id=user_id,
        name=request.name,
        exercises=request.exercises,
    )


@router.delete("/{workout_id}", response_model=DeleteWorkoutResponse)
def delete_workout(
    workout_id: str,
    user_id: str = Depends(get_current_user),
    use_case: DeleteWorkoutUseCase = Depends(get_delete_workout_use_case),
) -> DeleteWorkoutResponse:
    """Permanently delete a workout."""
    deleted_id = use_case.execute(workout_id=workout_id, user_id=user_id)
    return DeleteWorkoutResponse(id=deleted_id)
