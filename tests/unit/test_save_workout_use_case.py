"""
Unit tests for SaveWorkoutUseCase.

Tests for:
- Create and update paths against the fake repository
- Validation messages for missing names, exercises and bad fields
- Owner scoping on update
"""

import pytest

from application.exceptions import NotFoundError, ValidationError
from application.use_cases import SaveWorkoutUseCase, build_draft
from tests.fakes.workout_repository import FakeWorkoutRepository


# =============================================================================
# Fixtures
# =============================================================================


@pytest.fixture
def workout_repo() -> FakeWorkoutRepository:
    """Create a fresh fake workout repository."""
    return FakeWorkoutRepository()


@pytest.fixture
def use_case(workout_repo: FakeWorkoutRepository) -> SaveWorkoutUseCase:
    """Create SaveWorkoutUseCase with fake dependencies."""
    return SaveWorkoutUseCase(workout_repo=workout_repo)


EXERCISES = [
    {"name": "Squat", "sets": 3, "reps": 8, "weight": 60},
    {"name": "Lunge", "sets": 3, "reps": 12},
    {"name": "Calf Raise", "sets": 4, "reps": 15, "weight": 0},
]


# =============================================================================
# build_draft
# =============================================================================


@pytest.mark.unit
class TestBuildDraft:

    @pytest.mark.parametrize("name", [None, "", "   ", 42])
    def test_name_required(self, name):
        with pytest.raises(ValidationError) as exc_info:
            build_draft(name, EXERCISES)
        assert exc_info.value.message == "Workout name is required"

    @pytest.mark.parametrize("exercises", [None, [], "Squat", {"name": "Squat"}])
    def test_exercises_required(self, exercises):
        with pytest.raises(ValidationError) as exc_info:
            build_draft("Leg Day", exercises)
        assert exc_info.value.message == "At least one exercise is required"

    @pytest.mark.parametrize(
        "exercise, message",
        [
            ({"name": "", "sets": 3, "reps": 8}, "Exercise 2: name is required"),
            ({"name": "Row", "sets": 0, "reps": 8}, "Exercise 2: sets must be at least 1"),
            ({"name": "Row", "sets": 3, "reps": 0}, "Exercise 2: reps must be at least 1"),
            ({"name": "Row", "reps": 8}, "Exercise 2: sets is required"),
            ({"name": "Row", "sets": 3, "reps": 8, "weight": -5}, "Exercise 2: weight cannot be negative"),
            ({"name": "Row", "sets": True, "reps": 8}, "Exercise 2: sets must be a whole number"),
            ({"name": "Row", "sets": 3, "reps": "8"}, "Exercise 2: reps must be a whole number"),
            ({"name": "Row", "sets": 2.5, "reps": 8}, "Exercise 2: sets must be a whole number"),
            ({"name": "Row", "sets": 3, "reps": 8, "weight": "60"}, "Exercise 2: weight must be a number"),
            ({"name": "Row", "sets": 3, "reps": 8, "weight": False}, "Exercise 2: weight must be a number"),
            ({"name": "Row", "sets": 3, "reps": 8, "weight": float("inf")}, "Exercise 2: weight must be a finite number"),
            ({"name": "Row", "sets": 3, "reps": 8, "weight": float("nan")}, "Exercise 2: weight must be a finite number"),
        ],
    )
    def test_exercise_field_rules(self, exercise, message):
        with pytest.raises(ValidationError) as exc_info:
            build_draft("Leg Day", [EXERCISES[0], exercise])
        assert exc_info.value.message == message
        assert exc_info.value.detail

    def test_exercise_that_is_not_an_object(self):
        with pytest.raises(ValidationError) as exc_info:
            build_draft("Leg Day", ["Squat"])
        assert exc_info.value.message.startswith("Exercise 1:")


# =============================================================================
# Create
# =============================================================================


@pytest.mark.unit
class TestCreate:

    def test_create_returns_exercises_in_order(self, use_case):
        workout = use_case.execute_create(user_id="user-1", name="Leg Day", exercises=EXERCISES)

        assert workout.name == "Leg Day"
        assert workout.user_id == "user-1"
        assert [e.model_dump() for e in workout.exercises] == [
            {"name": "Squat", "sets": 3, "reps": 8, "weight": 60.0},
            {"name": "Lunge", "sets": 3, "reps": 12, "weight": None},
            {"name": "Calf Raise", "sets": 4, "reps": 15, "weight": 0.0},
        ]

    def test_create_trims_name(self, use_case):
        workout = use_case.execute_create(user_id="user-1", name="  Leg Day  ", exercises=EXERCISES)
        assert workout.name == "Leg Day"

    def test_create_persists(self, use_case, workout_repo):
        workout = use_case.execute_create(user_id="user-1", name="Leg Day", exercises=EXERCISES)
        assert [w["id"] for w in workout_repo.get_all()] == [workout.id]

    def test_invalid_input_writes_nothing(self, use_case, workout_repo):
        with pytest.raises(ValidationError):
            use_case.execute_create(user_id="user-1", name="Leg Day", exercises=[])
        assert workout_repo.get_all() == []


# =============================================================================
# Update
# =============================================================================


@pytest.mark.unit
class TestUpdate:

    def test_update_replaces_exercises_wholesale(self, use_case):
        created = use_case.execute_create(user_id="user-1", name="Leg Day", exercises=EXERCISES)

        updated = use_case.execute_update(
            workout_id=created.id,
            user_id="user-1",
            name="Short Leg Day",
            exercises=[{"name": "Squat", "sets": 5, "reps": 5, "weight": 80}],
        )

        assert updated.id == created.id
        assert updated.name == "Short Leg Day"
        assert len(updated.exercises) == 1
        assert updated.exercises[0].sets == 5
        assert updated.updated_at is not None

    def test_update_of_other_users_workout_is_not_found(self, use_case, workout_repo):
        created = use_case.execute_create(user_id="user-1", name="Leg Day", exercises=EXERCISES)

        with pytest.raises(NotFoundError):
            use_case.execute_update(
                workout_id=created.id,
                user_id="user-2",
                name="Hijacked",
                exercises=EXERCISES[:1],
            )
        assert workout_repo.get_all()[0]["name"] == "Leg Day"

    def test_update_of_missing_workout_is_not_found(self, use_case):
        with pytest.raises(NotFoundError) as exc_info:
            use_case.execute_update(
                workout_id="does-not-exist",
                user_id="user-1",
                name="Leg Day",
                exercises=EXERCISES,
            )
        assert exc_info.value.message == "Workout not found"

    def test_update_validates_before_lookup(self, use_case):
        with pytest.raises(ValidationError):
            use_case.execute_update(
                workout_id="does-not-exist",
                user_id="user-1",
                name="",
                exercises=EXERCISES,
            )
