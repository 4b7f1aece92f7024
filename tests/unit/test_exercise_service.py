"""
Unit tests for ExerciseService: catalog visibility, custom exercise guards.
"""

import pytest

from app.core.exceptions import (
    ConflictError,
    ExerciseInUseError,
    ExerciseNotFoundError,
    NotCustomOrNotOwnerError,
    UnauthorizedError,
)
from app.models.exercise import MuscleGroup
from app.schemas.exercise import ExerciseInput
from app.schemas.menu import MenuCreate, MenuItemInput
from app.schemas.workout import SetInput, WorkoutCreate

pytestmark = pytest.mark.unit


@pytest.mark.asyncio
async def test_visible_catalog_is_presets_plus_own_customs(
        exercise_service, store, presets, user_fixture, other_user_fixture
):
    mine = store.add_exercise("Cable Fly", "chest", user_id=user_fixture.id)
    store.add_exercise("Secret Curl", "arms", user_id=other_user_fixture.id)

    visible = await exercise_service.list_visible(user_fixture.id)

    assert [e.name for e in visible] == ["Deadlift", "Bench Press", "Cable Fly", "Squat"]
    assert mine.id in await exercise_service.visible_ids(user_fixture.id)


@pytest.mark.asyncio
async def test_list_by_muscle_group_orders_by_name(exercise_service, store, presets, user_fixture):
    store.add_exercise("Arnold Press", "chest", user_id=user_fixture.id)

    chest = await exercise_service.list_by_muscle_group(MuscleGroup.chest, user_fixture.id)

    assert [e.name for e in chest] == ["Arnold Press", "Bench Press"]


@pytest.mark.asyncio
async def test_list_custom_returns_only_callers_customs(exercise_service, store, presets, user_fixture):
    store.add_exercise("Cable Fly", "chest", user_id=user_fixture.id)

    custom = await exercise_service.list_custom(user_fixture.id)

    assert [e.name for e in custom] == ["Cable Fly"]


@pytest.mark.asyncio
async def test_create_custom_marks_owner(exercise_service, user_fixture):
    created = await exercise_service.create_custom(
        user_fixture.id, ExerciseInput(name="Zercher Squat", muscle_group=MuscleGroup.legs)
    )

    assert created.is_custom is True
    assert created.user_id == user_fixture.id
    assert created.muscle_group == "legs"


@pytest.mark.asyncio
async def test_update_custom(exercise_service, store, user_fixture):
    mine = store.add_exercise("Fly", "chest", user_id=user_fixture.id)

    updated = await exercise_service.update_custom(
        user_fixture.id, mine.id, ExerciseInput(name="Pec Deck", muscle_group=MuscleGroup.chest)
    )

    assert updated.name == "Pec Deck"


@pytest.mark.asyncio
async def test_preset_and_foreign_exercises_cannot_be_modified(
        exercise_service, store, presets, user_fixture, other_user_fixture
):
    foreign = store.add_exercise("Secret Curl", "arms", user_id=other_user_fixture.id)
    data = ExerciseInput(name="Renamed", muscle_group=MuscleGroup.other)

    with pytest.raises(NotCustomOrNotOwnerError):
        await exercise_service.update_custom(user_fixture.id, presets["bench"].id, data)
    with pytest.raises(UnauthorizedError):
        await exercise_service.delete_custom(user_fixture.id, foreign.id)
    with pytest.raises(ExerciseNotFoundError):
        await exercise_service.update_custom(user_fixture.id, 999, data)

    assert presets["bench"].name == "Bench Press"


@pytest.mark.asyncio
async def test_delete_unused_custom(exercise_service, store, user_fixture):
    mine = store.add_exercise("Fly", "chest", user_id=user_fixture.id)

    await exercise_service.delete_custom(user_fixture.id, mine.id)

    assert mine.id not in store.exercises


@pytest.mark.asyncio
async def test_delete_custom_used_in_workout_conflicts(exercise_service, workout_service, store, user_fixture):
    mine = store.add_exercise("Fly", "chest", user_id=user_fixture.id)
    await workout_service.create_workout(
        user_fixture.id,
        WorkoutCreate(date="2024-01-01", sets=[SetInput(exercise_id=mine.id, set_number=1, weight=10, reps=12)]),
    )

    with pytest.raises(ExerciseInUseError) as exc_info:
        await exercise_service.delete_custom(user_fixture.id, mine.id)

    assert isinstance(exc_info.value, ConflictError)
    assert mine.id in store.exercises


@pytest.mark.asyncio
async def test_delete_custom_used_in_menu_conflicts(exercise_service, menu_service, store, user_fixture):
    mine = store.add_exercise("Fly", "chest", user_id=user_fixture.id)
    await menu_service.create_menu(
        user_fixture.id,
        MenuCreate(
            name="Chest",
            items=[MenuItemInput(exercise_id=mine.id, order_number=1, target_sets=3, target_reps=12)],
        ),
    )

    with pytest.raises(ExerciseInUseError):
        await exercise_service.delete_custom(user_fixture.id, mine.id)
