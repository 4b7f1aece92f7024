"""
Unit tests for StatsService aggregates.
"""

import pytest
from datetime import date

from app.schemas.workout import SetInput, WorkoutCreate

pytestmark = pytest.mark.unit


async def log(workout_service, user_id: int, day: str, sets):
    await workout_service.create_workout(
        user_id,
        WorkoutCreate(
            date=day,
            sets=[
                SetInput(exercise_id=exercise_id, set_number=n, weight=weight, reps=reps)
                for n, (exercise_id, weight, reps) in enumerate(sets, start=1)
            ],
        ),
    )


@pytest.mark.asyncio
async def test_exercise_progress_max_weight_and_volume(stats_service, workout_service, presets, user_fixture):
    bench = presets["bench"].id
    await log(workout_service, user_fixture.id, "2024-01-01", [(bench, 60, 10), (bench, 65, 5)])

    progress = await stats_service.exercise_progress(user_fixture.id, bench)

    assert len(progress) == 1
    assert progress[0].date == date(2024, 1, 1)
    assert progress[0].max_weight == 65
    assert progress[0].total_volume == 925


@pytest.mark.asyncio
async def test_exercise_progress_one_point_per_date_ascending(
        stats_service, workout_service, presets, user_fixture
):
    bench, squat = presets["bench"].id, presets["squat"].id
    await log(workout_service, user_fixture.id, "2024-01-08", [(bench, 60, 5)])
    await log(workout_service, user_fixture.id, "2024-01-01", [(bench, 50, 10), (squat, 100, 5)])

    progress = await stats_service.exercise_progress(user_fixture.id, bench)

    assert [(p.date, p.max_weight, p.total_volume) for p in progress] == [
        (date(2024, 1, 1), 50, 500),
        (date(2024, 1, 8), 60, 300),
    ]
    # a list, so it can be iterated again
    assert len(list(progress)) == 2


@pytest.mark.asyncio
async def test_muscle_group_stats_counts_distinct_dates(stats_service, workout_service, presets, user_fixture):
    bench, squat = presets["bench"].id, presets["squat"].id
    await log(workout_service, user_fixture.id, "2024-01-01", [(bench, 60, 5), (bench, 60, 5), (bench, 60, 5)])
    await log(workout_service, user_fixture.id, "2024-01-03", [(bench, 60, 5), (bench, 60, 5), (squat, 80, 5)])

    stats = await stats_service.muscle_group_stats(user_fixture.id)

    assert [(s.muscle_group, s.workout_count, s.set_count) for s in stats] == [
        ("chest", 2, 5),
        ("legs", 1, 1),
    ]


@pytest.mark.asyncio
async def test_personal_bests_skip_bodyweight_only_exercises(
        stats_service, workout_service, store, presets, user_fixture
):
    pull_up = store.add_exercise("Pull Up", "back")
    bench, squat = presets["bench"].id, presets["squat"].id
    await log(workout_service, user_fixture.id, "2024-01-01", [(bench, 60, 5), (squat, 100, 5), (pull_up.id, 0, 10)])
    await log(workout_service, user_fixture.id, "2024-01-02", [(bench, 72.5, 3)])

    bests = await stats_service.personal_bests(user_fixture.id)

    assert [(b.exercise_name, b.muscle_group, b.max_weight) for b in bests] == [
        ("Bench Press", "chest", 72.5),
        ("Squat", "legs", 100),
    ]


@pytest.mark.asyncio
async def test_stats_are_scoped_to_caller(stats_service, workout_service, presets, user_fixture, other_user_fixture):
    await log(workout_service, other_user_fixture.id, "2024-01-01", [(presets["bench"].id, 200, 1)])

    assert await stats_service.muscle_group_stats(user_fixture.id) == []
    assert await stats_service.personal_bests(user_fixture.id) == []
    assert await stats_service.exercise_progress(user_fixture.id, presets["bench"].id) == []
