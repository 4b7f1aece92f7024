"""
Integration tests for /api/v1/workouts/* and /api/v1/stats/*.

The real services run over the in-memory repositories; only persistence is faked.
"""

import pytest

pytestmark = pytest.mark.integration


def workout_body(day: str, exercise_id: int, weight: float = 60, reps: int = 10, memo: str = None) -> dict:
    return {
        "date": day,
        "memo": memo,
        "sets": [{"exercise_id": exercise_id, "set_number": 1, "weight": weight, "reps": reps}],
    }


# ---------------------------------------------------------------------------
# Authentication
# ---------------------------------------------------------------------------

@pytest.mark.asyncio
async def test_workouts_require_bearer_token(client):
    response = await client.get("/api/v1/workouts")

    assert response.status_code in (401, 403)


@pytest.mark.asyncio
async def test_invalid_token_is_401(client):
    response = await client.get("/api/v1/workouts", headers={"Authorization": "Bearer broken"})

    assert response.status_code == 401


# ---------------------------------------------------------------------------
# CRUD
# ---------------------------------------------------------------------------

@pytest.mark.asyncio
async def test_create_and_get_workout(user_client, presets):
    bench = presets["bench"]

    created = await user_client.post("/api/v1/workouts", json=workout_body("2024-01-15", bench.id, memo="push"))

    assert created.status_code == 201
    data = created.json()
    assert data["date"] == "2024-01-15"
    assert data["memo"] == "push"
    assert data["sets"][0]["exercise"]["name"] == "Bench Press"

    fetched = await user_client.get(f"/api/v1/workouts/{data['id']}")
    assert fetched.status_code == 200
    assert fetched.json()["sets"] == data["sets"]


@pytest.mark.asyncio
@pytest.mark.parametrize("body, status", [
    ({"date": "2024/01/15", "sets": [{"exercise_id": 1, "set_number": 1, "weight": 0, "reps": 1}]}, 400),
    ({"date": "2024-01-15", "sets": []}, 400),
    ({"date": "2024-01-15", "sets": [{"exercise_id": 1, "set_number": 1, "weight": -1, "reps": 1}]}, 422),
])
async def test_create_workout_validation(user_client, presets, body, status):
    response = await user_client.post("/api/v1/workouts", json=body)

    assert response.status_code == status


@pytest.mark.asyncio
async def test_duplicate_date_is_409(user_client, presets):
    await user_client.post("/api/v1/workouts", json=workout_body("2024-01-15", presets["bench"].id))

    response = await user_client.post("/api/v1/workouts", json=workout_body("2024-01-15", presets["squat"].id))

    assert response.status_code == 409


@pytest.mark.asyncio
async def test_other_users_workout_is_403_and_missing_is_404(user_client, other_client, presets):
    created = await user_client.post("/api/v1/workouts", json=workout_body("2024-01-15", presets["bench"].id))
    workout_id = created.json()["id"]

    foreign = await other_client.get(f"/api/v1/workouts/{workout_id}")
    missing = await user_client.get("/api/v1/workouts/999999")

    assert foreign.status_code == 403
    assert "sets" not in foreign.json()
    assert missing.status_code == 404


@pytest.mark.asyncio
async def test_update_and_delete_workout(user_client, presets):
    created = await user_client.post("/api/v1/workouts", json=workout_body("2024-01-15", presets["bench"].id))
    workout_id = created.json()["id"]

    updated = await user_client.put(
        f"/api/v1/workouts/{workout_id}",
        json={"memo": "swapped", "sets": [{"exercise_id": presets["squat"].id, "set_number": 1, "weight": 100, "reps": 5}]},
    )
    assert updated.status_code == 200
    assert updated.json()["memo"] == "swapped"
    assert [s["exercise_id"] for s in updated.json()["sets"]] == [presets["squat"].id]

    deleted = await user_client.delete(f"/api/v1/workouts/{workout_id}")
    assert deleted.status_code == 204

    gone = await user_client.get(f"/api/v1/workouts/{workout_id}")
    assert gone.status_code == 404


@pytest.mark.asyncio
async def test_list_pagination(user_client, presets):
    for day in range(1, 26):
        await user_client.post("/api/v1/workouts", json=workout_body(f"2024-03-{day:02d}", presets["bench"].id))

    response = await user_client.get("/api/v1/workouts", params={"page": 2, "per_page": 20})

    data = response.json()
    assert response.status_code == 200
    assert data["total"] == 25
    assert data["total_pages"] == 2
    assert data["page"] == 2
    assert len(data["workouts"]) == 5


@pytest.mark.asyncio
async def test_by_date_and_calendar(user_client, presets):
    await user_client.post("/api/v1/workouts", json=workout_body("2024-02-10", presets["bench"].id))
    await user_client.post("/api/v1/workouts", json=workout_body("2024-03-01", presets["bench"].id))

    by_date = await user_client.get("/api/v1/workouts/date", params={"date": "2024-02-10"})
    missing = await user_client.get("/api/v1/workouts/date", params={"date": "2024-02-11"})
    calendar = await user_client.get("/api/v1/workouts/calendar", params={"year": 2024, "month": 2})
    bad_month = await user_client.get("/api/v1/workouts/calendar", params={"year": 2024, "month": 13})

    assert by_date.status_code == 200
    assert by_date.json()["date"] == "2024-02-10"
    assert missing.status_code == 404
    assert [w["date"] for w in calendar.json()] == ["2024-02-10"]
    assert bad_month.status_code == 400


# ---------------------------------------------------------------------------
# Statistics
# ---------------------------------------------------------------------------

@pytest.mark.asyncio
async def test_stats_endpoints(user_client, presets):
    bench = presets["bench"].id
    await user_client.post("/api/v1/workouts", json={
        "date": "2024-01-01",
        "sets": [
            {"exercise_id": bench, "set_number": 1, "weight": 60, "reps": 10},
            {"exercise_id": bench, "set_number": 2, "weight": 65, "reps": 5},
        ],
    })

    groups = await user_client.get("/api/v1/stats/muscle-groups")
    bests = await user_client.get("/api/v1/stats/personal-bests")
    progress = await user_client.get(f"/api/v1/exercises/{bench}/progress")

    assert groups.json() == [{"muscle_group": "chest", "workout_count": 1, "set_count": 2}]
    assert bests.json()[0]["max_weight"] == 65
    assert progress.json() == [{"date": "2024-01-01", "max_weight": 65.0, "total_volume": 925.0}]
