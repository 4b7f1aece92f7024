from typing import List

from fastapi import APIRouter, Depends, Query, status

from app.core.dependencies import get_current_user_id, get_workout_service
from app.schemas.workout import WorkoutCreate, WorkoutListResponse, WorkoutRead, WorkoutUpdate
from app.services.workout_service import WorkoutService

router = APIRouter(tags=["workouts"])


@router.post("", response_model=WorkoutRead, status_code=status.HTTP_201_CREATED)
async def create_workout(
        data: WorkoutCreate,
        user_id: int = Depends(get_current_user_id),
        service: WorkoutService = Depends(get_workout_service),
):
    return await service.create_workout(user_id, data)


@router.get("", response_model=WorkoutListResponse)
async def list_workouts(
        page: int = 1,
        per_page: int = 20,
        user_id: int = Depends(get_current_user_id),
        service: WorkoutService = Depends(get_workout_service),
):
    """Paginated history, newest first"""
    return await service.list_workouts(user_id, page=page, per_page=per_page)


@router.get("/date", response_model=WorkoutRead)
async def get_workout_by_date(
        day: str = Query(..., alias="date"),
        user_id: int = Depends(get_current_user_id),
        service: WorkoutService = Depends(get_workout_service),
):
    return await service.get_workout_by_date(user_id, day)


@router.get("/calendar", response_model=List[WorkoutRead])
async def get_calendar(
        year: int,
        month: int,
        user_id: int = Depends(get_current_user_id),
        service: WorkoutService = Depends(get_workout_service),
):
    return await service.get_workouts_by_month(user_id, year, month)


@router.get("/{workout_id}", response_model=WorkoutRead)
async def get_workout(
        workout_id: int,
        user_id: int = Depends(get_current_user_id),
        service: WorkoutService = Depends(get_workout_service),
):
    return await service.get_workout(user_id, workout_id)


@router.put("/{workout_id}", response_model=WorkoutRead)
async def update_workout(
        workout_id: int,
        data: WorkoutUpdate,
        user_id: int = Depends(get_current_user_id),
        service: WorkoutService = Depends(get_workout_service),
):
    """Replace the memo and the whole set list"""
    return await service.update_workout(user_id, workout_id, data)


@router.delete("/{workout_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_workout(
        workout_id: int,
        user_id: int = Depends(get_current_user_id),
        service: WorkoutService = Depends(get_workout_service),
):
    await service.delete_workout(user_id, workout_id)
