from typing import List, Optional

from fastapi import APIRouter, Depends, status

from app.core.dependencies import get_current_user_id, get_exercise_service, get_stats_service
from app.models.exercise import MuscleGroup
from app.schemas.exercise import ExerciseInput, ExerciseRead
from app.schemas.stats import ExerciseProgressPoint
from app.services.exercise_service import ExerciseService
from app.services.stats_service import StatsService

router = APIRouter(tags=["exercises"])


@router.get("", response_model=List[ExerciseRead])
async def list_exercises(
        muscle_group: Optional[MuscleGroup] = None,
        user_id: int = Depends(get_current_user_id),
        service: ExerciseService = Depends(get_exercise_service),
):
    """Presets plus the caller's custom exercises"""
    if muscle_group is not None:
        return await service.list_by_muscle_group(muscle_group, user_id)
    return await service.list_visible(user_id)


@router.get("/custom", response_model=List[ExerciseRead])
async def list_custom_exercises(
        user_id: int = Depends(get_current_user_id),
        service: ExerciseService = Depends(get_exercise_service),
):
    return await service.list_custom(user_id)


@router.post("/custom", response_model=ExerciseRead, status_code=status.HTTP_201_CREATED)
async def create_custom_exercise(
        data: ExerciseInput,
        user_id: int = Depends(get_current_user_id),
        service: ExerciseService = Depends(get_exercise_service),
):
    return await service.create_custom(user_id, data)


@router.put("/custom/{exercise_id}", response_model=ExerciseRead)
async def update_custom_exercise(
        exercise_id: int,
        data: ExerciseInput,
        user_id: int = Depends(get_current_user_id),
        service: ExerciseService = Depends(get_exercise_service),
):
    return await service.update_custom(user_id, exercise_id, data)


@router.delete("/custom/{exercise_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_custom_exercise(
        exercise_id: int,
        user_id: int = Depends(get_current_user_id),
        service: ExerciseService = Depends(get_exercise_service),
):
    await service.delete_custom(user_id, exercise_id)


@router.get("/{exercise_id}/progress", response_model=List[ExerciseProgressPoint])
async def exercise_progress(
        exercise_id: int,
        user_id: int = Depends(get_current_user_id),
        stats: StatsService = Depends(get_stats_service),
):
    """Max weight and volume per training day for one exercise"""
    return await stats.exercise_progress(user_id, exercise_id)
