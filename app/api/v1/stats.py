from typing import List

from fastapi import APIRouter, Depends

from app.core.dependencies import get_current_user_id, get_stats_service
from app.schemas.stats import MuscleGroupStat, PersonalBest
from app.services.stats_service import StatsService

router = APIRouter(tags=["stats"])


@router.get("/muscle-groups", response_model=List[MuscleGroupStat])
async def muscle_group_stats(
        user_id: int = Depends(get_current_user_id),
        stats: StatsService = Depends(get_stats_service),
):
    return await stats.muscle_group_stats(user_id)


@router.get("/personal-bests", response_model=List[PersonalBest])
async def personal_bests(
        user_id: int = Depends(get_current_user_id),
        stats: StatsService = Depends(get_stats_service),
):
    return await stats.personal_bests(user_id)
