import logging
from typing import List, Set

from app.core.exceptions import (
    ExerciseInUseError,
    ExerciseNotFoundError,
    NotCustomOrNotOwnerError,
)
from app.models.exercise import Exercise, MuscleGroup
from app.repositories.contracts import ExerciseRepositoryContract
from app.schemas.exercise import ExerciseInput

logger = logging.getLogger(__name__)


class ExerciseService:
    """Preset and custom exercise catalog."""

    def __init__(self, repo: ExerciseRepositoryContract):
        self.repo = repo

    async def list_visible(self, user_id: int) -> List[Exercise]:
        return await self.repo.list_visible(user_id)

    async def list_by_muscle_group(self, muscle_group: MuscleGroup, user_id: int) -> List[Exercise]:
        return await self.repo.list_by_muscle_group(MuscleGroup(muscle_group).value, user_id)

    async def list_custom(self, user_id: int) -> List[Exercise]:
        return await self.repo.list_custom(user_id)

    async def visible_ids(self, user_id: int) -> Set[int]:
        return {exercise.id for exercise in await self.repo.list_visible(user_id)}

    async def create_custom(self, user_id: int, data: ExerciseInput) -> Exercise:
        exercise = Exercise(
            name=data.name,
            muscle_group=MuscleGroup(data.muscle_group).value,
            is_custom=True,
            user_id=user_id,
        )
        exercise = await self.repo.create(exercise)
        logger.info("User %s created custom exercise %s", user_id, exercise.id)
        return exercise

    async def _get_owned_custom(self, user_id: int, exercise_id: int) -> Exercise:
        exercise = await self.repo.get_by_id(exercise_id)
        if exercise is None:
            raise ExerciseNotFoundError()
        if not exercise.is_custom or exercise.user_id != user_id:
            raise NotCustomOrNotOwnerError()
        return exercise

    async def update_custom(self, user_id: int, exercise_id: int, data: ExerciseInput) -> Exercise:
        exercise = await self._get_owned_custom(user_id, exercise_id)
        exercise.name = data.name
        exercise.muscle_group = MuscleGroup(data.muscle_group).value
        return await self.repo.update(exercise)

    async def delete_custom(self, user_id: int, exercise_id: int) -> None:
        await self._get_owned_custom(user_id, exercise_id)
        if not await self.repo.delete_if_unused(exercise_id):
            raise ExerciseInUseError()
        logger.info("User %s deleted custom exercise %s", user_id, exercise_id)
