from typing import List, Optional

from sqlalchemy import select, delete, or_, exists
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from app.models.exercise import Exercise
from app.models.menu import MenuItem
from app.models.workout import WorkoutSet


class ExerciseRepository:
    def __init__(self, db: AsyncSession):
        self.db = db

    @staticmethod
    def _visible_to(user_id: int):
        # presets + the user's own custom entries
        return or_(Exercise.is_custom.is_(False), Exercise.user_id == user_id)

    async def list_visible(self, user_id: int) -> List[Exercise]:
        result = await self.db.execute(
            select(Exercise)
            .where(self._visible_to(user_id))
            .order_by(Exercise.muscle_group, Exercise.name, Exercise.id)
        )
        return list(result.scalars().all())

    async def list_by_muscle_group(self, muscle_group: str, user_id: int) -> List[Exercise]:
        result = await self.db.execute(
            select(Exercise)
            .where(Exercise.muscle_group == muscle_group, self._visible_to(user_id))
            .order_by(Exercise.name, Exercise.id)
        )
        return list(result.scalars().all())

    async def list_custom(self, user_id: int) -> List[Exercise]:
        result = await self.db.execute(
            select(Exercise)
            .where(Exercise.user_id == user_id, Exercise.is_custom.is_(True))
            .order_by(Exercise.muscle_group, Exercise.name, Exercise.id)
        )
        return list(result.scalars().all())

    async def get_by_id(self, exercise_id: int) -> Optional[Exercise]:
        result = await self.db.execute(select(Exercise).where(Exercise.id == exercise_id))
        return result.scalar_one_or_none()

    async def create(self, exercise: Exercise) -> Exercise:
        self.db.add(exercise)
        await self.db.commit()
        await self.db.refresh(exercise)
        return exercise

    async def update(self, exercise: Exercise) -> Exercise:
        await self.db.commit()
        await self.db.refresh(exercise)
        return exercise

    async def delete_if_unused(self, exercise_id: int) -> bool:
        """
        Delete the exercise unless a workout set or menu item points at it.

        The reference check and the delete are two statements; a set inserted
        between them is caught by the foreign key on PostgreSQL and reported
        as "in use" as well.
        """
        referenced = await self.db.execute(
            select(
                or_(
                    exists().where(WorkoutSet.exercise_id == exercise_id),
                    exists().where(MenuItem.exercise_id == exercise_id),
                )
            )
        )
        if referenced.scalar():
            return False

        try:
            await self.db.execute(delete(Exercise).where(Exercise.id == exercise_id))
            await self.db.commit()
        except IntegrityError:
            await self.db.rollback()
            return False
        return True
