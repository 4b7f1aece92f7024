from datetime import date
from typing import List, Optional, Sequence

from sqlalchemy import select, delete, func
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import selectinload

from app.core.exceptions import WorkoutAlreadyExistsError
from app.models.exercise import Exercise
from app.models.workout import Workout, WorkoutSet
from app.repositories.contracts import SetHistoryRow


class WorkoutRepository:
    """Workout aggregate storage. Sets are always loaded with their exercise."""

    def __init__(self, db: AsyncSession):
        self.db = db

    @staticmethod
    def _with_sets():
        return selectinload(Workout.sets).selectinload(WorkoutSet.exercise)

    async def get_by_id(self, workout_id: int) -> Optional[Workout]:
        result = await self.db.execute(
            select(Workout)
            .where(Workout.id == workout_id)
            .options(self._with_sets())
            .execution_options(populate_existing=True)
        )
        return result.scalar_one_or_none()

    async def get_by_user_and_date(self, user_id: int, day: date) -> Optional[Workout]:
        result = await self.db.execute(
            select(Workout)
            .where(Workout.user_id == user_id, Workout.date == day)
            .options(self._with_sets())
            .order_by(Workout.id)
            .limit(1)
        )
        return result.scalar_one_or_none()

    async def list_by_user(self, user_id: int, limit: int, offset: int) -> List[Workout]:
        result = await self.db.execute(
            select(Workout)
            .where(Workout.user_id == user_id)
            .options(self._with_sets())
            .order_by(Workout.date.desc(), Workout.id.desc())
            .limit(limit)
            .offset(offset)
        )
        return list(result.scalars().all())

    async def count_by_user(self, user_id: int) -> int:
        result = await self.db.execute(
            select(func.count()).select_from(Workout).where(Workout.user_id == user_id)
        )
        return result.scalar_one()

    async def list_by_user_and_range(self, user_id: int, start: date, end: date) -> List[Workout]:
        """Workouts with ``start <= date < end``, oldest first."""
        result = await self.db.execute(
            select(Workout)
            .where(Workout.user_id == user_id, Workout.date >= start, Workout.date < end)
            .options(self._with_sets())
            .order_by(Workout.date.asc(), Workout.id.asc())
        )
        return list(result.scalars().all())

    async def create_with_sets(self, workout: Workout, sets: Sequence[WorkoutSet]) -> Workout:
        workout.sets = list(sets)
        self.db.add(workout)
        try:
            await self.db.commit()
        except IntegrityError:
            await self.db.rollback()
            # only the per-day unique constraint is a conflict; FK and NOT NULL failures propagate
            if await self.get_by_user_and_date(workout.user_id, workout.date) is not None:
                raise WorkoutAlreadyExistsError()
            raise
        except SQLAlchemyError:
            await self.db.rollback()
            raise
        return workout

    async def update_with_sets(self, workout: Workout, sets: Sequence[WorkoutSet]) -> Workout:
        """Persist the workout's own columns and swap its whole set list."""
        # delete-orphan removes the previous sets in the same flush
        workout.sets = list(sets)
        try:
            await self.db.commit()
        except SQLAlchemyError:
            await self.db.rollback()
            raise
        return workout

    async def delete(self, workout_id: int) -> None:
        try:
            await self.db.execute(delete(WorkoutSet).where(WorkoutSet.workout_id == workout_id))
            await self.db.execute(delete(Workout).where(Workout.id == workout_id))
            await self.db.commit()
        except SQLAlchemyError:
            await self.db.rollback()
            raise

    async def list_set_history(self, user_id: int, exercise_id: Optional[int] = None) -> List[SetHistoryRow]:
        query = (
            select(
                Workout.date,
                WorkoutSet.exercise_id,
                Exercise.name,
                Exercise.muscle_group,
                WorkoutSet.weight,
                WorkoutSet.reps,
            )
            .select_from(WorkoutSet)
            .join(Workout, WorkoutSet.workout_id == Workout.id)
            .join(Exercise, WorkoutSet.exercise_id == Exercise.id)
            .where(Workout.user_id == user_id)
        )
        if exercise_id is not None:
            query = query.where(WorkoutSet.exercise_id == exercise_id)

        result = await self.db.execute(query.order_by(Workout.date.asc(), WorkoutSet.id.asc()))
        return [
            SetHistoryRow(
                date=row[0],
                exercise_id=row[1],
                exercise_name=row[2],
                muscle_group=row[3],
                weight=row[4],
                reps=row[5],
            )
            for row in result.all()
        ]
