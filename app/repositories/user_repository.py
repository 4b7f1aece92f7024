import logging
from typing import Optional

from sqlalchemy import select, delete, func
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from app.models.body_weight import BodyWeight
from app.models.exercise import Exercise
from app.models.menu import Menu, MenuItem
from app.models.user import User
from app.models.workout import Workout, WorkoutSet

logger = logging.getLogger(__name__)


class UserRepository:
    def __init__(self, db: AsyncSession):
        self.db = db

    async def get_by_id(self, user_id: int) -> Optional[User]:
        result = await self.db.execute(select(User).where(User.id == user_id))
        return result.scalar_one_or_none()

    async def get_by_email(self, email: str) -> Optional[User]:
        result = await self.db.execute(select(User).where(User.email == email))
        return result.scalar_one_or_none()

    async def exists_by_email(self, email: str) -> bool:
        result = await self.db.execute(
            select(func.count()).select_from(User).where(User.email == email)
        )
        return result.scalar_one() > 0

    async def create_user(self, user: User) -> User:
        self.db.add(user)
        await self.db.commit()
        await self.db.refresh(user)
        return user

    async def delete_with_all_data(self, user_id: int) -> None:
        """Erase the account and everything it owns in one transaction."""
        workout_ids = select(Workout.id).where(Workout.user_id == user_id)
        menu_ids = select(Menu.id).where(Menu.user_id == user_id)
        try:
            await self.db.execute(delete(WorkoutSet).where(WorkoutSet.workout_id.in_(workout_ids)))
            await self.db.execute(delete(Workout).where(Workout.user_id == user_id))
            await self.db.execute(delete(MenuItem).where(MenuItem.menu_id.in_(menu_ids)))
            await self.db.execute(delete(Menu).where(Menu.user_id == user_id))
            await self.db.execute(delete(BodyWeight).where(BodyWeight.user_id == user_id))
            await self.db.execute(
                delete(Exercise).where(Exercise.user_id == user_id, Exercise.is_custom.is_(True))
            )
            await self.db.execute(delete(User).where(User.id == user_id))
            await self.db.commit()
        except SQLAlchemyError:
            await self.db.rollback()
            raise
        logger.info("Erased account %s with all owned data", user_id)
