import logging
from datetime import date
from typing import List, Optional

from sqlalchemy import select, delete
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from app.core.exceptions import BodyWeightConflictError
from app.models.body_weight import BodyWeight

logger = logging.getLogger(__name__)


class BodyWeightRepository:
    def __init__(self, db: AsyncSession):
        self.db = db

    async def get_by_id(self, record_id: int) -> Optional[BodyWeight]:
        result = await self.db.execute(select(BodyWeight).where(BodyWeight.id == record_id))
        return result.scalar_one_or_none()

    async def get_by_user_and_date(self, user_id: int, day: date) -> Optional[BodyWeight]:
        result = await self.db.execute(
            select(BodyWeight).where(BodyWeight.user_id == user_id, BodyWeight.date == day)
        )
        return result.scalar_one_or_none()

    async def list_by_user(self, user_id: int, limit: int) -> List[BodyWeight]:
        """Newest ``limit`` records, newest first."""
        result = await self.db.execute(
            select(BodyWeight)
            .where(BodyWeight.user_id == user_id)
            .order_by(BodyWeight.date.desc())
            .limit(limit)
        )
        return list(result.scalars().all())

    async def list_by_user_and_range(self, user_id: int, start: date, end: date) -> List[BodyWeight]:
        """Records with ``start <= date <= end``, oldest first."""
        result = await self.db.execute(
            select(BodyWeight)
            .where(BodyWeight.user_id == user_id, BodyWeight.date >= start, BodyWeight.date <= end)
            .order_by(BodyWeight.date.asc())
        )
        return list(result.scalars().all())

    async def get_latest(self, user_id: int) -> Optional[BodyWeight]:
        result = await self.db.execute(
            select(BodyWeight)
            .where(BodyWeight.user_id == user_id)
            .order_by(BodyWeight.date.desc())
            .limit(1)
        )
        return result.scalar_one_or_none()

    async def create(self, record: BodyWeight) -> BodyWeight:
        self.db.add(record)
        try:
            await self.db.commit()
        except IntegrityError:
            await self.db.rollback()
            logger.warning("Concurrent body weight insert for user %s on %s", record.user_id, record.date)
            raise BodyWeightConflictError()
        await self.db.refresh(record)
        return record

    async def update(self, record: BodyWeight) -> BodyWeight:
        try:
            await self.db.commit()
        except SQLAlchemyError:
            await self.db.rollback()
            raise
        await self.db.refresh(record)
        return record

    async def delete(self, record_id: int) -> None:
        try:
            await self.db.execute(delete(BodyWeight).where(BodyWeight.id == record_id))
            await self.db.commit()
        except SQLAlchemyError:
            await self.db.rollback()
            raise
