import logging
from datetime import date
from typing import List, Optional

from app.core.dates import parse_date
from app.core.exceptions import BodyWeightNotFoundError, InvalidInputError
from app.models.body_weight import BodyWeight
from app.repositories.contracts import BodyWeightRepositoryContract
from app.schemas.body_weight import BodyWeightInput
from app.services.ownership import ensure_owner

logger = logging.getLogger(__name__)


class BodyWeightService:
    """One body-weight record per user and day."""

    def __init__(self, repo: BodyWeightRepositoryContract, default_limit: int = 90):
        self.repo = repo
        self.default_limit = default_limit

    async def _upsert_by_date(
            self, user_id: int, day: date, weight: float, body_fat_percentage: Optional[float]
    ) -> BodyWeight:
        # find-then-write; the (user_id, date) unique constraint rejects a concurrent twin
        existing = await self.repo.get_by_user_and_date(user_id, day)
        if existing is not None:
            existing.weight = weight
            existing.body_fat_percentage = body_fat_percentage
            return await self.repo.update(existing)

        record = BodyWeight(
            user_id=user_id,
            date=day,
            weight=weight,
            body_fat_percentage=body_fat_percentage,
        )
        return await self.repo.create(record)

    async def create_or_update(self, user_id: int, data: BodyWeightInput) -> BodyWeight:
        day = parse_date(data.date)
        record = await self._upsert_by_date(user_id, day, data.weight, data.body_fat_percentage)
        logger.info("User %s recorded body weight for %s", user_id, day)
        return record

    async def list_records(self, user_id: int, limit: int = None) -> List[BodyWeight]:
        if limit is None or limit <= 0:
            limit = self.default_limit
        return await self.repo.list_by_user(user_id, limit)

    async def list_by_date_range(self, user_id: int, start: str, end: str) -> List[BodyWeight]:
        start_day = parse_date(start)
        end_day = parse_date(end)
        if start_day > end_day:
            raise InvalidInputError("start date must not be after end date")
        return await self.repo.list_by_user_and_range(user_id, start_day, end_day)

    async def latest(self, user_id: int) -> BodyWeight:
        record = await self.repo.get_latest(user_id)
        if record is None:
            raise BodyWeightNotFoundError()
        return record

    async def delete(self, user_id: int, record_id: int) -> None:
        record = await self.repo.get_by_id(record_id)
        ensure_owner(record, user_id, BodyWeightNotFoundError)
        await self.repo.delete(record_id)
        logger.info("User %s deleted body weight record %s", user_id, record_id)
