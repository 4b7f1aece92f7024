"""
Script for loading the preset exercises into the database
"""
import asyncio
import logging

from sqlalchemy import select, func
from sqlalchemy.ext.asyncio import AsyncSession

from app.core.initial_exercises import INITIAL_EXERCISES
from app.models.exercise import Exercise

logger = logging.getLogger(__name__)


async def seed_exercises(db: AsyncSession) -> int:
    """Insert the presets once. Returns the number of inserted rows."""
    result = await db.execute(
        select(func.count()).select_from(Exercise).where(Exercise.is_custom.is_(False))
    )
    existing = result.scalar_one()

    if existing > 0:
        logger.info("Catalog already holds %d preset exercises, skipping seed", existing)
        return 0

    for exercise_data in INITIAL_EXERCISES:
        db.add(Exercise(
            name=exercise_data["name"],
            muscle_group=exercise_data["muscle_group"],
            is_custom=False,
            user_id=None,
        ))

    await db.commit()
    logger.info("Seeded %d preset exercises", len(INITIAL_EXERCISES))
    return len(INITIAL_EXERCISES)


async def main():
    from app.core.db import AsyncSessionLocal

    async with AsyncSessionLocal() as db:
        await seed_exercises(db)


if __name__ == "__main__":
    logging.basicConfig(level=logging.INFO)
    asyncio.run(main())
