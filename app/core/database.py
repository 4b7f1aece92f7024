import logging

from app.core.base import Base
from app.core.config import settings
from app.core.db import engine, AsyncSessionLocal
from app.core.seed_exercises import seed_exercises

# Every model has to be imported before create_all
from app.models import User, Exercise, Workout, WorkoutSet, Menu, MenuItem, BodyWeight  # noqa: F401

logger = logging.getLogger(__name__)


async def init_database():
    """Create missing tables and seed the preset exercise catalog."""
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    logger.info("Database tables created/verified")

    if settings.SEED_EXERCISES:
        async with AsyncSessionLocal() as session:
            await seed_exercises(session)
