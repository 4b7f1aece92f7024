import calendar
import logging
import math
from datetime import date, datetime
from typing import List, Sequence

from app.core.dates import parse_date
from app.core.exceptions import (
    EmptySetsError,
    InvalidInputError,
    WorkoutAlreadyExistsError,
    WorkoutNotFoundError,
)
from app.models.workout import Workout, WorkoutSet
from app.repositories.contracts import WorkoutRepositoryContract
from app.schemas.workout import SetInput, WorkoutCreate, WorkoutListResponse, WorkoutRead, WorkoutUpdate
from app.services.exercise_service import ExerciseService
from app.services.ownership import ensure_owner

logger = logging.getLogger(__name__)

MIN_YEAR = 2000
MAX_YEAR = 2100


class WorkoutService:
    """
    Lifecycle of the Workout aggregate.

    A workout and its sets are created, replaced and deleted together; the
    repository commits each of those writes as one transaction.
    """

    def __init__(
            self,
            repo: WorkoutRepositoryContract,
            exercises: ExerciseService,
            default_page_size: int = 20,
            max_page_size: int = 100,
    ):
        self.repo = repo
        self.exercises = exercises
        self.default_page_size = default_page_size
        self.max_page_size = max_page_size

    async def _build_sets(self, user_id: int, sets: Sequence[SetInput]) -> List[WorkoutSet]:
        if not sets:
            raise EmptySetsError()

        visible = await self.exercises.visible_ids(user_id)
        unknown = sorted({s.exercise_id for s in sets} - visible)
        if unknown:
            raise InvalidInputError(f"unknown exercise id: {unknown[0]}")

        return [
            WorkoutSet(
                exercise_id=s.exercise_id,
                set_number=s.set_number,
                weight=s.weight,
                reps=s.reps,
            )
            for s in sets
        ]

    async def create_workout(self, user_id: int, data: WorkoutCreate) -> Workout:
        day = parse_date(data.date)
        sets = await self._build_sets(user_id, data.sets)

        if await self.repo.get_by_user_and_date(user_id, day) is not None:
            raise WorkoutAlreadyExistsError()

        workout = Workout(user_id=user_id, date=day, memo=data.memo)
        workout = await self.repo.create_with_sets(workout, sets)
        logger.info("User %s logged workout %s with %d sets", user_id, workout.id, len(sets))
        return await self.get_workout(user_id, workout.id)

    async def get_workout(self, user_id: int, workout_id: int) -> Workout:
        workout = await self.repo.get_by_id(workout_id)
        return ensure_owner(workout, user_id, WorkoutNotFoundError)

    async def get_workout_by_date(self, user_id: int, value: str) -> Workout:
        day = parse_date(value)
        workout = await self.repo.get_by_user_and_date(user_id, day)
        if workout is None:
            raise WorkoutNotFoundError()
        return workout

    async def list_workouts(self, user_id: int, page: int = 1, per_page: int = None) -> WorkoutListResponse:
        if page < 1:
            page = 1
        if per_page is None or per_page < 1 or per_page > self.max_page_size:
            per_page = self.default_page_size

        total = await self.repo.count_by_user(user_id)
        workouts = await self.repo.list_by_user(user_id, limit=per_page, offset=(page - 1) * per_page)
        return WorkoutListResponse(
            workouts=[WorkoutRead.model_validate(w) for w in workouts],
            total=total,
            page=page,
            per_page=per_page,
            total_pages=math.ceil(total / per_page),
        )

    async def get_workouts_by_month(self, user_id: int, year: int, month: int) -> List[Workout]:
        if not MIN_YEAR <= year <= MAX_YEAR:
            raise InvalidInputError(f"year must be between {MIN_YEAR} and {MAX_YEAR}")
        if not 1 <= month <= 12:
            raise InvalidInputError("month must be between 1 and 12")

        start = date(year, month, 1)
        days_in_month = calendar.monthrange(year, month)[1]
        end = date.fromordinal(start.toordinal() + days_in_month)
        return await self.repo.list_by_user_and_range(user_id, start, end)

    async def update_workout(self, user_id: int, workout_id: int, data: WorkoutUpdate) -> Workout:
        workout = await self.get_workout(user_id, workout_id)
        sets = await self._build_sets(user_id, data.sets)

        workout.memo = data.memo
        workout.updated_at = datetime.utcnow()
        await self.repo.update_with_sets(workout, sets)
        logger.info("User %s replaced workout %s with %d sets", user_id, workout_id, len(sets))
        return await self.get_workout(user_id, workout_id)

    async def delete_workout(self, user_id: int, workout_id: int) -> None:
        await self.get_workout(user_id, workout_id)
        await self.repo.delete(workout_id)
        logger.info("User %s deleted workout %s", user_id, workout_id)
