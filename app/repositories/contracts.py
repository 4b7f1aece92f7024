"""
Persistence contracts the services depend on.

Services are typed against these protocols only; the SQLAlchemy
repositories in this package implement them for production and
``tests/fakes.py`` implements them in memory.
"""

from dataclasses import dataclass
from datetime import date
from typing import List, Optional, Protocol, Sequence

from app.models.body_weight import BodyWeight
from app.models.exercise import Exercise
from app.models.menu import Menu, MenuItem
from app.models.user import User
from app.models.workout import Workout, WorkoutSet


@dataclass
class SetHistoryRow:
    """One logged set joined with its workout date and exercise."""

    date: date
    exercise_id: int
    exercise_name: str
    muscle_group: str
    weight: float
    reps: int


class UserRepositoryContract(Protocol):
    async def get_by_id(self, user_id: int) -> Optional[User]: ...

    async def get_by_email(self, email: str) -> Optional[User]: ...

    async def exists_by_email(self, email: str) -> bool: ...

    async def create_user(self, user: User) -> User: ...

    async def delete_with_all_data(self, user_id: int) -> None: ...


class ExerciseRepositoryContract(Protocol):
    async def list_visible(self, user_id: int) -> List[Exercise]: ...

    async def list_by_muscle_group(self, muscle_group: str, user_id: int) -> List[Exercise]: ...

    async def list_custom(self, user_id: int) -> List[Exercise]: ...

    async def get_by_id(self, exercise_id: int) -> Optional[Exercise]: ...

    async def create(self, exercise: Exercise) -> Exercise: ...

    async def update(self, exercise: Exercise) -> Exercise: ...

    async def delete_if_unused(self, exercise_id: int) -> bool: ...


class WorkoutRepositoryContract(Protocol):
    async def get_by_id(self, workout_id: int) -> Optional[Workout]: ...

    async def get_by_user_and_date(self, user_id: int, day: date) -> Optional[Workout]: ...

    async def list_by_user(self, user_id: int, limit: int, offset: int) -> List[Workout]: ...

    async def count_by_user(self, user_id: int) -> int: ...

    async def list_by_user_and_range(self, user_id: int, start: date, end: date) -> List[Workout]: ...

    async def create_with_sets(self, workout: Workout, sets: Sequence[WorkoutSet]) -> Workout: ...

    async def update_with_sets(self, workout: Workout, sets: Sequence[WorkoutSet]) -> Workout: ...

    async def delete(self, workout_id: int) -> None: ...

    async def list_set_history(self, user_id: int, exercise_id: Optional[int] = None) -> List[SetHistoryRow]: ...


class MenuRepositoryContract(Protocol):
    async def get_by_id(self, menu_id: int) -> Optional[Menu]: ...

    async def list_by_user(self, user_id: int) -> List[Menu]: ...

    async def create_with_items(self, menu: Menu, items: Sequence[MenuItem]) -> Menu: ...

    async def update_with_items(self, menu: Menu, items: Sequence[MenuItem]) -> Menu: ...

    async def delete(self, menu_id: int) -> None: ...


class BodyWeightRepositoryContract(Protocol):
    async def get_by_id(self, record_id: int) -> Optional[BodyWeight]: ...

    async def get_by_user_and_date(self, user_id: int, day: date) -> Optional[BodyWeight]: ...

    async def list_by_user(self, user_id: int, limit: int) -> List[BodyWeight]: ...

    async def list_by_user_and_range(self, user_id: int, start: date, end: date) -> List[BodyWeight]: ...

    async def get_latest(self, user_id: int) -> Optional[BodyWeight]: ...

    async def create(self, record: BodyWeight) -> BodyWeight: ...

    async def update(self, record: BodyWeight) -> BodyWeight: ...

    async def delete(self, record_id: int) -> None: ...
