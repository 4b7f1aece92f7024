from app.repositories.user_repository import UserRepository
from app.repositories.exercise_repository import ExerciseRepository
from app.repositories.workout_repository import WorkoutRepository
from app.repositories.menu_repository import MenuRepository
from app.repositories.body_weight_repository import BodyWeightRepository

__all__ = [
    "UserRepository",
    "ExerciseRepository",
    "WorkoutRepository",
    "MenuRepository",
    "BodyWeightRepository",
]
