from app.models.user import User
from app.models.exercise import Exercise, MuscleGroup
from app.models.workout import Workout, WorkoutSet
from app.models.menu import Menu, MenuItem
from app.models.body_weight import BodyWeight

__all__ = [
    "User",
    "Exercise", "MuscleGroup",
    "Workout", "WorkoutSet",
    "Menu", "MenuItem",
    "BodyWeight",
]
