from pydantic import BaseModel
from datetime import date


class MuscleGroupStat(BaseModel):
    muscle_group: str
    workout_count: int  # distinct training dates
    set_count: int


class PersonalBest(BaseModel):
    exercise_id: int
    exercise_name: str
    muscle_group: str
    max_weight: float


class ExerciseProgressPoint(BaseModel):
    date: date
    max_weight: float
    total_volume: float
