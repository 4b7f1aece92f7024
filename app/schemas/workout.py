from pydantic import BaseModel, Field
from typing import Optional, List
from datetime import date, datetime

from app.schemas.exercise import ExerciseRead


class SetInput(BaseModel):
    exercise_id: int = Field(gt=0)
    set_number: int = Field(ge=1)
    weight: float = Field(ge=0)
    reps: int = Field(ge=1)


class WorkoutCreate(BaseModel):
    # Kept as text: the service reports unparsable dates itself
    date: str
    memo: Optional[str] = None
    sets: List[SetInput] = Field(default_factory=list)


class WorkoutUpdate(BaseModel):
    memo: Optional[str] = None
    sets: List[SetInput] = Field(default_factory=list)


class WorkoutSetRead(BaseModel):
    id: Optional[int] = None
    workout_id: Optional[int] = None
    exercise_id: int
    set_number: int
    weight: float
    reps: int
    exercise: Optional[ExerciseRead] = None

    class Config:
        from_attributes = True


class WorkoutRead(BaseModel):
    id: int
    user_id: int
    date: date
    memo: Optional[str] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None
    sets: List[WorkoutSetRead] = []

    class Config:
        from_attributes = True


class WorkoutListResponse(BaseModel):
    workouts: List[WorkoutRead]
    total: int
    page: int
    per_page: int
    total_pages: int
