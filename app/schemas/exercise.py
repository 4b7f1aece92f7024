from pydantic import BaseModel, Field
from typing import Optional
from datetime import datetime

from app.models.exercise import MuscleGroup


class ExerciseInput(BaseModel):
    name: str = Field(min_length=1, max_length=100)
    muscle_group: MuscleGroup


class ExerciseRead(BaseModel):
    id: int
    name: str
    muscle_group: str
    is_custom: bool = False
    user_id: Optional[int] = None
    created_at: Optional[datetime] = None

    class Config:
        from_attributes = True
