from pydantic import BaseModel, Field, field_validator
from typing import Any, Optional, List

from app.models.exercise import MuscleGroup
from app.schemas.exercise import ExerciseRead


class GenerateMenuRequest(BaseModel):
    goal: str = Field(min_length=1, max_length=200)
    fitness_level: str = Field(min_length=1, max_length=50)
    days_per_week: int = Field(ge=1, le=7)
    duration_minutes: int = Field(ge=10, le=240)
    target_muscle_groups: List[MuscleGroup] = Field(default_factory=list)
    notes: Optional[str] = Field(None, max_length=500)


class GeneratedMenuPayload(BaseModel):
    """Top-level shape the model is told to return. Items are checked one by one."""
    name: str = ""
    description: str = ""
    items: List[Any] = Field(default_factory=list)

    @field_validator("name", "description", mode="before")
    @classmethod
    def _null_text(cls, value):
        return "" if value is None else value

    @field_validator("items", mode="before")
    @classmethod
    def _null_items(cls, value):
        return [] if value is None else value


class GeneratedItemPayload(BaseModel):
    exercise_id: int
    order_number: int = Field(ge=1)
    target_sets: int = Field(ge=1)
    target_reps: int = Field(ge=1)
    target_weight: Optional[float] = Field(None, ge=0)
    note: Optional[str] = None


class GeneratedMenuItem(BaseModel):
    exercise_id: int
    order_number: int
    target_sets: int
    target_reps: int
    target_weight: Optional[float] = None
    note: Optional[str] = None
    exercise: ExerciseRead


class GeneratedMenu(BaseModel):
    name: str
    description: str
    items: List[GeneratedMenuItem]
