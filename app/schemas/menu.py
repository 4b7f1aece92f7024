from pydantic import BaseModel, Field
from typing import Optional, List
from datetime import datetime

from app.schemas.exercise import ExerciseRead


class MenuItemInput(BaseModel):
    exercise_id: int = Field(gt=0)
    order_number: int = Field(ge=1)
    target_sets: int = Field(ge=1)
    target_reps: int = Field(ge=1)
    target_weight: Optional[float] = Field(None, ge=0)
    note: Optional[str] = None


class MenuCreate(BaseModel):
    name: str
    description: Optional[str] = None
    items: List[MenuItemInput] = Field(default_factory=list)


MenuUpdate = MenuCreate


class MenuItemRead(BaseModel):
    id: Optional[int] = None
    menu_id: Optional[int] = None
    exercise_id: int
    order_number: int
    target_sets: int
    target_reps: int
    target_weight: Optional[float] = None
    note: Optional[str] = None
    exercise: Optional[ExerciseRead] = None

    class Config:
        from_attributes = True


class MenuRead(BaseModel):
    id: int
    user_id: int
    name: str
    description: Optional[str] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None
    items: List[MenuItemRead] = []

    class Config:
        from_attributes = True
