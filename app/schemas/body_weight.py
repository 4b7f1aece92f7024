from pydantic import BaseModel, Field
from typing import Optional
from datetime import date, datetime


class BodyWeightInput(BaseModel):
    date: str
    weight: float = Field(ge=0.1, le=500)
    body_fat_percentage: Optional[float] = Field(None, ge=0, le=100)


class BodyWeightRead(BaseModel):
    id: int
    user_id: int
    date: date
    weight: float
    body_fat_percentage: Optional[float] = None
    created_at: Optional[datetime] = None

    class Config:
        from_attributes = True
