from datetime import datetime
from typing import Optional

from pydantic import BaseModel, Field


class WorkshopBase(BaseModel):
    name: str = Field(..., min_length=1)
    rating: float = Field(..., ge=0, le=5)
    location: str = Field(..., min_length=1)
    icon: str = Field(..., min_length=1)
    image: Optional[str] = None


class WorkshopCreate(WorkshopBase):
    pass


class WorkshopUpdate(BaseModel):
    name: Optional[str] = Field(None, min_length=1)
    rating: Optional[float] = Field(None, ge=0, le=5)
    location: Optional[str] = Field(None, min_length=1)
    icon: Optional[str] = Field(None, min_length=1)
    image: Optional[str] = None


class WorkshopOut(WorkshopBase):
    id: int
    created_at: Optional[datetime] = None

    class Config:
        from_attributes = True
