from datetime import datetime
from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, Field


class ProductCreate(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    name: str = Field(..., min_length=1)
    price: float = Field(..., ge=0)
    category: str = Field(..., min_length=1)
    image: str = Field(..., min_length=1)
    stock: int = Field(0, ge=0)
    # raw value from the admin form, may be "", "3", 3 or garbage
    workshop_id: Any = Field(None, alias="workshopId")


class ProductUpdate(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    name: Optional[str] = Field(None, min_length=1)
    price: Optional[float] = Field(None, ge=0)
    category: Optional[str] = Field(None, min_length=1)
    image: Optional[str] = Field(None, min_length=1)
    stock: Optional[int] = Field(None, ge=0)
    workshop_id: Any = Field(None, alias="workshopId")


class ProductOut(BaseModel):
    id: int
    name: str
    price: float
    category: str
    image: str
    stock: int
    workshop_id: Optional[int] = None
    created_at: Optional[datetime] = None

    class Config:
        from_attributes = True
