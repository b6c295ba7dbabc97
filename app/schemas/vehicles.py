from datetime import datetime
from typing import Optional

from pydantic import AliasChoices, BaseModel, Field, field_validator


def _year_as_text(value):
    if isinstance(value, int) and not isinstance(value, bool):
        return str(value)
    return value


class VehicleCreate(BaseModel):
    model: str = Field(..., min_length=1)
    year: str = Field(..., min_length=1)
    chassis: str = Field(..., min_length=1)
    engine: str = Field(..., min_length=1)
    plate_number: Optional[str] = Field(
        None, validation_alias=AliasChoices("plateNumber", "plate_number")
    )

    year_as_text = field_validator("year", mode="before")(_year_as_text)


class VehicleUpdate(BaseModel):
    model: Optional[str] = Field(None, min_length=1)
    year: Optional[str] = Field(None, min_length=1)
    chassis: Optional[str] = Field(None, min_length=1)
    engine: Optional[str] = Field(None, min_length=1)
    plate_number: Optional[str] = Field(
        None, validation_alias=AliasChoices("plateNumber", "plate_number")
    )

    year_as_text = field_validator("year", mode="before")(_year_as_text)


class VehicleOut(BaseModel):
    id: int
    user_id: int
    model: str
    year: str
    chassis: str
    engine: str
    plate_number: Optional[str] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    class Config:
        from_attributes = True
