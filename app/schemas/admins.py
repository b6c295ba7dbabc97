from datetime import datetime
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


class AdminCreate(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    email: str = Field(..., min_length=3)
    password: str = Field(..., min_length=1)
    name: str = Field(..., min_length=1)
    role: str = "admin"
    is_active: bool = Field(True, alias="isActive")


class AdminUpdate(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    email: Optional[str] = Field(None, min_length=3)
    password: Optional[str] = None
    name: Optional[str] = Field(None, min_length=1)
    role: Optional[str] = None
    is_active: Optional[bool] = Field(None, alias="isActive")


class AdminOut(BaseModel):
    id: int
    email: str
    name: str
    role: str
    is_active: bool
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None
    last_login: Optional[datetime] = None

    class Config:
        from_attributes = True


class AdminLoginResponse(BaseModel):
    success: bool = True
    admin: AdminOut
