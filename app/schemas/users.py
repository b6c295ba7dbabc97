from datetime import datetime
from typing import Optional

from pydantic import BaseModel, Field


class UserBase(BaseModel):
    email: str = Field(..., min_length=3)
    name: str = Field(..., min_length=1)
    phone: Optional[str] = None


class UserCreate(UserBase):
    password: str = Field(..., min_length=1)


class UserUpdate(BaseModel):
    email: Optional[str] = Field(None, min_length=3)
    name: Optional[str] = Field(None, min_length=1)
    phone: Optional[str] = None
    # blank keeps the current password
    password: Optional[str] = None


class UserOut(UserBase):
    id: int
    created_at: Optional[datetime] = None

    class Config:
        from_attributes = True


class LoginRequest(BaseModel):
    email: str
    password: str


class UserLoginResponse(BaseModel):
    success: bool = True
    user: UserOut
