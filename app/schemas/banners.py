from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


class BannerCreate(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    title: str = Field(..., min_length=1)
    subtitle: str = Field(..., min_length=1)
    image: str = Field(..., min_length=1)
    link_url: Optional[str] = Field(None, alias="linkUrl")
    display_order: int = Field(0, alias="displayOrder")
    is_active: bool = Field(True, alias="isActive")


class BannerUpdate(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    title: Optional[str] = Field(None, min_length=1)
    subtitle: Optional[str] = Field(None, min_length=1)
    image: Optional[str] = Field(None, min_length=1)
    link_url: Optional[str] = Field(None, alias="linkUrl")
    display_order: Optional[int] = Field(None, alias="displayOrder")
    is_active: Optional[bool] = Field(None, alias="isActive")


class BannerOut(BaseModel):
    id: int
    title: str
    subtitle: str
    image: str
    link_url: Optional[str] = None
    display_order: int
    is_active: bool

    class Config:
        from_attributes = True
