from typing import Optional

from pydantic import BaseModel, ConfigDict, Field

from .products import ProductOut
from .transactions import ROW_ID_MAX


class CartQuantityUpdate(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    product_id: int = Field(..., alias="productId", le=ROW_ID_MAX)
    # 0 removes the line
    quantity: int = Field(..., ge=0)


class CartItemOut(BaseModel):
    id: int
    product_id: int
    quantity: int
    product: Optional[ProductOut] = None

    class Config:
        from_attributes = True
