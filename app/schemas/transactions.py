import datetime as dt
from enum import Enum
import json
from typing import Annotated, Any, List, Literal, Optional, Union

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator


class TransactionType(str, Enum):
    Shop = "Shop"
    Towing = "Towing"
    Quotation = "Quotation"


class TransactionStatus(str, Enum):
    pending = "pending"
    ongoing = "ongoing"
    completed = "completed"
    cancelled = "cancelled"


class QuoteType(str, Enum):
    brief = "brief"
    detailed = "detailed"


NonEmptyStr = Annotated[str, Field(min_length=1)]

# largest value a signed 32-bit INTEGER key column holds
ROW_ID_MAX = 2 ** 31 - 1


def _blank_to_none(value):
    if isinstance(value, str) and not value.strip():
        return None
    return value


# ---------- inputs ----------

class CartLine(BaseModel):
    id: int = Field(..., le=ROW_ID_MAX)
    name: Optional[str] = None
    price: Optional[float] = None
    quantity: int = Field(..., ge=1)


class WorkshopRef(BaseModel):
    # raw client value, resolved by the workshop normalizer
    id: Any = None
    name: Optional[str] = None


class CheckoutCreate(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    cart: List[CartLine]
    workshop: WorkshopRef
    total: float = Field(..., ge=0)
    user_id: Optional[int] = Field(None, alias="userId", le=ROW_ID_MAX)

    @field_validator("cart")
    @classmethod
    def ensure_cart_not_empty(cls, value: List[CartLine]) -> List[CartLine]:
        if not value:
            raise ValueError("cart must not be empty")
        return value


class TowingCreate(BaseModel):
    model_config = ConfigDict(populate_by_name=True, str_strip_whitespace=True)

    workshop_id: Any = Field(None, alias="workshopId")
    workshop_name: NonEmptyStr = Field(..., alias="workshopName")
    amount: float = Field(..., ge=0)
    pickup: NonEmptyStr
    destination: NonEmptyStr
    pickup_latitude: Optional[float] = Field(None, alias="pickupLatitude")
    pickup_longitude: Optional[float] = Field(None, alias="pickupLongitude")
    destination_latitude: Optional[float] = Field(None, alias="destinationLatitude")
    destination_longitude: Optional[float] = Field(None, alias="destinationLongitude")
    notes: Optional[str] = None
    user_id: Optional[int] = Field(None, alias="userId", le=ROW_ID_MAX)


class QuotationCreate(BaseModel):
    model_config = ConfigDict(populate_by_name=True, str_strip_whitespace=True)

    # display label used in the ledger title ("Brief", "Detailed", ...)
    type: Optional[str] = None
    model: NonEmptyStr
    year: NonEmptyStr
    engine: NonEmptyStr
    chassis: NonEmptyStr
    description: Optional[str] = None
    quote_type: QuoteType = Field(QuoteType.brief, alias="quoteType")
    images: Optional[List[str]] = None
    workshop_id: Any = Field(None, alias="workshopId")
    amount: float = Field(..., ge=0)
    user_id: Optional[int] = Field(None, alias="userId", le=ROW_ID_MAX)

    @field_validator("year", mode="before")
    @classmethod
    def year_as_text(cls, value):
        if isinstance(value, int) and not isinstance(value, bool):
            return str(value)
        return value

    @field_validator("type", "description", mode="before")
    @classmethod
    def blank_is_absent(cls, value):
        return _blank_to_none(value)

    @field_validator("quote_type", mode="before")
    @classmethod
    def default_quote_type(cls, value):
        if value is None or value == "":
            return QuoteType.brief
        if isinstance(value, str):
            return value.lower()
        return value


class TransactionUpdate(BaseModel):
    type:   Optional[TransactionType]   = None
    title:  Optional[str]               = None
    amount: Optional[float]             = Field(None, ge=0)
    status: Optional[TransactionStatus] = None
    date:   Optional[dt.date]           = None


class AdminMessageUpdate(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    admin_message: Optional[str] = Field(None, alias="adminMessage")


# ---------- outputs ----------

class TransactionOut(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: str
    type: TransactionType
    title: str
    date: dt.date
    amount: float
    status: TransactionStatus
    user_id: Optional[int]
    created_at: Optional[dt.datetime] = None


class ShopOrderItemOut(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    product_id: int
    product_name: str
    product_price: float
    quantity: int
    subtotal: float


class ShopOrderOut(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    kind: Literal[TransactionType.Shop]
    id: int
    transaction_id: str
    user_id: Optional[int]
    workshop_id: int
    total: float
    status: TransactionStatus
    date: dt.date
    items: List[ShopOrderItemOut]


class TowingRequestOut(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    kind: Literal[TransactionType.Towing]
    id: int
    transaction_id: str
    user_id: Optional[int]
    workshop_id: int
    pickup: str
    destination: str
    pickup_latitude: Optional[float] = None
    pickup_longitude: Optional[float] = None
    destination_latitude: Optional[float] = None
    destination_longitude: Optional[float] = None
    notes: Optional[str] = None
    amount: float
    status: TransactionStatus
    date: dt.date


class QuotationOut(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    kind: Literal[TransactionType.Quotation]
    id: int
    transaction_id: str
    user_id: Optional[int]
    workshop_id: int
    model: str
    year: str
    engine: str
    chassis: str
    description: Optional[str] = None
    quote_type: QuoteType
    images: Optional[List[str]] = None
    amount: float
    status: TransactionStatus
    admin_message: Optional[str] = None
    date: dt.date

    @field_validator("images", mode="before")
    @classmethod
    def decode_images(cls, value):
        if isinstance(value, str):
            return json.loads(value)
        return value


TransactionDetail = Annotated[
    Union[ShopOrderOut, TowingRequestOut, QuotationOut],
    Field(discriminator="kind"),
]


class TransactionWithDetailOut(TransactionOut):
    detail: Optional[TransactionDetail] = None

    # copied up from the detail row for clients that read them flat
    workshop_id: Optional[int] = Field(None, serialization_alias="workshopId")
    quote_type: Optional[QuoteType] = Field(None, serialization_alias="quoteType")
    admin_message: Optional[str] = Field(None, serialization_alias="adminMessage")

    @model_validator(mode="after")
    def lift_detail_fields(self):
        if self.detail is None:
            return self
        self.workshop_id = self.detail.workshop_id
        if isinstance(self.detail, QuotationOut):
            self.quote_type = self.detail.quote_type
            self.admin_message = self.detail.admin_message
        return self


class TransactionCreated(BaseModel):
    success: bool = True
    transaction: TransactionOut


class DeleteResult(BaseModel):
    success: bool = True
    message: str
