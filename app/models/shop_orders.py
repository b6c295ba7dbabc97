from datetime import date, datetime

from sqlalchemy import (
    Column,
    Integer,
    String,
    ForeignKey,
    Numeric,
    Date,
    DateTime,
    Enum as SQLEnum,
)
from sqlalchemy.orm import relationship

from app.db.session import Base
from app.schemas.transactions import TransactionType, TransactionStatus


class ShopOrder(Base):
    __tablename__ = "shop_orders"

    kind = TransactionType.Shop

    id             = Column(Integer, primary_key=True, index=True)
    transaction_id = Column(
        String(50), ForeignKey("transactions.id", ondelete="CASCADE"), nullable=False, unique=True, index=True
    )
    user_id        = Column(Integer, ForeignKey("users.id", ondelete="SET NULL"), nullable=True, index=True)
    workshop_id    = Column(Integer, ForeignKey("workshops.id", ondelete="RESTRICT"), nullable=False, index=True)
    total          = Column(Numeric(10, 2), nullable=False)
    status         = Column(SQLEnum(TransactionStatus, name="shop_order_status"), default=TransactionStatus.pending, nullable=False)
    date           = Column(Date, nullable=False, default=date.today)
    created_at     = Column(DateTime, default=datetime.utcnow)
    updated_at     = Column(DateTime, default=datetime.utcnow, onupdate=datetime.utcnow)

    transaction = relationship("Transaction", back_populates="shop_order")
    workshop    = relationship("Workshop")
    items       = relationship(
        "ShopOrderItem",
        back_populates="order",
        cascade="all, delete-orphan",
        order_by="ShopOrderItem.id",
    )


class ShopOrderItem(Base):
    """
    One cart line frozen at checkout time.

    ``product_name`` and ``product_price`` are copies, so later product edits
    never rewrite historical orders.
    """

    __tablename__ = "shop_order_items"

    id            = Column(Integer, primary_key=True, index=True)
    order_id      = Column(Integer, ForeignKey("shop_orders.id", ondelete="CASCADE"), nullable=False, index=True)
    product_id    = Column(Integer, ForeignKey("products.id", ondelete="RESTRICT"), nullable=False, index=True)
    product_name  = Column(String(255), nullable=False)
    product_price = Column(Numeric(10, 2), nullable=False)
    quantity      = Column(Integer, nullable=False, default=1)
    subtotal      = Column(Numeric(10, 2), nullable=False)
    created_at    = Column(DateTime, default=datetime.utcnow)

    order = relationship("ShopOrder", back_populates="items")
