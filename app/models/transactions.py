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
    Index,
)
from sqlalchemy.orm import relationship

from app.db.session import Base
from app.schemas.transactions import TransactionType, TransactionStatus


class Transaction(Base):
    """
    Ledger row for every billable customer action.

    Each row owns exactly one detail row whose table depends on ``type``;
    ``detail`` resolves it.
    """

    __tablename__ = "transactions"
    __table_args__ = (
        Index("ix_transactions_date_created", "date", "created_at"),
    )

    id         = Column(String(50), primary_key=True)
    type       = Column(SQLEnum(TransactionType, name="transaction_type"), nullable=False, index=True)
    title      = Column(String(255), nullable=False)
    date       = Column(Date, nullable=False, default=date.today)
    amount     = Column(Numeric(10, 2), nullable=False)
    status     = Column(
        SQLEnum(TransactionStatus, name="transaction_status"),
        nullable=False,
        default=TransactionStatus.pending,
        index=True,
    )
    created_at = Column(DateTime, default=datetime.utcnow, nullable=False)

    user_id = Column(Integer, ForeignKey("users.id", ondelete="SET NULL"), nullable=True, index=True)
    user    = relationship("User")

    shop_order = relationship(
        "ShopOrder",
        back_populates="transaction",
        uselist=False,
        cascade="all, delete-orphan",
    )
    towing_request = relationship(
        "TowingRequest",
        back_populates="transaction",
        uselist=False,
        cascade="all, delete-orphan",
    )
    quotation = relationship(
        "Quotation",
        back_populates="transaction",
        uselist=False,
        cascade="all, delete-orphan",
    )

    @property
    def detail(self):
        if self.type == TransactionType.Shop:
            return self.shop_order
        if self.type == TransactionType.Towing:
            return self.towing_request
        if self.type == TransactionType.Quotation:
            return self.quotation
        raise ValueError(f"unsupported transaction type {self.type}")

    def __repr__(self) -> str:
        return f"<Transaction {self.id} {self.type} {self.status}>"
