from datetime import date, datetime

from sqlalchemy import (
    Column,
    Integer,
    String,
    Text,
    ForeignKey,
    Numeric,
    Date,
    DateTime,
    Enum as SQLEnum,
)
from sqlalchemy.orm import relationship

from app.db.session import Base
from app.schemas.transactions import TransactionType, TransactionStatus


class TowingRequest(Base):
    __tablename__ = "towing_requests"

    kind = TransactionType.Towing

    id                    = Column(Integer, primary_key=True, index=True)
    transaction_id        = Column(
        String(50), ForeignKey("transactions.id", ondelete="CASCADE"), nullable=False, unique=True, index=True
    )
    user_id               = Column(Integer, ForeignKey("users.id", ondelete="SET NULL"), nullable=True, index=True)
    workshop_id           = Column(Integer, ForeignKey("workshops.id", ondelete="RESTRICT"), nullable=False, index=True)
    pickup                = Column(String(500), nullable=False)
    destination           = Column(String(500), nullable=False)
    pickup_latitude       = Column(Numeric(10, 8), nullable=True)
    pickup_longitude      = Column(Numeric(11, 8), nullable=True)
    destination_latitude  = Column(Numeric(10, 8), nullable=True)
    destination_longitude = Column(Numeric(11, 8), nullable=True)
    amount                = Column(Numeric(10, 2), nullable=False)
    status                = Column(SQLEnum(TransactionStatus, name="towing_status"), default=TransactionStatus.pending, nullable=False)
    notes                 = Column(Text, nullable=True)
    date                  = Column(Date, nullable=False, default=date.today)
    created_at            = Column(DateTime, default=datetime.utcnow)
    updated_at            = Column(DateTime, default=datetime.utcnow, onupdate=datetime.utcnow)

    transaction = relationship("Transaction", back_populates="towing_request")
    workshop    = relationship("Workshop")
