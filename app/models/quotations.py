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
from app.schemas.transactions import TransactionType, TransactionStatus, QuoteType


class Quotation(Base):
    __tablename__ = "quotations"

    kind = TransactionType.Quotation

    id             = Column(Integer, primary_key=True, index=True)
    transaction_id = Column(
        String(50), ForeignKey("transactions.id", ondelete="CASCADE"), nullable=False, unique=True, index=True
    )
    user_id        = Column(Integer, ForeignKey("users.id", ondelete="SET NULL"), nullable=True, index=True)
    workshop_id    = Column(Integer, ForeignKey("workshops.id", ondelete="RESTRICT"), nullable=False, index=True)
    model          = Column(String(255), nullable=False)
    year           = Column(String(10), nullable=False)
    engine         = Column(String(255), nullable=False)
    chassis        = Column(String(255), nullable=False)
    description    = Column(Text, nullable=True)
    quote_type     = Column(SQLEnum(QuoteType, name="quote_type"), default=QuoteType.brief, nullable=False)
    # JSON list of image urls / payloads, NULL when none were sent
    images         = Column(Text, nullable=True)
    amount         = Column(Numeric(10, 2), nullable=False)
    status         = Column(SQLEnum(TransactionStatus, name="quotation_status"), default=TransactionStatus.pending, nullable=False)
    admin_message  = Column(Text, nullable=True)
    date           = Column(Date, nullable=False, default=date.today)
    created_at     = Column(DateTime, default=datetime.utcnow)
    updated_at     = Column(DateTime, default=datetime.utcnow, onupdate=datetime.utcnow)

    transaction = relationship("Transaction", back_populates="quotation")
    workshop    = relationship("Workshop")
