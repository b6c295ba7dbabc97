from datetime import datetime

from sqlalchemy import Column, Integer, String, Numeric, DateTime, ForeignKey
from sqlalchemy.orm import relationship

from app.db.session import Base


class Product(Base):
    __tablename__ = "products"

    id          = Column(Integer, primary_key=True, index=True)
    name        = Column(String(255), nullable=False)
    price       = Column(Numeric(10, 2), nullable=False)
    category    = Column(String(100), nullable=False, index=True)
    image       = Column(String(500), nullable=False)
    stock       = Column(Integer, nullable=False, default=0)
    created_at  = Column(DateTime, default=datetime.utcnow)

    # optional: a product may be sold without a workshop
    workshop_id = Column(Integer, ForeignKey("workshops.id", ondelete="SET NULL"), nullable=True, index=True)
    workshop    = relationship("Workshop")
