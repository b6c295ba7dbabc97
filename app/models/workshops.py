from datetime import datetime

from sqlalchemy import Column, Integer, String, Numeric, DateTime

from app.db.session import Base


class Workshop(Base):
    __tablename__ = "workshops"

    id         = Column(Integer, primary_key=True, index=True)
    name       = Column(String(255), nullable=False)
    rating     = Column(Numeric(3, 1), nullable=False)
    location   = Column(String(255), nullable=False)
    icon       = Column(String(100), nullable=False)
    image      = Column(String(500), nullable=True)
    created_at = Column(DateTime, default=datetime.utcnow)
