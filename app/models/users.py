from datetime import datetime

from sqlalchemy import Column, String, Integer, DateTime

from app.db.session import Base


class User(Base):
    __tablename__ = "users"

    id         = Column(Integer, primary_key=True, index=True)
    email      = Column(String(255), unique=True, index=True, nullable=False)
    password   = Column(String(255), nullable=False)
    name       = Column(String(255), nullable=False)
    phone      = Column(String(20), nullable=True)
    created_at = Column(DateTime, default=datetime.utcnow)
