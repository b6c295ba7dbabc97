from datetime import datetime

from sqlalchemy import Column, String, Integer, Boolean, DateTime

from app.db.session import Base


class Admin(Base):
    __tablename__ = "admin"

    id         = Column(Integer, primary_key=True, index=True)
    email      = Column(String(255), unique=True, index=True, nullable=False)
    password   = Column(String(255), nullable=False)
    name       = Column(String(255), nullable=False)
    role       = Column(String(50), nullable=False, default="admin")
    is_active  = Column(Boolean, nullable=False, default=True)
    created_at = Column(DateTime, default=datetime.utcnow)
    updated_at = Column(DateTime, default=datetime.utcnow, onupdate=datetime.utcnow)
    last_login = Column(DateTime, nullable=True)
