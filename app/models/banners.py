from datetime import datetime

from sqlalchemy import Column, Integer, String, Boolean, DateTime

from app.db.session import Base


class Banner(Base):
    __tablename__ = "banner_sliders"

    id            = Column(Integer, primary_key=True, index=True)
    title         = Column(String(255), nullable=False)
    subtitle      = Column(String(255), nullable=False)
    image         = Column(String(500), nullable=False)
    link_url      = Column(String(500), nullable=True)
    display_order = Column(Integer, nullable=False, default=0, index=True)
    is_active     = Column(Boolean, nullable=False, default=True, index=True)
    created_at    = Column(DateTime, default=datetime.utcnow)
    updated_at    = Column(DateTime, default=datetime.utcnow, onupdate=datetime.utcnow)
