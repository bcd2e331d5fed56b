from sqlalchemy import Column, Integer, Float, String, ForeignKey, DateTime
from datetime import datetime
from watertrack.db import Base


class Bill(Base):
    __tablename__ = "bills"

    id = Column(Integer, primary_key=True)
    user_id = Column(Integer, ForeignKey("users.id", ondelete="CASCADE"), nullable=False, index=True)

    amount = Column(Float, nullable=False)
    due_date = Column(DateTime, nullable=False)
    paid_date = Column(DateTime, nullable=True)
    water_used = Column(Float, nullable=False)
    bill_period_start = Column(DateTime, nullable=True)
    bill_period_end = Column(DateTime, nullable=True)
    photo_url = Column(String, nullable=True) # /uploads/<filename>

    created_at = Column(DateTime, default=datetime.utcnow)
    updated_at = Column(DateTime, default=datetime.utcnow, onupdate=datetime.utcnow)
