from sqlalchemy import Column, Integer, String, ForeignKey, DateTime, Text
from datetime import datetime
from watertrack.db import Base
from sqlalchemy.orm import relationship


class Device(Base):
    __tablename__ = "devices"

    id = Column(Integer, primary_key=True)
    user_id = Column(Integer, ForeignKey("users.id", ondelete="CASCADE"), nullable=False, index=True)
    # Must point at a category of the same user, checked in device_service
    category_id = Column(Integer, ForeignKey("categories.id", ondelete="CASCADE"), nullable=False)

    name = Column(String, nullable=False)
    description = Column(Text, nullable=True)

    created_at = Column(DateTime, default=datetime.utcnow)
    updated_at = Column(DateTime, default=datetime.utcnow, onupdate=datetime.utcnow)

    category = relationship("Category", back_populates="devices")
    # No delete cascade: usages of a removed device are kept with device_id = NULL
    usages = relationship("Usage", back_populates="device")
