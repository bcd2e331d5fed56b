from sqlalchemy import Column, Integer, String, ForeignKey, DateTime
from datetime import datetime
from watertrack.db import Base
from sqlalchemy.orm import relationship


class Category(Base):
    __tablename__ = "categories"

    id = Column(Integer, primary_key=True)
    user_id = Column(Integer, ForeignKey("users.id", ondelete="CASCADE"), nullable=False, index=True)

    name = Column(String, nullable=False)
    icon = Column(String, nullable=True) # icon name used by the mobile client

    created_at = Column(DateTime, default=datetime.utcnow)
    updated_at = Column(DateTime, default=datetime.utcnow, onupdate=datetime.utcnow)

    # Deleting a category removes its devices
    devices = relationship(
        "Device",
        back_populates="category",
        cascade="all, delete-orphan",
        order_by="Device.name",
    )
