# app/models/vehicle_photo.py
"""
Vehicle photos uploaded by drivers. No review lifecycle.
"""

from sqlalchemy import Column, ForeignKey, Integer, String, Text
from app.database import Base
from app.models.common import UTCDateTime


class VehiclePhoto(Base):
    __tablename__ = "vehicle_photos"

    seq = Column(Integer, primary_key=True, autoincrement=True)
    id = Column(String(64), unique=True, nullable=False, index=True)
    driver_id = Column(String(64), ForeignKey("users.id"), nullable=False, index=True)
    category = Column(String(50), nullable=False)
    file_name = Column(String(255), nullable=False)
    notes = Column(Text)
    uploaded_at = Column(UTCDateTime, nullable=False)

    def __repr__(self):
        return f"<VehiclePhoto {self.id} driver={self.driver_id} category={self.category}>"
