# app/models/driver_document.py
"""
Documents uploaded by drivers (licence scans, certificates, ...).
Lifecycle: pending → approved | rejected, both terminal.
"""

import enum

from sqlalchemy import Column, ForeignKey, Integer, String, Text
from app.database import Base
from app.models.common import UTCDateTime


class DocumentStatus(str, enum.Enum):
    PENDING = "pending"
    APPROVED = "approved"
    REJECTED = "rejected"


class DriverDocument(Base):
    __tablename__ = "driver_documents"

    seq = Column(Integer, primary_key=True, autoincrement=True)
    id = Column(String(64), unique=True, nullable=False, index=True)
    driver_id = Column(String(64), ForeignKey("users.id"), nullable=False, index=True)
    type = Column(String(50), nullable=False)
    file_name = Column(String(255), nullable=False)
    notes = Column(Text)
    status = Column(String(20), nullable=False, default=DocumentStatus.PENDING.value, index=True)
    reviewed_by = Column(String(64), ForeignKey("users.id"))
    review_comment = Column(Text)
    uploaded_at = Column(UTCDateTime, nullable=False)

    def __repr__(self):
        return f"<DriverDocument {self.id} driver={self.driver_id} status={self.status}>"
