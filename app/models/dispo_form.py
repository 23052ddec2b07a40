# app/models/dispo_form.py
"""
Digital dispatch ("dispo") forms.
Lifecycle: draft → submitted (dispatcher sign) → approved | rejected (admin review).
"""

import enum

from sqlalchemy import Column, ForeignKey, Integer, String, Text
from app.database import Base
from app.models.common import UTCDateTime


class DispoFormStatus(str, enum.Enum):
    DRAFT = "draft"
    DISPATCHER_SIGNED = "dispatcher_signed"  # declared, never produced: signing yields SUBMITTED
    SUBMITTED = "submitted"
    APPROVED = "approved"
    REJECTED = "rejected"


class DispoForm(Base):
    __tablename__ = "dispo_forms"

    seq = Column(Integer, primary_key=True, autoincrement=True)
    id = Column(String(64), unique=True, nullable=False, index=True)
    driver_id = Column(String(64), ForeignKey("users.id"), nullable=False, index=True)
    dispatcher_id = Column(String(64), ForeignKey("users.id"))
    title = Column(String(200), nullable=False)
    details = Column(Text, nullable=False, default="")
    status = Column(String(30), nullable=False, default=DispoFormStatus.DRAFT.value, index=True)
    created_at = Column(UTCDateTime, nullable=False)
    dispatcher_signed_at = Column(UTCDateTime)
    admin_reviewed_by = Column(String(64), ForeignKey("users.id"))
    admin_review_comment = Column(Text)

    def __repr__(self):
        return f"<DispoForm {self.id} driver={self.driver_id} status={self.status}>"
