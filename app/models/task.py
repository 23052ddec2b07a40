# app/models/task.py
"""
Tasks table: one template assigned to one driver.
Lifecycle: assigned → submitted → approved | resubmit_required (→ submitted again).
"""

import enum

from sqlalchemy import Column, ForeignKey, Integer, JSON, String, Text
from app.database import Base
from app.models.common import UTCDateTime


class TaskStatus(str, enum.Enum):
    ASSIGNED = "assigned"
    SUBMITTED = "submitted"
    APPROVED = "approved"
    RESUBMIT_REQUIRED = "resubmit_required"


SUBMITTABLE_STATUSES = {TaskStatus.ASSIGNED, TaskStatus.RESUBMIT_REQUIRED}


class Task(Base):
    __tablename__ = "tasks"

    seq = Column(Integer, primary_key=True, autoincrement=True)
    id = Column(String(64), unique=True, nullable=False, index=True)
    template_id = Column(String(64), ForeignKey("task_templates.id"), nullable=False, index=True)
    due_date = Column(String(64), nullable=False)
    driver_id = Column(String(64), ForeignKey("users.id"), nullable=False, index=True)
    assigned_by = Column(String(64), ForeignKey("users.id"), nullable=False)
    status = Column(String(30), nullable=False, default=TaskStatus.ASSIGNED.value, index=True)
    submitted_at = Column(UTCDateTime)
    submission_notes = Column(Text)
    # list of {requirementId, fileName, notes?}; replaced wholesale on every submit
    submitted_documents = Column(JSON, nullable=False, default=list)
    review_feedback = Column(Text)
    reviewed_at = Column(UTCDateTime)
    reviewed_by = Column(String(64), ForeignKey("users.id"))

    def __repr__(self):
        return f"<Task {self.id} driver={self.driver_id} status={self.status}>"
