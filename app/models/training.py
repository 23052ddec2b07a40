# app/models/training.py
"""
Training modules (seed-only reference data) and their per-driver assignments.
An assignment is confirmed once confirmed_at is set.
"""

from sqlalchemy import Column, ForeignKey, Integer, String, Text
from app.database import Base
from app.models.common import UTCDateTime


class TrainingModule(Base):
    __tablename__ = "training_modules"

    seq = Column(Integer, primary_key=True, autoincrement=True)
    id = Column(String(64), unique=True, nullable=False, index=True)
    title = Column(String(200), nullable=False)
    content = Column(Text, nullable=False, default="")

    def __repr__(self):
        return f"<TrainingModule {self.id} title={self.title!r}>"


class TrainingAssignment(Base):
    __tablename__ = "training_assignments"

    seq = Column(Integer, primary_key=True, autoincrement=True)
    id = Column(String(64), unique=True, nullable=False, index=True)
    module_id = Column(String(64), ForeignKey("training_modules.id"), nullable=False)
    driver_id = Column(String(64), ForeignKey("users.id"), nullable=False, index=True)
    assigned_by = Column(String(64), ForeignKey("users.id"), nullable=False)
    confirmed_at = Column(UTCDateTime)

    def __repr__(self):
        return f"<TrainingAssignment {self.id} driver={self.driver_id} confirmed={self.confirmed_at is not None}>"
