# app/models/task_template.py
"""
Task templates and their required-document checklist.
Created by admins, immutable once created.
"""

from sqlalchemy import Column, ForeignKey, Integer, String, Text
from sqlalchemy.orm import relationship
from app.database import Base
from app.models.common import UTCDateTime


class TaskTemplate(Base):
    __tablename__ = "task_templates"

    seq = Column(Integer, primary_key=True, autoincrement=True)
    id = Column(String(64), unique=True, nullable=False, index=True)
    title = Column(String(200), nullable=False)
    description = Column(Text, nullable=False, default="")
    created_by = Column(String(64), ForeignKey("users.id"), nullable=False)
    created_at = Column(UTCDateTime, nullable=False)

    required_documents = relationship(
        "RequiredDocument",
        order_by="RequiredDocument.position",
        cascade="all, delete-orphan",
        lazy="selectin",
    )

    def __repr__(self):
        return f"<TaskTemplate {self.id} title={self.title!r} requirements={len(self.required_documents)}>"


class RequiredDocument(Base):
    __tablename__ = "required_documents"

    seq = Column(Integer, primary_key=True, autoincrement=True)
    id = Column(String(64), unique=True, nullable=False, index=True)
    template_id = Column(String(64), ForeignKey("task_templates.id"), nullable=False, index=True)
    position = Column(Integer, nullable=False)
    title = Column(String(200), nullable=False)
    description = Column(Text, nullable=False, default="")
    type = Column(String(50), nullable=False)  # log | photo | ...

    def __repr__(self):
        return f"<RequiredDocument {self.id} template={self.template_id} type={self.type}>"
