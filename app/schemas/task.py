# app/schemas/task.py
from datetime import datetime
from typing import List, Literal, Optional

from app.schemas.base import CamelModel
from app.schemas.task_template import TaskTemplateOut
from app.schemas.user import UserOut


class SubmittedDocument(CamelModel):
    requirement_id: str
    file_name: str
    notes: Optional[str] = None


class TaskAssign(CamelModel):
    template_id: str
    due_date: str
    driver_id: str


class TaskSubmit(CamelModel):
    submitted_documents: List[SubmittedDocument] = []
    submission_notes: Optional[str] = None


class TaskReview(CamelModel):
    decision: Literal["approved", "resubmit_required"]
    feedback: Optional[str] = None


class TaskOut(CamelModel):
    id: str
    template_id: str
    due_date: str
    driver_id: str
    assigned_by: str
    status: str
    submitted_at: Optional[datetime] = None
    submission_notes: Optional[str] = None
    submitted_documents: List[SubmittedDocument] = []
    review_feedback: Optional[str] = None
    reviewed_at: Optional[datetime] = None
    reviewed_by: Optional[str] = None


class TaskWithTemplateOut(TaskOut):
    template: Optional[TaskTemplateOut] = None


class TaskDetailOut(TaskWithTemplateOut):
    driver: Optional[UserOut] = None
