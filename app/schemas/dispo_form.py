# app/schemas/dispo_form.py
from datetime import datetime
from typing import Literal, Optional

from app.schemas.base import CamelModel


class DispoFormCreate(CamelModel):
    title: str
    details: str


class DispoFormReview(CamelModel):
    decision: Literal["approved", "rejected"]
    comment: Optional[str] = None


class DispoFormOut(CamelModel):
    id: str
    driver_id: str
    dispatcher_id: Optional[str] = None
    title: str
    details: str
    status: str
    created_at: datetime
    dispatcher_signed_at: Optional[datetime] = None
    admin_reviewed_by: Optional[str] = None
    admin_review_comment: Optional[str] = None
