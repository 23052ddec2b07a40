# app/schemas/document.py
from datetime import datetime
from typing import Literal, Optional

from app.schemas.base import CamelModel


class DocumentUpload(CamelModel):
    type: str
    file_name: str
    notes: Optional[str] = None


class DocumentReview(CamelModel):
    # needs_resubmission is accepted but stored as "rejected"
    decision: Literal["approved", "rejected", "needs_resubmission"]
    comment: Optional[str] = None


class DriverDocumentOut(CamelModel):
    id: str
    driver_id: str
    type: str
    file_name: str
    notes: Optional[str] = None
    status: str
    reviewed_by: Optional[str] = None
    review_comment: Optional[str] = None
    uploaded_at: datetime
