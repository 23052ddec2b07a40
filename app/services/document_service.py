# app/services/document_service.py
"""
Driver document workflow: pending → approved | rejected (both terminal).

Any review decision other than "approved" (including needs_resubmission)
is stored as rejected.
"""

from typing import Optional

from sqlalchemy.orm import Session

from app.database import serialized
from app.models.common import make_id, utcnow
from app.models.driver_document import DocumentStatus, DriverDocument
from app.schemas.document import DocumentReview, DocumentUpload, DriverDocumentOut
from app.services.authorization import ADMIN_ONLY, DRIVER_ONLY, is_driver, require_role
from app.services.errors import NotFound
from app.services.identity_service import resolve_identity
from app.services.repositories import Store
from app.utils.logger import get_logger

logger = get_logger(__name__)


def stored_status_for(decision: str) -> DocumentStatus:
    return DocumentStatus.APPROVED if decision == "approved" else DocumentStatus.REJECTED


def upload_document(db: Session, token: Optional[str], payload: DocumentUpload) -> DriverDocumentOut:
    with serialized(db):
        store = Store(db)
        user = require_role(resolve_identity(store, token), DRIVER_ONLY)

        document = store.documents.add(DriverDocument(
            id=make_id("doc"),
            driver_id=user.id,
            type=payload.type,
            file_name=payload.file_name,
            notes=payload.notes,
            status=DocumentStatus.PENDING.value,
            uploaded_at=utcnow(),
        ))
        logger.info(f"[DOC] {document.id} ({document.type}) uploaded by {user.id}")
        return DriverDocumentOut.model_validate(document)


def list_documents(db: Session, token: Optional[str]) -> list[DriverDocumentOut]:
    with serialized(db):
        store = Store(db)
        user = resolve_identity(store, token)
        rows = store.documents.list(driver_id=user.id) if is_driver(user) else store.documents.list()
        return [DriverDocumentOut.model_validate(d) for d in rows]


def review_document(db: Session, token: Optional[str], document_id: str,
                    payload: DocumentReview) -> DriverDocumentOut:
    with serialized(db):
        store = Store(db)
        user = require_role(resolve_identity(store, token), ADMIN_ONLY)

        document = store.documents.get(document_id)
        if not document:
            raise NotFound("Document not found")

        document.status = stored_status_for(payload.decision).value
        document.reviewed_by = user.id
        document.review_comment = payload.comment
        db.flush()

        logger.info(f"[DOC] {document.id} reviewed by {user.id}: {payload.decision} → {document.status}")
        return DriverDocumentOut.model_validate(document)
