# app/services/dispo_form_service.py
"""
Dispo form workflow: draft → submitted (dispatcher sign) → approved | rejected.

Neither sign nor review checks the current status. Re-signing overwrites the
dispatcher and timestamp. The "dispatcher_signed" status is never produced.
"""

from typing import Optional

from sqlalchemy.orm import Session

from app.database import serialized
from app.models.common import make_id, utcnow
from app.models.dispo_form import DispoForm, DispoFormStatus
from app.schemas.dispo_form import DispoFormCreate, DispoFormOut, DispoFormReview
from app.services.authorization import ADMIN_ONLY, DISPATCHER_ONLY, DRIVER_ONLY, is_driver, require_role
from app.services.errors import NotFound
from app.services.identity_service import resolve_identity
from app.services.repositories import Store
from app.utils.logger import get_logger

logger = get_logger(__name__)


def create_dispo_form(db: Session, token: Optional[str], payload: DispoFormCreate) -> DispoFormOut:
    with serialized(db):
        store = Store(db)
        user = require_role(resolve_identity(store, token), DRIVER_ONLY)

        form = store.dispo_forms.add(DispoForm(
            id=make_id("df"),
            driver_id=user.id,
            title=payload.title,
            details=payload.details,
            status=DispoFormStatus.DRAFT.value,
            created_at=utcnow(),
        ))
        logger.info(f"[DISPO] {form.id} drafted by {user.id}")
        return DispoFormOut.model_validate(form)


def sign_dispo_form(db: Session, token: Optional[str], form_id: str) -> DispoFormOut:
    with serialized(db):
        store = Store(db)
        user = require_role(resolve_identity(store, token), DISPATCHER_ONLY)

        form = store.dispo_forms.get(form_id)
        if not form:
            raise NotFound("Dispo form not found")

        form.dispatcher_id = user.id
        form.dispatcher_signed_at = utcnow()
        form.status = DispoFormStatus.SUBMITTED.value
        db.flush()

        logger.info(f"[DISPO] {form.id} signed by dispatcher {user.id}")
        return DispoFormOut.model_validate(form)


def review_dispo_form(db: Session, token: Optional[str], form_id: str,
                      payload: DispoFormReview) -> DispoFormOut:
    with serialized(db):
        store = Store(db)
        user = require_role(resolve_identity(store, token), ADMIN_ONLY)

        form = store.dispo_forms.get(form_id)
        if not form:
            raise NotFound("Dispo form not found")

        previous = form.status
        form.status = DispoFormStatus(payload.decision).value
        form.admin_reviewed_by = user.id
        form.admin_review_comment = payload.comment
        db.flush()

        logger.info(f"[DISPO] {form.id} reviewed by {user.id}: {previous} → {form.status}")
        return DispoFormOut.model_validate(form)


def list_dispo_forms(db: Session, token: Optional[str]) -> list[DispoFormOut]:
    with serialized(db):
        store = Store(db)
        user = resolve_identity(store, token)
        rows = store.dispo_forms.list(driver_id=user.id) if is_driver(user) else store.dispo_forms.list()
        return [DispoFormOut.model_validate(f) for f in rows]
