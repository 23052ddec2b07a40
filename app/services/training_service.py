# app/services/training_service.py
"""
Training workflow: an assignment is unconfirmed until the driver confirms it.
Confirming again overwrites confirmed_at.
"""

from typing import Optional

from sqlalchemy.orm import Session

from app.database import serialized
from app.models.common import utcnow
from app.schemas.training import TrainingAssignmentOut, TrainingAssignmentWithModuleOut, TrainingProgressOut
from app.services.authorization import DRIVER_ONLY, STAFF, require_role
from app.services.errors import NotFound
from app.services.identity_service import resolve_identity
from app.services.projections import assignment_with_module, training_progress
from app.services.repositories import Store
from app.utils.logger import get_logger

logger = get_logger(__name__)


def list_my_training(db: Session, token: Optional[str]) -> list[TrainingAssignmentWithModuleOut]:
    with serialized(db):
        store = Store(db)
        user = require_role(resolve_identity(store, token), DRIVER_ONLY)
        return [assignment_with_module(store, a) for a in store.training_assignments.list(driver_id=user.id)]


def confirm_training(db: Session, token: Optional[str], assignment_id: str) -> TrainingAssignmentOut:
    with serialized(db):
        store = Store(db)
        user = require_role(resolve_identity(store, token), DRIVER_ONLY)

        assignment = store.training_assignments.find_one(id=assignment_id, driver_id=user.id)
        if not assignment:
            raise NotFound("Training assignment not found")

        assignment.confirmed_at = utcnow()
        db.flush()

        logger.info(f"[TRAINING] {assignment.id} ({assignment.module_id}) confirmed by {user.id}")
        return TrainingAssignmentOut.model_validate(assignment)


def list_training_progress(db: Session, token: Optional[str]) -> list[TrainingProgressOut]:
    with serialized(db):
        store = Store(db)
        require_role(resolve_identity(store, token), STAFF)
        return [training_progress(store, a) for a in store.training_assignments.list()]
