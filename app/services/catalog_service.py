# app/services/catalog_service.py
"""
Catalog: admin-authored task templates. Training modules are seed-only.
Templates are immutable once created; every requirement gets its own id.
"""

from typing import Optional

from sqlalchemy.orm import Session

from app.database import serialized
from app.models.common import make_id, utcnow
from app.models.task_template import RequiredDocument, TaskTemplate
from app.schemas.task_template import TaskTemplateCreate, TaskTemplateOut
from app.services.authorization import ADMIN_ONLY, STAFF, require_role
from app.services.errors import ValidationError
from app.services.identity_service import resolve_identity
from app.services.repositories import Store
from app.utils.logger import get_logger

logger = get_logger(__name__)


def create_task_template(db: Session, token: Optional[str], payload: TaskTemplateCreate) -> TaskTemplateOut:
    with serialized(db):
        store = Store(db)
        user = require_role(resolve_identity(store, token), ADMIN_ONLY)

        if not payload.required_documents:
            raise ValidationError("At least one required document is needed")

        template = TaskTemplate(
            id=make_id("tpl"),
            title=payload.title,
            description=payload.description,
            created_by=user.id,
            created_at=utcnow(),
        )
        template.required_documents = [
            RequiredDocument(
                id=make_id("req"),
                position=position,
                title=item.title,
                description=item.description,
                type=item.type,
            )
            for position, item in enumerate(payload.required_documents)
        ]
        store.templates.add(template)
        logger.info(f"[CATALOG] Template {template.id} created by {user.id} "
                    f"with {len(template.required_documents)} required document(s)")
        return TaskTemplateOut.model_validate(template)


def list_task_templates(db: Session, token: Optional[str]) -> list[TaskTemplateOut]:
    with serialized(db):
        store = Store(db)
        require_role(resolve_identity(store, token), STAFF)
        return [TaskTemplateOut.model_validate(t) for t in store.templates.list()]
