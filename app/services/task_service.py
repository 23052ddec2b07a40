# app/services/task_service.py
"""
Task workflow.

  assigned ──submit──▶ submitted ──review──▶ approved
                           ▲                  │
                           └─submit─ resubmit_required ◀─review

Submit is only legal from assigned / resubmit_required. Submitted documents
must name requirements of the task's own template. Review has no
status guard: an admin may review a task in any state, including one that
was never submitted.
"""

from typing import Optional

from sqlalchemy.orm import Session

from app.database import serialized
from app.models.common import make_id, utcnow
from app.models.task import SUBMITTABLE_STATUSES, Task, TaskStatus
from app.models.user import Role
from app.schemas.task import (
    TaskAssign, TaskDetailOut, TaskOut, TaskReview, TaskSubmit, TaskWithTemplateOut,
)
from app.services.authorization import ADMIN_ONLY, DRIVER_ONLY, STAFF, require_role
from app.services.errors import InvalidTransition, NotFound
from app.services.identity_service import resolve_identity
from app.services.projections import task_detail, task_with_template
from app.services.repositories import Store
from app.utils.logger import get_logger

logger = get_logger(__name__)


def assign_task(db: Session, token: Optional[str], payload: TaskAssign) -> TaskOut:
    with serialized(db):
        store = Store(db)
        user = require_role(resolve_identity(store, token), STAFF)

        driver = store.users.find_one(id=payload.driver_id, role=Role.DRIVER.value)
        if not driver:
            raise NotFound("Driver not found")

        if not store.templates.get(payload.template_id):
            raise NotFound("Task template not found")

        task = store.tasks.add(Task(
            id=make_id("t"),
            template_id=payload.template_id,
            due_date=payload.due_date,
            driver_id=driver.id,
            assigned_by=user.id,
            status=TaskStatus.ASSIGNED.value,
            submitted_documents=[],
        ))
        logger.info(f"[TASK] {task.id} assigned to {driver.id} by {user.id} (template {task.template_id})")
        return TaskOut.model_validate(task)


def submit_task(db: Session, token: Optional[str], task_id: str, payload: TaskSubmit) -> TaskWithTemplateOut:
    with serialized(db):
        store = Store(db)
        user = require_role(resolve_identity(store, token), DRIVER_ONLY)

        # Another driver's task is reported as missing, not forbidden
        task = store.tasks.find_one(id=task_id, driver_id=user.id)
        if not task:
            raise NotFound("Task not found for this driver")

        if TaskStatus(task.status) not in SUBMITTABLE_STATUSES:
            raise InvalidTransition("Task cannot be submitted in current status")

        template = store.templates.get(task.template_id)
        known_requirements = {r.id for r in template.required_documents} if template else set()
        if any(doc.requirement_id not in known_requirements for doc in payload.submitted_documents):
            raise NotFound("Requirement not found for this task")

        task.submitted_documents = [
            doc.model_dump(by_alias=True, exclude_none=True) for doc in payload.submitted_documents
        ]
        task.submission_notes = payload.submission_notes
        task.submitted_at = utcnow()
        task.status = TaskStatus.SUBMITTED.value
        task.review_feedback = None
        db.flush()

        logger.info(f"[TASK] {task.id} submitted by {user.id} "
                    f"with {len(task.submitted_documents)} document(s)")
        return task_with_template(store, task)


def review_task(db: Session, token: Optional[str], task_id: str, payload: TaskReview) -> TaskWithTemplateOut:
    with serialized(db):
        store = Store(db)
        user = require_role(resolve_identity(store, token), ADMIN_ONLY)

        task = store.tasks.get(task_id)
        if not task:
            raise NotFound("Task not found")

        previous = task.status
        task.status = TaskStatus(payload.decision).value
        task.review_feedback = payload.feedback
        task.reviewed_at = utcnow()
        task.reviewed_by = user.id
        db.flush()

        logger.info(f"[TASK] {task.id} reviewed by {user.id}: {previous} → {task.status}")
        return task_with_template(store, task)


def list_my_tasks(db: Session, token: Optional[str]) -> list[TaskWithTemplateOut]:
    with serialized(db):
        store = Store(db)
        user = require_role(resolve_identity(store, token), DRIVER_ONLY)
        return [task_with_template(store, t) for t in store.tasks.list(driver_id=user.id)]


def list_task_review_queue(db: Session, token: Optional[str]) -> list[TaskDetailOut]:
    with serialized(db):
        store = Store(db)
        require_role(resolve_identity(store, token), ADMIN_ONLY)
        return [task_detail(store, t) for t in store.tasks.list(status=TaskStatus.SUBMITTED.value)]


def list_assigned_tasks(db: Session, token: Optional[str]) -> list[TaskDetailOut]:
    with serialized(db):
        store = Store(db)
        require_role(resolve_identity(store, token), STAFF)
        return [task_detail(store, t) for t in store.tasks.list()]
