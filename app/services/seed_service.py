# app/services/seed_service.py
"""
Demo seed data loaded into an empty store at startup.
Skipped when any user already exists.
"""

from datetime import timedelta

from sqlalchemy.orm import Session

from app.config import settings
from app.database import serialized
from app.models.common import utcnow
from app.models.task import Task, TaskStatus
from app.models.task_template import RequiredDocument, TaskTemplate
from app.models.training import TrainingAssignment, TrainingModule
from app.models.user import Role, User
from app.services.repositories import Store
from app.utils.logger import get_logger

logger = get_logger(__name__)

SEED_USERS = [
    {"id": "u_admin_1", "username": "admin", "password": "admin123",
     "name": "Main Admin", "role": Role.ADMIN},
    {"id": "u_dispatch_1", "username": "dispatcher", "password": "dispatcher123",
     "name": "Main Dispatcher", "role": Role.DISPATCHER},
    {"id": "u_driver_1", "username": "driver1", "password": "driver123",
     "name": "Driver One", "role": Role.DRIVER},
]


def seed_store(db: Session) -> bool:
    """Returns True if seed data was written."""
    with serialized(db):
        store = Store(db)
        if store.users.count():
            logger.info("Store already populated: seed skipped")
            return False

        now = utcnow()
        for row in SEED_USERS:
            store.users.add(User(**{**row, "role": row["role"].value}))

        template = TaskTemplate(
            id="tpl_1",
            title="Upload Tacho Data",
            description="Upload this week tacho export before Friday.",
            created_by="u_admin_1",
            created_at=now,
        )
        template.required_documents = [
            RequiredDocument(id="req_1", position=0, title="Tacho Export",
                             description="Upload weekly tacho log export.", type="log"),
            RequiredDocument(id="req_2", position=1, title="Vehicle Condition Photo",
                             description="Upload clear photo of current vehicle condition.", type="photo"),
        ]
        store.templates.add(template)

        store.tasks.add(Task(
            id="t_1",
            template_id="tpl_1",
            due_date=(now + timedelta(days=settings.SEED_TASK_DUE_DAYS)).isoformat(),
            driver_id="u_driver_1",
            assigned_by="u_admin_1",
            status=TaskStatus.ASSIGNED.value,
            submitted_documents=[],
        ))

        store.training_modules.add(TrainingModule(
            id="tm_1",
            title="Welcome Safety Training",
            content="Read all safety instructions and confirm completion.",
        ))
        store.training_assignments.add(TrainingAssignment(
            id="ta_1",
            module_id="tm_1",
            driver_id="u_driver_1",
            assigned_by="u_admin_1",
        ))

        logger.info(f"Seeded {len(SEED_USERS)} users, 1 template, 1 task, 1 training assignment")
        return True
