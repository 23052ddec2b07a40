# app/services/repositories.py
"""
Repository per entity type over an injected SQLAlchemy session.

Workflow services only talk to these, never to the session directly, so the
state-machine logic is independent of how the store is backed. Lists are
always most-recent-first (descending insertion sequence).
"""

from typing import Generic, Optional, Type, TypeVar

from sqlalchemy.orm import Session

from app.models.dispo_form import DispoForm
from app.models.driver_document import DriverDocument
from app.models.task import Task
from app.models.task_template import TaskTemplate
from app.models.training import TrainingAssignment, TrainingModule
from app.models.user import User
from app.models.vehicle_photo import VehiclePhoto

M = TypeVar("M")


class Repository(Generic[M]):
    model: Type[M]

    def __init__(self, db: Session):
        self.db = db

    def _query(self, **filters):
        q = self.db.query(self.model)
        for column, value in filters.items():
            q = q.filter(getattr(self.model, column) == value)
        return q

    def get(self, record_id: str) -> Optional[M]:
        if not record_id:
            return None
        return self._query(id=record_id).first()

    def find_one(self, **filters) -> Optional[M]:
        return self._query(**filters).first()

    def list(self, **filters) -> list[M]:
        return self._query(**filters).order_by(self.model.seq.desc()).all()

    def add(self, record: M) -> M:
        self.db.add(record)
        self.db.flush()
        return record

    def count(self) -> int:
        return self.db.query(self.model).count()


class UserRepository(Repository[User]):
    model = User

    def list(self, **filters) -> list[User]:
        # Users keep seed order
        return self._query(**filters).order_by(User.seq.asc()).all()


class TaskTemplateRepository(Repository[TaskTemplate]):
    model = TaskTemplate


class TaskRepository(Repository[Task]):
    model = Task


class TrainingModuleRepository(Repository[TrainingModule]):
    model = TrainingModule


class TrainingAssignmentRepository(Repository[TrainingAssignment]):
    model = TrainingAssignment


class DriverDocumentRepository(Repository[DriverDocument]):
    model = DriverDocument


class VehiclePhotoRepository(Repository[VehiclePhoto]):
    model = VehiclePhoto


class DispoFormRepository(Repository[DispoForm]):
    model = DispoForm


class Store:
    """Bundles one repository per entity around a single session."""

    def __init__(self, db: Session):
        self.db = db
        self.users = UserRepository(db)
        self.templates = TaskTemplateRepository(db)
        self.tasks = TaskRepository(db)
        self.training_modules = TrainingModuleRepository(db)
        self.training_assignments = TrainingAssignmentRepository(db)
        self.documents = DriverDocumentRepository(db)
        self.photos = VehiclePhotoRepository(db)
        self.dispo_forms = DispoFormRepository(db)
