# app/models/__init__.py
# Driver Hub: Store Models
# Import all models here for SQLAlchemy discovery

from app.models.user import User, Role                                      # noqa
from app.models.task_template import TaskTemplate, RequiredDocument         # noqa
from app.models.task import Task, TaskStatus                                # noqa
from app.models.training import TrainingModule, TrainingAssignment         # noqa
from app.models.driver_document import DriverDocument, DocumentStatus       # noqa
from app.models.vehicle_photo import VehiclePhoto                           # noqa
from app.models.dispo_form import DispoForm, DispoFormStatus                # noqa
