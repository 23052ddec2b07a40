# app/services/projections.py
"""
Read-side joins for list views.

Each function takes one record plus the store and returns the response
schema with the referenced template / module / driver attached. Joins are
computed eagerly on every call; a dangling reference yields None rather
than an error. Drivers are always embedded in their public view.
"""

from typing import Optional

from app.models.task import Task
from app.models.training import TrainingAssignment
from app.schemas.task import TaskDetailOut, TaskWithTemplateOut
from app.schemas.task_template import TaskTemplateOut
from app.schemas.training import TrainingAssignmentWithModuleOut, TrainingModuleOut, TrainingProgressOut
from app.schemas.user import UserOut
from app.services.repositories import Store


def _template(store: Store, template_id: str) -> Optional[TaskTemplateOut]:
    template = store.templates.get(template_id)
    return TaskTemplateOut.model_validate(template) if template else None


def _driver(store: Store, driver_id: str) -> Optional[UserOut]:
    driver = store.users.get(driver_id)
    return UserOut.model_validate(driver) if driver else None


def _module(store: Store, module_id: str) -> Optional[TrainingModuleOut]:
    module = store.training_modules.get(module_id)
    return TrainingModuleOut.model_validate(module) if module else None


def task_with_template(store: Store, task: Task) -> TaskWithTemplateOut:
    return TaskWithTemplateOut.model_validate(task).model_copy(
        update={"template": _template(store, task.template_id)}
    )


def task_detail(store: Store, task: Task) -> TaskDetailOut:
    return TaskDetailOut.model_validate(task).model_copy(
        update={
            "template": _template(store, task.template_id),
            "driver": _driver(store, task.driver_id),
        }
    )


def assignment_with_module(store: Store, assignment: TrainingAssignment) -> TrainingAssignmentWithModuleOut:
    return TrainingAssignmentWithModuleOut.model_validate(assignment).model_copy(
        update={"module": _module(store, assignment.module_id)}
    )


def training_progress(store: Store, assignment: TrainingAssignment) -> TrainingProgressOut:
    return TrainingProgressOut.model_validate(assignment).model_copy(
        update={
            "module": _module(store, assignment.module_id),
            "driver": _driver(store, assignment.driver_id),
        }
    )
