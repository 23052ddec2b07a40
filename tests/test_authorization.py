"""
Role gate ordering: a caller with the wrong role gets Forbidden even when the
target entity does not exist, so existence is never leaked.
"""

import pytest
from app.schemas.document import DocumentReview, DocumentUpload
from app.schemas.dispo_form import DispoFormCreate, DispoFormReview
from app.schemas.photo import PhotoUpload
from app.schemas.task import TaskAssign, TaskReview, TaskSubmit
from app.schemas.task_template import TaskTemplateCreate
from app.services import (
    catalog_service, document_service, dispo_form_service, identity_service,
    photo_service, task_service, training_service,
)
from app.services.authorization import require_role, ADMIN_ONLY, STAFF
from app.services.errors import Forbidden
from app.services.repositories import Store
from conftest import ADMIN, DISPATCHER, DRIVER

MISSING = "does_not_exist"

# (operation, roles that must be rejected)
GATED_OPERATIONS = [
    (lambda db, t: identity_service.list_users(db, t), [DRIVER]),
    (lambda db, t: catalog_service.create_task_template(
        db, t, TaskTemplateCreate(title="x", required_documents=[])), [DISPATCHER, DRIVER]),
    (lambda db, t: catalog_service.list_task_templates(db, t), [DRIVER]),
    (lambda db, t: task_service.assign_task(
        db, t, TaskAssign(template_id=MISSING, due_date="2026-01-01", driver_id=MISSING)), [DRIVER]),
    (lambda db, t: task_service.list_my_tasks(db, t), [ADMIN, DISPATCHER]),
    (lambda db, t: task_service.list_assigned_tasks(db, t), [DRIVER]),
    (lambda db, t: task_service.list_task_review_queue(db, t), [DISPATCHER, DRIVER]),
    (lambda db, t: task_service.submit_task(db, t, MISSING, TaskSubmit()), [ADMIN, DISPATCHER]),
    (lambda db, t: task_service.review_task(
        db, t, MISSING, TaskReview(decision="approved")), [DISPATCHER, DRIVER]),
    (lambda db, t: training_service.list_my_training(db, t), [ADMIN, DISPATCHER]),
    (lambda db, t: training_service.list_training_progress(db, t), [DRIVER]),
    (lambda db, t: training_service.confirm_training(db, t, MISSING), [ADMIN, DISPATCHER]),
    (lambda db, t: document_service.upload_document(
        db, t, DocumentUpload(type="licence", file_name="a.pdf")), [ADMIN, DISPATCHER]),
    (lambda db, t: document_service.review_document(
        db, t, MISSING, DocumentReview(decision="approved")), [DISPATCHER, DRIVER]),
    (lambda db, t: photo_service.upload_photo(
        db, t, PhotoUpload(category="front", file_name="a.jpg")), [ADMIN, DISPATCHER]),
    (lambda db, t: dispo_form_service.create_dispo_form(
        db, t, DispoFormCreate(title="x", details="y")), [ADMIN, DISPATCHER]),
    (lambda db, t: dispo_form_service.sign_dispo_form(db, t, MISSING), [ADMIN, DRIVER]),
    (lambda db, t: dispo_form_service.review_dispo_form(
        db, t, MISSING, DispoFormReview(decision="approved")), [DISPATCHER, DRIVER]),
]

CASES = [(op, token) for op, tokens in GATED_OPERATIONS for token in tokens]


class TestRequireRole:
    def test_allowed_role_passes_through(self, db):
        admin = Store(db).users.get(ADMIN)
        assert require_role(admin, ADMIN_ONLY) is admin

    def test_disallowed_role_raises(self, db):
        driver = Store(db).users.get(DRIVER)
        with pytest.raises(Forbidden):
            require_role(driver, STAFF)


class TestRoleCheckPrecedesLookup:
    @pytest.mark.parametrize("operation,token", CASES)
    def test_wrong_role_is_forbidden_even_for_missing_entity(self, db, operation, token):
        with pytest.raises(Forbidden):
            operation(db, token)

    def test_forbidden_call_has_no_side_effects(self, db):
        with pytest.raises(Forbidden):
            dispo_form_service.create_dispo_form(db, ADMIN, DispoFormCreate(title="x", details="y"))
        assert dispo_form_service.list_dispo_forms(db, ADMIN) == []
