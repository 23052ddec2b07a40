"""Unit tests for the dispo form workflow."""

import pytest
from app.schemas.dispo_form import DispoFormCreate, DispoFormReview
from app.services import dispo_form_service
from app.services.errors import NotFound
from conftest import ADMIN, DISPATCHER, DRIVER, OTHER_DISPATCHER, OTHER_DRIVER


def draft(db, token=DRIVER, title="Route Berlin–Hamburg"):
    return dispo_form_service.create_dispo_form(db, token, DispoFormCreate(title=title, details="Pallets: 12"))


class TestDispoFormLifecycle:
    def test_create_is_draft(self, db):
        form = draft(db)
        assert form.status == "draft"
        assert form.driver_id == DRIVER
        assert form.dispatcher_id is None

    def test_sign_moves_to_submitted(self, db):
        form = draft(db)
        signed = dispo_form_service.sign_dispo_form(db, DISPATCHER, form.id)
        assert signed.status == "submitted"
        assert signed.dispatcher_id == DISPATCHER
        assert signed.dispatcher_signed_at is not None

    def test_resign_overwrites_dispatcher_and_time(self, extra_users):
        db = extra_users
        form = draft(db)
        first = dispo_form_service.sign_dispo_form(db, DISPATCHER, form.id)
        second = dispo_form_service.sign_dispo_form(db, OTHER_DISPATCHER, form.id)
        assert second.status == "submitted"
        assert second.dispatcher_id == OTHER_DISPATCHER
        assert second.dispatcher_signed_at >= first.dispatcher_signed_at

    def test_sign_after_approval_is_accepted(self, db):
        form = draft(db)
        dispo_form_service.review_dispo_form(db, ADMIN, form.id, DispoFormReview(decision="approved"))
        signed = dispo_form_service.sign_dispo_form(db, DISPATCHER, form.id)
        assert signed.status == "submitted"

    def test_review_without_signature_is_accepted(self, db):
        form = draft(db)
        reviewed = dispo_form_service.review_dispo_form(
            db, ADMIN, form.id, DispoFormReview(decision="rejected", comment="Missing pallet count")
        )
        assert reviewed.status == "rejected"
        assert reviewed.admin_reviewed_by == ADMIN
        assert reviewed.admin_review_comment == "Missing pallet count"

    def test_unknown_form_is_not_found(self, db):
        with pytest.raises(NotFound):
            dispo_form_service.sign_dispo_form(db, DISPATCHER, "df_missing")
        with pytest.raises(NotFound):
            dispo_form_service.review_dispo_form(db, ADMIN, "df_missing", DispoFormReview(decision="approved"))


class TestDispoFormVisibility:
    def test_driver_sees_own_staff_see_all(self, extra_users):
        db = extra_users
        a = draft(db, DRIVER)
        b = draft(db, OTHER_DRIVER)
        assert [f.id for f in dispo_form_service.list_dispo_forms(db, DRIVER)] == [a.id]
        assert [f.id for f in dispo_form_service.list_dispo_forms(db, ADMIN)] == [b.id, a.id]
        assert [f.id for f in dispo_form_service.list_dispo_forms(db, DISPATCHER)] == [b.id, a.id]
