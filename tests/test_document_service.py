"""Unit tests for driver documents and vehicle photos."""

import pytest
from app.schemas.document import DocumentReview, DocumentUpload
from app.schemas.photo import PhotoUpload
from app.services import document_service, photo_service
from app.services.document_service import stored_status_for
from app.services.errors import NotFound
from conftest import ADMIN, DISPATCHER, DRIVER, OTHER_DRIVER


def upload(db, token=DRIVER, file_name="licence.pdf"):
    return document_service.upload_document(db, token, DocumentUpload(type="licence", file_name=file_name))


class TestUploadDocument:
    def test_upload_is_pending_and_owned_by_caller(self, db):
        doc = upload(db)
        assert doc.status == "pending"
        assert doc.driver_id == DRIVER
        assert doc.id.startswith("doc_")
        assert doc.uploaded_at is not None


class TestReviewDocument:
    @pytest.mark.parametrize("decision,stored", [
        ("approved", "approved"),
        ("rejected", "rejected"),
        ("needs_resubmission", "rejected"),
    ])
    def test_decision_mapping(self, db, decision, stored):
        doc = upload(db)
        result = document_service.review_document(
            db, ADMIN, doc.id, DocumentReview(decision=decision, comment="checked")
        )
        assert result.status == stored
        assert result.reviewed_by == ADMIN
        assert result.review_comment == "checked"

    def test_needs_resubmission_collapses_to_rejected(self):
        assert stored_status_for("needs_resubmission") == stored_status_for("rejected")

    def test_unknown_document_is_not_found(self, db):
        with pytest.raises(NotFound):
            document_service.review_document(db, ADMIN, "doc_missing", DocumentReview(decision="approved"))


class TestDocumentVisibility:
    def test_driver_sees_own_staff_see_all_newest_first(self, extra_users):
        db = extra_users
        a = upload(db, DRIVER, "a.pdf")
        b = upload(db, OTHER_DRIVER, "b.pdf")
        c = upload(db, DRIVER, "c.pdf")

        assert [d.id for d in document_service.list_documents(db, DRIVER)] == [c.id, a.id]
        assert [d.id for d in document_service.list_documents(db, OTHER_DRIVER)] == [b.id]
        for token in (ADMIN, DISPATCHER):
            assert [d.id for d in document_service.list_documents(db, token)] == [c.id, b.id, a.id]


class TestPhotos:
    def test_upload_and_visibility(self, extra_users):
        db = extra_users
        mine = photo_service.upload_photo(db, DRIVER, PhotoUpload(category="front", file_name="f.jpg", notes="dent"))
        theirs = photo_service.upload_photo(db, OTHER_DRIVER, PhotoUpload(category="rear", file_name="r.jpg"))

        assert mine.id.startswith("photo_")
        assert mine.notes == "dent"
        assert [p.id for p in photo_service.list_photos(db, DRIVER)] == [mine.id]
        assert [p.id for p in photo_service.list_photos(db, DISPATCHER)] == [theirs.id, mine.id]
