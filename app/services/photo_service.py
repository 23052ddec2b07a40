# app/services/photo_service.py
"""Vehicle photo uploads. No review lifecycle; same visibility rule as documents."""

from typing import Optional

from sqlalchemy.orm import Session

from app.database import serialized
from app.models.common import make_id, utcnow
from app.models.vehicle_photo import VehiclePhoto
from app.schemas.photo import PhotoUpload, VehiclePhotoOut
from app.services.authorization import DRIVER_ONLY, is_driver, require_role
from app.services.identity_service import resolve_identity
from app.services.repositories import Store
from app.utils.logger import get_logger

logger = get_logger(__name__)


def upload_photo(db: Session, token: Optional[str], payload: PhotoUpload) -> VehiclePhotoOut:
    with serialized(db):
        store = Store(db)
        user = require_role(resolve_identity(store, token), DRIVER_ONLY)

        photo = store.photos.add(VehiclePhoto(
            id=make_id("photo"),
            driver_id=user.id,
            category=payload.category,
            file_name=payload.file_name,
            notes=payload.notes,
            uploaded_at=utcnow(),
        ))
        logger.info(f"[PHOTO] {photo.id} ({photo.category}) uploaded by {user.id}")
        return VehiclePhotoOut.model_validate(photo)


def list_photos(db: Session, token: Optional[str]) -> list[VehiclePhotoOut]:
    with serialized(db):
        store = Store(db)
        user = resolve_identity(store, token)
        rows = store.photos.list(driver_id=user.id) if is_driver(user) else store.photos.list()
        return [VehiclePhotoOut.model_validate(p) for p in rows]
