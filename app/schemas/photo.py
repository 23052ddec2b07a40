# app/schemas/photo.py
from datetime import datetime
from typing import Optional

from app.schemas.base import CamelModel


class PhotoUpload(CamelModel):
    category: str
    file_name: str
    notes: Optional[str] = None


class VehiclePhotoOut(CamelModel):
    id: str
    driver_id: str
    category: str
    file_name: str
    notes: Optional[str] = None
    uploaded_at: datetime
