# app/schemas/training.py
from datetime import datetime
from typing import Optional

from app.schemas.base import CamelModel
from app.schemas.user import UserOut


class TrainingModuleOut(CamelModel):
    id: str
    title: str
    content: str


class TrainingAssignmentOut(CamelModel):
    id: str
    module_id: str
    driver_id: str
    assigned_by: str
    confirmed_at: Optional[datetime] = None


class TrainingAssignmentWithModuleOut(TrainingAssignmentOut):
    module: Optional[TrainingModuleOut] = None


class TrainingProgressOut(TrainingAssignmentWithModuleOut):
    driver: Optional[UserOut] = None
