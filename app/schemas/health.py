# app/schemas/health.py
from datetime import datetime

from pydantic import BaseModel


class HealthOut(BaseModel):
    status: str
    service: str
    now: datetime
    database: str
