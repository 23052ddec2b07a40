# app/routers/health.py
"""
Service health check.
Returns status of the API and whether the store answers a trivial query.
"""

from fastapi import APIRouter, Depends
from sqlalchemy import text
from sqlalchemy.orm import Session
from app.config import settings
from app.database import get_db, serialized
from app.models.common import utcnow
from app.schemas.health import HealthOut
from app.utils.logger import get_logger

router = APIRouter()
logger = get_logger(__name__)


@router.get("/health", response_model=HealthOut, summary="Service health check")
def health_check(db: Session = Depends(get_db)):
    result = {
        "status": "ok",
        "service": settings.APP_NAME,
        "now": utcnow(),
        "database": "unknown",
    }

    # Under the store lock so the query never shares the connection with an open write
    with serialized(db):
        try:
            db.execute(text("SELECT 1"))
            result["database"] = "ok"
        except Exception as e:
            db.rollback()
            logger.error(f"Health check: store unreachable: {e}")
            result["database"] = f"error: {str(e)}"
            result["status"] = "degraded"

    return result
