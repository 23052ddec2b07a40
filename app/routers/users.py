# app/routers/users.py
from typing import Optional

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session
from app.database import get_db
from app.routers.deps import get_token
from app.schemas.user import UserOut
from app.services import identity_service

router = APIRouter()


@router.get("/users", response_model=list[UserOut], summary="All users (admin, dispatcher)")
def list_users(token: Optional[str] = Depends(get_token), db: Session = Depends(get_db)):
    return identity_service.list_users(db, token)
