# app/routers/auth.py
"""Login and current-user endpoints."""

from typing import Optional

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session
from app.database import get_db
from app.routers.deps import get_token
from app.schemas.auth import LoginRequest, LoginResponse
from app.schemas.user import UserOut
from app.services import identity_service

router = APIRouter()


@router.post("/auth/login", response_model=LoginResponse, summary="Exchange credentials for an access token")
def login(body: LoginRequest, db: Session = Depends(get_db)):
    return identity_service.login(db, body.username, body.password)


@router.get("/me", response_model=UserOut, summary="Current user")
def get_me(token: Optional[str] = Depends(get_token), db: Session = Depends(get_db)):
    return identity_service.get_me(db, token)
