# app/routers/dispo_forms.py
"""
Dispo form endpoints.
Driver drafts → dispatcher signs (status becomes "submitted") → admin approves or rejects.
"""

from typing import Optional

from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session
from app.database import get_db
from app.routers.deps import get_token
from app.schemas.dispo_form import DispoFormCreate, DispoFormOut, DispoFormReview
from app.services import dispo_form_service

router = APIRouter()


@router.post("/dispo-forms", response_model=DispoFormOut, status_code=status.HTTP_201_CREATED,
             summary="Create a draft dispo form")
def create_dispo_form(body: DispoFormCreate, token: Optional[str] = Depends(get_token),
                      db: Session = Depends(get_db)):
    return dispo_form_service.create_dispo_form(db, token, body)


@router.get("/dispo-forms", response_model=list[DispoFormOut],
            summary="Dispo forms: drivers see their own, staff see all")
def list_dispo_forms(token: Optional[str] = Depends(get_token), db: Session = Depends(get_db)):
    return dispo_form_service.list_dispo_forms(db, token)


@router.patch("/dispo-forms/{form_id}/sign-dispatcher", response_model=DispoFormOut,
              summary="Dispatcher sign-off")
def sign_dispo_form(form_id: str, token: Optional[str] = Depends(get_token), db: Session = Depends(get_db)):
    return dispo_form_service.sign_dispo_form(db, token, form_id)


@router.patch("/dispo-forms/{form_id}/review", response_model=DispoFormOut, summary="Admin review")
def review_dispo_form(form_id: str, body: DispoFormReview, token: Optional[str] = Depends(get_token),
                      db: Session = Depends(get_db)):
    return dispo_form_service.review_dispo_form(db, token, form_id, body)
