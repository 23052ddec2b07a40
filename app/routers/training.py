# app/routers/training.py
from typing import Optional

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session
from app.database import get_db
from app.routers.deps import get_token
from app.schemas.training import TrainingAssignmentOut, TrainingAssignmentWithModuleOut, TrainingProgressOut
from app.services import training_service

router = APIRouter()


@router.get("/training/my", response_model=list[TrainingAssignmentWithModuleOut],
            summary="Driver's training assignments")
def list_my_training(token: Optional[str] = Depends(get_token), db: Session = Depends(get_db)):
    return training_service.list_my_training(db, token)


@router.get("/training/progress", response_model=list[TrainingProgressOut],
            summary="Training progress for all drivers")
def list_training_progress(token: Optional[str] = Depends(get_token), db: Session = Depends(get_db)):
    return training_service.list_training_progress(db, token)


@router.post("/training/{assignment_id}/confirm", response_model=TrainingAssignmentOut,
             summary="Confirm a training assignment")
def confirm_training(assignment_id: str, token: Optional[str] = Depends(get_token),
                     db: Session = Depends(get_db)):
    return training_service.confirm_training(db, token, assignment_id)
