# app/routers/task_templates.py
"""Task template catalog endpoints."""

from typing import Optional

from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session
from app.database import get_db
from app.routers.deps import get_token
from app.schemas.task_template import TaskTemplateCreate, TaskTemplateOut
from app.services import catalog_service

router = APIRouter()


@router.post("/task-templates", response_model=TaskTemplateOut, status_code=status.HTTP_201_CREATED,
             summary="Create a task template (admin)")
def create_task_template(body: TaskTemplateCreate, token: Optional[str] = Depends(get_token),
                         db: Session = Depends(get_db)):
    """At least one required document must be supplied."""
    return catalog_service.create_task_template(db, token, body)


@router.get("/task-templates", response_model=list[TaskTemplateOut], summary="List task templates, newest first")
def list_task_templates(token: Optional[str] = Depends(get_token), db: Session = Depends(get_db)):
    return catalog_service.list_task_templates(db, token)
