# app/routers/tasks.py
"""
Task workflow endpoints.
POST  /tasks                  : assign (admin, dispatcher)
POST  /tasks/{task_id}/submit : driver submits documents
PATCH /tasks/{task_id}/review : admin approves or requests resubmission
"""

from typing import Optional

from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session
from app.database import get_db
from app.routers.deps import get_token
from app.schemas.task import TaskAssign, TaskDetailOut, TaskOut, TaskReview, TaskSubmit, TaskWithTemplateOut
from app.services import task_service

router = APIRouter()


@router.get("/tasks/my", response_model=list[TaskWithTemplateOut], summary="Driver's own tasks")
def list_my_tasks(token: Optional[str] = Depends(get_token), db: Session = Depends(get_db)):
    return task_service.list_my_tasks(db, token)


@router.get("/tasks/assigned", response_model=list[TaskDetailOut], summary="All tasks with template and driver")
def list_assigned_tasks(token: Optional[str] = Depends(get_token), db: Session = Depends(get_db)):
    return task_service.list_assigned_tasks(db, token)


@router.get("/tasks/review-queue", response_model=list[TaskDetailOut], summary="Submitted tasks awaiting review")
def list_task_review_queue(token: Optional[str] = Depends(get_token), db: Session = Depends(get_db)):
    return task_service.list_task_review_queue(db, token)


@router.post("/tasks", response_model=TaskOut, status_code=status.HTTP_201_CREATED,
             summary="Assign a template to a driver")
def assign_task(body: TaskAssign, token: Optional[str] = Depends(get_token), db: Session = Depends(get_db)):
    return task_service.assign_task(db, token, body)


@router.post("/tasks/{task_id}/submit", response_model=TaskWithTemplateOut, summary="Submit task documents")
def submit_task(task_id: str, body: TaskSubmit, token: Optional[str] = Depends(get_token),
                db: Session = Depends(get_db)):
    return task_service.submit_task(db, token, task_id, body)


@router.patch("/tasks/{task_id}/review", response_model=TaskWithTemplateOut, summary="Review a task")
def review_task(task_id: str, body: TaskReview, token: Optional[str] = Depends(get_token),
                db: Session = Depends(get_db)):
    return task_service.review_task(db, token, task_id, body)
