# app/schemas/task_template.py
from datetime import datetime
from typing import List

from app.schemas.base import CamelModel


class RequiredDocumentIn(CamelModel):
    title: str
    description: str = ""
    type: str


class TaskTemplateCreate(CamelModel):
    title: str
    description: str = ""
    required_documents: List[RequiredDocumentIn] = []


class RequiredDocumentOut(CamelModel):
    id: str
    title: str
    description: str
    type: str


class TaskTemplateOut(CamelModel):
    id: str
    title: str
    description: str
    required_documents: List[RequiredDocumentOut]
    created_by: str
    created_at: datetime
