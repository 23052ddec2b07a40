# app/routers/documents.py
from typing import Optional

from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session
from app.database import get_db
from app.routers.deps import get_token
from app.schemas.document import DocumentReview, DocumentUpload, DriverDocumentOut
from app.services import document_service

router = APIRouter()


@router.post("/documents", response_model=DriverDocumentOut, status_code=status.HTTP_201_CREATED,
             summary="Upload a driver document")
def upload_document(body: DocumentUpload, token: Optional[str] = Depends(get_token),
                    db: Session = Depends(get_db)):
    return document_service.upload_document(db, token, body)


@router.get("/documents", response_model=list[DriverDocumentOut],
            summary="Documents: drivers see their own, staff see all")
def list_documents(token: Optional[str] = Depends(get_token), db: Session = Depends(get_db)):
    return document_service.list_documents(db, token)


@router.patch("/documents/{document_id}/review", response_model=DriverDocumentOut, summary="Review a document")
def review_document(document_id: str, body: DocumentReview, token: Optional[str] = Depends(get_token),
                    db: Session = Depends(get_db)):
    return document_service.review_document(db, token, document_id, body)
