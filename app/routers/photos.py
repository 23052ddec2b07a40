# app/routers/photos.py
from typing import Optional

from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session
from app.database import get_db
from app.routers.deps import get_token
from app.schemas.photo import PhotoUpload, VehiclePhotoOut
from app.services import photo_service

router = APIRouter()


@router.post("/photos", response_model=VehiclePhotoOut, status_code=status.HTTP_201_CREATED,
             summary="Upload a vehicle photo")
def upload_photo(body: PhotoUpload, token: Optional[str] = Depends(get_token), db: Session = Depends(get_db)):
    return photo_service.upload_photo(db, token, body)


@router.get("/photos", response_model=list[VehiclePhotoOut], summary="Photos: drivers see their own, staff see all")
def list_photos(token: Optional[str] = Depends(get_token), db: Session = Depends(get_db)):
    return photo_service.list_photos(db, token)
