# app/schemas/auth.py
from app.schemas.base import CamelModel
from app.schemas.user import UserOut


class LoginRequest(CamelModel):
    username: str
    password: str


class LoginResponse(CamelModel):
    access_token: str
    user: UserOut
