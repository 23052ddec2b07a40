# app/schemas/user.py
from app.schemas.base import CamelModel


class UserOut(CamelModel):
    id: str
    username: str
    name: str
    role: str
