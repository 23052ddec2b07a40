# app/models/user.py
"""
Users table: seeded at startup, immutable afterwards.
A user's id doubles as its access token (see identity_service).
"""

import enum

from sqlalchemy import Column, Integer, String
from app.database import Base


class Role(str, enum.Enum):
    ADMIN = "admin"
    DISPATCHER = "dispatcher"
    DRIVER = "driver"


class User(Base):
    __tablename__ = "users"

    seq = Column(Integer, primary_key=True, autoincrement=True)
    id = Column(String(64), unique=True, nullable=False, index=True)
    username = Column(String(100), unique=True, nullable=False)
    password = Column(String(200), nullable=False)
    name = Column(String(200), nullable=False)
    role = Column(String(20), nullable=False, index=True)  # admin | dispatcher | driver

    def __repr__(self):
        return f"<User {self.id} username={self.username} role={self.role}>"
