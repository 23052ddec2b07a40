"""Shared fixtures: a fresh, seeded in-memory store per test."""

import sys
import os
sys.path.insert(0, os.path.join(os.path.dirname(__file__), ".."))

import pytest
import pytest_asyncio
import httpx
from sqlalchemy.orm import sessionmaker

from app.database import build_engine, create_tables, get_db
from app.models.user import Role, User
from app.services.seed_service import seed_store

ADMIN = "u_admin_1"
DISPATCHER = "u_dispatch_1"
DRIVER = "u_driver_1"
OTHER_DRIVER = "u_driver_2"
OTHER_DISPATCHER = "u_dispatch_2"


@pytest.fixture
def db():
    engine = build_engine("sqlite://")
    create_tables(bind=engine)
    session = sessionmaker(bind=engine, autoflush=False, expire_on_commit=False)()
    seed_store(session)
    yield session
    session.close()
    engine.dispose()


@pytest.fixture
def extra_users(db):
    """A second driver and a second dispatcher on top of the seed users."""
    db.add(User(id=OTHER_DRIVER, username="driver2", password="driver234",
                name="Driver Two", role=Role.DRIVER.value))
    db.add(User(id=OTHER_DISPATCHER, username="dispatcher2", password="dispatcher234",
                name="Night Dispatcher", role=Role.DISPATCHER.value))
    db.commit()
    return db


@pytest_asyncio.fixture
async def client(db):
    from app.main import app

    def override_get_db():
        yield db

    app.dependency_overrides[get_db] = override_get_db
    transport = httpx.ASGITransport(app=app)
    async with httpx.AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac
    app.dependency_overrides.clear()


def bearer(token: str) -> dict:
    return {"Authorization": f"Bearer {token}"}
