# app/database.py
"""
Store connection, session management, and table creation.
Uses SQLAlchemy; the default URL is an in-memory SQLite database shared by
every session through a StaticPool. All models are auto-imported here so
create_tables() creates every table in one call.
"""

import threading
from contextlib import contextmanager

from sqlalchemy import create_engine
from sqlalchemy.orm import declarative_base, sessionmaker
from sqlalchemy.pool import StaticPool
from app.config import settings


def build_engine(url: str):
    """In-memory SQLite needs one shared connection or every session sees an empty DB."""
    if url.startswith("sqlite"):
        kwargs = {"connect_args": {"check_same_thread": False}}
        if url in ("sqlite://", "sqlite:///:memory:"):
            kwargs["poolclass"] = StaticPool
        return create_engine(url, echo=False, **kwargs)
    return create_engine(url, pool_pre_ping=True, echo=False)


engine = build_engine(settings.DATABASE_URL)

SessionLocal = sessionmaker(autocommit=False, autoflush=False, expire_on_commit=False, bind=engine)

Base = declarative_base()

# Single writer at a time: every service operation runs under this lock.
store_lock = threading.RLock()


def close_session(db):
    """
    Close under the store lock. With StaticPool every session shares one connection,
    and returning it to the pool rolls that connection back.
    """
    with store_lock:
        db.close()


def get_db():
    """FastAPI dependency: yields a DB session and closes it after request."""
    db = SessionLocal()
    try:
        yield db
    finally:
        close_session(db)


@contextmanager
def serialized(db):
    """
    Run one store operation under the process-wide lock.
    Commits on success, rolls back on any error so a failed request leaves no partial effects.
    """
    with store_lock:
        try:
            yield db
            db.commit()
        except Exception:
            db.rollback()
            raise


def create_tables(bind=None):
    """
    Creates all tables. Safe to call multiple times.
    Import all models here so SQLAlchemy knows about them.
    """
    from app.models.user import User                                        # noqa
    from app.models.task_template import TaskTemplate, RequiredDocument     # noqa
    from app.models.task import Task                                        # noqa
    from app.models.training import TrainingModule, TrainingAssignment     # noqa
    from app.models.driver_document import DriverDocument                   # noqa
    from app.models.vehicle_photo import VehiclePhoto                       # noqa
    from app.models.dispo_form import DispoForm                             # noqa

    Base.metadata.create_all(bind=bind or engine)
