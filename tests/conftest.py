"""Pytest bootstrap and shared fixtures."""

from datetime import datetime, timedelta
from pathlib import Path
import sys

# Ensure project root is on sys.path so `import socialnet` works without install
PROJECT_ROOT = Path(__file__).resolve().parents[1]
project_root_str = str(PROJECT_ROOT)
if project_root_str not in sys.path:
    sys.path.insert(0, project_root_str)

import pytest
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from socialnet import models  # noqa: F401
from socialnet.crud import user as user_crud
from socialnet.database import Base
from socialnet.models.user import User
from socialnet.services.messaging_service import MessagingService
from socialnet.services.notification_service import NotificationEngine
from socialnet.services.user_directory import SqlUserDirectory


class FakeClock:
    """Manually advanced clock for window tests."""

    def __init__(self, start=None):
        self.now = start or datetime(2026, 1, 1, 12, 0, 0)

    def __call__(self):
        return self.now

    def advance(self, **kwargs):
        self.now = self.now + timedelta(**kwargs)
        return self.now


class RecordingAssetStore:
    def __init__(self, fail=False):
        self.deleted = []
        self.fail = fail

    def delete_by_path(self, path):
        self.deleted.append(path)
        if self.fail:
            raise OSError("storage unavailable")


@pytest.fixture
def db_engine():
    engine = create_engine(
        "sqlite:///:memory:",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    Base.metadata.create_all(engine)
    yield engine
    engine.dispose()


@pytest.fixture
def db_session(db_engine):
    SessionLocal = sessionmaker(bind=db_engine, autoflush=False)
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()


def _create_user(db, user_id: int, username: str) -> User:
    return user_crud.create_user(
        db,
        user_id=user_id,
        username=username,
        email=f"{username}@test.dev",
        display_name=username.title(),
    )


@pytest.fixture
def users(db_session):
    """Three users: alice (1), bob (2), carol (3)."""
    return {
        "alice": _create_user(db_session, 1, "alice"),
        "bob": _create_user(db_session, 2, "bob"),
        "carol": _create_user(db_session, 3, "carol"),
    }


@pytest.fixture
def clock():
    return FakeClock()


@pytest.fixture
def assets():
    return RecordingAssetStore()


@pytest.fixture
def notifications(db_session, clock):
    return NotificationEngine(db_session, clock=clock)


@pytest.fixture
def messaging(db_session, users, assets, notifications, clock):
    return MessagingService(
        db_session,
        users=SqlUserDirectory(db_session),
        assets=assets,
        notifier=notifications,
        clock=clock,
    )


@pytest.fixture
def failing_assets():
    return RecordingAssetStore(fail=True)
