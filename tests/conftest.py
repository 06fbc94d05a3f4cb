"""Pytest configuration and shared fixtures."""

from typing import Generator

import pytest
from sqlalchemy import create_engine
from sqlalchemy.engine import Engine
from sqlalchemy.pool import StaticPool

from usergroups.core.database import build_session_factory, create_tables, drop_tables
from usergroups.models import User
from usergroups.services import GroupsService


@pytest.fixture
def engine() -> Generator[Engine, None, None]:
    """In-memory SQLite engine shared by every session of a test."""
    engine = create_engine(
        "sqlite:///:memory:",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    create_tables(engine)
    yield engine
    drop_tables(engine)
    engine.dispose()


@pytest.fixture
def session_factory(engine):
    return build_session_factory(engine)


@pytest.fixture
def groups_service(session_factory) -> GroupsService:
    return GroupsService(session_factory)


@pytest.fixture
def make_user(session_factory):
    """Insert a user and return its id."""

    def _make_user(login: str = "alice", age: int = 30) -> int:
        with session_factory() as db:
            user = User(login=login, age=age)
            db.add(user)
            db.commit()
            return user.id

    return _make_user


@pytest.fixture
def make_group(groups_service):
    """Create a group through the service and return its id."""

    def _make_group(name: str = "Admins", permissions=None) -> int:
        result = groups_service.add({"name": name, "permissions": permissions or ["READ"]})
        assert result.success
        return result.data["id"]

    return _make_group
