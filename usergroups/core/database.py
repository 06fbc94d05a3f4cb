"""
Database configuration and setup for SQLAlchemy.

This module handles database connection management, session creation,
and the explicit schema sync step. Nothing here runs implicitly when a
service is constructed: tables are created only when `create_tables` is called.
"""

from typing import Optional

from sqlalchemy import create_engine
from sqlalchemy.engine import Engine
from sqlalchemy.orm import declarative_base, sessionmaker

from usergroups.config.settings import settings


def build_engine(database_url: str, echo: bool = False) -> Engine:
    """
    Create a SQLAlchemy engine for the given database URL.
    
    For SQLite, check_same_thread=False is set so sessions may be used
    from threads other than the one that opened the connection.
    """
    connect_args = {"check_same_thread": False} if "sqlite" in database_url else {}
    return create_engine(database_url, connect_args=connect_args, echo=echo)


def build_session_factory(bind: Engine) -> sessionmaker:
    """
    Create a session factory bound to an engine.
    
    Objects stay readable after commit so services can serialize
    results once the session is gone.
    """
    return sessionmaker(autoflush=False, expire_on_commit=False, bind=bind)


# Create SQLAlchemy engine
engine = build_engine(settings.database_url, echo=settings.debug)

# Each SessionLocal() call is a new database session
SessionLocal = build_session_factory(engine)

# Base class for all SQLAlchemy models
Base = declarative_base()


def create_tables(bind: Optional[Engine] = None) -> None:
    """
    Create all database tables.
    
    Idempotent: tables that already exist are left untouched.
    """
    # Models must be imported so they are registered on Base.metadata
    import usergroups.models  # noqa: F401

    Base.metadata.create_all(bind=bind or engine)


def drop_tables(bind: Optional[Engine] = None) -> None:
    """
    Drop all database tables.
    
    Useful for testing or resetting the database.
    """
    import usergroups.models  # noqa: F401

    Base.metadata.drop_all(bind=bind or engine)
