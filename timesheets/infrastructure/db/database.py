"""
Database configuration and session management.
"""

from typing import Callable

from sqlalchemy import create_engine
from sqlalchemy.engine import Engine
from sqlalchemy.orm import declarative_base, sessionmaker, Session
from sqlalchemy.pool import StaticPool


# Create declarative base
Base = declarative_base()


def build_engine(database_url: str, echo: bool = False) -> Engine:
    """
    Create the SQLAlchemy engine.
    In-memory SQLite shares one connection so every session sees the same data.
    """
    if database_url.startswith("sqlite") and ":memory:" in database_url:
        return create_engine(
            database_url,
            echo=echo,
            connect_args={"check_same_thread": False},
            poolclass=StaticPool,
        )
    return create_engine(database_url, echo=echo)


def build_session_factory(engine: Engine) -> Callable[[], Session]:
    """Create the session factory bound to an engine."""
    return sessionmaker(
        autocommit=False,
        autoflush=False,
        expire_on_commit=False,
        bind=engine,
    )


def create_all_tables(engine: Engine) -> None:
    """Create every table known to the declarative base."""
    # Register models on Base.metadata
    from timesheets.infrastructure.db import models  # noqa: F401
    Base.metadata.create_all(bind=engine)


def drop_all_tables(engine: Engine) -> None:
    from timesheets.infrastructure.db import models  # noqa: F401
    Base.metadata.drop_all(bind=engine)
