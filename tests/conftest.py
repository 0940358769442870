"""
Shared pytest fixtures.
"""

import pytest

from timesheets.infrastructure.db.database import build_engine, build_session_factory, create_all_tables


@pytest.fixture
def db_session():
    """Session bound to a fresh in-memory SQLite database."""
    engine = build_engine("sqlite:///:memory:")
    create_all_tables(engine)
    session = build_session_factory(engine)()
    try:
        yield session
    finally:
        session.close()
        engine.dispose()
