"""
Database package: engine, sessions and ORM models.
"""

from .database import (
    Base,
    build_engine,
    build_session_factory,
    create_all_tables,
    drop_all_tables
)

__all__ = [
    "Base",
    "build_engine",
    "build_session_factory",
    "create_all_tables",
    "drop_all_tables",
]
