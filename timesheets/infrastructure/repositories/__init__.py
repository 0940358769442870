"""
SQLAlchemy repository implementations.
"""

from .employee_repository import SQLAlchemyEmployeeRepository
from .project_repository import SQLAlchemyProjectRepository
from .time_entry_repository import SQLAlchemyTimeEntryRepository

__all__ = [
    "SQLAlchemyEmployeeRepository",
    "SQLAlchemyProjectRepository",
    "SQLAlchemyTimeEntryRepository",
]
