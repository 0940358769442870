"""
Repository interfaces for the domain layer.
This module exports all repository interfaces (ports) for dependency injection.
"""

from .employee_repository import EmployeeRepository
from .project_repository import ProjectRepository
from .time_entry_repository import TimeEntryRepository, WeekAnchor

__all__ = [
    "EmployeeRepository",
    "ProjectRepository",
    "TimeEntryRepository",
    "WeekAnchor",
]
