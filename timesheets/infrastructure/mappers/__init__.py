"""
Mappers between domain entities, ORM rows and raw records.
"""

from .employee_mapper import EmployeeMapper
from .project_mapper import ProjectMapper
from .time_entry_mapper import TimeEntryMapper

__all__ = [
    "EmployeeMapper",
    "ProjectMapper",
    "TimeEntryMapper",
]
