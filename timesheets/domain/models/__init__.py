"""
Domain models for the timesheet tracker.
This module exports all domain entities and value objects.
"""

# Base classes
from .base import (
    BaseEntity,
    DomainException,
    ValidationError,
    InvalidEntryError,
    BusinessRuleViolation,
    InvalidTransitionError,
    AlreadySubmittedError,
    NotAllSubmittedError,
    InactiveEmployeeError,
    NoEntriesError,
    InvalidInputError,
    NegativeDurationError,
    EntityNotFoundError,
    RepositoryError,
    ReportTimeoutError,
    utc_now
)

# Value Objects
from .value_objects import (
    WeekRange,
    ReportPeriod,
    parse_timestamp,
    parse_date
)

# Domain entities
from .employee import Employee
from .project import Project, ProjectStatus
from .time_entry import TimeEntry, TimeEntryStatus, resolve_week_status


__all__ = [
    # Base
    "BaseEntity",
    "DomainException",
    "ValidationError",
    "InvalidEntryError",
    "BusinessRuleViolation",
    "InvalidTransitionError",
    "AlreadySubmittedError",
    "NotAllSubmittedError",
    "InactiveEmployeeError",
    "NoEntriesError",
    "InvalidInputError",
    "NegativeDurationError",
    "EntityNotFoundError",
    "RepositoryError",
    "ReportTimeoutError",
    "utc_now",

    # Value Objects
    "WeekRange",
    "ReportPeriod",
    "parse_timestamp",
    "parse_date",

    # Entities
    "Employee",
    "Project",
    "ProjectStatus",
    "TimeEntry",
    "TimeEntryStatus",
    "resolve_week_status",
]
