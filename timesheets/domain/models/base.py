"""
Base entity and domain exceptions for the domain layer.
This module contains the foundational classes for all domain entities.
"""

from datetime import datetime, timezone
from typing import Optional, Any, List
from abc import ABC
from dataclasses import dataclass, field


def utc_now() -> datetime:
    """Current time as a timezone-aware UTC datetime."""
    return datetime.now(timezone.utc)


@dataclass
class BaseEntity(ABC):
    """
    Base class for all domain entities.
    Provides common attributes and behavior for all entities.
    """

    id: Optional[Any] = None
    created_at: datetime = field(default_factory=utc_now)
    updated_at: datetime = field(default_factory=utc_now)

    def __post_init__(self):
        """Initialize entity after creation."""
        if self.created_at is None:
            self.created_at = utc_now()
        if self.updated_at is None:
            self.updated_at = utc_now()

    def __eq__(self, other: Any) -> bool:
        """Entities are equal if they have the same ID and are of the same type."""
        if not isinstance(other, self.__class__):
            return False
        if self.is_new or other.is_new:
            return self is other
        return self.id == other.id

    def __hash__(self) -> int:
        """Hash based on entity ID."""
        if self.is_new:
            return hash(id(self))
        return hash((self.__class__.__name__, self.id))

    def mark_as_updated(self) -> None:
        """Update the updated_at timestamp."""
        self.updated_at = utc_now()

    @property
    def is_new(self) -> bool:
        """Check if entity is new (not persisted). Zero counts as unset."""
        return not self.id


class DomainException(Exception):
    """Base exception for domain errors."""

    def __init__(self, message: str, code: Optional[str] = None):
        self.message = message
        self.code = code or self.__class__.__name__
        super().__init__(self.message)


class ValidationError(DomainException):
    """Exception raised when entity validation fails."""

    def __init__(
        self,
        message: str,
        field: Optional[str] = None,
        errors: Optional[List[str]] = None
    ):
        super().__init__(message, "VALIDATION_ERROR")
        self.field = field
        self.errors = list(errors) if errors else [message]


class InvalidEntryError(ValidationError):
    """Raised when a single time entry fails validation during a transition."""

    def __init__(self, errors: List[str]):
        super().__init__(f"Cannot submit invalid time entry: {', '.join(errors)}", errors=errors)


class BusinessRuleViolation(DomainException):
    """Exception raised when a business rule is violated."""

    def __init__(self, message: str, code: str = "BUSINESS_RULE_VIOLATION"):
        super().__init__(message, code)


class InvalidTransitionError(BusinessRuleViolation):
    """Raised when a status change is not allowed from the current status."""

    def __init__(self, current: str, target: str):
        super().__init__(
            f"Cannot change time entry status from '{current}' to '{target}'",
            "INVALID_TRANSITION"
        )
        self.current = current
        self.target = target


class AlreadySubmittedError(BusinessRuleViolation):
    """Raised when submitting something that is already submitted."""

    def __init__(self, message: str = "Time entry has already been submitted"):
        super().__init__(message, "ALREADY_SUBMITTED")


class NotAllSubmittedError(BusinessRuleViolation):
    """Raised when approving a week that still has unsubmitted entries."""

    def __init__(self, message: str = "Cannot approve timesheet with unsubmitted entries"):
        super().__init__(message, "NOT_ALL_SUBMITTED")


class InactiveEmployeeError(BusinessRuleViolation):
    """Raised when an inactive employee tries to submit a timesheet."""

    def __init__(self, employee_id: str):
        super().__init__("Inactive employees cannot submit timesheets", "INACTIVE_EMPLOYEE")
        self.employee_id = employee_id


class NoEntriesError(BusinessRuleViolation):
    """Raised when a week holds no time entries."""

    def __init__(self, message: str = "No time entries found for the specified week"):
        super().__init__(message, "NO_ENTRIES")


class InvalidInputError(DomainException):
    """Raised when a timestamp or other raw input cannot be parsed."""

    def __init__(self, message: str, field: Optional[str] = None):
        super().__init__(message, "INVALID_INPUT")
        self.field = field


class NegativeDurationError(DomainException):
    """Raised when an end timestamp is not after its start timestamp."""

    def __init__(self, message: str = "End time must be after start time"):
        super().__init__(message, "NEGATIVE_DURATION")


class EntityNotFoundError(DomainException):
    """Exception raised when an entity is not found."""

    def __init__(self, entity_type: str, entity_id: Any):
        message = f"{entity_type} with ID {entity_id} not found"
        super().__init__(message, "NOT_FOUND")
        self.entity_type = entity_type
        self.entity_id = entity_id


class RepositoryError(DomainException):
    """Storage failure wrapped with the operation and identifier involved."""

    def __init__(self, operation: str, identifier: Any, cause: Optional[BaseException] = None):
        message = f"Repository operation '{operation}' failed for {identifier}"
        if cause is not None:
            message = f"{message}: {cause}"
        super().__init__(message, "REPOSITORY_ERROR")
        self.operation = operation
        self.identifier = identifier


class ReportTimeoutError(DomainException):
    """Raised when report generation exceeds its timeout."""

    def __init__(self, report: str, timeout_seconds: float):
        super().__init__(
            f"Report '{report}' did not finish within {timeout_seconds} seconds",
            "REPORT_TIMEOUT"
        )
        self.timeout_seconds = timeout_seconds
