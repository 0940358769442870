"""
TimeEntry domain model.
Represents a span of work logged by an employee against a project, and the
draft -> submitted -> approved/rejected lifecycle it moves through.
"""

from dataclasses import dataclass
from datetime import datetime
from decimal import Decimal, InvalidOperation
from enum import Enum
from typing import Any, Iterable, Optional, Union, TYPE_CHECKING

from timesheets.domain.models.base import (
    BaseEntity,
    AlreadySubmittedError,
    InvalidEntryError,
    InvalidInputError,
    InvalidTransitionError,
)
from timesheets.domain.models.value_objects import parse_timestamp

if TYPE_CHECKING:
    from timesheets.domain.validators.base import Validator


class TimeEntryStatus(str, Enum):
    """Time entry status."""
    DRAFT = "draft"
    SUBMITTED = "submitted"
    APPROVED = "approved"
    REJECTED = "rejected"

    @classmethod
    def values(cls) -> list:
        return [status.value for status in cls]


def _coerce_timestamp(value: Any) -> Any:
    # Unparseable input is kept as-is so the validator can report it
    if isinstance(value, str) and value.strip():
        try:
            return parse_timestamp(value)
        except InvalidInputError:
            return value
    return value


def _coerce_hours(value: Any) -> Any:
    if value is None or value == "":
        return Decimal("0")
    if isinstance(value, Decimal) or isinstance(value, bool):
        return value
    try:
        return Decimal(str(value))
    except (InvalidOperation, ValueError):
        return value


@dataclass(eq=False)
class TimeEntry(BaseEntity):
    """
    TimeEntry entity.
    billable_hours is stored independently from the elapsed time between
    start_time and end_time; updated_at doubles as the last-modified stamp.
    """

    employee_id: str = ""
    project_id: str = ""
    start_time: Optional[Union[datetime, str]] = None
    end_time: Optional[Union[datetime, str]] = None
    description: str = ""
    billable_hours: Decimal = Decimal("0")
    status: str = TimeEntryStatus.DRAFT.value
    approved_by: Optional[str] = None

    def __post_init__(self):
        """Normalize raw field values after creation."""
        super().__post_init__()
        self.start_time = _coerce_timestamp(self.start_time)
        self.end_time = _coerce_timestamp(self.end_time)
        self.billable_hours = _coerce_hours(self.billable_hours)
        if isinstance(self.status, TimeEntryStatus):
            self.status = self.status.value
        if not self.status:
            self.status = TimeEntryStatus.DRAFT.value
        if self.description is None:
            self.description = ""

    @property
    def is_draft(self) -> bool:
        return self.status == TimeEntryStatus.DRAFT.value

    @property
    def is_submitted(self) -> bool:
        return self.status == TimeEntryStatus.SUBMITTED.value

    @property
    def is_approved(self) -> bool:
        return self.status == TimeEntryStatus.APPROVED.value

    @property
    def is_rejected(self) -> bool:
        return self.status == TimeEntryStatus.REJECTED.value

    def submit(self, validator: "Validator[TimeEntry]") -> None:
        """
        Submit the entry for approval.
        Re-runs the validator first; the status is left unchanged on failure.
        """
        if self.is_submitted:
            raise AlreadySubmittedError()

        result = validator.validate(self)
        if not result.is_valid:
            raise InvalidEntryError(result.errors)

        self.status = TimeEntryStatus.SUBMITTED.value
        self.mark_as_updated()

    def approve(self, approver_id: str) -> None:
        """Approve a submitted entry."""
        if not self.is_submitted:
            raise InvalidTransitionError(self.status, TimeEntryStatus.APPROVED.value)

        self.status = TimeEntryStatus.APPROVED.value
        self.approved_by = approver_id
        self.mark_as_updated()

    def reject(self, reason: str) -> None:
        """Reject a submitted entry, annotating the description with the reason."""
        if not self.is_submitted:
            raise InvalidTransitionError(self.status, TimeEntryStatus.REJECTED.value)
        self.mark_rejected(reason)

    def mark_rejected(self, reason: str) -> None:
        """
        Set the entry to rejected without a status check.
        Used when a whole week is rejected regardless of per-entry status.
        """
        self.description = f"{self.description}\n[REJECTED: {reason}]"
        self.status = TimeEntryStatus.REJECTED.value
        self.approved_by = None
        self.mark_as_updated()

    def snapshot(self) -> dict:
        """Capture the mutable lifecycle state for restoring after a failed write."""
        return {
            "status": self.status,
            "description": self.description,
            "approved_by": self.approved_by,
            "updated_at": self.updated_at,
        }

    def restore(self, state: dict) -> None:
        for key, value in state.items():
            setattr(self, key, value)

    def __str__(self) -> str:
        return f"TimeEntry({self.id}, {self.employee_id}, {self.status})"


def resolve_week_status(entries: Iterable[TimeEntry]) -> str:
    """
    Unified status for a set of entries.
    Precedence: rejected > approved > submitted > draft.
    """
    statuses = [entry.status for entry in entries]
    if not statuses:
        return TimeEntryStatus.DRAFT.value

    if TimeEntryStatus.REJECTED.value in statuses:
        return TimeEntryStatus.REJECTED.value
    if TimeEntryStatus.APPROVED.value in statuses:
        return TimeEntryStatus.APPROVED.value

    reviewed = (TimeEntryStatus.SUBMITTED.value, TimeEntryStatus.APPROVED.value)
    if all(status in reviewed for status in statuses):
        return TimeEntryStatus.SUBMITTED.value
    return TimeEntryStatus.DRAFT.value
