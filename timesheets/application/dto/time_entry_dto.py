"""
Time Entry DTOs for the application layer.
Data Transfer Objects for time entry operations.
"""

from datetime import datetime
from decimal import Decimal
from typing import List, Optional

from pydantic import Field

from timesheets.domain.models.time_entry import TimeEntry
from .base_dto import RequestDTO, ResponseDTO, TimestampMixin, TimestampInput, DateInput


# Request DTOs
class CreateTimeEntryRequestDTO(RequestDTO):
    """
    DTO for manual time entry creation.
    Fields are deliberately loose; entry rules are reported by the validator
    so that every failing rule reaches the caller at once.
    """

    employee_id: str = Field(default="", description="Employee ID")
    project_id: str = Field(default="", description="Project ID")
    start_time: Optional[TimestampInput] = Field(default=None, description="Start timestamp")
    end_time: Optional[TimestampInput] = Field(default=None, description="End timestamp")
    description: Optional[str] = Field(default=None, description="Work description")
    billable_hours: Optional[Decimal] = Field(
        default=None,
        description="Billable hours; computed from the time range when omitted"
    )


class ValidateTimeEntryRequestDTO(CreateTimeEntryRequestDTO):
    """DTO for validating an entry payload without saving it."""

    status: Optional[str] = Field(default=None, description="Entry status")


class UpdateTimeEntryRequestDTO(RequestDTO):
    """DTO for time entry update requests. Omitted fields are left unchanged."""

    id: int = Field(description="Time entry ID")
    project_id: Optional[str] = Field(default=None, description="Project ID")
    start_time: Optional[TimestampInput] = Field(default=None, description="Start timestamp")
    end_time: Optional[TimestampInput] = Field(default=None, description="End timestamp")
    description: Optional[str] = Field(default=None, description="Work description")
    billable_hours: Optional[Decimal] = Field(default=None, description="Billable hours")


class ListTimeEntriesRequestDTO(RequestDTO):
    """DTO for listing an employee's entries, optionally for one week."""

    employee_id: str = Field(min_length=1, description="Employee ID")
    week_of: Optional[DateInput] = Field(default=None, description="Any date inside the week")


class SubmitTimeEntryRequestDTO(RequestDTO):
    """DTO for submitting a single entry for approval."""

    id: int = Field(description="Time entry ID")


# Response DTOs
class TimeEntryResponseDTO(ResponseDTO, TimestampMixin):
    """DTO for time entry responses."""

    id: int = Field(description="Time entry ID")
    employee_id: str = Field(description="Employee ID")
    project_id: str = Field(description="Project ID")
    start_time: datetime = Field(description="Start timestamp")
    end_time: datetime = Field(description="End timestamp")
    description: str = Field(default="", description="Work description")
    billable_hours: Decimal = Field(description="Stored billable hours")
    hours: Decimal = Field(description="Elapsed hours, clamped at zero")
    status: str = Field(description="Entry status")

    @classmethod
    def from_entity(cls, entry: TimeEntry, hours: Decimal) -> "TimeEntryResponseDTO":
        return cls(
            id=entry.id,
            employee_id=entry.employee_id,
            project_id=entry.project_id,
            start_time=entry.start_time,
            end_time=entry.end_time,
            description=entry.description or "",
            billable_hours=entry.billable_hours,
            hours=hours,
            status=entry.status,
            created_at=entry.created_at,
            updated_at=entry.updated_at
        )


class TimeEntryListResponseDTO(ResponseDTO):
    """DTO for an employee's entries."""

    employee_id: str
    entries: List[TimeEntryResponseDTO] = Field(default_factory=list)
    total_hours: Decimal = Field(default=Decimal("0"), description="Sum of elapsed hours")
