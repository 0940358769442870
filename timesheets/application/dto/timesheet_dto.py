"""
Timesheet DTOs for weekly submission and review.
"""

from datetime import date
from decimal import Decimal
from typing import List, Optional

from pydantic import Field

from .base_dto import RequestDTO, ResponseDTO, DateInput


class SubmitTimesheetRequestDTO(RequestDTO):
    """DTO for submitting an employee's week."""

    employee_id: str = Field(min_length=1, description="Employee ID")
    week_ending_date: DateInput = Field(description="Any date inside the week")


class ApproveTimesheetRequestDTO(RequestDTO):
    """DTO for approving an employee's week."""

    employee_id: str = Field(min_length=1, description="Employee ID")
    week_ending_date: DateInput = Field(description="Any date inside the week")
    approver_id: str = Field(min_length=1, description="Approving employee ID")


class RejectTimesheetRequestDTO(ApproveTimesheetRequestDTO):
    """DTO for rejecting an employee's week."""

    reason: str = Field(min_length=1, max_length=500, description="Rejection reason")


class TimesheetActionResponseDTO(ResponseDTO):
    """Outcome of a submit, approve or reject operation."""

    employee_id: str
    week_start: date
    week_end: date
    status: str = Field(description="Unified week status after the operation")
    updated_entry_ids: List[int] = Field(default_factory=list)
    total_hours: Optional[Decimal] = None
    overtime_hours: Optional[Decimal] = None
