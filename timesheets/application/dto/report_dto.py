"""
Report DTOs for weekly, department and payroll reporting.
"""

from datetime import date, datetime
from decimal import Decimal
from typing import Dict, List

from pydantic import Field

from .base_dto import RequestDTO, ResponseDTO, DateInput


# Request DTOs
class WeeklyReportRequestDTO(RequestDTO):
    """DTO for an employee's weekly report or timesheet summary."""

    employee_id: str = Field(min_length=1, description="Employee ID")
    week_of: DateInput = Field(description="Any date inside the week")


class DepartmentReportRequestDTO(RequestDTO):
    """DTO for a department's weekly summaries."""

    department: str = Field(min_length=1, description="Department name")
    week_of: DateInput = Field(description="Any date inside the week")


class PayrollReportRequestDTO(RequestDTO):
    """
    DTO for a payroll report.
    Plain dates cover whole days: start at 00:00, end at the last instant of the day.
    """

    employee_id: str = Field(min_length=1, description="Employee ID")
    start_date: DateInput = Field(description="Period start")
    end_date: DateInput = Field(description="Period end")


# Response DTOs
class WeeklyReportDTO(ResponseDTO):
    """Weekly hours and pay for one employee."""

    employee_id: str
    employee_name: str
    week: str = Field(description="Requested week date as YYYY-MM-DD")
    week_start: date
    week_end: date
    total_hours: Decimal
    billable_hours: Decimal
    projects: Dict[str, Decimal] = Field(default_factory=dict, description="Elapsed hours per project")
    overtime: Decimal
    gross_pay: Decimal


class TimesheetSummaryDTO(ResponseDTO):
    """Derived, read-only weekly aggregate for one employee."""

    employee_id: str
    employee_name: str
    week_of: date
    total_hours: Decimal
    total_billable_hours: Decimal
    entries_count: int
    status: str


class DepartmentReportDTO(ResponseDTO):
    """Weekly summaries for every employee in a department, in employee list order."""

    department: str
    week_of: date
    summaries: List[TimesheetSummaryDTO] = Field(default_factory=list)


class PayrollReportDTO(ResponseDTO):
    """Approximate payroll for approved entries in a period."""

    employee_id: str
    employee_name: str
    period_start: datetime
    period_end: datetime
    total_hours: Decimal
    hourly_rate: Decimal
    gross_pay: Decimal
    tax_amount: Decimal
    net_pay: Decimal
    entries_count: int
