"""
Data Transfer Objects for the application layer.
"""

from .base_dto import (
    BaseDTO,
    RequestDTO,
    ResponseDTO,
    IdRequestDTO,
    ValidationResultDTO
)
from .time_entry_dto import (
    CreateTimeEntryRequestDTO,
    ValidateTimeEntryRequestDTO,
    UpdateTimeEntryRequestDTO,
    ListTimeEntriesRequestDTO,
    SubmitTimeEntryRequestDTO,
    TimeEntryResponseDTO,
    TimeEntryListResponseDTO
)
from .employee_dto import (
    RegisterEmployeeRequestDTO,
    GetEmployeeRequestDTO,
    ListEmployeesRequestDTO,
    EmployeeResponseDTO,
    EmployeeListResponseDTO
)
from .timesheet_dto import (
    SubmitTimesheetRequestDTO,
    ApproveTimesheetRequestDTO,
    RejectTimesheetRequestDTO,
    TimesheetActionResponseDTO
)
from .report_dto import (
    WeeklyReportRequestDTO,
    DepartmentReportRequestDTO,
    PayrollReportRequestDTO,
    WeeklyReportDTO,
    TimesheetSummaryDTO,
    DepartmentReportDTO,
    PayrollReportDTO
)

__all__ = [
    "BaseDTO",
    "RequestDTO",
    "ResponseDTO",
    "IdRequestDTO",
    "ValidationResultDTO",
    "CreateTimeEntryRequestDTO",
    "ValidateTimeEntryRequestDTO",
    "UpdateTimeEntryRequestDTO",
    "ListTimeEntriesRequestDTO",
    "SubmitTimeEntryRequestDTO",
    "TimeEntryResponseDTO",
    "TimeEntryListResponseDTO",
    "RegisterEmployeeRequestDTO",
    "GetEmployeeRequestDTO",
    "ListEmployeesRequestDTO",
    "EmployeeResponseDTO",
    "EmployeeListResponseDTO",
    "SubmitTimesheetRequestDTO",
    "ApproveTimesheetRequestDTO",
    "RejectTimesheetRequestDTO",
    "TimesheetActionResponseDTO",
    "WeeklyReportRequestDTO",
    "DepartmentReportRequestDTO",
    "PayrollReportRequestDTO",
    "WeeklyReportDTO",
    "TimesheetSummaryDTO",
    "DepartmentReportDTO",
    "PayrollReportDTO",
]
