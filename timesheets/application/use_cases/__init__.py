"""
Use cases for the application layer.
"""

from .base_use_case import UseCaseResult, BaseUseCase, QueryUseCase, CommandUseCase
from .locks import WeekLockRegistry
from .time_entry_use_cases import (
    CreateTimeEntryUseCase,
    UpdateTimeEntryUseCase,
    GetTimeEntryUseCase,
    ListTimeEntriesUseCase,
    DeleteTimeEntryUseCase,
    ValidateTimeEntryUseCase,
    SubmitTimeEntryUseCase
)
from .timesheet_use_cases import (
    SubmitTimesheetUseCase,
    ApproveTimesheetUseCase,
    RejectTimesheetUseCase
)
from .report_use_cases import (
    GenerateWeeklyReportUseCase,
    GenerateTimesheetSummaryUseCase,
    GenerateDepartmentReportUseCase,
    GeneratePayrollReportUseCase
)
from .employee_use_cases import (
    RegisterEmployeeUseCase,
    GetEmployeeUseCase,
    ListEmployeesUseCase,
    DeactivateEmployeeUseCase
)

__all__ = [
    "UseCaseResult",
    "BaseUseCase",
    "QueryUseCase",
    "CommandUseCase",
    "WeekLockRegistry",
    "CreateTimeEntryUseCase",
    "UpdateTimeEntryUseCase",
    "GetTimeEntryUseCase",
    "ListTimeEntriesUseCase",
    "DeleteTimeEntryUseCase",
    "ValidateTimeEntryUseCase",
    "SubmitTimeEntryUseCase",
    "SubmitTimesheetUseCase",
    "ApproveTimesheetUseCase",
    "RejectTimesheetUseCase",
    "GenerateWeeklyReportUseCase",
    "GenerateTimesheetSummaryUseCase",
    "GenerateDepartmentReportUseCase",
    "GeneratePayrollReportUseCase",
    "RegisterEmployeeUseCase",
    "GetEmployeeUseCase",
    "ListEmployeesUseCase",
    "DeactivateEmployeeUseCase",
]
