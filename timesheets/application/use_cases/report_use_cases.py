"""
Reporting use cases for the application layer.
Weekly, summary, department and payroll reports. Reports never mutate
entries, so cancelling one on timeout is always safe.
"""

import asyncio
import logging
from abc import abstractmethod
from datetime import date, timezone, tzinfo
from decimal import Decimal
from typing import List, Optional

from timesheets.application.dto.report_dto import (
    WeeklyReportRequestDTO,
    DepartmentReportRequestDTO,
    PayrollReportRequestDTO,
    WeeklyReportDTO,
    TimesheetSummaryDTO,
    DepartmentReportDTO,
    PayrollReportDTO
)
from timesheets.application.use_cases.base_use_case import QueryUseCase
from timesheets.domain.models.base import EntityNotFoundError, ReportTimeoutError
from timesheets.domain.models.employee import Employee
from timesheets.domain.models.time_entry import TimeEntry, TimeEntryStatus
from timesheets.domain.models.value_objects import ReportPeriod, WeekRange, parse_date, parse_timestamp
from timesheets.domain.repositories.employee_repository import EmployeeRepository
from timesheets.domain.repositories.time_entry_repository import TimeEntryRepository
from timesheets.domain.services.timesheet_calculator import TimesheetCalculator


logger = logging.getLogger(__name__)


class ReportUseCase(QueryUseCase):
    """
    Base class for report queries.
    Each report runs under a timeout and fails with REPORT_TIMEOUT when it expires.
    """

    report_name = "report"

    def __init__(
        self,
        employee_repository: EmployeeRepository,
        time_entry_repository: TimeEntryRepository,
        calculator: TimesheetCalculator,
        tz: Optional[tzinfo] = None,
        timeout_seconds: Optional[float] = 30.0
    ):
        self.employee_repository = employee_repository
        self.time_entry_repository = time_entry_repository
        self.calculator = calculator
        self.tz = tz or timezone.utc
        self.timeout_seconds = timeout_seconds

    async def _execute_business_logic(self, request):
        if not self.timeout_seconds:
            return await self._build_report(request)
        try:
            return await asyncio.wait_for(self._build_report(request), self.timeout_seconds)
        except asyncio.TimeoutError:
            logger.warning(f"{self.report_name} cancelled after {self.timeout_seconds}s")
            raise ReportTimeoutError(self.report_name, self.timeout_seconds)

    @abstractmethod
    async def _build_report(self, request):
        pass

    async def _find_employee(self, employee_id: str) -> Employee:
        employee = await self.employee_repository.find_by_id(employee_id)
        if not employee:
            raise EntityNotFoundError("Employee", employee_id)
        return employee

    async def _summarize(self, employee: Employee, week: WeekRange, week_of: date) -> TimesheetSummaryDTO:
        entries = await self.time_entry_repository.find_by_employee(employee.id, week)
        totals = self.calculator.week_totals(entries)
        return TimesheetSummaryDTO(
            employee_id=employee.id,
            employee_name=employee.full_name,
            week_of=week_of,
            total_hours=totals.total_hours,
            total_billable_hours=sum(
                (entry.billable_hours for entry in entries),
                Decimal("0")
            ),
            entries_count=totals.entry_count,
            status=totals.status
        )


class GenerateWeeklyReportUseCase(ReportUseCase):
    """Hours, project breakdown, overtime and gross pay for one employee's week."""

    report_name = "weekly_report"

    async def _build_report(self, request: WeeklyReportRequestDTO) -> WeeklyReportDTO:
        employee = await self._find_employee(request.employee_id)
        week = WeekRange.containing(request.week_of, self.tz)
        entries = await self.time_entry_repository.find_by_employee(employee.id, week)

        totals = self.calculator.week_totals(entries)
        return WeeklyReportDTO(
            employee_id=employee.id,
            employee_name=employee.full_name,
            week=parse_date(request.week_of, self.tz).isoformat(),
            week_start=week.first_day,
            week_end=week.last_day,
            total_hours=totals.total_hours,
            billable_hours=totals.billable_hours,
            projects=totals.project_hours,
            overtime=self.calculator.overtime(totals.total_hours),
            gross_pay=self.calculator.gross_pay(totals.billable_hours, employee.hourly_rate)
        )


class GenerateTimesheetSummaryUseCase(ReportUseCase):
    """Compact weekly summary with the unified week status."""

    report_name = "timesheet_summary"

    async def _build_report(self, request: WeeklyReportRequestDTO) -> TimesheetSummaryDTO:
        employee = await self._find_employee(request.employee_id)
        week = WeekRange.containing(request.week_of, self.tz)
        return await self._summarize(employee, week, parse_date(request.week_of, self.tz))


class GenerateDepartmentReportUseCase(ReportUseCase):
    """
    Weekly summaries for a department.
    Inactive employees are included; order follows the repository's employee list.
    """

    report_name = "department_report"

    async def _build_report(self, request: DepartmentReportRequestDTO) -> DepartmentReportDTO:
        week = WeekRange.containing(request.week_of, self.tz)
        week_of = parse_date(request.week_of, self.tz)

        employees = await self.employee_repository.find_all()
        members = [e for e in employees if e.department == request.department]

        summaries: List[TimesheetSummaryDTO] = []
        for employee in members:
            summaries.append(await self._summarize(employee, week, week_of))

        return DepartmentReportDTO(department=request.department, week_of=week_of, summaries=summaries)


class GeneratePayrollReportUseCase(ReportUseCase):
    """
    Approximate payroll over approved entries lying wholly inside a period.
    """

    report_name = "payroll_report"

    async def _build_report(self, request: PayrollReportRequestDTO) -> PayrollReportDTO:
        employee = await self._find_employee(request.employee_id)
        period = ReportPeriod.from_bounds(request.start_date, request.end_date, self.tz)

        entries = await self.time_entry_repository.find_by_employee(employee.id)
        approved = [entry for entry in entries if self._is_payable(entry, period)]

        hours = self.calculator.total_hours(approved)
        payroll = self.calculator.payroll(hours, employee.hourly_rate)

        return PayrollReportDTO(
            employee_id=employee.id,
            employee_name=employee.full_name,
            period_start=period.start,
            period_end=period.end,
            total_hours=payroll.total_hours,
            hourly_rate=employee.hourly_rate,
            gross_pay=payroll.gross_pay,
            tax_amount=payroll.tax_amount,
            net_pay=payroll.net_pay,
            entries_count=len(approved)
        )

    def _is_payable(self, entry: TimeEntry, period: ReportPeriod) -> bool:
        if entry.status != TimeEntryStatus.APPROVED.value:
            return False
        start = parse_timestamp(entry.start_time, self.tz)
        end = parse_timestamp(entry.end_time, self.tz)
        return period.covers(start, end)
