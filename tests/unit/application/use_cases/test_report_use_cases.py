"""
Unit tests for reporting use cases.
"""

import asyncio
import pytest
from datetime import date
from decimal import Decimal

from timesheets.application.dto.report_dto import (
    DepartmentReportRequestDTO,
    PayrollReportRequestDTO,
    WeeklyReportRequestDTO
)
from timesheets.application.use_cases.report_use_cases import (
    GenerateDepartmentReportUseCase,
    GeneratePayrollReportUseCase,
    GenerateTimesheetSummaryUseCase,
    GenerateWeeklyReportUseCase
)
from timesheets.domain.services.hours_calculator import HoursCalculator
from timesheets.domain.services.timesheet_calculator import TimesheetCalculator
from tests.fakes import (
    InMemoryEmployeeRepository,
    InMemoryTimeEntryRepository,
    make_employee,
    make_entry
)


class SlowTimeEntryRepository(InMemoryTimeEntryRepository):

    async def find_by_employee(self, employee_id, week_of=None):
        await asyncio.sleep(1)
        return await super().find_by_employee(employee_id, week_of)


class ReportTestCase:

    def setup_method(self):
        self.employees = InMemoryEmployeeRepository([
            make_employee("E1"),
            make_employee("E2", first_name="Alan", last_name="Turing", is_active=False),
            make_employee("M1", department="Management"),
        ])
        self.entries = InMemoryTimeEntryRepository()
        self.entries.add(
            make_entry("2024-01-08T08:00:00Z", "2024-01-08T20:00:00Z", project_id="P1", billable_hours=Decimal("12")),
            make_entry("2024-01-09T08:00:00Z", "2024-01-09T18:00:00Z", project_id="P2"),
            make_entry("2024-01-10T08:00:00Z", "2024-01-10T18:00:00Z", project_id="P2"),
            make_entry("2024-01-11T08:00:00Z", "2024-01-11T18:00:00Z", project_id="P2"),
            make_entry("2024-01-09T09:00:00Z", "2024-01-09T13:00:00Z", employee_id="E2", status="submitted"),
        )
        self.calculator = TimesheetCalculator(HoursCalculator())

    def build(self, use_case_class, **kwargs):
        return use_case_class(self.employees, self.entries, self.calculator, **kwargs)


class TestGenerateWeeklyReportUseCase(ReportTestCase):
    """Test cases for the weekly report."""

    @pytest.mark.asyncio
    async def test_weekly_report(self):
        result = await self.build(GenerateWeeklyReportUseCase).execute(
            WeeklyReportRequestDTO(employee_id="E1", week_of="2024-01-10")
        )

        report = result.data
        assert result.success is True
        assert report.employee_name == "Ada Lovelace"
        assert report.week == "2024-01-10"
        assert report.week_start == date(2024, 1, 7)
        assert report.week_end == date(2024, 1, 13)
        assert report.total_hours == Decimal("42")
        assert report.billable_hours == Decimal("12")
        assert report.projects == {"P1": Decimal("12"), "P2": Decimal("30")}
        assert report.overtime == Decimal("2")
        assert report.gross_pay == Decimal("600")

    @pytest.mark.asyncio
    async def test_empty_week(self):
        result = await self.build(GenerateWeeklyReportUseCase).execute(
            WeeklyReportRequestDTO(employee_id="E1", week_of="2024-02-01")
        )

        assert result.data.total_hours == Decimal("0")
        assert result.data.projects == {}
        assert result.data.overtime == Decimal("0")

    @pytest.mark.asyncio
    async def test_unknown_employee(self):
        result = await self.build(GenerateWeeklyReportUseCase).execute(
            WeeklyReportRequestDTO(employee_id="nobody", week_of="2024-01-10")
        )

        assert result.error_code == "NOT_FOUND"

    @pytest.mark.asyncio
    async def test_report_timeout(self):
        self.entries = SlowTimeEntryRepository()
        use_case = self.build(GenerateWeeklyReportUseCase, timeout_seconds=0.01)

        result = await use_case.execute(WeeklyReportRequestDTO(employee_id="E1", week_of="2024-01-10"))

        assert result.success is False
        assert result.error_code == "REPORT_TIMEOUT"

    @pytest.mark.asyncio
    async def test_report_does_not_mutate(self):
        before = {key: entry.snapshot() for key, entry in self.entries.data.items()}

        await self.build(GenerateWeeklyReportUseCase).execute(
            WeeklyReportRequestDTO(employee_id="E1", week_of="2024-01-10")
        )

        assert {key: entry.snapshot() for key, entry in self.entries.data.items()} == before
        assert self.entries.save_calls == 0


class TestGenerateTimesheetSummaryUseCase(ReportTestCase):

    @pytest.mark.asyncio
    async def test_summary(self):
        result = await self.build(GenerateTimesheetSummaryUseCase).execute(
            WeeklyReportRequestDTO(employee_id="E2", week_of="2024-01-10")
        )

        summary = result.data
        assert summary.employee_name == "Alan Turing"
        assert summary.week_of == date(2024, 1, 10)
        assert summary.total_hours == Decimal("4")
        assert summary.total_billable_hours == Decimal("0")
        assert summary.entries_count == 1
        assert summary.status == "submitted"


class TestGenerateDepartmentReportUseCase(ReportTestCase):

    @pytest.mark.asyncio
    async def test_department_includes_inactive_employees_in_order(self):
        result = await self.build(GenerateDepartmentReportUseCase).execute(
            DepartmentReportRequestDTO(department="Engineering", week_of="2024-01-10")
        )

        summaries = result.data.summaries
        assert [s.employee_id for s in summaries] == ["E1", "E2"]
        assert summaries[0].total_hours == Decimal("42")
        assert summaries[0].status == "draft"
        assert summaries[1].status == "submitted"

    @pytest.mark.asyncio
    async def test_unknown_department_is_empty(self):
        result = await self.build(GenerateDepartmentReportUseCase).execute(
            DepartmentReportRequestDTO(department="Sales", week_of="2024-01-10")
        )

        assert result.success is True
        assert result.data.summaries == []


class TestGeneratePayrollReportUseCase(ReportTestCase):
    """Test cases for the approximate payroll report."""

    def setup_method(self):
        super().setup_method()
        self.entries.data.clear()
        self.entries.add(
            make_entry("2024-01-08T09:00:00Z", "2024-01-08T15:00:00Z", status="approved"),
            make_entry("2024-01-31T20:00:00Z", "2024-01-31T23:00:00Z", status="approved"),
            # Excluded: not approved
            make_entry("2024-01-09T09:00:00Z", "2024-01-09T17:00:00Z", status="submitted"),
            # Excluded: ends after the period
            make_entry("2024-01-31T22:00:00Z", "2024-02-01T02:00:00Z", status="approved"),
            # Excluded: starts before the period
            make_entry("2023-12-31T22:00:00Z", "2024-01-01T02:00:00Z", status="approved"),
            make_entry("2024-01-10T09:00:00Z", "2024-01-10T10:00:00Z", status="approved"),
        )

    @pytest.mark.asyncio
    async def test_payroll(self):
        result = await self.build(GeneratePayrollReportUseCase).execute(PayrollReportRequestDTO(
            employee_id="E1", start_date="2024-01-01", end_date="2024-01-31"
        ))

        report = result.data
        assert report.entries_count == 3
        assert report.total_hours == Decimal("10")
        assert report.hourly_rate == Decimal("50")
        assert report.gross_pay == Decimal("500")
        assert report.tax_amount == Decimal("125")
        assert report.net_pay == Decimal("375")
        assert report.net_pay == report.gross_pay * Decimal("0.75")

    @pytest.mark.asyncio
    async def test_end_before_start(self):
        result = await self.build(GeneratePayrollReportUseCase).execute(PayrollReportRequestDTO(
            employee_id="E1", start_date="2024-02-01", end_date="2024-01-01"
        ))

        assert result.error_code == "INVALID_INPUT"
