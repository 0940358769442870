"""
Unit tests for TimesheetCalculator.
"""

from decimal import Decimal

from timesheets.domain.services.hours_calculator import HoursCalculator
from timesheets.domain.services.timesheet_calculator import TimesheetCalculator
from tests.fakes import make_entry


def _day(day, start_hour, end_hour, **overrides):
    return make_entry(
        f"2024-01-{day:02d}T{start_hour:02d}:00:00Z",
        f"2024-01-{day:02d}T{end_hour:02d}:00:00Z",
        **overrides
    )


class TestTimesheetCalculator:
    """Test cases for weekly totals, overtime and payroll."""

    def setup_method(self):
        self.calculator = TimesheetCalculator(HoursCalculator())

    def test_week_totals(self):
        entries = [
            _day(8, 8, 20, project_id="P1", billable_hours=Decimal("12")),
            _day(9, 8, 18, project_id="P2"),
            _day(10, 8, 18, project_id="P2"),
            _day(11, 8, 18, project_id="P2"),
        ]

        totals = self.calculator.week_totals(entries)

        assert totals.total_hours == Decimal("42")
        assert totals.billable_hours == Decimal("12")
        assert totals.project_hours == {"P1": Decimal("12"), "P2": Decimal("30")}
        assert totals.entry_count == 4
        assert totals.status == "draft"

    def test_negative_billable_hours_do_not_count(self):
        entries = [
            _day(8, 9, 10, billable_hours=Decimal("2")),
            _day(9, 9, 10, billable_hours=Decimal("-1")),
        ]

        assert self.calculator.week_totals(entries).billable_hours == Decimal("2")

    def test_backwards_entry_counts_as_zero(self):
        assert self.calculator.total_hours([_day(8, 17, 9)]) == Decimal("0")

    def test_overtime(self):
        assert self.calculator.overtime(Decimal("42")) == Decimal("2")
        assert self.calculator.overtime(Decimal("38")) == Decimal("0")
        assert self.calculator.is_overtime(Decimal("40")) is False
        assert self.calculator.is_overtime(Decimal("40.01")) is True

    def test_custom_threshold(self):
        calculator = TimesheetCalculator(HoursCalculator(), overtime_threshold=Decimal("35"))

        assert calculator.overtime(Decimal("40")) == Decimal("5")

    def test_gross_pay(self):
        assert self.calculator.gross_pay(Decimal("12"), Decimal("50")) == Decimal("600")

    def test_payroll(self):
        payroll = self.calculator.payroll(Decimal("10"), Decimal("50"))

        assert payroll.gross_pay == Decimal("500")
        assert payroll.tax_amount == Decimal("125.00")
        assert payroll.net_pay == Decimal("375.00")
        assert payroll.net_pay == payroll.gross_pay * Decimal("0.75")
