"""Timesheet aggregation for weekly and payroll reports.
Pure arithmetic over entry sets; all figures are Decimal.
"""

from dataclasses import dataclass, field
from decimal import Decimal
from typing import Dict, Iterable, List

from timesheets.domain.models.time_entry import TimeEntry, resolve_week_status
from timesheets.domain.services.hours_calculator import HoursCalculator


ZERO = Decimal("0")


@dataclass
class WeekTotals:
    """Aggregated figures for one employee's week."""

    total_hours: Decimal = ZERO
    billable_hours: Decimal = ZERO
    project_hours: Dict[str, Decimal] = field(default_factory=dict)
    entry_count: int = 0
    status: str = "draft"


@dataclass(frozen=True)
class PayrollTotals:
    total_hours: Decimal
    gross_pay: Decimal
    tax_amount: Decimal
    net_pay: Decimal


class TimesheetCalculator:
    """
    Domain service for timesheet totals, overtime and pay.
    """

    def __init__(
        self,
        hours_calculator: HoursCalculator,
        overtime_threshold: Decimal = Decimal("40"),
        tax_rate: Decimal = Decimal("0.25")
    ):
        self.hours_calculator = hours_calculator
        self.overtime_threshold = Decimal(str(overtime_threshold))
        self.tax_rate = Decimal(str(tax_rate))

    def total_hours(self, entries: Iterable[TimeEntry]) -> Decimal:
        """Sum of lenient elapsed hours."""
        return sum(
            (self.hours_calculator.elapsed_hours(e.start_time, e.end_time) for e in entries),
            ZERO
        )

    def week_totals(self, entries: List[TimeEntry]) -> WeekTotals:
        """
        Totals for a week of entries.
        Billable hours come from the stored values, never recomputed; only
        positive values count towards the billable total.
        """
        totals = WeekTotals(entry_count=len(entries), status=resolve_week_status(entries))

        for entry in entries:
            hours = self.hours_calculator.elapsed_hours(entry.start_time, entry.end_time)
            totals.total_hours += hours

            if entry.billable_hours > 0:
                totals.billable_hours += entry.billable_hours

            project = str(entry.project_id)
            totals.project_hours[project] = totals.project_hours.get(project, ZERO) + hours

        return totals

    def overtime(self, total_hours: Decimal) -> Decimal:
        """Hours above the overtime threshold, never negative."""
        return max(ZERO, total_hours - self.overtime_threshold)

    def is_overtime(self, total_hours: Decimal) -> bool:
        return total_hours > self.overtime_threshold

    def gross_pay(self, hours: Decimal, hourly_rate: Decimal) -> Decimal:
        return hours * Decimal(str(hourly_rate))

    def payroll(self, hours: Decimal, hourly_rate: Decimal) -> PayrollTotals:
        """
        Approximate payroll with a flat tax rate.
        Not an authoritative tax computation.
        """
        gross = self.gross_pay(hours, hourly_rate)
        return PayrollTotals(
            total_hours=hours,
            gross_pay=gross,
            tax_amount=gross * self.tax_rate,
            net_pay=gross * (Decimal("1") - self.tax_rate)
        )

