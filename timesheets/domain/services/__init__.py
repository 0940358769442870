"""
Domain services for the timesheet tracker.
This module exports all domain services for complex business logic.
"""

from .hours_calculator import HoursCalculator, elapsed_hours, billable_hours
from .notification_service import NotificationService
from .timesheet_calculator import TimesheetCalculator, WeekTotals, PayrollTotals

__all__ = [
    "HoursCalculator",
    "elapsed_hours",
    "billable_hours",
    "NotificationService",
    "TimesheetCalculator",
    "WeekTotals",
    "PayrollTotals",
]
