"""
Domain events related to weekly timesheets.
"""

from dataclasses import dataclass, field
from datetime import date
from decimal import Decimal
from typing import Dict, Any, List, Optional

from .base import DomainEvent


@dataclass
class TimesheetSubmitted(DomainEvent):
    """Event fired when an employee submits a week of time entries."""

    employee_id: str = ""
    week_start: Optional[date] = None
    week_end: Optional[date] = None
    total_hours: Decimal = Decimal("0")
    submitted_entry_ids: List[Any] = field(default_factory=list)

    def _get_event_data(self) -> Dict[str, Any]:
        return {
            "employee_id": self.employee_id,
            "week_start": self.week_start.isoformat() if self.week_start else None,
            "week_end": self.week_end.isoformat() if self.week_end else None,
            "total_hours": str(self.total_hours),
            "submitted_entry_ids": list(self.submitted_entry_ids)
        }


@dataclass
class TimesheetApproved(DomainEvent):
    """Event fired when a manager approves a submitted week."""

    employee_id: str = ""
    approver_id: str = ""
    week_start: Optional[date] = None
    entry_count: int = 0

    def _get_event_data(self) -> Dict[str, Any]:
        return {
            "employee_id": self.employee_id,
            "approver_id": self.approver_id,
            "week_start": self.week_start.isoformat() if self.week_start else None,
            "entry_count": self.entry_count
        }


@dataclass
class TimesheetRejected(DomainEvent):
    """Event fired when a manager rejects a week."""

    employee_id: str = ""
    approver_id: str = ""
    week_start: Optional[date] = None
    reason: str = ""
    entry_count: int = 0

    def _get_event_data(self) -> Dict[str, Any]:
        return {
            "employee_id": self.employee_id,
            "approver_id": self.approver_id,
            "week_start": self.week_start.isoformat() if self.week_start else None,
            "reason": self.reason,
            "entry_count": self.entry_count
        }


@dataclass
class OvertimeDetected(DomainEvent):
    """Event fired when a submitted week exceeds the overtime threshold."""

    employee_id: str = ""
    week_start: Optional[date] = None
    total_hours: Decimal = Decimal("0")
    threshold_hours: Decimal = Decimal("40")

    @property
    def overtime_hours(self) -> Decimal:
        return max(Decimal("0"), self.total_hours - self.threshold_hours)

    def _get_event_data(self) -> Dict[str, Any]:
        return {
            "employee_id": self.employee_id,
            "week_start": self.week_start.isoformat() if self.week_start else None,
            "total_hours": str(self.total_hours),
            "threshold_hours": str(self.threshold_hours),
            "overtime_hours": str(self.overtime_hours)
        }
