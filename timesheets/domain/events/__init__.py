"""
Domain events for the application.
Event-driven architecture components for notifications and auditing.
"""

from .base import DomainEvent, EventHandler, EventDispatcher
from .timesheet_events import (
    TimesheetSubmitted,
    TimesheetApproved,
    TimesheetRejected,
    OvertimeDetected
)

__all__ = [
    "DomainEvent",
    "EventHandler",
    "EventDispatcher",
    "TimesheetSubmitted",
    "TimesheetApproved",
    "TimesheetRejected",
    "OvertimeDetected"
]
