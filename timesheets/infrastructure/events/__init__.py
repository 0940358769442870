"""
Event handling infrastructure.
"""

from .event_setup import setup_event_handlers
from .notification_handlers import AuditLogHandler, TimesheetReviewNotificationHandler

__all__ = [
    "setup_event_handlers",
    "AuditLogHandler",
    "TimesheetReviewNotificationHandler",
]
