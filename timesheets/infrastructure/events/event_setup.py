"""
Event system setup and configuration.
Registers all event handlers with the event dispatcher.
"""

import logging
from datetime import tzinfo
from typing import Optional

from timesheets.domain.events.base import EventDispatcher
from timesheets.domain.repositories.employee_repository import EmployeeRepository
from timesheets.domain.services.notification_service import NotificationService
from .notification_handlers import AuditLogHandler, TimesheetReviewNotificationHandler

logger = logging.getLogger(__name__)


def setup_event_handlers(
    dispatcher: EventDispatcher,
    employee_repository: EmployeeRepository,
    notification_service: Optional[NotificationService] = None,
    tz: Optional[tzinfo] = None
) -> EventDispatcher:
    """Set up and register all event handlers."""

    # Register global handler for auditing
    dispatcher.register_global_handler(AuditLogHandler())

    if notification_service:
        review_handler = TimesheetReviewNotificationHandler(employee_repository, notification_service, tz)
        dispatcher.register_handler("TimesheetApproved", review_handler)
        dispatcher.register_handler("TimesheetRejected", review_handler)

    registered = dispatcher.get_registered_handlers()
    for event_type, handlers in registered.items():
        logger.info(f"Event {event_type}: {', '.join(handlers)} handlers")

    return dispatcher
