"""
Event handlers for timesheet notifications and auditing.
Converts domain events into employee notifications and log records.
"""

import logging
from datetime import timezone, tzinfo
from typing import Optional

from timesheets.domain.events.base import EventHandler, DomainEvent
from timesheets.domain.events.timesheet_events import (
    TimesheetApproved,
    TimesheetRejected,
    OvertimeDetected
)
from timesheets.domain.models.time_entry import TimeEntryStatus
from timesheets.domain.models.value_objects import WeekRange
from timesheets.domain.repositories.employee_repository import EmployeeRepository
from timesheets.domain.services.notification_service import NotificationService


logger = logging.getLogger(__name__)


class AuditLogHandler(EventHandler):
    """Global handler writing every timesheet event to the audit log."""

    async def handle(self, event: DomainEvent) -> None:
        if isinstance(event, OvertimeDetected):
            logger.warning(
                f"Overtime: employee {event.employee_id} logged {event.total_hours} hours "
                f"in week of {event.week_start} ({event.overtime_hours} over {event.threshold_hours})"
            )
            return
        logger.info(f"Audit: {event.event_type} (ID: {event.event_id}) {event.to_dict()['data']}")


class TimesheetReviewNotificationHandler(EventHandler):
    """Tells employees when their week has been approved or rejected."""

    def __init__(
        self,
        employee_repository: EmployeeRepository,
        notification_service: NotificationService,
        tz: Optional[tzinfo] = None
    ):
        self.employee_repository = employee_repository
        self.notification_service = notification_service
        self.tz = tz or timezone.utc

    def can_handle(self, event: DomainEvent) -> bool:
        return isinstance(event, (TimesheetApproved, TimesheetRejected))

    async def handle(self, event: DomainEvent) -> None:
        employee = await self.employee_repository.find_by_id(event.employee_id)
        if not employee:
            logger.warning(f"Cannot send review notification: employee {event.employee_id} not found")
            return

        week = WeekRange.containing(event.week_start, self.tz)
        if isinstance(event, TimesheetRejected):
            sent = await self.notification_service.notify_timesheet_reviewed(
                employee, week, TimeEntryStatus.REJECTED.value, event.reason
            )
        else:
            sent = await self.notification_service.notify_timesheet_reviewed(
                employee, week, TimeEntryStatus.APPROVED.value
            )

        if not sent:
            logger.warning(f"Review notification for employee {employee.id} was not delivered")
