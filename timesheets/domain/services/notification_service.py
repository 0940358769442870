"""
Notification service interface.
Sends timesheet notifications to employees.
"""

from abc import ABC, abstractmethod
from decimal import Decimal
from typing import Optional

from timesheets.domain.models.employee import Employee
from timesheets.domain.models.value_objects import WeekRange


class NotificationService(ABC):
    """
    Notification service interface.
    Callers treat every method as best-effort.
    """

    @abstractmethod
    async def notify_timesheet_submitted(
        self,
        employee: Employee,
        week: WeekRange,
        total_hours: Decimal
    ) -> bool:
        """
        Tell an employee their week was submitted.
        """
        pass

    @abstractmethod
    async def notify_timesheet_reviewed(
        self,
        employee: Employee,
        week: WeekRange,
        status: str,
        reason: Optional[str] = None
    ) -> bool:
        """
        Tell an employee their week was approved or rejected.
        """
        pass
