"""Time Entry repository interface.
Defines the contract for time entry data persistence operations.
"""

from abc import ABC, abstractmethod
from datetime import date, datetime
from typing import List, Optional, Union

from timesheets.domain.models.time_entry import TimeEntry
from timesheets.domain.models.value_objects import WeekRange


WeekAnchor = Union[WeekRange, date, datetime, str]


class TimeEntryRepository(ABC):
    """
    Repository interface for TimeEntry entity.
    """

    @abstractmethod
    async def save(self, time_entry: TimeEntry) -> TimeEntry:
        """
        Save a time entry entity.
        Assigns an ID when the entry is new and returns the persisted entry.
        """
        pass

    @abstractmethod
    async def find_by_id(self, entry_id: int) -> Optional[TimeEntry]:
        """
        Find a time entry by its ID.
        Returns None if not found.
        """
        pass

    @abstractmethod
    async def find_by_employee(
        self,
        employee_id: str,
        week_of: Optional[WeekAnchor] = None
    ) -> List[TimeEntry]:
        """
        Find time entries for an employee ordered by start time.
        When week_of is given, only entries whose start time falls in the
        Sunday-to-Saturday week containing it are returned.
        """
        pass

    @abstractmethod
    async def delete(self, entry_id: int) -> None:
        """
        Delete a time entry. Deleting a missing entry is a no-op.
        """
        pass
