"""
Per-(employee, week) locking for timesheet mutations.
"""

import asyncio
import logging
import weakref
from contextlib import asynccontextmanager
from typing import AsyncIterator, Optional, Tuple

from timesheets.domain.models.value_objects import WeekRange


logger = logging.getLogger(__name__)


class WeekLockRegistry:
    """
    Hands out one asyncio.Lock per (employee, week).
    Locks nobody holds are garbage collected, so the registry stays bounded
    by the number of weeks currently being worked on.
    """

    def __init__(self):
        self._locks: "weakref.WeakValueDictionary[Tuple[str, str], asyncio.Lock]" = (
            weakref.WeakValueDictionary()
        )

    def lock_for(self, employee_id: str, week: Optional[WeekRange]) -> asyncio.Lock:
        # Entries without a usable start time share one lock per employee
        key = (str(employee_id), week.key if week else "")
        lock = self._locks.get(key)
        if lock is None:
            lock = asyncio.Lock()
            self._locks[key] = lock
        return lock

    @asynccontextmanager
    async def hold(self, employee_id: str, week: Optional[WeekRange]) -> AsyncIterator[None]:
        """Serialise a read-validate-write unit for one employee's week."""
        lock = self.lock_for(employee_id, week)
        if lock.locked():
            logger.debug(f"Waiting for timesheet lock {employee_id}/{week}")
        async with lock:
            yield

    def __len__(self) -> int:
        return len(self._locks)
