"""
Time entry repository implementation using SQLAlchemy.
"""

import logging
from datetime import timezone, tzinfo
from typing import List, Optional

from sqlalchemy import and_
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from timesheets.domain.models.base import EntityNotFoundError, RepositoryError
from timesheets.domain.models.time_entry import TimeEntry
from timesheets.domain.models.value_objects import WeekRange
from timesheets.domain.repositories.time_entry_repository import (
    TimeEntryRepository as TimeEntryRepositoryInterface,
    WeekAnchor
)
from timesheets.infrastructure.db.models import TimeEntryModel
from timesheets.infrastructure.mappers.base_mapper import to_storage_datetime
from timesheets.infrastructure.mappers.time_entry_mapper import TimeEntryMapper


logger = logging.getLogger(__name__)


class SQLAlchemyTimeEntryRepository(TimeEntryRepositoryInterface):
    """
    SQLAlchemy implementation of time entry repository.
    Week filters are resolved in the reference time zone and compared
    against the stored UTC start times.
    """

    def __init__(self, session: Session, tz: Optional[tzinfo] = None):
        self.session = session
        self.tz = tz or timezone.utc
        self.mapper = TimeEntryMapper(self.tz)
        self.model = TimeEntryModel

    async def save(self, time_entry: TimeEntry) -> TimeEntry:
        """Save a time entry entity."""
        try:
            if time_entry.is_new:
                # Create new time entry
                model = self.mapper.domain_to_model(time_entry)
                self.session.add(model)
            else:
                model = self.session.get(TimeEntryModel, time_entry.id)
                if not model:
                    raise EntityNotFoundError("Time entry", time_entry.id)
                self.mapper.update_model(model, time_entry)

            self.session.commit()
        except SQLAlchemyError as e:
            self.session.rollback()
            logger.error(f"Failed to save time entry {time_entry.id}: {e}")
            raise RepositoryError("save", time_entry.id, e) from e

        if time_entry.is_new:
            time_entry.id = model.id
        return time_entry

    async def find_by_id(self, entry_id: int) -> Optional[TimeEntry]:
        """Get time entry by ID."""
        try:
            model = self.session.get(TimeEntryModel, entry_id)
        except SQLAlchemyError as e:
            raise RepositoryError("find_by_id", entry_id, e) from e
        if not model:
            return None
        return self.mapper.model_to_domain(model)

    async def find_by_employee(
        self,
        employee_id: str,
        week_of: Optional[WeekAnchor] = None
    ) -> List[TimeEntry]:
        """Get an employee's time entries, optionally limited to one week."""
        query = self.session.query(TimeEntryModel).filter(TimeEntryModel.employee_id == employee_id)

        if week_of is not None:
            week = self._resolve_week(week_of)
            query = query.filter(and_(
                TimeEntryModel.start_time >= to_storage_datetime(week.start),
                TimeEntryModel.start_time < to_storage_datetime(week.next_start)
            ))

        try:
            models = query.order_by(TimeEntryModel.start_time, TimeEntryModel.id).all()
        except SQLAlchemyError as e:
            raise RepositoryError("find_by_employee", employee_id, e) from e
        return [self.mapper.model_to_domain(model) for model in models]

    async def delete(self, entry_id: int) -> None:
        """Delete time entry by ID."""
        try:
            model = self.session.get(TimeEntryModel, entry_id)
            if not model:
                return
            self.session.delete(model)
            self.session.commit()
        except SQLAlchemyError as e:
            self.session.rollback()
            raise RepositoryError("delete", entry_id, e) from e

    def _resolve_week(self, week_of: WeekAnchor) -> WeekRange:
        if isinstance(week_of, WeekRange):
            return week_of
        return WeekRange.containing(week_of, self.tz)
