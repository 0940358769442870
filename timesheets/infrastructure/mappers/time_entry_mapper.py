"""
Time entry mapper for converting between domain entities and database models.
"""

from datetime import timezone, tzinfo
from typing import Any, Mapping, Optional

from timesheets.domain.models.base import InvalidInputError
from timesheets.domain.models.time_entry import TimeEntry, TimeEntryStatus
from timesheets.domain.models.value_objects import parse_timestamp
from timesheets.infrastructure.db.models import TimeEntryModel
from timesheets.infrastructure.mappers.base_mapper import (
    from_storage_datetime,
    pick,
    to_decimal,
    to_storage_datetime
)


class TimeEntryMapper:
    """
    Maps between TimeEntry domain entity and TimeEntryModel database model.
    Naive timestamps are read in the reference time zone.
    """

    def __init__(self, tz: Optional[tzinfo] = None):
        self.tz = tz or timezone.utc

    def domain_to_model(self, time_entry: TimeEntry) -> TimeEntryModel:
        """Convert TimeEntry domain entity to TimeEntryModel."""
        model = TimeEntryModel()
        if not time_entry.is_new:
            model.id = time_entry.id
        self.update_model(model, time_entry)
        return model

    def update_model(self, model: TimeEntryModel, time_entry: TimeEntry) -> None:
        """Copy entity state onto an existing row."""
        model.employee_id = time_entry.employee_id
        model.project_id = time_entry.project_id
        model.start_time = to_storage_datetime(parse_timestamp(time_entry.start_time, self.tz, "start_time"))
        model.end_time = to_storage_datetime(parse_timestamp(time_entry.end_time, self.tz, "end_time"))
        model.description = time_entry.description or ""
        model.billable_hours = time_entry.billable_hours
        model.status = time_entry.status
        model.approved_by = time_entry.approved_by
        model.created_at = to_storage_datetime(time_entry.created_at)
        model.updated_at = to_storage_datetime(time_entry.updated_at)

    def model_to_domain(self, model: TimeEntryModel) -> TimeEntry:
        """Convert TimeEntryModel to TimeEntry domain entity."""
        return TimeEntry(
            id=model.id,
            employee_id=model.employee_id,
            project_id=model.project_id,
            start_time=from_storage_datetime(model.start_time),
            end_time=from_storage_datetime(model.end_time),
            description=model.description or "",
            billable_hours=to_decimal(model.billable_hours),
            status=model.status or TimeEntryStatus.DRAFT.value,
            approved_by=model.approved_by,
            created_at=from_storage_datetime(model.created_at),
            updated_at=from_storage_datetime(model.updated_at)
        )

    def row_to_domain(self, row: Mapping[str, Any]) -> TimeEntry:
        """
        Build a TimeEntry from a raw row keyed in snake_case or camelCase.
        Unparseable timestamps are kept as-is so they reach the validator.
        """
        entry = TimeEntry(
            id=pick(row, "id", "entryId"),
            employee_id=str(pick(row, "employee_id", "employeeId", "")),
            project_id=str(pick(row, "project_id", "projectId", "")),
            start_time=self._resolve(pick(row, "start_time", "startTime")),
            end_time=self._resolve(pick(row, "end_time", "endTime")),
            description=pick(row, "description", "notes", ""),
            billable_hours=pick(row, "billable_hours", "billableHours", 0),
            status=pick(row, "status", "entryStatus", TimeEntryStatus.DRAFT.value)
        )
        created_at = pick(row, "created_at", "createdAt")
        updated_at = pick(row, "last_modified", "lastModified", pick(row, "updated_at", "updatedAt"))
        if created_at is not None:
            entry.created_at = parse_timestamp(created_at, self.tz)
        if updated_at is not None:
            entry.updated_at = parse_timestamp(updated_at, self.tz)
        return entry

    def _resolve(self, value: Any) -> Any:
        if value is None:
            return None
        try:
            return parse_timestamp(value, self.tz)
        except InvalidInputError:
            return value
