"""
Time entry validation rules.
"""

from datetime import datetime, timezone, tzinfo
from decimal import Decimal
from typing import Any, List, Optional

from timesheets.domain.models.base import InvalidInputError
from timesheets.domain.models.time_entry import TimeEntry, TimeEntryStatus
from timesheets.domain.models.value_objects import parse_timestamp
from timesheets.domain.validators.base import ValidationResult, Validator


SECONDS_PER_HOUR = Decimal(3600)


class TimeEntryValidator(Validator[TimeEntry]):
    """Validates a time entry against the entry rules."""

    def __init__(
        self,
        max_entry_hours: Decimal = Decimal("24"),
        max_description_length: int = 500,
        tz: Optional[tzinfo] = None
    ):
        self.max_entry_hours = Decimal(str(max_entry_hours))
        self.max_description_length = max_description_length
        self.tz = tz or timezone.utc

    def validate(self, item: TimeEntry) -> ValidationResult:
        errors: List[str] = []

        if not _has_text(item.employee_id):
            errors.append("Employee ID is required")

        if not _has_text(item.project_id):
            errors.append("Project ID is required")

        start_missing = _is_missing(item.start_time)
        end_missing = _is_missing(item.end_time)
        if start_missing:
            errors.append("Start time is required")
        if end_missing:
            errors.append("End time is required")

        start = None if start_missing else self._as_datetime(item.start_time)
        end = None if end_missing else self._as_datetime(item.end_time)

        if start is not None and end is not None and end <= start:
            errors.append("End time must be after start time")

        if not start_missing and start is None:
            errors.append("Start time is not a valid date")
        if not end_missing and end is None:
            errors.append("End time is not a valid date")

        if start is not None and end is not None and end > start:
            hours = Decimal(str((end - start).total_seconds())) / SECONDS_PER_HOUR
            if hours > self.max_entry_hours:
                errors.append(f"Time entry cannot exceed {self.max_entry_hours:f} hours")

        if item.description and len(item.description) > self.max_description_length:
            errors.append(
                f"Description cannot exceed {self.max_description_length} characters"
            )

        if item.status and item.status not in TimeEntryStatus.values():
            errors.append(f"Status must be one of: {', '.join(TimeEntryStatus.values())}")

        if not isinstance(item.billable_hours, (Decimal, int, float)) or isinstance(item.billable_hours, bool):
            errors.append("Billable hours must be a number")
        elif not Decimal(str(item.billable_hours)).is_finite():
            errors.append("Billable hours must be a number")
        elif item.billable_hours < 0:
            errors.append("Billable hours cannot be negative")

        return ValidationResult(errors=errors)

    def _as_datetime(self, value: Any) -> Optional[datetime]:
        try:
            return parse_timestamp(value, self.tz)
        except InvalidInputError:
            return None


def _has_text(value: Any) -> bool:
    return bool(value) and bool(str(value).strip())


def _is_missing(value: Any) -> bool:
    return value is None or (isinstance(value, str) and not value.strip())
