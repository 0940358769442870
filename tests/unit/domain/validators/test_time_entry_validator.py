"""
Unit tests for TimeEntryValidator.
"""

import pytest
from decimal import Decimal

from timesheets.domain.models.time_entry import TimeEntry
from timesheets.domain.validators.time_entry_validator import TimeEntryValidator
from tests.fakes import make_entry


class TestTimeEntryValidator:
    """Test cases for time entry validation rules."""

    def setup_method(self):
        self.validator = TimeEntryValidator()

    def test_valid_entry(self):
        result = self.validator.validate(make_entry("2024-01-08T09:00:00Z", "2024-01-08T17:00:00Z"))

        assert result.is_valid is True
        assert result.errors == []

    def test_empty_entry_reports_every_required_field(self):
        result = self.validator.validate(TimeEntry())

        assert result.is_valid is False
        assert result.errors == [
            "Employee ID is required",
            "Project ID is required",
            "Start time is required",
            "End time is required",
        ]

    def test_whitespace_ids_are_missing(self):
        entry = make_entry("2024-01-08T09:00:00Z", "2024-01-08T17:00:00Z", employee_id="  ")

        assert self.validator.validate(entry).errors == ["Employee ID is required"]

    def test_end_before_start(self):
        result = self.validator.validate(make_entry("2024-01-08T17:00:00Z", "2024-01-08T09:00:00Z"))

        assert result.errors == ["End time must be after start time"]

    def test_end_equal_to_start(self):
        result = self.validator.validate(make_entry("2024-01-08T09:00:00Z", "2024-01-08T09:00:00Z"))

        assert result.errors == ["End time must be after start time"]

    def test_unparseable_times(self):
        result = self.validator.validate(make_entry("soon", "later"))

        assert result.errors == ["Start time is not a valid date", "End time is not a valid date"]

    def test_entry_longer_than_a_day(self):
        result = self.validator.validate(make_entry("2024-01-08T08:00:00Z", "2024-01-09T08:00:01Z"))

        assert result.errors == ["Time entry cannot exceed 24 hours"]

    def test_exactly_a_day_is_allowed(self):
        result = self.validator.validate(make_entry("2024-01-08T08:00:00Z", "2024-01-09T08:00:00Z"))

        assert result.is_valid is True

    def test_description_length(self):
        ok = make_entry("2024-01-08T09:00:00Z", "2024-01-08T17:00:00Z", description="x" * 500)
        too_long = make_entry("2024-01-08T09:00:00Z", "2024-01-08T17:00:00Z", description="x" * 501)

        assert self.validator.validate(ok).is_valid is True
        assert self.validator.validate(too_long).errors == ["Description cannot exceed 500 characters"]

    def test_unknown_status(self):
        entry = make_entry("2024-01-08T09:00:00Z", "2024-01-08T17:00:00Z", status="paid")

        assert self.validator.validate(entry).errors == [
            "Status must be one of: draft, submitted, approved, rejected"
        ]

    def test_negative_billable_hours(self):
        entry = make_entry("2024-01-08T09:00:00Z", "2024-01-08T17:00:00Z", billable_hours=Decimal("-1"))

        assert self.validator.validate(entry).errors == ["Billable hours cannot be negative"]

    def test_non_numeric_billable_hours(self):
        entry = make_entry("2024-01-08T09:00:00Z", "2024-01-08T17:00:00Z", billable_hours="lots")

        assert self.validator.validate(entry).errors == ["Billable hours must be a number"]

    @pytest.mark.parametrize("hours", [float("nan"), "NaN", Decimal("NaN"), float("inf"), "-Infinity"])
    def test_non_finite_billable_hours(self, hours):
        entry = make_entry("2024-01-08T09:00:00Z", "2024-01-08T17:00:00Z", billable_hours=hours)

        result = self.validator.validate(entry)

        assert result.is_valid is False
        assert result.errors == ["Billable hours must be a number"]

    def test_errors_are_reported_in_rule_order(self):
        entry = TimeEntry(
            project_id="P1",
            start_time="2024-01-08T17:00:00Z",
            end_time="2024-01-08T09:00:00Z",
            description="x" * 501,
            status="unknown",
            billable_hours=Decimal("-2")
        )

        assert self.validator.validate(entry).errors == [
            "Employee ID is required",
            "End time must be after start time",
            "Description cannot exceed 500 characters",
            "Status must be one of: draft, submitted, approved, rejected",
            "Billable hours cannot be negative",
        ]

    def test_validation_does_not_mutate(self):
        entry = make_entry("2024-01-08T17:00:00Z", "2024-01-08T09:00:00Z")
        state = entry.snapshot()

        self.validator.validate(entry)
        self.validator.validate(entry)

        assert entry.snapshot() == state

    def test_configured_limits(self):
        validator = TimeEntryValidator(max_entry_hours=Decimal("10"), max_description_length=5)
        entry = make_entry("2024-01-08T08:00:00Z", "2024-01-08T19:00:00Z", description="too long")

        assert validator.validate(entry).errors == [
            "Time entry cannot exceed 10 hours",
            "Description cannot exceed 5 characters",
        ]
