"""
Unit tests for time entry use cases.
"""

import pytest
from datetime import datetime, timezone
from decimal import Decimal
from zoneinfo import ZoneInfo

from pydantic import ValidationError as PydanticValidationError

from timesheets.application.dto.base_dto import IdRequestDTO
from timesheets.application.dto.time_entry_dto import (
    CreateTimeEntryRequestDTO,
    ListTimeEntriesRequestDTO,
    SubmitTimeEntryRequestDTO,
    UpdateTimeEntryRequestDTO,
    ValidateTimeEntryRequestDTO
)
from timesheets.application.use_cases.locks import WeekLockRegistry
from timesheets.application.use_cases.time_entry_use_cases import (
    CreateTimeEntryUseCase,
    DeleteTimeEntryUseCase,
    GetTimeEntryUseCase,
    ListTimeEntriesUseCase,
    SubmitTimeEntryUseCase,
    UpdateTimeEntryUseCase,
    ValidateTimeEntryUseCase
)
from timesheets.domain.models.project import Project
from timesheets.domain.models.time_entry import TimeEntryStatus
from timesheets.domain.services.hours_calculator import HoursCalculator
from timesheets.domain.validators.time_entry_validator import TimeEntryValidator
from tests.fakes import InMemoryProjectRepository, InMemoryTimeEntryRepository, make_entry


def create_request(**overrides):
    data = dict(
        employee_id="E1",
        project_id="P1",
        start_time="2024-01-08T09:00:00Z",
        end_time="2024-01-08T17:10:00Z",
        description="Sprint work"
    )
    data.update(overrides)
    return CreateTimeEntryRequestDTO(**data)


class TestCreateTimeEntryUseCase:
    """Test cases for manual entry creation."""

    def setup_method(self):
        self.repository = InMemoryTimeEntryRepository()
        self.projects = InMemoryProjectRepository([
            Project(id="P1", name="Website"),
            Project(id="P2", name="Legacy", status="completed"),
        ])
        self.use_case = CreateTimeEntryUseCase(
            self.repository, TimeEntryValidator(), HoursCalculator(), self.projects
        )

    @pytest.mark.asyncio
    async def test_create_computes_billable_hours(self):
        result = await self.use_case.execute(create_request())

        assert result.success is True
        assert result.data.id == 1
        assert result.data.status == "draft"
        # 8h10m rounds to the nearest quarter
        assert result.data.billable_hours == Decimal("8.25")
        assert result.data.hours == Decimal("8.17")
        assert self.repository.data[1].billable_hours == Decimal("8.25")

    @pytest.mark.asyncio
    async def test_explicit_zero_billable_hours_is_kept(self):
        result = await self.use_case.execute(create_request(billable_hours=Decimal("0")))

        assert result.data.billable_hours == Decimal("0")

    @pytest.mark.asyncio
    async def test_explicit_billable_hours_are_independent(self):
        result = await self.use_case.execute(create_request(billable_hours=Decimal("3.5")))

        assert result.data.billable_hours == Decimal("3.5")

    @pytest.mark.asyncio
    async def test_invalid_entry_reports_all_errors(self):
        result = await self.use_case.execute(create_request(
            employee_id="",
            start_time="2024-01-08T17:00:00Z",
            end_time="2024-01-08T09:00:00Z"
        ))

        assert result.success is False
        assert result.error_code == "VALIDATION_ERROR"
        assert result.errors == ["Employee ID is required", "End time must be after start time"]
        assert result.error.startswith("Validation failed: ")
        assert self.repository.data == {}

    @pytest.mark.asyncio
    async def test_unknown_project(self):
        result = await self.use_case.execute(create_request(project_id="P9"))

        assert result.error_code == "NOT_FOUND"
        assert self.repository.data == {}

    @pytest.mark.asyncio
    async def test_inactive_project(self):
        result = await self.use_case.execute(create_request(project_id="P2"))

        assert result.error_code == "VALIDATION_ERROR"
        assert self.repository.data == {}

    @pytest.mark.asyncio
    async def test_naive_times_use_reference_zone(self):
        tz = ZoneInfo("Europe/Madrid")
        use_case = CreateTimeEntryUseCase(self.repository, TimeEntryValidator(tz=tz), HoursCalculator(tz))

        result = await use_case.execute(create_request(
            start_time="2024-01-08T09:00:00",
            end_time="2024-01-08T10:00:00"
        ))

        assert result.data.start_time == datetime(2024, 1, 8, 8, tzinfo=timezone.utc)

    def test_unknown_request_field_is_rejected(self):
        with pytest.raises(PydanticValidationError):
            CreateTimeEntryRequestDTO(employee_id="E1", color="blue")


class TestUpdateTimeEntryUseCase:

    def setup_method(self):
        self.repository = InMemoryTimeEntryRepository()
        self.draft, self.submitted = self.repository.add(
            make_entry("2024-01-08T09:00:00Z", "2024-01-08T17:00:00Z"),
            make_entry("2024-01-09T09:00:00Z", "2024-01-09T17:00:00Z", status="submitted"),
        )
        self.use_case = UpdateTimeEntryUseCase(
            self.repository, TimeEntryValidator(), HoursCalculator(), WeekLockRegistry()
        )

    @pytest.mark.asyncio
    async def test_update_draft(self):
        result = await self.use_case.execute(UpdateTimeEntryRequestDTO(
            id=self.draft.id,
            description="Code review",
            billable_hours=Decimal("6")
        ))

        assert result.success is True
        assert self.repository.data[self.draft.id].description == "Code review"
        assert self.repository.data[self.draft.id].billable_hours == Decimal("6")

    @pytest.mark.asyncio
    async def test_update_rejected_entry(self):
        self.repository.data[self.draft.id].status = TimeEntryStatus.REJECTED.value

        result = await self.use_case.execute(UpdateTimeEntryRequestDTO(id=self.draft.id, description="Fixed"))

        assert result.success is True

    @pytest.mark.asyncio
    async def test_submitted_entry_is_read_only(self):
        result = await self.use_case.execute(UpdateTimeEntryRequestDTO(id=self.submitted.id, description="x"))

        assert result.error_code == "INVALID_TRANSITION"
        assert self.repository.data[self.submitted.id].description == "Work"

    @pytest.mark.asyncio
    async def test_invalid_update_is_not_saved(self):
        result = await self.use_case.execute(UpdateTimeEntryRequestDTO(
            id=self.draft.id,
            end_time="2024-01-08T08:00:00Z"
        ))

        assert result.error_code == "VALIDATION_ERROR"
        assert self.repository.save_calls == 0

    @pytest.mark.asyncio
    async def test_missing_entry(self):
        result = await self.use_case.execute(UpdateTimeEntryRequestDTO(id=99, description="x"))

        assert result.error_code == "NOT_FOUND"
        assert result.error == "Time entry with ID 99 not found"


class TestQueryTimeEntryUseCases:

    def setup_method(self):
        self.repository = InMemoryTimeEntryRepository()
        self.repository.add(
            make_entry("2024-01-09T09:00:00Z", "2024-01-09T12:00:00Z"),
            make_entry("2024-01-08T09:00:00Z", "2024-01-08T17:00:00Z"),
            make_entry("2024-01-15T09:00:00Z", "2024-01-15T10:00:00Z"),
            make_entry("2024-01-08T09:00:00Z", "2024-01-08T10:00:00Z", employee_id="E2"),
        )
        self.calculator = HoursCalculator()

    @pytest.mark.asyncio
    async def test_get_entry(self):
        result = await GetTimeEntryUseCase(self.repository, self.calculator).execute(IdRequestDTO(id=2))

        assert result.data.hours == Decimal("8.00")
        assert result.data.employee_id == "E1"

    @pytest.mark.asyncio
    async def test_get_missing_entry(self):
        result = await GetTimeEntryUseCase(self.repository, self.calculator).execute(IdRequestDTO(id=42))

        assert result.error_code == "NOT_FOUND"

    @pytest.mark.asyncio
    async def test_list_week_ordered_by_start(self):
        use_case = ListTimeEntriesUseCase(self.repository, self.calculator)

        result = await use_case.execute(ListTimeEntriesRequestDTO(employee_id="E1", week_of="2024-01-10"))

        assert [entry.id for entry in result.data.entries] == [2, 1]
        assert result.data.total_hours == Decimal("11")

    @pytest.mark.asyncio
    async def test_list_all_weeks(self):
        use_case = ListTimeEntriesUseCase(self.repository, self.calculator)

        result = await use_case.execute(ListTimeEntriesRequestDTO(employee_id="E1"))

        assert len(result.data.entries) == 3

    @pytest.mark.asyncio
    async def test_delete_entry(self):
        use_case = DeleteTimeEntryUseCase(self.repository, WeekLockRegistry())

        result = await use_case.execute(IdRequestDTO(id=1))

        assert result.success is True
        assert result.data is True
        assert 1 not in self.repository.data

    @pytest.mark.asyncio
    async def test_delete_missing_entry(self):
        result = await DeleteTimeEntryUseCase(self.repository, WeekLockRegistry()).execute(IdRequestDTO(id=77))

        assert result.error_code == "NOT_FOUND"


class TestValidateTimeEntryUseCase:

    @pytest.mark.asyncio
    async def test_verdict_is_returned_not_raised(self):
        use_case = ValidateTimeEntryUseCase(TimeEntryValidator())

        result = await use_case.execute(ValidateTimeEntryRequestDTO(
            employee_id="E1",
            project_id="P1",
            start_time="2024-01-08T09:00:00Z",
            end_time="not a time",
            status="archived"
        ))

        assert result.success is True
        assert result.data.is_valid is False
        assert result.data.errors == [
            "End time is not a valid date",
            "Status must be one of: draft, submitted, approved, rejected",
        ]

    @pytest.mark.asyncio
    async def test_valid_payload(self):
        result = await ValidateTimeEntryUseCase(TimeEntryValidator()).execute(ValidateTimeEntryRequestDTO(
            employee_id="E1",
            project_id="P1",
            start_time="2024-01-08T09:00:00Z",
            end_time="2024-01-08T10:00:00Z"
        ))

        assert result.data.is_valid is True


class TestSubmitTimeEntryUseCase:
    """Test cases for single-entry submission."""

    def setup_method(self):
        self.repository = InMemoryTimeEntryRepository()
        self.entry, self.invalid = self.repository.add(
            make_entry("2024-01-08T09:00:00Z", "2024-01-08T17:00:00Z"),
            make_entry("2024-01-08T17:00:00Z", "2024-01-08T09:00:00Z"),
        )
        self.use_case = SubmitTimeEntryUseCase(
            self.repository, TimeEntryValidator(), HoursCalculator(), WeekLockRegistry()
        )

    @pytest.mark.asyncio
    async def test_submit(self):
        result = await self.use_case.execute(SubmitTimeEntryRequestDTO(id=self.entry.id))

        assert result.success is True
        assert result.data.status == "submitted"
        assert self.repository.data[self.entry.id].status == "submitted"

    @pytest.mark.asyncio
    async def test_submit_twice(self):
        await self.use_case.execute(SubmitTimeEntryRequestDTO(id=self.entry.id))

        result = await self.use_case.execute(SubmitTimeEntryRequestDTO(id=self.entry.id))

        assert result.error_code == "ALREADY_SUBMITTED"
        assert self.repository.save_calls == 1

    @pytest.mark.asyncio
    async def test_submit_invalid_entry(self):
        result = await self.use_case.execute(SubmitTimeEntryRequestDTO(id=self.invalid.id))

        assert result.error_code == "VALIDATION_ERROR"
        assert "End time must be after start time" in result.errors
        assert self.repository.data[self.invalid.id].status == "draft"

    @pytest.mark.asyncio
    async def test_storage_failure_leaves_entry_unchanged(self):
        self.repository.fail_on_save_number = 1

        result = await self.use_case.execute(SubmitTimeEntryRequestDTO(id=self.entry.id))

        assert result.error_code == "REPOSITORY_ERROR"
        assert "disk full" in result.error
        assert self.repository.data[self.entry.id].status == "draft"
