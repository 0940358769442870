"""
Time Entry use cases for the application layer.
Implements create, update, query, delete, validation and single-entry submission.
"""

import logging
from datetime import timezone, tzinfo
from decimal import Decimal
from typing import Any, Optional

from timesheets.application.dto.base_dto import IdRequestDTO, ValidationResultDTO
from timesheets.application.dto.time_entry_dto import (
    CreateTimeEntryRequestDTO,
    ValidateTimeEntryRequestDTO,
    UpdateTimeEntryRequestDTO,
    ListTimeEntriesRequestDTO,
    SubmitTimeEntryRequestDTO,
    TimeEntryResponseDTO,
    TimeEntryListResponseDTO
)
from timesheets.application.use_cases.base_use_case import CommandUseCase, QueryUseCase
from timesheets.application.use_cases.locks import WeekLockRegistry
from timesheets.domain.models.base import (
    BusinessRuleViolation,
    EntityNotFoundError,
    InvalidInputError,
    RepositoryError,
    ValidationError
)
from timesheets.domain.models.time_entry import TimeEntry, TimeEntryStatus
from timesheets.domain.models.value_objects import WeekRange, parse_timestamp
from timesheets.domain.repositories.project_repository import ProjectRepository
from timesheets.domain.repositories.time_entry_repository import TimeEntryRepository
from timesheets.domain.services.hours_calculator import HoursCalculator
from timesheets.domain.validators.base import Validator


logger = logging.getLogger(__name__)

LOCKED_STATUSES = (TimeEntryStatus.SUBMITTED.value, TimeEntryStatus.APPROVED.value)


def resolve_timestamp(value: Any, tz: tzinfo) -> Any:
    """
    Interpret a request timestamp in the reference time zone.
    Unparseable values pass through untouched for the validator to report.
    """
    if value is None:
        return None
    try:
        return parse_timestamp(value, tz)
    except InvalidInputError:
        return value


def raise_if_invalid(validator: Validator[TimeEntry], entry: TimeEntry) -> None:
    result = validator.validate(entry)
    if not result.is_valid:
        raise ValidationError(
            f"Validation failed: {', '.join(result.errors)}",
            errors=result.errors
        )


def to_response(entry: TimeEntry, hours_calculator: HoursCalculator) -> TimeEntryResponseDTO:
    return TimeEntryResponseDTO.from_entity(
        entry,
        hours_calculator.elapsed_hours(entry.start_time, entry.end_time)
    )


def entry_week(entry: TimeEntry, tz: tzinfo) -> Optional[WeekRange]:
    """Week an entry belongs to by its start time, or None when the start is unusable."""
    try:
        return WeekRange.containing(parse_timestamp(entry.start_time, tz), tz)
    except InvalidInputError:
        return None


async def find_entry_or_raise(repository: TimeEntryRepository, entry_id: int) -> TimeEntry:
    entry = await repository.find_by_id(entry_id)
    if not entry:
        raise EntityNotFoundError("Time entry", entry_id)
    return entry


async def ensure_project_active(
    project_repository: Optional[ProjectRepository],
    project_id: str
) -> None:
    """Check the project exists and accepts time, when projects are tracked at all."""
    if not project_repository:
        return
    project = await project_repository.find_by_id(project_id)
    if not project:
        raise EntityNotFoundError("Project", project_id)
    if not project.is_active:
        raise ValidationError(f"Project {project_id} is not active", field="project_id")


class CreateTimeEntryUseCase(CommandUseCase[CreateTimeEntryRequestDTO, TimeEntryResponseDTO]):
    """Use case for manual time entry creation."""

    def __init__(
        self,
        time_entry_repository: TimeEntryRepository,
        validator: Validator[TimeEntry],
        hours_calculator: HoursCalculator,
        project_repository: Optional[ProjectRepository] = None
    ):
        super().__init__()
        self.time_entry_repository = time_entry_repository
        self.validator = validator
        self.hours_calculator = hours_calculator
        self.project_repository = project_repository

    async def _execute_command_logic(self, request: CreateTimeEntryRequestDTO) -> TimeEntryResponseDTO:
        tz = self.hours_calculator.tz
        entry = TimeEntry(
            employee_id=request.employee_id,
            project_id=request.project_id,
            start_time=resolve_timestamp(request.start_time, tz),
            end_time=resolve_timestamp(request.end_time, tz),
            description=request.description or "",
            billable_hours=request.billable_hours if request.billable_hours is not None else 0
        )

        raise_if_invalid(self.validator, entry)
        await ensure_project_active(self.project_repository, entry.project_id)

        # Billable hours default to the quarter-rounded time range
        if request.billable_hours is None:
            entry.billable_hours = self.hours_calculator.billable_hours(entry.start_time, entry.end_time)

        saved_entry = await self.time_entry_repository.save(entry)
        logger.info(
            f"Created time entry {saved_entry.id} for employee {saved_entry.employee_id} "
            f"on project {saved_entry.project_id}"
        )
        return to_response(saved_entry, self.hours_calculator)


class UpdateTimeEntryUseCase(CommandUseCase[UpdateTimeEntryRequestDTO, TimeEntryResponseDTO]):
    """
    Use case for editing a draft or rejected entry.
    Submitted and approved entries are read-only.
    """

    def __init__(
        self,
        time_entry_repository: TimeEntryRepository,
        validator: Validator[TimeEntry],
        hours_calculator: HoursCalculator,
        week_locks: WeekLockRegistry,
        project_repository: Optional[ProjectRepository] = None
    ):
        super().__init__()
        self.time_entry_repository = time_entry_repository
        self.validator = validator
        self.hours_calculator = hours_calculator
        self.week_locks = week_locks
        self.project_repository = project_repository

    async def _execute_command_logic(self, request: UpdateTimeEntryRequestDTO) -> TimeEntryResponseDTO:
        tz = self.hours_calculator.tz
        entry = await find_entry_or_raise(self.time_entry_repository, request.id)
        week = entry_week(entry, tz)

        async with self.week_locks.hold(entry.employee_id, week):
            # Re-read under the lock so a concurrent submission is seen
            entry = await find_entry_or_raise(self.time_entry_repository, request.id)
            if entry.status in LOCKED_STATUSES:
                raise BusinessRuleViolation(
                    f"Cannot edit a time entry that is {entry.status}",
                    "INVALID_TRANSITION"
                )

            if request.project_id is not None:
                entry.project_id = request.project_id
            if request.start_time is not None:
                entry.start_time = resolve_timestamp(request.start_time, tz)
            if request.end_time is not None:
                entry.end_time = resolve_timestamp(request.end_time, tz)
            if request.description is not None:
                entry.description = request.description
            if request.billable_hours is not None:
                entry.billable_hours = request.billable_hours

            raise_if_invalid(self.validator, entry)
            if request.project_id is not None:
                await ensure_project_active(self.project_repository, entry.project_id)

            entry.mark_as_updated()
            updated_entry = await self.time_entry_repository.save(entry)

        return to_response(updated_entry, self.hours_calculator)


class GetTimeEntryUseCase(QueryUseCase[IdRequestDTO, TimeEntryResponseDTO]):
    """Use case for fetching one entry."""

    def __init__(self, time_entry_repository: TimeEntryRepository, hours_calculator: HoursCalculator):
        self.time_entry_repository = time_entry_repository
        self.hours_calculator = hours_calculator

    async def _execute_business_logic(self, request: IdRequestDTO) -> TimeEntryResponseDTO:
        entry = await find_entry_or_raise(self.time_entry_repository, request.id)
        return to_response(entry, self.hours_calculator)


class ListTimeEntriesUseCase(QueryUseCase[ListTimeEntriesRequestDTO, TimeEntryListResponseDTO]):
    """Use case for listing an employee's entries, optionally for a single week."""

    def __init__(self, time_entry_repository: TimeEntryRepository, hours_calculator: HoursCalculator):
        self.time_entry_repository = time_entry_repository
        self.hours_calculator = hours_calculator

    async def _execute_business_logic(self, request: ListTimeEntriesRequestDTO) -> TimeEntryListResponseDTO:
        week = None
        if request.week_of is not None:
            week = WeekRange.containing(request.week_of, self.hours_calculator.tz)

        entries = await self.time_entry_repository.find_by_employee(request.employee_id, week)
        responses = [to_response(entry, self.hours_calculator) for entry in entries]

        return TimeEntryListResponseDTO(
            employee_id=request.employee_id,
            entries=responses,
            total_hours=sum((r.hours for r in responses), Decimal("0"))
        )


class DeleteTimeEntryUseCase(CommandUseCase[IdRequestDTO, bool]):
    """Use case for deleting an entry."""

    def __init__(
        self,
        time_entry_repository: TimeEntryRepository,
        week_locks: WeekLockRegistry,
        tz: Optional[tzinfo] = None
    ):
        super().__init__()
        self.time_entry_repository = time_entry_repository
        self.week_locks = week_locks
        self.tz = tz or timezone.utc

    async def _execute_command_logic(self, request: IdRequestDTO) -> bool:
        entry = await find_entry_or_raise(self.time_entry_repository, request.id)
        week = entry_week(entry, self.tz)

        async with self.week_locks.hold(entry.employee_id, week):
            await self.time_entry_repository.delete(request.id)

        logger.info(f"Deleted time entry {request.id}")
        return True


class ValidateTimeEntryUseCase(QueryUseCase[ValidateTimeEntryRequestDTO, ValidationResultDTO]):
    """
    Use case for checking an entry payload against every rule without saving.
    Always succeeds; the verdict is in the response.
    """

    def __init__(self, validator: Validator[TimeEntry], tz: Optional[tzinfo] = None):
        self.validator = validator
        self.tz = tz or timezone.utc

    async def _execute_business_logic(self, request: ValidateTimeEntryRequestDTO) -> ValidationResultDTO:
        entry = TimeEntry(
            employee_id=request.employee_id,
            project_id=request.project_id,
            start_time=resolve_timestamp(request.start_time, self.tz),
            end_time=resolve_timestamp(request.end_time, self.tz),
            description=request.description or "",
            billable_hours=request.billable_hours if request.billable_hours is not None else 0
        )
        if request.status is not None:
            entry.status = request.status

        result = self.validator.validate(entry)
        return ValidationResultDTO(is_valid=result.is_valid, errors=result.errors)


class SubmitTimeEntryUseCase(CommandUseCase[SubmitTimeEntryRequestDTO, TimeEntryResponseDTO]):
    """
    Use case for submitting one entry.
    The status change and its persistence happen together or not at all.
    """

    def __init__(
        self,
        time_entry_repository: TimeEntryRepository,
        validator: Validator[TimeEntry],
        hours_calculator: HoursCalculator,
        week_locks: WeekLockRegistry
    ):
        super().__init__()
        self.time_entry_repository = time_entry_repository
        self.validator = validator
        self.hours_calculator = hours_calculator
        self.week_locks = week_locks

    async def _execute_command_logic(self, request: SubmitTimeEntryRequestDTO) -> TimeEntryResponseDTO:
        tz = self.hours_calculator.tz
        entry = await find_entry_or_raise(self.time_entry_repository, request.id)
        week = entry_week(entry, tz)

        async with self.week_locks.hold(entry.employee_id, week):
            entry = await find_entry_or_raise(self.time_entry_repository, request.id)
            previous = entry.snapshot()
            entry.submit(self.validator)

            try:
                saved_entry = await self.time_entry_repository.save(entry)
            except RepositoryError:
                entry.restore(previous)
                logger.error(f"Failed to persist submission of time entry {entry.id}")
                raise
            except Exception as exc:
                entry.restore(previous)
                raise RepositoryError("save", entry.id, exc) from exc

        logger.info(f"Submitted time entry {saved_entry.id}")
        return to_response(saved_entry, self.hours_calculator)
