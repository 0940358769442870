"""
Timesheet use cases for the application layer.
Submission, approval and rejection of an employee's week as one unit.
"""

import logging
from datetime import timezone, tzinfo
from typing import Callable, List, Optional, Tuple

from timesheets.application.dto.timesheet_dto import (
    SubmitTimesheetRequestDTO,
    ApproveTimesheetRequestDTO,
    RejectTimesheetRequestDTO,
    TimesheetActionResponseDTO
)
from timesheets.application.use_cases.base_use_case import CommandUseCase
from timesheets.application.use_cases.locks import WeekLockRegistry
from timesheets.domain.events.base import EventDispatcher
from timesheets.domain.events.timesheet_events import (
    TimesheetSubmitted,
    TimesheetApproved,
    TimesheetRejected,
    OvertimeDetected
)
from timesheets.domain.models.base import (
    AlreadySubmittedError,
    DomainException,
    EntityNotFoundError,
    InactiveEmployeeError,
    NoEntriesError,
    NotAllSubmittedError,
    RepositoryError,
    ValidationError
)
from timesheets.domain.models.employee import Employee
from timesheets.domain.models.time_entry import TimeEntry, resolve_week_status
from timesheets.domain.models.value_objects import WeekRange
from timesheets.domain.repositories.employee_repository import EmployeeRepository
from timesheets.domain.repositories.time_entry_repository import TimeEntryRepository
from timesheets.domain.services.notification_service import NotificationService
from timesheets.domain.services.timesheet_calculator import TimesheetCalculator
from timesheets.domain.validators.base import Validator


logger = logging.getLogger(__name__)


class TimesheetUseCase(CommandUseCase):
    """
    Shared plumbing for week-level commands.
    Every command holds the (employee, week) lock for its whole
    read-validate-write unit, and gates run before the first write.
    """

    def __init__(
        self,
        employee_repository: EmployeeRepository,
        time_entry_repository: TimeEntryRepository,
        week_locks: WeekLockRegistry,
        tz: Optional[tzinfo] = None,
        event_dispatcher: Optional[EventDispatcher] = None
    ):
        super().__init__(event_dispatcher)
        self.employee_repository = employee_repository
        self.time_entry_repository = time_entry_repository
        self.week_locks = week_locks
        self.tz = tz or timezone.utc

    async def _find_employee(self, employee_id: str, label: str = "Employee") -> Employee:
        employee = await self.employee_repository.find_by_id(employee_id)
        if not employee:
            raise EntityNotFoundError(label, employee_id)
        return employee

    async def _find_week_entries(self, employee_id: str, week: WeekRange) -> List[TimeEntry]:
        entries = await self.time_entry_repository.find_by_employee(employee_id, week)
        if not entries:
            raise NoEntriesError()
        return entries

    async def _apply_and_save(
        self,
        entries: List[TimeEntry],
        transition: Callable[[TimeEntry], None]
    ) -> List[TimeEntry]:
        """
        Apply a transition to each entry and persist it.
        If a write fails, entries already written are put back to their
        previous state before the error is raised.
        """
        written: List[Tuple[TimeEntry, dict]] = []

        for entry in entries:
            previous = entry.snapshot()
            try:
                transition(entry)
                await self.time_entry_repository.save(entry)
            except Exception as exc:
                entry.restore(previous)
                await self._compensate(written)
                if isinstance(exc, DomainException):
                    raise
                raise RepositoryError("save", entry.id, exc) from exc
            written.append((entry, previous))

        return [entry for entry, _ in written]

    async def _compensate(self, written: List[Tuple[TimeEntry, dict]]) -> None:
        for entry, previous in reversed(written):
            entry.restore(previous)
            try:
                await self.time_entry_repository.save(entry)
                logger.warning(f"Restored time entry {entry.id} after a failed timesheet write")
            except Exception:
                logger.exception(f"Failed to restore time entry {entry.id}")

    def _response(
        self,
        employee_id: str,
        week: WeekRange,
        entries: List[TimeEntry],
        updated: List[TimeEntry],
        **extra
    ) -> TimesheetActionResponseDTO:
        return TimesheetActionResponseDTO(
            employee_id=employee_id,
            week_start=week.first_day,
            week_end=week.last_day,
            status=resolve_week_status(entries),
            updated_entry_ids=[entry.id for entry in updated],
            **extra
        )


class SubmitTimesheetUseCase(TimesheetUseCase):
    """Use case for submitting an employee's week for approval."""

    def __init__(
        self,
        employee_repository: EmployeeRepository,
        time_entry_repository: TimeEntryRepository,
        validator: Validator[TimeEntry],
        calculator: TimesheetCalculator,
        week_locks: WeekLockRegistry,
        notification_service: Optional[NotificationService] = None,
        tz: Optional[tzinfo] = None,
        event_dispatcher: Optional[EventDispatcher] = None
    ):
        super().__init__(employee_repository, time_entry_repository, week_locks, tz, event_dispatcher)
        self.validator = validator
        self.calculator = calculator
        self.notification_service = notification_service

    async def _execute_command_logic(self, request: SubmitTimesheetRequestDTO) -> TimesheetActionResponseDTO:
        week = WeekRange.containing(request.week_ending_date, self.tz)

        async with self.week_locks.hold(request.employee_id, week):
            employee = await self._find_employee(request.employee_id)
            if not employee.is_active:
                raise InactiveEmployeeError(employee.id)

            entries = await self._find_week_entries(employee.id, week)
            self._ensure_all_valid(entries)

            if all(entry.is_submitted for entry in entries):
                raise AlreadySubmittedError("All entries have already been submitted")

            total_hours = self.calculator.total_hours(entries)
            overtime = self.calculator.overtime(total_hours)
            if overtime > 0:
                logger.warning(f"Overtime detected for employee {employee.id}: {overtime} hours")

            pending = [entry for entry in entries if not entry.is_submitted]
            submitted = await self._apply_and_save(
                pending,
                lambda entry: entry.submit(self.validator)
            )

        logger.info(f"Submitted timesheet for employee {employee.id}, week {week}")

        events = [TimesheetSubmitted(
            employee_id=employee.id,
            week_start=week.first_day,
            week_end=week.last_day,
            total_hours=total_hours,
            submitted_entry_ids=[entry.id for entry in submitted]
        )]
        if overtime > 0:
            events.append(OvertimeDetected(
                employee_id=employee.id,
                week_start=week.first_day,
                total_hours=total_hours,
                threshold_hours=self.calculator.overtime_threshold
            ))
        await self._publish_events(*events)
        await self._notify(employee, week, total_hours)

        return self._response(
            employee.id, week, entries, submitted,
            total_hours=total_hours,
            overtime_hours=overtime
        )

    def _ensure_all_valid(self, entries: List[TimeEntry]) -> None:
        invalid_entries = []
        for entry in entries:
            result = self.validator.validate(entry)
            if not result.is_valid:
                invalid_entries.append(f"Entry {entry.id}: {', '.join(result.errors)}")

        if invalid_entries:
            raise ValidationError(
                f"Cannot submit timesheet with invalid entries: {'; '.join(invalid_entries)}",
                errors=invalid_entries
            )

    async def _notify(self, employee: Employee, week: WeekRange, total_hours) -> None:
        """Best-effort notification; failures never fail the submission."""
        if not self.notification_service:
            return
        try:
            await self.notification_service.notify_timesheet_submitted(employee, week, total_hours)
        except Exception:
            logger.exception(f"Failed to send submission notification to employee {employee.id}")


class ApproveTimesheetUseCase(TimesheetUseCase):
    """Use case for approving a fully submitted week."""

    async def _execute_command_logic(self, request: ApproveTimesheetRequestDTO) -> TimesheetActionResponseDTO:
        week = WeekRange.containing(request.week_ending_date, self.tz)

        async with self.week_locks.hold(request.employee_id, week):
            await self._find_employee(request.approver_id, "Approver")
            entries = await self._find_week_entries(request.employee_id, week)

            if any(not entry.is_submitted for entry in entries):
                raise NotAllSubmittedError()

            approved = await self._apply_and_save(
                entries,
                lambda entry: entry.approve(request.approver_id)
            )

        logger.info(
            f"Approver {request.approver_id} approved timesheet for employee "
            f"{request.employee_id}, week {week}"
        )
        await self._publish_events(TimesheetApproved(
            employee_id=request.employee_id,
            approver_id=request.approver_id,
            week_start=week.first_day,
            entry_count=len(approved)
        ))
        return self._response(request.employee_id, week, entries, approved)


class RejectTimesheetUseCase(TimesheetUseCase):
    """
    Use case for rejecting a week.
    Every entry of the week is rejected, whatever its current status.
    """

    async def _execute_command_logic(self, request: RejectTimesheetRequestDTO) -> TimesheetActionResponseDTO:
        week = WeekRange.containing(request.week_ending_date, self.tz)

        async with self.week_locks.hold(request.employee_id, week):
            await self._find_employee(request.approver_id, "Approver")
            entries = await self._find_week_entries(request.employee_id, week)

            rejected = await self._apply_and_save(
                entries,
                lambda entry: entry.mark_rejected(request.reason)
            )

        logger.info(
            f"Approver {request.approver_id} rejected timesheet for employee "
            f"{request.employee_id}, week {week}: {request.reason}"
        )
        await self._publish_events(TimesheetRejected(
            employee_id=request.employee_id,
            approver_id=request.approver_id,
            week_start=week.first_day,
            reason=request.reason,
            entry_count=len(rejected)
        ))
        return self._response(request.employee_id, week, entries, rejected)
