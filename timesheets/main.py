"""
Composition root.
Configures logging and wires repositories, domain services and use cases together.
"""

import logging
from dataclasses import dataclass
from typing import Optional

from sqlalchemy.orm import Session

from timesheets.config import Settings, get_settings
from timesheets.application.use_cases import (
    WeekLockRegistry,
    CreateTimeEntryUseCase,
    UpdateTimeEntryUseCase,
    GetTimeEntryUseCase,
    ListTimeEntriesUseCase,
    DeleteTimeEntryUseCase,
    ValidateTimeEntryUseCase,
    SubmitTimeEntryUseCase,
    SubmitTimesheetUseCase,
    ApproveTimesheetUseCase,
    RejectTimesheetUseCase,
    GenerateWeeklyReportUseCase,
    GenerateTimesheetSummaryUseCase,
    GenerateDepartmentReportUseCase,
    GeneratePayrollReportUseCase,
    RegisterEmployeeUseCase,
    GetEmployeeUseCase,
    ListEmployeesUseCase,
    DeactivateEmployeeUseCase
)
from timesheets.domain.events.base import EventDispatcher
from timesheets.domain.services.hours_calculator import HoursCalculator
from timesheets.domain.services.notification_service import NotificationService
from timesheets.domain.services.timesheet_calculator import TimesheetCalculator
from timesheets.domain.validators.employee_validator import EmployeeValidator
from timesheets.domain.validators.time_entry_validator import TimeEntryValidator
from timesheets.infrastructure.db.database import build_engine, build_session_factory, create_all_tables
from timesheets.infrastructure.email import EmailNotificationService
from timesheets.infrastructure.events import setup_event_handlers
from timesheets.infrastructure.repositories import (
    SQLAlchemyEmployeeRepository,
    SQLAlchemyProjectRepository,
    SQLAlchemyTimeEntryRepository
)


logger = logging.getLogger(__name__)

LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'


def configure_logging(settings: Optional[Settings] = None) -> None:
    """Configure root logging from settings."""
    settings = settings or get_settings()
    logging.basicConfig(
        level=logging.DEBUG if settings.debug else getattr(logging, settings.log_level, logging.INFO),
        format=LOG_FORMAT
    )


@dataclass
class Container:
    """Every wired use case, plus the shared collaborators they were built from."""

    settings: Settings
    session: Session
    event_dispatcher: EventDispatcher
    notification_service: NotificationService
    employee_repository: SQLAlchemyEmployeeRepository
    project_repository: SQLAlchemyProjectRepository
    time_entry_repository: SQLAlchemyTimeEntryRepository

    create_time_entry: CreateTimeEntryUseCase
    update_time_entry: UpdateTimeEntryUseCase
    get_time_entry: GetTimeEntryUseCase
    list_time_entries: ListTimeEntriesUseCase
    delete_time_entry: DeleteTimeEntryUseCase
    validate_time_entry: ValidateTimeEntryUseCase
    submit_time_entry: SubmitTimeEntryUseCase

    submit_timesheet: SubmitTimesheetUseCase
    approve_timesheet: ApproveTimesheetUseCase
    reject_timesheet: RejectTimesheetUseCase

    weekly_report: GenerateWeeklyReportUseCase
    timesheet_summary: GenerateTimesheetSummaryUseCase
    department_report: GenerateDepartmentReportUseCase
    payroll_report: GeneratePayrollReportUseCase

    register_employee: RegisterEmployeeUseCase
    get_employee: GetEmployeeUseCase
    list_employees: ListEmployeesUseCase
    deactivate_employee: DeactivateEmployeeUseCase

    def close(self) -> None:
        self.session.close()


def build_container(settings: Optional[Settings] = None, session: Optional[Session] = None) -> Container:
    """
    Build the application object graph.
    Without a session, an engine is created from database_url and the tables are created.
    """
    settings = settings or get_settings()
    tz = settings.tzinfo

    if session is None:
        engine = build_engine(settings.database_url, echo=settings.debug)
        create_all_tables(engine)
        session = build_session_factory(engine)()

    employee_repository = SQLAlchemyEmployeeRepository(session)
    project_repository = SQLAlchemyProjectRepository(session)
    time_entry_repository = SQLAlchemyTimeEntryRepository(session, tz)

    hours_calculator = HoursCalculator(tz)
    calculator = TimesheetCalculator(
        hours_calculator,
        overtime_threshold=settings.overtime_threshold_hours,
        tax_rate=settings.payroll_tax_rate
    )
    entry_validator = TimeEntryValidator(
        max_entry_hours=settings.max_entry_hours,
        max_description_length=settings.max_description_length,
        tz=tz
    )
    employee_validator = EmployeeValidator(max_hourly_rate=settings.max_hourly_rate)
    week_locks = WeekLockRegistry()

    notification_service = EmailNotificationService(settings)
    event_dispatcher = setup_event_handlers(
        EventDispatcher(), employee_repository, notification_service, tz
    )

    report_args = (employee_repository, time_entry_repository, calculator, tz, settings.report_timeout_seconds)
    timesheet_args = (employee_repository, time_entry_repository, week_locks)

    logger.info(f"Application wired for environment {settings.environment} (time zone {settings.timezone})")

    return Container(
        settings=settings,
        session=session,
        event_dispatcher=event_dispatcher,
        notification_service=notification_service,
        employee_repository=employee_repository,
        project_repository=project_repository,
        time_entry_repository=time_entry_repository,
        create_time_entry=CreateTimeEntryUseCase(
            time_entry_repository, entry_validator, hours_calculator, project_repository
        ),
        update_time_entry=UpdateTimeEntryUseCase(
            time_entry_repository, entry_validator, hours_calculator, week_locks, project_repository
        ),
        get_time_entry=GetTimeEntryUseCase(time_entry_repository, hours_calculator),
        list_time_entries=ListTimeEntriesUseCase(time_entry_repository, hours_calculator),
        delete_time_entry=DeleteTimeEntryUseCase(time_entry_repository, week_locks, tz),
        validate_time_entry=ValidateTimeEntryUseCase(entry_validator, tz),
        submit_time_entry=SubmitTimeEntryUseCase(
            time_entry_repository, entry_validator, hours_calculator, week_locks
        ),
        submit_timesheet=SubmitTimesheetUseCase(
            employee_repository, time_entry_repository, entry_validator, calculator, week_locks,
            notification_service=notification_service,
            tz=tz,
            event_dispatcher=event_dispatcher
        ),
        approve_timesheet=ApproveTimesheetUseCase(*timesheet_args, tz=tz, event_dispatcher=event_dispatcher),
        reject_timesheet=RejectTimesheetUseCase(*timesheet_args, tz=tz, event_dispatcher=event_dispatcher),
        weekly_report=GenerateWeeklyReportUseCase(*report_args),
        timesheet_summary=GenerateTimesheetSummaryUseCase(*report_args),
        department_report=GenerateDepartmentReportUseCase(*report_args),
        payroll_report=GeneratePayrollReportUseCase(*report_args),
        register_employee=RegisterEmployeeUseCase(employee_repository, employee_validator),
        get_employee=GetEmployeeUseCase(employee_repository),
        list_employees=ListEmployeesUseCase(employee_repository),
        deactivate_employee=DeactivateEmployeeUseCase(employee_repository)
    )
