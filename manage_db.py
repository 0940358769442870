#!/usr/bin/env python3
"""
Database management script for the timesheet tracker.
Handles table creation, reset, and importing raw employee and time entry records.
"""

import asyncio
import json
import sys
from pathlib import Path
from typing import Any, Dict, List

from timesheets.application.dto.report_dto import WeeklyReportRequestDTO
from timesheets.config import get_settings
from timesheets.domain.models.base import DomainException
from timesheets.domain.validators.employee_validator import EmployeeValidator
from timesheets.domain.validators.time_entry_validator import TimeEntryValidator
from timesheets.infrastructure.db.database import (
    build_engine,
    build_session_factory,
    create_all_tables,
    drop_all_tables
)
from timesheets.infrastructure.mappers import EmployeeMapper, TimeEntryMapper
from timesheets.infrastructure.repositories import (
    SQLAlchemyEmployeeRepository,
    SQLAlchemyTimeEntryRepository
)
from timesheets.main import build_container, configure_logging


def load_rows(path: str) -> List[Dict[str, Any]]:
    """Read a JSON array of raw records."""
    rows = json.loads(Path(path).read_text(encoding="utf-8"))
    if not isinstance(rows, list):
        raise ValueError(f"{path} must contain a JSON array")
    return rows


def init_database(database_url: str) -> None:
    """Create every table."""
    engine = build_engine(database_url)
    create_all_tables(engine)
    print(f"Tables created in {database_url}")


def reset_database(database_url: str) -> None:
    """Reset database - WARNING: This will drop all data!"""
    response = input("This will drop ALL data. Type 'yes' to continue: ")
    if response.lower() == 'yes':
        engine = build_engine(database_url)
        drop_all_tables(engine)
        create_all_tables(engine)
        print("Database reset.")
    else:
        print("Database reset cancelled.")


async def import_employees(session, rows: List[Dict[str, Any]]) -> int:
    """Import employee records; invalid ones are reported and skipped."""
    repository = SQLAlchemyEmployeeRepository(session)
    mapper = EmployeeMapper()
    validator = EmployeeValidator(get_settings().max_hourly_rate)
    imported = 0

    for row in rows:
        employee = mapper.row_to_domain(row)
        result = validator.validate(employee)
        if not result.is_valid:
            print(f"Skipping employee {employee.id or '?'}: {', '.join(result.errors)}")
            continue
        await repository.save(employee)
        imported += 1

    return imported


async def import_time_entries(session, rows: List[Dict[str, Any]]) -> int:
    """Import time entry records; invalid ones are reported and skipped."""
    settings = get_settings()
    repository = SQLAlchemyTimeEntryRepository(session, settings.tzinfo)
    mapper = TimeEntryMapper(settings.tzinfo)
    validator = TimeEntryValidator(
        max_entry_hours=settings.max_entry_hours,
        max_description_length=settings.max_description_length,
        tz=settings.tzinfo
    )
    imported = 0

    for row in rows:
        entry = mapper.row_to_domain(row)
        # Imported rows get fresh identifiers
        entry.id = None
        result = validator.validate(entry)
        if not result.is_valid:
            print(f"Skipping entry for employee {entry.employee_id or '?'}: {', '.join(result.errors)}")
            continue
        try:
            await repository.save(entry)
        except DomainException as e:
            print(f"Skipping entry for employee {entry.employee_id}: {e.message}")
            continue
        imported += 1

    return imported


async def print_weekly_report(employee_id: str, week_of: str) -> None:
    container = build_container()
    try:
        result = await container.weekly_report.execute(
            WeeklyReportRequestDTO(employee_id=employee_id, week_of=week_of)
        )
    finally:
        container.close()

    if result.success:
        print(result.data.model_dump_json(indent=2))
    else:
        print(f"{result.error_code}: {result.error}")


def run_import(database_url: str, kind: str, path: str) -> None:
    engine = build_engine(database_url)
    create_all_tables(engine)
    session = build_session_factory(engine)()
    try:
        rows = load_rows(path)
        if kind == "employees":
            count = asyncio.run(import_employees(session, rows))
        else:
            count = asyncio.run(import_time_entries(session, rows))
        print(f"Imported {count} of {len(rows)} {kind}")
    finally:
        session.close()


def main():
    """Main CLI function."""
    if len(sys.argv) < 2:
        print("Usage: python manage_db.py [command]")
        print("Commands:")
        print("  init                         - Create all tables")
        print("  reset                        - Reset database (WARNING: drops all data)")
        print("  import-employees [file]      - Import employees from a JSON array")
        print("  import-entries [file]        - Import time entries from a JSON array")
        print("  weekly-report [id] [date]    - Print an employee's weekly report")
        return

    settings = get_settings()
    configure_logging(settings)
    command_name = sys.argv[1]

    if command_name == "init":
        init_database(settings.database_url)
    elif command_name == "reset":
        reset_database(settings.database_url)
    elif command_name in ("import-employees", "import-entries") and len(sys.argv) > 2:
        kind = "employees" if command_name == "import-employees" else "entries"
        run_import(settings.database_url, kind, sys.argv[2])
    elif command_name == "weekly-report" and len(sys.argv) > 3:
        asyncio.run(print_weekly_report(sys.argv[2], sys.argv[3]))
    else:
        print(f"Unknown command or missing arguments: {command_name}")


if __name__ == "__main__":
    main()
