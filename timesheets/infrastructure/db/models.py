"""
SQLAlchemy models for the database.
Maps domain entities to database tables. Timestamps are stored as naive UTC.
"""

from datetime import datetime, timezone

from sqlalchemy import (
    Column, Integer, String, DateTime, Text, Boolean,
    Numeric, Date, ForeignKey, Index
)

from timesheets.infrastructure.db.database import Base


def _utcnow() -> datetime:
    return datetime.now(timezone.utc).replace(tzinfo=None)


class EmployeeModel(Base):
    """Employee table"""
    __tablename__ = 'employees'

    id = Column(String(64), primary_key=True)
    first_name = Column(String(100), nullable=False)
    last_name = Column(String(100), nullable=False)
    email = Column(String(255), nullable=False, unique=True)
    department = Column(String(100), nullable=False, index=True)
    role = Column(String(100), nullable=False)
    hourly_rate = Column(Numeric(10, 2), nullable=False, default=0)
    is_active = Column(Boolean, nullable=False, default=True)
    manager_id = Column(String(64))
    start_date = Column(Date)
    vacation_days = Column(Integer, nullable=False, default=0)
    sick_days = Column(Integer, nullable=False, default=0)

    # Timestamps
    created_at = Column(DateTime, default=_utcnow)
    updated_at = Column(DateTime, default=_utcnow)


class ProjectModel(Base):
    """Project table"""
    __tablename__ = 'projects'

    id = Column(String(64), primary_key=True)
    name = Column(String(255), nullable=False)
    client = Column(String(255))
    budget = Column(Numeric(12, 2), default=0)
    start_date = Column(Date)
    end_date = Column(Date)
    status = Column(String(20), nullable=False, default='active')
    total_hours = Column(Numeric(10, 2), default=0)

    # Timestamps
    created_at = Column(DateTime, default=_utcnow)
    updated_at = Column(DateTime, default=_utcnow)


class TimeEntryModel(Base):
    """Time entry table"""
    __tablename__ = 'time_entries'

    id = Column(Integer, primary_key=True, autoincrement=True)
    employee_id = Column(String(64), ForeignKey('employees.id'), nullable=False)
    project_id = Column(String(64), nullable=False)

    start_time = Column(DateTime, nullable=False)
    end_time = Column(DateTime, nullable=False)
    description = Column(Text, default='')
    billable_hours = Column(Numeric(8, 2), nullable=False, default=0)

    # Approval workflow
    status = Column(String(20), nullable=False, default='draft')
    approved_by = Column(String(64))

    # Timestamps
    created_at = Column(DateTime, default=_utcnow)
    updated_at = Column(DateTime, default=_utcnow)

    __table_args__ = (
        Index('ix_time_entries_employee_start', 'employee_id', 'start_time'),
    )
