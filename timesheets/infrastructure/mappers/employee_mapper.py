"""
Employee mapper for converting between domain entities and database models.
"""

from typing import Any, Mapping

from timesheets.domain.models.employee import Employee
from timesheets.infrastructure.db.models import EmployeeModel
from timesheets.infrastructure.mappers.base_mapper import (
    from_storage_datetime,
    pick,
    to_date,
    to_decimal,
    to_storage_datetime
)


class EmployeeMapper:
    """Maps between Employee domain entity and EmployeeModel database model."""

    def domain_to_model(self, employee: Employee) -> EmployeeModel:
        """Convert Employee domain entity to EmployeeModel."""
        model = EmployeeModel(id=employee.id)
        self.update_model(model, employee)
        return model

    def update_model(self, model: EmployeeModel, employee: Employee) -> None:
        """Copy entity state onto an existing row."""
        model.first_name = employee.first_name
        model.last_name = employee.last_name
        model.email = employee.email
        model.department = employee.department
        model.role = employee.role
        model.hourly_rate = employee.hourly_rate
        model.is_active = employee.is_active
        model.manager_id = employee.manager_id
        model.start_date = employee.start_date
        model.vacation_days = employee.vacation_days
        model.sick_days = employee.sick_days
        model.created_at = to_storage_datetime(employee.created_at)
        model.updated_at = to_storage_datetime(employee.updated_at)

    def model_to_domain(self, model: EmployeeModel) -> Employee:
        """Convert EmployeeModel to Employee domain entity."""
        return Employee(
            id=model.id,
            first_name=model.first_name,
            last_name=model.last_name,
            email=model.email,
            department=model.department,
            role=model.role,
            hourly_rate=to_decimal(model.hourly_rate),
            is_active=bool(model.is_active),
            manager_id=model.manager_id,
            start_date=model.start_date,
            vacation_days=model.vacation_days or 0,
            sick_days=model.sick_days or 0,
            created_at=from_storage_datetime(model.created_at),
            updated_at=from_storage_datetime(model.updated_at)
        )

    def row_to_domain(self, row: Mapping[str, Any]) -> Employee:
        """Build an Employee from a raw row keyed in snake_case or camelCase."""
        is_active = row.get("is_active", row.get("isActive", True))
        return Employee(
            id=str(pick(row, "id", "employeeId", "")),
            first_name=pick(row, "first_name", "firstName", ""),
            last_name=pick(row, "last_name", "lastName", ""),
            email=pick(row, "email", "emailAddress", ""),
            department=pick(row, "department", "dept", ""),
            role=pick(row, "role", "jobRole", ""),
            hourly_rate=to_decimal(pick(row, "hourly_rate", "hourlyRate")),
            is_active=bool(is_active) if not isinstance(is_active, str) else is_active.lower() in ("1", "true", "yes"),
            manager_id=pick(row, "manager_id", "managerId"),
            start_date=to_date(pick(row, "start_date", "startDate")),
            vacation_days=int(pick(row, "vacation_days", "vacationDays", 0)),
            sick_days=int(pick(row, "sick_days", "sickDays", 0))
        )
