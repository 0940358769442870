"""
Employee DTOs for the application layer.
"""

from datetime import date
from decimal import Decimal
from typing import List, Optional

from pydantic import Field

from timesheets.domain.models.employee import Employee
from .base_dto import RequestDTO, ResponseDTO


class EmployeeResponseDTO(ResponseDTO):
    """DTO for employee responses."""

    id: str
    first_name: str
    last_name: str
    full_name: str
    email: str
    department: str
    role: str
    hourly_rate: Decimal
    is_active: bool
    manager_id: Optional[str] = None
    start_date: Optional[date] = None

    @classmethod
    def from_entity(cls, employee: Employee) -> "EmployeeResponseDTO":
        return cls(
            id=employee.id,
            first_name=employee.first_name,
            last_name=employee.last_name,
            full_name=employee.full_name,
            email=employee.email,
            department=employee.department,
            role=employee.role,
            hourly_rate=employee.hourly_rate,
            is_active=employee.is_active,
            manager_id=employee.manager_id,
            start_date=employee.start_date
        )


class RegisterEmployeeRequestDTO(RequestDTO):
    """
    DTO for registering an employee.
    Business rules are checked by the employee validator, not here.
    """

    id: str = Field(default="", description="Employee ID")
    first_name: str = Field(default="")
    last_name: str = Field(default="")
    email: str = Field(default="")
    department: str = Field(default="")
    role: str = Field(default="")
    hourly_rate: Decimal = Field(default=Decimal("0"))
    manager_id: Optional[str] = None
    start_date: Optional[date] = None
    vacation_days: int = 0
    sick_days: int = 0


class GetEmployeeRequestDTO(RequestDTO):
    id: str = Field(min_length=1, description="Employee ID")


class ListEmployeesRequestDTO(RequestDTO):
    """DTO for listing employees."""

    department: Optional[str] = Field(default=None, description="Filter by department")
    include_inactive: bool = Field(default=True)


class EmployeeListResponseDTO(ResponseDTO):
    employees: List[EmployeeResponseDTO] = Field(default_factory=list)
