"""
Unit tests for employee use cases.
"""

import pytest
from datetime import date
from decimal import Decimal

from timesheets.application.dto.employee_dto import (
    GetEmployeeRequestDTO,
    ListEmployeesRequestDTO,
    RegisterEmployeeRequestDTO
)
from timesheets.application.use_cases.employee_use_cases import (
    DeactivateEmployeeUseCase,
    GetEmployeeUseCase,
    ListEmployeesUseCase,
    RegisterEmployeeUseCase
)
from timesheets.domain.validators.employee_validator import EmployeeValidator
from tests.fakes import InMemoryEmployeeRepository, make_employee


class TestEmployeeUseCases:

    def setup_method(self):
        self.repository = InMemoryEmployeeRepository([
            make_employee("E1"),
            make_employee("E2", department="Sales"),
            make_employee("E3", is_active=False),
        ])

    @pytest.mark.asyncio
    async def test_register_employee(self):
        use_case = RegisterEmployeeUseCase(self.repository, EmployeeValidator())

        result = await use_case.execute(RegisterEmployeeRequestDTO(
            id="E9",
            first_name="Grace",
            last_name="Hopper",
            email="grace@example.com",
            department="Engineering",
            role="Admiral",
            hourly_rate=Decimal("90"),
            start_date=date(2024, 2, 1)
        ))

        assert result.success is True
        assert result.data.full_name == "Grace Hopper"
        assert "E9" in self.repository.data

    @pytest.mark.asyncio
    async def test_register_invalid_employee(self):
        use_case = RegisterEmployeeUseCase(self.repository, EmployeeValidator())

        result = await use_case.execute(RegisterEmployeeRequestDTO(id="E9", email="nope"))

        assert result.error_code == "VALIDATION_ERROR"
        assert "Email must be a valid email address" in result.errors
        assert "E9" not in self.repository.data

    @pytest.mark.asyncio
    async def test_register_duplicate(self):
        use_case = RegisterEmployeeUseCase(self.repository, EmployeeValidator())
        existing = make_employee("E1")

        result = await use_case.execute(RegisterEmployeeRequestDTO(
            id=existing.id,
            first_name=existing.first_name,
            last_name=existing.last_name,
            email=existing.email,
            department=existing.department,
            role=existing.role,
            hourly_rate=existing.hourly_rate,
            start_date=existing.start_date
        ))

        assert result.error_code == "DUPLICATE_EMPLOYEE"

    @pytest.mark.asyncio
    async def test_get_employee(self):
        result = await GetEmployeeUseCase(self.repository).execute(GetEmployeeRequestDTO(id="E2"))

        assert result.data.department == "Sales"

    @pytest.mark.asyncio
    async def test_get_missing_employee(self):
        result = await GetEmployeeUseCase(self.repository).execute(GetEmployeeRequestDTO(id="E404"))

        assert result.error_code == "NOT_FOUND"

    @pytest.mark.asyncio
    async def test_list_employees(self):
        use_case = ListEmployeesUseCase(self.repository)

        everyone = await use_case.execute(ListEmployeesRequestDTO())
        active_engineers = await use_case.execute(
            ListEmployeesRequestDTO(department="Engineering", include_inactive=False)
        )

        assert [e.id for e in everyone.data.employees] == ["E1", "E2", "E3"]
        assert [e.id for e in active_engineers.data.employees] == ["E1"]

    @pytest.mark.asyncio
    async def test_deactivate_employee(self):
        use_case = DeactivateEmployeeUseCase(self.repository)

        result = await use_case.execute(GetEmployeeRequestDTO(id="E1"))

        assert result.data.is_active is False
        assert self.repository.data["E1"].is_active is False

    @pytest.mark.asyncio
    async def test_deactivate_inactive_employee(self):
        result = await DeactivateEmployeeUseCase(self.repository).execute(GetEmployeeRequestDTO(id="E3"))

        assert result.error_code == "BUSINESS_RULE_VIOLATION"
