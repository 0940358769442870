"""
Employee use cases for the application layer.
"""

import logging

from timesheets.application.dto.employee_dto import (
    RegisterEmployeeRequestDTO,
    GetEmployeeRequestDTO,
    ListEmployeesRequestDTO,
    EmployeeResponseDTO,
    EmployeeListResponseDTO
)
from timesheets.application.use_cases.base_use_case import CommandUseCase, QueryUseCase
from timesheets.domain.models.base import BusinessRuleViolation, EntityNotFoundError, ValidationError
from timesheets.domain.models.employee import Employee
from timesheets.domain.repositories.employee_repository import EmployeeRepository
from timesheets.domain.validators.base import Validator


logger = logging.getLogger(__name__)


class RegisterEmployeeUseCase(CommandUseCase[RegisterEmployeeRequestDTO, EmployeeResponseDTO]):
    """Use case for registering a new employee."""

    def __init__(self, employee_repository: EmployeeRepository, validator: Validator[Employee]):
        super().__init__()
        self.employee_repository = employee_repository
        self.validator = validator

    async def _execute_command_logic(self, request: RegisterEmployeeRequestDTO) -> EmployeeResponseDTO:
        employee = Employee(**request.model_dump())

        result = self.validator.validate(employee)
        if not result.is_valid:
            raise ValidationError(
                f"Validation failed: {', '.join(result.errors)}",
                errors=result.errors
            )

        if await self.employee_repository.find_by_id(employee.id):
            raise BusinessRuleViolation(f"Employee {employee.id} already exists", "DUPLICATE_EMPLOYEE")

        saved = await self.employee_repository.save(employee)
        logger.info(f"Registered employee {saved.id} in {saved.department}")
        return EmployeeResponseDTO.from_entity(saved)


class GetEmployeeUseCase(QueryUseCase[GetEmployeeRequestDTO, EmployeeResponseDTO]):
    """Use case for fetching one employee."""

    def __init__(self, employee_repository: EmployeeRepository):
        self.employee_repository = employee_repository

    async def _execute_business_logic(self, request: GetEmployeeRequestDTO) -> EmployeeResponseDTO:
        employee = await self.employee_repository.find_by_id(request.id)
        if not employee:
            raise EntityNotFoundError("Employee", request.id)
        return EmployeeResponseDTO.from_entity(employee)


class ListEmployeesUseCase(QueryUseCase[ListEmployeesRequestDTO, EmployeeListResponseDTO]):
    """Use case for listing employees, optionally for one department."""

    def __init__(self, employee_repository: EmployeeRepository):
        self.employee_repository = employee_repository

    async def _execute_business_logic(self, request: ListEmployeesRequestDTO) -> EmployeeListResponseDTO:
        employees = await self.employee_repository.find_all()
        if request.department is not None:
            employees = [e for e in employees if e.department == request.department]
        if not request.include_inactive:
            employees = [e for e in employees if e.is_active]
        return EmployeeListResponseDTO(
            employees=[EmployeeResponseDTO.from_entity(e) for e in employees]
        )


class DeactivateEmployeeUseCase(CommandUseCase[GetEmployeeRequestDTO, EmployeeResponseDTO]):
    """Use case for soft-deleting an employee."""

    def __init__(self, employee_repository: EmployeeRepository):
        super().__init__()
        self.employee_repository = employee_repository

    async def _execute_command_logic(self, request: GetEmployeeRequestDTO) -> EmployeeResponseDTO:
        employee = await self.employee_repository.find_by_id(request.id)
        if not employee:
            raise EntityNotFoundError("Employee", request.id)

        employee.deactivate()
        saved = await self.employee_repository.save(employee)
        logger.info(f"Deactivated employee {saved.id}")
        return EmployeeResponseDTO.from_entity(saved)
