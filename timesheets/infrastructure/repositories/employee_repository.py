"""
Employee repository implementation using SQLAlchemy.
"""

import logging
from typing import List, Optional

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from timesheets.domain.models.base import RepositoryError
from timesheets.domain.models.employee import Employee
from timesheets.domain.repositories.employee_repository import EmployeeRepository as EmployeeRepositoryInterface
from timesheets.infrastructure.db.models import EmployeeModel
from timesheets.infrastructure.mappers.employee_mapper import EmployeeMapper


logger = logging.getLogger(__name__)


class SQLAlchemyEmployeeRepository(EmployeeRepositoryInterface):
    """SQLAlchemy implementation of employee repository."""

    def __init__(self, session: Session):
        self.session = session
        self.mapper = EmployeeMapper()

    async def find_by_id(self, employee_id: str) -> Optional[Employee]:
        """Get employee by ID."""
        try:
            model = self.session.get(EmployeeModel, employee_id)
        except SQLAlchemyError as e:
            raise RepositoryError("find_by_id", employee_id, e) from e
        if not model:
            return None
        return self.mapper.model_to_domain(model)

    async def find_all(self) -> List[Employee]:
        """Get every employee, active or not, in a stable order."""
        try:
            models = self.session.query(EmployeeModel).order_by(EmployeeModel.id).all()
        except SQLAlchemyError as e:
            raise RepositoryError("find_all", "employees", e) from e
        return [self.mapper.model_to_domain(model) for model in models]

    async def save(self, employee: Employee) -> Employee:
        """Insert or update an employee."""
        try:
            model = self.session.get(EmployeeModel, employee.id)
            if model is None:
                self.session.add(self.mapper.domain_to_model(employee))
            else:
                self.mapper.update_model(model, employee)
            self.session.commit()
        except SQLAlchemyError as e:
            self.session.rollback()
            logger.error(f"Failed to save employee {employee.id}: {e}")
            raise RepositoryError("save", employee.id, e) from e
        return employee
