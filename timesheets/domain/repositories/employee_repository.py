"""Employee repository interface.
Defines the contract for employee data persistence operations.
"""

from abc import ABC, abstractmethod
from typing import List, Optional

from timesheets.domain.models.employee import Employee


class EmployeeRepository(ABC):
    """
    Repository interface for Employee entity.
    """

    @abstractmethod
    async def find_by_id(self, employee_id: str) -> Optional[Employee]:
        """
        Find an employee by ID.
        Returns None if not found.
        """
        pass

    @abstractmethod
    async def find_all(self) -> List[Employee]:
        """
        Return every employee, active and inactive, in a stable order.
        """
        pass

    @abstractmethod
    async def save(self, employee: Employee) -> Employee:
        """
        Insert or update an employee.
        """
        pass
