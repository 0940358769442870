"""
Employee domain model.
Employees are never hard-deleted; they are deactivated through the active flag.
"""

from dataclasses import dataclass
from datetime import date
from decimal import Decimal
from typing import Optional

from timesheets.domain.models.base import BaseEntity, BusinessRuleViolation


@dataclass(eq=False)
class Employee(BaseEntity):
    """
    Employee entity.
    Logs time entries and submits them weekly for approval.
    """

    first_name: str = ""
    last_name: str = ""
    email: str = ""
    department: str = ""
    role: str = ""
    hourly_rate: Decimal = Decimal("0")
    is_active: bool = True

    # Weak reference by identifier; the manager is not owned
    manager_id: Optional[str] = None

    start_date: Optional[date] = None
    vacation_days: int = 0
    sick_days: int = 0

    def __post_init__(self):
        super().__post_init__()
        if not isinstance(self.hourly_rate, Decimal) and self.hourly_rate is not None:
            self.hourly_rate = Decimal(str(self.hourly_rate))

    @property
    def full_name(self) -> str:
        """Display name used in reports and notifications."""
        return f"{self.first_name} {self.last_name}".strip()

    def deactivate(self) -> None:
        """Soft-delete the employee."""
        if not self.is_active:
            raise BusinessRuleViolation("Employee is already inactive")
        self.is_active = False
        self.mark_as_updated()

    def activate(self) -> None:
        self.is_active = True
        self.mark_as_updated()

    def __str__(self) -> str:
        return f"Employee({self.id}, {self.full_name})"
