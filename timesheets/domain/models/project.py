"""
Project domain model.
"""

from dataclasses import dataclass
from datetime import date
from decimal import Decimal
from enum import Enum
from typing import Optional

from timesheets.domain.models.base import BaseEntity


class ProjectStatus(str, Enum):
    """Project status."""
    ACTIVE = "active"
    ON_HOLD = "on_hold"
    COMPLETED = "completed"
    CANCELLED = "cancelled"


@dataclass(eq=False)
class Project(BaseEntity):
    """
    Project entity.
    Time entries are logged against projects; total_hours is derived and
    recomputed by reporting rather than trusted.
    """

    name: str = ""
    client: str = ""
    budget: Decimal = Decimal("0")
    start_date: Optional[date] = None
    end_date: Optional[date] = None
    status: str = ProjectStatus.ACTIVE.value
    total_hours: Decimal = Decimal("0")

    @property
    def is_active(self) -> bool:
        return self.status == ProjectStatus.ACTIVE.value
