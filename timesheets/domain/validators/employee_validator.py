"""
Employee validation rules.
"""

import re
from datetime import date
from decimal import Decimal
from typing import List

from timesheets.domain.models.employee import Employee
from timesheets.domain.validators.base import ValidationResult, Validator


EMAIL_PATTERN = re.compile(r"^[^\s@]+@[^\s@]+\.[^\s@]+$")


class EmployeeValidator(Validator[Employee]):
    """Validates employee records."""

    def __init__(self, max_hourly_rate: Decimal = Decimal("1000")):
        self.max_hourly_rate = Decimal(str(max_hourly_rate))

    def validate(self, item: Employee) -> ValidationResult:
        errors: List[str] = []

        if not _has_text(item.id):
            errors.append("Employee ID is required")
        if not _has_text(item.first_name):
            errors.append("First name is required")
        if not _has_text(item.last_name):
            errors.append("Last name is required")

        if not _has_text(item.email):
            errors.append("Email is required")
        elif not EMAIL_PATTERN.fullmatch(item.email):
            errors.append("Email must be a valid email address")

        if not _has_text(item.department):
            errors.append("Department is required")
        if not _has_text(item.role):
            errors.append("Role is required")

        rate = item.hourly_rate if item.hourly_rate is not None else Decimal("0")
        if rate < 0:
            errors.append("Hourly rate cannot be negative")
        if rate > self.max_hourly_rate:
            errors.append(
                f"Hourly rate seems unreasonably high (> ${self.max_hourly_rate:f}/hour)"
            )

        if item.start_date is None:
            errors.append("Start date is required")
        elif not isinstance(item.start_date, date):
            errors.append("Start date is not a valid date")

        if item.vacation_days < 0:
            errors.append("Vacation days cannot be negative")
        if item.sick_days < 0:
            errors.append("Sick days cannot be negative")

        return ValidationResult(errors=errors)


def _has_text(value) -> bool:
    return value is not None and bool(str(value).strip())
