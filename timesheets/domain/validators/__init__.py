"""
Entity validators.
"""

from .base import ValidationResult, Validator
from .employee_validator import EmployeeValidator
from .time_entry_validator import TimeEntryValidator

__all__ = [
    "ValidationResult",
    "Validator",
    "EmployeeValidator",
    "TimeEntryValidator",
]
