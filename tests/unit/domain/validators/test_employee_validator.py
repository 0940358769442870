"""
Unit tests for EmployeeValidator.
"""

import pytest
from decimal import Decimal

from timesheets.domain.models.employee import Employee
from timesheets.domain.validators.employee_validator import EmployeeValidator
from tests.fakes import make_employee


class TestEmployeeValidator:

    def setup_method(self):
        self.validator = EmployeeValidator()

    def test_valid_employee(self):
        assert self.validator.validate(make_employee()).is_valid is True

    def test_empty_employee(self):
        result = self.validator.validate(Employee())

        assert result.errors == [
            "Employee ID is required",
            "First name is required",
            "Last name is required",
            "Email is required",
            "Department is required",
            "Role is required",
            "Start date is required",
        ]

    @pytest.mark.parametrize("email", ["plain", "a@b", "a b@example.com", "@example.com"])
    def test_invalid_email(self, email):
        result = self.validator.validate(make_employee(email=email))

        assert result.errors == ["Email must be a valid email address"]

    def test_rate_bounds(self):
        assert self.validator.validate(make_employee(hourly_rate=Decimal("1000"))).is_valid is True
        assert self.validator.validate(make_employee(hourly_rate=Decimal("1000.01"))).errors == [
            "Hourly rate seems unreasonably high (> $1000/hour)"
        ]
        assert self.validator.validate(make_employee(hourly_rate=Decimal("-1"))).errors == [
            "Hourly rate cannot be negative"
        ]

    def test_negative_balances(self):
        result = self.validator.validate(make_employee(vacation_days=-1, sick_days=-2))

        assert result.errors == ["Vacation days cannot be negative", "Sick days cannot be negative"]
