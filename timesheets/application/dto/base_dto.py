"""
Base DTOs for the application layer.
Provides common patterns for request/response data transfer objects.
"""

from datetime import datetime, date
from typing import List, Optional, Union

from pydantic import BaseModel, ConfigDict, Field


# Dates and timestamps are accepted as objects or ISO strings and parsed in
# the reference time zone by the use case, not by pydantic.
TimestampInput = Union[datetime, str]
DateInput = Union[datetime, date, str]


class BaseDTO(BaseModel):
    """Base DTO with common configuration."""

    model_config = ConfigDict(
        # Allow population by field name or alias
        populate_by_name=True,
        # Convert enum values to their values
        use_enum_values=True,
        # Validate assignment
        validate_assignment=True,
        extra="forbid"
    )


class RequestDTO(BaseDTO):
    """Base class for request DTOs."""
    pass


class ResponseDTO(BaseDTO):
    """Base class for response DTOs. Decimal figures dump to JSON as strings."""
    pass


class TimestampMixin(BaseModel):
    """Mixin for timestamp fields."""

    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None


class IdRequestDTO(RequestDTO):
    """Request addressing a single entity by ID."""

    id: int = Field(description="Entity ID")


class ValidationResultDTO(ResponseDTO):
    """Outcome of validating a payload without persisting it."""

    is_valid: bool = Field(description="Whether every rule passed")
    errors: List[str] = Field(default_factory=list, description="Failing rules in rule order")

