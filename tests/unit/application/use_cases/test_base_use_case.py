"""
Unit tests for the base use case patterns.
"""

import pytest
from pydantic import Field

from timesheets.application.dto.base_dto import RequestDTO
from timesheets.application.use_cases.base_use_case import (
    CommandUseCase,
    QueryUseCase,
    UseCaseResult
)
from timesheets.domain.events.base import EventDispatcher
from timesheets.domain.events.timesheet_events import TimesheetSubmitted
from timesheets.domain.models.base import EntityNotFoundError, ValidationError


class TestUseCaseResult:
    """Test cases for UseCaseResult."""

    def test_success_result(self):
        """Test creating successful result."""
        result = UseCaseResult.success_result({"id": 1})

        assert result.success is True
        assert result.data == {"id": 1}
        assert result.error is None
        assert result.error_code is None
        assert result.errors == []

    def test_error_result(self):
        """Test creating error result."""
        result = UseCaseResult.error_result("Something went wrong", "TEST_ERROR", ["a", "b"])

        assert result.success is False
        assert result.data is None
        assert result.error == "Something went wrong"
        assert result.error_code == "TEST_ERROR"
        assert result.errors == ["a", "b"]

    def test_from_validation_error_keeps_error_list(self):
        result = UseCaseResult.from_exception(ValidationError("Bad entry", errors=["one", "two"]))

        assert result.error_code == "VALIDATION_ERROR"
        assert result.errors == ["one", "two"]

    def test_from_domain_exception(self):
        result = UseCaseResult.from_exception(EntityNotFoundError("Employee", "E9"))

        assert result.error == "Employee with ID E9 not found"
        assert result.error_code == "NOT_FOUND"

    def test_from_unexpected_exception(self):
        result = UseCaseResult.from_exception(KeyError("boom"))

        assert result.error_code == "UNKNOWN_ERROR"


class EchoRequestDTO(RequestDTO):
    name: str = Field(min_length=1)


class EchoUseCase(QueryUseCase):

    def __init__(self, error=None):
        self.error = error

    async def _execute_business_logic(self, request):
        if self.error:
            raise self.error
        return request.name.upper()


class PublishingUseCase(CommandUseCase):

    async def _execute_command_logic(self, request):
        await self._publish_events(TimesheetSubmitted(employee_id=request.name))
        return request.name


class ExplodingDispatcher(EventDispatcher):

    async def dispatch(self, event):
        raise RuntimeError("dispatcher down")


class TestBaseUseCase:
    """Test cases for execute() error conversion."""

    @pytest.mark.asyncio
    async def test_success_carries_timing_metadata(self):
        result = await EchoUseCase().execute(EchoRequestDTO(name="ada"))

        assert result.success is True
        assert result.data == "ADA"
        assert "execution_time_seconds" in result.metadata

    @pytest.mark.asyncio
    async def test_domain_exception_becomes_error_result(self):
        result = await EchoUseCase(EntityNotFoundError("Time entry", 3)).execute(EchoRequestDTO(name="x"))

        assert result.success is False
        assert result.error_code == "NOT_FOUND"
        assert result.metadata["exception_type"] == "EntityNotFoundError"

    @pytest.mark.asyncio
    async def test_unexpected_exception_becomes_unknown_error(self):
        result = await EchoUseCase(RuntimeError("kaput")).execute(EchoRequestDTO(name="x"))

        assert result.success is False
        assert result.error_code == "UNKNOWN_ERROR"
        assert result.error == "kaput"

    @pytest.mark.asyncio
    async def test_events_are_published(self):
        dispatcher = EventDispatcher()

        result = await PublishingUseCase(dispatcher).execute(EchoRequestDTO(name="E1"))

        assert result.success is True
        assert dispatcher.get_event_log()[0]["event_type"] == "TimesheetSubmitted"

    @pytest.mark.asyncio
    async def test_dispatch_failure_does_not_fail_command(self):
        result = await PublishingUseCase(ExplodingDispatcher()).execute(EchoRequestDTO(name="E1"))

        assert result.success is True
