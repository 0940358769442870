"""
Base use case classes for the application layer.
Provides common patterns and structure for use case implementations.
"""

import logging
from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import Any, Dict, Optional, TypeVar, Generic, List

from pydantic import ValidationError as PydanticValidationError

from timesheets.domain.events.base import DomainEvent, EventDispatcher
from timesheets.domain.models.base import DomainException, ValidationError, utc_now


logger = logging.getLogger(__name__)

T = TypeVar('T')
R = TypeVar('R')


@dataclass
class UseCaseResult(Generic[T]):
    """Result wrapper for use case operations."""

    success: bool
    data: Optional[T] = None
    error: Optional[str] = None
    error_code: Optional[str] = None
    errors: List[str] = field(default_factory=list)
    metadata: Optional[Dict[str, Any]] = None

    @classmethod
    def success_result(cls, data: T, metadata: Optional[Dict[str, Any]] = None) -> "UseCaseResult[T]":
        """Create a successful result."""
        return cls(success=True, data=data, metadata=metadata)

    @classmethod
    def error_result(
        cls,
        error: str,
        error_code: Optional[str] = None,
        errors: Optional[List[str]] = None,
        metadata: Optional[Dict[str, Any]] = None
    ) -> "UseCaseResult[T]":
        """Create an error result."""
        return cls(
            success=False,
            error=error,
            error_code=error_code,
            errors=list(errors or []),
            metadata=metadata
        )

    @classmethod
    def from_exception(cls, exc: Exception) -> "UseCaseResult[T]":
        """Create error result from exception."""
        if isinstance(exc, ValidationError):
            return cls.error_result(exc.message, exc.code, exc.errors)
        elif isinstance(exc, PydanticValidationError):
            messages = [
                f"{'.'.join(str(part) for part in err['loc'])}: {err['msg']}"
                for err in exc.errors()
            ]
            return cls.error_result("Invalid request", "VALIDATION_ERROR", messages)
        elif isinstance(exc, DomainException):
            return cls.error_result(exc.message, exc.code)
        else:
            return cls.error_result(str(exc), "UNKNOWN_ERROR")


class BaseUseCase(ABC, Generic[T, R]):
    """
    Base class for all use cases.
    Provides common structure and error handling.
    """

    async def execute(self, request: T) -> UseCaseResult[R]:
        """
        Execute the use case, converting raised errors into an error result.
        """
        started = utc_now()

        try:
            await self._validate_request(request)
            result = await self._execute_business_logic(request)
        except DomainException as exc:
            logger.info(f"{self.__class__.__name__} failed with {exc.code}: {exc.message}")
            return self._failure(exc, started)
        except PydanticValidationError as exc:
            logger.info(f"{self.__class__.__name__} received an invalid request")
            return self._failure(exc, started)
        except Exception as exc:
            logger.exception(f"Unexpected error in {self.__class__.__name__}")
            return self._failure(exc, started)

        finished = utc_now()
        return UseCaseResult.success_result(
            result,
            metadata={
                "execution_time_seconds": (finished - started).total_seconds(),
                "executed_at": finished.isoformat()
            }
        )

    def _failure(self, exc: Exception, started) -> UseCaseResult[R]:
        failed = utc_now()
        error_result = UseCaseResult.from_exception(exc)
        error_result.metadata = {
            "execution_time_seconds": (failed - started).total_seconds(),
            "failed_at": failed.isoformat(),
            "exception_type": type(exc).__name__
        }
        return error_result

    async def _validate_request(self, request: T) -> None:
        """
        Validate the request. Override in subclasses if needed.
        """
        if hasattr(request, 'model_validate'):
            request.model_validate(request.model_dump())

    @abstractmethod
    async def _execute_business_logic(self, request: T) -> R:
        """
        Execute the core business logic. Must be implemented by subclasses.
        """
        pass


class QueryUseCase(BaseUseCase[T, R]):
    """
    Base class for query use cases (read operations).
    """
    pass


class CommandUseCase(BaseUseCase[T, R]):
    """
    Base class for command use cases (write operations).
    Publishes domain events once the command has succeeded.
    """

    def __init__(self, event_dispatcher: Optional[EventDispatcher] = None):
        self.event_dispatcher = event_dispatcher

    async def _execute_business_logic(self, request: T) -> R:
        return await self._execute_command_logic(request)

    @abstractmethod
    async def _execute_command_logic(self, request: T) -> R:
        """Execute the command logic. Must be implemented by subclasses."""
        pass

    async def _publish_events(self, *events: DomainEvent) -> None:
        """Publish domain events; dispatch failures never fail the command."""
        if not self.event_dispatcher:
            return
        for event in events:
            try:
                await self.event_dispatcher.dispatch(event)
            except Exception:
                logger.exception(f"Failed to publish {event.event_type}")
