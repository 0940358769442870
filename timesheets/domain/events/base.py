"""
Base classes for domain events and event handling.
Provides the foundation for event-driven architecture.
"""

import asyncio
import logging
import uuid
from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from datetime import datetime
from typing import Dict, Any, List, Optional

from timesheets.domain.models.base import utc_now


logger = logging.getLogger(__name__)


@dataclass
class DomainEvent(ABC):
    """Base class for all domain events."""

    event_id: str = field(default_factory=lambda: str(uuid.uuid4()))
    occurred_at: datetime = field(default_factory=utc_now)
    event_type: str = field(init=False, default="")

    def __post_init__(self):
        """Set event type based on class name."""
        if not self.event_type:
            self.event_type = self.__class__.__name__

    def to_dict(self) -> Dict[str, Any]:
        """Convert event to dictionary for serialization."""
        return {
            "event_id": self.event_id,
            "event_type": self.event_type,
            "occurred_at": self.occurred_at.isoformat(),
            "data": self._get_event_data()
        }

    @abstractmethod
    def _get_event_data(self) -> Dict[str, Any]:
        """Get event-specific data for serialization."""
        pass


class EventHandler(ABC):
    """Base class for event handlers."""

    @abstractmethod
    async def handle(self, event: DomainEvent) -> None:
        """Handle a domain event."""
        pass

    def can_handle(self, event: DomainEvent) -> bool:
        """Check if this handler can process the given event."""
        return True


class EventDispatcher:
    """
    Dispatches domain events to registered handlers.
    Handler failures are logged and never reach the code that published the event.
    """

    def __init__(self, max_log_size: int = 1000):
        self._handlers: Dict[str, List[EventHandler]] = {}
        self._global_handlers: List[EventHandler] = []
        self._event_log: List[Dict[str, Any]] = []
        self._max_log_size = max_log_size

    def register_handler(self, event_type: str, handler: EventHandler) -> None:
        """Register an event handler for specific event type."""
        self._handlers.setdefault(event_type, []).append(handler)
        logger.info(f"Registered handler {handler.__class__.__name__} for {event_type}")

    def register_global_handler(self, handler: EventHandler) -> None:
        """Register a handler that receives all events."""
        self._global_handlers.append(handler)
        logger.info(f"Registered global handler {handler.__class__.__name__}")

    async def dispatch(self, event: DomainEvent) -> None:
        """Dispatch event to all registered handlers."""
        self._event_log.append(event.to_dict())
        if len(self._event_log) > self._max_log_size:
            del self._event_log[0]

        logger.info(f"Dispatching event: {event.event_type} (ID: {event.event_id})")

        handlers = self._handlers.get(event.event_type, []) + [
            h for h in self._global_handlers
            if h.can_handle(event)
        ]

        if not handlers:
            logger.debug(f"No handlers registered for event: {event.event_type}")
            return

        await asyncio.gather(*(self._safe_handle(handler, event) for handler in handlers))
        logger.debug(f"Dispatched {event.event_type} to {len(handlers)} handler(s)")

    async def _safe_handle(self, handler: EventHandler, event: DomainEvent) -> None:
        """Execute an event handler, logging instead of raising on failure."""
        try:
            await handler.handle(event)
        except Exception:
            logger.exception(
                f"Handler {handler.__class__.__name__} failed to process {event.event_type}"
            )

    def get_event_log(self, limit: Optional[int] = None) -> List[Dict[str, Any]]:
        """Get recent events from the log, newest first."""
        events = list(reversed(self._event_log))
        return events[:limit] if limit else events

    def clear_event_log(self) -> None:
        self._event_log.clear()

    def get_registered_handlers(self) -> Dict[str, List[str]]:
        """Get information about registered handlers."""
        result = {
            event_type: [h.__class__.__name__ for h in handlers]
            for event_type, handlers in self._handlers.items()
        }
        if self._global_handlers:
            result["global"] = [h.__class__.__name__ for h in self._global_handlers]
        return result
