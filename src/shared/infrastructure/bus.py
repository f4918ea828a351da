"""In-memory message bus implementation."""

from __future__ import annotations

from typing import Any, Dict, List

from shared.domain.bus import IMessageBus, IMessageHandler
from shared.domain.errors import NotFound


class NoMatchingHandler(NotFound):
    """No handler is subscribed to the requested pattern."""

    def __init__(self, pattern: str) -> None:
        self.pattern = pattern
        super().__init__(
            f"There is no matching message handler defined for pattern '{pattern}'"
        )


class InMemoryMessageBus(IMessageBus):
    """Simple in-process bus mapping one pattern to one handler."""

    def __init__(self) -> None:
        self._handlers: Dict[str, IMessageHandler] = {}

    def subscribe(self, pattern: str, handler: IMessageHandler) -> None:
        existing = self._handlers.get(pattern)
        if existing is not None and existing is not handler:
            raise ValueError(f"Pattern '{pattern}' already has a handler.")
        self._handlers[pattern] = handler

    def dispatch(self, pattern: str, payload: Dict[str, Any]) -> Any:
        handler = self._handlers.get(pattern)
        if handler is None:
            raise NoMatchingHandler(pattern)
        return handler.handle(payload)

    @property
    def patterns(self) -> List[str]:
        return sorted(self._handlers)


# Global bus instance (singleton)

message_bus = InMemoryMessageBus()
