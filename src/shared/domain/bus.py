"""Domain bus interfaces for message-pattern dispatch."""

from __future__ import annotations

from typing import Any, Dict, Protocol


class IMessageHandler(Protocol):
    """Handler interface for an RPC message pattern."""

    def handle(self, payload: Dict[str, Any]) -> Any: ...


class IMessageBus(Protocol):
    """Message bus interface."""

    def dispatch(self, pattern: str, payload: Dict[str, Any]) -> Any: ...

    def subscribe(self, pattern: str, handler: IMessageHandler) -> None: ...
