"""Celery-backed RPC transport.

Server side, ``handle_message`` is the transport boundary: it dispatches a
payload through the message bus and always returns a JSON envelope, either
``{"ok": True, "data": ...}`` or ``{"ok": False, "error": {...}}``.

Client side, ``RpcClient`` publishes a message by pattern name and turns an
error envelope back into the matching ``RpcException`` subclass.
"""

from __future__ import annotations

import uuid
from typing import TYPE_CHECKING, Any, Dict, Optional

import structlog
from pydantic import ValidationError as PydanticValidationError

from shared.domain.errors import BadRequest, InternalError, RpcException
from shared.infrastructure.bus import message_bus

if TYPE_CHECKING:
    from celery import Celery

    from shared.domain.bus import IMessageBus

logger = structlog.get_logger(__name__)

REQUEST_ID_HEADER = "x_request_id"


def success(data: Any) -> Dict[str, Any]:
    return {"ok": True, "data": data}


def failure(error: RpcException) -> Dict[str, Any]:
    return {"ok": False, "error": error.to_payload()}


def validation_message(exc: PydanticValidationError) -> str:
    """Flatten pydantic errors into ``field: reason`` pairs."""
    parts = []
    for error in exc.errors():
        location = ".".join(str(part) for part in error["loc"]) or "payload"
        parts.append(f"{location}: {error['msg']}")
    return "; ".join(parts)


def handle_message(
    pattern: str,
    payload: Optional[Dict[str, Any]],
    bus: Optional[IMessageBus] = None,
) -> Dict[str, Any]:
    """Dispatch ``payload`` to the handler of ``pattern`` and wrap the outcome."""
    bus = bus or message_bus
    log = logger.bind(pattern=pattern)

    try:
        data = bus.dispatch(pattern, payload or {})
    except PydanticValidationError as exc:
        error = BadRequest(validation_message(exc))
        log.warning("rpc.error", kind=error.kind.value, message=error.message)
        return failure(error)
    except RpcException as exc:
        log.warning("rpc.error", kind=exc.kind.value, message=exc.message)
        return failure(exc)
    except Exception:
        log.exception("rpc.internal_error")
        return failure(InternalError())

    return success(data)


class RpcClient:
    """Caller-side helper for the Celery RPC transport.

    Messages go through ``app.signature(pattern)``: a task registered in the
    same app runs locally under ``task_always_eager``, otherwise the message
    is published by name to the broker.
    """

    def __init__(self, app: Celery, timeout: Optional[float] = None) -> None:
        self._app = app
        self._timeout = timeout

    def send(
        self,
        pattern: str,
        payload: Optional[Dict[str, Any]] = None,
        request_id: Optional[str] = None,
    ) -> Any:
        """Send a message and return its ``data``.

        Raises:
            RpcException: the subclass matching the error envelope.
        """
        request_id = request_id or str(uuid.uuid4())
        log = logger.bind(pattern=pattern, correlation_id=request_id)

        result = self._app.signature(pattern, kwargs={"payload": payload or {}}).apply_async(
            headers={REQUEST_ID_HEADER: request_id}
        )
        envelope = result.get(timeout=self._timeout)

        if not envelope.get("ok"):
            error = RpcException.from_payload(envelope.get("error") or {})
            log.info("rpc.client_error", kind=error.kind.value, message=error.message)
            raise error
        return envelope.get("data")
