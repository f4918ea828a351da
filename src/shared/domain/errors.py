"""Tagged RPC errors.

An ``RpcException`` is the only error shape that crosses the transport
boundary: a ``kind`` tag, an HTTP-equivalent ``status`` and a human readable
``message``.  Services raise the concrete subclasses; the transport layer
serialises them with ``to_payload()`` and callers rebuild them with
``RpcException.from_payload()``.
"""

from __future__ import annotations

from enum import Enum
from http import HTTPStatus
from typing import Any, Dict


class ErrorKind(str, Enum):
    NOT_FOUND = "NOT_FOUND"
    BAD_REQUEST = "BAD_REQUEST"
    INTERNAL = "INTERNAL"


class RpcException(Exception):
    """Base tagged error (kind + status + message)."""

    kind: ErrorKind = ErrorKind.INTERNAL
    status: HTTPStatus = HTTPStatus.INTERNAL_SERVER_ERROR
    default_message = "Internal server error"

    def __init__(self, message: str | None = None) -> None:
        self.message = message or self.default_message
        super().__init__(self.message)

    def to_payload(self) -> Dict[str, Any]:
        return {
            "kind": self.kind.value,
            "status": int(self.status),
            "message": self.message,
        }

    @classmethod
    def from_payload(cls, payload: Dict[str, Any]) -> RpcException:
        """Rebuild the matching exception class from a serialised error."""
        try:
            kind = ErrorKind(payload.get("kind"))
        except ValueError:
            kind = ErrorKind.INTERNAL
        error_class = _ERRORS_BY_KIND[kind]
        return error_class(payload.get("message"))

    def __repr__(self) -> str:
        return f"{type(self).__name__}(status={int(self.status)}, message={self.message!r})"


class NotFound(RpcException):
    """The requested resource does not exist."""

    kind = ErrorKind.NOT_FOUND
    status = HTTPStatus.NOT_FOUND
    default_message = "Not found"


class BadRequest(RpcException):
    """The request payload was rejected."""

    kind = ErrorKind.BAD_REQUEST
    status = HTTPStatus.BAD_REQUEST
    default_message = "Bad request"


class InternalError(RpcException):
    """Any failure that is not a domain error."""


_ERRORS_BY_KIND = {
    ErrorKind.NOT_FOUND: NotFound,
    ErrorKind.BAD_REQUEST: BadRequest,
    ErrorKind.INTERNAL: InternalError,
}
