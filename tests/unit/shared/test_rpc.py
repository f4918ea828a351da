"""Unit tests for the RPC transport boundary and client.

Covers:
- handle_message: success envelope, tagged errors, pydantic errors,
  unexpected exceptions.
- RpcClient: header propagation, data unwrapping, error re-raising.
"""

from __future__ import annotations

from unittest.mock import MagicMock

import pytest
from pydantic import BaseModel, ConfigDict

from shared.domain.errors import BadRequest, InternalError, NotFound
from shared.infrastructure.bus import InMemoryMessageBus
from shared.infrastructure.rpc import REQUEST_ID_HEADER, RpcClient, handle_message

pytestmark = pytest.mark.unit


class _Payload(BaseModel):
    model_config = ConfigDict(extra="forbid")

    page: int


class _Handler:
    def __init__(self, fn):
        self._fn = fn

    def handle(self, payload):
        return self._fn(payload)


@pytest.fixture()
def bus():
    return InMemoryMessageBus()


# ===========================================================================
# handle_message
# ===========================================================================


class TestHandleMessage:
    def test_success_envelope(self, bus):
        bus.subscribe("p", _Handler(lambda payload: {"echo": payload}))

        assert handle_message("p", {"a": 1}, bus=bus) == {
            "ok": True,
            "data": {"echo": {"a": 1}},
        }

    def test_missing_payload_becomes_empty_dict(self, bus):
        bus.subscribe("p", _Handler(lambda payload: payload))

        assert handle_message("p", None, bus=bus)["data"] == {}

    def test_tagged_error_envelope(self, bus):
        def _raise(payload):
            raise NotFound("Product with id 3 not found")

        bus.subscribe("p", _Handler(_raise))

        assert handle_message("p", {}, bus=bus) == {
            "ok": False,
            "error": {
                "kind": "NOT_FOUND",
                "status": 404,
                "message": "Product with id 3 not found",
            },
        }

    def test_validation_error_becomes_bad_request(self, bus):
        bus.subscribe("p", _Handler(lambda payload: _Payload.model_validate(payload)))

        envelope = handle_message("p", {"page": "x", "color": "red"}, bus=bus)

        assert envelope["ok"] is False
        assert envelope["error"]["kind"] == "BAD_REQUEST"
        assert envelope["error"]["status"] == 400
        assert "page:" in envelope["error"]["message"]
        assert "color:" in envelope["error"]["message"]

    def test_unexpected_error_is_internal_without_details(self, bus):
        def _raise(payload):
            raise RuntimeError("database password=hunter2 leaked")

        bus.subscribe("p", _Handler(_raise))

        envelope = handle_message("p", {}, bus=bus)

        assert envelope == {
            "ok": False,
            "error": {
                "kind": "INTERNAL",
                "status": 500,
                "message": "Internal server error",
            },
        }

    def test_unknown_pattern_is_not_found(self, bus):
        envelope = handle_message("missing", {}, bus=bus)
        assert envelope["error"]["kind"] == "NOT_FOUND"


# ===========================================================================
# RpcClient
# ===========================================================================


def _app_returning(envelope):
    app = MagicMock()
    app.signature.return_value.apply_async.return_value.get.return_value = envelope
    return app


class TestRpcClient:
    def test_returns_data(self):
        app = _app_returning({"ok": True, "data": [1, 2]})
        client = RpcClient(app, timeout=3)

        assert client.send("p", {"ids": [1, 2]}) == [1, 2]

        app.signature.assert_called_once_with("p", kwargs={"payload": {"ids": [1, 2]}})
        app.signature.return_value.apply_async.return_value.get.assert_called_once_with(
            timeout=3
        )

    def test_sends_request_id_header(self):
        app = _app_returning({"ok": True, "data": None})
        RpcClient(app).send("p", {}, request_id="req-123")

        app.signature.return_value.apply_async.assert_called_once_with(
            headers={REQUEST_ID_HEADER: "req-123"}
        )

    def test_generates_request_id_when_missing(self):
        app = _app_returning({"ok": True, "data": None})
        RpcClient(app).send("p")

        headers = app.signature.return_value.apply_async.call_args.kwargs["headers"]
        assert headers[REQUEST_ID_HEADER]

    @pytest.mark.parametrize(
        ("kind", "expected"),
        [("NOT_FOUND", NotFound), ("BAD_REQUEST", BadRequest), ("INTERNAL", InternalError)],
    )
    def test_reraises_tagged_error(self, kind, expected):
        app = _app_returning(
            {"ok": False, "error": {"kind": kind, "status": 0, "message": "boom"}}
        )

        with pytest.raises(expected, match="boom"):
            RpcClient(app).send("p", {})
