"""Caller-side client for the products RPC patterns."""

from __future__ import annotations

from decimal import Decimal
from typing import TYPE_CHECKING, Any, Dict, Iterable, List, Optional

from django.conf import settings

from config.celery import app as celery_app
from modules.products import patterns
from shared.infrastructure.rpc import RpcClient

if TYPE_CHECKING:
    from celery import Celery


class ProductsClient:
    """Typed wrapper over ``RpcClient`` for the six product operations.

    Replies are the wire dictionaries; errors surface as ``NotFound``,
    ``BadRequest`` or ``InternalError``.
    """

    def __init__(self, app: Optional[Celery] = None, timeout: Optional[float] = None) -> None:
        if timeout is None:
            timeout = settings.RPC_TIMEOUT
        self._rpc = RpcClient(app or celery_app, timeout=timeout)

    def create(
        self, name: str, price: Decimal | float | str, **extra: Any
    ) -> Dict[str, Any]:
        payload = {"name": name, "price": str(price), **extra}
        return self._rpc.send(patterns.CREATE_PRODUCT, payload)

    def find_all(self, page: int = 1, limit: int = 10) -> Dict[str, Any]:
        return self._rpc.send(patterns.FIND_ALL_PRODUCTS, {"page": page, "limit": limit})

    def find_one(self, id: int) -> Dict[str, Any]:
        return self._rpc.send(patterns.FIND_ONE_PRODUCT, {"id": id})

    def update(self, id: int, **changes: Any) -> Dict[str, Any]:
        if "price" in changes and changes["price"] is not None:
            changes["price"] = str(changes["price"])
        return self._rpc.send(patterns.UPDATE_PRODUCT, {**changes, "id": id})

    def remove(self, id: int) -> Dict[str, Any]:
        return self._rpc.send(patterns.DELETE_PRODUCT, {"id": id})

    def validate(self, ids: Iterable[int]) -> List[Dict[str, Any]]:
        return self._rpc.send(patterns.VALIDATE_PRODUCTS, {"ids": list(ids)})
