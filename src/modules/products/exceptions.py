"""Product domain exceptions.

Raised by the Service Layer when business rules are violated.
They are tagged RPC errors, so the transport boundary serialises them
as-is into the reply envelope.
"""

from __future__ import annotations

from shared.domain.errors import BadRequest, NotFound


class ProductNotFound(NotFound):
    """No active product has the requested id."""

    def __init__(self, product_id: int) -> None:
        self.product_id = product_id
        super().__init__(f"Product with id {product_id} not found")


class InvalidProductIds(BadRequest):
    """At least one id of a bulk validation does not exist."""

    default_message = "Invalid product ids"
