"""Django ORM implementation of the Product repository.

Satisfies ``IProductRepository`` using Django's QuerySet API.
Error handling follows the Null Object pattern: methods return ``None``
instead of raising, and the Service Layer decides how to translate a
missing entity into an RPC error.  Storage errors are not caught here.

Writes against existing rows are single conditional ``UPDATE`` statements
(``WHERE id = ? AND available``); the matched-row count tells whether the
product was active, so there is no separate existence read before a write.
"""

from __future__ import annotations

from typing import Any, Dict, Iterable, List, Optional

from django.db import transaction

from modules.products.models import Product
from modules.products.repositories.interfaces import IProductRepository


class ProductDjangoRepository(IProductRepository):
    """Concrete Product repository backed by Django ORM."""

    def get_by_id(self, id: int) -> Optional[Product]:
        """Retrieve a product by primary key, active or not."""
        return Product.objects.filter(id=id).first()

    def get_available(self, id: int) -> Optional[Product]:
        return Product.objects.available().filter(id=id).first()

    def count_all(self) -> int:
        return Product.objects.count()

    def list_available(self, offset: int, limit: int) -> List[Product]:
        return list(Product.objects.available().order_by("id")[offset : offset + limit])

    def list_by_ids(self, ids: Iterable[int]) -> List[Product]:
        return list(Product.objects.filter(id__in=list(ids)).order_by("id"))

    @transaction.atomic
    def save(self, entity: Product) -> Product:
        """Persist (create or update) a product."""
        entity.save()
        return entity

    @transaction.atomic
    def update_available(self, id: int, fields: Dict[str, Any]) -> Optional[Product]:
        matched = Product.objects.filter(id=id).available().touch(**fields)
        if not matched:
            return None
        return Product.objects.get(id=id)

    @transaction.atomic
    def delete(self, id: int) -> Optional[Product]:
        """Soft-delete an active product.

        Returns the now-unavailable product, or ``None`` if no active
        product exists with the given id.
        """
        matched = Product.objects.filter(id=id).deactivate()
        if not matched:
            return None
        return Product.objects.get(id=id)
