"""Product service layer (Use Cases).

Orchestrates business logic for the Product aggregate, delegating
persistence to the injected ``IProductRepository``.

Business rules enforced here:
- Only active products (``available=True``) are visible to reads by id
  and to the data of a listing.
- Listing totals count every product, active or not.
- Update and removal only touch active products.
- Removal is a soft delete.
- Bulk validation checks existence, not availability, after collapsing
  duplicate ids.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import TYPE_CHECKING, Iterable, List

import structlog
from django.db import transaction

from modules.products.exceptions import InvalidProductIds, ProductNotFound
from modules.products.models import Product

if TYPE_CHECKING:
    from modules.products.dtos import (
        CreateProductDTO,
        PaginationDTO,
        UpdateProductDTO,
    )
    from modules.products.repositories.interfaces import IProductRepository

logger = structlog.get_logger(__name__)


@dataclass(frozen=True)
class ProductPage:
    """One page of active products plus the listing totals."""

    items: List[Product]
    page: int
    total: int
    last_page: int


class ProductService:
    """Application service for Product use-cases.

    Receives an ``IProductRepository`` via constructor injection (DIP).
    """

    def __init__(self, repository: IProductRepository) -> None:
        self._repo = repository

    # ------------------------------------------------------------------
    # Commands
    # ------------------------------------------------------------------

    @transaction.atomic
    def create_product(self, dto: CreateProductDTO) -> Product:
        """Create a new, active product."""
        product = Product(
            name=dto.name,
            price=dto.price,
            description=dto.description,
        )
        product = self._repo.save(product)
        logger.info("product.created", product_id=product.id)
        return product

    @transaction.atomic
    def update_product(self, id: int, dto: UpdateProductDTO) -> Product:
        """Patch an active product with the supplied fields.

        Any ``id`` carried by the DTO is ignored; ``id`` addresses the row.

        Raises:
            ProductNotFound: if no active product has that id.
        """
        changes = dto.changes()
        product = self._repo.update_available(id, changes)
        if product is None:
            raise ProductNotFound(id)
        logger.info("product.updated", product_id=id, fields=sorted(changes))
        return product

    @transaction.atomic
    def delete_product(self, id: int) -> Product:
        """Soft-delete an active product and return it.

        Raises:
            ProductNotFound: if no active product has that id.
        """
        product = self._repo.delete(id)
        if product is None:
            raise ProductNotFound(id)
        logger.info("product.soft_deleted", product_id=id)
        return product

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------

    def list_products(self, pagination: PaginationDTO) -> ProductPage:
        """Return one page of active products.

        ``total`` and ``last_page`` are computed over every stored product.
        """
        total = self._repo.count_all()
        items = self._repo.list_available(pagination.offset, pagination.limit)
        return ProductPage(
            items=items,
            page=pagination.page,
            total=total,
            last_page=math.ceil(total / pagination.limit),
        )

    def get_product(self, id: int) -> Product:
        """Retrieve a single active product by id.

        Raises:
            ProductNotFound: if no active product has that id.
        """
        product = self._repo.get_available(id)
        if not product:
            raise ProductNotFound(id)
        logger.info("product.retrieved", product_id=id)
        return product

    def validate_products(self, ids: Iterable[int]) -> List[Product]:
        """Return the products matching ``ids``, duplicates collapsed.

        Inactive products count as existing.

        Raises:
            InvalidProductIds: if any id does not exist.
        """
        unique_ids = set(ids)
        products = self._repo.list_by_ids(unique_ids)
        if len(products) != len(unique_ids):
            found = {p.id for p in products}
            logger.warning(
                "product.validation_failed",
                missing_ids=sorted(unique_ids - found),
            )
            raise InvalidProductIds()
        return products
