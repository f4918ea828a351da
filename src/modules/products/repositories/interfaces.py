"""Product repository interface.

Extends ``IRepository[Product]`` with the look-ups the products RPC
surface needs: availability-filtered reads, paginated slices, bulk id
fetches and conditional updates of active rows.
"""

from __future__ import annotations

from abc import abstractmethod
from typing import TYPE_CHECKING, Any, Dict, Iterable, List, Optional

from modules.core.repositories.interfaces import IRepository

if TYPE_CHECKING:
    from modules.products.models import Product


class IProductRepository(IRepository["Product"]):
    """Repository contract for the Product aggregate."""

    @abstractmethod
    def get_available(self, id: int) -> Optional[Product]:
        """Retrieve an active product by id."""

    @abstractmethod
    def count_all(self) -> int:
        """Count every stored product, active or not."""

    @abstractmethod
    def list_available(self, offset: int, limit: int) -> List[Product]:
        """Slice of active products in id order."""

    @abstractmethod
    def list_by_ids(self, ids: Iterable[int]) -> List[Product]:
        """Products whose id is in ``ids``, whatever their availability."""

    @abstractmethod
    def update_available(self, id: int, fields: Dict[str, Any]) -> Optional[Product]:
        """Apply ``fields`` to the product only if it is active.

        Returns the refreshed product, or ``None`` when no active product
        has that id.
        """
