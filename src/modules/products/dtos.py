"""Product DTOs for the Service Layer.

Framework-agnostic data transfer objects using Pydantic v2.
These are the contracts between the message handlers and the
Service layer.  DTOs are immutable (``frozen=True``) and input DTOs
reject unknown fields (``extra="forbid"``).

- ``CreateProductDTO``: input for product creation.
- ``UpdateProductDTO``: input for partial product updates (carries the id).
- ``ProductIdDTO``: input for single product look-ups and removal.
- ``PaginationDTO``: input for paginated listing.
- ``ValidateProductsDTO``: input for bulk id validation.
- ``ProductOutputDTO`` / ``ProductPageDTO``: camelCase wire output.
"""

from __future__ import annotations

from datetime import datetime
from decimal import Decimal
from typing import TYPE_CHECKING, Any, Dict, List, Optional

from pydantic import (
    BaseModel,
    ConfigDict,
    Field,
    PositiveInt,
    field_serializer,
    field_validator,
)
from pydantic.alias_generators import to_camel

if TYPE_CHECKING:
    from modules.products.models import Product
    from modules.products.services import ProductPage

INPUT_CONFIG = ConfigDict(frozen=True, extra="forbid")
OUTPUT_CONFIG = ConfigDict(frozen=True, alias_generator=to_camel, populate_by_name=True)


# ---------------------------------------------------------------------------
# Input DTOs
# ---------------------------------------------------------------------------


class CreateProductDTO(BaseModel):
    """Immutable DTO for product creation requests.

    Validates:
    - ``name`` is a non-empty string.
    - ``price`` is a non-negative Decimal with at most two decimal places.
    """

    model_config = INPUT_CONFIG

    name: str
    price: Decimal = Field(ge=0, max_digits=12, decimal_places=2)
    description: str = ""

    @field_validator("name")
    @classmethod
    def name_must_not_be_empty(cls, v: str) -> str:
        if not v.strip():
            raise ValueError("Name must not be empty.")
        return v.strip()


class UpdateProductDTO(BaseModel):
    """Immutable DTO for product update requests.

    ``id`` addresses the product and is never part of the patch.
    All other fields are optional: only supplied fields are updated.
    """

    model_config = INPUT_CONFIG

    id: int
    name: Optional[str] = None
    price: Optional[Decimal] = Field(default=None, ge=0, max_digits=12, decimal_places=2)
    description: Optional[str] = None

    @field_validator("name")
    @classmethod
    def name_must_not_be_empty(cls, v: Optional[str]) -> Optional[str]:
        if v is not None and not v.strip():
            raise ValueError("Name must not be empty.")
        return v.strip() if v is not None else v

    def changes(self) -> Dict[str, Any]:
        """Fields explicitly supplied by the caller, minus ``id``."""
        return self.model_dump(exclude_unset=True, exclude_none=True, exclude={"id"})


class ProductIdDTO(BaseModel):
    model_config = INPUT_CONFIG

    id: int


class PaginationDTO(BaseModel):
    """Page number (1-based) and page size."""

    model_config = INPUT_CONFIG

    page: PositiveInt = 1
    limit: PositiveInt = 10

    @property
    def offset(self) -> int:
        return self.limit * (self.page - 1)


class ValidateProductsDTO(BaseModel):
    model_config = INPUT_CONFIG

    ids: List[int]


# ---------------------------------------------------------------------------
# Output DTOs
# ---------------------------------------------------------------------------


class ProductOutputDTO(BaseModel):
    """Immutable DTO for product replies.

    ``price`` stays a ``Decimal`` in Python and goes out as a JSON number.
    """

    model_config = OUTPUT_CONFIG

    id: int
    name: str
    description: str
    price: Decimal
    available: bool
    created_at: datetime
    updated_at: datetime

    @field_serializer("price", when_used="json")
    def price_as_number(self, v: Decimal) -> float:
        return float(v)

    @classmethod
    def from_entity(cls, product: Product) -> ProductOutputDTO:
        """Build an output DTO from a Product model instance."""
        return cls(
            id=product.id,
            name=product.name,
            description=product.description,
            price=product.price,
            available=product.available,
            created_at=product.created_at,
            updated_at=product.updated_at,
        )

    def to_wire(self) -> Dict[str, Any]:
        return self.model_dump(mode="json", by_alias=True)


class PageMetaDTO(BaseModel):
    """Pagination metadata.

    ``total_pages`` (``totalPages`` on the wire) carries the raw count of
    every stored product, active or not.
    """

    model_config = OUTPUT_CONFIG

    page: int
    total_pages: int
    last_page: int


class ProductPageDTO(BaseModel):
    model_config = OUTPUT_CONFIG

    data: List[ProductOutputDTO]
    meta: PageMetaDTO

    @classmethod
    def from_page(cls, page: ProductPage) -> ProductPageDTO:
        return cls(
            data=[ProductOutputDTO.from_entity(p) for p in page.items],
            meta=PageMetaDTO(
                page=page.page,
                total_pages=page.total,
                last_page=page.last_page,
            ),
        )

    def to_wire(self) -> Dict[str, Any]:
        return self.model_dump(mode="json", by_alias=True)
