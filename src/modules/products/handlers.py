"""Message handlers for the products RPC patterns.

Each handler parses its payload into a DTO (pydantic rejects unknown or
malformed fields), calls ``ProductService`` and returns a JSON-ready value.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any, Dict, List, Optional

from modules.products.dtos import (
    CreateProductDTO,
    PaginationDTO,
    ProductIdDTO,
    ProductOutputDTO,
    ProductPageDTO,
    UpdateProductDTO,
    ValidateProductsDTO,
)
from modules.products.patterns import (
    CREATE_PRODUCT,
    DELETE_PRODUCT,
    FIND_ALL_PRODUCTS,
    FIND_ONE_PRODUCT,
    UPDATE_PRODUCT,
    VALIDATE_PRODUCTS,
)
from modules.products.repositories.django_repository import ProductDjangoRepository
from modules.products.services import ProductService


class ProductMessageHandler(ABC):
    """Base handler; builds ``ProductService`` over the Django repository."""

    def __init__(self, service: Optional[ProductService] = None) -> None:
        self._service = service or ProductService(repository=ProductDjangoRepository())

    @abstractmethod
    def handle(self, payload: Dict[str, Any]) -> Any:
        """Parse ``payload``, run the use case and return a JSON-ready value."""


class CreateProductHandler(ProductMessageHandler):
    def handle(self, payload: Dict[str, Any]) -> Dict[str, Any]:
        product = self._service.create_product(CreateProductDTO.model_validate(payload))
        return ProductOutputDTO.from_entity(product).to_wire()


class FindAllProductsHandler(ProductMessageHandler):
    def handle(self, payload: Dict[str, Any]) -> Dict[str, Any]:
        page = self._service.list_products(PaginationDTO.model_validate(payload))
        return ProductPageDTO.from_page(page).to_wire()


class FindOneProductHandler(ProductMessageHandler):
    def handle(self, payload: Dict[str, Any]) -> Dict[str, Any]:
        dto = ProductIdDTO.model_validate(payload)
        product = self._service.get_product(dto.id)
        return ProductOutputDTO.from_entity(product).to_wire()


class UpdateProductHandler(ProductMessageHandler):
    def handle(self, payload: Dict[str, Any]) -> Dict[str, Any]:
        dto = UpdateProductDTO.model_validate(payload)
        product = self._service.update_product(dto.id, dto)
        return ProductOutputDTO.from_entity(product).to_wire()


class DeleteProductHandler(ProductMessageHandler):
    def handle(self, payload: Dict[str, Any]) -> Dict[str, Any]:
        dto = ProductIdDTO.model_validate(payload)
        product = self._service.delete_product(dto.id)
        return ProductOutputDTO.from_entity(product).to_wire()


class ValidateProductsHandler(ProductMessageHandler):
    def handle(self, payload: Dict[str, Any]) -> List[Dict[str, Any]]:
        dto = ValidateProductsDTO.model_validate(payload)
        products = self._service.validate_products(dto.ids)
        return [ProductOutputDTO.from_entity(p).to_wire() for p in products]


HANDLERS: Dict[str, ProductMessageHandler] = {
    CREATE_PRODUCT: CreateProductHandler(),
    FIND_ALL_PRODUCTS: FindAllProductsHandler(),
    FIND_ONE_PRODUCT: FindOneProductHandler(),
    UPDATE_PRODUCT: UpdateProductHandler(),
    DELETE_PRODUCT: DeleteProductHandler(),
    VALIDATE_PRODUCTS: ValidateProductsHandler(),
}
