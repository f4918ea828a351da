"""Unit tests for the products message handlers."""

from __future__ import annotations

from datetime import datetime, timezone
from decimal import Decimal
from unittest.mock import MagicMock

import pytest
from pydantic import ValidationError

from modules.products import patterns
from modules.products.dtos import CreateProductDTO, PaginationDTO, UpdateProductDTO
from modules.products.exceptions import ProductNotFound
from modules.products.handlers import (
    HANDLERS,
    CreateProductHandler,
    DeleteProductHandler,
    FindAllProductsHandler,
    FindOneProductHandler,
    ProductMessageHandler,
    UpdateProductHandler,
    ValidateProductsHandler,
)
from modules.products.models import Product
from modules.products.services import ProductPage

pytestmark = pytest.mark.unit

NOW = datetime(2026, 1, 15, 12, 0, tzinfo=timezone.utc)


@pytest.fixture()
def mock_service():
    return MagicMock()


def _product(id: int = 1, **overrides) -> Product:
    defaults = {
        "id": id,
        "name": f"Product {id}",
        "description": "",
        "price": Decimal("10.50"),
        "available": True,
        "created_at": NOW,
        "updated_at": NOW,
    }
    defaults.update(overrides)
    return Product(**defaults)


class TestCreateProductHandler:
    def test_returns_wire_product(self, mock_service):
        mock_service.create_product.return_value = _product(1, name="Widget")

        reply = CreateProductHandler(service=mock_service).handle(
            {"name": "Widget", "price": "10.50"}
        )

        dto = mock_service.create_product.call_args.args[0]
        assert isinstance(dto, CreateProductDTO)
        assert dto.price == Decimal("10.50")
        assert reply["id"] == 1
        assert reply["name"] == "Widget"
        assert reply["price"] == 10.5
        assert reply["createdAt"].startswith("2026-01-15T12:00:00")

    def test_invalid_payload_raises_validation_error(self, mock_service):
        with pytest.raises(ValidationError):
            CreateProductHandler(service=mock_service).handle({"name": "Widget"})

        mock_service.create_product.assert_not_called()


class TestFindAllProductsHandler:
    def test_returns_data_and_meta(self, mock_service):
        mock_service.list_products.return_value = ProductPage(
            items=[_product(3), _product(4)], page=2, total=5, last_page=3
        )

        reply = FindAllProductsHandler(service=mock_service).handle({"page": 2, "limit": 2})

        assert mock_service.list_products.call_args.args[0] == PaginationDTO(page=2, limit=2)
        assert [p["id"] for p in reply["data"]] == [3, 4]
        assert reply["meta"] == {"page": 2, "totalPages": 5, "lastPage": 3}

    def test_empty_payload_uses_defaults(self, mock_service):
        mock_service.list_products.return_value = ProductPage(
            items=[], page=1, total=0, last_page=0
        )

        FindAllProductsHandler(service=mock_service).handle({})

        assert mock_service.list_products.call_args.args[0] == PaginationDTO(page=1, limit=10)


class TestFindOneProductHandler:
    def test_returns_wire_product(self, mock_service):
        mock_service.get_product.return_value = _product(7)

        reply = FindOneProductHandler(service=mock_service).handle({"id": 7})

        mock_service.get_product.assert_called_once_with(7)
        assert reply["id"] == 7
        assert reply["available"] is True

    def test_not_found_propagates(self, mock_service):
        mock_service.get_product.side_effect = ProductNotFound(7)

        with pytest.raises(ProductNotFound):
            FindOneProductHandler(service=mock_service).handle({"id": 7})


class TestUpdateProductHandler:
    def test_passes_id_and_patch(self, mock_service):
        mock_service.update_product.return_value = _product(1, name="Renamed")

        reply = UpdateProductHandler(service=mock_service).handle({"id": 1, "name": "Renamed"})

        id_, dto = mock_service.update_product.call_args.args
        assert id_ == 1
        assert isinstance(dto, UpdateProductDTO)
        assert dto.changes() == {"name": "Renamed"}
        assert reply["name"] == "Renamed"


class TestDeleteProductHandler:
    def test_returns_inactive_product(self, mock_service):
        mock_service.delete_product.return_value = _product(1, available=False)

        reply = DeleteProductHandler(service=mock_service).handle({"id": 1})

        mock_service.delete_product.assert_called_once_with(1)
        assert reply["available"] is False


class TestValidateProductsHandler:
    def test_returns_list_of_wire_products(self, mock_service):
        mock_service.validate_products.return_value = [_product(1), _product(2)]

        reply = ValidateProductsHandler(service=mock_service).handle({"ids": [1, 2, 2]})

        mock_service.validate_products.assert_called_once_with([1, 2, 2])
        assert [p["id"] for p in reply] == [1, 2]

    def test_missing_ids_field_raises_validation_error(self, mock_service):
        with pytest.raises(ValidationError):
            ValidateProductsHandler(service=mock_service).handle({})


def test_every_pattern_has_a_handler():
    assert set(HANDLERS) == {
        patterns.CREATE_PRODUCT,
        patterns.FIND_ALL_PRODUCTS,
        patterns.FIND_ONE_PRODUCT,
        patterns.UPDATE_PRODUCT,
        patterns.DELETE_PRODUCT,
        patterns.VALIDATE_PRODUCTS,
    }


def test_base_handler_cannot_be_instantiated(mock_service):
    with pytest.raises(TypeError):
        ProductMessageHandler(service=mock_service)


def test_handler_without_handle_cannot_be_instantiated(mock_service):
    class IncompleteHandler(ProductMessageHandler):
        pass

    with pytest.raises(TypeError):
        IncompleteHandler(service=mock_service)
