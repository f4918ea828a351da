"""Celery tasks exposing the products RPC patterns.

Each task name is a message pattern.  Tasks never raise: the reply is the
envelope built by ``handle_message``.
"""

from typing import Any, Dict, Optional

from celery import shared_task

from modules.products import patterns
from shared.infrastructure.rpc import handle_message


@shared_task(name=patterns.CREATE_PRODUCT)
def create_product(payload: Optional[Dict[str, Any]] = None) -> Dict[str, Any]:
    return handle_message(patterns.CREATE_PRODUCT, payload)


@shared_task(name=patterns.FIND_ALL_PRODUCTS)
def find_all_products(payload: Optional[Dict[str, Any]] = None) -> Dict[str, Any]:
    return handle_message(patterns.FIND_ALL_PRODUCTS, payload)


@shared_task(name=patterns.FIND_ONE_PRODUCT)
def find_one_product(payload: Optional[Dict[str, Any]] = None) -> Dict[str, Any]:
    return handle_message(patterns.FIND_ONE_PRODUCT, payload)


@shared_task(name=patterns.UPDATE_PRODUCT)
def update_product(payload: Optional[Dict[str, Any]] = None) -> Dict[str, Any]:
    return handle_message(patterns.UPDATE_PRODUCT, payload)


@shared_task(name=patterns.DELETE_PRODUCT)
def delete_product(payload: Optional[Dict[str, Any]] = None) -> Dict[str, Any]:
    return handle_message(patterns.DELETE_PRODUCT, payload)


@shared_task(name=patterns.VALIDATE_PRODUCTS)
def validate_products(payload: Optional[Dict[str, Any]] = None) -> Dict[str, Any]:
    return handle_message(patterns.VALIDATE_PRODUCTS, payload)
