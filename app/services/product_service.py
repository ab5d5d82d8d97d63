import logging
from decimal import Decimal
from typing import Optional

from sqlalchemy.orm import Session

from app.core.constants import PRODUCT_SORT_COLUMNS, SORT_ORDERS
from app.core.conversion import convert_amount
from app.core.exceptions import NotFoundError, ValidationFailedError
from app.database.session import transaction
from app.models.product import Product
from app.repositories import currency_repository, product_price_repository, product_repository
from app.repositories.product_repository import Page, ProductFilters

logger = logging.getLogger(__name__)


def _validate_sorting(filters: ProductFilters) -> None:
    errors = {}
    if filters.sort_by not in PRODUCT_SORT_COLUMNS:
        errors["sort_by"] = [
            "sort_by must be one of: {}".format(", ".join(PRODUCT_SORT_COLUMNS))
        ]
    if filters.sort_order not in SORT_ORDERS:
        errors["sort_order"] = ["sort_order must be one of: asc, desc"]
    if errors:
        raise ValidationFailedError(errors)


def _ensure_currency_exists(db: Session, currency_id: int) -> None:
    if currency_repository.find_by_id(db, currency_id) is None:
        raise ValidationFailedError({"currency_id": ["The selected currency does not exist."]})


def get_products(db: Session, filters: ProductFilters, per_page: int = 15, page: int = 1) -> Page:
    _validate_sorting(filters)
    return product_repository.get_all_paginated(db, filters, per_page=per_page, page=page)


def get_product(db: Session, product_id: int) -> Optional[Product]:
    return product_repository.find_with_relations(db, product_id)


def create_product(db: Session, data: dict) -> Product:
    _ensure_currency_exists(db, data["currency_id"])
    try:
        with transaction(db):
            product = product_repository.create(db, data)
    except Exception as exc:
        logger.error(
            "Error creating product",
            extra={"context": {"error": str(exc), "data": data, "action": "create"}},
        )
        raise

    logger.info(
        "Product created",
        extra={"context": {"product_id": product.id, "name": product.name, "action": "create"}},
    )
    return product_repository.find_with_relations(db, product.id)


def update_product(db: Session, product_id: int, data: dict) -> Product:
    product = product_repository.find_by_id(db, product_id)
    if product is None:
        raise NotFoundError("Product", product_id)
    if "currency_id" in data:
        _ensure_currency_exists(db, data["currency_id"])

    try:
        with transaction(db):
            product_repository.update(db, product, data)
    except Exception as exc:
        logger.error(
            "Error updating product",
            extra={"context": {"error": str(exc), "product_id": product_id, "data": data, "action": "update"}},
        )
        raise

    logger.info(
        "Product updated",
        extra={"context": {"product_id": product.id, "name": product.name, "action": "update"}},
    )
    return product_repository.find_with_relations(db, product.id)


def delete_product(db: Session, product_id: int) -> bool:
    product = product_repository.find_by_id(db, product_id)
    if product is None:
        raise NotFoundError("Product", product_id)

    try:
        with transaction(db):
            removed_prices = product_price_repository.delete_for_product(db, product.id)
            result = product_repository.delete(db, product)
    except Exception as exc:
        logger.error(
            "Error deleting product",
            extra={"context": {"error": str(exc), "product_id": product_id, "action": "delete"}},
        )
        raise

    logger.info(
        "Product deleted",
        extra={"context": {"product_id": product_id, "removed_prices": removed_prices, "action": "delete"}},
    )
    return result


def calculate_total_cost(product: Product) -> Decimal:
    return product.total_cost


def convert_price(product: Product, target_exchange_rate) -> Decimal:
    return convert_amount(product.price, product.currency.exchange_rate, target_exchange_rate)


__all__ = [
    "calculate_total_cost",
    "convert_price",
    "create_product",
    "delete_product",
    "get_product",
    "get_products",
    "update_product",
]
