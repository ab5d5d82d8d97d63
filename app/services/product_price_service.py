import logging
from decimal import Decimal
from typing import List

from sqlalchemy.orm import Session

from app.core.conversion import convert_amount
from app.core.exceptions import NotFoundError
from app.database.session import transaction
from app.models.product import Product
from app.models.product_price import ProductPrice
from app.repositories import currency_repository, product_price_repository, product_repository

logger = logging.getLogger(__name__)


def get_product_prices(db: Session, product_id: int) -> List[ProductPrice]:
    if product_repository.find_by_id(db, product_id) is None:
        raise NotFoundError("Product", product_id)
    return product_price_repository.get_prices_for_product(db, product_id)


def create_or_update_price(db: Session, product_id: int, currency_id: int, price: Decimal) -> ProductPrice:
    context = {
        "product_id": product_id,
        "currency_id": currency_id,
        "price": price,
        "action": "create_or_update",
    }
    try:
        with transaction(db):
            if product_repository.find_by_id(db, product_id) is None:
                raise NotFoundError("Product", product_id)
            if currency_repository.find_by_id(db, currency_id) is None:
                raise NotFoundError("Currency", currency_id)
            product_price = product_price_repository.create_or_update(db, product_id, currency_id, price)
    except Exception as exc:
        logger.error(
            "Error creating/updating product price",
            extra={"context": dict(context, error=str(exc))},
        )
        raise

    logger.info("Product price created/updated", extra={"context": context})
    return product_price


def calculate_prices_in_all_currencies(db: Session, product: Product) -> List[dict]:
    base_rate = product.currency.exchange_rate
    return [
        {
            "currency_id": currency.id,
            "currency_name": currency.name,
            "currency_symbol": currency.symbol,
            "price": convert_amount(product.price, base_rate, currency.exchange_rate),
        }
        for currency in currency_repository.get_all(db)
    ]


__all__ = [
    "calculate_prices_in_all_currencies",
    "create_or_update_price",
    "get_product_prices",
]
