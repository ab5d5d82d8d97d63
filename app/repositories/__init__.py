from app.repositories import (
    currency_repository,
    product_price_repository,
    product_repository,
)

__all__ = [
    "currency_repository",
    "product_price_repository",
    "product_repository",
]
