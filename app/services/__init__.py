from app.services import currency_service, product_price_service, product_service

__all__ = [
    "currency_service",
    "product_price_service",
    "product_service",
]
