from app.models.currency import Currency
from app.models.product import Product
from app.models.product_price import ProductPrice

__all__ = [
    "Currency",
    "Product",
    "ProductPrice",
]
