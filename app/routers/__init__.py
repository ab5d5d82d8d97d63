from app.routers.currencies import router as currencies_router
from app.routers.health import router as health_router
from app.routers.product_prices import router as product_prices_router
from app.routers.products import router as products_router

__all__ = [
    "currencies_router",
    "health_router",
    "product_prices_router",
    "products_router",
]
