from decimal import Decimal
from typing import Annotated, Optional

from fastapi import APIRouter, Depends, Path, Query, status
from sqlalchemy.orm import Session

from app.config import get_settings
from app.core.constants import DEFAULT_SORT_BY, DEFAULT_SORT_ORDER, MAX_ID
from app.core.exceptions import CatalogError, NotFoundError, OperationFailedError
from app.core.responses import success_response
from app.dependencies import get_db, require_auth
from app.repositories.product_repository import ProductFilters
from app.schemas.product import ProductCreate, ProductUpdate, dump_product
from app.services import product_service

settings = get_settings()
ProductId = Annotated[int, Path(ge=1, le=MAX_ID)]

router = APIRouter(prefix="/products", tags=["Products"], dependencies=[Depends(require_auth)])


@router.get("")
def list_products(
    name: Optional[str] = Query(None, description="Case-insensitive partial match on name"),
    currency_id: Optional[int] = Query(None, ge=1, le=MAX_ID, description="Base currency ID"),
    min_price: Optional[Decimal] = Query(None, description="Inclusive lower price bound"),
    max_price: Optional[Decimal] = Query(None, description="Inclusive upper price bound"),
    per_page: int = Query(settings.DEFAULT_PER_PAGE, ge=1, le=settings.MAX_PER_PAGE),
    page: int = Query(1, ge=1),
    sort_by: str = Query(DEFAULT_SORT_BY),
    sort_order: str = Query(DEFAULT_SORT_ORDER, description="asc | desc"),
    db: Session = Depends(get_db),
):
    filters = ProductFilters(
        name=name.strip() if name else None,
        currency_id=currency_id,
        min_price=min_price,
        max_price=max_price,
        sort_by=sort_by,
        sort_order=sort_order.lower(),
    )
    result = product_service.get_products(db, filters, per_page=per_page, page=page)
    return success_response(
        "Products retrieved successfully",
        [dump_product(product) for product in result.items],
        meta=result.meta(),
    )


@router.post("", status_code=status.HTTP_201_CREATED)
def create_product(payload: ProductCreate, db: Session = Depends(get_db)):
    try:
        product = product_service.create_product(db, payload.model_dump())
    except CatalogError:
        raise
    except Exception as exc:
        raise OperationFailedError("Error creating the product", exc) from exc
    return success_response(
        "Product created successfully",
        dump_product(product),
        status_code=status.HTTP_201_CREATED,
    )


@router.get("/{product_id}")
def get_product(product_id: ProductId, db: Session = Depends(get_db)):
    product = product_service.get_product(db, product_id)
    if product is None:
        raise NotFoundError("Product", product_id)
    return success_response("Product retrieved successfully", dump_product(product))


@router.put("/{product_id}")
@router.patch("/{product_id}")
def update_product(product_id: ProductId, payload: ProductUpdate, db: Session = Depends(get_db)):
    try:
        product = product_service.update_product(db, product_id, payload.changes())
    except CatalogError:
        raise
    except Exception as exc:
        raise OperationFailedError("Error updating the product", exc) from exc
    return success_response("Product updated successfully", dump_product(product))


@router.delete("/{product_id}")
def delete_product(product_id: ProductId, db: Session = Depends(get_db)):
    try:
        product_service.delete_product(db, product_id)
    except CatalogError:
        raise
    except Exception as exc:
        raise OperationFailedError("Error deleting the product", exc) from exc
    return success_response("Product deleted successfully")


__all__ = ["router"]
