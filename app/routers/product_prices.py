from typing import Annotated

from fastapi import APIRouter, Depends, Path, status
from sqlalchemy.orm import Session

from app.core.constants import MAX_ID
from app.core.exceptions import CatalogError, OperationFailedError
from app.core.responses import success_response
from app.dependencies import get_db, require_auth
from app.schemas.product_price import ProductPriceRead, ProductPriceUpsert
from app.services import product_price_service

ProductId = Annotated[int, Path(ge=1, le=MAX_ID)]

router = APIRouter(
    prefix="/products/{product_id}/prices",
    tags=["Product Prices"],
    dependencies=[Depends(require_auth)],
)


@router.get("")
def list_product_prices(product_id: ProductId, db: Session = Depends(get_db)):
    prices = product_price_service.get_product_prices(db, product_id)
    data = [ProductPriceRead.model_validate(price).model_dump(mode="json") for price in prices]
    return success_response("Prices retrieved successfully", data)


@router.post("", status_code=status.HTTP_201_CREATED)
def upsert_product_price(product_id: ProductId, payload: ProductPriceUpsert, db: Session = Depends(get_db)):
    try:
        product_price = product_price_service.create_or_update_price(
            db,
            product_id,
            payload.currency_id,
            payload.price,
        )
    except CatalogError:
        raise
    except Exception as exc:
        raise OperationFailedError("Error creating/updating the price", exc) from exc
    return success_response(
        "Price created/updated successfully",
        ProductPriceRead.model_validate(product_price).model_dump(mode="json"),
        status_code=status.HTTP_201_CREATED,
    )


__all__ = ["router"]
