from typing import Annotated

from fastapi import APIRouter, Depends, Path
from sqlalchemy.orm import Session

from app.core.constants import MAX_ID
from app.core.exceptions import NotFoundError
from app.core.responses import success_response
from app.dependencies import get_db, require_auth
from app.schemas.currency import CurrencyRead
from app.services import currency_service

CurrencyId = Annotated[int, Path(ge=1, le=MAX_ID)]

router = APIRouter(prefix="/currencies", tags=["Currencies"], dependencies=[Depends(require_auth)])


@router.get("")
def list_currencies(db: Session = Depends(get_db)):
    currencies = currency_service.get_all_currencies(db)
    data = [CurrencyRead.model_validate(currency).model_dump(mode="json") for currency in currencies]
    return success_response("Currencies retrieved successfully", data)


@router.get("/{currency_id}")
def get_currency(currency_id: CurrencyId, db: Session = Depends(get_db)):
    currency = currency_service.get_currency(db, currency_id)
    if currency is None:
        raise NotFoundError("Currency", currency_id)
    data = CurrencyRead.model_validate(currency).model_dump(mode="json")
    return success_response("Currency retrieved successfully", data)


__all__ = ["router"]
