import logging
from typing import List, Optional

from pydantic import ValidationError
from sqlalchemy.orm import Session

from app.core.exceptions import NotFoundError, ValidationFailedError
from app.database.session import transaction
from app.models.currency import Currency
from app.repositories import currency_repository
from app.schemas.currency import CurrencyCreate, CurrencyUpdate

logger = logging.getLogger(__name__)


def get_all_currencies(db: Session) -> List[Currency]:
    return currency_repository.get_all(db)


def get_currency(db: Session, currency_id: int) -> Optional[Currency]:
    return currency_repository.find_by_id(db, currency_id)


def create_currency(db: Session, data: dict) -> Currency:
    """Create a currency; not routed, used by seeding and admin tooling."""
    try:
        payload = CurrencyCreate.model_validate(data)
    except ValidationError as exc:
        raise ValidationFailedError.from_pydantic(exc.errors()) from exc

    with transaction(db):
        currency = currency_repository.create(db, payload.model_dump())
    logger.info(
        "Currency created",
        extra={"context": {"currency_id": currency.id, "symbol": currency.symbol, "action": "create"}},
    )
    return currency


def update_currency(db: Session, currency_id: int, data: dict) -> Currency:
    currency = currency_repository.find_by_id(db, currency_id)
    if currency is None:
        raise NotFoundError("Currency", currency_id)
    try:
        changes = CurrencyUpdate.model_validate(data).model_dump(exclude_unset=True)
    except ValidationError as exc:
        raise ValidationFailedError.from_pydantic(exc.errors()) from exc

    with transaction(db):
        currency_repository.update(db, currency, changes)
    logger.info(
        "Currency updated",
        extra={"context": {"currency_id": currency.id, "action": "update"}},
    )
    return currency


__all__ = [
    "create_currency",
    "get_all_currencies",
    "get_currency",
    "update_currency",
]
