from typing import List, Optional

from sqlalchemy import select
from sqlalchemy.orm import Session

from app.core.conversion import to_decimal
from app.models.currency import Currency


def _check_exchange_rate(value) -> None:
    if value is None or to_decimal(value) <= 0:
        raise ValueError("exchange_rate must be greater than zero.")


def get_all(db: Session) -> List[Currency]:
    return list(db.execute(select(Currency).order_by(Currency.name.asc())).scalars().all())


def find_by_id(db: Session, currency_id: int) -> Optional[Currency]:
    return db.get(Currency, currency_id)


def create(db: Session, data: dict) -> Currency:
    _check_exchange_rate(data.get("exchange_rate"))
    currency = Currency(**data)
    db.add(currency)
    db.flush()
    return currency


def update(db: Session, currency: Currency, data: dict) -> Currency:
    if "exchange_rate" in data:
        _check_exchange_rate(data["exchange_rate"])
    for field, value in data.items():
        setattr(currency, field, value)
    db.flush()
    return currency


__all__ = ["create", "find_by_id", "get_all", "update"]
