from decimal import Decimal
from typing import List, Optional

from sqlalchemy import delete, select
from sqlalchemy.dialects import postgresql, sqlite
from sqlalchemy.orm import Session, selectinload

from app.core.dates import utcnow
from app.models.product_price import ProductPrice

_NATIVE_UPSERT = {
    "sqlite": sqlite.insert,
    "postgresql": postgresql.insert,
}


def get_prices_for_product(db: Session, product_id: int) -> List[ProductPrice]:
    return list(
        db.execute(
            select(ProductPrice)
            .where(ProductPrice.product_id == product_id)
            .options(selectinload(ProductPrice.currency))
            .order_by(ProductPrice.currency_id.asc())
        )
        .scalars()
        .all()
    )


def find_by_product_and_currency(db: Session, product_id: int, currency_id: int) -> Optional[ProductPrice]:
    return (
        db.execute(
            select(ProductPrice)
            .where(
                ProductPrice.product_id == product_id,
                ProductPrice.currency_id == currency_id,
            )
            .options(selectinload(ProductPrice.currency))
            .execution_options(populate_existing=True)
        )
        .scalars()
        .first()
    )


def create_or_update(db: Session, product_id: int, currency_id: int, price: Decimal) -> ProductPrice:
    """Insert the (product, currency) price or overwrite the existing one."""
    insert_factory = _NATIVE_UPSERT.get(db.get_bind().dialect.name)
    if insert_factory is not None:
        now = utcnow()
        stmt = insert_factory(ProductPrice).values(
            product_id=product_id,
            currency_id=currency_id,
            price=price,
            created_at=now,
            updated_at=now,
        )
        stmt = stmt.on_conflict_do_update(
            index_elements=[ProductPrice.product_id, ProductPrice.currency_id],
            set_={"price": stmt.excluded.price, "updated_at": stmt.excluded.updated_at},
        )
        db.execute(stmt)
    else:
        existing = find_by_product_and_currency(db, product_id, currency_id)
        if existing is None:
            db.add(ProductPrice(product_id=product_id, currency_id=currency_id, price=price))
        else:
            existing.price = price
        db.flush()

    return find_by_product_and_currency(db, product_id, currency_id)


def delete_for_product(db: Session, product_id: int) -> int:
    result = db.execute(delete(ProductPrice).where(ProductPrice.product_id == product_id))
    return result.rowcount or 0


__all__ = [
    "create_or_update",
    "delete_for_product",
    "find_by_product_and_currency",
    "get_prices_for_product",
]
