import math
from dataclasses import dataclass
from decimal import Decimal
from typing import List, Optional

from sqlalchemy import func, select
from sqlalchemy.orm import Session, selectinload

from app.core.constants import DEFAULT_SORT_BY, DEFAULT_SORT_ORDER
from app.core.dates import utcnow
from app.models.product import Product
from app.models.product_price import ProductPrice
from app.schemas.common import PaginationMeta


@dataclass
class ProductFilters:
    name: Optional[str] = None
    currency_id: Optional[int] = None
    min_price: Optional[Decimal] = None
    max_price: Optional[Decimal] = None
    sort_by: str = DEFAULT_SORT_BY
    sort_order: str = DEFAULT_SORT_ORDER


@dataclass
class Page:
    items: List[Product]
    total: int
    per_page: int
    current_page: int

    @property
    def last_page(self) -> int:
        return max(1, math.ceil(self.total / self.per_page))

    def meta(self) -> dict:
        return PaginationMeta(
            total=self.total,
            per_page=self.per_page,
            current_page=self.current_page,
            last_page=self.last_page,
        ).model_dump()


def _with_relations():
    return (
        selectinload(Product.currency),
        selectinload(Product.prices).selectinload(ProductPrice.currency),
    )


def _base_query(with_trashed: bool = False):
    stmt = select(Product)
    if not with_trashed:
        stmt = stmt.where(Product.deleted_at.is_(None))
    return stmt


def _apply_filters(stmt, filters: ProductFilters):
    if filters.name:
        stmt = stmt.where(Product.name.icontains(filters.name, autoescape=True))
    if filters.currency_id is not None:
        stmt = stmt.where(Product.currency_id == filters.currency_id)
    if filters.min_price is not None:
        stmt = stmt.where(Product.price >= filters.min_price)
    if filters.max_price is not None:
        stmt = stmt.where(Product.price <= filters.max_price)
    return stmt


def get_all_paginated(db: Session, filters: ProductFilters, per_page: int = 15, page: int = 1) -> Page:
    stmt = _apply_filters(_base_query(), filters)

    total = db.execute(select(func.count()).select_from(stmt.subquery())).scalar_one()

    # Callers restrict sort_by to real columns before it gets here.
    column = getattr(Product, filters.sort_by)
    ordering = column.asc() if filters.sort_order == "asc" else column.desc()
    tiebreak = Product.id.asc() if filters.sort_order == "asc" else Product.id.desc()

    items = (
        db.execute(
            stmt.options(*_with_relations())
            .order_by(ordering, tiebreak)
            .offset((page - 1) * per_page)
            .limit(per_page)
        )
        .scalars()
        .all()
    )
    return Page(items=list(items), total=total, per_page=per_page, current_page=page)


def find_by_id(db: Session, product_id: int, *, with_trashed: bool = False) -> Optional[Product]:
    return (
        db.execute(_base_query(with_trashed).where(Product.id == product_id))
        .scalars()
        .first()
    )


def find_with_relations(db: Session, product_id: int) -> Optional[Product]:
    return (
        db.execute(
            _base_query()
            .where(Product.id == product_id)
            .options(*_with_relations())
            .execution_options(populate_existing=True)
        )
        .scalars()
        .first()
    )


def create(db: Session, data: dict) -> Product:
    product = Product(**data)
    db.add(product)
    db.flush()
    return product


def update(db: Session, product: Product, data: dict) -> Product:
    for field, value in data.items():
        setattr(product, field, value)
    db.flush()
    return product


def delete(db: Session, product: Product) -> bool:
    product.deleted_at = utcnow()
    db.flush()
    return True


__all__ = [
    "Page",
    "ProductFilters",
    "create",
    "delete",
    "find_by_id",
    "find_with_relations",
    "get_all_paginated",
    "update",
]
