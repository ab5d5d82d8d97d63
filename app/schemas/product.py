from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator
from sqlalchemy import inspect

from app.schemas.common import Amount, EntityId, Money, Timestamp
from app.schemas.currency import CurrencyRead
from app.schemas.product_price import ProductPriceRead


class ProductCreate(BaseModel):
    name: str = Field(min_length=1, max_length=255)
    description: Optional[str] = None
    price: Money
    currency_id: EntityId
    tax_cost: Money
    manufacturing_cost: Money


class ProductUpdate(BaseModel):
    name: Optional[str] = Field(default=None, min_length=1, max_length=255)
    description: Optional[str] = None
    price: Optional[Money] = None
    currency_id: Optional[EntityId] = None
    tax_cost: Optional[Money] = None
    manufacturing_cost: Optional[Money] = None

    @field_validator("name", "price", "currency_id", "tax_cost", "manufacturing_cost")
    @classmethod
    def _not_null_when_given(cls, value):
        # Defaults are not validated, so this only fires for an explicit null.
        if value is None:
            raise ValueError("may not be null")
        return value

    def changes(self) -> dict:
        return self.model_dump(exclude_unset=True)


class ProductRead(BaseModel):
    id: int
    name: str
    description: Optional[str] = None
    price: Amount
    currency: Optional[CurrencyRead] = None
    tax_cost: Amount
    manufacturing_cost: Amount
    total_cost: Amount
    created_at: Timestamp
    updated_at: Timestamp

    model_config = ConfigDict(from_attributes=True)


class ProductReadWithPrices(ProductRead):
    prices: List[ProductPriceRead] = Field(default_factory=list)


def dump_product(product) -> dict:
    """Serialize a product, including ``prices`` only when they were loaded."""
    if "prices" in inspect(product).unloaded:
        schema = ProductRead
    else:
        schema = ProductReadWithPrices
    return schema.model_validate(product).model_dump(mode="json")
