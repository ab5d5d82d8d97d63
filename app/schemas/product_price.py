from typing import Optional

from pydantic import BaseModel, ConfigDict

from app.schemas.common import Amount, EntityId, Money, Timestamp
from app.schemas.currency import CurrencyRead


class ProductPriceUpsert(BaseModel):
    currency_id: EntityId
    price: Money


class ProductPriceRead(BaseModel):
    id: int
    product_id: int
    currency: Optional[CurrencyRead] = None
    price: Amount
    created_at: Timestamp
    updated_at: Timestamp

    model_config = ConfigDict(from_attributes=True)
