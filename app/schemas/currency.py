from decimal import Decimal
from typing import Annotated, Optional

from pydantic import BaseModel, ConfigDict, Field

from app.schemas.common import Amount, Timestamp

ExchangeRate = Annotated[Decimal, Field(gt=0, max_digits=15, decimal_places=6, allow_inf_nan=False)]


class CurrencyCreate(BaseModel):
    name: str = Field(min_length=1, max_length=255)
    symbol: str = Field(min_length=1, max_length=16)
    exchange_rate: ExchangeRate


class CurrencyUpdate(BaseModel):
    name: Optional[str] = Field(default=None, min_length=1, max_length=255)
    symbol: Optional[str] = Field(default=None, min_length=1, max_length=16)
    exchange_rate: Optional[ExchangeRate] = None


class CurrencyRead(BaseModel):
    id: int
    name: str
    symbol: str
    exchange_rate: Amount
    formatted_name: str
    created_at: Timestamp
    updated_at: Timestamp

    model_config = ConfigDict(from_attributes=True)
