from datetime import datetime
from decimal import Decimal
from typing import Annotated

from pydantic import AfterValidator, BaseModel, Field, PlainSerializer

from app.core.constants import MAX_ID
from app.core.conversion import has_at_most_two_places
from app.core.dates import as_utc


def _check_two_places(value: Decimal) -> Decimal:
    if not has_at_most_two_places(value):
        raise ValueError("must have at most 2 decimal places")
    return value


# Input amounts: non-negative, finite, at most two decimal places and 15 digits.
Money = Annotated[
    Decimal,
    Field(ge=0, max_digits=15, allow_inf_nan=False),
    AfterValidator(_check_two_places),
]

# Output amounts are rendered as JSON numbers rather than strings.
Amount = Annotated[Decimal, PlainSerializer(float, return_type=float, when_used="json")]

Timestamp = Annotated[datetime, AfterValidator(as_utc)]

EntityId = Annotated[int, Field(ge=1, le=MAX_ID)]


class PaginationMeta(BaseModel):
    total: int
    per_page: int
    current_page: int
    last_page: int
