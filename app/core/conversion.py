from decimal import ROUND_HALF_UP, Decimal

CENT = Decimal("0.01")


def to_decimal(value) -> Decimal:
    if isinstance(value, Decimal):
        return value
    # str() keeps 0.1 as 0.1 instead of its binary float expansion.
    return Decimal(str(value))


def round_money(value) -> Decimal:
    return to_decimal(value).quantize(CENT, rounding=ROUND_HALF_UP)


def convert_amount(amount, from_rate, to_rate) -> Decimal:
    """Convert ``amount`` between two exchange rate bases.

    Rates are relative to the implicit base unit (1.0), so the amount is
    first brought back to the base unit and then into the target currency.
    """
    from_rate = to_decimal(from_rate)
    to_rate = to_decimal(to_rate)
    if from_rate <= 0 or to_rate <= 0:
        raise ValueError("Exchange rates must be positive.")
    return round_money(to_decimal(amount) / from_rate * to_rate)


def has_at_most_two_places(value) -> bool:
    value = to_decimal(value)
    return value == value.quantize(CENT)


__all__ = ["CENT", "convert_amount", "has_at_most_two_places", "round_money", "to_decimal"]
