SORT_ORDERS = ("asc", "desc")
PRODUCT_SORT_COLUMNS = (
    "id",
    "name",
    "price",
    "currency_id",
    "tax_cost",
    "manufacturing_cost",
    "created_at",
    "updated_at",
)
DEFAULT_SORT_BY = "created_at"
DEFAULT_SORT_ORDER = "desc"

# Largest value a 64-bit signed integer primary key can hold.
MAX_ID = 2**63 - 1

SEED_CURRENCIES = (
    {"name": "US Dollar", "symbol": "USD", "exchange_rate": "1.000000"},
    {"name": "Euro", "symbol": "EUR", "exchange_rate": "0.920000"},
    {"name": "Guatemalan Quetzal", "symbol": "GTQ", "exchange_rate": "7.850000"},
    {"name": "Mexican Peso", "symbol": "MXN", "exchange_rate": "17.250000"},
    {"name": "British Pound", "symbol": "GBP", "exchange_rate": "0.790000"},
)
