import argparse
from decimal import Decimal

from sqlalchemy import delete, select

from app.core.constants import SEED_CURRENCIES
from app.core.logging import setup_logging
from app.database import Base, SessionLocal, engine
from app.models import Currency, Product, ProductPrice
from app.services import currency_service, product_price_service, product_service


def parse_args():
    parser = argparse.ArgumentParser(description="Seed currencies and sample products.")
    parser.add_argument(
        "--reset",
        action="store_true",
        help="Clear existing data before seeding.",
    )
    parser.add_argument(
        "--with-products",
        action="store_true",
        help="Also create a couple of sample products with price overrides.",
    )
    return parser.parse_args()


def seed_currencies(db):
    created = []
    for entry in SEED_CURRENCIES:
        data = dict(entry, exchange_rate=Decimal(entry["exchange_rate"]))
        created.append(currency_service.create_currency(db, data))
    return created


def seed_products(db, currencies):
    by_symbol = {currency.symbol: currency for currency in currencies}
    usd = by_symbol["USD"]
    eur = by_symbol["EUR"]

    laptop = product_service.create_product(
        db,
        {
            "name": "Laptop Dell XPS 13",
            "description": "High-performance laptop",
            "price": Decimal("999.99"),
            "currency_id": usd.id,
            "tax_cost": Decimal("150.00"),
            "manufacturing_cost": Decimal("500.00"),
        },
    )
    product_service.create_product(
        db,
        {
            "name": "Mechanical Keyboard",
            "description": None,
            "price": Decimal("89.50"),
            "currency_id": eur.id,
            "tax_cost": Decimal("17.00"),
            "manufacturing_cost": Decimal("32.25"),
        },
    )
    product_price_service.create_or_update_price(db, laptop.id, eur.id, Decimal("919.99"))


def main():
    setup_logging()
    args = parse_args()

    Base.metadata.create_all(bind=engine)

    db = SessionLocal()
    try:
        if args.reset:
            db.execute(delete(ProductPrice))
            db.execute(delete(Product))
            db.execute(delete(Currency))
            db.commit()

        has_currency = db.execute(select(Currency.id).limit(1)).first()
        if has_currency:
            print("Seed skipped: currencies already exist.")
            return

        currencies = seed_currencies(db)
        if args.with_products:
            seed_products(db, currencies)
        print("Seed data created.")
    finally:
        db.close()


if __name__ == "__main__":
    main()
