import unittest
from decimal import Decimal

from sqlalchemy import create_engine, func, select
from sqlalchemy.orm import sessionmaker

from app.core.exceptions import NotFoundError
from app.database.base import Base
from app.models import ProductPrice
from app.services import currency_service, product_price_service, product_service


class ProductPriceServiceTest(unittest.TestCase):
    def setUp(self):
        self.engine = create_engine("sqlite:///:memory:")
        Base.metadata.create_all(bind=self.engine)
        Session = sessionmaker(bind=self.engine, expire_on_commit=False)
        self.db = Session()

        self.usd = currency_service.create_currency(
            self.db,
            {"name": "US Dollar", "symbol": "USD", "exchange_rate": Decimal("1.000000")},
        )
        self.eur = currency_service.create_currency(
            self.db,
            {"name": "Euro", "symbol": "EUR", "exchange_rate": Decimal("0.920000")},
        )
        self.product = product_service.create_product(
            self.db,
            {
                "name": "Widget",
                "description": None,
                "price": Decimal("100.00"),
                "currency_id": self.usd.id,
                "tax_cost": Decimal("10.00"),
                "manufacturing_cost": Decimal("5.00"),
            },
        )

    def tearDown(self):
        self.db.close()
        self.engine.dispose()

    def _count_rows(self):
        return self.db.execute(
            select(func.count()).select_from(ProductPrice).where(ProductPrice.product_id == self.product.id)
        ).scalar_one()

    def test_upsert_is_last_write_wins(self):
        first = product_price_service.create_or_update_price(
            self.db, self.product.id, self.eur.id, Decimal("90.00")
        )
        second = product_price_service.create_or_update_price(
            self.db, self.product.id, self.eur.id, Decimal("95.50")
        )

        self.assertEqual(self._count_rows(), 1)
        self.assertEqual(first.id, second.id)
        self.assertEqual(second.price, Decimal("95.50"))
        self.assertEqual(second.currency.symbol, "EUR")

    def test_upsert_unknown_product_raises_not_found(self):
        with self.assertRaises(NotFoundError) as ctx:
            product_price_service.create_or_update_price(self.db, 999, self.eur.id, Decimal("1.00"))
        self.assertEqual(ctx.exception.entity, "Product")

    def test_upsert_unknown_currency_raises_not_found(self):
        with self.assertRaises(NotFoundError) as ctx:
            product_price_service.create_or_update_price(self.db, self.product.id, 999, Decimal("1.00"))
        self.assertEqual(ctx.exception.entity, "Currency")
        self.assertEqual(self._count_rows(), 0)

    def test_list_prices_ordered_by_currency(self):
        product_price_service.create_or_update_price(self.db, self.product.id, self.eur.id, Decimal("92.00"))
        product_price_service.create_or_update_price(self.db, self.product.id, self.usd.id, Decimal("100.00"))

        prices = product_price_service.get_product_prices(self.db, self.product.id)

        self.assertEqual([p.currency_id for p in prices], sorted([self.usd.id, self.eur.id]))
        self.assertTrue(all(p.currency is not None for p in prices))

    def test_list_prices_for_missing_product(self):
        with self.assertRaises(NotFoundError):
            product_price_service.get_product_prices(self.db, 4242)

    def test_prices_in_all_currencies(self):
        product = product_service.get_product(self.db, self.product.id)

        prices = product_price_service.calculate_prices_in_all_currencies(self.db, product)

        by_symbol = {entry["currency_symbol"]: entry for entry in prices}
        self.assertEqual(set(by_symbol), {"USD", "EUR"})
        self.assertEqual(by_symbol["USD"]["price"], Decimal("100.00"))
        self.assertEqual(by_symbol["EUR"]["price"], Decimal("92.00"))
        self.assertEqual(by_symbol["EUR"]["currency_name"], "Euro")
        self.assertEqual(by_symbol["EUR"]["currency_id"], self.eur.id)


if __name__ == "__main__":
    unittest.main()
