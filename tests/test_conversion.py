import unittest
from decimal import Decimal

from app.core.conversion import convert_amount, has_at_most_two_places, round_money


class ConversionTest(unittest.TestCase):
    def test_same_rate_is_identity(self):
        for amount, rate in ((Decimal("100"), Decimal("1")), (Decimal("19.999"), Decimal("7.85")), (0.1, 0.92)):
            with self.subTest(amount=amount, rate=rate):
                self.assertEqual(convert_amount(amount, rate, rate), round_money(amount))

    def test_converts_through_base_unit(self):
        self.assertEqual(convert_amount(Decimal("100.00"), Decimal("1.0"), Decimal("0.92")), Decimal("92.00"))
        self.assertEqual(convert_amount(Decimal("785.00"), Decimal("7.85"), Decimal("17.25")), Decimal("1725.00"))

    def test_rounds_half_up_to_cents(self):
        self.assertEqual(convert_amount(Decimal("10"), Decimal("3"), Decimal("1")), Decimal("3.33"))
        self.assertEqual(round_money(Decimal("2.345")), Decimal("2.35"))

    def test_rejects_non_positive_rates(self):
        with self.assertRaises(ValueError):
            convert_amount(Decimal("10"), Decimal("0"), Decimal("1"))
        with self.assertRaises(ValueError):
            convert_amount(Decimal("10"), Decimal("1"), Decimal("-2"))

    def test_two_decimal_places(self):
        self.assertTrue(has_at_most_two_places(Decimal("10.25")))
        self.assertTrue(has_at_most_two_places(Decimal("10.250")))
        self.assertTrue(has_at_most_two_places(7))
        self.assertFalse(has_at_most_two_places(Decimal("1.005")))


if __name__ == "__main__":
    unittest.main()
