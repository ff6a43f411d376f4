import math
import unittest

from projection_dashboard.config import PLACEHOLDER
from projection_dashboard.formatting import (
    FormatKind,
    format_by_magnitude,
    format_currency,
    format_percent,
    format_value,
)


class CurrencyTests(unittest.TestCase):
    def test_zero(self):
        self.assertEqual(format_currency(0), "$0")

    def test_half_dollar_rounds_up_with_separators(self):
        self.assertEqual(format_currency(1234.5), "$1,235")
        self.assertEqual(format_currency(1234.49), "$1,234")
        self.assertEqual(format_currency(2.5), "$3")

    def test_large_and_negative_values(self):
        self.assertEqual(format_currency(1094000), "$1,094,000")
        self.assertEqual(format_currency(-1234.5), "-$1,235")
        self.assertEqual(format_currency(-0.4), "$0")

    def test_missing_values_use_placeholder(self):
        for value in (None, float("nan"), math.inf, -math.inf, "abc", [1]):
            self.assertEqual(format_currency(value), PLACEHOLDER)


class PercentTests(unittest.TestCase):
    def test_one_decimal_digit(self):
        self.assertEqual(format_percent(12.34), "12.3%")
        self.assertEqual(format_percent(0), "0.0%")
        self.assertEqual(format_percent(5), "5.0%")
        self.assertEqual(format_percent(-3.2), "-3.2%")

    def test_exact_halves_round_away_from_zero(self):
        self.assertEqual(format_percent(0.25), "0.3%")
        self.assertEqual(format_percent(-0.25), "-0.3%")

    def test_tiny_negative_has_no_sign(self):
        self.assertEqual(format_percent(-0.04), "0.0%")

    def test_huge_value_does_not_raise(self):
        self.assertTrue(format_percent(1e300).endswith(".0%"))

    def test_missing_values_use_placeholder(self):
        for value in (None, float("nan"), math.inf, ""):
            self.assertEqual(format_percent(value), PLACEHOLDER)


class DispatchTests(unittest.TestCase):
    def test_format_value_uses_kind(self):
        self.assertEqual(format_value(50, FormatKind.CURRENCY), "$50")
        self.assertEqual(format_value(150, FormatKind.PERCENT), "150.0%")
        self.assertEqual(format_value(150, "currency"), "$150")

    def test_magnitude_heuristic(self):
        self.assertEqual(format_by_magnitude(100), "$100")
        self.assertEqual(format_by_magnitude(99.94), "99.9%")
        # known misreads of the heuristic
        self.assertEqual(format_by_magnitude(50), "50.0%")
        self.assertEqual(format_by_magnitude(120), "$120")
        self.assertEqual(format_by_magnitude(None), PLACEHOLDER)


if __name__ == "__main__":
    unittest.main()
