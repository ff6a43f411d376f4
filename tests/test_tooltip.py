import unittest

from projection_dashboard.data import parse_rows, rows_frame
from projection_dashboard.formatting import FormatKind
from projection_dashboard.tooltip import TooltipEntry, render_tooltip, year_tooltips
from projection_dashboard.views import MARKET_CHART, PORTFOLIO_CHART


class RenderTooltipTests(unittest.TestCase):
    def test_nothing_hovered(self):
        entries = [TooltipEntry("Market Return", 5.0, "#8884d8", FormatKind.PERCENT)]
        self.assertIsNone(render_tooltip(None, entries))

    def test_no_series_with_values(self):
        self.assertIsNone(render_tooltip(3, []))
        self.assertIsNone(render_tooltip(3, [TooltipEntry("Market Return", None, "#8884d8")]))

    def test_year_then_one_line_per_series(self):
        tip = render_tooltip(
            2,
            [
                TooltipEntry("Selling Strategy", 1234.5, "#ff7300", FormatKind.CURRENCY),
                TooltipEntry("Margin - No Repayment", None, "#82ca9d", FormatKind.CURRENCY),
                TooltipEntry("Market Return", -3.2, "#8884d8", FormatKind.PERCENT),
            ],
        )
        lines = tip.split("<br>")
        self.assertEqual(lines[0], "<b>Year 2</b>")
        self.assertEqual(len(lines), 3)
        self.assertIn("color:#ff7300", lines[1])
        self.assertIn("Selling Strategy: $1,235", lines[1])
        self.assertIn("Market Return: -3.2%", lines[2])

    def test_explicit_kind_overrides_magnitude(self):
        tip = render_tooltip(1, [TooltipEntry("Loan", 50.0, "#000", FormatKind.CURRENCY)])
        self.assertIn("Loan: $50", tip)

    def test_magnitude_fallback_without_kind(self):
        tip = render_tooltip(
            1,
            [TooltipEntry("Balance", 20800, "#000"), TooltipEntry("Return", 7.4, "#111")],
        )
        self.assertIn("Balance: $20,800", tip)
        self.assertIn("Return: 7.4%", tip)

    def test_float_year_label(self):
        tip = render_tooltip(4.0, [TooltipEntry("Return", 1.0, "#000", FormatKind.PERCENT)])
        self.assertTrue(tip.startswith("<b>Year 4</b>"))


class YearTooltipsTests(unittest.TestCase):
    def test_one_tooltip_per_row(self):
        frame = rows_frame(
            parse_rows("Year,Market Return (%),Random Repayment %\n1,5.0,\n2,,\n")
        )
        tips = year_tooltips(frame, MARKET_CHART)
        self.assertEqual(len(tips), 2)
        self.assertIn("Market Return: 5.0%", tips[0])
        self.assertNotIn("Repayment Rate", tips[0])
        self.assertIsNone(tips[1])

    def test_empty_frame(self):
        self.assertEqual(year_tooltips(rows_frame([]), PORTFOLIO_CHART), [])


if __name__ == "__main__":
    unittest.main()
