# projection_dashboard/views.py
from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Dict, Tuple

from .formatting import FormatKind


class ViewMode(str, Enum):
    PORTFOLIO = "portfolio"
    MARGIN = "margin"
    MARKET = "market"


DEFAULT_VIEW = ViewMode.PORTFOLIO


class ChartType(str, Enum):
    LINE = "line"
    BAR = "bar"


@dataclass(frozen=True)
class SeriesSpec:
    field: str
    name: str
    color: str
    kind: FormatKind


@dataclass(frozen=True)
class ChartSpec:
    mode: ViewMode
    label: str
    chart_type: ChartType
    y_kind: FormatKind
    series: Tuple[SeriesSpec, ...]

    def __post_init__(self):
        # unknown chart types or formats fail here, not at render time
        object.__setattr__(self, "chart_type", ChartType(self.chart_type))
        object.__setattr__(self, "y_kind", FormatKind(self.y_kind))


# ============================================================
# The three dashboard views
# ============================================================

PORTFOLIO_CHART = ChartSpec(
    mode=ViewMode.PORTFOLIO,
    label="Portfolio Values",
    chart_type=ChartType.LINE,
    y_kind=FormatKind.CURRENCY,
    series=(
        SeriesSpec("portfolio_selling_strategy", "Selling Strategy", "#ff7300", FormatKind.CURRENCY),
        SeriesSpec("portfolio_margin_no_repay", "Margin - No Repayment", "#82ca9d", FormatKind.CURRENCY),
        SeriesSpec("portfolio_margin_oscillating", "Margin - Oscillating Repayment", "#8884d8", FormatKind.CURRENCY),
    ),
)

MARGIN_CHART = ChartSpec(
    mode=ViewMode.MARGIN,
    label="Margin Loans",
    chart_type=ChartType.LINE,
    y_kind=FormatKind.CURRENCY,
    series=(
        SeriesSpec("margin_balance_no_repay", "No Repayment", "#82ca9d", FormatKind.CURRENCY),
        SeriesSpec("margin_balance_oscillating", "Oscillating Repayment", "#8884d8", FormatKind.CURRENCY),
    ),
)

MARKET_CHART = ChartSpec(
    mode=ViewMode.MARKET,
    label="Market Returns",
    chart_type=ChartType.BAR,
    y_kind=FormatKind.PERCENT,
    series=(
        SeriesSpec("market_return_percent", "Market Return", "#8884d8", FormatKind.PERCENT),
        SeriesSpec("random_repayment_percent", "Repayment Rate", "#82ca9d", FormatKind.PERCENT),
    ),
)

# Button order on the page
CHARTS: Dict[ViewMode, ChartSpec] = {
    chart.mode: chart for chart in (PORTFOLIO_CHART, MARGIN_CHART, MARKET_CHART)
}


def chart_for(mode) -> ChartSpec:
    return CHARTS[ViewMode(mode)]
