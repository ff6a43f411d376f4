# projection_dashboard/config.py
from __future__ import annotations

import logging
from pathlib import Path

# ============================================================
# Data source
# ============================================================

ROOT_DIR = Path(__file__).resolve().parent.parent

CSV_FILENAME = "Long-Term_Portfolio_Projection__Oscillating_Repayments_0-65__.csv"
DEFAULT_CSV_SOURCE = str(ROOT_DIR / CSV_FILENAME)

FETCH_TIMEOUT_SECONDS = 10

# ============================================================
# Page
# ============================================================

PAGE_TITLE = "Portfolio Strategy Projection"

BANNER_TEXT = (
    "This dashboard compares different portfolio strategies over a 20-year period "
    "with various market conditions and repayment approaches."
)

CHART_HEIGHT = 600
CHART_MARGIN = dict(t=5, r=30, l=20, b=5)

# ============================================================
# Formatting
# ============================================================

PLACEHOLDER = "—"

LOG_LEVEL = logging.INFO
