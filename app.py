"""
Portfolio Strategy Projection (Streamlit)
Compares selling shares against borrowing on margin over a 20-year projection.

Repo layout expected:
- app.py
- projection_dashboard/
- Long-Term_Portfolio_Projection__Oscillating_Repayments_0-65__.csv (produced elsewhere)

The projection itself is computed upstream; this page only loads the CSV once
per session and charts it in three views:
- Portfolio Values: portfolio balance under each strategy
- Margin Loans: outstanding loan balance with and without repayments
- Market Returns: yearly market return and the repayment rate applied
"""

from __future__ import annotations

import logging

import streamlit as st

from projection_dashboard import state as dashboard_state
from projection_dashboard.charts import build_figure, hovered_year_from_event
from projection_dashboard.config import BANNER_TEXT, LOG_LEVEL, PAGE_TITLE
from projection_dashboard.data import rows_frame
from projection_dashboard.views import CHARTS, ViewMode, chart_for

logging.basicConfig(level=LOG_LEVEL)
logger = logging.getLogger(__name__)


# ============================================================
# 0) Streamlit configuration
# ============================================================

st.set_page_config(page_title=PAGE_TITLE, layout="wide")

st.title(PAGE_TITLE)
st.info(BANNER_TEXT)


# ============================================================
# 1) Session data (loaded once per session)
# ============================================================

if dashboard_state.ROWS_KEY not in st.session_state:
    with st.spinner("Loading projection data..."):
        dashboard_state.init_state(st.session_state)

active = dashboard_state.current_view(st.session_state)


# ============================================================
# 2) View selector
# ============================================================

button_cols = st.columns(len(CHARTS))
for col, (mode, chart) in zip(button_cols, CHARTS.items()):
    col.button(
        chart.label,
        key=f"view_{mode.value}",
        type="primary" if mode is active else "secondary",
        on_click=dashboard_state.select_view,
        args=(st.session_state, mode),
    )


# ============================================================
# 3) Active chart
# ============================================================

frame = rows_frame(dashboard_state.rows(st.session_state))
fig = build_figure(frame, chart_for(active))

if active is ViewMode.PORTFOLIO:
    event = st.plotly_chart(
        fig,
        key="portfolio_chart",
        on_select="rerun",
        selection_mode="points",
        width="stretch",
    )
    dashboard_state.set_hovered_year(st.session_state, hovered_year_from_event(event))

    year = dashboard_state.hovered_year(st.session_state)
    if year is not None:
        st.caption(f"Selected year: {year}")
else:
    st.plotly_chart(fig, key=f"{active.value}_chart", width="stretch")
