# projection_dashboard/charts.py
from __future__ import annotations

from typing import Optional

import pandas as pd
import plotly.graph_objects as go

from .config import CHART_HEIGHT, CHART_MARGIN
from .formatting import AXIS_TICK_FORMATS
from .tooltip import year_tooltips
from .views import ChartSpec, ChartType


def _series_trace(frame: pd.DataFrame, chart: ChartSpec, series):
    x = frame["year"].tolist()
    y = frame[series.field].tolist()
    if chart.chart_type is ChartType.BAR:
        return go.Bar(x=x, y=y, name=series.name, marker_color=series.color, hoverinfo="skip")
    return go.Scatter(
        x=x,
        y=y,
        name=series.name,
        mode="lines",
        line=dict(color=series.color, shape="spline"),
        hoverinfo="skip",
    )


def _hover_trace(frame: pd.DataFrame, chart: ChartSpec) -> go.Scatter:
    """
    Invisible markers carrying the tooltip panel, anchored at the highest
    value of each year. Years without any value get no marker.
    """
    tips = year_tooltips(frame, chart)
    anchors = frame[[s.field for s in chart.series]].max(axis=1)

    xs, ys, texts = [], [], []
    for year, anchor, tip in zip(frame["year"], anchors, tips):
        if tip is None:
            continue
        xs.append(year)
        ys.append(anchor)
        texts.append(tip)

    return go.Scatter(
        x=xs,
        y=ys,
        mode="markers",
        marker=dict(size=14, opacity=0),
        hovertext=texts,
        hovertemplate="%{hovertext}<extra></extra>",
        showlegend=False,
        name="tooltip",
    )


def build_figure(frame: pd.DataFrame, chart: ChartSpec) -> go.Figure:
    """Render any of the dashboard views from its ChartSpec."""
    fig = go.Figure()
    for series in chart.series:
        fig.add_trace(_series_trace(frame, chart, series))
    fig.add_trace(_hover_trace(frame, chart))

    fig.update_layout(
        height=CHART_HEIGHT,
        margin=CHART_MARGIN,
        hovermode="x",
        hoverlabel=dict(bgcolor="white"),
        barmode="group",
        legend_title_text="",
        xaxis_title="Year",
    )
    fig.update_xaxes(showgrid=True, griddash="dot", dtick=1)
    fig.update_yaxes(showgrid=True, griddash="dot", **AXIS_TICK_FORMATS[chart.y_kind])
    return fig


def hovered_year_from_event(event) -> Optional[int]:
    """Year of the first selected point in a st.plotly_chart selection event."""
    try:
        points = event["selection"]["points"]
    except (KeyError, TypeError):
        return None

    for point in points:
        try:
            return int(float(point["x"]))
        except (KeyError, TypeError, ValueError):
            continue
    return None
