# projection_dashboard/tooltip.py
from __future__ import annotations

import html
from dataclasses import dataclass
from typing import List, Optional, Sequence

import pandas as pd

from .formatting import FormatKind, format_by_magnitude, format_value
from .views import ChartSpec


@dataclass(frozen=True)
class TooltipEntry:
    name: str
    value: Optional[float]
    color: str
    kind: Optional[FormatKind] = None


def _has_value(value) -> bool:
    try:
        return not pd.isna(value)
    except (TypeError, ValueError):
        return False


def _year_label(year) -> str:
    if isinstance(year, float) and year.is_integer():
        return str(int(year))
    return str(year)


def render_tooltip(year, entries: Sequence[TooltipEntry]) -> Optional[str]:
    """
    Hover panel for one x position: the year, then one coloured line per
    series that has a value there. None when nothing is hovered or no
    series has a value.

    Entries without a kind fall back to format_by_magnitude.
    """
    if year is None or not _has_value(year):
        return None

    lines = []
    for entry in entries:
        if not _has_value(entry.value):
            continue
        if entry.kind is None:
            text = format_by_magnitude(entry.value)
        else:
            text = format_value(entry.value, entry.kind)
        lines.append(
            f'<span style="color:{entry.color}">{html.escape(entry.name)}: {html.escape(text)}</span>'
        )

    if not lines:
        return None
    return "<br>".join([f"<b>Year {_year_label(year)}</b>"] + lines)


def year_tooltips(frame: pd.DataFrame, chart: ChartSpec) -> List[Optional[str]]:
    """One tooltip per frame row, for the chart's series."""
    tips = []
    for _, row in frame.iterrows():
        entries = [
            TooltipEntry(name=s.name, value=row.get(s.field), color=s.color, kind=s.kind)
            for s in chart.series
        ]
        tips.append(render_tooltip(row.get("year"), entries))
    return tips
