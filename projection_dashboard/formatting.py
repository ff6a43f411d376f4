# projection_dashboard/formatting.py
from __future__ import annotations

import math
from decimal import ROUND_HALF_UP, Context, Decimal
from enum import Enum
from typing import Dict, Optional

from .config import PLACEHOLDER

# Wide enough to quantize any finite float without InvalidOperation.
_CONTEXT = Context(prec=400, rounding=ROUND_HALF_UP)

_WHOLE = Decimal("1")
_TENTH = Decimal("0.1")

CURRENCY_THRESHOLD = 100


class FormatKind(str, Enum):
    CURRENCY = "currency"
    PERCENT = "percent"


# d3-format equivalents of the two formatters, for plotly axes.
AXIS_TICK_FORMATS: Dict[FormatKind, dict] = {
    FormatKind.CURRENCY: dict(tickformat="$,.0f"),
    FormatKind.PERCENT: dict(tickformat=".1f", ticksuffix="%"),
}


def _exact(x) -> Optional[Decimal]:
    """Exact decimal value of a finite number, or None for anything else."""
    if x is None or isinstance(x, bool):
        return None
    try:
        value = float(x)
    except (TypeError, ValueError):
        return None
    if not math.isfinite(value):
        return None
    return Decimal(value)


def format_currency(x) -> str:
    """Whole US dollars, e.g. 1234.5 -> "$1,235". Halves round away from zero."""
    d = _exact(x)
    if d is None:
        return PLACEHOLDER
    dollars = int(d.quantize(_WHOLE, context=_CONTEXT))
    sign = "-" if dollars < 0 else ""
    return f"{sign}${abs(dollars):,}"


def format_percent(x) -> str:
    """One decimal digit and a literal percent sign, e.g. 12.34 -> "12.3%"."""
    d = _exact(x)
    if d is None:
        return PLACEHOLDER
    q = d.quantize(_TENTH, context=_CONTEXT)
    if q == 0:
        q = abs(q)
    return f"{q:f}%"


def format_value(x, kind: FormatKind) -> str:
    if FormatKind(kind) is FormatKind.CURRENCY:
        return format_currency(x)
    return format_percent(x)


def format_by_magnitude(x) -> str:
    """
    Legacy dispatch for values without a format kind:
    >= 100 is treated as dollars, anything smaller as a percentage.
    Misreads dollar amounts under $100 and percentages of 100 or more.
    """
    d = _exact(x)
    if d is None:
        return PLACEHOLDER
    if d >= CURRENCY_THRESHOLD:
        return format_currency(x)
    return format_percent(x)
