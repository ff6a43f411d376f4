# projection_dashboard/data.py
from __future__ import annotations

import csv
import logging
from dataclasses import asdict, dataclass, fields
from pathlib import Path
from typing import Dict, List, Optional, Sequence, Union

import pandas as pd
import requests

from .config import FETCH_TIMEOUT_SECONDS

logger = logging.getLogger(__name__)

# CSV column title -> Row field
COLUMN_FIELDS: Dict[str, str] = {
    "Year": "year",
    "Market Return (%)": "market_return_percent",
    "Portfolio (Selling $20K)": "portfolio_selling_strategy",
    "Portfolio (Using Margin - No Repay)": "portfolio_margin_no_repay",
    "Portfolio (Using Margin - Oscillating Repayment)": "portfolio_margin_oscillating",
    "Margin Loan Balance (No Repay)": "margin_balance_no_repay",
    "Margin Loan Balance (Oscillating Repayments)": "margin_balance_oscillating",
    "Random Repayment %": "random_repayment_percent",
}


@dataclass(frozen=True)
class Row:
    """One projection year. Cells that were missing or not numeric are None."""

    year: Optional[int] = None
    market_return_percent: Optional[float] = None
    portfolio_selling_strategy: Optional[float] = None
    portfolio_margin_no_repay: Optional[float] = None
    portfolio_margin_oscillating: Optional[float] = None
    margin_balance_no_repay: Optional[float] = None
    margin_balance_oscillating: Optional[float] = None
    random_repayment_percent: Optional[float] = None


FIELDS: List[str] = [f.name for f in fields(Row)]


# ============================================================
# Parsing
# ============================================================

def _strip(value):
    return value.strip() if isinstance(value, str) else value


def _as_float(value) -> Optional[float]:
    if pd.isna(value):
        return None
    return float(value)


def _as_year(value) -> Optional[int]:
    number = _as_float(value)
    if number is None or not number.is_integer():
        return None
    return int(number)


def _split_line(line: str) -> List[str]:
    """Cells of one CSV line. A stray quote ends at the line break."""
    try:
        return next(csv.reader([line]), [])
    except csv.Error:
        logger.warning("Unreadable CSV line kept as an empty row: %r", line)
        return []


def parse_rows(text: str) -> List[Row]:
    """
    Parse projection CSV text into Rows, one per non-blank data line.
    Source order is kept; nothing is sorted or de-duplicated.

    Each line is tokenized on its own, so a malformed line only loses its
    own cells. Extra fields are dropped and missing ones read as empty.
    """
    lines = [line for line in text.lstrip("\ufeff").splitlines() if line.strip()]
    if not lines:
        return []

    header = [c.strip() for c in _split_line(lines[0])]
    width = len(header)
    df = pd.DataFrame(
        [(_split_line(line) + [""] * width)[:width] for line in lines[1:]],
        columns=range(width),
        dtype=object,
    )

    columns = {}
    for title, field in COLUMN_FIELDS.items():
        if title in header:
            cells = df[header.index(title)].map(_strip)
            columns[field] = pd.to_numeric(cells, errors="coerce").tolist()

    rows = []
    for i in range(len(df)):
        values = {}
        for field, cells in columns.items():
            values[field] = _as_year(cells[i]) if field == "year" else _as_float(cells[i])
        rows.append(Row(**values))
    return rows


# ============================================================
# Loading
# ============================================================

def read_source(source: Union[str, Path]) -> str:
    """Read CSV text from a local path or an http(s) URL."""
    source = str(source)
    if source.startswith(("http://", "https://")):
        response = requests.get(source, timeout=FETCH_TIMEOUT_SECONDS)
        response.raise_for_status()
        response.encoding = "utf-8"
        return response.text
    return Path(source).read_text(encoding="utf-8-sig")


def load_rows(source: Union[str, Path]) -> List[Row]:
    """
    Fetch and parse the projection file. Failures are logged and give an
    empty list so the page can still render.
    """
    try:
        text = read_source(source)
    except (OSError, UnicodeDecodeError, requests.RequestException):
        logger.exception("Error loading data from %s", source)
        return []

    try:
        rows = parse_rows(text)
    except (csv.Error, ValueError):
        logger.exception("Error parsing data from %s", source)
        return []

    logger.info("Loaded %d projection rows from %s", len(rows), source)
    return rows


def rows_frame(rows: Sequence[Row]) -> pd.DataFrame:
    """Chart-ready frame with one column per Row field."""
    df = pd.DataFrame([asdict(r) for r in rows], columns=FIELDS)
    for c in FIELDS:
        df[c] = pd.to_numeric(df[c], errors="coerce").astype(float)
    return df
