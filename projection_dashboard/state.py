# projection_dashboard/state.py
"""
Session state for the dashboard.

Functions take the state mapping explicitly: st.session_state on the page,
a plain dict in tests.
"""
from __future__ import annotations

import logging
from typing import Callable, List, MutableMapping, Optional

from .config import DEFAULT_CSV_SOURCE
from .data import Row, load_rows
from .views import DEFAULT_VIEW, ViewMode

logger = logging.getLogger(__name__)

ROWS_KEY = "rows"
VIEW_KEY = "view_mode"
HOVER_KEY = "hovered_year"
SOURCE_KEY = "data_source"

STATE_KEYS = (ROWS_KEY, VIEW_KEY, HOVER_KEY, SOURCE_KEY)


def init_state(
    state: MutableMapping,
    loader: Callable[[str], List[Row]] = load_rows,
    source: str = DEFAULT_CSV_SOURCE,
) -> bool:
    """
    Set up a fresh session and load the rows once. Returns True when this
    call did the loading, False if the session was already initialised.
    """
    if ROWS_KEY in state:
        return False

    state.setdefault(SOURCE_KEY, source)
    state[VIEW_KEY] = DEFAULT_VIEW.value
    state[HOVER_KEY] = None

    # assigned in one step so a rerun never sees a partial list
    rows = loader(state[SOURCE_KEY])
    state[ROWS_KEY] = list(rows)
    return True


def teardown_state(state: MutableMapping) -> None:
    """
    Drop the dashboard keys. On the page Streamlit discards the whole
    session when the browser tab goes away, so only code that reuses a
    mapping (tests, embedding) needs this.
    """
    for key in STATE_KEYS:
        state.pop(key, None)


def current_view(state: MutableMapping) -> ViewMode:
    return ViewMode(state.get(VIEW_KEY, DEFAULT_VIEW.value))


def select_view(state: MutableMapping, mode) -> ViewMode:
    """Switch the active chart. Any view may follow any other; hover is cleared."""
    try:
        view = ViewMode(mode)
    except ValueError:
        raise ValueError(f"Unknown view: {mode!r}") from None

    logger.debug("View %s -> %s", state.get(VIEW_KEY), view.value)
    state[VIEW_KEY] = view.value
    state[HOVER_KEY] = None
    return view


def set_hovered_year(state: MutableMapping, year: Optional[int]) -> None:
    state[HOVER_KEY] = year


def hovered_year(state: MutableMapping) -> Optional[int]:
    return state.get(HOVER_KEY)


def rows(state: MutableMapping) -> List[Row]:
    return state.get(ROWS_KEY, [])
