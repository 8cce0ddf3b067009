"""Application state and its pure update function.

State is an immutable value replaced wholesale on every action.  A load
either succeeds and swaps in new markers and edges, or fails and leaves
the previously displayed data untouched.
"""

from __future__ import annotations

import enum
from dataclasses import dataclass, replace

import structlog

from ancestry_map.config.pipeline import PipelineConfig
from ancestry_map.errors import PipelineError, RowError
from ancestry_map.models import Edge, Marker
from ancestry_map.pipeline import run_pipeline

logger = structlog.get_logger()


class Page(enum.Enum):
    MAP = "map"
    LOAD_DATA = "load_data"


@dataclass(frozen=True)
class SetPage:
    page: Page


@dataclass(frozen=True)
class SetRawData:
    text: str


@dataclass(frozen=True)
class LoadData:
    pass


Action = SetPage | SetRawData | LoadData


@dataclass(frozen=True)
class AppState:
    """Everything the UI displays.

    Attributes:
        page: Which view is shown.
        raw_data: Current contents of the input text box.
        markers: Markers from the last successful load.
        edges: Edges from the last successful load.
        row_errors: Rows skipped during the last successful load.
        last_error: Message of the last failed load, cleared on success.
    """

    page: Page = Page.MAP
    raw_data: str = ""
    markers: tuple[Marker, ...] = ()
    edges: tuple[Edge, ...] = ()
    row_errors: tuple[RowError, ...] = ()
    last_error: str | None = None


def load(state: AppState, config: PipelineConfig | None = None) -> AppState:
    """Re-run the pipeline on ``state.raw_data``."""
    try:
        result = run_pipeline(state.raw_data, config)
    except PipelineError as e:
        logger.warning("load_failed", error=str(e), row_errors=len(e.row_errors))
        return replace(state, page=Page.LOAD_DATA, last_error=str(e))

    return replace(
        state,
        page=Page.MAP,
        markers=tuple(result.markers),
        edges=tuple(result.edges),
        row_errors=tuple(result.row_errors),
        last_error=None,
    )


def init_state(raw_data: str, config: PipelineConfig | None = None) -> AppState:
    """Initial state: the given dataset loaded and the map page shown."""
    return load(AppState(page=Page.MAP, raw_data=raw_data), config)


def update(state: AppState, action: Action, config: PipelineConfig | None = None) -> AppState:
    """Compute the next state for ``action``.  Never mutates ``state``."""
    if isinstance(action, SetPage):
        return replace(state, page=action.page)
    if isinstance(action, SetRawData):
        return replace(state, raw_data=action.text)
    if isinstance(action, LoadData):
        return load(state, config)
    raise TypeError(f"unknown action {action!r}")
