"""Panel data access: the source contract and trailing windows."""

from factorlib.panel._source import (
    DATE_COL,
    SYMBOL_COL,
    DataFramePanel,
    PanelSource,
    as_panel_source,
    load_panel,
    normalize_panel,
)
from factorlib.panel._window import PanelWindow, build_window

__all__ = [
    "DATE_COL",
    "SYMBOL_COL",
    "DataFramePanel",
    "PanelSource",
    "PanelWindow",
    "as_panel_source",
    "build_window",
    "load_panel",
    "normalize_panel",
]
