"""Trailing history windows cut from a panel source."""

from __future__ import annotations

import logging
from collections.abc import Iterable
from dataclasses import dataclass

import pandas as pd

from factorlib.exceptions import InsufficientHistoryError, MissingColumnError
from factorlib.panel._source import DATE_COL, SYMBOL_COL, PanelSource

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class PanelWindow:
    """Immutable view of the trailing periods ending at a target date.

    Parameters
    ----------
    frame : pd.DataFrame
        Long-format rows falling inside the window.
    date : pd.Timestamp
        Requested target date.
    dates : pd.DatetimeIndex
        Sorted distinct dates of the window; the last one is the as-of
        date, which may precede ``date`` when the panel has no row on it.
    symbols : pd.Index
        Cross-section universe: every symbol with at least one row in the
        window.
    """

    frame: pd.DataFrame
    date: pd.Timestamp
    dates: pd.DatetimeIndex
    symbols: pd.Index

    @property
    def as_of(self) -> pd.Timestamp:
        return self.dates[-1]

    def __len__(self) -> int:
        return len(self.dates)

    def field(self, name: str) -> pd.DataFrame:
        """Dates x symbols matrix of one panel column.

        Cells with no panel row are NaN, so every symbol of the window is
        present even when it has gaps.
        """
        wide = self.frame.pivot(index=DATE_COL, columns=SYMBOL_COL, values=name)
        return wide.reindex(index=self.dates, columns=self.symbols).astype(float)

    def latest(self, name: str) -> pd.Series:
        """Values of ``name`` on the as-of date, indexed by symbol."""
        return self.field(name).iloc[-1].rename(None)


def build_window(
    source: PanelSource,
    columns: Iterable[str],
    date: pd.Timestamp | str,
    lookback: int,
    factor: str | None = None,
) -> PanelWindow:
    """Cut the trailing ``lookback`` periods ending at or before ``date``.

    Parameters
    ----------
    source : PanelSource
        Panel to read from.
    columns : iterable of str
        Columns that must be present.
    date : pd.Timestamp or str
        Target date.  Rows after it are never read.
    lookback : int
        Number of distinct trailing dates required, target included.
        A lookback of 0 is treated as 1: a cross-section needs a date.
    factor : str or None
        Factor name used in error messages.

    Returns
    -------
    PanelWindow

    Raises
    ------
    MissingColumnError
        If any of ``columns`` is absent from the panel.
    InsufficientHistoryError
        If fewer than ``lookback`` dates are available up to ``date``.
    """
    target = pd.Timestamp(date)
    columns = list(columns)
    rows = source.load(columns, end=target)

    missing = set(columns) - set(rows.columns)
    if missing:
        raise MissingColumnError(missing, factor=factor)

    rows = rows.loc[rows[DATE_COL] <= target]
    available = pd.DatetimeIndex(rows[DATE_COL].drop_duplicates().sort_values())
    required = max(int(lookback), 1)
    if len(available) < required:
        raise InsufficientHistoryError(required, len(available), factor=factor)

    dates = available[-required:]
    in_window = rows.loc[rows[DATE_COL] >= dates[0], [DATE_COL, SYMBOL_COL, *columns]]
    symbols = pd.Index(sorted(in_window[SYMBOL_COL].unique()), name=SYMBOL_COL)

    if dates[-1] != target:
        logger.debug(
            "%s: no rows on %s, using as-of date %s",
            factor or "window",
            target.date(),
            dates[-1].date(),
        )

    return PanelWindow(frame=in_window, date=target, dates=dates, symbols=symbols)
