"""Panel data source contract and in-memory / file-backed implementations."""

from __future__ import annotations

import logging
from collections.abc import Sequence
from pathlib import Path
from typing import Protocol, runtime_checkable

import pandas as pd

from factorlib.exceptions import ConfigurationError, DataError

logger = logging.getLogger(__name__)

DATE_COL = "date"
SYMBOL_COL = "symbol"


@runtime_checkable
class PanelSource(Protocol):
    """Protocol for anything that can serve a date x symbol panel."""

    def load(
        self,
        columns: Sequence[str],
        end: pd.Timestamp,
    ) -> pd.DataFrame:
        """Return long-format rows dated on or before ``end``.

        The frame must hold ``date`` and ``symbol`` columns plus whichever
        of ``columns`` the source has.  Absent columns are simply omitted
        so that callers can report them.
        """
        ...


def normalize_panel(panel: pd.DataFrame) -> pd.DataFrame:
    """Coerce a panel into long format with a datetime ``date`` column.

    Parameters
    ----------
    panel : pd.DataFrame
        Long-format frame with ``date`` and ``symbol`` columns, or a frame
        indexed by a ``(date, symbol)`` MultiIndex.

    Returns
    -------
    pd.DataFrame
        Copy with ``date`` as ``datetime64`` and ``symbol`` as str.

    Raises
    ------
    DataError
        If the key columns are missing, ``date`` cannot be parsed, or a
        ``(date, symbol)`` pair appears more than once.
    """
    frame = panel
    if isinstance(frame.index, pd.MultiIndex) and {
        DATE_COL,
        SYMBOL_COL,
    } <= set(frame.index.names):
        frame = frame.reset_index()

    missing = {DATE_COL, SYMBOL_COL} - set(frame.columns)
    if missing:
        raise DataError(
            f"panel must have 'date' and 'symbol' columns, missing {sorted(missing)}"
        )

    frame = frame.copy()
    try:
        frame[DATE_COL] = pd.to_datetime(frame[DATE_COL])
    except (ValueError, TypeError) as exc:
        raise DataError(f"panel 'date' column is not parseable as dates: {exc}") from exc
    frame[SYMBOL_COL] = frame[SYMBOL_COL].astype(str)

    duplicated = frame.duplicated(subset=[DATE_COL, SYMBOL_COL])
    if duplicated.any():
        first = frame.loc[duplicated, [DATE_COL, SYMBOL_COL]].iloc[0]
        raise DataError(
            f"panel has {int(duplicated.sum())} duplicate (date, symbol) rows, "
            f"e.g. ({first[DATE_COL].date()}, {first[SYMBOL_COL]})"
        )
    return frame


class DataFramePanel:
    """In-memory panel backed by a long-format DataFrame.

    The frame is normalized once at construction and never mutated, so a
    single instance can be shared across threads.
    """

    def __init__(self, frame: pd.DataFrame) -> None:
        self._frame = normalize_panel(frame)

    @property
    def frame(self) -> pd.DataFrame:
        return self._frame

    @property
    def columns(self) -> list[str]:
        return [c for c in self._frame.columns if c not in (DATE_COL, SYMBOL_COL)]

    @property
    def dates(self) -> pd.DatetimeIndex:
        return pd.DatetimeIndex(self._frame[DATE_COL].drop_duplicates().sort_values())

    @property
    def symbols(self) -> list[str]:
        return sorted(self._frame[SYMBOL_COL].unique())

    def load(
        self,
        columns: Sequence[str],
        end: pd.Timestamp,
    ) -> pd.DataFrame:
        keep = [DATE_COL, SYMBOL_COL] + [c for c in columns if c in self._frame.columns]
        rows = self._frame.loc[self._frame[DATE_COL] <= pd.Timestamp(end), keep]
        return rows

    def __len__(self) -> int:
        return len(self._frame)

    def __repr__(self) -> str:
        return (
            f"DataFramePanel(rows={len(self._frame)}, "
            f"symbols={self._frame[SYMBOL_COL].nunique()}, "
            f"dates={self._frame[DATE_COL].nunique()})"
        )


def as_panel_source(panel: pd.DataFrame | PanelSource) -> PanelSource:
    """Wrap a DataFrame in :class:`DataFramePanel`; pass sources through."""
    if isinstance(panel, pd.DataFrame):
        return DataFramePanel(panel)
    if isinstance(panel, PanelSource):
        return panel
    raise DataError(
        f"expected a DataFrame or PanelSource, got {type(panel).__name__}"
    )


def load_panel(path: str | Path) -> DataFramePanel:
    """Read a long-format panel from a CSV or Parquet file.

    Parameters
    ----------
    path : str or Path
        File path; the suffix selects the reader (``.csv`` or
        ``.parquet`` / ``.pq``).

    Returns
    -------
    DataFramePanel
        Normalized in-memory panel.

    Raises
    ------
    ConfigurationError
        If the file does not exist or has an unsupported suffix.
    DataError
        If the file cannot be parsed or is not a valid panel.
    """
    path = Path(path)
    if not path.exists():
        raise ConfigurationError(f"panel file not found: {path}")

    suffix = path.suffix.lower()
    if suffix not in (".csv", ".parquet", ".pq"):
        raise ConfigurationError(
            f"unsupported panel format {suffix!r}; use .csv or .parquet"
        )

    try:
        frame = pd.read_csv(path) if suffix == ".csv" else pd.read_parquet(path)
    except (ValueError, OSError) as exc:
        raise DataError(f"cannot read panel {path}: {exc}") from exc

    logger.info("Loaded panel %s: %d rows, %d columns", path, len(frame), frame.shape[1])
    return DataFramePanel(frame)
