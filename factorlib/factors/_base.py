"""Factor abstraction: descriptor metadata and the abstract base class."""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import ClassVar

import numpy as np
import pandas as pd

from factorlib.factors._config import DataFrequency, FactorCategory
from factorlib.panel import PanelSource, PanelWindow, as_panel_source, build_window
from factorlib.panel._source import SYMBOL_COL
from factorlib.standardization import StandardizationConfig, standardize_factor

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class FactorDescriptor:
    """Immutable metadata describing a factor.

    Parameters
    ----------
    name : str
        Unique snake_case identifier.
    description : str
        Human-readable explanation.
    category : FactorCategory
        Category tag.
    required_columns : frozenset[str]
        Panel columns the factor reads.
    lookback : int
        Trailing periods, target date included, the factor reads.
    frequency : DataFrequency
        Expected panel frequency.
    """

    name: str
    description: str
    category: FactorCategory
    required_columns: frozenset[str]
    lookback: int
    frequency: DataFrequency

    def to_dict(self) -> dict:
        return {
            "name": self.name,
            "description": self.description,
            "category": self.category.value,
            "required_columns": sorted(self.required_columns),
            "lookback": self.lookback,
            "frequency": self.frequency.value,
        }


class Factor(ABC):
    """Base class for all factors.

    Subclasses declare their metadata as class attributes and implement
    :meth:`_compute`, which receives a validated :class:`PanelWindow`.
    Column validation, history checks, index alignment and
    standardization are handled here so they stay uniform across
    factors.

    Instances hold no mutable state and may be shared between threads.
    """

    name: ClassVar[str]
    description: ClassVar[str]
    category: ClassVar[FactorCategory]
    required_columns: ClassVar[frozenset[str]]
    frequency: ClassVar[DataFrequency] = DataFrequency.DAILY
    default_standardization: ClassVar[StandardizationConfig] = StandardizationConfig()

    def __init__(self, standardization: StandardizationConfig | None = None) -> None:
        self._standardization = standardization or self.default_standardization

    @property
    def lookback(self) -> int:
        """Trailing periods needed, ending at the target date."""
        return 1

    @property
    def standardization(self) -> StandardizationConfig:
        return self._standardization

    def descriptor(self) -> FactorDescriptor:
        return FactorDescriptor(
            name=self.name,
            description=self.description,
            category=self.category,
            required_columns=frozenset(self.required_columns),
            lookback=self.lookback,
            frequency=self.frequency,
        )

    @abstractmethod
    def _compute(self, window: PanelWindow) -> pd.Series:
        """Factor formula over a validated window, indexed by symbol."""

    def compute_raw(
        self,
        panel: pd.DataFrame | PanelSource,
        date: pd.Timestamp | str,
    ) -> pd.Series:
        """Raw factor values for every symbol of the cross-section.

        Parameters
        ----------
        panel : pd.DataFrame or PanelSource
            Long-format panel with ``date``, ``symbol`` and the required
            columns.
        date : pd.Timestamp or str
            Target date.  Only rows on or before it are read.

        Returns
        -------
        pd.Series
            Raw values indexed by symbol and named after the factor.
            Symbols lacking data are kept with NaN.

        Raises
        ------
        MissingColumnError
            If a required column is absent from the panel.
        InsufficientHistoryError
            If fewer than ``lookback`` periods are available.
        """
        window = build_window(
            as_panel_source(panel),
            sorted(self.required_columns),
            date,
            self.lookback,
            factor=self.name,
        )
        raw = self._compute(window)
        raw = (
            raw.reindex(window.symbols)
            .astype(float)
            .replace([np.inf, -np.inf], np.nan)
        )
        raw.index.name = SYMBOL_COL
        raw.name = self.name

        n_missing = int(raw.isna().sum())
        if n_missing and n_missing * 2 > len(raw):
            logger.warning(
                "%s: %d of %d symbols missing on %s",
                self.name,
                n_missing,
                len(raw),
                window.as_of.date(),
            )
        return raw

    def compute(
        self,
        panel: pd.DataFrame | PanelSource,
        date: pd.Timestamp | str,
    ) -> pd.Series:
        """Standardized factor scores for one date.

        Raw values from :meth:`compute_raw` are passed through
        :func:`standardize_factor` with this factor's
        :attr:`standardization` configuration.

        Raises
        ------
        InsufficientDataError
            If the cross-section is degenerate and the configuration is
            strict.
        """
        return standardize_factor(self.compute_raw(panel, date), self._standardization)

    def __repr__(self) -> str:
        return f"{type(self).__name__}(name={self.name!r}, lookback={self.lookback})"


class RatioFactor(Factor):
    """Ratio of two panel columns observed on the as-of date."""

    numerator: ClassVar[str]
    denominator: ClassVar[str]
    frequency = DataFrequency.QUARTERLY

    def _compute(self, window: PanelWindow) -> pd.Series:
        return window.latest(self.numerator) / window.latest(self.denominator)
