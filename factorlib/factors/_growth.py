"""Fundamental growth factors on quarterly panels."""

from __future__ import annotations

import pandas as pd

from factorlib.factors._base import Factor
from factorlib.factors._config import DataFrequency, FactorCategory, GrowthConfig
from factorlib.panel import PanelWindow


class _PeriodGrowth(Factor):
    """``x[t] / x[t-k] - 1`` over ``k`` reporting periods.

    A zero base yields a missing value.  A negative base is divided as is,
    so the sign of the result follows the sign of the ratio.
    """

    category = FactorCategory.GROWTH
    frequency = DataFrequency.QUARTERLY
    column: str

    def __init__(self, config: GrowthConfig | None = None, **kwargs) -> None:
        super().__init__(**kwargs)
        self.config = config or GrowthConfig()

    @property
    def lookback(self) -> int:
        return self.config.periods + 1

    def _compute(self, window: PanelWindow) -> pd.Series:
        history = window.field(self.column)
        current = history.iloc[-1]
        base = history.iloc[0]
        return current / base.where(base != 0) - 1.0


class EarningsGrowth(_PeriodGrowth):
    name = "earnings_growth"
    description = "Year-over-year earnings per share growth"
    required_columns = frozenset({"eps"})
    column = "eps"


class SalesGrowth(_PeriodGrowth):
    name = "sales_growth"
    description = "Year-over-year revenue growth"
    required_columns = frozenset({"revenue"})
    column = "revenue"
