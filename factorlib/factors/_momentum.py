"""Price momentum factors."""

from __future__ import annotations

import pandas as pd

from factorlib.factors._base import Factor
from factorlib.factors._config import FactorCategory, MomentumConfig
from factorlib.panel import PanelWindow


class _PriceMomentum(Factor):
    """``P[t - skip] / P[t - skip - window] - 1`` on closing prices."""

    category = FactorCategory.MOMENTUM
    required_columns = frozenset({"close"})
    default_config: MomentumConfig = MomentumConfig()

    def __init__(self, config: MomentumConfig | None = None, **kwargs) -> None:
        super().__init__(**kwargs)
        self.config = config or self.default_config

    @property
    def lookback(self) -> int:
        return self.config.window + self.config.skip + 1

    def _compute(self, window: PanelWindow) -> pd.Series:
        prices = window.field("close")
        end_prices = prices.iloc[-self.config.skip - 1]
        start_prices = prices.iloc[0]
        return end_prices / start_prices - 1.0


class ShortTermMomentum(_PriceMomentum):
    name = "short_term_momentum"
    description = "1-month (21-day) momentum - short-term trend persistence"
    default_config = MomentumConfig.for_short_term()


class MediumTermMomentum(_PriceMomentum):
    name = "medium_term_momentum"
    description = "6-month (126-day) momentum skipping the latest month"
    default_config = MomentumConfig.for_medium_term()


class LongTermMomentum(_PriceMomentum):
    name = "long_term_momentum"
    description = "12-month (252-day) momentum skipping the latest month"
    default_config = MomentumConfig.for_long_term()
