"""Trading liquidity factors."""

from __future__ import annotations

import numpy as np
import pandas as pd

from factorlib.factors._base import Factor
from factorlib.factors._config import FactorCategory, RollingWindowConfig
from factorlib.panel import PanelWindow
from factorlib.standardization import StandardizationConfig


class TurnoverRatio(Factor):
    """Mean of ``volume / shares_outstanding`` over the window."""

    name = "turnover_ratio"
    description = "Average trading volume as a fraction of shares outstanding"
    category = FactorCategory.LIQUIDITY
    required_columns = frozenset({"volume", "shares_outstanding"})
    default_standardization = StandardizationConfig.for_heavy_tailed()

    def __init__(self, config: RollingWindowConfig | None = None, **kwargs) -> None:
        super().__init__(**kwargs)
        self.config = config or RollingWindowConfig(window=21)

    @property
    def lookback(self) -> int:
        return self.config.window

    def _compute(self, window: PanelWindow) -> pd.Series:
        shares = window.field("shares_outstanding")
        daily = window.field("volume") / shares.where(shares > 0)
        return daily.mean().where(daily.count() >= self.config.window)


class AmihudIlliquidity(Factor):
    """Amihud illiquidity: mean of ``|return| / dollar volume``.

    Days with zero dollar volume are skipped.  Symbols without a full
    window of returns are reported missing.
    """

    name = "amihud_illiquidity"
    description = "Average ratio of absolute return to dollar volume"
    category = FactorCategory.LIQUIDITY
    required_columns = frozenset({"close", "volume"})
    default_standardization = StandardizationConfig.for_heavy_tailed()

    def __init__(self, config: RollingWindowConfig | None = None, **kwargs) -> None:
        super().__init__(**kwargs)
        self.config = config or RollingWindowConfig(window=21)

    @property
    def lookback(self) -> int:
        return self.config.window + 1

    def _compute(self, window: PanelWindow) -> pd.Series:
        close = window.field("close")
        returns = close.pct_change(fill_method=None).iloc[1:]
        dollar_volume = (close * window.field("volume")).iloc[1:]
        ratio = returns.abs() / dollar_volume.replace(0, np.nan)
        return ratio.mean().where(returns.count() >= self.config.window)
