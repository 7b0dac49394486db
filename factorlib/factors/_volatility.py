"""Risk factors estimated from daily returns."""

from __future__ import annotations

import numpy as np
import pandas as pd

from factorlib.factors._base import Factor
from factorlib.factors._config import FactorCategory, RollingWindowConfig
from factorlib.panel import PanelWindow

TRADING_DAYS_PER_YEAR = 252


class _ReturnWindowFactor(Factor):
    """Base for factors reading ``window`` daily returns (``window + 1`` prices)."""

    category = FactorCategory.VOLATILITY
    default_config = RollingWindowConfig(window=TRADING_DAYS_PER_YEAR)

    def __init__(self, config: RollingWindowConfig | None = None, **kwargs) -> None:
        super().__init__(**kwargs)
        self.config = config or self.default_config

    @property
    def lookback(self) -> int:
        return self.config.window + 1

    def _returns(self, window: PanelWindow) -> pd.DataFrame:
        return window.field("close").pct_change(fill_method=None).iloc[1:]


class HistoricalVolatility(_ReturnWindowFactor):
    """Annualized sample standard deviation of daily returns.

    Symbols without a full window of returns are reported missing.
    """

    name = "historical_volatility"
    description = "Annualized standard deviation of daily returns - total risk measure"
    required_columns = frozenset({"close"})

    def _compute(self, window: PanelWindow) -> pd.Series:
        returns = self._returns(window)
        vol = returns.std(ddof=1) * np.sqrt(TRADING_DAYS_PER_YEAR)
        return vol.where(returns.count() >= self.config.window)


class MarketBeta(_ReturnWindowFactor):
    """OLS beta of stock returns on the ``market_return`` column.

    ``market_return`` is read on the same rows as the stock, so a panel
    may carry a different benchmark per symbol.
    """

    name = "market_beta"
    description = "Covariance of returns with the market divided by market variance"
    required_columns = frozenset({"close", "market_return"})

    def _compute(self, window: PanelWindow) -> pd.Series:
        stock = self._returns(window)
        market = window.field("market_return").iloc[1:]

        paired = stock.notna() & market.notna()
        stock = stock.where(paired)
        market = market.where(paired)
        n_obs = paired.sum()

        stock_dm = stock - stock.mean()
        market_dm = market - market.mean()
        cov = (stock_dm * market_dm).sum() / (n_obs - 1)
        var = (market_dm**2).sum() / (n_obs - 1)
        return (cov / var).where(n_obs >= self.config.window)
