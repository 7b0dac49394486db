"""Shared test fixtures for the factorlib test suite."""

from __future__ import annotations

import numpy as np
import pandas as pd
import pytest

SYMBOLS = ["AAA", "BBB", "CCC", "DDD", "EEE", "FFF"]


def _stack(wide: dict[str, pd.DataFrame]) -> pd.DataFrame:
    """Stack dates x symbols frames into one long (date, symbol) panel."""
    columns = {name: frame.stack() for name, frame in wide.items()}
    panel = pd.DataFrame(columns)
    panel.index.names = ["date", "symbol"]
    return panel.reset_index()


@pytest.fixture()
def daily_returns() -> pd.DataFrame:
    """Synthetic daily returns: 6 symbols, 300 obs, seed 42."""
    rng = np.random.default_rng(42)
    data = rng.normal(loc=0.0005, scale=0.02, size=(300, len(SYMBOLS)))
    data[0] = 0.0
    return pd.DataFrame(
        data,
        columns=SYMBOLS,
        index=pd.bdate_range("2023-01-02", periods=300, freq="B"),
    )


@pytest.fixture()
def daily_panel(daily_returns: pd.DataFrame) -> pd.DataFrame:
    """Long-format daily panel with prices, volume, shares and market return."""
    rng = np.random.default_rng(7)
    close = (1 + daily_returns).cumprod() * 100
    volume = pd.DataFrame(
        rng.integers(100_000, 1_000_000, size=close.shape).astype(float),
        index=close.index,
        columns=close.columns,
    )
    shares = pd.DataFrame(
        np.tile(np.linspace(1e6, 6e6, len(SYMBOLS)), (len(close), 1)),
        index=close.index,
        columns=close.columns,
    )
    market = pd.DataFrame(
        np.tile(daily_returns.mean(axis=1).to_numpy()[:, None], (1, len(SYMBOLS))),
        index=close.index,
        columns=close.columns,
    )
    return _stack(
        {
            "close": close,
            "volume": volume,
            "shares_outstanding": shares,
            "market_return": market,
        }
    )


@pytest.fixture()
def last_date(daily_returns: pd.DataFrame) -> pd.Timestamp:
    return daily_returns.index[-1]


@pytest.fixture()
def quarterly_panel() -> pd.DataFrame:
    """Long-format quarterly fundamentals: 5 symbols, 6 quarter ends, seed 11."""
    rng = np.random.default_rng(11)
    dates = pd.date_range("2022-03-31", periods=6, freq="QE")
    symbols = SYMBOLS[:5]

    def frame(low: float, high: float) -> pd.DataFrame:
        values = rng.uniform(low, high, size=(len(dates), len(symbols)))
        return pd.DataFrame(values, index=dates, columns=symbols)

    return _stack(
        {
            "book_equity": frame(50.0, 150.0),
            "net_income": frame(-5.0, 30.0),
            "free_cash_flow": frame(0.0, 25.0),
            "market_cap": frame(200.0, 2000.0),
            "shareholders_equity": frame(40.0, 120.0),
            "total_assets": frame(100.0, 400.0),
            "total_debt": frame(10.0, 90.0),
            "revenue": frame(80.0, 200.0),
            "cogs": frame(30.0, 70.0),
            "eps": frame(0.5, 3.0),
        }
    )
