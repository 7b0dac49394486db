"""Quickstart: compute standardized factor exposures on a synthetic panel.

Builds one year of daily prices and volumes for eight tickers, then
discovers factors through the registry, computes a single momentum
exposure and a full momentum / volatility / liquidity snapshot.
"""

import numpy as np
import pandas as pd

from factorlib.factors import FactorCategory, FactorRegistry
from factorlib.standardization import StandardizationConfig

# --- Synthetic long-format panel (date, symbol, fields) ---
rng = np.random.default_rng(0)
dates = pd.bdate_range("2023-01-02", periods=300)
tickers = [f"TICK_{i:02d}" for i in range(8)]
returns = pd.DataFrame(rng.normal(0.0005, 0.02, (len(dates), len(tickers))), index=dates, columns=tickers)
close = 100 * (1 + returns).cumprod()

panel = pd.DataFrame(
    {
        "close": close.stack(),
        "volume": pd.DataFrame(
            rng.integers(100_000, 1_000_000, close.shape), index=dates, columns=tickers
        ).stack(),
        "shares_outstanding": 5e6,
        "market_return": returns.mean(axis=1).reindex(close.stack().index, level=0),
    }
)
panel.index.names = ["date", "symbol"]
as_of = dates[-1]

# --- Discover ---
registry = FactorRegistry.with_defaults()
print(registry)
for info in registry.all_info():
    print(f"  {info.category.label:<10} {info.name:<22} lookback={info.lookback}")

# --- One factor ---
momentum = registry.get("medium_term_momentum")
print()
print("Raw 6-1 momentum:")
print(momentum.compute_raw(panel, as_of).round(4))
print("Z-scores:")
print(momentum.compute(panel, as_of).round(3))

# --- Same factor, robust scaling ---
robust = type(momentum)(standardization=StandardizationConfig.for_robust())
print("Robust scores:")
print(robust.compute(panel, as_of).round(3))

# --- Snapshot across categories ---
snapshot = pd.concat(
    [
        registry.compute_all(panel, as_of, category=category, max_workers=4)
        for category in (FactorCategory.MOMENTUM, FactorCategory.VOLATILITY, FactorCategory.LIQUIDITY)
    ],
    axis=1,
)
print()
print("Factor snapshot:")
print(snapshot.round(3))
