"""Factor abstraction, built-in factor implementations and the registry."""

from factorlib.factors._base import Factor, FactorDescriptor, RatioFactor
from factorlib.factors._config import (
    DataFrequency,
    FactorCategory,
    GrowthConfig,
    MomentumConfig,
    RollingWindowConfig,
)
from factorlib.factors._growth import EarningsGrowth, SalesGrowth
from factorlib.factors._liquidity import AmihudIlliquidity, TurnoverRatio
from factorlib.factors._momentum import (
    LongTermMomentum,
    MediumTermMomentum,
    ShortTermMomentum,
)
from factorlib.factors._quality import (
    GrossProfitability,
    Leverage,
    ProfitMargin,
    Roa,
    Roe,
)
from factorlib.factors._registry import DEFAULT_FACTORS, FactorRegistry
from factorlib.factors._size import LogMarketCap
from factorlib.factors._value import BookToPrice, EarningsYield, FcfYield
from factorlib.factors._volatility import HistoricalVolatility, MarketBeta

__all__ = [
    # Abstraction
    "Factor",
    "FactorDescriptor",
    "RatioFactor",
    # Config enums
    "DataFrequency",
    "FactorCategory",
    # Config dataclasses
    "GrowthConfig",
    "MomentumConfig",
    "RollingWindowConfig",
    # Registry
    "DEFAULT_FACTORS",
    "FactorRegistry",
    # Momentum
    "LongTermMomentum",
    "MediumTermMomentum",
    "ShortTermMomentum",
    # Value
    "BookToPrice",
    "EarningsYield",
    "FcfYield",
    # Quality
    "GrossProfitability",
    "Leverage",
    "ProfitMargin",
    "Roa",
    "Roe",
    # Size
    "LogMarketCap",
    # Volatility
    "HistoricalVolatility",
    "MarketBeta",
    # Growth
    "EarningsGrowth",
    "SalesGrowth",
    # Liquidity
    "AmihudIlliquidity",
    "TurnoverRatio",
]
