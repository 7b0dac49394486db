"""Relative valuation factors: fundamentals scaled by market capitalization."""

from __future__ import annotations

from factorlib.factors._base import RatioFactor
from factorlib.factors._config import FactorCategory
from factorlib.standardization import StandardizationConfig


class _ValueRatio(RatioFactor):
    category = FactorCategory.VALUE
    denominator = "market_cap"
    default_standardization = StandardizationConfig.for_heavy_tailed()


class BookToPrice(_ValueRatio):
    name = "book_to_price"
    description = "Book equity divided by market capitalization - relative valuation"
    required_columns = frozenset({"book_equity", "market_cap"})
    numerator = "book_equity"


class EarningsYield(_ValueRatio):
    name = "earnings_yield"
    description = "Net income divided by market capitalization - inverse of P/E"
    required_columns = frozenset({"net_income", "market_cap"})
    numerator = "net_income"


class FcfYield(_ValueRatio):
    name = "fcf_yield"
    description = "Free cash flow divided by market capitalization"
    required_columns = frozenset({"free_cash_flow", "market_cap"})
    numerator = "free_cash_flow"
