"""Profitability and balance-sheet quality factors."""

from __future__ import annotations

import pandas as pd

from factorlib.factors._base import Factor, RatioFactor
from factorlib.factors._config import DataFrequency, FactorCategory
from factorlib.panel import PanelWindow


class Roe(RatioFactor):
    name = "roe"
    description = "Return on equity - net income divided by shareholders' equity"
    category = FactorCategory.QUALITY
    required_columns = frozenset({"net_income", "shareholders_equity"})
    numerator = "net_income"
    denominator = "shareholders_equity"


class Roa(RatioFactor):
    name = "roa"
    description = "Return on assets - net income divided by total assets"
    category = FactorCategory.QUALITY
    required_columns = frozenset({"net_income", "total_assets"})
    numerator = "net_income"
    denominator = "total_assets"


class ProfitMargin(RatioFactor):
    name = "profit_margin"
    description = "Net income divided by revenue"
    category = FactorCategory.QUALITY
    required_columns = frozenset({"net_income", "revenue"})
    numerator = "net_income"
    denominator = "revenue"


class Leverage(RatioFactor):
    name = "leverage"
    description = "Total debt divided by shareholders' equity"
    category = FactorCategory.QUALITY
    required_columns = frozenset({"total_debt", "shareholders_equity"})
    numerator = "total_debt"
    denominator = "shareholders_equity"


class GrossProfitability(Factor):
    """Novy-Marx gross profitability: ``(revenue - cogs) / total_assets``."""

    name = "gross_profitability"
    description = "Revenue minus cost of goods sold, divided by total assets"
    category = FactorCategory.QUALITY
    required_columns = frozenset({"revenue", "cogs", "total_assets"})
    frequency = DataFrequency.QUARTERLY

    def _compute(self, window: PanelWindow) -> pd.Series:
        gross_profit = window.latest("revenue") - window.latest("cogs")
        return gross_profit / window.latest("total_assets")
