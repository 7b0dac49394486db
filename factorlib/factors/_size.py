"""Size factors."""

from __future__ import annotations

import numpy as np
import pandas as pd

from factorlib.factors._base import Factor
from factorlib.factors._config import FactorCategory
from factorlib.panel import PanelWindow


class LogMarketCap(Factor):
    """Natural log of ``close * shares_outstanding``.

    Non-positive market caps have no logarithm and are reported missing.
    """

    name = "log_market_cap"
    description = "Natural logarithm of market capitalization (price x shares outstanding)"
    category = FactorCategory.SIZE
    required_columns = frozenset({"close", "shares_outstanding"})

    def _compute(self, window: PanelWindow) -> pd.Series:
        market_cap = window.latest("close") * window.latest("shares_outstanding")
        return np.log(market_cap.where(market_cap > 0))
