"""Factor registry for discovery, lookup and introspection."""

from __future__ import annotations

import difflib
import logging
from collections.abc import Iterable, Iterator, Sequence
from concurrent.futures import ThreadPoolExecutor

import pandas as pd

from factorlib.exceptions import (
    ConfigurationError,
    DuplicateFactorError,
    FactorNotFoundError,
    RegistryFrozenError,
)
from factorlib.factors._base import Factor, FactorDescriptor
from factorlib.factors._config import FactorCategory
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
from factorlib.factors._size import LogMarketCap
from factorlib.factors._value import BookToPrice, EarningsYield, FcfYield
from factorlib.factors._volatility import HistoricalVolatility, MarketBeta
from factorlib.panel import PanelSource, as_panel_source

logger = logging.getLogger(__name__)

# Registration order of the default catalogue; by_category preserves it.
DEFAULT_FACTORS: tuple[type[Factor], ...] = (
    # Momentum
    ShortTermMomentum,
    MediumTermMomentum,
    LongTermMomentum,
    # Value
    BookToPrice,
    EarningsYield,
    FcfYield,
    # Quality
    Roe,
    Roa,
    ProfitMargin,
    Leverage,
    GrossProfitability,
    # Size
    LogMarketCap,
    # Volatility
    MarketBeta,
    HistoricalVolatility,
    # Growth
    EarningsGrowth,
    SalesGrowth,
    # Liquidity
    TurnoverRatio,
    AmihudIlliquidity,
)


class FactorRegistry:
    """Catalogue of factor instances keyed by unique name.

    A registry is populated first (constructor, :meth:`register`) and then
    frozen with :meth:`freeze`; afterwards it is read-only and can be
    shared between threads without locking.  Iteration and
    :meth:`by_category` follow registration order.

    Parameters
    ----------
    factors : iterable of Factor
        Factors to register immediately.
    """

    def __init__(self, factors: Iterable[Factor] = ()) -> None:
        self._factors: dict[str, Factor] = {}
        self._frozen = False
        for factor in factors:
            self.register(factor)

    @classmethod
    def with_defaults(cls) -> FactorRegistry:
        """Frozen registry holding one instance of every built-in factor."""
        return cls(factor_cls() for factor_cls in DEFAULT_FACTORS).freeze()

    # ------------------------------------------------------------------
    # Construction
    # ------------------------------------------------------------------

    def register(self, factor: Factor) -> Factor:
        """Add a factor.

        Raises
        ------
        DuplicateFactorError
            If a factor with the same name is already registered.
        RegistryFrozenError
            If the registry has been frozen.
        ConfigurationError
            If ``factor`` is not a concrete factor with a name and category.
        """
        if self._frozen:
            raise RegistryFrozenError(
                f"cannot register {getattr(factor, 'name', factor)!r}: registry is frozen"
            )
        if not isinstance(factor, Factor):
            raise ConfigurationError(
                f"expected a Factor instance, got {type(factor).__name__}"
            )
        if not isinstance(getattr(factor, "name", None), str) or not hasattr(
            factor, "category"
        ):
            raise ConfigurationError(
                f"{type(factor).__name__} does not declare a name and category; "
                "register a concrete factor"
            )
        if factor.name in self._factors:
            raise DuplicateFactorError(factor.name)
        self._factors[factor.name] = factor
        logger.debug("Registered factor %s (%s)", factor.name, factor.category.value)
        return factor

    def freeze(self) -> FactorRegistry:
        """End the construction phase; returns ``self``."""
        self._frozen = True
        logger.debug("Registry frozen with %d factors", len(self._factors))
        return self

    @property
    def frozen(self) -> bool:
        return self._frozen

    # ------------------------------------------------------------------
    # Discovery
    # ------------------------------------------------------------------

    def get(self, name: str) -> Factor:
        """Exact-name lookup.

        Raises
        ------
        FactorNotFoundError
            If no factor has that name.  Close matches are attached as
            suggestions.
        """
        try:
            return self._factors[name]
        except KeyError:
            suggestions = difflib.get_close_matches(name, self._factors, n=3)
            raise FactorNotFoundError(name, suggestions) from None

    def by_category(self, category: FactorCategory | str) -> list[Factor]:
        """Factors tagged with ``category``, in registration order."""
        try:
            if not isinstance(category, FactorCategory):
                category = FactorCategory(str(category).lower())
        except ValueError:
            valid = ", ".join(c.value for c in FactorCategory)
            raise ConfigurationError(
                f"unknown category {category!r}; expected one of: {valid}"
            ) from None
        return [f for f in self._factors.values() if f.category == category]

    def all_info(self) -> list[FactorDescriptor]:
        """Descriptors of every registered factor, in registration order."""
        return [f.descriptor() for f in self._factors.values()]

    def names(self) -> list[str]:
        return list(self._factors)

    def categories(self) -> list[FactorCategory]:
        """Categories present, in order of first registration."""
        return list(dict.fromkeys(f.category for f in self._factors.values()))

    def __len__(self) -> int:
        return len(self._factors)

    def __contains__(self, name: object) -> bool:
        return name in self._factors

    def __iter__(self) -> Iterator[Factor]:
        return iter(self._factors.values())

    def __repr__(self) -> str:
        state = "frozen" if self._frozen else "open"
        return f"FactorRegistry({len(self._factors)} factors, {state})"

    # ------------------------------------------------------------------
    # Bulk computation
    # ------------------------------------------------------------------

    def compute_all(
        self,
        panel: pd.DataFrame | PanelSource,
        date: pd.Timestamp | str,
        names: Sequence[str] | None = None,
        category: FactorCategory | str | None = None,
        raw: bool = False,
        max_workers: int | None = None,
    ) -> pd.DataFrame:
        """Compute several factors for one date.

        Parameters
        ----------
        panel : pd.DataFrame or PanelSource
            Panel data; a DataFrame is normalized once and shared.
        date : pd.Timestamp or str
            Target date.
        names : sequence of str or None
            Factors to compute.  Takes precedence over ``category``.
        category : FactorCategory, str or None
            Restrict to one category.  All factors when both are None.
        raw : bool
            Return raw values instead of standardized scores.
        max_workers : int or None
            Compute factors on a thread pool of this size when > 1.

        Returns
        -------
        pd.DataFrame
            Symbols x factors matrix, outer-aligned on symbol.

        Raises
        ------
        ConfigurationError
            If the selection is empty.
        FactorLibError
            Any error raised by an individual factor is propagated.
        """
        if names is not None:
            selected = [self.get(name) for name in names]
        elif category is not None:
            selected = self.by_category(category)
        else:
            selected = list(self._factors.values())
        if not selected:
            raise ConfigurationError("no factors selected for computation")

        source = as_panel_source(panel)

        def _run(factor: Factor) -> pd.Series:
            if raw:
                return factor.compute_raw(source, date)
            return factor.compute(source, date)

        if max_workers is not None and max_workers > 1:
            with ThreadPoolExecutor(max_workers=max_workers) as executor:
                results = list(executor.map(_run, selected))
        else:
            results = [_run(factor) for factor in selected]

        logger.info(
            "Computed %d factor(s) for %s", len(results), pd.Timestamp(date).date()
        )
        return pd.concat(results, axis=1, join="outer").sort_index()
