"""Cross-sectional factor standardization.

Every function accepts either a single cross-section (a Series indexed by
symbol) or a stacked panel of cross-sections (a Series whose MultiIndex
has a ``date`` level).  In the second case each date is processed on its
own; statistics never mix dates.
"""

from __future__ import annotations

import logging
from collections.abc import Callable

import numpy as np
import pandas as pd
from scipy import stats as sp_stats

from factorlib.exceptions import InsufficientDataError
from factorlib.standardization._config import (
    StandardizationConfig,
    StandardizationMethod,
    validate_bounds,
)

logger = logging.getLogger(__name__)

# Scales the MAD to the standard deviation under normality.
MAD_SCALE = 1.4826
MIN_OBSERVATIONS = 2

_DATE_LEVEL = "date"


def _per_date(
    values: pd.Series,
    func: Callable[[pd.Series], pd.Series],
) -> pd.Series:
    """Apply ``func`` to each date's cross-section, or to ``values`` as one."""
    values = values.astype(float).replace([np.inf, -np.inf], np.nan)
    index = values.index
    if isinstance(index, pd.MultiIndex) and _DATE_LEVEL in index.names:
        if values.empty:
            return values
        return values.groupby(level=_DATE_LEVEL, group_keys=False).transform(func)
    return func(values)


def cross_sectional_standardize(
    values: pd.Series,
    strict: bool = True,
) -> pd.Series:
    """Z-score standardization: ``(x - mean) / std``.

    Uses the sample standard deviation (``ddof=1``), so ``[1, 2, 3]``
    maps to ``[-1, 0, 1]``.

    Parameters
    ----------
    values : pd.Series
        Raw factor values (may contain NaN).
    strict : bool
        Raise on a degenerate cross-section instead of returning NaN.

    Returns
    -------
    pd.Series
        Standardized values with mean 0 and sample std 1 over the valid
        entries.  Missing inputs stay missing.

    Raises
    ------
    InsufficientDataError
        If ``strict`` and a cross-section has fewer than 2 valid values
        or all valid values are identical.
    """

    def _zscore(x: pd.Series) -> pd.Series:
        valid = x.dropna()
        if len(valid) < MIN_OBSERVATIONS or valid.nunique() < 2:
            if strict:
                raise InsufficientDataError(
                    f"cannot standardize a cross-section with {len(valid)} valid "
                    f"and {valid.nunique()} distinct value(s)"
                )
            logger.debug(
                "Degenerate cross-section (%d valid values); marking as missing",
                len(valid),
            )
            return pd.Series(np.nan, index=x.index)
        return (x - valid.mean()) / valid.std(ddof=1)

    return _per_date(values, _zscore)


def winsorize(
    values: pd.Series,
    lower_pct: float,
    upper_pct: float,
) -> pd.Series:
    """Clip values at cross-sectional percentile bounds.

    Bounds are order statistics of the valid values, rounded inward: the
    lower bound takes the next rank up, the upper bound the next rank
    down.  Clipping therefore never moves either bound, which makes the
    operation idempotent.  When the two ranks cross (very small
    cross-sections) both bounds collapse to the interpolated quantile at
    the midpoint of the two fractions.

    Parameters
    ----------
    values : pd.Series
        Raw factor values (may contain NaN).
    lower_pct : float
        Lower percentile (0-1).
    upper_pct : float
        Upper percentile (0-1), strictly greater than ``lower_pct``.

    Returns
    -------
    pd.Series
        Values outside the bounds replaced by the bound; NaN preserved.

    Raises
    ------
    InvalidBoundsError
        If the percentiles are not ``0 <= lower < upper <= 1``.
    """
    validate_bounds(lower_pct, upper_pct)

    def _clip(x: pd.Series) -> pd.Series:
        valid = x.dropna()
        if valid.empty:
            return x
        lower = valid.quantile(lower_pct, interpolation="higher")
        upper = valid.quantile(upper_pct, interpolation="lower")
        if lower > upper:
            lower = upper = valid.quantile((lower_pct + upper_pct) / 2)
        return x.clip(lower=lower, upper=upper)

    return _per_date(values, _clip)


def robust_standardize(values: pd.Series) -> pd.Series:
    """Robust z-score: ``(x - median) / (MAD_SCALE * MAD)``.

    Parameters
    ----------
    values : pd.Series
        Raw factor values (may contain NaN).

    Returns
    -------
    pd.Series
        Robust scores.  When the MAD is zero (e.g. all values identical)
        every valid entry is 0.0; missing entries stay missing.
    """

    def _robust(x: pd.Series) -> pd.Series:
        valid = x.dropna()
        if valid.empty:
            return x
        median = valid.median()
        mad = float(sp_stats.median_abs_deviation(valid.to_numpy(), scale=1.0))
        if mad == 0:
            return x.where(x.isna(), 0.0)
        return (x - median) / (MAD_SCALE * mad)

    return _per_date(values, _robust)


def rank_normal_standardize(values: pd.Series) -> pd.Series:
    """Rank-normal (inverse normal) standardization.

    Uses ``Phi^-1((rank - 0.5) / N)`` to map ranks to a normal
    distribution, robust to heavy-tailed distributions.

    Parameters
    ----------
    values : pd.Series
        Raw factor values (may contain NaN).

    Returns
    -------
    pd.Series
        Rank-normalized scores.
    """

    def _rank_normal(x: pd.Series) -> pd.Series:
        valid = x.dropna()
        if valid.empty:
            return x
        uniform = (valid.rank() - 0.5) / len(valid)
        normal_scores = pd.Series(sp_stats.norm.ppf(uniform), index=valid.index)
        return normal_scores.reindex(x.index)

    return _per_date(values, _rank_normal)


def standardize_factor(
    raw_values: pd.Series,
    config: StandardizationConfig | None = None,
) -> pd.Series:
    """Full standardization pipeline for a single factor.

    Parameters
    ----------
    raw_values : pd.Series
        Raw factor values.
    config : StandardizationConfig or None
        Standardization parameters; plain z-score when None.

    Returns
    -------
    pd.Series
        Standardized factor scores, same index and name as the input.
    """
    if config is None:
        config = StandardizationConfig()

    # 1. Winsorize
    scores = raw_values
    if config.winsorize_lower is not None and config.winsorize_upper is not None:
        scores = winsorize(scores, config.winsorize_lower, config.winsorize_upper)

    # 2. Standardize
    match config.method:
        case StandardizationMethod.ROBUST:
            scores = robust_standardize(scores)
        case StandardizationMethod.RANK_NORMAL:
            scores = rank_normal_standardize(scores)
        case _:
            scores = cross_sectional_standardize(scores, strict=config.strict)

    return scores.rename(raw_values.name)
