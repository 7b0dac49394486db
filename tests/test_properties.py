"""Property-based tests for factorlib using Hypothesis.

Each test encodes a mathematical invariant of the standardization layer
that must hold for all valid inputs.
"""

from __future__ import annotations

import numpy as np
import pandas as pd
from hypothesis import assume, given, settings
from hypothesis import strategies as st

from factorlib.factors import FactorRegistry
from factorlib.standardization import (
    cross_sectional_standardize,
    rank_normal_standardize,
    robust_standardize,
    winsorize,
)

# ---------------------------------------------------------------------------
# Shared strategies
# ---------------------------------------------------------------------------

_FINITE = st.floats(
    min_value=-1e6,
    max_value=1e6,
    allow_nan=False,
    allow_infinity=False,
)


def _cross_section(min_size: int = 2, max_size: int = 200) -> st.SearchStrategy[list[float]]:
    return st.lists(_FINITE, min_size=min_size, max_size=max_size)


# ---------------------------------------------------------------------------
# Test 1: z-scores have mean zero and sample std one
# ---------------------------------------------------------------------------


@given(raw=_cross_section())
@settings(max_examples=100)
def test_zscore_moments(raw: list[float]) -> None:
    """Any non-degenerate cross-section maps to mean 0 and sample std 1."""
    values = pd.Series(raw, dtype=float)
    assume(values.std(ddof=1) > 1.0)
    result = cross_sectional_standardize(values)
    assert np.isclose(result.mean(), 0.0, atol=1e-8), (
        "Z-scored output must have mean close to zero"
    )
    assert np.isclose(result.std(ddof=1), 1.0, atol=1e-8), (
        "Z-scored output must have sample std close to one"
    )


# ---------------------------------------------------------------------------
# Test 2: z-scores are invariant to positive affine transforms
# ---------------------------------------------------------------------------


@given(
    raw=_cross_section(min_size=3, max_size=50),
    scale=st.floats(min_value=0.1, max_value=100.0),
    shift=st.floats(min_value=-1e3, max_value=1e3),
)
@settings(max_examples=100)
def test_zscore_affine_invariance(raw: list[float], scale: float, shift: float) -> None:
    values = pd.Series(raw, dtype=float)
    assume(values.std(ddof=1) > 1.0)
    base = cross_sectional_standardize(values)
    moved = cross_sectional_standardize(values * scale + shift)
    np.testing.assert_allclose(base.to_numpy(), moved.to_numpy(), atol=1e-6)


# ---------------------------------------------------------------------------
# Test 3: winsorization is idempotent and bounded
# ---------------------------------------------------------------------------


@given(
    raw=_cross_section(min_size=1, max_size=300),
    pct=st.floats(min_value=0.0, max_value=0.49),
)
@settings(max_examples=100)
def test_winsorize_idempotent(raw: list[float], pct: float) -> None:
    """Winsorizing twice at (p, 1 - p) equals winsorizing once."""
    values = pd.Series(raw, dtype=float)
    once = winsorize(values, pct, 1.0 - pct)
    twice = winsorize(once, pct, 1.0 - pct)
    pd.testing.assert_series_equal(once, twice)


@given(
    raw=_cross_section(min_size=5, max_size=300),
    lower_pct=st.floats(min_value=0.01, max_value=0.1),
    upper_pct=st.floats(min_value=0.9, max_value=0.99),
)
@settings(max_examples=100)
def test_winsorized_values_bounded(raw: list[float], lower_pct: float, upper_pct: float) -> None:
    """Clipped values stay inside the interpolated percentile range."""
    values = pd.Series(raw, dtype=float)
    result = winsorize(values, lower_pct, upper_pct)
    assert (result >= values.quantile(lower_pct) - 1e-10).all()
    assert (result <= values.quantile(upper_pct) + 1e-10).all()
    assert result.min() >= values.min()
    assert result.max() <= values.max()


# ---------------------------------------------------------------------------
# Test 4: robust scores
# ---------------------------------------------------------------------------


@given(value=_FINITE, n=st.integers(min_value=1, max_value=50))
@settings(max_examples=100)
def test_robust_constant_is_zero(value: float, n: int) -> None:
    result = robust_standardize(pd.Series([value] * n))
    assert (result == 0.0).all()


@given(raw=_cross_section(min_size=3, max_size=100))
@settings(max_examples=100)
def test_robust_preserves_order(raw: list[float]) -> None:
    values = pd.Series(raw, dtype=float)
    result = robust_standardize(values)
    order = np.argsort(values.to_numpy(), kind="stable")
    assert np.all(np.diff(result.to_numpy()[order]) >= -1e-12)


# ---------------------------------------------------------------------------
# Test 5: rank-normal scores are symmetric around zero
# ---------------------------------------------------------------------------


@given(raw=st.lists(_FINITE, min_size=2, max_size=200, unique=True))
@settings(max_examples=100)
def test_rank_normal_symmetric(raw: list[float]) -> None:
    result = rank_normal_standardize(pd.Series(raw, dtype=float))
    assert np.isclose(result.sum(), 0.0, atol=1e-9)


# ---------------------------------------------------------------------------
# Test 6: registry names are unique and lookups round-trip
# ---------------------------------------------------------------------------


def test_registry_names_unique() -> None:
    registry = FactorRegistry.with_defaults()
    names = registry.names()
    assert len(names) == len(set(names))
    for name in names:
        assert registry.get(name).name == name
