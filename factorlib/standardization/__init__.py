"""Cross-sectional standardization of raw factor values."""

from factorlib.standardization._config import (
    StandardizationConfig,
    StandardizationMethod,
    validate_bounds,
)
from factorlib.standardization._standardization import (
    MAD_SCALE,
    cross_sectional_standardize,
    rank_normal_standardize,
    robust_standardize,
    standardize_factor,
    winsorize,
)

__all__ = [
    "MAD_SCALE",
    "StandardizationConfig",
    "StandardizationMethod",
    "cross_sectional_standardize",
    "rank_normal_standardize",
    "robust_standardize",
    "standardize_factor",
    "validate_bounds",
    "winsorize",
]
