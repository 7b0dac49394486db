"""Configuration for cross-sectional standardization."""

from __future__ import annotations

import math
from dataclasses import dataclass
from enum import Enum

from factorlib.exceptions import ConfigurationError, InvalidBoundsError


class StandardizationMethod(str, Enum):
    """Cross-sectional standardization method."""

    Z_SCORE = "z_score"
    ROBUST = "robust"
    RANK_NORMAL = "rank_normal"


def validate_bounds(lower_pct: float, upper_pct: float) -> None:
    """Raise :class:`InvalidBoundsError` unless ``0 <= lower < upper <= 1``."""
    if (
        math.isnan(lower_pct)
        or math.isnan(upper_pct)
        or not 0.0 <= lower_pct < upper_pct <= 1.0
    ):
        raise InvalidBoundsError(lower_pct, upper_pct)


@dataclass(frozen=True)
class StandardizationConfig:
    """Configuration for turning raw factor values into scores.

    Parameters
    ----------
    method : StandardizationMethod
        Z-score, MAD-based robust z-score, or rank-normal.
    winsorize_lower : float or None
        Lower percentile for winsorization (0-1).  ``None`` together with
        ``winsorize_upper=None`` disables winsorization.
    winsorize_upper : float or None
        Upper percentile for winsorization (0-1).
    strict : bool
        When True a degenerate cross-section (fewer than 2 valid values
        or zero dispersion) raises ``InsufficientDataError`` under the
        z-score method; when False it yields all-missing scores.
    """

    method: StandardizationMethod = StandardizationMethod.Z_SCORE
    winsorize_lower: float | None = None
    winsorize_upper: float | None = None
    strict: bool = True

    def __post_init__(self) -> None:
        if (self.winsorize_lower is None) != (self.winsorize_upper is None):
            raise ConfigurationError(
                "winsorize_lower and winsorize_upper must both be set or both be None"
            )
        if self.winsorize_lower is not None and self.winsorize_upper is not None:
            validate_bounds(self.winsorize_lower, self.winsorize_upper)

    @property
    def winsorizes(self) -> bool:
        return self.winsorize_lower is not None

    def to_dict(self) -> dict:
        return {
            "method": self.method.value,
            "winsorize_lower": self.winsorize_lower,
            "winsorize_upper": self.winsorize_upper,
            "strict": self.strict,
        }

    @classmethod
    def for_normal(cls) -> StandardizationConfig:
        """Plain z-score for approximately normal factors (e.g. momentum)."""
        return cls()

    @classmethod
    def for_heavy_tailed(
        cls,
        lower: float = 0.01,
        upper: float = 0.99,
    ) -> StandardizationConfig:
        """Winsorize then z-score, for ratio factors with fat tails."""
        return cls(winsorize_lower=lower, winsorize_upper=upper)

    @classmethod
    def for_robust(cls) -> StandardizationConfig:
        """Median/MAD scaling for outlier-dominated cross-sections."""
        return cls(method=StandardizationMethod.ROBUST)
