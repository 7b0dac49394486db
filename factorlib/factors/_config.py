"""Enums and per-factor configuration dataclasses."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from factorlib.exceptions import ConfigurationError

# ---------------------------------------------------------------------------
# Enums
# ---------------------------------------------------------------------------


class FactorCategory(str, Enum):
    """Factor category taxonomy."""

    MOMENTUM = "momentum"
    VALUE = "value"
    QUALITY = "quality"
    SIZE = "size"
    VOLATILITY = "volatility"
    GROWTH = "growth"
    LIQUIDITY = "liquidity"

    @property
    def label(self) -> str:
        return self.value.capitalize()


class DataFrequency(str, Enum):
    """Sampling frequency of the panel a factor expects."""

    DAILY = "daily"
    QUARTERLY = "quarterly"


# ---------------------------------------------------------------------------
# Frozen dataclass configs
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class MomentumConfig:
    """Configuration for price momentum.

    Parameters
    ----------
    window : int
        Return horizon in trading days.
    skip : int
        Most recent days excluded to avoid short-term reversal.
    """

    window: int = 252
    skip: int = 21

    def __post_init__(self) -> None:
        if self.window < 1 or self.skip < 0:
            raise ConfigurationError(
                f"momentum needs window >= 1 and skip >= 0, got {self.window}, {self.skip}"
            )

    @classmethod
    def for_short_term(cls) -> MomentumConfig:
        """1-month momentum, no skip."""
        return cls(window=21, skip=0)

    @classmethod
    def for_medium_term(cls) -> MomentumConfig:
        """6-month momentum skipping the latest month."""
        return cls(window=126, skip=21)

    @classmethod
    def for_long_term(cls) -> MomentumConfig:
        """12-1 momentum."""
        return cls(window=252, skip=21)


@dataclass(frozen=True)
class RollingWindowConfig:
    """Configuration for factors averaged over a trailing window.

    Parameters
    ----------
    window : int
        Number of daily observations.
    """

    window: int = 21

    def __post_init__(self) -> None:
        if self.window < 2:
            raise ConfigurationError(f"window must be >= 2, got {self.window}")


@dataclass(frozen=True)
class GrowthConfig:
    """Configuration for period-over-period growth.

    Parameters
    ----------
    periods : int
        Number of reporting periods between the compared values
        (4 quarters = year over year).
    """

    periods: int = 4

    def __post_init__(self) -> None:
        if self.periods < 1:
            raise ConfigurationError(f"periods must be >= 1, got {self.periods}")
