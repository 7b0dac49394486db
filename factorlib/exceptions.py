"""Custom exception hierarchy for the factorlib library."""

from __future__ import annotations

from collections.abc import Iterable


class FactorLibError(Exception):
    """Base exception for all factorlib errors."""


class ConfigurationError(FactorLibError):
    """Invalid configuration parameters or missing required arguments."""


class DataError(FactorLibError):
    """Invalid input data: wrong type, shape, or alignment."""


class FactorNotFoundError(FactorLibError):
    """No factor is registered under the requested name."""

    def __init__(self, name: str, suggestions: Iterable[str] = ()) -> None:
        self.name = name
        self.suggestions = tuple(suggestions)
        msg = f"Factor {name!r} not found"
        if self.suggestions:
            msg += f"; did you mean {', '.join(map(repr, self.suggestions))}?"
        super().__init__(msg)


class DuplicateFactorError(ConfigurationError):
    """A factor with the same name is already registered."""

    def __init__(self, name: str) -> None:
        self.name = name
        super().__init__(f"Factor {name!r} already registered")


class RegistryFrozenError(ConfigurationError):
    """Registration attempted after the registry was frozen."""


class MissingColumnError(DataError):
    """The panel lacks one or more columns a factor requires."""

    def __init__(self, columns: Iterable[str], factor: str | None = None) -> None:
        self.columns = tuple(sorted(columns))
        self.factor = factor
        prefix = f"{factor}: " if factor else ""
        super().__init__(f"{prefix}missing required column(s): {', '.join(self.columns)}")


class InsufficientHistoryError(DataError):
    """Fewer trailing periods are available than the lookback requires."""

    def __init__(self, required: int, available: int, factor: str | None = None) -> None:
        self.required = required
        self.available = available
        self.factor = factor
        prefix = f"{factor}: " if factor else ""
        super().__init__(
            f"{prefix}insufficient history: need {required} periods, got {available}"
        )


class InsufficientDataError(DataError):
    """A cross-section is too small or degenerate to standardize."""


class InvalidBoundsError(ConfigurationError):
    """Winsorization percentiles are malformed."""

    def __init__(self, lower: float, upper: float) -> None:
        self.lower = lower
        self.upper = upper
        super().__init__(
            "winsorize bounds must satisfy 0 <= lower < upper <= 1, "
            f"got lower={lower!r}, upper={upper!r}"
        )
