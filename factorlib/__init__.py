"""Standardized equity factor exposures for alpha and risk models.

Modules
-------
panel
    Panel data source contract, in-memory and file-backed panels, and
    trailing history windows.
standardization
    Cross-sectional z-score, winsorization, robust (median/MAD) and
    rank-normal standardization, applied independently per date.
factors
    The factor abstraction, built-in momentum, value, quality, size,
    volatility, growth and liquidity factors, and the registry used to
    discover and compute them.
config
    Environment-driven runtime settings.
exceptions
    Error hierarchy rooted at ``FactorLibError``.
"""

from factorlib.exceptions import (
    ConfigurationError,
    DataError,
    DuplicateFactorError,
    FactorLibError,
    FactorNotFoundError,
    InsufficientDataError,
    InsufficientHistoryError,
    InvalidBoundsError,
    MissingColumnError,
    RegistryFrozenError,
)
from factorlib.factors import (
    DataFrequency,
    Factor,
    FactorCategory,
    FactorDescriptor,
    FactorRegistry,
)
from factorlib.panel import DataFramePanel, PanelSource, load_panel
from factorlib.standardization import (
    StandardizationConfig,
    StandardizationMethod,
    cross_sectional_standardize,
    robust_standardize,
    winsorize,
)

__version__ = "0.1.0"

__all__ = [
    "ConfigurationError",
    "DataError",
    "DataFramePanel",
    "DataFrequency",
    "DuplicateFactorError",
    "Factor",
    "FactorCategory",
    "FactorDescriptor",
    "FactorLibError",
    "FactorNotFoundError",
    "FactorRegistry",
    "InsufficientDataError",
    "InsufficientHistoryError",
    "InvalidBoundsError",
    "MissingColumnError",
    "PanelSource",
    "RegistryFrozenError",
    "StandardizationConfig",
    "StandardizationMethod",
    "cross_sectional_standardize",
    "load_panel",
    "robust_standardize",
    "winsorize",
    "__version__",
]
