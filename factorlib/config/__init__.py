"""
Configuration Layer - Externalized runtime settings.

Usage:
    from factorlib.config import FactorSettings

    # Use defaults
    settings = FactorSettings()

    # Load from environment
    settings = FactorSettings.from_env()
"""

from factorlib.config.settings import FactorSettings

__all__ = ["FactorSettings"]
