"""
Settings - Externalized runtime configuration for factor computation.
"""

import os
from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class FactorSettings:
    """
    Runtime settings shared by the CLI and batch callers.

    Attributes:
        log_level: Logging level name applied by the CLI (e.g. "INFO")
        data_path: Default panel file used when no --data option is given
        max_workers: Thread count for multi-factor computation (1 = serial)
    """

    log_level: str = "WARNING"
    data_path: Optional[str] = None
    max_workers: int = 1

    def to_dict(self) -> dict:
        """Convert to dictionary."""
        return {
            "log_level": self.log_level,
            "data_path": self.data_path,
            "max_workers": self.max_workers,
        }

    @classmethod
    def from_env(cls) -> "FactorSettings":
        """
        Create settings from environment variables.

        Environment variables:
        - FACTORLIB_LOG_LEVEL
        - FACTORLIB_DATA_PATH
        - FACTORLIB_MAX_WORKERS
        """

        def get_int(name: str, default: int) -> int:
            val = os.getenv(name)
            if val is None:
                return default
            try:
                return max(1, int(val))
            except ValueError:
                return default

        return cls(
            log_level=os.getenv("FACTORLIB_LOG_LEVEL", "WARNING").upper(),
            data_path=os.getenv("FACTORLIB_DATA_PATH") or None,
            max_workers=get_int("FACTORLIB_MAX_WORKERS", 1),
        )
