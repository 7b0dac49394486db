"""Per-invocation CLI state shared through the Typer context."""

from __future__ import annotations

from dataclasses import dataclass, field

import typer

from factorlib.config import FactorSettings
from factorlib.factors import FactorRegistry


@dataclass
class CliState:
    """Registry and settings resolved once per CLI invocation."""

    settings: FactorSettings = field(default_factory=FactorSettings)
    registry: FactorRegistry = field(default_factory=FactorRegistry.with_defaults)


def get_state(ctx: typer.Context) -> CliState:
    if not isinstance(ctx.obj, CliState):
        ctx.obj = CliState()
    return ctx.obj
