"""Rich rendering helpers for CLI output (single-responsibility display layer)."""

from __future__ import annotations

import math
from collections.abc import Sequence
from typing import Any

import pandas as pd
from rich.console import Console
from rich.panel import Panel
from rich.table import Table

from factorlib.factors import FactorDescriptor

console = Console()


# ------------------------------------------------------------------
# Panels
# ------------------------------------------------------------------


def error_panel(msg: str) -> None:
    """Print a red error panel."""
    console.print(Panel(msg, title="Error", border_style="red"))


def warning_panel(msg: str) -> None:
    """Print a yellow warning panel."""
    console.print(Panel(msg, title="Warning", border_style="yellow"))


# ------------------------------------------------------------------
# Tables
# ------------------------------------------------------------------


def format_value(value: Any) -> str:
    """Render floats with fixed precision and missing values as ``NaN``."""
    if isinstance(value, float):
        return "NaN" if math.isnan(value) else f"{value:.6f}"
    if isinstance(value, (list, tuple, set, frozenset)):
        return ", ".join(str(v) for v in value)
    return str(value)


def dict_table(data: dict[str, Any], title: str = "") -> None:
    """Render a key/value table from a dict."""
    table = Table(title=title, show_header=True, header_style="bold cyan")
    table.add_column("Key", style="bold", no_wrap=True)
    table.add_column("Value")
    for key, value in data.items():
        table.add_row(str(key), format_value(value))
    console.print(table)


def descriptor_table(descriptors: Sequence[FactorDescriptor], title: str = "") -> None:
    """Render factor descriptors as name / lookback / description rows."""
    table = Table(title=title, show_header=True, header_style="bold cyan")
    table.add_column("Name", style="bold", no_wrap=True)
    table.add_column("Lookback", justify="right", no_wrap=True)
    table.add_column("Description")
    for info in descriptors:
        table.add_row(info.name, str(info.lookback), info.description)
    console.print(table)


def frame_table(frame: pd.DataFrame, title: str = "") -> None:
    """Render a symbols x factors DataFrame."""
    if frame.empty:
        console.print(f"[dim]No data to display for '{title}'.[/dim]")
        return

    table = Table(title=title, show_header=True, header_style="bold cyan")
    table.add_column(str(frame.index.name or ""), style="bold", no_wrap=True)
    for col in frame.columns:
        table.add_column(str(col), justify="right")
    for label, row in frame.iterrows():
        table.add_row(str(label), *(format_value(float(v)) for v in row))
    console.print(table)
