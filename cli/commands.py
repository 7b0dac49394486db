"""Factor discovery and computation commands."""

from __future__ import annotations

from itertools import groupby
from pathlib import Path
from typing import Optional

import pandas as pd
import typer

from cli.display import (
    console,
    descriptor_table,
    dict_table,
    error_panel,
    format_value,
    frame_table,
    warning_panel,
)
from cli.state import CliState, get_state
from factorlib.exceptions import FactorLibError, FactorNotFoundError
from factorlib.panel import DataFramePanel, load_panel


def _fail(msg: str) -> None:
    error_panel(msg)
    raise typer.Exit(code=1)


def _parse_date(value: Optional[str]) -> Optional[pd.Timestamp]:
    if value is None:
        return None
    try:
        return pd.Timestamp(value)
    except ValueError as exc:
        raise typer.BadParameter(f"invalid date {value!r}: {exc}") from exc


def _open_panel(state: CliState, data: Optional[Path]) -> DataFramePanel:
    path = data or state.settings.data_path
    if path is None:
        _fail("No panel data given: pass --data or set FACTORLIB_DATA_PATH.")
    try:
        panel = load_panel(path)
    except FactorLibError as exc:
        _fail(str(exc))
    if len(panel) == 0:
        _fail(f"Panel {path} has no rows.")
    return panel


def _as_of(panel: DataFramePanel, target: pd.Timestamp) -> pd.Timestamp:
    """Latest panel date on or before ``target``; factors read that date."""
    earlier = panel.dates[panel.dates <= target]
    return earlier[-1] if len(earlier) else target


_DATA_OPTION = typer.Option(
    None, "--data", "-d", help="Panel file (.csv or .parquet) in long format."
)
_DATE_OPTION = typer.Option(
    None, "--date", help="Target date (YYYY-MM-DD). Defaults to the last panel date."
)


# ------------------------------------------------------------------
# list
# ------------------------------------------------------------------


def list_factors(
    ctx: typer.Context,
    category: Optional[str] = typer.Option(
        None, "--category", "-c", help="Only show one category."
    ),
) -> None:
    """List available factors grouped by category."""
    registry = get_state(ctx).registry
    try:
        factors = registry.by_category(category) if category else list(registry)
    except FactorLibError as exc:
        _fail(str(exc))

    console.print(f"[bold]Available Factors ({len(factors)} total)[/bold]")
    infos = sorted(
        (f.descriptor() for f in factors),
        key=lambda info: (info.category.label, info.name),
    )
    for cat, members in groupby(infos, key=lambda info: info.category):
        descriptor_table(list(members), title=cat.label)


# ------------------------------------------------------------------
# info
# ------------------------------------------------------------------


def info(
    ctx: typer.Context,
    name: str = typer.Argument(help="Factor name"),
) -> None:
    """Show a factor's descriptor."""
    registry = get_state(ctx).registry
    try:
        factor = registry.get(name)
    except FactorNotFoundError as exc:
        error_panel(str(exc))
        console.print("Available factors: " + ", ".join(sorted(registry.names())))
        raise typer.Exit(code=1)

    details = factor.descriptor().to_dict()
    details["standardization"] = factor.standardization.method.value
    if factor.standardization.winsorizes:
        details["winsorize"] = (
            f"{factor.standardization.winsorize_lower:g}-"
            f"{factor.standardization.winsorize_upper:g}"
        )
    dict_table(details, title=f"Factor: {factor.name}")


# ------------------------------------------------------------------
# compute
# ------------------------------------------------------------------


def compute(
    ctx: typer.Context,
    symbol: str = typer.Argument(help="Stock symbol"),
    factor: str = typer.Option(..., "--factor", "-f", help="Factor to compute"),
    data: Optional[Path] = _DATA_OPTION,
    date: Optional[str] = _DATE_OPTION,
    raw: bool = typer.Option(False, "--raw", help="Print the raw (unstandardized) value."),
) -> None:
    """Compute one factor for a symbol on a date."""
    state = get_state(ctx)
    target = _parse_date(date)
    try:
        selected = state.registry.get(factor)
    except FactorNotFoundError as exc:
        _fail(str(exc))

    panel = _open_panel(state, data)
    if target is None:
        target = panel.dates[-1]

    try:
        values = selected.compute_raw(panel, target) if raw else selected.compute(panel, target)
    except FactorLibError as exc:
        _fail(str(exc))

    as_of = _as_of(panel, target)
    if symbol not in values.index:
        _fail(f"Symbol {symbol!r} has no data for {selected.name} on {as_of.date()}.")

    value = float(values.loc[symbol])
    if pd.isna(value):
        warning_panel(f"{selected.name} is missing for {symbol} on {as_of.date()}.")
    details = {
        "symbol": symbol,
        "factor": selected.name,
        "date": as_of.date().isoformat(),
    }
    if as_of != target:
        details["requested"] = target.date().isoformat()
    details.update(
        {
            "kind": "raw" if raw else "z-score",
            "value": value,
            "cross_section": int(values.notna().sum()),
        }
    )
    dict_table(details, title=f"{selected.name} / {symbol}")


# ------------------------------------------------------------------
# snapshot
# ------------------------------------------------------------------


def snapshot(
    ctx: typer.Context,
    data: Optional[Path] = _DATA_OPTION,
    date: Optional[str] = _DATE_OPTION,
    category: Optional[str] = typer.Option(
        None, "--category", "-c", help="Only compute one category."
    ),
    factor: Optional[list[str]] = typer.Option(
        None, "--factor", "-f", help="Factor name(s). Repeat for multiple."
    ),
    raw: bool = typer.Option(False, "--raw", help="Show raw values instead of z-scores."),
) -> None:
    """Compute several factors for every symbol on one date."""
    state = get_state(ctx)
    target = _parse_date(date)
    panel = _open_panel(state, data)
    if target is None:
        target = panel.dates[-1]

    try:
        frame = state.registry.compute_all(
            panel,
            target,
            names=factor or None,
            category=category,
            raw=raw,
            max_workers=state.settings.max_workers,
        )
    except FactorLibError as exc:
        _fail(str(exc))

    as_of = _as_of(panel, target)
    frame_table(frame, title=f"Factor {'values' if raw else 'scores'} on {as_of.date()}")
    console.print(f"{len(frame)} symbols x {frame.shape[1]} factors: " + format_value(list(frame.columns)))
