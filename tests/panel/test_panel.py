"""Tests for panel sources and trailing windows."""

from __future__ import annotations

import numpy as np
import pandas as pd
import pytest

from factorlib.exceptions import (
    ConfigurationError,
    DataError,
    InsufficientHistoryError,
    MissingColumnError,
)
from factorlib.panel import (
    DataFramePanel,
    PanelSource,
    PanelWindow,
    as_panel_source,
    build_window,
    load_panel,
    normalize_panel,
)


@pytest.fixture()
def small_panel() -> pd.DataFrame:
    dates = pd.bdate_range("2024-01-01", periods=5)
    rows = [
        {"date": d, "symbol": s, "close": 10.0 * (i + 1) + j}
        for i, d in enumerate(dates)
        for j, s in enumerate(["A", "B", "C"])
    ]
    return pd.DataFrame(rows)


class TestNormalizePanel:
    def test_parses_string_dates(self) -> None:
        frame = pd.DataFrame(
            {"date": ["2024-01-02", "2024-01-03"], "symbol": ["A", "A"], "x": [1.0, 2.0]}
        )
        result = normalize_panel(frame)
        assert pd.api.types.is_datetime64_any_dtype(result["date"])

    def test_accepts_multiindex(self, small_panel: pd.DataFrame) -> None:
        indexed = small_panel.set_index(["date", "symbol"])
        result = normalize_panel(indexed)
        assert {"date", "symbol", "close"} <= set(result.columns)
        assert len(result) == len(small_panel)

    def test_missing_key_column_raises(self) -> None:
        with pytest.raises(DataError, match="symbol"):
            normalize_panel(pd.DataFrame({"date": ["2024-01-02"], "x": [1.0]}))

    def test_duplicate_rows_raise(self, small_panel: pd.DataFrame) -> None:
        doubled = pd.concat([small_panel, small_panel.iloc[:1]])
        with pytest.raises(DataError, match="duplicate"):
            normalize_panel(doubled)

    def test_does_not_mutate_input(self, small_panel: pd.DataFrame) -> None:
        frame = small_panel.assign(date=small_panel["date"].astype(str))
        normalize_panel(frame)
        assert isinstance(frame["date"].iloc[0], str)

    def test_unparseable_dates_raise(self) -> None:
        frame = pd.DataFrame({"date": ["2024-01-02", "notadate"], "symbol": ["A", "B"]})
        with pytest.raises(DataError, match="not parseable"):
            normalize_panel(frame)


class TestDataFramePanel:
    def test_is_panel_source(self, small_panel: pd.DataFrame) -> None:
        assert isinstance(DataFramePanel(small_panel), PanelSource)

    def test_introspection(self, small_panel: pd.DataFrame) -> None:
        panel = DataFramePanel(small_panel)
        assert panel.columns == ["close"]
        assert panel.symbols == ["A", "B", "C"]
        assert len(panel.dates) == 5
        assert len(panel) == 15

    def test_load_filters_by_date(self, small_panel: pd.DataFrame) -> None:
        panel = DataFramePanel(small_panel)
        end = panel.dates[2]
        rows = panel.load(["close"], end=end)
        assert rows["date"].max() == end
        assert len(rows) == 9

    def test_load_omits_absent_columns(self, small_panel: pd.DataFrame) -> None:
        rows = DataFramePanel(small_panel).load(["close", "volume"], end=pd.Timestamp("2030-01-01"))
        assert "volume" not in rows.columns

    def test_as_panel_source_passthrough(self, small_panel: pd.DataFrame) -> None:
        panel = DataFramePanel(small_panel)
        assert as_panel_source(panel) is panel
        assert isinstance(as_panel_source(small_panel), DataFramePanel)

    def test_as_panel_source_rejects_other_types(self) -> None:
        with pytest.raises(DataError):
            as_panel_source([1, 2, 3])


class TestLoadPanel:
    def test_csv_round_trip(self, small_panel: pd.DataFrame, tmp_path) -> None:
        path = tmp_path / "panel.csv"
        small_panel.to_csv(path, index=False)
        panel = load_panel(path)
        assert panel.symbols == ["A", "B", "C"]
        assert panel.dates[0] == pd.Timestamp("2024-01-01")

    def test_parquet(self, small_panel: pd.DataFrame, tmp_path) -> None:
        path = tmp_path / "panel.parquet"
        small_panel.to_parquet(path, index=False)
        assert len(load_panel(path)) == len(small_panel)

    def test_missing_file(self, tmp_path) -> None:
        with pytest.raises(ConfigurationError, match="not found"):
            load_panel(tmp_path / "nope.csv")

    def test_unsupported_suffix(self, tmp_path) -> None:
        path = tmp_path / "panel.xlsx"
        path.write_text("x")
        with pytest.raises(ConfigurationError, match="unsupported"):
            load_panel(path)

    def test_empty_file(self, tmp_path) -> None:
        path = tmp_path / "panel.csv"
        path.write_text("")
        with pytest.raises(DataError, match="cannot read panel"):
            load_panel(path)

    def test_corrupt_parquet(self, tmp_path) -> None:
        path = tmp_path / "panel.parquet"
        path.write_bytes(b"not a parquet file")
        with pytest.raises(DataError, match="cannot read panel"):
            load_panel(path)

    def test_bad_date_column(self, tmp_path) -> None:
        path = tmp_path / "panel.csv"
        path.write_text("date,symbol,close\nnotadate,A,1.0\n")
        with pytest.raises(DataError, match="not parseable"):
            load_panel(path)


class TestBuildWindow:
    def test_trailing_dates(self, small_panel: pd.DataFrame) -> None:
        panel = DataFramePanel(small_panel)
        window = build_window(panel, ["close"], panel.dates[-1], lookback=3)
        assert isinstance(window, PanelWindow)
        assert len(window) == 3
        assert window.dates[0] == panel.dates[2]
        assert window.as_of == panel.dates[-1]

    def test_never_reads_future_rows(self, small_panel: pd.DataFrame) -> None:
        panel = DataFramePanel(small_panel)
        window = build_window(panel, ["close"], panel.dates[1], lookback=2)
        assert window.frame["date"].max() == panel.dates[1]

    def test_as_of_falls_back_to_previous_date(self, small_panel: pd.DataFrame) -> None:
        panel = DataFramePanel(small_panel)
        target = panel.dates[-1] + pd.Timedelta(days=3)
        window = build_window(panel, ["close"], target, lookback=1)
        assert window.date == target
        assert window.as_of == panel.dates[-1]

    def test_lookback_zero_is_one_date(self, small_panel: pd.DataFrame) -> None:
        panel = DataFramePanel(small_panel)
        assert len(build_window(panel, ["close"], panel.dates[-1], lookback=0)) == 1

    def test_missing_column(self, small_panel: pd.DataFrame) -> None:
        panel = DataFramePanel(small_panel)
        with pytest.raises(MissingColumnError) as excinfo:
            build_window(panel, ["close", "volume"], panel.dates[-1], 1, factor="f")
        assert excinfo.value.columns == ("volume",)
        assert excinfo.value.factor == "f"

    def test_insufficient_history(self, small_panel: pd.DataFrame) -> None:
        panel = DataFramePanel(small_panel)
        with pytest.raises(InsufficientHistoryError) as excinfo:
            build_window(panel, ["close"], panel.dates[1], lookback=5)
        assert excinfo.value.required == 5
        assert excinfo.value.available == 2

    def test_field_fills_gaps_with_nan(self, small_panel: pd.DataFrame) -> None:
        gappy = small_panel.drop(index=small_panel.index[-1])
        panel = DataFramePanel(gappy)
        window = build_window(panel, ["close"], panel.dates[-1], lookback=2)
        close = window.field("close")
        assert close.shape == (2, 3)
        assert np.isnan(close.loc[panel.dates[-1], "C"])

    def test_latest(self, small_panel: pd.DataFrame) -> None:
        panel = DataFramePanel(small_panel)
        window = build_window(panel, ["close"], panel.dates[-1], lookback=2)
        latest = window.latest("close")
        assert latest.to_dict() == {"A": 50.0, "B": 51.0, "C": 52.0}
