import logging

import pandas as pd
import plotly.graph_objects as go
import pytest

from fars import map_state
from fars.analysis.geo import coord_bounds, select_state
from fars.errors import InvalidState
from fars.plotting.state_map import plot_state_map
from fars.reports import state_map as state_map_report

from conftest import ACCIDENTS_2013


def test_unknown_state_raises(data_dir):
    with pytest.raises(InvalidState, match="invalid STATE number: 99") as excinfo:
        map_state(99, 2013, data_dir=data_dir, show=False)
    assert excinfo.value.value == 99


def test_malformed_state_raises(data_dir):
    with pytest.raises(InvalidState):
        map_state("Alabama", 2013, data_dir=data_dir, show=False)


def test_missing_year_file_raises(data_dir):
    with pytest.raises(FileNotFoundError):
        map_state(1, 1999, data_dir=data_dir, show=False)


def test_sentinels_masked_but_rows_kept():
    df_state = select_state(ACCIDENTS_2013, 1)

    assert len(df_state) == 3
    assert df_state['LATITUDE'].isna().tolist() == [False, True, False]
    assert df_state['LONGITUD'].isna().tolist() == [False, False, True]
    # source table untouched
    assert ACCIDENTS_2013['LONGITUD'].max() > 900


def test_bounds_ignore_sentinels():
    bounds = coord_bounds(select_state(ACCIDENTS_2013, 1))
    assert bounds == ((33.52, 34.10), (-87.00, -86.80))


def test_bounds_none_without_valid_coords():
    df = pd.DataFrame({'LATITUDE': [float('nan')], 'LONGITUD': [-90.0]})
    assert coord_bounds(df) is None


def test_plot_only_marks_complete_coordinates():
    fig = plot_state_map(select_state(ACCIDENTS_2013, 1), 1, 2013)

    (trace,) = fig.data
    assert isinstance(trace, go.Scattergeo)
    assert list(trace.lat) == [33.52]
    assert list(trace.lon) == [-86.80]
    assert fig.layout.geo.scope == 'usa'
    assert fig.layout.geo.lataxis.range[0] < 33.52 < fig.layout.geo.lataxis.range[1]


def test_plot_without_valid_coords_shows_full_scope():
    df = pd.DataFrame({'LATITUDE': [float('nan')], 'LONGITUD': [float('nan')]})

    fig = plot_state_map(df, 1, 2013)

    assert fig.layout.geo.lataxis.range is None
    assert fig.layout.geo.projection.type == 'albers usa'


def test_map_state_writes_html(data_dir):
    out = data_dir / "state_2.html"

    fig = map_state("2", "2013", data_dir=data_dir, output_path=out)

    assert out.exists()
    assert len(fig.data[0].lat) == 2


def test_map_state_shows_figure(data_dir, monkeypatch):
    shown = []
    monkeypatch.setattr(go.Figure, "show", lambda self, *a, **kw: shown.append(self))

    fig = map_state(6, 2014, data_dir=data_dir)

    assert len(shown) == 1 and shown[0] is fig


def test_empty_state_is_a_noop(data_dir, monkeypatch, caplog):
    caplog.set_level(logging.INFO, logger="fars")
    monkeypatch.setattr(
        state_map_report, "select_state", lambda data, state: data.iloc[0:0]
    )
    monkeypatch.setattr(
        go.Figure, "show", lambda self, *a, **kw: pytest.fail("figure shown")
    )

    assert map_state(1, 2013, data_dir=data_dir) is None
    assert "no accidents to plot" in caplog.text


def test_empty_state_notice_reaches_stderr(data_dir, monkeypatch, capsys):
    import fars

    logger = logging.getLogger("fars")
    before = list(logger.handlers)
    monkeypatch.setattr(
        state_map_report, "select_state", lambda data, state: data.iloc[0:0]
    )
    try:
        fars.configure_logging("INFO", json_format=False)
        assert map_state(1, 2013, data_dir=data_dir) is None
    finally:
        for handler in logger.handlers[:]:
            if handler not in before:
                logger.removeHandler(handler)
        logger.setLevel(logging.NOTSET)

    assert "no accidents to plot" in capsys.readouterr().err
