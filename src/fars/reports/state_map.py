"""
FARS State Map Report (Imperative Shell)

Reads one year's accident file, selects a state and renders the accident
locations.

Package Location: src/fars/reports/state_map.py

Usage::

    from fars import map_state

    map_state(1, 2013, output_path="alabama_2013.html")
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any, Optional, Union

import plotly.graph_objects as go

from ..analysis.geo import check_state, select_state
from ..data.files import resolve_path
from ..data.reader import read
from ..plotting.state_map import plot_state_map
from ..utils.parsing import parse_state, parse_year

log = logging.getLogger(__name__)


def map_state(
    state_num: Any,
    year: Any,
    data_dir: Optional[Union[str, Path]] = None,
    output_path: Optional[Union[str, Path]] = None,
    show: bool = True,
) -> Optional[go.Figure]:
    """
    Plot accident locations in one state for one year.

    Args:
        state_num: State code (``int`` or integer text).
        year: Data year (``int`` or integer text).
        data_dir: Directory holding the accident files.  Defaults to the
            current working directory.
        output_path: When given, the figure is written there as HTML
            instead of being displayed.
        show: Display the figure with ``fig.show()`` when no
            *output_path* is given.

    Returns:
        The rendered figure, or ``None`` when the state has no accidents.
        The "no accidents to plot" notice is logged at INFO on the
        ``fars`` logger; call :func:`fars.configure_logging` first to see
        it on stderr.

    Raises:
        InvalidYearFormat: If *year* does not hold an integer.
        FileNotFoundError: If the accident file for *year* is missing.
        InvalidState: If *state_num* is malformed or absent from the file.
    """
    year = parse_year(year)
    data = read(resolve_path(year, data_dir))
    state_num = parse_state(state_num)

    check_state(data, state_num)
    df_state = select_state(data, state_num)

    if df_state.empty:
        log.info(
            "no accidents to plot",
            extra={"state": state_num, "year": year},
        )
        return None

    fig = plot_state_map(df_state, state_num, year)

    if output_path is not None:
        out_path = Path(output_path)
        fig.write_html(str(out_path))
        log.info("State map saved", extra={"path": str(out_path)})
    elif show:
        fig.show()

    return fig
