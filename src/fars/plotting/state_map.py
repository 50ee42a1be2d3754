"""
FARS State Accident Map (Functional Core)

Pure function – no file I/O, no side effects.
Input: one state's accident rows (sentinels already masked).
Output: plotly.graph_objects.Figure.

Package Location: src/fars/plotting/state_map.py

Base map:
    A ``usa`` scope geo layout with state borders.  The latitude and
    longitude axes are zoomed to the bounding box of the valid
    coordinates; rows with a NaN coordinate are left out of both the
    bounds and the markers.  With no valid coordinate at all the full
    ``usa`` scope is shown.
"""

from __future__ import annotations

from typing import Any, Dict

import pandas as pd
import plotly.graph_objects as go

from ..analysis.geo import coord_bounds

# ---------------------------------------------------------------------------
# Constants
# ---------------------------------------------------------------------------

_MARKER_STYLE: Dict[str, Any] = {'color': 'black', 'size': 3, 'symbol': 'circle'}

# Degrees added around the bounding box so edge points stay visible
_BOUNDS_PAD: float = 0.25


def plot_state_map(df_state: pd.DataFrame, state_num: int, year: int) -> go.Figure:
    """
    Build a scatter map of accident locations.

    Args:
        df_state: Rows for one state with columns::

            LATITUDE : float, NaN when unknown
            LONGITUD : float, NaN when unknown

        state_num: State code, used in the title.
        year: Data year, used in the title.

    Returns:
        ``plotly.graph_objects.Figure`` ready for ``fig.show()`` or
        serialisation.

    Raises:
        ValueError: If ``df_state`` is missing required columns.
    """
    missing = [c for c in ('LATITUDE', 'LONGITUD') if c not in df_state.columns]
    if missing:
        raise ValueError(f"df_state is missing required columns: {missing}")

    df = df_state.dropna(subset=['LATITUDE', 'LONGITUD'])

    fig = go.Figure()
    fig.add_trace(go.Scattergeo(
        lat=df['LATITUDE'],
        lon=df['LONGITUD'],
        mode='markers',
        marker=dict(
            color=_MARKER_STYLE['color'],
            size=_MARKER_STYLE['size'],
            symbol=_MARKER_STYLE['symbol'],
        ),
        name='Accident',
        showlegend=False,
        hovertemplate=(
            "Lat: %{lat:.4f}<br>"
            "Lon: %{lon:.4f}<extra></extra>"
        ),
    ))

    geo = dict(
        scope='usa',
        projection=dict(type='albers usa'),
        showsubunits=True,
        subunitcolor='gray',
        showland=True,
        landcolor='white',
    )

    bounds = coord_bounds(df_state)
    if bounds is not None:
        (lat_min, lat_max), (lon_min, lon_max) = bounds
        # albers usa ignores axis ranges, so zoomed maps use a plain projection
        geo['projection'] = dict(type='mercator')
        geo['lataxis'] = dict(range=[lat_min - _BOUNDS_PAD, lat_max + _BOUNDS_PAD])
        geo['lonaxis'] = dict(range=[lon_min - _BOUNDS_PAD, lon_max + _BOUNDS_PAD])

    fig.update_layout(
        title=f"Accidents in state {state_num}, {year} (n={len(df)})",
        geo=geo,
        margin=dict(l=10, r=10, t=50, b=10),
        template='plotly_white',
    )

    return fig
