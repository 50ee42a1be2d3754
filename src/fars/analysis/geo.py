"""
FARS State Selection and Coordinates (Functional Core)

Pure functions only. No I/O, no side effects.

Package Location: src/fars/analysis/geo.py

Sentinel Rule:
    FARS encodes unknown coordinates with out-of-range values.  Any
    ``LONGITUD`` above 900 and any ``LATITUDE`` above 90 is replaced with
    NaN.  Rows are never dropped: a record with an unknown position stays
    in the state table and is only left out of bounds and markers.
"""

from __future__ import annotations

from typing import Optional, Tuple

import numpy as np
import pandas as pd

from ..errors import InvalidState

LONGITUDE_SENTINEL: float = 900
LATITUDE_SENTINEL: float = 90


def check_state(data: pd.DataFrame, state_num: int) -> None:
    """
    Raise ``InvalidState`` unless *state_num* occurs in ``data['STATE']``.

    Raises:
        InvalidState: If the state number is absent.
        ValueError: If *data* has no ``STATE`` column.
    """
    _validate_columns(data, required=['STATE'])
    if state_num not in set(data['STATE'].dropna().unique().tolist()):
        raise InvalidState(state_num)


def select_state(data: pd.DataFrame, state_num: int) -> pd.DataFrame:
    """
    Return the rows of *data* for one state, with sentinels masked.

    Args:
        data: Full accident table with ``STATE``, ``LATITUDE`` and
            ``LONGITUD`` columns.
        state_num: Integer state code.

    Returns:
        A copy of the matching rows (all columns), with sentinel
        coordinates replaced by NaN.  Empty when nothing matches.
    """
    _validate_columns(data, required=['STATE', 'LATITUDE', 'LONGITUD'])
    df_state = data.loc[data['STATE'] == state_num]
    return mask_sentinel_coords(df_state)


def mask_sentinel_coords(df: pd.DataFrame) -> pd.DataFrame:
    """
    Replace sentinel coordinates with NaN on a copy of *df*.

    Returns:
        Copy of *df* where ``LONGITUD > 900`` and ``LATITUDE > 90`` are NaN.
        Row count is unchanged.
    """
    df = df.copy()
    lon = pd.to_numeric(df['LONGITUD'], errors='coerce').astype(float)
    lat = pd.to_numeric(df['LATITUDE'], errors='coerce').astype(float)
    df['LONGITUD'] = lon.mask(lon > LONGITUDE_SENTINEL, np.nan)
    df['LATITUDE'] = lat.mask(lat > LATITUDE_SENTINEL, np.nan)
    return df


def coord_bounds(
    df: pd.DataFrame,
) -> Optional[Tuple[Tuple[float, float], Tuple[float, float]]]:
    """
    Bounding box of the valid coordinates in *df*.

    Latitude and longitude ranges are taken independently, each ignoring
    NaN.

    Returns:
        ``((lat_min, lat_max), (lon_min, lon_max))``, or ``None`` when either
        column has no valid value.
    """
    lat = df['LATITUDE'].dropna()
    lon = df['LONGITUD'].dropna()
    if lat.empty or lon.empty:
        return None
    return (
        (float(lat.min()), float(lat.max())),
        (float(lon.min()), float(lon.max())),
    )


def _validate_columns(df: pd.DataFrame, required: list[str]) -> None:
    missing = [c for c in required if c not in df.columns]
    if missing:
        raise ValueError(f"accident table is missing required columns: {missing}")
