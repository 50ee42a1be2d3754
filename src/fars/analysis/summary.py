"""
FARS Monthly Summary (Functional Core)

Pure functions only. No I/O, no side effects.
Input/output is DataFrames and plain lists.

Package Location: src/fars/analysis/summary.py

Pivot Rule:
    Counts are built as a mapping from (year, MONTH) to the number of
    records, then reshaped so that each year becomes a column.  Rows are
    the sorted union of months observed in any year; a month with no
    records in a given year is ``<NA>`` in that year's column, never 0.
    Year columns keep the order in which years were first requested,
    including years that loaded successfully but contributed no rows.
"""

from __future__ import annotations

from typing import Iterable, List, Optional, Sequence

import pandas as pd


def merge_year_tables(tables: Iterable[Optional[pd.DataFrame]]) -> pd.DataFrame:
    """
    Concatenate per-year ``[MONTH, year]`` tables, skipping ``None`` and empty entries.

    Args:
        tables: Per-year DataFrames; ``None`` marks a failed year.

    Returns:
        One DataFrame with columns ``[MONTH, year]``.  Empty (with those
        columns) when nothing was loaded.
    """
    frames = [t for t in tables if t is not None and not t.empty]
    if not frames:
        return pd.DataFrame(columns=['MONTH', 'year'])
    return pd.concat(frames, ignore_index=True)


def count_by_year_month(merged: pd.DataFrame) -> pd.DataFrame:
    """
    Count records per (year, MONTH) pair.

    Args:
        merged: DataFrame with at least ``MONTH`` and ``year`` columns.

    Returns:
        Long-format DataFrame with columns ``[year, MONTH, n]`` sorted by
        year then month.

    Raises:
        ValueError: If *merged* lacks ``MONTH`` or ``year``.
    """
    _validate_columns(merged, required=['MONTH', 'year'])

    if merged.empty:
        return pd.DataFrame(columns=['year', 'MONTH', 'n'])

    return (
        merged.groupby(['year', 'MONTH'], sort=True)
        .size()
        .rename('n')
        .reset_index()
    )


def pivot_counts(counts: pd.DataFrame, years: Sequence[int]) -> pd.DataFrame:
    """
    Reshape long counts into one column per year.

    Args:
        counts: Output of :func:`count_by_year_month`.
        years: Year column labels in output order.  Duplicates are dropped
            after their first occurrence.

    Returns:
        DataFrame indexed by ``MONTH`` (ascending) with nullable ``Int64``
        count columns, one per year.  The column axis is named ``year``.
    """
    columns: List[int] = list(dict.fromkeys(years))

    if counts.empty:
        months: List = []
        wide = pd.DataFrame(index=pd.Index(months, name='MONTH'), columns=columns)
    else:
        wide = counts.pivot(index='MONTH', columns='year', values='n')
        wide = wide.sort_index().reindex(columns=columns)

    wide = wide.astype('Int64')
    wide.index.name = 'MONTH'
    wide.columns.name = 'year'
    return wide


# ---------------------------------------------------------------------------
# Private helpers
# ---------------------------------------------------------------------------

def _validate_columns(df: pd.DataFrame, required: list[str]) -> None:
    """Raise ValueError if any required columns are absent."""
    missing = [c for c in required if c not in df.columns]
    if missing:
        raise ValueError(f"DataFrame is missing required columns: {missing}")
