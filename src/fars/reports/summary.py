"""
FARS Summary Report (Imperative Shell)

Loads the requested years through ``read_years`` and delegates counting
and pivoting to the Functional Core (analysis/summary.py).

Package Location: src/fars/reports/summary.py

Usage::

    from fars import summarize_years

    summarize_years([2013, 2014, 2015])
    # year   2013  2014  2015
    # MONTH
    # 1      2230  2168  2368
    # ...
"""

from __future__ import annotations

from pathlib import Path
from typing import Any, Optional, Union

import pandas as pd

from ..analysis.summary import count_by_year_month, merge_year_tables, pivot_counts
from ..data.reader import read_years


def summarize_years(
    years: Any,
    data_dir: Optional[Union[str, Path]] = None,
) -> pd.DataFrame:
    """
    Count accidents per month for each requested year.

    Years that fail to load are skipped with a logged warning (see
    :func:`fars.data.reader.read_years`) and get no column.

    Args:
        years: A single year or an iterable of years (``int`` or integer
            text).
        data_dir: Directory holding the accident files.  Defaults to the
            current working directory.

    Returns:
        DataFrame indexed by ``MONTH`` (ascending) with one nullable
        ``Int64`` column per loaded year, in request order.  Months with no
        accidents in a year are ``<NA>``.
    """
    results = read_years(years, data_dir=data_dir)

    merged = merge_year_tables(r.data for r in results)
    counts = count_by_year_month(merged)
    loaded_years = [r.year for r in results if r.ok]

    return pivot_counts(counts, loaded_years)
