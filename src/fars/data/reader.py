"""
FARS Record Reader (Imperative Shell)

Reads yearly accident files into DataFrames.

Package Location: src/fars/data/reader.py

Two entry points are provided:

1. ``read`` – one file, all columns and rows in file order.  A missing
   file raises ``FileNotFoundError``; parser errors from pandas propagate
   unchanged.

2. ``read_years`` – one result per requested year, in request order.
   Each year is loaded independently: a year that fails for any reason
   (bad year text, missing file, truncated or malformed content) is
   logged as a warning and returned as a ``YearFailure`` so the
   remaining years are still processed.  Successful years are returned as
   ``YearData`` holding only the ``MONTH`` and ``year`` columns, where
   ``year`` is the parsed year used to build the file name (never a value
   read from the file).
"""

from __future__ import annotations

import errno
import logging
import warnings
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Iterable, List, Optional, Union

import pandas as pd

from .files import resolve_path
from ..utils.parsing import parse_year

log = logging.getLogger(__name__)

# Columns kept per year by read_years
_YEAR_COLUMNS: List[str] = ['MONTH', 'year']


@dataclass
class YearData:
    """Rows loaded for one year (columns ``MONTH`` and ``year``)."""

    year: int
    data: pd.DataFrame

    ok = True


@dataclass
class YearFailure:
    """Placeholder for a year that could not be loaded."""

    year: Any
    reason: str

    ok = False
    data = None


YearResult = Union[YearData, YearFailure]


# ---------------------------------------------------------------------------
# Public API
# ---------------------------------------------------------------------------

def read(filename: Union[str, Path]) -> pd.DataFrame:
    """
    Read one accident file into a DataFrame.

    Compression is inferred from the file extension, so both
    ``accident_2013.csv.bz2`` and a plain ``.csv`` are accepted.  Non-fatal
    parser warnings (mixed column types and similar) are suppressed.

    Args:
        filename: Path to a comma-separated file.

    Returns:
        DataFrame with every column and row of the file, in file order.

    Raises:
        FileNotFoundError: If *filename* does not exist.  ``filename`` is
            set on the exception.
    """
    path = Path(filename)
    if not path.exists():
        raise FileNotFoundError(
            errno.ENOENT, f"file '{filename}' does not exist", str(filename)
        )

    with warnings.catch_warnings():
        warnings.simplefilter('ignore')
        df = pd.read_csv(path, compression='infer', low_memory=False)

    log.debug(
        "Read accident file",
        extra={"path": str(path), "rows": len(df), "columns": len(df.columns)},
    )
    return df


def read_years(
    years: Any,
    data_dir: Optional[Union[str, Path]] = None,
) -> List[YearResult]:
    """
    Load the ``MONTH`` column for each requested year.

    Args:
        years: A single year or an iterable of years, each an ``int`` or
            integer text.
        data_dir: Directory holding the accident files.  Defaults to the
            current working directory.

    Returns:
        One entry per requested year, in request order: ``YearData`` for
        years that loaded, ``YearFailure`` for years that did not.

    Example::

        results = read_years([2013, 9999])
        # [YearData(year=2013, data=...), YearFailure(year=9999, reason=...)]
    """
    return [_read_one_year(year, data_dir) for year in _as_year_list(years)]


# ---------------------------------------------------------------------------
# Private helpers
# ---------------------------------------------------------------------------

def _read_one_year(year: Any, data_dir: Optional[Union[str, Path]]) -> YearResult:
    """Load one year; any failure becomes a logged ``YearFailure``."""
    try:
        year_int = parse_year(year)
        df = read(resolve_path(year_int, data_dir))
        if 'MONTH' not in df.columns:
            raise ValueError(f"file for {year_int} has no MONTH column")
        df = df.assign(year=year_int)[_YEAR_COLUMNS]
    except Exception as exc:
        log.warning(
            f"invalid year: {year}",
            extra={"year": str(year), "reason": str(exc)},
        )
        return YearFailure(year=year, reason=str(exc))

    return YearData(year=year_int, data=df)


def _as_year_list(years: Any) -> List[Any]:
    """Wrap a scalar year in a list; pass iterables through as a list."""
    if isinstance(years, (str, bytes)) or not isinstance(years, Iterable):
        return [years]
    return list(years)
