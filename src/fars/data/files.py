"""
FARS File Naming (Imperative Shell)

Maps a year to the canonical accident file name, ``accident_<year>.csv.bz2``.
No existence check happens here; :func:`fars.data.reader.read` does that.

Package Location: src/fars/data/files.py
"""

from pathlib import Path
from typing import Any, Optional, Union

from ..utils.parsing import parse_year

FILENAME_PREFIX: str = "accident_"
FILENAME_SUFFIX: str = ".csv.bz2"


def filename_for(year: Any) -> str:
    """
    Build the accident file name for *year*.

    Args:
        year: Year as ``int`` or integer text (``2013`` or ``"2013"``).

    Returns:
        File name such as ``"accident_2013.csv.bz2"``.

    Raises:
        InvalidYearFormat: If *year* does not hold an integer.

    Example::

        >>> filename_for("2013")
        'accident_2013.csv.bz2'
    """
    return f"{FILENAME_PREFIX}{parse_year(year)}{FILENAME_SUFFIX}"


def resolve_path(year: Any, data_dir: Optional[Union[str, Path]] = None) -> Path:
    """
    Return the path of the accident file for *year* inside *data_dir*.

    When *data_dir* is ``None`` the bare file name is returned, so it is
    resolved against the current working directory.
    """
    name = filename_for(year)
    if data_dir is None:
        return Path(name)
    return Path(data_dir) / name
