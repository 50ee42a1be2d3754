"""Strict integer parsing for year and state arguments."""

import math
import numbers
from typing import Any, Optional

from ..errors import InvalidState, InvalidYearFormat


def parse_year(value: Any) -> int:
    """Parse a year given as a number or text.

    Args:
        value: ``2013``, ``2013.0``, ``"2013"`` or ``" 2013 "``.

    Returns:
        The year as ``int``.

    Raises:
        InvalidYearFormat: If *value* does not hold an integer.
    """
    result = _to_int(value)
    if result is None:
        raise InvalidYearFormat(value)
    return result


def parse_state(value: Any) -> int:
    """Parse a state number given as a number or text.

    Raises:
        InvalidState: If *value* does not hold an integer.
    """
    result = _to_int(value)
    if result is None:
        raise InvalidState(value)
    return result


def _to_int(value: Any) -> Optional[int]:
    """Return *value* as ``int``, or ``None`` when it is not integral."""
    if isinstance(value, bool):
        return None
    if isinstance(value, numbers.Integral):
        return int(value)
    if isinstance(value, numbers.Real):
        value = float(value)
        if math.isfinite(value) and value.is_integer():
            return int(value)
        return None
    if isinstance(value, str):
        text = value.strip()
        try:
            return int(text)
        except ValueError:
            return None
    return None
