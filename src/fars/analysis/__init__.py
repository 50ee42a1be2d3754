"""
FARS Analysis Package (Functional Core)

Pure transformations only. No file I/O, no side effects.

Modules:
- summary: month-by-year accident counts and wide-format pivot
- geo:     state filtering and coordinate sentinel handling
"""

from .summary import count_by_year_month, merge_year_tables, pivot_counts
from .geo import check_state, coord_bounds, mask_sentinel_coords, select_state

__all__ = [
    # Summary
    'merge_year_tables',
    'count_by_year_month',
    'pivot_counts',
    # Geo
    'check_state',
    'select_state',
    'mask_sentinel_coords',
    'coord_bounds',
]
