"""
FARS Reports Package (Imperative Shell)

Thin orchestration: reads files through ``fars.data``, delegates all
computation to ``fars.analysis`` and ``fars.plotting``.

Modules:
- summary:   month-by-year accident count table
- state_map: accident map for one state and year
"""

from .summary import summarize_years
from .state_map import map_state

__all__ = [
    'summarize_years',
    'map_state',
]
