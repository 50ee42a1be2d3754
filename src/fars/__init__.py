"""
FARS - Fatality Analysis Reporting System accident reports

A small Python package for summarizing yearly accident files and mapping
accidents within a state, using the Functional Core, Imperative Shell
architecture.

Structure:
- data/     : Imperative Shell (file naming, CSV reading)
- analysis/ : Functional Core (pure transformations)
- plotting/ : (plotting functions)
- reports/  : public orchestration (summaries, maps)
- utils/    : parsing and logging setup

The package only logs; nothing is printed.  Skipped-year warnings and the
empty-state notice reach the console once a handler is attached::

    import fars
    fars.configure_logging("INFO")              # JSON lines on stderr
    fars.configure_logging("INFO", json_format=False)
"""

from .data.files import filename_for
from .data.reader import read, read_years
from .reports.summary import summarize_years
from .reports.state_map import map_state
from .utils.logging import configure_logging

__version__ = "0.1.0"

__all__ = [
    'filename_for',
    'read',
    'read_years',
    'summarize_years',
    'map_state',
    'configure_logging',
]
