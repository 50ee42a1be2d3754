"""
FARS Data Package (Imperative Shell)

This package handles file naming and file reading for yearly accident
data.

Modules:
- files:  Year to file name mapping
- reader: CSV reading, single file and per-year batches
"""

from .files import filename_for, resolve_path
from .reader import YearData, YearFailure, read, read_years

__all__ = [
    # Files
    'filename_for',
    'resolve_path',
    # Reader
    'read',
    'read_years',
    'YearData',
    'YearFailure',
]
