"""Exception types raised by the FARS package."""

from typing import Any


class FarsError(Exception):
    """Base class for all package errors."""


class InvalidYearFormat(FarsError, ValueError):
    """A year value could not be parsed as an integer."""

    def __init__(self, value: Any):
        self.value = value
        super().__init__(f"invalid year: {value!r}")


class InvalidState(FarsError, ValueError):
    """A state number is malformed or absent from the loaded data."""

    def __init__(self, value: Any):
        self.value = value
        super().__init__(f"invalid STATE number: {value}")
