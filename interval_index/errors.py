"""
Exceptions raised by the interval index.
"""


class IntervalIndexError(Exception):
    """Base class for all interval index errors."""
    pass


class InvalidDirectionError(IntervalIndexError, ValueError):
    """An iterator was asked to walk in a direction it does not know."""
    pass


class UnsupportedOperationError(IntervalIndexError, NotImplementedError):
    """The operation is not available on this object (e.g. iterator removal)."""
    pass


class EmptyInputError(IntervalIndexError, ValueError):
    """A tree node was constructed from an empty interval list."""
    pass
