"""
Error types raised by the matrix and rating-prediction modules.
All are raised at the call site and leave the component's state untouched.
"""


class InvalidDimension(ValueError):
    """A matrix was constructed with a negative number of rows or columns."""


class IndexOutOfRange(IndexError):
    """A row or column index lies outside the matrix."""


class LengthMismatch(ValueError):
    """A bulk row/column assignment has the wrong number of values."""


class GlobalAverageUndefined(ValueError):
    """The global average was requested before any rating was observed."""
