"""Exceptions raised by sequence cursors and reducers."""


class LazyQueriesError(Exception):
    """Base class for all errors raised by this package."""


class ExhaustedCursorError(LazyQueriesError, LookupError):
    """Raised when ``next()`` is called on a cursor with no remaining elements."""

    def __init__(self, message: str = "Iterator has been depleted"):
        super().__init__(message)


class EmptySequenceError(LazyQueriesError, ValueError):
    """Raised when a reduction that needs at least one element gets none."""

    def __init__(self, message: str = "Source sequence is empty"):
        super().__init__(message)
