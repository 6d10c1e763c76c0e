"""
LazyQueries: lazy, repeatable sequence pipelines.

Pipelines are built from composable views (filter, map, skip, limit,
distinct, concat, interleave) over any re-iterable source or an infinite
generator, and are only evaluated when a cursor pulls from them.
"""

from lazyqueries.config import LazyQueriesConfig
from lazyqueries.errors import LazyQueriesError, ExhaustedCursorError, EmptySequenceError
from lazyqueries.sequences import Sequence, Cursor, CursorState, FileSequence
from lazyqueries.queries import (
    of,
    filter,
    map,
    skip,
    limit,
    distinct,
    concat,
    interleave,
    generate,
    count,
    max,
    collect,
    first,
)

__version__ = "0.1.0"
__author__ = "LazyQueries Contributors"
__license__ = "Apache-2.0"

__all__ = [
    "LazyQueriesConfig",
    "LazyQueriesError",
    "ExhaustedCursorError",
    "EmptySequenceError",
    "Sequence",
    "Cursor",
    "CursorState",
    "FileSequence",
    "of",
    "filter",
    "map",
    "skip",
    "limit",
    "distinct",
    "concat",
    "interleave",
    "generate",
    "count",
    "max",
    "collect",
    "first",
]

# Configure default settings
LazyQueriesConfig.set_defaults()
