"""Lazy, repeatable sequences and their views."""

from lazyqueries.sequences.cursor import (
    Cursor,
    CursorState,
    BufferedCursor,
    IteratorCursor,
)
from lazyqueries.sequences.sequence import (
    Sequence,
    IterableSequence,
    GenerateSequence,
    FileSequence,
    as_sequence,
)
from lazyqueries.sequences.operators import (
    FilterView,
    MapView,
    SkipView,
    LimitView,
    DistinctView,
    ConcatView,
    InterleaveView,
)

__all__ = [
    "Cursor",
    "CursorState",
    "BufferedCursor",
    "IteratorCursor",
    "Sequence",
    "IterableSequence",
    "GenerateSequence",
    "FileSequence",
    "as_sequence",
    "FilterView",
    "MapView",
    "SkipView",
    "LimitView",
    "DistinctView",
    "ConcatView",
    "InterleaveView",
]
