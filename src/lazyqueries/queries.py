"""
Function-style query API.

Each function takes its source first, so pipelines read inside out::

    from lazyqueries import queries as q

    q.count(q.filter(q.limit(q.generate(random.random), 100), lambda x: x > 0.5))

Any re-iterable collection (list, tuple, range, ...) is accepted wherever a
sequence is expected.
"""

from typing import Any, Callable, Iterable, List, Optional, TypeVar, Union

from lazyqueries.sequences import terminals
from lazyqueries.sequences.operators import (
    ConcatView, DistinctView, FilterView, InterleaveView, LimitView, MapView, SkipView
)
from lazyqueries.sequences.sequence import GenerateSequence, Sequence, as_sequence

T = TypeVar('T')
U = TypeVar('U')

Source = Union[Sequence[T], Iterable[T]]

__all__ = [
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


def of(source: Iterable[T]) -> Sequence[T]:
    """Create sequence from a re-iterable collection."""
    return as_sequence(source)


def filter(source: Source, predicate: Callable[[T], bool]) -> Sequence[T]:
    """Keep only elements matching predicate (lazy, unlike the builtin)."""
    return FilterView(as_sequence(source), predicate)


def map(source: Source, transform: Callable[[T], U]) -> Sequence[U]:
    """Apply transform to each element on pull (lazy, unlike the builtin)."""
    return MapView(as_sequence(source), transform)


def skip(source: Source, n: int) -> Sequence[T]:
    """Skip first n elements."""
    return SkipView(as_sequence(source), n)


def limit(source: Source, n: int) -> Sequence[T]:
    """Take first n elements."""
    return LimitView(as_sequence(source), n)


def distinct(source: Source) -> Sequence[T]:
    """Remove duplicate elements, keeping first occurrences."""
    return DistinctView(as_sequence(source))


def concat(first: Source, second: Source) -> Sequence[T]:
    """All elements of first followed by all of second."""
    return ConcatView(as_sequence(first), as_sequence(second))


def interleave(first: Source, second: Source) -> Sequence[T]:
    """Alternate elements of first and second, then the rest of the longer one."""
    return InterleaveView(as_sequence(first), as_sequence(second))


def generate(supplier: Callable[[], T]) -> Sequence[T]:
    """Create infinite sequence of supplier results."""
    return GenerateSequence(supplier)


def count(source: Source) -> int:
    """Count elements."""
    return terminals.count(as_sequence(source))


def max(source: Source, key: Optional[Callable[[T], Any]] = None) -> T:
    """Largest element, earliest one on ties; raises EmptySequenceError if there is none."""
    return terminals.max(as_sequence(source), key=key)


def collect(source: Source) -> List[T]:
    """Collect all elements into a list."""
    return terminals.collect(as_sequence(source))


def first(source: Source, default: Optional[T] = None) -> Optional[T]:
    """Get first element, or default if the sequence is empty."""
    return terminals.first(as_sequence(source), default)
