"""
Terminal reducers.

Each reducer drains a fresh cursor and returns a plain value. None of them
terminate on an unbounded sequence.
"""

from typing import Any, Callable, List, Optional, TypeVar

from lazyqueries.errors import EmptySequenceError
from lazyqueries.sequences.sequence import Sequence

T = TypeVar('T')


def count(source: Sequence[T]) -> int:
    """Number of elements produced by a full traversal."""
    cursor = source.cursor()
    total = 0
    while cursor.has_next():
        cursor.next()
        total += 1
    return total


def max(source: Sequence[T], key: Optional[Callable[[T], Any]] = None) -> T:
    """
    Largest element of the sequence.

    Only a strictly greater element replaces the current best, so among equal
    maxima the earliest one wins.

    Args:
        source: Sequence whose elements (or keys) are totally ordered
        key: Optional function extracting the comparison key

    Raises:
        EmptySequenceError: If the sequence produces no elements
    """
    cursor = source.cursor()
    if not cursor.has_next():
        raise EmptySequenceError()

    best = cursor.next()
    best_key = key(best) if key is not None else best
    while cursor.has_next():
        item = cursor.next()
        item_key = key(item) if key is not None else item
        if item_key > best_key:
            best, best_key = item, item_key
    return best


def collect(source: Sequence[T]) -> List[T]:
    """Collect all elements into a list."""
    cursor = source.cursor()
    items = []
    while cursor.has_next():
        items.append(cursor.next())
    return items


def first(source: Sequence[T], default: Optional[T] = None) -> Optional[T]:
    """Get first element, pulling nothing beyond it."""
    cursor = source.cursor()
    if cursor.has_next():
        return cursor.next()
    return default
