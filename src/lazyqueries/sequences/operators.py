"""
Sequence views.

Every view wraps one or two upstream sequences plus its parameters and
builds a fresh cursor per traversal. Cursors pull from their upstream only
when asked, and buffer at most one element.
"""

import logging
import sys
from typing import Any, Callable, List, Optional, Set, Tuple, TypeVar

from lazyqueries.config import config
from lazyqueries.errors import ExhaustedCursorError
from lazyqueries.memory.monitor import MemoryMonitor
from lazyqueries.sequences.cursor import BufferedCursor, Cursor
from lazyqueries.sequences.sequence import Sequence

T = TypeVar('T')
U = TypeVar('U')

logger = logging.getLogger(__name__)


def _check_count(n: int) -> int:
    if isinstance(n, bool) or not isinstance(n, int):
        raise TypeError(f"Count must be an int, got {type(n).__name__}")
    return max(0, n)


class FilterCursor(BufferedCursor[T]):

    def __init__(self, upstream: Cursor[T], predicate: Callable[[T], bool]):
        super().__init__()
        self._upstream = upstream
        self._predicate = predicate

    def _advance(self) -> Tuple[bool, Optional[T]]:
        while self._upstream.has_next():
            item = self._upstream.next()
            if self._predicate(item):
                return True, item
        return False, None


class FilterView(Sequence[T]):
    """Keep, in source order, the elements matching a predicate."""

    def __init__(self, source: Sequence[T], predicate: Callable[[T], bool]):
        self._source = source
        self._predicate = predicate

    def cursor(self) -> Cursor[T]:
        return FilterCursor(self._source.cursor(), self._predicate)


class MapCursor(Cursor[U]):

    def __init__(self, upstream: Cursor[T], transform: Callable[[T], U]):
        self._upstream = upstream
        self._transform = transform

    def has_next(self) -> bool:
        return self._upstream.has_next()

    def next(self) -> U:
        return self._transform(self._upstream.next())


class MapView(Sequence[U]):
    """Apply a transform to every element on pull."""

    def __init__(self, source: Sequence[T], transform: Callable[[T], U]):
        self._source = source
        self._transform = transform

    def cursor(self) -> Cursor[U]:
        return MapCursor(self._source.cursor(), self._transform)


class SkipView(Sequence[T]):
    """
    Drop the first n elements.

    The elements are discarded eagerly when the cursor is created; the
    returned cursor is the upstream cursor itself. Negative counts skip
    nothing.
    """

    def __init__(self, source: Sequence[T], n: int):
        self._source = source
        self._n = _check_count(n)

    def cursor(self) -> Cursor[T]:
        upstream = self._source.cursor()
        skipped = 0
        while skipped < self._n and upstream.has_next():
            upstream.next()
            skipped += 1
        if config.log_pipeline_events:
            logger.debug("skip discarded %d of %d requested elements", skipped, self._n)
        return upstream


class LimitCursor(Cursor[T]):

    def __init__(self, upstream: Cursor[T], n: int):
        self._upstream = upstream
        self._n = n
        self._emitted = 0

    def has_next(self) -> bool:
        # Upstream is not consulted once the cap is reached
        return self._emitted < self._n and self._upstream.has_next()

    def next(self) -> T:
        if not self.has_next():
            raise ExhaustedCursorError()
        self._emitted += 1
        return self._upstream.next()


class LimitView(Sequence[T]):
    """Produce at most the first n elements. Negative counts produce none."""

    def __init__(self, source: Sequence[T], n: int):
        self._source = source
        self._n = _check_count(n)

    def cursor(self) -> Cursor[T]:
        return LimitCursor(self._source.cursor(), self._n)


class DistinctCursor(BufferedCursor[T]):

    def __init__(self, upstream: Cursor[T]):
        super().__init__()
        self._upstream = upstream
        self._seen: Set[Any] = set()
        self._seen_unhashable: List[Any] = []
        self._monitor: Optional[MemoryMonitor] = None
        self._warned = False

    @property
    def seen_count(self) -> int:
        return len(self._seen) + len(self._seen_unhashable)

    def _remember(self, item: T) -> bool:
        """Record item, returning False if it was seen before."""
        try:
            hash(item)
        except TypeError:
            # Unhashable values are compared by equality against everything seen
            if item in self._seen_unhashable or any(item == seen for seen in self._seen):
                return False
            self._seen_unhashable.append(item)
            return True
        if item in self._seen:
            return False
        if self._seen_unhashable and item in self._seen_unhashable:
            return False
        self._seen.add(item)
        return True

    def _seen_size(self) -> int:
        """Shallow size of the seen containers, in bytes."""
        return sys.getsizeof(self._seen) + sys.getsizeof(self._seen_unhashable)

    def _check_memory(self) -> None:
        if self._warned:
            return
        if self._monitor is None:
            self._monitor = MemoryMonitor()
        info = self._monitor.get_memory_info()
        if info.pressure_level >= config.distinct_warn_level:
            self._warned = True
            logger.warning(
                "distinct() is holding %d seen elements (%s of containers). %s",
                self.seen_count, config.format_bytes(self._seen_size()), info
            )

    def _advance(self) -> Tuple[bool, Optional[T]]:
        while self._upstream.has_next():
            item = self._upstream.next()
            if self._remember(item):
                interval = config.distinct_check_interval
                if interval > 0 and self.seen_count % interval == 0:
                    self._check_memory()
                return True, item
        return False, None


class DistinctView(Sequence[T]):
    """
    Keep the first occurrence of each value, compared by equality.

    Unlike every other view this one is not constant-memory: each cursor
    remembers every distinct element it has emitted, so its footprint grows
    with the number of distinct values. Hashable elements are held in a set;
    unhashable ones fall back to a list scanned by equality.
    """

    def __init__(self, source: Sequence[T]):
        self._source = source

    def cursor(self) -> Cursor[T]:
        return DistinctCursor(self._source.cursor())


class ConcatCursor(Cursor[T]):

    def __init__(self, first: Cursor[T], second: Sequence[T]):
        self._current = first
        self._second = second
        self._on_first = True

    def has_next(self) -> bool:
        if self._current.has_next():
            return True
        if self._on_first:
            self._on_first = False
            self._current = self._second.cursor()
            if config.log_pipeline_events:
                logger.debug("concat switched to its second sequence")
            return self._current.has_next()
        return False

    def next(self) -> T:
        if not self.has_next():
            raise ExhaustedCursorError()
        return self._current.next()


class ConcatView(Sequence[T]):
    """All elements of the first sequence followed by all of the second."""

    def __init__(self, first: Sequence[T], second: Sequence[T]):
        self._first = first
        self._second = second

    def cursor(self) -> Cursor[T]:
        return ConcatCursor(self._first.cursor(), self._second)


class InterleaveCursor(Cursor[T]):

    def __init__(self, left: Cursor[T], right: Cursor[T]):
        self._left = left
        self._right = right
        self._left_turn = True

    def has_next(self) -> bool:
        return self._left.has_next() or self._right.has_next()

    def next(self) -> T:
        if self._left_turn and self._left.has_next():
            self._left_turn = False
            return self._left.next()
        if not self._left_turn and self._right.has_next():
            self._left_turn = True
            return self._right.next()
        # One side is exhausted; drain the other without flipping the turn
        if self._left.has_next():
            return self._left.next()
        if self._right.has_next():
            return self._right.next()
        raise ExhaustedCursorError()


class InterleaveView(Sequence[T]):
    """
    Alternate between two sequences, starting with the first.

    Once either side runs out, the rest of the other side follows in its own
    order.
    """

    def __init__(self, left: Sequence[T], right: Sequence[T]):
        self._left = left
        self._right = right

    def cursor(self) -> Cursor[T]:
        return InterleaveCursor(self._left.cursor(), self._right.cursor())
