"""
Single-traversal cursors.

A cursor is the stateful half of a sequence: it is created fresh for every
traversal, only moves forward and is discarded once the caller stops
pulling. ``has_next()`` never consumes; ``next()`` always re-validates
through ``has_next()`` and raises ``ExhaustedCursorError`` when nothing is
left.
"""

from abc import abstractmethod
from enum import Enum
from typing import Iterator, Optional, Tuple, TypeVar

from lazyqueries.errors import ExhaustedCursorError

T = TypeVar('T')


class CursorState(Enum):
    """State of a cursor's one-slot pending buffer."""
    EMPTY = "empty"        # nothing buffered, upstream not yet asked
    BUFFERED = "buffered"  # one element pulled but not yet consumed
    DONE = "done"          # upstream exhausted, sticky


class Cursor(Iterator[T]):
    """Forward-only reader over one traversal of a sequence."""

    @abstractmethod
    def has_next(self) -> bool:
        """Report whether another element is available without consuming it."""
        pass

    @abstractmethod
    def next(self) -> T:
        """Consume and return the next element."""
        pass

    def __iter__(self) -> 'Cursor[T]':
        return self

    def __next__(self) -> T:
        # StopIteration leaking from user code must not end the loop quietly
        try:
            found = self.has_next()
            item = self.next() if found else None
        except StopIteration as e:
            raise RuntimeError("StopIteration raised inside a sequence pipeline") from e
        if not found:
            raise StopIteration
        return item


class BufferedCursor(Cursor[T]):
    """
    Cursor that looks ahead by at most one element.

    Subclasses implement ``_advance()``, which pulls from upstream until it
    can produce an element (``(True, element)``) or proves there is none
    (``(False, None)``). The buffer is tracked by ``CursorState`` so ``None``
    remains a legal element.
    """

    def __init__(self):
        self._state = CursorState.EMPTY
        self._pending: Optional[T] = None

    @abstractmethod
    def _advance(self) -> Tuple[bool, Optional[T]]:
        pass

    @property
    def state(self) -> CursorState:
        return self._state

    def has_next(self) -> bool:
        if self._state is CursorState.EMPTY:
            found, item = self._advance()
            if found:
                self._pending = item
                self._state = CursorState.BUFFERED
            else:
                self._state = CursorState.DONE
        return self._state is CursorState.BUFFERED

    def next(self) -> T:
        if not self.has_next():
            raise ExhaustedCursorError()
        item = self._pending
        self._pending = None
        self._state = CursorState.EMPTY
        return item


class IteratorCursor(BufferedCursor[T]):
    """Adapt a plain Python iterator to the cursor protocol."""

    def __init__(self, iterator: Iterator[T]):
        super().__init__()
        self._iterator = iterator

    def _advance(self) -> Tuple[bool, Optional[T]]:
        try:
            return True, next(self._iterator)
        except StopIteration:
            return False, None
