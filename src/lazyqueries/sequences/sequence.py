"""
Repeatable lazy sequences.
"""

from abc import abstractmethod
from pathlib import Path
from typing import Any, Callable, Iterable, Iterator, List, Optional, TypeVar, Union

from lazyqueries.sequences.cursor import Cursor, IteratorCursor

T = TypeVar('T')
U = TypeVar('U')


class Sequence(Iterable[T]):
    """
    A repeatable, lazy, possibly infinite source of elements.

    A sequence is an immutable description of a pipeline. Nothing is pulled
    when it is built; every call to ``cursor()`` (or ``iter()``) starts a new,
    independent traversal from the original source.
    """

    @abstractmethod
    def cursor(self) -> Cursor[T]:
        """Create a fresh traversal cursor."""
        pass

    def __iter__(self) -> Iterator[T]:
        return self.cursor()

    # Transformation operators

    def filter(self, predicate: Callable[[T], bool]) -> 'Sequence[T]':
        """Keep only elements matching predicate."""
        from lazyqueries.sequences.operators import FilterView
        return FilterView(self, predicate)

    def map(self, transform: Callable[[T], U]) -> 'Sequence[U]':
        """Apply function to each element."""
        from lazyqueries.sequences.operators import MapView
        return MapView(self, transform)

    def skip(self, n: int) -> 'Sequence[T]':
        """Skip first n elements."""
        from lazyqueries.sequences.operators import SkipView
        return SkipView(self, n)

    def limit(self, n: int) -> 'Sequence[T]':
        """Take first n elements."""
        from lazyqueries.sequences.operators import LimitView
        return LimitView(self, n)

    def distinct(self) -> 'Sequence[T]':
        """Remove duplicate elements."""
        from lazyqueries.sequences.operators import DistinctView
        return DistinctView(self)

    def concat(self, other: Iterable[T]) -> 'Sequence[T]':
        """Append all elements of other after this sequence."""
        from lazyqueries.sequences.operators import ConcatView
        return ConcatView(self, as_sequence(other))

    def interleave(self, other: Iterable[T]) -> 'Sequence[T]':
        """Alternate elements of this sequence and other."""
        from lazyqueries.sequences.operators import InterleaveView
        return InterleaveView(self, as_sequence(other))

    # Terminal operators

    def count(self) -> int:
        """Count elements."""
        from lazyqueries.sequences import terminals
        return terminals.count(self)

    def max(self, key: Optional[Callable[[T], Any]] = None) -> T:
        """Largest element, earliest one on ties."""
        from lazyqueries.sequences import terminals
        return terminals.max(self, key=key)

    def collect(self) -> List[T]:
        """Collect all elements into a list."""
        from lazyqueries.sequences import terminals
        return terminals.collect(self)

    def first(self, default: Optional[T] = None) -> Optional[T]:
        """Get first element."""
        from lazyqueries.sequences import terminals
        return terminals.first(self, default)

    # Factory methods

    @classmethod
    def of(cls, *items: T) -> 'Sequence[T]':
        """Create sequence from the given elements."""
        return IterableSequence(items)

    @classmethod
    def from_iterable(cls, iterable: Iterable[T]) -> 'Sequence[T]':
        """Create sequence from a re-iterable collection."""
        return as_sequence(iterable)

    @classmethod
    def from_file(cls, path: Union[str, Path], encoding: str = 'utf-8') -> 'Sequence[str]':
        """Create sequence of the lines of a text file."""
        return FileSequence(path, encoding=encoding)

    @classmethod
    def range(cls, *args) -> 'Sequence[int]':
        """Create sequence of integers."""
        return IterableSequence(range(*args))

    @classmethod
    def generate(cls, supplier: Callable[[], T]) -> 'Sequence[T]':
        """Create infinite sequence."""
        return GenerateSequence(supplier)


class IterableSequence(Sequence[T]):
    """Sequence over a re-iterable Python collection (list, tuple, range, ...)."""

    def __init__(self, source: Iterable[T]):
        if not hasattr(source, '__iter__'):
            raise TypeError("Source must be iterable")
        if iter(source) is source:
            raise TypeError(
                "Source is a one-shot iterator and cannot be traversed twice; "
                "pass a collection or a GenerateSequence instead"
            )
        self._source = source

    def cursor(self) -> Cursor[T]:
        return IteratorCursor(iter(self._source))


class GenerateCursor(Cursor[T]):
    """Endless cursor calling the supplier once per consumed element."""

    def __init__(self, supplier: Callable[[], T]):
        self._supplier = supplier

    def has_next(self) -> bool:
        return True

    def next(self) -> T:
        return self._supplier()


class GenerateSequence(Sequence[T]):
    """
    Infinite sequence of supplier results.

    Bound it with ``limit()`` before handing it to a reducer, otherwise the
    reduction never returns.
    """

    def __init__(self, supplier: Callable[[], T]):
        if not callable(supplier):
            raise TypeError("Supplier must be callable")
        self._supplier = supplier

    def cursor(self) -> Cursor[T]:
        return GenerateCursor(self._supplier)


class FileSequence(Sequence[str]):
    """Sequence of the lines of a text file, opened anew for each cursor."""

    def __init__(self, path: Union[str, Path], encoding: str = 'utf-8'):
        self.path = Path(path)
        self.encoding = encoding

    def _lines(self) -> Iterator[str]:
        with open(self.path, 'r', encoding=self.encoding) as f:
            for line in f:
                yield line.rstrip('\n\r')

    def cursor(self) -> Cursor[str]:
        return IteratorCursor(self._lines())


def as_sequence(source: Union[Sequence[T], Iterable[T]]) -> Sequence[T]:
    """Return source unchanged if it is a Sequence, otherwise wrap it."""
    if isinstance(source, Sequence):
        return source
    return IterableSequence(source)
