"""Bundle readers for LazyTreeLib.

A bundle is a lazy sequence of (parent, children) pairs. BundleReader
flattens it into one stream of child values, but also lets the traversal
engine look ahead without committing: values fetched speculatively are
"prepared" and are owed to the next ordinary read, while values handed
to an ordinary reader before anybody looked at them are "passed
unprepared" and can be reclaimed later.

Every buffered value is tagged with the ordinal of the pair it came
from. Because a generation rule emits exactly one pair per parent it
reads, the ordinal is also the index of the value's parent in the
shallower level. The traversal stack relies on this to restore
depth-first order.

SharedBundleReader lets the traversal stack and the next level's
generation input read from the same BundleReader.
"""

from collections import deque
from contextlib import contextmanager
from typing import Deque, Iterable, Iterator, Optional, Tuple

from ..errors import ReentrantAccessError
from .rule import Pair

# (ordinal of the source pair, value)
Entry = Tuple[int, int]


def flatten(bundle: Iterable[Pair]) -> Iterator[int]:
    """Concatenate the children of every pair in a bundle."""
    for _, children in bundle:
        yield from children


class BundleReader:
    """Flattening reader over one bundle, with bounded look-ahead.

    Internal queues:
    - prepared: values returned by prepare() that the next consume()
      calls must return first
    - passed_unprepared: values returned by consume() that nobody had
      prepared; reclaim_unprepared() and prepare() hand them out again

    At most one of the two queues is non-empty at any time.
    """

    def __init__(self, bundle: Iterable[Pair]):
        """Initialize reader over a bundle.

        Args:
            bundle: Lazy sequence of (parent, children) pairs
        """
        self._bundle = iter(bundle)
        self._buffer: Iterator[int] = iter(())
        self._prepared: Deque[Entry] = deque()
        self._passed_unprepared: Deque[Entry] = deque()
        self._bundle_done = False
        self._buffer_done = True
        self.pairs_pulled = 0
        self.current_parent: Optional[int] = None
        self.last_ordinal: Optional[int] = None

    @property
    def exhausted(self) -> bool:
        """True once every value of the bundle has been read and returned."""
        return (self._bundle_done and self._buffer_done
                and not self._prepared and not self._passed_unprepared)

    @property
    def prepared_count(self) -> int:
        return len(self._prepared)

    @property
    def unprepared_count(self) -> int:
        return len(self._passed_unprepared)

    def consume(self) -> Optional[int]:
        """Return the next value of the flattened bundle.

        Prepared values come first. Otherwise the value is read from the
        current children and recorded as passed unprepared, advancing to
        the next pair as often as needed to find one.

        Returns:
            Next value, or None once the bundle is exhausted
        """
        if self._prepared:
            return self._hand_out(self._prepared.popleft())

        while True:
            value = self._read_buffer()
            if value is not None:
                entry = (self.pairs_pulled - 1, value)
                self._passed_unprepared.append(entry)
                return self._hand_out(entry)
            if not self._advance():
                return None

    def reclaim_unprepared(self) -> Optional[int]:
        """Pop the oldest passed-unprepared value.

        Never reads from the bundle or the current children.

        Returns:
            Oldest passed-unprepared value, or None if there is none
        """
        if self._passed_unprepared:
            return self._hand_out(self._passed_unprepared.popleft())
        return None

    def prepare(self, pull_limit: Optional[int] = None) -> Optional[int]:
        """Look at the next value without passing it downstream.

        A passed-unprepared value is returned first; it was already
        consumed, so it is not queued again. A value read from the
        current children is queued as prepared, guaranteeing the next
        consume() returns it.

        Args:
            pull_limit: How many new pairs this call may pull from the
                bundle (None means no limit)

        Returns:
            The value, or None if none is available within the limit
        """
        if self._passed_unprepared:
            return self._hand_out(self._passed_unprepared.popleft())

        budget = pull_limit
        while True:
            value = self._read_buffer()
            if value is not None:
                entry = (self.pairs_pulled - 1, value)
                self._prepared.append(entry)
                return self._hand_out(entry)
            if budget is not None:
                if budget <= 0:
                    return None
                budget -= 1
            if not self._advance():
                return None

    def close(self) -> None:
        """Close the underlying bundle if it is a generator."""
        close = getattr(self._bundle, 'close', None)
        if close is not None:
            close()
        self._bundle_done = True
        self._buffer = iter(())
        self._buffer_done = True

    def _hand_out(self, entry: Entry) -> int:
        self.last_ordinal = entry[0]
        return entry[1]

    def _read_buffer(self) -> Optional[int]:
        if self._buffer_done:
            return None
        value = next(self._buffer, None)
        if value is None:
            self._buffer_done = True
        return value

    def _advance(self) -> bool:
        if self._bundle_done:
            return False
        try:
            parent, children = next(self._bundle)
        except StopIteration:
            self._bundle_done = True
            return False
        self.current_parent = parent
        self._buffer = iter(children)
        self._buffer_done = False
        self.pairs_pulled += 1
        return True

    def __iter__(self) -> Iterator[int]:
        return self

    def __next__(self) -> int:
        value = self.consume()
        if value is None:
            raise StopIteration
        return value

    def __repr__(self) -> str:
        return (f"{self.__class__.__name__}(pairs_pulled={self.pairs_pulled}, "
                f"prepared={len(self._prepared)}, "
                f"unprepared={len(self._passed_unprepared)})")


class _Cell:
    """State shared by every handle of one SharedBundleReader."""

    __slots__ = ('reader', 'handles', 'busy')

    def __init__(self, reader: BundleReader):
        self.reader = reader
        self.handles = 1
        self.busy = False


class SharedBundleReader:
    """Reference-counted handle to a single BundleReader.

    All clones observe the same queues and buffer position. Handles may
    be used in any order, but never reentrantly: an operation that starts
    while another one on the same reader is still running raises
    ReentrantAccessError. This is a misuse detector, not a lock; there is
    no parallelism to protect against.
    """

    def __init__(self, bundle: Optional[Iterable[Pair]] = None, *, _cell: Optional[_Cell] = None):
        """Create a new reader over ``bundle``.

        Args:
            bundle: Lazy sequence of (parent, children) pairs
        """
        if _cell is None:
            if bundle is None:
                raise TypeError("SharedBundleReader needs a bundle")
            _cell = _Cell(BundleReader(bundle))
        self._cell = _cell
        self._released = False

    def clone(self) -> 'SharedBundleReader':
        """Return another handle over the same reader state."""
        self._cell.handles += 1
        return SharedBundleReader(_cell=self._cell)

    def release(self) -> None:
        """Drop this handle. Releasing twice is a no-op."""
        if not self._released:
            self._released = True
            self._cell.handles -= 1

    @property
    def share_count(self) -> int:
        """Number of live handles over the shared reader."""
        return self._cell.handles

    @property
    def last_ordinal(self) -> Optional[int]:
        return self._cell.reader.last_ordinal

    @property
    def exhausted(self) -> bool:
        return self._cell.reader.exhausted

    @property
    def reader(self) -> BundleReader:
        """The underlying BundleReader (for inspection only)."""
        return self._cell.reader

    def shares_state_with(self, other: 'SharedBundleReader') -> bool:
        return self._cell is other._cell

    @contextmanager
    def _borrow(self):
        cell = self._cell
        if cell.busy:
            raise ReentrantAccessError(
                "SharedBundleReader entered while another operation on it is in progress"
            )
        cell.busy = True
        try:
            yield cell.reader
        finally:
            cell.busy = False

    def consume(self) -> Optional[int]:
        with self._borrow() as reader:
            return reader.consume()

    def reclaim_unprepared(self) -> Optional[int]:
        with self._borrow() as reader:
            return reader.reclaim_unprepared()

    def prepare(self, pull_limit: Optional[int] = None) -> Optional[int]:
        with self._borrow() as reader:
            return reader.prepare(pull_limit)

    def close(self) -> None:
        with self._borrow() as reader:
            reader.close()

    def drain(self) -> Iterator[int]:
        """Read view over this reader for the next level's generation.

        The view holds its own handle, released when the view finishes
        or is closed.
        """
        return self._drain(self.clone())

    @staticmethod
    def _drain(handle: 'SharedBundleReader') -> Iterator[int]:
        try:
            while True:
                value = handle.consume()
                if value is None:
                    return
                yield value
        finally:
            handle.release()

    def __iter__(self) -> Iterator[int]:
        return self

    def __next__(self) -> int:
        value = self.consume()
        if value is None:
            raise StopIteration
        return value

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({self._cell.reader!r}, shares={self._cell.handles})"
