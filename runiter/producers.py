"""
Producer implementations for common data structures.

Producers turn data structures into double-ended sources that the
run-length adapters can pull from either end.
"""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from typing import TypeVar

from .exceptions import BackwardIterationError
from .protocols import DoubleEndedIterator

T = TypeVar("T")


class SequenceProducer[T]:
    """
    Producer for sequences (str, list, tuple, range, ...).

    Keeps a front index and a back index into the sequence and moves them
    toward each other. The sequence itself is never copied.
    """

    def __init__(
        self, data: Sequence[T], start: int = 0, end: int | None = None
    ):
        """
        Create a sequence producer.

        Args:
            data: The sequence to iterate over
            start: Starting index (inclusive)
            end: Ending index (exclusive), or None for end of sequence
        """
        self.data = data
        self.start = start
        self.end = end if end is not None else len(data)

        if self.start < 0 or self.start > len(data):
            raise ValueError(f"Invalid start index: {self.start}")
        if self.end < 0 or self.end > len(data):
            raise ValueError(f"Invalid end index: {self.end}")
        if self.start > self.end:
            raise ValueError(f"Start index {self.start} > end index {self.end}")

    def __len__(self) -> int:
        """Return the number of elements not yet pulled from either end."""
        return self.end - self.start

    def __iter__(self) -> SequenceProducer[T]:
        return self

    def __next__(self) -> T:
        if self.start >= self.end:
            raise StopIteration
        item = self.data[self.start]
        self.start += 1
        return item

    def next_back(self) -> T:
        if self.start >= self.end:
            raise StopIteration
        self.end -= 1
        return self.data[self.end]


class ForwardProducer[T]:
    """
    Producer for plain iterables that can only be pulled from the front.

    Works with infinite iterators. Pulling from the back raises
    BackwardIterationError.
    """

    def __init__(self, data: Iterable[T]):
        self.iterator = iter(data)

    def __iter__(self) -> ForwardProducer[T]:
        return self

    def __next__(self) -> T:
        return next(self.iterator)

    def next_back(self) -> T:
        raise BackwardIterationError(
            f"{type(self.iterator).__name__} can only be pulled from the front; "
            "pass a sequence or enable materialize_iterables to pull from the back"
        )


class Fuse[T]:
    """
    Producer that guarantees the fusing contract for another producer.

    Once either end of the wrapped source signals exhaustion, the source is
    dropped and every later pull from either end raises StopIteration.
    """

    def __init__(self, source: DoubleEndedIterator[T]):
        self.source: DoubleEndedIterator[T] | None = source

    @property
    def exhausted(self) -> bool:
        """True once the wrapped source has signalled exhaustion."""
        return self.source is None

    def __iter__(self) -> Fuse[T]:
        return self

    def __next__(self) -> T:
        if self.source is None:
            raise StopIteration
        try:
            return next(self.source)
        except StopIteration:
            self.source = None
            raise

    def next_back(self) -> T:
        if self.source is None:
            raise StopIteration
        try:
            return self.source.next_back()
        except StopIteration:
            self.source = None
            raise
