"""
Core double-ended iterator implementations.

This module contains the DoubleEndedIter base class, which adds Rust-style
adapters and terminal operations on top of the Python iterator protocol,
plus the generic adapters (rev, map, filter) built on it.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Callable
from typing import TYPE_CHECKING, Any, TypeVar

if TYPE_CHECKING:
    from .rle import RunLengthDecode, RunLengthEncode

T = TypeVar("T")
U = TypeVar("U")
R = TypeVar("R")


class DoubleEndedIter[T](ABC):
    """
    Base class for iterators that can be pulled from both ends.

    Pulling from the front is ``next(it)``; pulling from the back is
    ``it.next_back()``. The two cursors consume the same underlying
    elements, so once they meet both ends are exhausted.
    """

    def __iter__(self) -> DoubleEndedIter[T]:
        return self

    @abstractmethod
    def __next__(self) -> T:
        """
        Remove and return the next element from the front.

        Raises:
            StopIteration: When no elements remain
        """
        ...

    @abstractmethod
    def next_back(self) -> T:
        """
        Remove and return the next element from the back.

        Raises:
            StopIteration: When no elements remain
        """
        ...

    def __reversed__(self) -> Rev[T]:
        return Rev(self)

    def rev(self) -> Rev[T]:
        """
        Reverse the direction of iteration.

        Returns:
            An iterator whose front is this iterator's back
        """
        return Rev(self)

    def map(self, func: Callable[[T], U]) -> DoubleEndedIter[U]:
        """
        Apply a function to each element, from whichever end is pulled.

        Args:
            func: Function to apply to each element

        Returns:
            A new double-ended iterator of transformed elements
        """
        return MapIter(self, func)

    def filter(self, predicate: Callable[[T], bool]) -> DoubleEndedIter[T]:
        """
        Keep only the elements matching a predicate.

        Args:
            predicate: Function that returns True for elements to keep

        Returns:
            A new double-ended iterator of filtered elements
        """
        return FilterIter(self, predicate)

    def run_length_encode(self) -> RunLengthEncode[T]:
        """
        Group consecutive equal elements into ``(count, item)`` pairs.

        Returns:
            A double-ended iterator of RunPair values
        """
        from .rle import RunLengthEncode

        return RunLengthEncode(self)

    def run_length_decode(self) -> RunLengthDecode[Any]:
        """
        Expand ``(count, item)`` pairs back into repeated items.

        Returns:
            A double-ended iterator of items
        """
        from .rle import RunLengthDecode

        return RunLengthDecode(self)

    def collect(self) -> list[T]:
        """
        Drain the iterator from the front into a list.

        Returns:
            A list of the remaining elements in front-to-back order
        """
        return list(self)

    def collect_back(self) -> list[T]:
        """
        Drain the iterator from the back into a list.

        Returns:
            A list of the remaining elements in back-to-front order
        """
        return list(Rev(self))

    def count(self) -> int:
        """
        Count the remaining elements, consuming them from the front.

        Returns:
            The number of elements
        """
        count = 0
        for _ in self:
            count += 1
        return count

    def fold(self, init: R, fold_op: Callable[[R, T], R]) -> R:
        """
        Fold every remaining element into an accumulator.

        Args:
            init: Initial accumulator value
            fold_op: Function combining the accumulator with an element

        Returns:
            The final accumulator
        """
        accumulator = init
        for item in self:
            accumulator = fold_op(accumulator, item)
        return accumulator

    def sum(self, start: Any = 0) -> Any:
        """Sum the remaining elements."""
        return sum(self, start)

    def last(self) -> T | None:
        """
        Consume the iterator from the front and return its final element.

        Returns:
            The last element, or None if the iterator is empty
        """
        last = None
        for item in self:
            last = item
        return last

    def min(self, key: Callable[[T], Any] | None = None) -> T | None:
        """
        Find the minimum element.

        When several elements are equally minimal, the first is returned.

        Args:
            key: Optional key function for comparison

        Returns:
            The minimum element, or None if the iterator is empty
        """
        best = None
        best_key = None
        found = False
        for item in self:
            item_key = item if key is None else key(item)
            if not found or item_key < best_key:
                best, best_key, found = item, item_key, True
        return best

    def max(self, key: Callable[[T], Any] | None = None) -> T | None:
        """
        Find the maximum element.

        When several elements are equally maximal, the last is returned.

        Args:
            key: Optional key function for comparison

        Returns:
            The maximum element, or None if the iterator is empty
        """
        best = None
        best_key = None
        found = False
        for item in self:
            item_key = item if key is None else key(item)
            if not found or item_key >= best_key:
                best, best_key, found = item, item_key, True
        return best

    def any(self, predicate: Callable[[T], bool] | None = None) -> bool:
        """
        Check if any element matches the predicate.

        Stops consuming at the first match.

        Args:
            predicate: Optional predicate function (defaults to bool)

        Returns:
            True if any element matches, False otherwise
        """
        if predicate is None:
            predicate = bool
        return any(predicate(item) for item in self)

    def all(self, predicate: Callable[[T], bool] | None = None) -> bool:
        """
        Check if all elements match the predicate.

        Stops consuming at the first mismatch.

        Args:
            predicate: Optional predicate function (defaults to bool)

        Returns:
            True if all elements match, False otherwise
        """
        if predicate is None:
            predicate = bool
        return all(predicate(item) for item in self)


# Concrete iterator adapters


class Rev[T](DoubleEndedIter[T]):
    """Double-ended iterator with its front and back swapped."""

    def __init__(self, base: DoubleEndedIter[T]):
        self.base = base

    def __next__(self) -> T:
        return self.base.next_back()

    def next_back(self) -> T:
        return next(self.base)


class MapIter[T, U](DoubleEndedIter[U]):
    """Double-ended iterator that maps a function over elements."""

    def __init__(self, base: DoubleEndedIter[T], func: Callable[[T], U]):
        self.base = base
        self.func = func

    def __next__(self) -> U:
        return self.func(next(self.base))

    def next_back(self) -> U:
        return self.func(self.base.next_back())


class FilterIter(DoubleEndedIter[T]):
    """Double-ended iterator that filters elements by a predicate."""

    def __init__(
        self, base: DoubleEndedIter[T], predicate: Callable[[T], bool]
    ):
        self.base = base
        self.predicate = predicate

    def __next__(self) -> T:
        while True:
            item = next(self.base)
            if self.predicate(item):
                return item

    def next_back(self) -> T:
        while True:
            item = self.base.next_back()
            if self.predicate(item):
                return item
