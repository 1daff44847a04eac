"""
Run-length adapters over double-ended sources.

RunLengthEncode groups consecutive equal elements into ``(count, item)``
pairs and can be pulled from both ends in any interleaving. Each end keeps
at most one pending run; when the source runs dry the two pending runs are
reconciled, so a run that was approached from both ends is still emitted
exactly once.

RunLengthDecode is the inverse: it expands pairs back into items, again
from either end.
"""

from __future__ import annotations

import logging
import operator
from collections.abc import Callable
from typing import Any, NamedTuple, TypeVar

from .core import DoubleEndedIter
from .producers import Fuse
from .protocols import DoubleEndedIterator, SupportsEq

logger = logging.getLogger(__name__)

T = TypeVar("T")


class RunPair[T](NamedTuple):
    """
    One run of equal elements.

    ``item`` is the first element of the run seen from the end it was
    emitted from: the earliest element for front pulls, the latest for back
    pulls. With an ``__eq__`` that ignores some fields, this decides which
    occurrence the caller gets back.
    """

    count: int
    item: T


class _PendingRun[T]:
    """A run still being accumulated (encode) or expanded (decode)."""

    __slots__ = ("item", "count")

    def __init__(self, item: T, count: int = 1):
        self.item = item
        self.count = count

    def __repr__(self) -> str:
        return f"_PendingRun(item={self.item!r}, count={self.count})"


class _Direction:
    """
    Which end of the source a pull works on.

    ``own`` indexes this end's pending slot and ``other`` the opposite one.
    """

    __slots__ = ("name", "own", "other", "pull")

    def __init__(
        self,
        name: str,
        own: int,
        other: int,
        pull: Callable[[DoubleEndedIterator[Any]], Any],
    ):
        self.name = name
        self.own = own
        self.other = other
        self.pull = pull

    def __repr__(self) -> str:
        return f"<{self.name}>"


_FRONT = _Direction("front", 0, 1, next)
_BACK = _Direction("back", 1, 0, operator.methodcaller("next_back"))


def _fused(source: DoubleEndedIterator[T]) -> Fuse[T]:
    return source if isinstance(source, Fuse) else Fuse(source)


class RunLengthEncode[T: SupportsEq](DoubleEndedIter[RunPair[T]]):
    """
    Lazy run-length encoder that can be pulled from both ends.

    Pulling from the front yields runs in source order, each represented by
    its first element. Pulling from the back yields runs in reverse order,
    each represented by its last element. Interleaved pulls converge on the
    same set of runs; the run where the cursors meet is emitted once, by
    whichever end asks first, with that end's representative.

    Example:
        >>> from runiter import run_length_encode
        >>> rle = run_length_encode("aaabcc")
        >>> next(rle), rle.next_back(), next(rle)
        (RunPair(count=3, item='a'), RunPair(count=2, item='c'), RunPair(count=1, item='b'))
    """

    def __init__(self, source: DoubleEndedIterator[T]):
        """
        Create an encoder over a double-ended source.

        Args:
            source: The source to encode; wrapped in Fuse unless it already is
        """
        self.source = _fused(source)
        self._pending: list[_PendingRun[T] | None] = [None, None]

    def __repr__(self) -> str:
        front, back = self._pending
        return f"RunLengthEncode(front={front!r}, back={back!r})"

    def __next__(self) -> RunPair[T]:
        return self._advance(_FRONT)

    def next_back(self) -> RunPair[T]:
        return self._advance(_BACK)

    def pull_front(self) -> RunPair[T] | None:
        """
        Pull the next run from the front.

        Returns:
            The next RunPair, or None once the encoder is exhausted
        """
        try:
            return self._advance(_FRONT)
        except StopIteration:
            return None

    def pull_back(self) -> RunPair[T] | None:
        """
        Pull the next run from the back.

        Returns:
            The next RunPair, or None once the encoder is exhausted
        """
        try:
            return self._advance(_BACK)
        except StopIteration:
            return None

    def _advance(self, direction: _Direction) -> RunPair[T]:
        pending = self._pending
        while True:
            try:
                item = direction.pull(self.source)
            except StopIteration:
                return self._drain(direction)

            run = pending[direction.own]
            if run is None:
                pending[direction.own] = _PendingRun(item)
            elif item == run.item:
                run.count += 1
            else:
                pending[direction.own] = _PendingRun(item)
                return RunPair(run.count, run.item)

    def _drain(self, direction: _Direction) -> RunPair[T]:
        """Emit pending state once the source is exhausted."""
        pending = self._pending
        run = pending[direction.own]
        other = pending[direction.other]

        if run is None:
            # Nothing left on this side; the other side's tail is the last run.
            if other is None:
                raise StopIteration
            pending[direction.other] = None
            return RunPair(other.count, other.item)

        pending[direction.own] = None
        if other is not None:
            front, back = (run, other) if direction is _FRONT else (other, run)
            if front.item == back.item:
                pending[direction.other] = None
                logger.debug(
                    "Merged front run of %d and back run of %d on %s pull",
                    front.count,
                    back.count,
                    direction.name,
                )
                return RunPair(run.count + other.count, run.item)
        return RunPair(run.count, run.item)


class RunLengthDecode[T](DoubleEndedIter[T]):
    """
    Expands ``(count, item)`` pairs into ``count`` copies of ``item``.

    Can be pulled from both ends. When the source of pairs is exhausted, a
    pull continues from the run the other end has partially expanded.
    """

    def __init__(self, source: DoubleEndedIterator[tuple[int, T]]):
        """
        Create a decoder over a double-ended source of pairs.

        Args:
            source: Source of ``(count, item)`` pairs, such as RunPair values
        """
        self.source = _fused(source)
        self._pending: list[_PendingRun[T] | None] = [None, None]

    def __next__(self) -> T:
        return self._advance(_FRONT)

    def next_back(self) -> T:
        return self._advance(_BACK)

    def _advance(self, direction: _Direction) -> T:
        pending = self._pending
        while True:
            run = pending[direction.own]
            if run is not None and run.count > 0:
                run.count -= 1
                return run.item
            pending[direction.own] = None

            try:
                count, item = direction.pull(self.source)
            except StopIteration:
                other = pending[direction.other]
                if other is None or other.count == 0:
                    raise
                other.count -= 1
                return other.item

            if count < 1:
                raise ValueError(f"Run count must be at least 1, got {count}")
            pending[direction.own] = _PendingRun(item, count)
