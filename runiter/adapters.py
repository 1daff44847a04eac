"""
Adapters for converting standard Python objects into double-ended iterators.

This module provides the ergonomic interface for creating run-length
encoders and decoders from common Python data structures.
"""

from __future__ import annotations

import logging
import warnings
from collections.abc import Iterable, Sequence
from typing import Any, TypeVar

from .config import RunIterConfig
from .core import DoubleEndedIter
from .producers import ForwardProducer, Fuse, SequenceProducer
from .protocols import DoubleEndedIterator, SupportsEq
from .rle import RunLengthDecode, RunLengthEncode

logger = logging.getLogger(__name__)

T = TypeVar("T")


class IntoDoubleEndedIter(DoubleEndedIter[T]):
    """
    Generic double-ended iterator created from a producer.

    This wraps a producer and provides all double-ended iterator operations.
    """

    def __init__(self, producer: DoubleEndedIterator[T]):
        """
        Create a double-ended iterator from a producer.

        Args:
            producer: The producer to wrap
        """
        self.producer = producer

    def __next__(self) -> T:
        return next(self.producer)

    def next_back(self) -> T:
        return self.producer.next_back()


def _materialize(data: Iterable[T]) -> list[T]:
    config = RunIterConfig.global_config()
    if config.warn_on_materialize:
        warnings.warn(
            f"Materializing {type(data).__name__} into a list so it can be "
            "pulled from the back; pass a sequence to avoid the copy.",
            RuntimeWarning,
            stacklevel=3,
        )
    materialized = list(data)
    logger.debug(
        "Materialized %s into a list of %d elements",
        type(data).__name__,
        len(materialized),
    )
    return materialized


def into_de_iter[T](data: Iterable[T]) -> DoubleEndedIter[T]:
    """
    Convert an iterable into a double-ended iterator.

    Sequences are traversed in place from both ends. Objects that already
    implement ``next_back`` are fused and used as-is. Any other iterable is
    front-only unless ``materialize_iterables`` is enabled, in which case it
    is copied into a list first.

    Args:
        data: Any iterable (str, list, tuple, range, iterator, ...)

    Returns:
        A double-ended iterator over the data

    Raises:
        TypeError: If data is not iterable

    Example:
        >>> from runiter import into_de_iter
        >>> into_de_iter([1, 2, 3]).rev().collect()
        [3, 2, 1]
    """
    if isinstance(data, DoubleEndedIter):
        return data
    elif isinstance(data, DoubleEndedIterator):
        return IntoDoubleEndedIter(Fuse(data))
    elif isinstance(data, Sequence):
        return IntoDoubleEndedIter(SequenceProducer(data))
    elif isinstance(data, Iterable):
        if RunIterConfig.global_config().materialize_iterables:
            return IntoDoubleEndedIter(SequenceProducer(_materialize(data)))
        return IntoDoubleEndedIter(ForwardProducer(data))
    else:
        raise TypeError(f"{type(data).__name__!r} object is not iterable")


def run_length_encode[T: SupportsEq](data: Iterable[T]) -> RunLengthEncode[T]:
    """
    Run-length encode an iterable.

    Args:
        data: Any iterable accepted by into_de_iter

    Returns:
        A RunLengthEncode iterator of ``(count, item)`` pairs

    Example:
        >>> from runiter import run_length_encode
        >>> run_length_encode("122333").collect()
        [RunPair(count=1, item='1'), RunPair(count=2, item='2'), RunPair(count=3, item='3')]
    """
    return RunLengthEncode(into_de_iter(data))


def run_length_decode(pairs: Iterable[tuple[int, Any]]) -> RunLengthDecode[Any]:
    """
    Expand ``(count, item)`` pairs back into items.

    Args:
        pairs: Any iterable of pairs accepted by into_de_iter

    Returns:
        A RunLengthDecode iterator of items

    Example:
        >>> from runiter import run_length_decode
        >>> "".join(run_length_decode([(2, "a"), (1, "b")]))
        'aab'
    """
    return RunLengthDecode(into_de_iter(pairs))
