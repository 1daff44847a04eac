"""
Core protocol definitions for double-ended iterators.

These protocols describe what the run-length adapters need from their
sources, following the shape of Rust's ``DoubleEndedIterator`` trait.
"""

from __future__ import annotations

from abc import abstractmethod
from collections.abc import Iterator
from typing import Any, Protocol, TypeVar, runtime_checkable

T_co = TypeVar("T_co", covariant=True)  # Covariant, sources are output only


@runtime_checkable
class DoubleEndedIterator(Protocol[T_co]):
    """
    An iterator that can also be pulled from the back.

    Pulling from the front uses the normal iterator protocol (``next()``).
    Pulling from the back uses ``next_back()``. Both raise ``StopIteration``
    once no elements remain between the two cursors.
    """

    def __iter__(self) -> Iterator[T_co]: ...

    @abstractmethod
    def __next__(self) -> T_co:
        """Remove and return the element at the front."""
        ...

    @abstractmethod
    def next_back(self) -> T_co:
        """
        Remove and return the element at the back.

        Raises:
            StopIteration: If the front and back cursors have met
        """
        ...


class SupportsEq(Protocol):
    """
    An element type that can be compared for equality.

    Run membership is decided with ``==`` alone; no ordering, hashing or
    copying is required from elements.
    """

    def __eq__(self, other: Any, /) -> bool: ...
