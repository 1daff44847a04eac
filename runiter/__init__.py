"""
runiter - Double-Ended Run-Length Iterators for Python

A lazy run-length encoding adapter that can be pulled from both ends,
designed after Rust's ``DoubleEndedIterator``.
"""

import logging

from .adapters import (
    IntoDoubleEndedIter,
    into_de_iter,
    run_length_decode,
    run_length_encode,
)
from .config import (
    RunIterConfig,
    get_materialize_iterables,
    set_materialize_iterables,
)
from .core import DoubleEndedIter
from .exceptions import BackwardIterationError
from .producers import ForwardProducer, Fuse, SequenceProducer
from .protocols import DoubleEndedIterator, SupportsEq
from .rle import RunLengthDecode, RunLengthEncode, RunPair

logging.getLogger(__name__).addHandler(logging.NullHandler())

__version__ = "0.1.0"

__all__ = [
    "DoubleEndedIter",
    "DoubleEndedIterator",
    "SupportsEq",
    "IntoDoubleEndedIter",
    "into_de_iter",
    "run_length_encode",
    "run_length_decode",
    "RunLengthEncode",
    "RunLengthDecode",
    "RunPair",
    "SequenceProducer",
    "ForwardProducer",
    "Fuse",
    "BackwardIterationError",
    "RunIterConfig",
    "set_materialize_iterables",
    "get_materialize_iterables",
]
