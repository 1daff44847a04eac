"""Exceptions raised by the source-wrapping layer."""


class BackwardIterationError(TypeError):
    """
    Raised when a forward-only source is pulled from the back.

    Subclasses ``TypeError`` because the source type, not its contents,
    lacks the capability.
    """
