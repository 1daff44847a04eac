"""
Configuration for source wrapping.

This module manages the process-wide settings that control how plain
iterables are turned into double-ended sources.
"""

from __future__ import annotations

import os
import threading

_TRUTHY = frozenset({"1", "true", "yes", "on"})
_FALSY = frozenset({"0", "false", "no", "off"})


def _env_flag(name: str, default: bool) -> bool:
    value = os.environ.get(name)
    if value is None:
        return default
    value = value.strip().lower()
    if value in _TRUTHY:
        return True
    if value in _FALSY:
        return False
    return default


class RunIterConfig:
    """
    Global configuration for source wrapping.

    Settings are read lazily from the environment the first time they are
    needed and can be overridden at runtime.
    """

    _instance: RunIterConfig | None = None
    _lock = threading.Lock()

    def __init__(self):
        self._materialize_iterables: bool | None = None
        self._warn_on_materialize: bool | None = None

    @classmethod
    def global_config(cls) -> RunIterConfig:
        """Get the global configuration instance."""
        if cls._instance is None:
            with cls._lock:
                if cls._instance is None:
                    cls._instance = RunIterConfig()
        return cls._instance

    @property
    def materialize_iterables(self) -> bool:
        """
        Whether forward-only iterables are copied into a list.

        A materialized iterable supports pulling from the back, at the cost
        of reading it to the end up front. Off by default, so infinite
        iterators stay usable from the front.
        """
        if self._materialize_iterables is None:
            self._materialize_iterables = _env_flag("RUNITER_MATERIALIZE", False)
        return self._materialize_iterables

    @materialize_iterables.setter
    def materialize_iterables(self, value: bool) -> None:
        """Set whether forward-only iterables are materialized."""
        if not isinstance(value, bool):
            raise TypeError(
                f"materialize_iterables must be a bool, got {type(value).__name__}"
            )
        with self._lock:
            self._materialize_iterables = value

    @property
    def warn_on_materialize(self) -> bool:
        """Whether materializing an iterable emits a ``RuntimeWarning``."""
        if self._warn_on_materialize is None:
            self._warn_on_materialize = _env_flag("RUNITER_WARN_MATERIALIZE", True)
        return self._warn_on_materialize

    @warn_on_materialize.setter
    def warn_on_materialize(self, value: bool) -> None:
        """Set whether materializing emits a warning."""
        if not isinstance(value, bool):
            raise TypeError(
                f"warn_on_materialize must be a bool, got {type(value).__name__}"
            )
        with self._lock:
            self._warn_on_materialize = value

    def reset(self) -> None:
        """Forget runtime overrides so settings are re-read from the environment."""
        with self._lock:
            self._materialize_iterables = None
            self._warn_on_materialize = None


# Global configuration instance
_global_config = RunIterConfig.global_config()


def set_materialize_iterables(enabled: bool) -> None:
    """
    Set whether forward-only iterables are materialized into a list.

    Args:
        enabled: True to copy plain iterables so they support ``next_back``

    Raises:
        TypeError: If enabled is not a bool

    Example:
        >>> from runiter import set_materialize_iterables
        >>> set_materialize_iterables(True)
    """
    _global_config.materialize_iterables = enabled


def get_materialize_iterables() -> bool:
    """
    Get whether forward-only iterables are materialized.

    Returns:
        The current setting
    """
    return _global_config.materialize_iterables
