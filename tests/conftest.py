"""Shared fixtures for runiter tests."""

from __future__ import annotations

import pytest

from runiter import RunIterConfig


@pytest.fixture(autouse=True)
def _reset_config(monkeypatch):
    """Isolate every test from the environment and from runtime overrides."""
    monkeypatch.delenv("RUNITER_MATERIALIZE", raising=False)
    monkeypatch.delenv("RUNITER_WARN_MATERIALIZE", raising=False)
    config = RunIterConfig.global_config()
    config.reset()
    yield
    config.reset()


class PartialEq:
    """Element whose equality only looks at ``key``; ``tag`` rides along."""

    def __init__(self, key, tag):
        self.key = key
        self.tag = tag

    def __eq__(self, other):
        if not isinstance(other, PartialEq):
            return NotImplemented
        return self.key == other.key

    def __repr__(self):
        return f"PartialEq({self.key!r}, {self.tag!r})"


@pytest.fixture
def tagged_runs():
    """Ten runs of ten elements; ``tag`` is the position inside the run."""
    return [PartialEq(i // 10, i % 10) for i in range(100)]


class FlakySource:
    """A double-ended source that resumes after signalling exhaustion.

    Yields ``items`` from the front, signals exhaustion once, then yields
    ``"resurrected"`` on every later pull from either end.
    """

    def __init__(self, items=()):
        self.items = list(items)
        self.calls = 0
        self.stopped = False

    def __iter__(self):
        return self

    def __next__(self):
        self.calls += 1
        if self.items:
            return self.items.pop(0)
        if not self.stopped:
            self.stopped = True
            raise StopIteration
        return "resurrected"

    def next_back(self):
        return next(self)
