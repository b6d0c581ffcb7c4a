"""Shared test fixtures for all emitbus tests."""

from typing import Any

import pytest

from emitbus import EventEmitter


class Recorder:
    """Callable listener that remembers every payload it receives.

    When *journal* is given, ``(tag, payload)`` pairs are appended to it so
    several recorders can share one ordered log.
    """

    def __init__(self, tag: str = "rec", journal: list | None = None) -> None:
        self.tag = tag
        self.calls: list[Any] = []
        self.journal = journal

    def __call__(self, payload: Any) -> None:
        self.calls.append(payload)
        if self.journal is not None:
            self.journal.append((self.tag, payload))


@pytest.fixture
def bus() -> EventEmitter:
    """Fresh emitter with default settings."""
    return EventEmitter()


@pytest.fixture
def journal() -> list:
    """Shared call log for ordering assertions."""
    return []
