"""Ordering constraints that span expectations and mock objects."""

from __future__ import annotations

import threading

from .errors import SequenceError


class _SequenceState:
    """Shared state of one sequence: how many of its steps are satisfied."""

    def __init__(self) -> None:
        self._level = 0
        self._lock = threading.Lock()

    @property
    def level(self) -> int:
        return self._level

    def satisfy(self, position: int) -> None:
        with self._lock:
            old = self._level
            self._level += 1
        if old != position:
            raise SequenceError(
                "Method sequence violation.  Was an already-satisfied method "
                "called another time?"
            )

    def verify(self, position: int) -> None:
        if position != self._level:
            raise SequenceError("Method sequence violation")


class SeqHandle:
    """One expectation's place within a Sequence."""

    def __init__(self, state: _SequenceState, position: int) -> None:
        self._state = state
        self._position = position

    def __repr__(self) -> str:
        return f"SeqHandle(position={self._position})"

    @property
    def position(self) -> int:
        """The zero-based position of this handle in its sequence."""
        return self._position

    def satisfy(self) -> None:
        """Tell the sequence that this step has been fully satisfied."""
        self._state.satisfy(self._position)

    def verify(self) -> None:
        """Raise SequenceError unless every earlier step is satisfied."""
        self._state.verify(self._position)


class Sequence:
    """Enforces that mock calls happen in the order they were added.

    Each expectation in a sequence must expect an exact number of calls.
    Once it is satisfied, the next expectation in the sequence may be called.
    Expectations from different mock objects may share a sequence.
    """

    def __init__(self) -> None:
        self._state = _SequenceState()
        self._next_position = 0

    def __repr__(self) -> str:
        return (
            f"Sequence(length={self._next_position}, "
            f"satisfied={self._state.level})"
        )

    def __len__(self) -> int:
        return self._next_position

    def next_handle(self) -> SeqHandle:
        """Reserve the next position in the sequence."""
        handle = SeqHandle(self._state, self._next_position)
        self._next_position += 1
        return handle