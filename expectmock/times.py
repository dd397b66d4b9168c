"""Call-count bookkeeping for expectations."""

from __future__ import annotations

import sys
import threading
from dataclasses import dataclass

from .errors import MockError

# Not strictly infinite, but no test will ever call a mock this often.
UNBOUNDED = sys.maxsize


@dataclass(frozen=True)
class TimesRange:
    """A half-open range ``[start, end)`` of allowed call counts."""

    start: int = 0
    end: int = UNBOUNDED

    def __post_init__(self) -> None:
        if self.start < 0 or self.end < 0:
            raise ValueError("Call counts may not be negative")

    @classmethod
    def full(cls) -> TimesRange:
        """Allow any number of calls."""
        return cls(0, UNBOUNDED)

    @classmethod
    def from_spec(cls, spec) -> TimesRange:
        """Build a range from a call-count specification.

        Accepted forms:

        * ``n`` -- exactly ``n`` calls;
        * ``range(a, b)`` or ``slice(a, b)`` -- at least ``a``, fewer than ``b``;
        * ``slice(a, None)`` -- at least ``a``;
        * ``slice(None, b)`` -- fewer than ``b``;
        * ``(a, b)`` -- at least ``a``, at most ``b``;
        * ``...`` or ``slice(None)`` -- any number;
        * an existing ``TimesRange``.
        """
        if isinstance(spec, TimesRange):
            return spec
        if spec is Ellipsis:
            return cls.full()
        if isinstance(spec, bool):
            raise TypeError("A call count must be an integer, not a bool")
        if isinstance(spec, int):
            return cls(spec, spec + 1)
        if isinstance(spec, range):
            if spec.step != 1:
                raise ValueError("Call-count ranges must have a step of 1")
            if spec.stop <= spec.start:
                raise ValueError("Backwards range")
            return cls(spec.start, spec.stop)
        if isinstance(spec, slice):
            if spec.step not in (None, 1):
                raise ValueError("Call-count ranges must have a step of 1")
            if spec.start is None and spec.stop is None:
                return cls.full()
            if spec.start is None:
                return cls(0, spec.stop)
            if spec.stop is None:
                return cls(spec.start, UNBOUNDED)
            if spec.stop <= spec.start:
                raise ValueError("Backwards range")
            return cls(spec.start, spec.stop)
        if isinstance(spec, tuple) and len(spec) == 2:
            low, high = spec
            if high < low:
                raise ValueError("Backwards range")
            return cls(low, high + 1)
        raise TypeError(f"Unsupported call-count specification: {spec!r}")


class Times:
    """Counts calls to an expectation and checks them against a range."""

    def __init__(self, spec=None) -> None:
        self._range = TimesRange.full() if spec is None else TimesRange.from_spec(spec)
        self._count = 0
        self._lock = threading.Lock()

    def __repr__(self) -> str:
        return f"Times(count={self._count}, range={self._range!r})"

    @property
    def count(self) -> int:
        """How many times the expectation has been called."""
        return self._count

    @property
    def bounds(self) -> TimesRange:
        """The allowed range of call counts."""
        return self._range

    def call(self) -> None:
        """Record one call; raise MockError if that exceeds the maximum."""
        with self._lock:
            self._count += 1
            count = self._count
        end = self._range.end
        if count >= end:
            if end == 1:
                raise MockError("should not have been called")
            raise MockError(f"called more than {end - 1} times")

    def any(self) -> None:
        """Allow any number of calls."""
        self._range = TimesRange.full()

    def is_done(self) -> bool:
        """Has the maximum allowed number of calls been reached?"""
        return self._count >= self._range.end - 1

    def is_exact(self) -> bool:
        """Is exactly one call count allowed?"""
        return self._range.end - self._range.start == 1

    def is_satisfied(self) -> bool:
        """Has the minimum required number of calls been reached?"""
        return self._count >= self._range.start

    def minimum(self) -> int:
        """The minimum number of calls required."""
        return self._range.start

    def n(self, n: int) -> None:
        """Require exactly ``n`` calls."""
        self._range = TimesRange(n, n + 1)

    def never(self) -> None:
        """Forbid any call."""
        self._range = TimesRange(0, 1)

    def range(self, start: int, end: int) -> None:
        """Require at least ``start`` and fewer than ``end`` calls."""
        if end <= start:
            raise ValueError("Backwards range")
        self._range = TimesRange(start, end)

    def times(self, spec) -> None:
        """Set the allowed calls from any form TimesRange.from_spec accepts."""
        self._range = TimesRange.from_spec(spec)