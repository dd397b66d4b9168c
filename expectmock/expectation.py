"""Expectations: what a mocked method may be called with, and what it returns."""

from __future__ import annotations

import copy
import threading
from typing import Any, Callable

from .errors import MockError
from .predicate import Predicate
from .sequence import Sequence, SeqHandle
from .times import Times

_NO_RETURN = (
    "Returning default values requires a return value to be set with "
    "returning(), return_const(), return_once() or return_var()"
)


class Expectation:
    """One expected call pattern of a mocked method.

    Setter methods return the expectation itself so they can be chained.
    """

    def __init__(self, name: str = "") -> None:
        self._name = name
        self._predicates: tuple[Predicate, ...] | None = None
        self._matcher: Callable[..., Any] | None = None
        self._times = Times()
        self._returner: Callable[..., Any] | None = None
        self._once_used = False
        self._is_once = False
        self._seq: SeqHandle | None = None
        self._lock = threading.Lock()

    def __repr__(self) -> str:
        return self.description

    @property
    def name(self) -> str:
        return self._name

    @property
    def description(self) -> str:
        """A short text naming the argument matchers."""
        if self._predicates is not None:
            inner = ", ".join(str(p) for p in self._predicates)
        elif self._matcher is not None:
            inner = "<function>"
        else:
            inner = "<anything>"
        return f"Expectation({inner})"

    @property
    def call_count(self) -> int:
        return self._times.count

    def _fail(self, message: str) -> MockError:
        return MockError(f"{self._name}: {self.description} {message}")

    def with_(self, *args: Predicate) -> Expectation:
        """Match calls whose arguments satisfy these predicates, in order."""
        self._predicates = tuple(args)
        self._matcher = None
        return self

    def withf(self, func: Callable[..., Any]) -> Expectation:
        """Match calls for which ``func(*args)`` is true."""
        self._matcher = func
        self._predicates = None
        return self

    def times(self, spec) -> Expectation:
        """Set how many calls are allowed; see TimesRange.from_spec."""
        self._times.times(spec)
        return self

    def never(self) -> Expectation:
        """Forbid any call."""
        self._times.never()
        return self

    def returning(self, func: Callable[..., Any]) -> Expectation:
        """Compute each return value by calling ``func`` with the arguments."""
        self._returner = func
        self._is_once = False
        return self

    def return_const(self, value) -> Expectation:
        """Return a fresh shallow copy of ``value`` on every call."""
        self._returner = lambda *_args: copy.copy(value)
        self._is_once = False
        return self

    def return_once(self, func: Callable[..., Any]) -> Expectation:
        """Compute the return value once; a second call is an error."""
        self._returner = func
        self._is_once = True
        self._once_used = False
        return self

    def return_var(self, value) -> Expectation:
        """Return the very same object on every call, so changes persist."""
        self._returner = lambda *_args: value
        self._is_once = False
        return self

    def in_sequence(self, sequence: Sequence) -> Expectation:
        """Require this expectation's calls to happen in ``sequence`` order."""
        if not self._times.is_exact():
            raise MockError(
                "Only Expectations with an exact call count have sequences"
            )
        self._seq = sequence.next_handle()
        return self

    def matches(self, *args) -> bool:
        """Do these arguments satisfy the matchers?"""
        if self._predicates is not None:
            if len(self._predicates) != len(args):
                return False
            return all(p.eval(a) for p, a in zip(self._predicates, args))
        if self._matcher is not None:
            return bool(self._matcher(*args))
        return True

    def is_done(self) -> bool:
        return self._times.is_done()

    def call(self, *args):
        """Record a call and produce its return value."""
        try:
            self._times.call()
        except MockError as exc:
            raise self._fail(str(exc)) from None
        if self._seq is not None:
            self._seq.verify()
            if self._times.is_done():
                self._seq.satisfy()
        if self._returner is None:
            raise self._fail(_NO_RETURN)
        if self._is_once:
            with self._lock:
                if self._once_used:
                    raise self._fail("called twice, but it returns by move")
                self._once_used = True
        return self._returner(*args)

    def verify(self) -> None:
        """Raise MockError if the minimum call count was not reached."""
        if not self._times.is_satisfied():
            raise self._fail(
                f"called fewer than {self._times.minimum()} times"
            )


class Expectations:
    """All expectations set on one mocked method, matched in FIFO order."""

    def __init__(self, name: str = "") -> None:
        self._name = name
        self._items: list[Expectation] = []
        self._lock = threading.Lock()

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self):
        return iter(list(self._items))

    @property
    def name(self) -> str:
        return self._name

    def expect(self) -> Expectation:
        """Add and return a new expectation."""
        exp = Expectation(self._name)
        with self._lock:
            self._items.append(exp)
        return exp

    def call(self, *args):
        """Dispatch a call to the oldest matching expectation."""
        with self._lock:
            items = list(self._items)
        matching = [e for e in items if e.matches(*args)]
        if not matching:
            raise MockError(f"{self._name}: No matching expectation found")
        chosen = next((e for e in matching if not e.is_done()), matching[0])
        return chosen.call(*args)

    def checkpoint(self) -> None:
        """Verify every expectation, then discard them all."""
        with self._lock:
            items, self._items = self._items, []
        for exp in items:
            exp.verify()