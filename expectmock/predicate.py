"""Argument matchers for expectations."""

from __future__ import annotations

import operator
from typing import Any, Callable


class Predicate:
    """A named test on a single value.

    Predicates combine with ``&``, ``|`` and ``~``.  Their string form
    describes them and appears in error messages.
    """

    def __init__(self, func: Callable[[Any], Any], description: str) -> None:
        self._func = func
        self._description = description

    def eval(self, value) -> bool:
        """Does ``value`` satisfy this predicate?"""
        return bool(self._func(value))

    def __call__(self, value) -> bool:
        return self.eval(value)

    def __str__(self) -> str:
        return self._description

    def __repr__(self) -> str:
        return f"Predicate({self._description})"

    def __and__(self, other: Predicate) -> Predicate:
        return Predicate(
            lambda v: self.eval(v) and other.eval(v), f"({self} && {other})"
        )

    def __or__(self, other: Predicate) -> Predicate:
        return Predicate(
            lambda v: self.eval(v) or other.eval(v), f"({self} || {other})"
        )

    def __invert__(self) -> Predicate:
        return Predicate(lambda v: not self.eval(v), f"(! {self})")


def _compare(op: Callable[[Any, Any], bool], symbol: str, constant) -> Predicate:
    return Predicate(lambda v: op(v, constant), f"var {symbol} {constant!r}")


def eq(value) -> Predicate:
    """Match values equal to ``value``."""
    return _compare(operator.eq, "==", value)


def ne(value) -> Predicate:
    """Match values not equal to ``value``."""
    return _compare(operator.ne, "!=", value)


def lt(value) -> Predicate:
    """Match values less than ``value``."""
    return _compare(operator.lt, "<", value)


def le(value) -> Predicate:
    """Match values less than or equal to ``value``."""
    return _compare(operator.le, "<=", value)


def gt(value) -> Predicate:
    """Match values greater than ``value``."""
    return _compare(operator.gt, ">", value)


def ge(value) -> Predicate:
    """Match values greater than or equal to ``value``."""
    return _compare(operator.ge, ">=", value)


def always() -> Predicate:
    """Match every value."""
    return Predicate(lambda _v: True, "true")


def never() -> Predicate:
    """Match no value."""
    return Predicate(lambda _v: False, "false")


def function(func: Callable[[Any], Any]) -> Predicate:
    """Match values for which ``func`` returns a true value."""
    return Predicate(func, "fn(var)")