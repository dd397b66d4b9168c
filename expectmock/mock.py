"""Mock classes and functions built from an interface."""

from __future__ import annotations

import inspect
import types
from typing import Any, Callable

from .expectation import Expectation, Expectations


class Context:
    """Holds the expectations of a static method or free function.

    Closing the context, or leaving its ``with`` block, verifies and then
    discards every expectation.
    """

    def __init__(self, expectations: Expectations) -> None:
        self._expectations = expectations

    def __enter__(self) -> Context:
        return self

    def __exit__(self, *exc_info) -> None:
        if exc_info[0] is None:
            self.close()
        else:
            try:
                self.close()
            except AssertionError:
                pass

    def expect(self) -> Expectation:
        """Add a new expectation."""
        return self._expectations.expect()

    def checkpoint(self) -> None:
        """Verify every expectation, then discard them all."""
        self._expectations.checkpoint()

    def close(self) -> None:
        """Verify and discard every expectation."""
        self._expectations.checkpoint()


class Mock:
    """Base of generated mock classes; see automock."""

    _instance_methods: tuple[str, ...] = ()

    def __init__(self) -> None:
        cls_name = type(self).__name__
        self._expectations = {
            m: Expectations(f"{cls_name}::{m}") for m in self._instance_methods
        }

    def checkpoint(self) -> None:
        """Verify and discard the expectations of every instance method.

        Static methods are checkpointed through their contexts instead.
        """
        errors = []
        for exps in self._expectations.values():
            try:
                exps.checkpoint()
            except AssertionError as exc:
                errors.append(exc)
        if errors:
            raise errors[0]


def _instance_method(name: str) -> Callable[..., Any]:
    def method(self, *args):
        return self._expectations[name].call(*args)

    method.__name__ = name
    return method


def _expect_method(name: str) -> Callable[..., Expectation]:
    def expect(self) -> Expectation:
        return self._expectations[name].expect()

    expect.__name__ = f"expect_{name}"
    return expect


def _static_pair(exps: Expectations, name: str):
    def static(*args):
        return exps.call(*args)

    static.__name__ = name

    def context(cls=None) -> Context:
        return Context(exps)

    context.__name__ = f"{name}_context"
    return staticmethod(static), staticmethod(context)


def automock(cls):
    """Build ``Mock<Name>`` from a class describing an interface.

    Plain methods become per-instance mocked methods with ``expect_<name>``;
    static and class methods become shared mocked functions whose
    expectations are set through ``<name>_context()``.
    """
    mock_name = f"Mock{cls.__name__}"
    instance: list[str] = []
    static: list[str] = []
    for klass in reversed(inspect.getmro(cls)):
        if klass is object:
            continue
        for attr, value in vars(klass).items():
            if attr.startswith("__") and attr.endswith("__"):
                continue
            if isinstance(value, (staticmethod, classmethod)):
                target, other = static, instance
            elif inspect.isfunction(value):
                target, other = instance, static
            else:
                continue
            if attr in other:
                other.remove(attr)
            if attr not in target:
                target.append(attr)

    namespace: dict[str, Any] = {
        "_instance_methods": tuple(instance),
        "__doc__": f"Mock of {cls.__name__}.",
    }
    for name in instance:
        namespace[name] = _instance_method(name)
        namespace[f"expect_{name}"] = _expect_method(name)
    for name in static:
        exps = Expectations(f"{mock_name}::{name}")
        namespace[name], namespace[f"{name}_context"] = _static_pair(exps, name)
    return type(mock_name, (Mock,), namespace)


def mock_functions(name: str, *args):
    """Mock a set of free functions, given as names or functions.

    Returns a namespace with each function and its ``<name>_context()``.
    """
    namespace = types.SimpleNamespace()
    for item in args:
        func_name = item if isinstance(item, str) else item.__name__
        exps = Expectations(f"{name}::{func_name}")
        static, context = _static_pair(exps, func_name)
        setattr(namespace, func_name, static.__func__)
        setattr(namespace, f"{func_name}_context", context.__func__)
    return namespace