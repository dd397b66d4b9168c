# expectmock

Mock objects built around expectations. You set expectations on a mock:
argument matchers, a required call count and, if you want one, a place in a
call sequence. Then you hand the mock to the code under test. A call that
breaks your expectations raises `expectmock.errors.MockError` straight away.
`MockError` is a subclass of `AssertionError`, so test runners report it as
a failed assertion.

It has no dependencies outside the standard library.

## Installing

```
pip install expectmock
```

## Getting started

`expectmock.mock.automock` takes a class that describes an interface and
returns a new class named `Mock<Name>`.

- Each plain method becomes a mocked method, together with an
  `expect_<name>()` method.
- Each static method or class method becomes a mocked function shared by the
  whole mock class, together with a `<name>_context()` function.

```python
from expectmock import predicate
from expectmock.mock import automock


class Store:
    def get(self, key): ...
    def put(self, key, value): ...

    @staticmethod
    def open(path): ...


MockStore = automock(Store)

mock = MockStore()
mock.expect_get().with_(predicate.eq("a")).returning(lambda key: 1)
mock.expect_get().return_const(None)   # fallback for any other key

assert mock.get("a") == 1
assert mock.get("b") is None
```

Methods inherited from base classes are mocked as well.

The expectations for a method are tried in the order they were set. The
first matching expectation that has not yet reached its maximum call count
is used. If every matching expectation has reached its maximum, the first
matching one is used, and it then raises. If no expectation matches, the
call raises `MockError` with the message
`"MockStore::get: No matching expectation found"`.

## Return values

All of these methods return the expectation, so calls can be chained:

- `return_const(value)`: returns a fresh shallow copy of `value` on every
  call.
- `returning(func)`: calls `func(*args)` and returns its result.
- `return_once(func)`: the same as `returning`, but only once. A second call
  raises `MockError` ("called twice, but it returns by move").
- `return_var(value)`: returns the very same object on every call, so
  changes made to it persist.

Calling an expectation that has no return value set raises `MockError`.

## Matching arguments

- `with_(*predicates)` takes one predicate for each positional argument. If
  the number of arguments differs, the call does not match.
- `withf(func)` takes a function that receives all the arguments and
  returns a true or false value.

`expectmock.predicate` provides `eq`, `ne`, `lt`, `le`, `gt`, `ge`,
`always`, `never` and `function`. Predicates combine with `&`, `|` and `~`.
Their string form, such as `var == 5`, appears in error messages:

```
MockFoo::bar: Expectation(var == 5) called fewer than 2 times
```

## Call counts

By default an expectation may be called any number of times. To limit it:

```python
mock.expect_put().times(2).return_const(None)              # exactly 2
mock.expect_put().times(range(1, 4)).return_const(None)    # 1, 2 or 3
mock.expect_put().times(slice(2, None)).return_const(None) # at least 2
mock.expect_put().times(slice(None, 4)).return_const(None) # fewer than 4
mock.expect_put().times((2, 4)).return_const(None)         # 2 to 4 inclusive
mock.expect_put().times(...).return_const(None)            # any number
mock.expect_get().never()
```

A backwards range raises `ValueError`. A call past the maximum raises
`MockError` at once, for example "called more than 2 times", or "should not
have been called" when `never()` was used.

`checkpoint()` on a mock checks that every expectation of its methods has
reached its minimum count ("called fewer than N times"). Then it discards
all of them, so you can set new ones. Static methods are not included; they
are checkpointed through their contexts.

The counting itself is in `expectmock.times` (`Times` and `TimesRange`).

## Sequences

```python
from expectmock.sequence import Sequence

seq = Sequence()
first.expect_get().times(1).return_const(1).in_sequence(seq)
second.expect_get().times(1).return_const(2).in_sequence(seq)
```

A call made out of order raises `expectmock.errors.SequenceError`, a
subclass of `MockError`. Only an expectation with an exact call count can
join a sequence; for any other, `in_sequence` raises `MockError`.
Expectations from different mocks may share one sequence.

## Static methods and free functions

Static methods and free functions keep their expectations outside any mock
object. You set them through an `expectmock.mock.Context`:

```python
ctx = MockStore.open_context()
ctx.expect().returning(lambda path: MockStore())
store = MockStore.open("data.db")
ctx.close()
```

`expectmock.mock.mock_functions(name, *functions)` mocks free functions.
The functions can be given as names or as function objects. It returns a
namespace that holds each function and its `<name>_context()`:

```python
from expectmock.mock import mock_functions

ffi = mock_functions("mock_ffi", "foo")
with ffi.foo_context() as ctx:
    ctx.expect().returning(lambda x: x + 1)
    assert ffi.foo(41) == 42
```

`checkpoint()` on a context verifies its expectations and then discards
them. `close()` does the same, and so does leaving a `with` block. If the
block is left because of an exception, verification failures at exit are
ignored.

These expectations are shared by everything that uses that class or
namespace. Tests that run in parallel must coordinate their use.

## What it does not do

- Return values are never derived from types: every expectation that is
  called needs a return value set explicitly.
- Expectations are not kept apart by argument type. One method has one list
  of expectations, whatever the types of the arguments.