import pytest

from expectmock.errors import MockError
from expectmock.times import UNBOUNDED, Times, TimesRange


def _call(times, count):
    for _ in range(count):
        times.call()


# Cases carried over from the source's call-count tests.

def test_exact_ok():
    t = Times(2)
    _call(t, 2)
    assert t.is_satisfied()
    assert t.count == 2


def test_exact_too_few():
    t = Times(2)
    t.call()
    assert not t.is_satisfied()
    assert t.minimum() == 2


def test_exact_too_many():
    t = Times(2)
    _call(t, 2)
    with pytest.raises(MockError, match="called more than 2 times"):
        t.call()


def test_range_ok():
    t = Times(range(2, 4))
    _call(t, 2)
    assert t.is_satisfied()


def test_range_too_few():
    t = Times(range(2, 4))
    t.call()
    assert not t.is_satisfied()
    assert t.minimum() == 2


def test_range_too_many():
    t = Times(range(2, 4))
    _call(t, 3)
    with pytest.raises(MockError, match="called more than 3 times"):
        t.call()


def test_times_full_overrides_exact():
    t = Times()
    t.times(1)
    t.times(...)
    _call(t, 2)
    assert t.count == 2


# Further behaviour of the range conversions.

def test_default_is_full():
    assert Times().bounds == TimesRange.full()
    assert TimesRange.full() == TimesRange(0, UNBOUNDED)


def test_never_message():
    t = Times()
    t.never()
    with pytest.raises(MockError, match="should not have been called"):
        t.call()


def test_from_int():
    assert TimesRange.from_spec(3) == TimesRange(3, 4)


def test_from_slice_forms():
    assert TimesRange.from_spec(slice(2, None)) == TimesRange(2, UNBOUNDED)
    assert TimesRange.from_spec(slice(None, 4)) == TimesRange(0, 4)
    assert TimesRange.from_spec(slice(None)) == TimesRange.full()
    assert TimesRange.from_spec(slice(2, 4)) == TimesRange(2, 4)


def test_from_inclusive_tuple():
    assert TimesRange.from_spec((2, 4)) == TimesRange(2, 5)


def test_inclusive_allows_upper_bound():
    t = Times((2, 4))
    _call(t, 4)
    assert t.is_done()
    with pytest.raises(MockError, match="called more than 4 times"):
        t.call()


def test_rangeto_too_many():
    t = Times(slice(None, 4))
    _call(t, 3)
    with pytest.raises(MockError, match="called more than 3 times"):
        t.call()


def test_rangefrom_too_few_then_ok():
    t = Times(slice(2, None))
    t.call()
    assert not t.is_satisfied()
    _call(t, 2)
    assert t.is_satisfied()
    assert not t.is_done()


@pytest.mark.parametrize("spec", [range(4, 2), range(3, 3), slice(4, 2), (5, 3)])
def test_backwards_ranges_rejected(spec):
    with pytest.raises(ValueError, match="Backwards range"):
        TimesRange.from_spec(spec)


def test_range_method_backwards():
    t = Times()
    with pytest.raises(ValueError, match="Backwards range"):
        t.range(3, 3)


def test_range_method_sets_bounds():
    t = Times()
    t.range(1, 3)
    assert t.bounds == TimesRange(1, 3)
    assert not t.is_exact()


@pytest.mark.parametrize("spec", ["two", 1.5, True, [1, 2]])
def test_unsupported_spec(spec):
    with pytest.raises(TypeError):
        TimesRange.from_spec(spec)


def test_step_rejected():
    with pytest.raises(ValueError):
        TimesRange.from_spec(range(0, 10, 2))


def test_is_exact_and_is_done():
    t = Times()
    t.n(1)
    assert t.is_exact()
    assert not t.is_done()
    t.call()
    assert t.is_done()


def test_any_resets_limits():
    t = Times(1)
    t.any()
    _call(t, 5)
    assert t.count == 5
    assert t.minimum() == 0


def test_count_increments_even_when_raising():
    t = Times(0)
    with pytest.raises(MockError):
        t.call()
    assert t.count == 1