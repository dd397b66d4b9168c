import pytest

from expectmock import predicate
from expectmock.predicate import Predicate


def test_with_always():
    assert predicate.always().eval("xxx") is True


def test_with_eq():
    assert predicate.eq("xxx").eval("xxx") is True
    assert predicate.eq("xxx").eval("yyy") is False


def test_with_never():
    assert predicate.never().eval("xxx") is False


def test_withf():
    assert predicate.function(lambda a: a == "xxx").eval("xxx") is True
    assert predicate.function(lambda a: a == "xxx").eval("xy") is False


@pytest.mark.parametrize(
    "factory, value, expected",
    [
        (predicate.ne, 4, True),
        (predicate.ne, 5, False),
        (predicate.lt, 4, True),
        (predicate.lt, 5, False),
        (predicate.le, 5, True),
        (predicate.le, 6, False),
        (predicate.gt, 6, True),
        (predicate.gt, 5, False),
        (predicate.ge, 5, True),
        (predicate.ge, 4, False),
    ],
)
def test_comparisons_against_five(factory, value, expected):
    assert factory(5).eval(value) is expected


def test_descriptions():
    assert str(predicate.eq(5)) == "var == 5"
    assert str(predicate.ne(5)) == "var != 5"
    assert str(predicate.lt(5)) == "var < 5"
    assert str(predicate.le(5)) == "var <= 5"
    assert str(predicate.gt(5)) == "var > 5"
    assert str(predicate.ge(5)) == "var >= 5"
    assert str(predicate.always()) == "true"
    assert str(predicate.never()) == "false"
    assert str(predicate.function(bool)) == "fn(var)"


def test_and_combination():
    between = predicate.gt(1) & predicate.lt(5)
    assert between.eval(3) is True
    assert between.eval(5) is False
    assert str(between) == "(var > 1 && var < 5)"


def test_or_combination():
    either = predicate.eq(1) | predicate.eq(2)
    assert either.eval(2) is True
    assert either.eval(3) is False
    assert str(either) == "(var == 1 || var == 2)"


def test_not_combination():
    not_five = ~predicate.eq(5)
    assert not_five.eval(4) is True
    assert not_five.eval(5) is False
    assert str(not_five) == "(! var == 5)"


def test_call_is_eval():
    pred = Predicate(lambda v: v > 0, "positive")
    assert pred(1) is True
    assert pred(-1) is False
    assert repr(pred) == "Predicate(positive)"


def test_eq_on_sequences():
    assert predicate.eq([1, 2, 3]).eval([1, 2, 3]) is True
    assert predicate.eq([1, 2, 3]).eval([1, 2, 3, 4]) is False