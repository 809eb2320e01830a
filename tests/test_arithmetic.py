import math

import pytest
from hypothesis import given, strategies as st

from lumen.builtin.env_builtin import BUILTINS, gt, gte, lt, lte, eq
from lumen.errors import LumenArityError, LumenError, LumenTypeError
from lumen.types.builtin import Builtin
from lumen.types.symbol import Symbol


@pytest.mark.parametrize(
    "source,expected",
    [
        ("(+ 1 2 3)", 6),
        ("(- 10 3 2)", 5),
        ("(- 4)", -4),
        ("(* 2 3 4)", 24),
        ("(/ 12 3)", 4),
        ("(/ 4)", 0.25),
        ("(/ 1 2)", 0.5),
        ("(+ (* 2 3) (- 10 4))", 12),
        ("(/ (+ 20 10) (* 2 5))", 3),
        ("(+ 1 2.5 3)", 6.5),
        ("(+ -1 5 -3)", 1),
        ("(+)", 0),
        ("(*)", 1),
        ("(+ 1 (* 2 (+ 3 4) (- 10 6)))", 57),
    ]
)
def test_arithmetic(run, source, expected):
    result = run(source)
    assert isinstance(result, float)
    assert result == expected


@pytest.mark.parametrize(
    "source,expected",
    [
        ("(= 1 1)", True),
        ("(= 1 1 1 1)", True),
        ("(= 1 1 2)", False),
        ("(< 1 2 3)", True),
        ("(< 1 3 2)", False),
        ("(< 1 1)", False),
        ("(<= 1 1 2)", True),
        ("(<= 2 1)", False),
        ("(> 6 5 3 2)", True),
        ("(> 6 5 8 2)", False),
        ("(>= 3 3 1)", True),
        ("(>= 3 4 1)", False),
    ]
)
def test_chained_comparisons(run, source, expected):
    assert run(source) is expected


@pytest.mark.parametrize("source", ["(= 1)", "(<)", "(> 1)", "(-)", "(/)"])
def test_arity_errors(run, source):
    with pytest.raises(LumenArityError):
        run(source)


@pytest.mark.parametrize("source", ["(+ 1 true)", "(* false 2)", "(< 1 (lambda (x) x))", "(= true true)", "(- +)"])
def test_type_errors(run, source):
    with pytest.raises(LumenTypeError) as info:
        run(source)
    assert "expected a number" in info.value.reason


@pytest.mark.parametrize("source", ["(/ 1 0)", "(/ 0)", "(/ 5 1 0)"])
def test_division_by_zero(run, source):
    with pytest.raises(LumenError) as info:
        run(source)
    assert info.value.reason == "division by zero"


def test_registered_as_builtins(env):
    for name in BUILTINS:
        value = env.lookup(Symbol(name))
        assert isinstance(value, Builtin)
        assert value.name == name


numbers = st.floats(allow_nan=False, allow_infinity=False)


@given(st.lists(numbers, min_size=2))
def test_greater_than_means_strictly_decreasing(xs):
    strictly = sorted(set(xs), reverse=True) == xs
    assert gt(None, xs) is strictly


@given(st.lists(numbers, min_size=2))
def test_less_equal_means_sorted(xs):
    assert lte(None, xs) is (sorted(xs) == xs)


@given(st.lists(numbers, min_size=2))
def test_comparison_duality(xs):
    assert lt(None, xs) is gt(None, list(reversed(xs)))
    assert gte(None, xs) is lte(None, list(reversed(xs)))


@given(numbers, st.integers(min_value=2, max_value=6))
def test_equal_run(x, n):
    assert eq(None, [x] * n) is True


def test_float_semantics():
    assert math.isclose(BUILTINS["+"](None, [0.1, 0.2]), 0.3)
