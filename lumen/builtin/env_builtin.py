"""Built-in functions for the Lumen root environment.

Arithmetic and chained numeric comparison. Every builtin takes the calling
environment and the list of already-evaluated arguments.
"""
from __future__ import annotations

import operator
from typing import Callable

from lumen import LispValue
from lumen.errors import LumenArityError, LumenError, LumenTypeError
from lumen.printer import render
from lumen.types.builtin import Builtin
from lumen.types.environment import Environment
from lumen.types.symbol import Symbol


def _numbers(name: str, expr: list[LispValue]) -> list[float]:
    """Check every argument is a number; booleans are not numbers."""
    for x in expr:
        if not isinstance(x, float):
            raise LumenTypeError(f"{name} expected a number, got {render(x)}")
    return expr


# -------------------------------
# Arithmetic
# -------------------------------
def add(env: Environment, expr: list[LispValue]) -> float:
    """Return the sum of all arguments; zero arguments give 0."""
    return sum(_numbers("+", expr), 0.0)


def sub(env: Environment, expr: list[LispValue]) -> float:
    """Subtract all subsequent numbers from the first; unary negation for one arg."""
    nums = _numbers("-", expr)
    if not nums:
        raise LumenArityError("- requires at least 1 argument")
    if len(nums) == 1:
        return -nums[0]
    result = nums[0]
    for x in nums[1:]:
        result -= x
    return result


def mul(env: Environment, expr: list[LispValue]) -> float:
    """Return the product of all arguments; zero arguments give 1."""
    result = 1.0
    for x in _numbers("*", expr):
        result *= x
    return result


def div(env: Environment, expr: list[LispValue]) -> float:
    """Divide left-to-right; with one arg returns the reciprocal."""
    nums = _numbers("/", expr)
    if not nums:
        raise LumenArityError("/ requires at least 1 argument")
    try:
        if len(nums) == 1:
            return 1.0 / nums[0]
        result = nums[0]
        for x in nums[1:]:
            result /= x
        return result
    except ZeroDivisionError:
        raise LumenError("division by zero")


# -------------------------------
# Comparison
# -------------------------------
def chained(name: str, op: Callable[[float, float], bool]) -> Callable[[Environment, list[LispValue]], bool]:
    """Build an n-ary comparison that holds only if `op` holds for every adjacent pair."""
    def compare(env: Environment, expr: list[LispValue]) -> bool:
        nums = _numbers(name, expr)
        if len(nums) < 2:
            raise LumenArityError(f"{name} requires at least 2 arguments")
        return all(op(a, b) for a, b in zip(nums, nums[1:]))
    compare.__name__ = f"compare_{op.__name__}"
    return compare


eq = chained("=", operator.eq)
lt = chained("<", operator.lt)
lte = chained("<=", operator.le)
gt = chained(">", operator.gt)
gte = chained(">=", operator.ge)


BUILTINS: dict[str, Callable[[Environment, list[LispValue]], LispValue]] = {
    '+': add,
    '-': sub,
    '*': mul,
    '/': div,
    '=': eq,
    '<': lt,
    '<=': lte,
    '>': gt,
    '>=': gte,
}


# -------------------------------
# Registration
# -------------------------------
def register(env: Environment) -> Environment:
    env.update({Symbol(name): Builtin(name, fn) for name, fn in BUILTINS.items()})
    return env
