"""Core evaluator for the Lumen interpreter.

A plain recursive tree walker: symbols are looked up, atoms evaluate to
themselves, and lists are either special forms (dispatched on the head symbol
before anything is evaluated) or applications.
"""

from __future__ import annotations

from lumen import SExpression, LispValue
from lumen.errors import LumenTypeError
from lumen.types.builtin import Builtin
from lumen.types.environment import Environment
from lumen.types.lambda_fn import Lambda
from lumen.types.symbol import Symbol
from lumen.evaluation.apply import apply
from lumen.evaluation.special_forms import SPECIAL_FORMS


def evaluate(expr: SExpression, env: Environment) -> LispValue:
    match expr:
        case Symbol():
            return env.lookup(expr)

        case bool() | float() | Builtin():
            return expr

        case Lambda():
            raise LumenTypeError("unexpected lambda value; lambdas can only be called")

        case []:
            raise LumenTypeError("expected a non-empty list")

        case [head, *tail_args]:
            if isinstance(head, Symbol) and head in SPECIAL_FORMS:
                return SPECIAL_FORMS[head](tail_args, env, evaluate)
            fn = evaluate(head, env)
            return apply(fn, tail_args, env, evaluate)

    raise LumenTypeError(f"cannot evaluate {expr!r}")
