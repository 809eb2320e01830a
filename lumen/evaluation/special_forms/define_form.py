from lumen import EvaluatorFn
from lumen import SExpression, LispValue
from lumen.errors import LumenArityError, LumenInvalidSymbol
from lumen.printer import render
from lumen.types.environment import Environment
from lumen.types.symbol import Symbol


def define_form(
    tail: list[SExpression],
    env: Environment,
    evaluate_fn: EvaluatorFn,
) -> LispValue:
    """
    (define name value)
    Binds in the innermost environment only, after the value evaluates, and
    returns the symbol.
    """
    if len(tail) != 2:
        raise LumenArityError(f"define requires exactly 2 arguments, got {len(tail)}")

    name, val_expr = tail
    if not isinstance(name, Symbol):
        raise LumenInvalidSymbol(f"define target must be a symbol, got {render(name)}")
    value = evaluate_fn(val_expr, env)
    return env.define(name, value)
