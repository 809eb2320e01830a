from lumen import EvaluatorFn
from lumen import SExpression, LispValue
from lumen.errors import LumenArityError, LumenTypeError
from lumen.printer import render
from lumen.types.environment import Environment


def if_form(
    tail: list[SExpression],
    env: Environment,
    evaluate_fn: EvaluatorFn,
) -> LispValue:
    """
    (if test then else)
    The test must produce a boolean; numbers and lists have no truthiness.
    """
    if len(tail) != 3:
        raise LumenArityError(f"if requires exactly 3 arguments, got {len(tail)}")

    test, then_expr, else_expr = tail
    cond = evaluate_fn(test, env)
    if not isinstance(cond, bool):
        raise LumenTypeError(f"if test must evaluate to a boolean, got {render(cond)}")

    return evaluate_fn(then_expr if cond else else_expr, env)
