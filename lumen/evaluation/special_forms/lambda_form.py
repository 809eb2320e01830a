from lumen import EvaluatorFn
from lumen import SExpression, LispValue
from lumen.errors import LumenArityError
from lumen.types.environment import Environment
from lumen.types.lambda_fn import Lambda


def lambda_form(
    tail: list[SExpression],
    env: Environment,
    evaluate_fn: EvaluatorFn,
) -> LispValue:
    # Neither form is evaluated; the parameter list is checked when the lambda is called.
    if len(tail) != 2:
        raise LumenArityError(f"lambda requires exactly 2 arguments, got {len(tail)}")

    params, body = tail
    return Lambda(params, body, env)
