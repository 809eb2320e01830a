"""Application engine for Lumen.

Centralizes function application for the evaluator:
- Builtins receive the caller's environment and their evaluated arguments.
- Lambdas have their arity checked against the parameter list before any
  argument is evaluated; arguments are then evaluated in the caller's
  environment and bound in a fresh frame chained to the lambda's closure
  environment, where the body is evaluated.
"""

from lumen import SExpression, LispValue, EvaluatorFn
from lumen.errors import LumenTypeError
from lumen.printer import render
from lumen.types.builtin import Builtin
from lumen.types.environment import Environment
from lumen.types.lambda_fn import Lambda


def evaluate_args(
    arg_forms: list[SExpression], env: Environment, evaluate_fn: EvaluatorFn
) -> list[LispValue]:
    """Evaluate argument forms left to right; the first error propagates."""
    return [evaluate_fn(form, env) for form in arg_forms]


def apply_lambda(
    fn: Lambda,
    arg_forms: list[SExpression],
    env: Environment,
    evaluate_fn: EvaluatorFn,
) -> LispValue:
    """Apply a Lambda to unevaluated argument forms from the caller's `env`.

    Raises LumenArityError when the number of forms differs from the number
    of parameters; no partial application takes place.
    """
    fn.check_arity(len(arg_forms))
    args = evaluate_args(arg_forms, env, evaluate_fn)
    frame = fn.env.extend_for_call(fn.formals(), args)
    return evaluate_fn(fn.body, frame)


def apply(
    head: LispValue,
    arg_forms: list[SExpression],
    env: Environment,
    evaluate_fn: EvaluatorFn,
) -> LispValue:
    """Apply an evaluated head (Builtin or Lambda) to unevaluated argument forms."""
    if isinstance(head, Builtin):
        return head(env, evaluate_args(arg_forms, env, evaluate_fn))
    if isinstance(head, Lambda):
        return apply_lambda(head, arg_forms, env, evaluate_fn)
    raise LumenTypeError(f"first form must be a function, got {render(head)}")
