# Core type aliases for Lumen's data model.
# Plain Python values represent both parsed syntax and evaluated values:
#   symbols -> Symbol, numbers -> float, booleans -> bool, lists -> list,
#   native functions -> Builtin, user closures -> Lambda.
#
# Naming guidance:
# - SExpression: use in reader/parser code for syntactic forms.
# - LispValue:   use in evaluator/runtime code for evaluated values.
# Both resolve to `Any` and are interchangeable.

from typing import Any, Callable

__version__ = "0.3.0"

LispValue = Any
SExpression = LispValue

# Evaluator function type used by special forms and the application engine
EvaluatorFn = Callable[..., LispValue]
