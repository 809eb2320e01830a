"""Lambda function representation for Lumen."""

from __future__ import annotations

from lumen import SExpression
from lumen.errors import LumenArityError, LumenTypeError
from lumen.types.environment import Environment
from lumen.types.symbol import Symbol


class Lambda:
    """A first-class lambda: unevaluated parameter form, body, and closure env.

    `env` is the environment the lambda was created in. It is held by
    reference, so a lambda returned from a call keeps that call's frame alive.
    """

    __slots__ = ("params", "body", "env")

    def __init__(self, params: SExpression, body: SExpression, env: Environment):
        self.params: SExpression = params
        self.body: SExpression = body
        self.env: Environment = env

    def formals(self) -> list[Symbol]:
        """Return the parameter list, checking it is a list of symbols."""
        if not isinstance(self.params, list) or not all(isinstance(p, Symbol) for p in self.params):
            raise LumenTypeError("lambda parameters must be a list of symbols")
        return self.params

    def check_arity(self, provided: int) -> None:
        expected = len(self.formals())
        if provided != expected:
            raise LumenArityError(f"expected {expected} arguments, got {provided}")

    def __repr__(self) -> str:
        return "<lambda>"
