from __future__ import annotations

import logging
from typing import Literal

from lumen import LispValue
from lumen.reader.parser import tokenize, parse, TokenStream
from lumen.types.environment import Environment
from lumen.evaluation.evaluator import evaluate
from lumen.builtin.env_builtin import register

logger = logging.getLogger(__name__)


def parse_eval(source: str, env: Environment) -> LispValue:
    """Parse the first expression in `source` and evaluate it in `env`.

    Anything after the first expression is ignored. Errors propagate as
    LumenError; a failed line leaves `env` without any new binding.
    """
    expr, rest = parse(tokenize(source))
    if rest:
        logger.debug("ignoring %d tokens after the first expression", len(rest))
    return evaluate(expr, env)


class Interpreter:
    """
    One interpreter session: a root environment with the builtins installed,
    kept across calls so definitions persist from line to line.
    """

    def __init__(self, prelude: str | None | Literal['auto'] = 'auto'):
        self.env: Environment = register(Environment())

        if prelude is None:
            pass  # explicit: no prelude
        elif prelude == 'auto':
            # Lazy import to avoid circular imports
            from lumen.modules.prelude_loader import load_prelude
            load_prelude(self)
        elif prelude:
            self.eval_prelude(prelude)

    def eval_prelude(self, code: str) -> None:
        """Evaluate every top-level form of `code` in the session environment."""
        for expr in TokenStream.from_source(code).parse_all():
            evaluate(expr, self.env)

    def parse_eval(self, code: str) -> LispValue:
        return parse_eval(code, self.env)
