"""Runtime environment for Lumen.

The Environment stores bindings of Symbols to evaluated values and supports
nested scopes via an `outer` link. The root (global) environment has no outer
link; every call to a lambda creates a fresh frame whose outer link is the
environment the lambda was defined in.
"""

from __future__ import annotations

import logging
from io import StringIO
from typing import Optional

from lumen import LispValue
from lumen.errors import LumenArityError, LumenInvalidSymbol, LumenTypeError, LumenUnboundSymbol
from lumen.types.symbol import Symbol

logger = logging.getLogger(__name__)


class Environment:
    """Hierarchical mapping from Symbols to values."""

    __slots__ = ("vars", "outer")

    def __init__(self, outer: Optional[Environment] = None):
        self.vars: dict[Symbol, LispValue] = {}
        self.outer: Environment | None = outer

    def define(self, name: Symbol, value: LispValue) -> Symbol:
        """Bind `name` to `value` in this frame only, replacing any local binding.

        Outer frames are never touched. Returns `name` so that `(define x 1)`
        echoes back `x`.

        Raises LumenInvalidSymbol if `name` is not a Symbol.
        """
        if not isinstance(name, Symbol):
            raise LumenInvalidSymbol(f"cannot define {name!r}: expected a symbol")
        self.vars[name] = value
        return name

    def find(self, symbol: Symbol) -> Optional[Environment]:
        """Find the nearest environment in the chain that contains `symbol`."""
        env: Optional[Environment] = self
        while env is not None:
            if symbol in env.vars:
                return env
            env = env.outer
        return None

    def lookup(self, name: Symbol) -> LispValue:
        """Look up the value bound to `name`, searching outward from this frame.

        Raises LumenUnboundSymbol if no frame binds it.
        """
        env = self.find(name)
        if env is None:
            raise LumenUnboundSymbol(f"unexpected symbol: {name}")
        return env.vars[name]

    def extend_for_call(self, params: list[Symbol], args: list[LispValue]) -> Environment:
        """Return a new frame binding each parameter to its argument, with this env as outer."""
        if not isinstance(params, list) or not all(isinstance(p, Symbol) for p in params):
            raise LumenTypeError("lambda parameters must be a list of symbols")
        if len(params) != len(args):
            raise LumenArityError(f"expected {len(params)} arguments, got {len(args)}")
        frame = Environment(outer=self)
        frame.vars.update(zip(params, args))
        logger.debug("call frame %s", frame)
        return frame

    def update(self, mapping: dict[Symbol, LispValue]) -> None:
        """Bulk-define a mapping of Symbol -> value in the current frame."""
        for k, v in mapping.items():
            self.define(k, v)

    def _write_vars(self, buffer: StringIO) -> None:
        """Write this frame's variables into the buffer in a compact form."""
        buffer.write("{")
        first = True
        for k, v in self.vars.items():
            if not first:
                buffer.write(", ")
            buffer.write(f"{k}: {v!r}")
            first = False
        buffer.write("}")

    def __str__(self) -> str:
        """Human-readable single-frame view with an indicator for parent."""
        with StringIO() as buffer:
            self._write_vars(buffer)
            if self.outer is not None:
                buffer.write(" -> ...")
            return buffer.getvalue()

    def __repr__(self) -> str:
        """Detailed chain representation for debugging purposes."""
        chain = []
        env: Optional[Environment] = self
        while env is not None:
            with StringIO() as env_buf:
                env._write_vars(env_buf)
                chain.append(env_buf.getvalue())
            env = env.outer
        return "<Environment chain: " + " -> ".join(chain) + ">"
