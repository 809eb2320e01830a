"""Native functions installed in the root environment."""

from __future__ import annotations

from typing import Callable, TYPE_CHECKING

from lumen import LispValue

if TYPE_CHECKING:
    from lumen.types.environment import Environment

NativeFn = Callable[["Environment", list[LispValue]], LispValue]


class Builtin:
    """A named native function taking the calling environment and evaluated arguments.

    Builtins have no surface syntax; they only exist as values bound by the
    builtin registry.
    """

    __slots__ = ("name", "fn")

    def __init__(self, name: str, fn: NativeFn):
        self.name = name
        self.fn = fn

    def __call__(self, env: Environment, args: list[LispValue]) -> LispValue:
        return self.fn(env, args)

    def __repr__(self) -> str:
        return f"<builtin {self.name}>"
