"""Canonical textual rendering of Lumen values."""

from __future__ import annotations

from lumen import LispValue
from lumen.types.builtin import Builtin
from lumen.types.lambda_fn import Lambda
from lumen.types.symbol import Symbol

# ----------------- ANSI colors -----------------
RESET = "\033[0m"
COLOR_SYMBOL = "\033[94m"
COLOR_NUMBER = "\033[93m"
COLOR_BOOL = "\033[96m"
COLOR_FUNCTION = "\033[92m"


def render_number(value: float) -> str:
    # integral values print without a fractional part: 6.0 -> "6"
    if value.is_integer() and abs(value) < 1e16:
        return str(int(value))
    return repr(value)


def render(value: LispValue) -> str:
    """Render a value: symbols by name, lists comma-joined, functions as opaque placeholders."""
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, float):
        return render_number(value)
    if isinstance(value, Symbol):
        return str(value)
    if isinstance(value, list):
        return "(" + ",".join(render(v) for v in value) + ")"
    if isinstance(value, (Builtin, Lambda)):
        return repr(value)
    return str(value)


def colorize(value: LispValue) -> str:
    """Like render, with ANSI colours per value kind for terminal output."""
    if isinstance(value, bool):
        return f"{COLOR_BOOL}{render(value)}{RESET}"
    if isinstance(value, float):
        return f"{COLOR_NUMBER}{render(value)}{RESET}"
    if isinstance(value, Symbol):
        return f"{COLOR_SYMBOL}{value}{RESET}"
    if isinstance(value, list):
        return "(" + ",".join(colorize(v) for v in value) + ")"
    if isinstance(value, (Builtin, Lambda)):
        return f"{COLOR_FUNCTION}{render(value)}{RESET}"
    return render(value)
