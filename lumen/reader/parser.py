"""
  Lumen Lexer and Parser

- Tokens are plain strings: "(", ")" or an atom.
- Emits Python values instead of a separate AST:

    - true / false -> bool
    - numbers -> float
    - lists -> Python list
    - anything else -> Symbol
"""

from __future__ import annotations

from typing import Iterator, Sequence

from lumen import SExpression
from lumen.errors import LumenSyntaxError
from lumen.types.symbol import Symbol

LPAREN = "("
RPAREN = ")"

BOOLEANS: dict[str, bool] = {
    "true": True,
    "false": False,
}


def tokenize(source: str) -> list[str]:
    """Split source into tokens; parentheses always stand alone."""
    return source.replace(LPAREN, " ( ").replace(RPAREN, " ) ").split()


def parse_atom(token: str) -> SExpression:
    if token in BOOLEANS:
        return BOOLEANS[token]
    # float() also accepts digit separators, which are not number syntax here
    if "_" not in token:
        try:
            return float(token)
        except ValueError:
            pass
    return Symbol(token)


def parse(tokens: Sequence[str]) -> tuple[SExpression, Sequence[str]]:
    """Parse the first expression in `tokens`; return it with the unconsumed remainder."""
    expr, pos = read_expr(tokens, 0)
    return expr, tokens[pos:]


def read_expr(tokens: Sequence[str], pos: int) -> tuple[SExpression, int]:
    """Read one expression starting at `pos`; return it with the position after it.

    Open lists are kept on an explicit stack, so nesting depth is not bounded
    by the Python call stack.
    """
    if pos >= len(tokens):
        raise LumenSyntaxError("missing token")
    stack: list[list[SExpression]] = []
    while True:
        if pos >= len(tokens):
            raise LumenSyntaxError("unbalanced parentheses")
        token = tokens[pos]
        pos += 1
        if token == LPAREN:
            stack.append([])
            continue
        if token == RPAREN:
            if not stack:
                raise LumenSyntaxError("unexpected closing parenthesis")
            expr = stack.pop()
        else:
            expr = parse_atom(token)
        if not stack:
            return expr, pos
        stack[-1].append(expr)


class TokenStream:
    """Iterate every top-level expression of a multi-form source."""

    def __init__(self, tokens: Sequence[str]):
        self.tokens: Sequence[str] = list(tokens)
        self.pos = 0

    @classmethod
    def from_source(cls, source: str) -> TokenStream:
        return cls(tokenize(source))

    def parse_expr(self) -> SExpression:
        expr, self.pos = read_expr(self.tokens, self.pos)
        return expr

    def parse_all(self) -> Iterator[SExpression]:
        while self.pos < len(self.tokens):
            yield self.parse_expr()
