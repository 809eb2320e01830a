from __future__ import annotations

"""
Lightweight indexer for Lumen source files without evaluating code.

We scan for top-level `(define name ...)` forms and record where each name is
defined, and run the real parser over the buffer to report syntax errors with
the position of the offending parenthesis. The scanner is tolerant of partial
buffers; it only extracts enough structure to power LSP features.
"""

from dataclasses import dataclass, field
from typing import List, Dict, Optional, Tuple
import re

from lumen.errors import LumenSyntaxError
from lumen.reader.parser import TokenStream

TOKEN_REGEX = re.compile(r"\(|\)|[^\s()]+")


@dataclass
class SymbolDef:
    name: str
    kind: str  # "var" | "function"
    line: int
    col: int


@dataclass
class SyntaxIssue:
    message: str
    line: int
    col: int


@dataclass
class DocumentIndex:
    symbols: Dict[str, SymbolDef] = field(default_factory=dict)
    issues: List[SyntaxIssue] = field(default_factory=list)


def _iter_tokens(text: str):
    for m in TOKEN_REGEX.finditer(text):
        yield m.group(0), m.start()


def _position_from_offset(text: str, offset: int) -> Tuple[int, int]:
    # Return (line, col), 0-based
    line = text.count("\n", 0, offset)
    last_nl = text.rfind("\n", 0, offset)
    col = offset if last_nl == -1 else offset - last_nl - 1
    return line, col


def _paren_offset(text: str) -> Optional[int]:
    """Offset of the first stray ')' or, failing that, the last unclosed '('."""
    opened: List[int] = []
    for tok, start in _iter_tokens(text):
        if tok == '(':
            opened.append(start)
        elif tok == ')':
            if not opened:
                return start
            opened.pop()
    return opened[-1] if opened else None


def check_syntax(text: str) -> List[SyntaxIssue]:
    try:
        for _ in TokenStream.from_source(text).parse_all():
            pass
    except LumenSyntaxError as ex:
        offset = _paren_offset(text)
        line, col = _position_from_offset(text, offset) if offset is not None else (0, 0)
        return [SyntaxIssue(message=ex.reason, line=line, col=col)]
    return []


def build_index(text: str) -> DocumentIndex:
    idx = DocumentIndex(issues=check_syntax(text))
    tokens = list(_iter_tokens(text))

    depth = 0
    for i, (tok, start) in enumerate(tokens):
        if tok == '(':
            depth += 1
            # (define name ...) at top level
            if depth == 1 and i + 2 < len(tokens) and tokens[i + 1][0] == 'define':
                name, name_start = tokens[i + 2]
                if name not in ('(', ')'):
                    is_fn = i + 4 < len(tokens) and tokens[i + 3][0] == '(' and tokens[i + 4][0] == 'lambda'
                    line, col = _position_from_offset(text, name_start)
                    idx.symbols[name] = SymbolDef(
                        name=name, kind='function' if is_fn else 'var', line=line, col=col
                    )
        elif tok == ')':
            depth = max(depth - 1, 0)

    return idx


# Builtin signatures for quick hover/completion without eval
BUILTIN_SIGNATURES: Dict[str, str] = {
    "+": "(+ num ...)",
    "-": "(- num num ...)",
    "*": "(* num ...)",
    "/": "(/ num num ...)",
    "=": "(= num num ...)",
    "<": "(< num num ...)",
    "<=": "(<= num num ...)",
    ">": "(> num num ...)",
    ">=": "(>= num num ...)",
}

SPECIAL_FORM_SIGNATURES: Dict[str, str] = {
    "if": "(if test then else)",
    "define": "(define name value)",
    "lambda": "(lambda (params ...) body)",
}

