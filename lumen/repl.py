"""Line-oriented read-eval-print loop for Lumen."""

from __future__ import annotations

import argparse
import logging
import sys
from typing import TextIO

from lumen import __version__
from lumen.config import LOG_LEVELS, get_log_level, get_recursion_limit
from lumen.errors import LumenError
from lumen.interpreter import Interpreter
from lumen.log_support import setup_loggers
from lumen.printer import colorize, render

logger = logging.getLogger(__name__)

OK_GLYPH = "✓"
ERR_GLYPH = "✗"
PROMPT = "lumen> "


def eval_line(interp: Interpreter, line: str, color: bool = False) -> str:
    """Evaluate one line and format the outcome for display."""
    try:
        value = interp.parse_eval(line)
    except LumenError as ex:
        return f"{ERR_GLYPH} {ex.reason}"
    except RecursionError:
        logger.debug("recursion limit hit evaluating %r", line)
        return f"{ERR_GLYPH} maximum recursion depth exceeded"
    return f"{OK_GLYPH} {colorize(value) if color else render(value)}"


def run_repl(interp: Interpreter, instream: TextIO, outstream: TextIO, prompt: str = PROMPT) -> None:
    interactive = instream.isatty()
    while True:
        if interactive:
            outstream.write(prompt)
            outstream.flush()
        line = instream.readline()
        if not line:
            break
        if not line.strip():
            continue
        outstream.write(eval_line(interp, line, color=interactive) + "\n")
        outstream.flush()


def parse_args(args):
    parser = argparse.ArgumentParser(prog='lumen', description='Interactive Lumen interpreter.')
    parser.add_argument(
        '--no-prelude',
        action='store_true',
        help='Start with only the builtins bound.',
    )
    parser.add_argument(
        '--log-level',
        default=get_log_level(),
        type=str.upper,
        choices=LOG_LEVELS,
        help='Log level for the console handler (default from LUMEN_LOG_LEVEL).',
    )
    parser.add_argument(
        '--log-file',
        required=False,
        help='Also write DEBUG logs to this file.',
    )
    parser.add_argument('--version', action='version', version=f'%(prog)s {__version__}')
    return parser.parse_args(args)


def main(argv=None) -> int:
    ctx = parse_args(sys.argv[1:] if argv is None else argv)
    setup_loggers(ctx.log_level, ctx.log_file)

    limit = get_recursion_limit()
    if limit is not None:
        sys.setrecursionlimit(limit)

    interp = Interpreter(prelude=None if ctx.no_prelude else 'auto')
    run_repl(interp, sys.stdin, sys.stdout)
    return 0
