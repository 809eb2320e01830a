from __future__ import annotations

import logging
from typing import Protocol

from lumen.config import get_prelude_files

logger = logging.getLogger(__name__)


class _HasEvalPrelude(Protocol):
    def eval_prelude(self, code: str) -> None: ...


def load_prelude(itp: _HasEvalPrelude) -> None:
    """Evaluate each configured prelude file into the interpreter, in order."""
    for path in get_prelude_files():
        logger.debug("loading prelude %s", path)
        itp.eval_prelude(path.read_text(encoding='utf-8'))
