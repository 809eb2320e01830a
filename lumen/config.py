from __future__ import annotations
import os
from pathlib import Path
from typing import Iterable, List, Optional


def _sep() -> str:
    return ';' if os.name == 'nt' else ':'


# Resolve installation dir (lumen package directory)
_LUMEN_DIR = Path(__file__).resolve().parent

# Defaults
_DEFAULT_PRELUDE_DIRS = [_LUMEN_DIR / 'prelude']
_DEFAULT_LOG_LEVEL = 'WARNING'


def paths_from_env(var: str, defaults: Iterable[Path]) -> List[Path]:
    raw = os.environ.get(var)
    if not raw:
        return [Path(p) for p in defaults]
    sep = _sep()
    return [Path(p.strip()) for p in raw.split(sep) if p.strip()]


def get_prelude_roots() -> List[Path]:
    return paths_from_env('LUMEN_PRELUDE_PATH', _DEFAULT_PRELUDE_DIRS)


def get_prelude_files() -> List[Path]:
    """Every prelude source to load, in order: files as given, directories by sorted name."""
    files: List[Path] = []
    for root in get_prelude_roots():
        if root.is_dir():
            files.extend(sorted(root.glob('*.lisp')))
        elif root.is_file():
            files.append(root)
    return files


LOG_LEVELS = ('DEBUG', 'INFO', 'WARNING', 'ERROR', 'CRITICAL')


def get_log_level() -> str:
    """Level name from LUMEN_LOG_LEVEL; unknown names fall back to the default."""
    level = os.environ.get('LUMEN_LOG_LEVEL', _DEFAULT_LOG_LEVEL).upper()
    return level if level in LOG_LEVELS else _DEFAULT_LOG_LEVEL


def get_recursion_limit() -> Optional[int]:
    raw = os.environ.get('LUMEN_RECURSION_LIMIT')
    if not raw:
        return None
    try:
        return int(raw)
    except ValueError:
        raise ValueError(f"LUMEN_RECURSION_LIMIT must be an integer, got {raw!r}")
