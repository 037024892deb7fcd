from __future__ import annotations
import logging
import os
from pathlib import Path
from typing import Iterable, List


def _sep() -> str:
    return ';' if os.name == 'nt' else ':'


# Resolve installation dir (mallet package directory)
_MALLET_DIR = Path(__file__).resolve().parent

# Defaults
_DEFAULT_PRELUDE_DIR = _MALLET_DIR / 'prelude'
_DEFAULT_PRELUDE_FILE = 'core.mal'
_DEFAULT_HISTORY_FILE = Path.home() / '.mallet_history'
_DEFAULT_PROMPT = 'user> '
_DEFAULT_LOG_LEVEL = 'WARNING'
_DEFAULT_RECURSION_LIMIT = 20_000


def paths_from_env(var: str, defaults: Iterable[Path]) -> List[Path]:
    raw = os.environ.get(var)
    if not raw:
        return [Path(p) for p in defaults]
    sep = _sep()
    return [Path(p.strip()) for p in raw.split(sep) if p.strip()]


def get_prelude_path() -> Path:
    """Return the prelude source file.

    MALLET_PRELUDE_PATH may name the file itself or the directory holding
    core.mal.
    """
    p = paths_from_env('MALLET_PRELUDE_PATH', [_DEFAULT_PRELUDE_DIR])[0]
    return p / _DEFAULT_PRELUDE_FILE if p.is_dir() else p


def get_history_file() -> Path:
    return paths_from_env('MALLET_HISTORY_FILE', [_DEFAULT_HISTORY_FILE])[0]


def get_prompt() -> str:
    return os.environ.get('MALLET_PROMPT', _DEFAULT_PROMPT)


def get_log_level() -> int:
    name = os.environ.get('MALLET_LOG_LEVEL', _DEFAULT_LOG_LEVEL).strip().upper()
    level = logging.getLevelName(name)
    # getLevelName returns a string for unknown names
    return level if isinstance(level, int) else logging.WARNING


def get_recursion_limit() -> int:
    """Python stack depth allowed for non-tail Lisp recursion (MALLET_RECURSION_LIMIT)."""
    raw = os.environ.get('MALLET_RECURSION_LIMIT', '').strip()
    return int(raw) if raw.isdigit() else _DEFAULT_RECURSION_LIMIT
