from __future__ import annotations
import os
from pathlib import Path


# Defaults
_DEFAULT_HISTORY_NAME = '.mal-history'
_DEFAULT_HISTORY_SIZE = 100
_DEFAULT_PROMPT = 'user> '


def path_from_env(var: str, default: Path) -> Path:
    raw = os.environ.get(var)
    if not raw or not raw.strip():
        return default
    return Path(raw.strip())


def int_from_env(var: str, default: int) -> int:
    raw = os.environ.get(var)
    if not raw:
        return default
    try:
        return int(raw)
    except ValueError:
        return default


def get_history_file() -> Path:
    # resolved lazily so the REPL picks up the directory it was started from
    return path_from_env('MAL_HISTORY_FILE', Path.cwd() / _DEFAULT_HISTORY_NAME)


def get_history_size() -> int:
    return max(0, int_from_env('MAL_HISTORY_SIZE', _DEFAULT_HISTORY_SIZE))


def get_prompt() -> str:
    return os.environ.get('MAL_PROMPT', _DEFAULT_PROMPT)
