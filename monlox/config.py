from __future__ import annotations
import os


_DEFAULT_PROMPT = '>> '
_DEFAULT_LOG_LEVEL = 'WARNING'
# One Monlox call costs roughly a dozen host frames.
_DEFAULT_RECURSION_LIMIT = 10000


def get_prompt() -> str:
    return os.environ.get('MONLOX_PROMPT', _DEFAULT_PROMPT)


def get_log_level() -> str:
    raw = os.environ.get('MONLOX_LOG_LEVEL')
    if not raw or not raw.strip():
        return _DEFAULT_LOG_LEVEL
    return raw.strip().upper()


def get_recursion_limit() -> int:
    """Host recursion limit from MONLOX_RECURSION_LIMIT, default 10000.

    Raises ValueError for anything other than a positive integer.
    """
    raw = os.environ.get('MONLOX_RECURSION_LIMIT')
    if not raw or not raw.strip():
        return _DEFAULT_RECURSION_LIMIT
    try:
        limit = int(raw)
    except ValueError:
        raise ValueError(f"MONLOX_RECURSION_LIMIT must be an integer, got {raw!r}")
    if limit <= 0:
        raise ValueError(f"MONLOX_RECURSION_LIMIT must be positive, got {limit}")
    return limit
