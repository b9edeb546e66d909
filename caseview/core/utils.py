import math
from typing import Any, Callable, Hashable, Iterable, TypeVar

T = TypeVar("T")

MIN_LIMIT = 1
MAX_LIMIT = 25
DEFAULT_LIMIT = 10


def clamp_limit(value: Any, default: int = DEFAULT_LIMIT) -> int:
    """Clamp a task limit into [MIN_LIMIT, MAX_LIMIT].

    ``None`` means "not supplied" and uses ``default``; anything non-numeric
    (including NaN) clamps to the lower bound.
    """
    if value is None:
        value = default
    if isinstance(value, bool):
        return MIN_LIMIT
    if isinstance(value, str):
        try:
            value = float(value.strip())
        except ValueError:
            return MIN_LIMIT
    if not isinstance(value, (int, float)) or math.isnan(value):
        return MIN_LIMIT
    return int(min(max(value, MIN_LIMIT), MAX_LIMIT))


def trim_trailing_slash(value: str | None) -> str:
    return (value or "").rstrip("/")


def first_per_key(rows: Iterable[T], key: Callable[[T], Hashable]) -> dict:
    """Keep the first row seen for each key.

    ``rows`` must already be sorted newest first; under that ordering the
    first row per key is the latest one. Rows whose key is ``None`` are skipped.
    """
    out: dict = {}
    for row in rows:
        k = key(row)
        if k is None or k in out:
            continue
        out[k] = row
    return out
