"""Date normalization shared by every view the service builds.

Records come from several tables written by different clients, so date-like
values show up as ``datetime``, ``date``, ISO strings or epoch milliseconds.
Everything funnels through :func:`parse_date`; invalid input becomes ``None``.
"""
import math
from datetime import date, datetime, time, timezone
from typing import Any


def parse_date(value: Any) -> datetime | None:
    """Return a timezone-aware UTC datetime, or ``None`` if ``value`` is not a valid date.

    Naive datetimes are treated as UTC, matching how the portal stores timestamps.
    Falsy input (``None``, ``0``, ``""``) means "no date".
    """
    if not value or isinstance(value, bool):
        return None
    if isinstance(value, datetime):
        parsed = value
    elif isinstance(value, date):
        parsed = datetime.combine(value, time.min)
    elif isinstance(value, (int, float)):
        if not math.isfinite(value):
            return None
        try:
            return datetime.fromtimestamp(value / 1000, tz=timezone.utc)
        except (OverflowError, OSError, ValueError):
            return None
    elif isinstance(value, str):
        text = value.strip()
        if not text:
            return None
        if text.endswith(("Z", "z")):
            text = text[:-1] + "+00:00"
        try:
            parsed = datetime.fromisoformat(text)
        except ValueError:
            return None
    else:
        return None

    if parsed.tzinfo is None:
        return parsed.replace(tzinfo=timezone.utc)
    return parsed.astimezone(timezone.utc)


def to_iso_string(value: Any) -> str | None:
    parsed = parse_date(value)
    if parsed is None:
        return None
    return parsed.isoformat(timespec="milliseconds").replace("+00:00", "Z")


def calculate_age(dob: Any, now: datetime | None = None) -> int | None:
    """Whole years between ``dob`` and ``now`` using UTC calendar fields."""
    born = parse_date(dob)
    if born is None:
        return None
    today = parse_date(now) if now is not None else datetime.now(timezone.utc)
    if today is None:
        return None
    age = today.year - born.year
    if (today.month, today.day) < (born.month, born.day):
        age -= 1
    return age
