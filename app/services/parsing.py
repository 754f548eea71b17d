"""Uniform parsing of categorical and numeric request input.

Listing and creation operations never compare raw strings against enum
members themselves; they go through these helpers so unrecognized input is
handled the same way everywhere.
"""

import enum
import math
import re
from datetime import datetime, timedelta
from typing import Any, Optional, Type, TypeVar

E = TypeVar("E", bound=enum.Enum)

DEFAULT_LIMIT = 50
MAX_LIMIT = 200

URGENCY_MIN = 1
URGENCY_MAX = 10

# Textual urgency from the public request form -> lead urgency score
URGENCY_LEVEL_SCORES = {
    "low": 2,
    "normal": 5,
    "high": 7,
    "emergency": 10,
}
DEFAULT_URGENCY_SCORE = URGENCY_LEVEL_SCORES["normal"]

_LEADING_INT = re.compile(r"^\s*([+-]?\d+)")


def parse_enum(enum_cls: Type[E], raw: Any) -> Optional[E]:
    """Return the member whose value is exactly ``raw``, else None."""
    if raw is None:
        return None
    if isinstance(raw, enum_cls):
        return raw
    try:
        return enum_cls(raw)
    except ValueError:
        return None


def clamp_limit(raw: Any, default: Optional[int] = DEFAULT_LIMIT, maximum: int = MAX_LIMIT) -> Optional[int]:
    """Parse a page size.

    Absent, non-numeric or non-positive input falls back to ``default``;
    anything else is capped at ``maximum``.
    """
    if raw is None or raw == "":
        return default
    try:
        value = int(str(raw).strip())
    except ValueError:
        return default
    if value < 1:
        return default
    return min(value, maximum)


def parse_urgency(raw: Any) -> Optional[int]:
    """Parse a numeric urgency, clamped into 1..10.

    Accepts ints, floats and strings with a leading integer ("7", "8 - asap").
    Anything else yields None rather than an error.
    """
    if raw is None or isinstance(raw, bool):
        return None
    if isinstance(raw, float) and not math.isfinite(raw):
        return None
    if isinstance(raw, (int, float)):
        value = int(raw)
    else:
        match = _LEADING_INT.match(str(raw))
        if not match:
            return None
        value = int(match.group(1))
    return max(URGENCY_MIN, min(value, URGENCY_MAX))


def urgency_level_to_score(level: Optional[str]) -> int:
    if not level:
        return DEFAULT_URGENCY_SCORE
    return URGENCY_LEVEL_SCORES.get(level.strip().lower(), DEFAULT_URGENCY_SCORE)


def parse_bool(raw: Any) -> Optional[bool]:
    if raw is None:
        return None
    value = str(raw).strip().lower()
    if value in ("1", "true", "yes", "y", "on"):
        return True
    if value in ("0", "false", "no", "n", "off"):
        return False
    return None


def start_of_day(moment: datetime) -> datetime:
    return moment.replace(hour=0, minute=0, second=0, microsecond=0)


def days_ago_start(days: int, now: Optional[datetime] = None) -> datetime:
    """Local-time midnight ``days`` days before ``now``."""
    now = now or datetime.now()
    return start_of_day(now - timedelta(days=days))
