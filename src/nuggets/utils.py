import re
from datetime import UTC, datetime

_DIGITS_RE = re.compile(r"(\d+)")


def now() -> datetime:
    return datetime.now(UTC)


def natural_sort_key(value: str) -> list[int | str]:
    """Split digits from text so that 'work-2' sorts before 'work-10'."""
    return [int(part) if part.isdigit() else part.lower() for part in _DIGITS_RE.split(value)]


def truncate(value: object, limit: int) -> str:
    """Coerce to string, strip surrounding whitespace and cut to limit characters."""
    if value is None:
        return ""
    return str(value).strip()[:limit]
