"""Helper utility functions."""

import math
from datetime import datetime, timezone
from typing import Any, Optional, Union

# BSON stores integers as signed 64-bit.
_INT64_MIN = -2 ** 63
_INT64_MAX = 2 ** 63 - 1

# Accepted non-ISO date layouts, tried in order before falling back to ISO 8601.
_DATE_FORMATS = (
    "%Y-%m-%d",
    "%Y/%m/%d",
    "%m/%d/%Y",
    "%B %d, %Y",
    "%b %d, %Y",
    "%B %d %Y",
    "%b %d %Y",
    "%a %b %d %Y",
    "%d %B %Y",
    "%d %b %Y",
)


def clean_text(value: Any) -> str:
    """Return a trimmed string, or an empty one for missing values."""
    if value is None:
        return ""
    return str(value).strip()


def today_utc() -> datetime:
    """Current UTC date as a naive midnight datetime."""
    now = datetime.now(timezone.utc)
    return datetime(now.year, now.month, now.day)


def parse_date(value: Any) -> Optional[datetime]:
    """Parse a date string into a naive UTC-midnight datetime.

    Returns None when the value is absent or does not describe a valid
    calendar date. Datetimes carrying an offset are converted to UTC first.
    """
    text = clean_text(value)
    if not text or isinstance(value, bool):
        return None

    for fmt in _DATE_FORMATS:
        try:
            parsed = datetime.strptime(text, fmt)
        except ValueError:
            continue
        return datetime(parsed.year, parsed.month, parsed.day)

    try:
        parsed = datetime.fromisoformat(text.replace("Z", "+00:00"))
    except ValueError:
        return None
    if parsed.tzinfo is not None:
        try:
            parsed = parsed.astimezone(timezone.utc)
        except (ValueError, OverflowError):
            return None
    return datetime(parsed.year, parsed.month, parsed.day)


def format_day(value: datetime) -> str:
    """Render a date as a day string, e.g. ``Mon Jan 01 2024``."""
    return f"{value:%a %b %d} {value.year:04d}"


def parse_duration(value: Any) -> Optional[Union[int, float]]:
    """Coerce a duration to a number; None if it is not numeric."""
    if value is None or isinstance(value, bool):
        return None
    if isinstance(value, (int, float)):
        number = value
    else:
        text = clean_text(value)
        try:
            number = int(text)
        except ValueError:
            try:
                number = float(text)
            except ValueError:
                return None

    if isinstance(number, float):
        if not math.isfinite(number):
            return None
        if number.is_integer() and _INT64_MIN <= number <= _INT64_MAX:
            return int(number)
        return number
    if not _INT64_MIN <= number <= _INT64_MAX:
        try:
            return float(number)
        except OverflowError:
            return None
    return number


def parse_limit(value: Any) -> Optional[int]:
    """Positive integer limit, or None when absent or invalid."""
    text = clean_text(value)
    if not text:
        return None
    try:
        limit = int(text)
    except ValueError:
        return None
    return limit if limit > 0 else None
