"""Relative and calendar date formatting.

Recent dates (under a week old) read as "3 days ago"; older ones fall back
to a short "Jan 5" form, or "Jan 5, 2019" when the year differs from now.
"""

from __future__ import annotations

import logging
from datetime import date as date_type
from datetime import datetime, time, tzinfo
from typing import Callable

from view_helpers.config import settings
from view_helpers.constants import (
    DEFAULT_LONG_FORMAT,
    DEFAULT_SHORT_FORMAT,
    MINUTES_PER_DAY,
    MINUTES_PER_HOUR,
    MINUTES_PER_MONTH,
    MINUTES_PER_QUARTER_YEAR,
    MINUTES_PER_YEAR,
    RELATIVE_CUTOVER_DAYS,
    SECONDS_PER_DAY,
)

logger = logging.getLogger(__name__)

# (date, now) -> phrase without the " ago" suffix
RelativeFn = Callable[[datetime, datetime], str]


def _as_datetime(value: date_type, tz: tzinfo | None = None) -> datetime:
    """Plain dates become midnight in ``tz``; datetimes pass through."""
    if isinstance(value, datetime):
        return value
    return datetime.combine(value, time(), tz)


def _now_for(dt: datetime) -> datetime:
    return datetime.now(dt.tzinfo) if dt.tzinfo else datetime.now()


def _round(value: float) -> int:
    return int(value + 0.5)


def _plural(count: int, word: str) -> str:
    return f"{count} {word}" if count == 1 else f"{count} {word}s"


def distance_of_time_in_words(start: date_type, end: date_type) -> str:
    """Describe the distance between two instants, e.g. "about 2 hours"."""
    end_dt = _as_datetime(end, getattr(start, "tzinfo", None))
    start_dt = _as_datetime(start, end_dt.tzinfo)
    seconds = abs(int((end_dt - start_dt).total_seconds()))
    minutes = _round(seconds / 60)

    if minutes == 0:
        return "less than a minute"
    if minutes < 45:
        return _plural(minutes, "minute")
    if minutes < 90:
        return "about 1 hour"
    if minutes < MINUTES_PER_DAY:
        return f"about {_plural(_round(minutes / MINUTES_PER_HOUR), 'hour')}"
    if minutes < 2520:
        return "1 day"
    if minutes < MINUTES_PER_MONTH:
        return _plural(_round(minutes / MINUTES_PER_DAY), "day")
    if minutes < 2 * MINUTES_PER_MONTH:
        return "about 1 month"
    if minutes < MINUTES_PER_YEAR:
        return _plural(_round(minutes / MINUTES_PER_MONTH), "month")

    years, remainder = divmod(minutes, MINUTES_PER_YEAR)
    if remainder < MINUTES_PER_QUARTER_YEAR:
        return f"about {_plural(years, 'year')}"
    if remainder < 3 * MINUTES_PER_QUARTER_YEAR:
        return f"over {_plural(years, 'year')}"
    return f"almost {_plural(years + 1, 'year')}"


def time_ago_in_words(value: date_type, now: datetime | None = None) -> str:
    """Distance between ``value`` and now, without any suffix."""
    dt = _as_datetime(value, now.tzinfo if now is not None else None)
    return distance_of_time_in_words(dt, now if now is not None else _now_for(dt))


def _default_strftime(dt: datetime, fmt: str) -> str:
    # %e (space-padded day) is not portable; expand it before strftime
    fmt = fmt.replace("%e", f"{dt.day:>2}")
    return dt.strftime(fmt).replace("  ", " ")


def time_ago_in_words_or_date(
    value: date_type | None,
    short_format: str | None = None,
    long_format: str | None = None,
    *,
    now: datetime | None = None,
    relative: RelativeFn | None = None,
) -> str | None:
    """Describe ``value`` in words when under a week old, else as a calendar date.

    The year is shown only when it differs from the current year.

    Args:
        value: A ``datetime`` or ``date``; ``None`` yields ``None``.
        short_format: strftime override for dates in the current year.
        long_format: strftime override for dates in other years.
        now: Reference instant; read from the clock once when omitted.
        relative: Phrase builder for recent dates, called as
            ``relative(value, now)``. Defaults to ``time_ago_in_words``.

    A plain ``date`` is taken as midnight in the zone of ``now``. Naive and
    aware datetimes cannot be mixed; ``TypeError`` propagates.
    """
    if value is None:
        return None

    dt = _as_datetime(value, now.tzinfo if now is not None else None)
    if now is None:
        now = _now_for(dt)

    age_days = int((now - dt).total_seconds()) / SECONDS_PER_DAY
    if age_days < RELATIVE_CUTOVER_DAYS:
        if age_days < 0:
            logger.debug("Date %s is in the future relative to %s", dt, now)
        phrase = (relative or time_ago_in_words)(dt, now)
        return phrase + " ago"

    if dt.year == now.year:
        fmt = short_format or settings.short_format
        return dt.strftime(fmt) if fmt else _default_strftime(dt, DEFAULT_SHORT_FORMAT)

    fmt = long_format or settings.long_format
    return dt.strftime(fmt) if fmt else _default_strftime(dt, DEFAULT_LONG_FORMAT)
