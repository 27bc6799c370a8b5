from __future__ import annotations

import math
from datetime import date, datetime, time, timedelta, tzinfo
from typing import Optional

from .exceptions import InvalidRangeError, RangeTooLargeError
from .models import DateWindow


DEFAULT_HOURS_BACK = 24
MAX_HOURS_BACK = 8760
MAX_RANGE = timedelta(days=365)
DEFAULT_RANGE_DAYS = 30


def _format_day(d: date) -> str:
    return d.strftime("%B %d, %Y")


def _at(d: date, t: time, tz: Optional[tzinfo]) -> datetime:
    if tz is not None:
        return datetime.combine(d, t, tzinfo=tz)
    # naive -> local time
    return datetime.combine(d, t).astimezone()


def describe_hours(hours: int) -> str:
    if hours == 24:
        return "in the last 24 hours"
    if hours < 24:
        return f"in the last {hours} hours"
    if hours % 24 == 0:
        return f"in the last {hours // 24} days"
    return f"in the last {hours} hours"


def _total_days(start: datetime, end: datetime) -> int:
    return math.ceil((end - start) / timedelta(days=1))


def resolve_date_window(
    *,
    hours_back: Optional[int] = None,
    single_date: Optional[date] = None,
    start_date: Optional[date] = None,
    end_date: Optional[date] = None,
    now: Optional[datetime] = None,
    tz: Optional[tzinfo] = None,
) -> DateWindow:
    """
    Resolve exactly one date mode into a DateWindow.

    Modes (mutually exclusive):
    - hours_back: [now - hours_back, now]
    - single_date: that calendar day, [midnight, next midnight)
    - start_date and/or end_date: whole days; end defaults to today, start to
      end - 30 days
    With no mode given, hours_back defaults to 24.

    `tz` selects the calendar used for day boundaries; None means local time.
    `now` defaults to the current time in that zone.

    Raises InvalidRangeError for conflicting modes, an out-of-range hours_back or a
    start after the end, and RangeTooLargeError for spans over 365 days.
    """
    if now is None:
        now = datetime.now(tz) if tz is not None else datetime.now().astimezone()
    elif now.tzinfo is None:
        now = now.replace(tzinfo=tz) if tz is not None else now.astimezone()

    modes = [
        hours_back is not None,
        single_date is not None,
        start_date is not None or end_date is not None,
    ]
    if sum(modes) > 1:
        raise InvalidRangeError(
            "Use only one of: hours back, a single date, or a start/end date range"
        )

    if single_date is not None:
        start = _at(single_date, time.min, tz)
        end = _at(single_date + timedelta(days=1), time.min, tz)
        description = f"on {_format_day(single_date)}"
    elif start_date is not None or end_date is not None:
        today = now.astimezone(tz).date() if tz is not None else now.astimezone().date()
        last_day = end_date or today
        first_day = start_date or (last_day - timedelta(days=DEFAULT_RANGE_DAYS))
        start = _at(first_day, time.min, tz)
        end = _at(last_day, time.max, tz)
        description = f"from {_format_day(first_day)} to {_format_day(last_day)}"
    else:
        hours = DEFAULT_HOURS_BACK if hours_back is None else int(hours_back)
        if not 1 <= hours <= MAX_HOURS_BACK:
            raise InvalidRangeError(
                f"Hours back must be between 1 and {MAX_HOURS_BACK}, got {hours}"
            )
        start = now - timedelta(hours=hours)
        end = now
        description = describe_hours(hours)

    if start > end:
        raise InvalidRangeError(
            f"Start date ({start.date()}) is after end date ({end.date()})"
        )
    if end - start > MAX_RANGE:
        raise RangeTooLargeError(
            f"Date range cannot exceed {MAX_RANGE.days} days "
            f"(requested {_total_days(start, end)} days)"
        )

    return DateWindow(
        start=start,
        end=end,
        description=description,
        total_days=_total_days(start, end),
    )
