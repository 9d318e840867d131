# SPDX-License-Identifier: MIT

from typing import Optional

import pendulum

MINUTES_PER_DAY = 1440

EPOCH_DATE = pendulum.date(1970, 1, 1)


def now_local() -> pendulum.DateTime:
    return pendulum.now("local")


def date_to_absolute_day(date: pendulum.Date) -> int:
    """Days elapsed since 1970-01-01 for a calendar date."""
    return date.toordinal() - EPOCH_DATE.toordinal()


def absolute_day_to_date(absolute_day: int) -> pendulum.Date:
    return EPOCH_DATE.add(days=absolute_day)


def datetime_to_minutes(datetime: pendulum.DateTime) -> int:
    """Minutes since the local epoch for a datetime, read in local time."""
    local = datetime.in_tz("local")
    return (
        date_to_absolute_day(local.date()) * MINUTES_PER_DAY
        + local.hour * 60
        + local.minute
    )


def datetime_to_minutes_optional(
    datetime: Optional[pendulum.DateTime],
) -> Optional[int]:
    if datetime is None:
        return None
    return datetime_to_minutes(datetime)


def now_minutes() -> int:
    return datetime_to_minutes(now_local())


def minute_of_day_to_str(minute_of_day: int) -> str:
    minute_of_day = minute_of_day % MINUTES_PER_DAY
    return f"{minute_of_day // 60:02d}:{minute_of_day % 60:02d}"


def absolute_day_to_display_str(absolute_day: int) -> str:
    return absolute_day_to_date(absolute_day).format("ddd MM-DD")


def date_from_str(date: str) -> pendulum.Date:
    return datetime_from_local_str(date).date()


def datetime_from_local_str(datetime: str) -> pendulum.DateTime:
    parsed = pendulum.parse(datetime, tz="local")
    if not isinstance(parsed, pendulum.DateTime):
        raise ValueError(f"not a date or datetime: {datetime!r}")
    return parsed
