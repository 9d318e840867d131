# SPDX-License-Identifier: MIT

"""
Conversion of raw activity records into canonical intervals.

A canonical interval is a ``(start, end, label, style)`` record expressed in
minutes since the epoch. Records that cannot be placed on the timeline are
dropped rather than reported: unrecognized kinds, missing start fields, and
durations that stay negative after the midnight fold.
"""

import logging
from typing import Iterable, Optional

from daygrid.model.activity import Activity, ActivityKind
from daygrid.model.interval import Interval
from daygrid.time import MINUTES_PER_DAY

logger = logging.getLogger(__name__)

DEFAULT_ACTIVITY_KINDS: tuple[str, ...] = (
    ActivityKind.SCHEDULED,
    ActivityKind.CLOCKED,
    ActivityKind.TIMED,
)


def _is_int(value: object) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


def _start_minutes(activity: Activity) -> Optional[int]:
    absolute_day = activity.get("absolute_day")
    hour_minute = activity.get("hour_minute")
    if not _is_int(absolute_day) or not isinstance(hour_minute, tuple | list):
        return None
    if len(hour_minute) != 2:
        return None

    hour, minute = hour_minute
    if not _is_int(hour) or not _is_int(minute):
        return None
    if hour < 0 or hour > 23 or minute < 0 or minute > 59:
        return None

    return absolute_day * MINUTES_PER_DAY + hour * 60 + minute  # type: ignore[operator]


def fold_duration(
    duration_minutes: Optional[int | float],
    default_duration_minutes: Optional[int] = None,
) -> int | float:
    """
    Resolve the effective duration of an activity.

    A missing duration falls back to ``default_duration_minutes`` and then to
    zero. A negative duration encodes an activity that crosses midnight and is
    shifted forward by one day's worth of minutes.
    """
    duration = duration_minutes
    if duration is None:
        duration = default_duration_minutes
    if duration is None:
        duration = 0
    if duration < 0:
        duration += MINUTES_PER_DAY
    return duration


def normalize_activity(
    activity: Activity,
    default_duration_minutes: Optional[int] = None,
    activity_kinds: Iterable[str] = DEFAULT_ACTIVITY_KINDS,
) -> Optional[Interval]:
    """
    Convert one raw activity into a canonical interval.

    Args:
        activity: The raw activity record
        default_duration_minutes: Duration used when the activity has none
        activity_kinds: Kinds admitted onto the timeline

    Returns:
        The canonical interval, or None if the activity is filtered out
    """
    kind = activity.get("kind")
    if kind not in activity_kinds:
        logger.debug("skipping activity %r: kind %r not recognized", activity, kind)
        return None

    start = _start_minutes(activity)
    if start is None:
        logger.debug("skipping activity %r: missing or invalid start", activity)
        return None
    if start < 0:
        logger.debug("skipping activity %r: start before epoch", activity)
        return None

    duration_minutes = activity.get("duration_minutes")
    if duration_minutes is not None and (
        isinstance(duration_minutes, bool)
        or not isinstance(duration_minutes, int | float)
    ):
        logger.debug("skipping activity %r: invalid duration", activity)
        return None

    duration = fold_duration(duration_minutes, default_duration_minutes)
    if duration < 0:
        logger.debug(
            "skipping activity %r: duration %s still negative after fold",
            activity,
            duration,
        )
        return None

    return {
        "start": start,
        "end": round(start + duration),
        "label": activity.get("label"),
        "style": activity.get("style"),
    }


def normalize_activities(
    activities: Iterable[Activity],
    default_duration_minutes: Optional[int] = None,
    activity_kinds: Iterable[str] = DEFAULT_ACTIVITY_KINDS,
) -> list[Interval]:
    """Normalize activities in order, dropping the ones that are filtered out."""
    kinds = tuple(activity_kinds)
    intervals: list[Interval] = []
    for activity in activities:
        interval = normalize_activity(activity, default_duration_minutes, kinds)
        if interval is not None:
            intervals.append(interval)
    return intervals


def sort_intervals(intervals: Iterable[Interval]) -> list[Interval]:
    """Return intervals in ascending start order, keeping ties in input order."""
    return sorted(intervals, key=lambda interval: interval["start"])
