# SPDX-License-Identifier: MIT

import datetime
import logging
import re
from pathlib import Path
from typing import Any, Optional

import pendulum
from yaml import YAMLError, load

try:
    from yaml import CLoader as Loader
except ImportError:
    from yaml import Loader  # type: ignore[assignment]

from daygrid.color import get_random_color
from daygrid.model.activity import Activity
from daygrid.service.style import color_style, parse_style
from daygrid.template.activity import get_activity_template
from daygrid.time import (
    MINUTES_PER_DAY,
    date_from_str,
    date_to_absolute_day,
    datetime_from_local_str,
)

logger = logging.getLogger(__name__)

_TIME_P = re.compile(r"^(\d{1,2}):(\d{2})$")
_DURATION_P = re.compile(r"^(-?)(\d+):(\d{2})$")


class ActivityRepository:
    """
    Reads activities from a YAML file of the form::

        activities:
          - date: 2026-10-19
            time: "10:00"
            kind: scheduled
            duration: 60
            label: Standup
            style: cyan

    ``datetime: "YYYY-MM-DD HH:mm"`` may replace ``date`` and ``time``, and
    the raw ``absolute_day`` / ``hour_minute`` fields are accepted as is.
    Records that cannot be converted keep ``None`` start fields so the
    normalizer drops them.
    """

    def __init__(self, path: Path, random_color: bool = False) -> None:
        self.path = path
        self.random_color = random_color
        self._activities: Optional[list[Activity]] = None

    @property
    def activities(self) -> list[Activity]:
        if self._activities is None:
            self.__load_data()
        if self._activities is None:
            raise ValueError()
        return self._activities

    def __load_data(self) -> None:
        try:
            raw = load(self.path.read_text(), Loader=Loader)
        except YAMLError as e:
            raise ValueError(f"unable to parse activity file {self.path}: {e}") from e

        if not isinstance(raw, dict) or not isinstance(raw.get("activities"), list):
            raise ValueError(
                f"activity file {self.path} must contain an 'activities' list"
            )

        self._activities = []
        for raw_activity in raw["activities"]:
            if not isinstance(raw_activity, dict):
                logger.debug("skipping non-mapping activity record %r", raw_activity)
                continue
            self._activities.append(
                self.__convert_activity_for_deserialization(raw_activity)
            )

    def __convert_activity_for_deserialization(
        self, raw_activity: dict[str, Any]
    ) -> Activity:
        activity = get_activity_template()
        activity["kind"] = raw_activity.get("kind")
        activity["label"] = (
            str(raw_activity["label"]) if raw_activity.get("label") is not None else None
        )
        activity["duration_minutes"] = _parse_duration(raw_activity.get("duration"))

        if "absolute_day" in raw_activity or "hour_minute" in raw_activity:
            activity["absolute_day"] = raw_activity.get("absolute_day")
            hour_minute = raw_activity.get("hour_minute")
            if isinstance(hour_minute, list | tuple):
                activity["hour_minute"] = tuple(hour_minute)  # type: ignore[assignment]
        elif "datetime" in raw_activity:
            start = _parse_datetime(raw_activity["datetime"])
            if start is not None:
                activity["absolute_day"] = date_to_absolute_day(start.date())
                activity["hour_minute"] = (start.hour, start.minute)
        else:
            date = _parse_date(raw_activity.get("date"))
            hour_minute = _parse_time(raw_activity.get("time"))
            if date is not None and hour_minute is not None:
                activity["absolute_day"] = date_to_absolute_day(date)
                activity["hour_minute"] = hour_minute

        style = parse_style(raw_activity.get("style"))
        if style is None and self.random_color:
            style = color_style(get_random_color())
        activity["style"] = style

        return activity

    def get_all_activities(self) -> list[Activity]:
        return list(self.activities)


def _parse_date(value: Any) -> Optional[pendulum.Date]:
    if isinstance(value, datetime.datetime):
        return pendulum.instance(value, tz="local").date()
    if isinstance(value, datetime.date):
        return pendulum.date(value.year, value.month, value.day)
    if isinstance(value, str):
        try:
            return date_from_str(value)
        except ValueError:
            return None
    return None


def _parse_time(value: Any) -> Optional[tuple[int, int]]:
    # YAML 1.1 reads an unquoted 10:30 as the base-60 integer 630
    if isinstance(value, int) and not isinstance(value, bool):
        if 0 <= value < MINUTES_PER_DAY:
            return (value // 60, value % 60)
        return None
    if isinstance(value, str):
        time_match = _TIME_P.match(value.strip())
        if time_match:
            return (int(time_match.group(1)), int(time_match.group(2)))
    return None


def _parse_datetime(value: Any) -> Optional[pendulum.DateTime]:
    if isinstance(value, datetime.datetime):
        return pendulum.instance(value, tz="local").in_tz("local")
    if isinstance(value, str):
        try:
            return datetime_from_local_str(value)
        except ValueError:
            return None
    return None


def _parse_duration(value: Any) -> Any:
    """Read ``H:mm`` strings as minutes; anything else is passed through."""
    if isinstance(value, str):
        duration_match = _DURATION_P.match(value.strip())
        if duration_match:
            minutes = int(duration_match.group(2)) * 60 + int(duration_match.group(3))
            return -minutes if duration_match.group(1) else minutes
    return value
