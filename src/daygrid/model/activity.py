# SPDX-License-Identifier: MIT

from typing import Optional, TypedDict

from daygrid.model.style import Style


class ActivityKind:
    SCHEDULED = "scheduled"
    CLOCKED = "clocked"
    TIMED = "timed"


class Activity(TypedDict):
    absolute_day: Optional[int]
    hour_minute: Optional[tuple[int, int]]
    kind: Optional[str]
    duration_minutes: Optional[int | float]
    label: Optional[str]
    style: Optional[Style]
