# SPDX-License-Identifier: MIT

from typing import Iterable, Optional

from daygrid.model.activity import Activity
from daygrid.model.grid import Grid
from daygrid.service.grid import (
    DEFAULT_DAY_START_OFFSET_MINUTES,
    DEFAULT_QUANTUM_MINUTES,
    OVERLAP_ENDPOINTS,
    render_grid,
)
from daygrid.service.normalize import (
    DEFAULT_ACTIVITY_KINDS,
    normalize_activities,
    sort_intervals,
)


def build_timeline(
    activities: Iterable[Activity],
    now: Optional[int] = None,
    day_start_offset_minutes: int = DEFAULT_DAY_START_OFFSET_MINUTES,
    quantum_minutes: int = DEFAULT_QUANTUM_MINUTES,
    default_duration_minutes: Optional[int] = None,
    activity_kinds: Iterable[str] = DEFAULT_ACTIVITY_KINDS,
    overlap_detection: str = OVERLAP_ENDPOINTS,
) -> Grid:
    """
    Normalize raw activities, order them by start and render the grid.

    Args:
        activities: Raw activity records in any order
        now: Current instant in minutes since the epoch, or None for no shading
        day_start_offset_minutes: Minutes after midnight at which each row opens
        quantum_minutes: Minutes represented by one column
        default_duration_minutes: Duration for activities that have none
        activity_kinds: Kinds admitted onto the timeline
        overlap_detection: "endpoints" or "full"

    Returns:
        The rendered grid
    """
    intervals = sort_intervals(
        normalize_activities(activities, default_duration_minutes, activity_kinds)
    )
    return render_grid(
        intervals,
        now=now,
        day_start_offset_minutes=day_start_offset_minutes,
        quantum_minutes=quantum_minutes,
        overlap_detection=overlap_detection,
    )
