# SPDX-License-Identifier: MIT

"""
Layout of canonical intervals onto a multi-day character grid.

Row 0 of the grid is the header carrying hour labels for the display window.
Every following row is one calendar day, created strictly in ascending day
order while the intervals are walked once from earliest to latest start.
Column 0 of every row is the label column; column ``c >= 1`` covers the
quantum starting ``(c - 1) * quantum_minutes`` minutes after the display
window opens, which is ``day_start_offset_minutes`` after midnight.

Overlaps are detected while painting. With the ``endpoints`` policy only the
first and the one-past-last column of a new region are sampled for cells that
an earlier region already occupies; a region nested strictly inside occupied
cells without touching either sampled column is not reported. The ``full``
policy scans every column of the new region instead.
"""

import logging
from copy import deepcopy
from typing import Iterable, Optional

from daygrid.color import CONFLICT_STYLE_NAME
from daygrid.model.grid import Grid, Region, Row
from daygrid.model.interval import Interval
from daygrid.model.style import Style, StyleKind
from daygrid.template.grid import get_grid_template, get_row_template
from daygrid.time import (
    MINUTES_PER_DAY,
    absolute_day_to_display_str,
    minute_of_day_to_str,
)

logger = logging.getLogger(__name__)

DEFAULT_DAY_START_OFFSET_MINUTES = 270
DEFAULT_QUANTUM_MINUTES = 10

OVERLAP_ENDPOINTS = "endpoints"
OVERLAP_FULL = "full"
OVERLAP_DETECTION_MODES = (OVERLAP_ENDPOINTS, OVERLAP_FULL)

OCCUPIED_CHAR = "█"
CONFLICT_CHAR = "▓"
HEADER_LABEL_PREFIX = "|"

CONFLICT_STYLE: Style = {"kind": StyleKind.NAMED_STYLE, "value": CONFLICT_STYLE_NAME}


class PreconditionError(ValueError):
    """Raised when intervals reach the renderer out of ascending start order."""

    def __init__(self, previous: Interval, current: Interval) -> None:
        self.previous = previous
        self.current = current
        super().__init__(
            f"intervals must be sorted by ascending start: {current['start']} "
            f"({current['label']!r}) follows {previous['start']} "
            f"({previous['label']!r})"
        )


def columns_per_day(quantum_minutes: int = DEFAULT_QUANTUM_MINUTES) -> int:
    return MINUTES_PER_DAY // quantum_minutes


def row_width(quantum_minutes: int = DEFAULT_QUANTUM_MINUTES) -> int:
    """Cells per row: one per quantum plus the label column."""
    return columns_per_day(quantum_minutes) + 1


def column_index(
    minute_of_day: int,
    day_start_offset_minutes: int = DEFAULT_DAY_START_OFFSET_MINUTES,
    quantum_minutes: int = DEFAULT_QUANTUM_MINUTES,
) -> int:
    """
    Map a minute of the day to its column in a day row.

    The display window opens ``day_start_offset_minutes`` after midnight and
    spans exactly one day, so minutes before the offset wrap to the end of
    the row.
    """
    return 1 + (
        (minute_of_day - day_start_offset_minutes) % MINUTES_PER_DAY
    ) // quantum_minutes


def column_start_minute(
    column: int,
    day_start_offset_minutes: int = DEFAULT_DAY_START_OFFSET_MINUTES,
    quantum_minutes: int = DEFAULT_QUANTUM_MINUTES,
) -> int:
    """Minute of the day at which a column's quantum begins."""
    return (day_start_offset_minutes + (column - 1) * quantum_minutes) % MINUTES_PER_DAY


def validate_layout_options(
    day_start_offset_minutes: int,
    quantum_minutes: int,
    overlap_detection: str = OVERLAP_ENDPOINTS,
) -> None:
    if quantum_minutes <= 0 or MINUTES_PER_DAY % quantum_minutes != 0:
        raise ValueError(
            f"quantum_minutes must be a positive divisor of {MINUTES_PER_DAY}, "
            f"got {quantum_minutes}"
        )
    if day_start_offset_minutes < 0 or day_start_offset_minutes >= MINUTES_PER_DAY:
        raise ValueError(
            f"day_start_offset_minutes must be between 0 and {MINUTES_PER_DAY - 1}, "
            f"got {day_start_offset_minutes}"
        )
    if overlap_detection not in OVERLAP_DETECTION_MODES:
        raise ValueError(
            f"overlap_detection must be one of {', '.join(OVERLAP_DETECTION_MODES)}, "
            f"got {overlap_detection!r}"
        )


def region_columns(
    interval: Interval,
    day_start_offset_minutes: int = DEFAULT_DAY_START_OFFSET_MINUTES,
    quantum_minutes: int = DEFAULT_QUANTUM_MINUTES,
) -> tuple[int, int]:
    """
    Compute the half-open column range ``[start_column, end_column)`` of an
    interval within its day row.

    An end that wraps before the start column, or an interval lasting a full
    day or more, is clamped to the end of the row. A region narrower than one
    column is widened to one column.
    """
    width = row_width(quantum_minutes)
    start_column = column_index(
        interval["start"] % MINUTES_PER_DAY, day_start_offset_minutes, quantum_minutes
    )
    end_column = column_index(
        interval["end"] % MINUTES_PER_DAY, day_start_offset_minutes, quantum_minutes
    )

    if (
        interval["end"] - interval["start"] >= MINUTES_PER_DAY
        or end_column < start_column
    ):
        end_column = width
    if end_column <= start_column:
        end_column = start_column + 1

    return start_column, end_column


def build_header_row(
    day_start_offset_minutes: int = DEFAULT_DAY_START_OFFSET_MINUTES,
    quantum_minutes: int = DEFAULT_QUANTUM_MINUTES,
) -> Row:
    """
    Build the header row with ``|HH:MM`` labels at every hour boundary.

    A label is skipped when the previous one has not finished yet, which
    happens for coarse quanta.
    """
    width = row_width(quantum_minutes)
    row = get_row_template(width, None, "")
    cells = row["cells"]

    next_free_column = 1
    for column in range(1, width):
        minute_of_day = column_start_minute(
            column, day_start_offset_minutes, quantum_minutes
        )
        if minute_of_day % 60 != 0 or column < next_free_column:
            continue

        label = HEADER_LABEL_PREFIX + minute_of_day_to_str(minute_of_day)
        for offset, char in enumerate(label):
            if column + offset >= width:
                break
            cells[column + offset]["char"] = char
        next_free_column = column + len(label)

    return row


def _shade_elapsed(
    row: Row, now: int, day_start_offset_minutes: int, quantum_minutes: int
) -> None:
    minute_of_day = now % MINUTES_PER_DAY
    now_column = column_index(minute_of_day, day_start_offset_minutes, quantum_minutes)
    # Before the offset only the wrapped midnight-to-now tail of the row has passed
    first_column = 1
    if minute_of_day < day_start_offset_minutes:
        first_column = column_index(0, day_start_offset_minutes, quantum_minutes)

    for cell in row["cells"][first_column : now_column + 1]:
        cell["elapsed"] = True


def _new_day_row(
    day: int,
    now: Optional[int],
    day_start_offset_minutes: int,
    quantum_minutes: int,
) -> Row:
    row = get_row_template(
        row_width(quantum_minutes), day, absolute_day_to_display_str(day)
    )
    if now is not None and now // MINUTES_PER_DAY == day:
        _shade_elapsed(row, now, day_start_offset_minutes, quantum_minutes)
    return row


def _is_conflict(
    row: Row, start_column: int, end_column: int, overlap_detection: str
) -> bool:
    cells = row["cells"]
    if overlap_detection == OVERLAP_FULL:
        return any(cell["occupied"] for cell in cells[start_column:end_column])

    sampled = [start_column]
    if end_column < len(cells):
        sampled.append(end_column)
    return any(cells[column]["occupied"] for column in sampled)


def render_grid(
    intervals: Iterable[Interval],
    now: Optional[int] = None,
    day_start_offset_minutes: int = DEFAULT_DAY_START_OFFSET_MINUTES,
    quantum_minutes: int = DEFAULT_QUANTUM_MINUTES,
    overlap_detection: str = OVERLAP_ENDPOINTS,
) -> Grid:
    """
    Paint canonical intervals onto a fresh grid.

    Args:
        intervals: Canonical intervals sorted by ascending start
        now: Current instant in minutes since the epoch, used for elapsed
            shading. No shading is applied when None.
        day_start_offset_minutes: Minutes after midnight at which each row opens
        quantum_minutes: Minutes represented by one column
        overlap_detection: "endpoints" to sample the region boundaries only,
            "full" to scan every column of the region

    Returns:
        The grid: header row, one row per day from the first to the last
        interval's day, and the side table of painted regions

    Raises:
        PreconditionError: If an interval starts before its predecessor
        ValueError: If the options are invalid or an interval ends before it starts
    """
    validate_layout_options(day_start_offset_minutes, quantum_minutes, overlap_detection)

    grid = get_grid_template(day_start_offset_minutes, quantum_minutes, now)
    header = build_header_row(day_start_offset_minutes, quantum_minutes)
    if now is not None:
        _shade_elapsed(header, now, day_start_offset_minutes, quantum_minutes)
    grid["rows"].append(header)

    current_day: Optional[int] = None
    current_line = 1
    previous: Optional[Interval] = None

    for interval in intervals:
        if previous is not None and interval["start"] < previous["start"]:
            raise PreconditionError(previous, interval)
        if interval["end"] < interval["start"]:
            raise ValueError(
                f"interval {interval['label']!r} ends at {interval['end']} "
                f"before it starts at {interval['start']}"
            )
        previous = interval

        interval_day = interval["start"] // MINUTES_PER_DAY

        if current_day is None:
            current_day = interval_day
            grid["rows"].append(
                _new_day_row(
                    current_day, now, day_start_offset_minutes, quantum_minutes
                )
            )

        while current_day < interval_day:
            current_day += 1
            current_line += 1
            grid["rows"].append(
                _new_day_row(
                    current_day, now, day_start_offset_minutes, quantum_minutes
                )
            )

        row = grid["rows"][current_line]
        start_column, end_column = region_columns(
            interval, day_start_offset_minutes, quantum_minutes
        )

        overlap = _is_conflict(row, start_column, end_column, overlap_detection)
        # Each region owns its style so a returned grid shares nothing
        style = deepcopy(CONFLICT_STYLE if overlap else interval["style"])
        if overlap:
            logger.debug(
                "conflict on %s columns %d-%d: %r",
                row["label"],
                start_column,
                end_column,
                interval["label"],
            )

        for cell in row["cells"][start_column:end_column]:
            cell["char"] = CONFLICT_CHAR if overlap else OCCUPIED_CHAR
            cell["style"] = style
            cell["occupied"] = True
            cell["overlap"] = overlap
            if interval["label"] is not None:
                cell["label"] = interval["label"]

        grid["regions"].append(
            {
                "row_index": current_line,
                "start_column": start_column,
                "end_column": end_column,
                "start": interval["start"],
                "end": interval["end"],
                "style": style,
                "overlap": overlap,
                "label": interval["label"],
            }
        )

    return grid


def regions_for_row(grid: Grid, row_index: int) -> list[Region]:
    """Regions painted on one row, in painting order."""
    return [region for region in grid["regions"] if region["row_index"] == row_index]
