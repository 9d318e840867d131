# SPDX-License-Identifier: MIT

from typing import Optional, TypedDict

from daygrid.model.style import Style


class Cell(TypedDict):
    char: str
    style: Optional[Style]
    occupied: bool
    overlap: bool
    elapsed: bool
    label: Optional[str]


class Row(TypedDict):
    day: Optional[int]
    label: str
    cells: list[Cell]


class Region(TypedDict):
    row_index: int
    start_column: int
    end_column: int
    start: int
    end: int
    style: Optional[Style]
    overlap: bool
    label: Optional[str]


class Grid(TypedDict):
    day_start_offset_minutes: int
    quantum_minutes: int
    now: Optional[int]
    rows: list[Row]
    regions: list[Region]
