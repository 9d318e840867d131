# SPDX-License-Identifier: MIT

from typing import Optional

from daygrid.model.grid import Cell, Grid, Row

BLANK_CHAR = " "
LABEL_COLUMN_CHAR = "|"


def get_cell_template(char: str = BLANK_CHAR) -> Cell:
    return {
        "char": char,
        "style": None,
        "occupied": False,
        "overlap": False,
        "elapsed": False,
        "label": None,
    }


def get_row_template(width: int, day: Optional[int], label: str) -> Row:
    cells = [get_cell_template(LABEL_COLUMN_CHAR)]
    cells.extend(get_cell_template() for _ in range(width - 1))
    return {
        "day": day,
        "label": label,
        "cells": cells,
    }


def get_grid_template(
    day_start_offset_minutes: int, quantum_minutes: int, now: Optional[int]
) -> Grid:
    return {
        "day_start_offset_minutes": day_start_offset_minutes,
        "quantum_minutes": quantum_minutes,
        "now": now,
        "rows": [],
        "regions": [],
    }
