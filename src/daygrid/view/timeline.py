# SPDX-License-Identifier: MIT

"""
Output boundary for rendered grids.

Two representations are produced from the same grid:
- plain text rows with the side table of regions, for hosts that apply their
  own highlighting
- a rich ``Text`` whose painted spans carry ``label``, ``overlap`` and
  ``row_index`` in their style meta, for terminal output and tooltip-aware hosts

Styles are resolved to concrete rich styles only here.
"""

from copy import deepcopy
from typing import Any, Optional

from rich.console import Console
from rich.style import Style as RichStyle
from rich.text import Text

from daygrid.color import (
    DAY_LABEL_STYLE,
    ELAPSED_STYLE_NAME,
    GUTTER_SEPARATOR_STYLE,
    HEADER_STYLE,
    LEGEND_CONFLICT_COLOR,
    THEME_STYLES,
)
from daygrid.model.grid import Cell, Grid, Region, Row
from daygrid.service.style import resolve_style
from daygrid.time import MINUTES_PER_DAY, minute_of_day_to_str
from daygrid.view.header import header
from daygrid.view.state import get_show_legend

GUTTER_WIDTH = 10


def _gutter(row: Row) -> str:
    return row["label"][: GUTTER_WIDTH - 1].ljust(GUTTER_WIDTH)


def grid_to_plain_rows(grid: Grid) -> list[str]:
    """Render every row as plain text, the header first."""
    return [
        _gutter(row) + "".join(cell["char"] for cell in row["cells"])
        for row in grid["rows"]
    ]


def grid_to_text(grid: Grid) -> tuple[list[str], list[Region]]:
    """
    Render a grid as plain text rows plus the region side table.

    Region columns index into the cells of a row, so the character of column
    ``c`` in row ``r`` is at ``rows[r][GUTTER_WIDTH + c]``.
    """
    return grid_to_plain_rows(grid), deepcopy(grid["regions"])


def _cell_style(cell: Cell, is_header: bool, row_index: int) -> RichStyle:
    if cell["occupied"]:
        style = resolve_style(cell["style"]) + RichStyle(
            meta={
                "label": cell["label"],
                "overlap": cell["overlap"],
                "row_index": row_index,
            }
        )
    elif is_header:
        style = RichStyle.parse(HEADER_STYLE)
    else:
        style = RichStyle()

    if cell["elapsed"]:
        style = style + RichStyle.parse(THEME_STYLES[ELAPSED_STYLE_NAME])
    return style


def _cell_key(cell: Cell) -> tuple[Any, ...]:
    style = cell["style"]
    style_key = None if style is None else (style["kind"], repr(style["value"]))
    return (
        style_key,
        cell["occupied"],
        cell["overlap"],
        cell["elapsed"],
        cell["label"],
    )


def _row_to_text(row: Row, row_index: int) -> Text:
    is_header = row["day"] is None
    line = Text()
    line.append(_gutter(row), style=DAY_LABEL_STYLE)

    cells = row["cells"]
    line.append(cells[0]["char"], style=GUTTER_SEPARATOR_STYLE)

    # Consecutive cells with identical attributes share one span
    run_start = 1
    for column in range(2, len(cells) + 1):
        if column < len(cells) and _cell_key(cells[column]) == _cell_key(
            cells[run_start]
        ):
            continue
        chars = "".join(cell["char"] for cell in cells[run_start:column])
        line.append(chars, style=_cell_style(cells[run_start], is_header, row_index))
        run_start = column

    return line


def grid_to_rich_text(grid: Grid) -> Text:
    """Render a grid as one rich Text, rows separated by newlines."""
    return Text("\n").join(
        _row_to_text(row, row_index) for row_index, row in enumerate(grid["rows"])
    )


def build_legend(grid: Grid) -> Text:
    """
    List every labelled region as ``day HH:MM-HH:MM label``.

    Conflicting regions are flagged in red.
    """
    legend = Text()
    rows = grid["rows"]
    for region in grid["regions"]:
        if region["label"] is None:
            continue

        if legend:
            legend.append("\n")
        start_str = minute_of_day_to_str(region["start"] % MINUTES_PER_DAY)
        end_str = minute_of_day_to_str(region["end"] % MINUTES_PER_DAY)
        legend.append(
            rows[region["row_index"]]["label"].ljust(GUTTER_WIDTH),
            style=DAY_LABEL_STYLE,
        )
        legend.append(f"{start_str}-{end_str} ", style=HEADER_STYLE)
        legend.append(region["label"], style=resolve_style(region["style"]))
        if region["overlap"]:
            legend.append(" (conflict)", style=LEGEND_CONFLICT_COLOR)
    return legend


def timeline_view(
    grid: Grid,
    console: Optional[Console] = None,
    sub_header: Optional[str] = None,
    plain: bool = False,
) -> None:
    """
    Print a rendered grid.

    Args:
        grid: The rendered grid
        console: Rich console for output (defaults to a new Console)
        sub_header: Optional sub-header shown under the application header
        plain: Print unstyled text rows instead of rich text
    """
    if console is None:
        console = Console()

    header(console, sub_header)

    if plain:
        for line in grid_to_plain_rows(grid):
            console.print(line, markup=False, highlight=False, soft_wrap=True)
    else:
        console.print(grid_to_rich_text(grid), soft_wrap=True)

    if get_show_legend():
        legend = build_legend(grid)
        if legend:
            console.print()
            console.print(legend, soft_wrap=True)
