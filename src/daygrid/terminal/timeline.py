# SPDX-License-Identifier: MIT

from pathlib import Path
from typing import Annotated, Optional

import typer
from rich.console import Console
from rich.markup import escape

from daygrid.repository.activity import ActivityRepository
from daygrid.repository.configuration import CONFIGURATION_REPO
from daygrid.service.timeline import build_timeline
from daygrid.terminal.parse import parse_now
from daygrid.time import datetime_to_minutes_optional
from daygrid.view import state as view_state
from daygrid.view.timeline import timeline_view


def show(
    file: Annotated[
        Path,
        typer.Argument(
            exists=True,
            dir_okay=False,
            readable=True,
            help="YAML file with an 'activities' list",
        ),
    ],
    now: Annotated[
        str,
        typer.Option(
            "--now",
            "-n",
            help="valid inputs: now, none, YYYY-MM-DD HH:mm",
        ),
    ] = "now",
    day_start_offset: Annotated[
        Optional[int],
        typer.Option("--offset", help="Minutes after midnight at which rows start"),
    ] = None,
    quantum: Annotated[
        Optional[int],
        typer.Option("--quantum", "-q", help="Minutes represented by one column"),
    ] = None,
    default_duration: Annotated[
        Optional[int],
        typer.Option(
            "--default-duration",
            "-d",
            help="Duration in minutes for activities that have none",
        ),
    ] = None,
    overlap_detection: Annotated[
        Optional[str],
        typer.Option("--overlap", help="Overlap detection: endpoints or full"),
    ] = None,
    plain: Annotated[
        bool, typer.Option("--plain", "-p", help="Print unstyled text")
    ] = False,
    no_legend: Annotated[
        bool, typer.Option("--no-legend", help="Suppress the label legend")
    ] = False,
) -> None:
    """
    render activities from FILE as a multi-day timeline
    """
    config = CONFIGURATION_REPO.get_config()
    console = Console()

    now_minutes = datetime_to_minutes_optional(parse_now(now))
    repository = ActivityRepository(
        file, random_color=config.get("random_color_for_activities", False)
    )

    try:
        grid = build_timeline(
            repository.get_all_activities(),
            now=now_minutes,
            day_start_offset_minutes=(
                day_start_offset
                if day_start_offset is not None
                else config["day_start_offset_minutes"]
            ),
            quantum_minutes=(
                quantum if quantum is not None else config["quantum_minutes"]
            ),
            default_duration_minutes=(
                default_duration
                if default_duration is not None
                else config["default_duration_minutes"]
            ),
            activity_kinds=config["activity_kinds"],
            overlap_detection=(
                overlap_detection
                if overlap_detection is not None
                else config["overlap_detection"]
            ),
        )
    except ValueError as e:
        console.print(f"[red]{escape(str(e))}[/red]")
        raise typer.Exit(1)

    if no_legend:
        view_state.set_show_legend(False)

    timeline_view(grid, console, sub_header=file.name, plain=plain)
