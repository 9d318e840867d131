# SPDX-License-Identifier: MIT

from typing import Annotated, Optional

import typer
from rich.console import Console
from rich.table import Table

from daygrid import configuration
from daygrid.repository.configuration import CONFIGURATION_REPO
from daygrid.service.grid import OVERLAP_DETECTION_MODES, validate_layout_options
from daygrid.terminal.custom_typer import AliasedTyperGroup

app = typer.Typer(cls=AliasedTyperGroup, no_args_is_help=True)


@app.command("view, v")
def view() -> None:
    """Display current configuration settings."""
    config = CONFIGURATION_REPO.get_config()

    console = Console()
    table = Table()
    table.add_column("Setting", style="cyan")
    table.add_column("Value", style="magenta")

    table.add_row("day_start_offset_minutes", str(config["day_start_offset_minutes"]))
    table.add_row("quantum_minutes", str(config["quantum_minutes"]))
    table.add_row(
        "default_duration_minutes",
        str(config["default_duration_minutes"])
        if config["default_duration_minutes"] is not None
        else "None",
    )
    table.add_row("activity_kinds", ", ".join(config["activity_kinds"]))
    table.add_row("overlap_detection", config["overlap_detection"])
    table.add_row(
        "show_header",
        "✓ Enabled" if config["show_header"] else "✗ Disabled",
    )
    table.add_row(
        "show_legend",
        "✓ Enabled" if config.get("show_legend", True) else "✗ Disabled",
    )
    table.add_row(
        "random_color_for_activities",
        "✓ Enabled"
        if config.get("random_color_for_activities", False)
        else "✗ Disabled",
    )
    table.add_row("config_path", str(configuration.APP_CONFIG_PATH))

    console.print(table)


@app.command("set, s")
def set(
    day_start_offset: Annotated[
        Optional[int],
        typer.Option(
            "--offset",
            help="Minutes after midnight at which each timeline row starts",
        ),
    ] = None,
    quantum: Annotated[
        Optional[int],
        typer.Option(
            "--quantum",
            help="Minutes represented by one column (must divide 1440)",
        ),
    ] = None,
    default_duration: Annotated[
        Optional[int],
        typer.Option(
            "--default-duration",
            help="Duration in minutes for activities that have none",
        ),
    ] = None,
    remove_default_duration: Annotated[
        bool,
        typer.Option(
            "--remove-default-duration",
            help="Treat activities without a duration as points in time",
        ),
    ] = False,
    activity_kinds: Annotated[
        Optional[list[str]],
        typer.Option(
            "--kind",
            help="Activity kinds shown on the timeline (accepts multiple)",
        ),
    ] = None,
    overlap_detection: Annotated[
        Optional[str],
        typer.Option(
            "--overlap",
            help=f"Overlap detection: {' or '.join(OVERLAP_DETECTION_MODES)}",
        ),
    ] = None,
    show_header: Annotated[
        Optional[bool],
        typer.Option(
            "--show-header/--no-show-header",
            help="Enable/disable the header above the timeline",
        ),
    ] = None,
    show_legend: Annotated[
        Optional[bool],
        typer.Option(
            "--show-legend/--no-show-legend",
            help="Enable/disable the label legend below the timeline",
        ),
    ] = None,
    random_color_for_activities: Annotated[
        Optional[bool],
        typer.Option(
            "--random-color-for-activities/--no-random-color-for-activities",
            help="Enable/disable random colors for activities without a style",
        ),
    ] = None,
) -> None:
    """Update configuration settings."""
    config = CONFIGURATION_REPO.get_config()
    try:
        validate_layout_options(
            day_start_offset
            if day_start_offset is not None
            else config["day_start_offset_minutes"],
            quantum if quantum is not None else config["quantum_minutes"],
            overlap_detection
            if overlap_detection is not None
            else config["overlap_detection"],
        )
    except ValueError as e:
        raise typer.BadParameter(str(e))

    CONFIGURATION_REPO.update_config(
        day_start_offset_minutes=day_start_offset,
        quantum_minutes=quantum,
        default_duration_minutes=default_duration,
        remove_default_duration=remove_default_duration,
        activity_kinds=activity_kinds,
        overlap_detection=overlap_detection,
        show_header=show_header,
        show_legend=show_legend,
        random_color_for_activities=random_color_for_activities,
    )
    CONFIGURATION_REPO.flush()
