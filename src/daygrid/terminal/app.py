# SPDX-License-Identifier: MIT

from typing import Annotated

import typer

from daygrid.logger import configure_logging
from daygrid.terminal import configuration
from daygrid.terminal.custom_typer import AliasedTyperGroup
from daygrid.terminal.timeline import show
from daygrid.view import state as view_state

app = typer.Typer(
    cls=AliasedTyperGroup,
    help="daygrid - multi-day activity timelines in the terminal",
    no_args_is_help=True,
)
app.add_typer(configuration.app, name="config, c")
app.command(name="show, sh")(show)


@app.callback()
def main_callback(
    no_header: Annotated[
        bool,
        typer.Option(
            "--no-header",
            "-nh",
            help="Suppress header output",
        ),
    ] = False,
    verbose: Annotated[
        bool,
        typer.Option(
            "--verbose",
            "-v",
            help="Log skipped activities and detected conflicts",
        ),
    ] = False,
) -> None:
    """
    daygrid - multi-day activity timelines in the terminal

    Global options that apply to all commands.
    """
    configure_logging(verbose)
    if no_header:
        view_state.set_show_header(False)


def run() -> None:
    app()
