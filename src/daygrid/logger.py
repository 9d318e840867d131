# SPDX-License-Identifier: MIT

import logging

from rich.console import Console
from rich.logging import RichHandler

from daygrid.configuration import APP_NAME


def configure_logging(verbose: bool = False) -> None:
    """Attach a rich handler to the package logger, writing to stderr."""
    package_logger = logging.getLogger(APP_NAME)
    package_logger.setLevel(logging.DEBUG if verbose else logging.WARNING)

    for handler in list(package_logger.handlers):
        if isinstance(handler, RichHandler):
            package_logger.removeHandler(handler)

    package_logger.addHandler(
        RichHandler(
            console=Console(stderr=True),
            show_path=verbose,
            rich_tracebacks=True,
        )
    )
