"""Output toggles using context variables for thread-safe state management."""

# SPDX-License-Identifier: MIT

from contextvars import ContextVar

# Context variable for controlling header visibility above the timeline
# Default is True (show header)
_show_header_var: ContextVar[bool] = ContextVar("show_header", default=True)

# Context variable for controlling the label legend below the timeline
# Default is True (show legend)
_show_legend_var: ContextVar[bool] = ContextVar("show_legend", default=True)


def set_show_header(value: bool) -> None:
    """Set whether the header should be displayed above the timeline.

    Args:
        value: True to show the header, False to hide it
    """
    _show_header_var.set(value)


def get_show_header() -> bool:
    return _show_header_var.get()


def set_show_legend(value: bool) -> None:
    _show_legend_var.set(value)


def get_show_legend() -> bool:
    """Get whether labelled regions should be listed below the timeline.

    Returns:
        True if the legend should be shown, False otherwise
    """
    return _show_legend_var.get()
