# SPDX-License-Identifier: MIT

import random

# Named styles understood by the view layer
CONFLICT_STYLE_NAME = "conflict"
ELAPSED_STYLE_NAME = "elapsed"
DEFAULT_ACTIVITY_STYLE_NAME = "activity"

THEME_STYLES: dict[str, str] = {
    CONFLICT_STYLE_NAME: "bold red",
    ELAPSED_STYLE_NAME: "on grey23",
    DEFAULT_ACTIVITY_STYLE_NAME: "blue",
    "scheduled": "bright_cyan",
    "clocked": "bright_green",
    "timed": "bright_yellow",
}

HEADER_STYLE = "dim"
DAY_LABEL_STYLE = "sandy_brown"
GUTTER_SEPARATOR_STYLE = "bright_black"
LEGEND_CONFLICT_COLOR = "red"


def get_random_color() -> str:
    """Return a random color from the Rich color palette.

    These colors are chosen for good visibility as timeline backgrounds and
    leave red free for conflicts.
    """
    colors = [
        "green",
        "yellow",
        "blue",
        "magenta",
        "cyan",
        "bright_green",
        "bright_yellow",
        "bright_blue",
        "bright_magenta",
        "bright_cyan",
        "dark_orange",
        "purple",
        "deep_pink",
        "spring_green",
        "dark_violet",
        "gold",
        "orange",
        "pink",
    ]
    return random.choice(colors)
