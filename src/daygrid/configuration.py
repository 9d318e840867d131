# SPDX-License-Identifier: MIT

from typing import NotRequired, Optional, TypedDict

import platformdirs

APP_NAME = "daygrid"

CONFIG_PATH = platformdirs.user_config_path(APP_NAME)
APP_CONFIG_PATH = CONFIG_PATH / "config.yaml"


class Configuration(TypedDict):
    day_start_offset_minutes: int
    quantum_minutes: int
    default_duration_minutes: Optional[int]
    activity_kinds: list[str]
    overlap_detection: str
    show_header: bool
    show_legend: NotRequired[bool]
    random_color_for_activities: NotRequired[bool]


def get_default_configuration() -> Configuration:
    return {
        "day_start_offset_minutes": 270,
        "quantum_minutes": 10,
        "default_duration_minutes": None,
        "activity_kinds": ["scheduled", "clocked", "timed"],
        "overlap_detection": "endpoints",
        "show_header": True,
        "show_legend": True,
        "random_color_for_activities": False,
    }
