# SPDX-License-Identifier: MIT

from daygrid.model.activity import Activity


def get_activity_template() -> Activity:
    return {
        "absolute_day": None,
        "hour_minute": None,
        "kind": None,
        "duration_minutes": None,
        "label": None,
        "style": None,
    }
