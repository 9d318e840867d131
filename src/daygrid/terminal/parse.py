# SPDX-License-Identifier: MIT

from typing import Optional

import pendulum
import typer

from daygrid.time import datetime_from_local_str, now_local


def parse_now(now_param: Optional[str]) -> Optional[pendulum.DateTime]:
    """
    Parse the ``--now`` option.

    Accepts ``now``/``n`` for the real clock, ``none`` to disable elapsed
    shading, or a local ``YYYY-MM-DD HH:mm`` datetime.
    """
    if now_param is None:
        return None

    value = now_param.strip()
    if value in ("now", "n"):
        return now_local()
    if value == "none":
        return None
    try:
        return datetime_from_local_str(value)
    except ValueError:
        raise typer.BadParameter(
            f"expected 'now', 'none' or YYYY-MM-DD HH:mm, got '{now_param}'"
        )
