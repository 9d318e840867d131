# SPDX-License-Identifier: MIT

from typing import Optional, TypedDict

from daygrid.model.style import Style


class Interval(TypedDict):
    start: int
    end: int
    label: Optional[str]
    style: Optional[Style]
