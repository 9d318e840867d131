# SPDX-License-Identifier: MIT

from typing import Any, TypedDict


class StyleKind:
    COLOR_NAME = "color_name"
    STRUCTURED = "structured"
    NAMED_STYLE = "named_style"


class Style(TypedDict):
    kind: str
    value: Any
