# SPDX-License-Identifier: MIT

import logging
from typing import Any, Optional

from rich.color import ColorParseError
from rich.errors import StyleSyntaxError
from rich.style import Style as RichStyle

from daygrid.color import DEFAULT_ACTIVITY_STYLE_NAME, THEME_STYLES
from daygrid.model.style import Style, StyleKind

logger = logging.getLogger(__name__)


def color_style(color: str) -> Style:
    return {"kind": StyleKind.COLOR_NAME, "value": color}


def named_style(name: str) -> Style:
    return {"kind": StyleKind.NAMED_STYLE, "value": name}


def structured_style(value: dict[str, Any]) -> Style:
    return {"kind": StyleKind.STRUCTURED, "value": dict(value)}


def parse_style(raw_style: Any) -> Optional[Style]:
    """
    Convert a loosely typed style into a tagged style.

    Args:
        raw_style: None, a theme name, a color name, a mapping of rich style
            attributes, or an already tagged style

    Returns:
        The tagged style, or None when no style was given or it is unusable
    """
    if raw_style is None:
        return None
    if isinstance(raw_style, str):
        if raw_style in THEME_STYLES:
            return named_style(raw_style)
        return color_style(raw_style)
    if isinstance(raw_style, dict):
        if set(raw_style.keys()) == {"kind", "value"} and raw_style["kind"] in (
            StyleKind.COLOR_NAME,
            StyleKind.STRUCTURED,
            StyleKind.NAMED_STYLE,
        ):
            return {"kind": raw_style["kind"], "value": raw_style["value"]}
        return structured_style(raw_style)

    logger.debug("ignoring unusable style %r", raw_style)
    return None


def _theme_style(name: str) -> RichStyle:
    return RichStyle.parse(THEME_STYLES[name])


def resolve_style(style: Optional[Style]) -> RichStyle:
    """
    Resolve a tagged style into a concrete rich style.

    Color names become the color of the painted cells, structured styles
    are passed to rich as keyword arguments, and named styles are looked up in
    the theme. Anything rich cannot parse falls back to the default activity
    style.
    """
    if style is None:
        return _theme_style(DEFAULT_ACTIVITY_STYLE_NAME)

    kind = style["kind"]
    value = style["value"]
    try:
        if kind == StyleKind.COLOR_NAME:
            return RichStyle.parse(str(value))
        if kind == StyleKind.STRUCTURED:
            return RichStyle(**value)
        if kind == StyleKind.NAMED_STYLE and value in THEME_STYLES:
            return _theme_style(value)
    except (ColorParseError, StyleSyntaxError, TypeError, ValueError) as e:
        logger.warning("unable to resolve style %r: %s", style, e)

    return _theme_style(DEFAULT_ACTIVITY_STYLE_NAME)
