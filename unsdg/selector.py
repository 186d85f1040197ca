import math
from numbers import Real
from typing import Optional

from .assets import asset_path_for
from .config import config
from .goals import LOGO, color_token_for, resolve_label
from .models import BadgeOptions, ColorSwatch, Image, RenderDescriptor
from .utils import as_bool, logger

DEFAULT_WIDTH = 200

def _default_width() -> float:
    width = config.get("badge.width", DEFAULT_WIDTH)
    return width if _valid_width(width) else DEFAULT_WIDTH

def _valid_width(width) -> bool:
    return (
        isinstance(width, Real)
        and not isinstance(width, bool)
        and math.isfinite(width)
        and width > 0
    )

def select_render(
    goal=None,
    color_only=None,
    width: Optional[float] = None,
    label: Optional[str] = ""
) -> RenderDescriptor:
    """Decides how a goal badge is drawn and gathers everything needed to draw it.

    Returns a ColorSwatch when ``color_only`` is set, otherwise an Image
    pointing at the goal's SVG artwork. ``None`` for goal, color_only or width
    means the configured default. Invalid input degrades; nothing here raises.
    """
    if goal is None:
        goal = config.get("badge.goal", LOGO)
    if color_only is None:
        color_only = config.get("badge.color_only", False)
    if width is None:
        width = _default_width()
    elif not _valid_width(width):
        logger.warning(f"Ignoring invalid width {width!r}; using default")
        width = _default_width()

    text = resolve_label(goal, label)
    token = color_token_for(goal)

    if as_bool(color_only):
        return ColorSwatch(width=width, color_token=token, label=f"{text} color only")
    return Image(src=asset_path_for(goal), width=width, label=text, color_token=token)

def select_for(options: BadgeOptions) -> RenderDescriptor:
    return select_render(options.goal, options.color_only, options.width, options.label)
