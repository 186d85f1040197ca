import os
from typing import Any, Dict, Iterable, Optional

from jinja2 import Environment, FileSystemLoader, select_autoescape

from .config import config
from .goals import COLOR_TOKEN_PREFIX, known_goals
from .models import RenderDescriptor

TEMPLATE_DIR = os.path.join(os.path.dirname(__file__), "templates")
FALLBACK_COLOR = "white"

def _dim(value) -> str:
    """Formats a pixel dimension, dropping a redundant '.0'."""
    if isinstance(value, float) and value.is_integer():
        value = int(value)
    return str(value)

env = Environment(
    loader=FileSystemLoader(TEMPLATE_DIR),
    autoescape=select_autoescape(enabled_extensions=("html", "svg")),
    trim_blocks=True,
    lstrip_blocks=True,
    keep_trailing_newline=False,
)
env.filters["dim"] = _dim

def get_palette(palette: Optional[Dict[Any, str]] = None) -> Dict[str, str]:
    """Returns the goal colour palette with string keys."""
    if palette is None:
        palette = config.get("palette") or {}
    return {str(k): v for k, v in palette.items()}

def color_for(color_token: str, palette: Optional[Dict[Any, str]] = None) -> str:
    goal = color_token[len(COLOR_TOKEN_PREFIX):] if color_token.startswith(COLOR_TOKEN_PREFIX) else color_token
    return get_palette(palette).get(goal, FALLBACK_COLOR)

def render_html(descriptor: RenderDescriptor) -> str:
    """Renders a descriptor as the component's HTML fragment."""
    return env.get_template("badge.html").render(d=descriptor).strip()

def render_svg(descriptor: RenderDescriptor, palette: Optional[Dict[Any, str]] = None) -> str:
    """Renders a descriptor as a standalone SVG document."""
    return env.get_template("badge.svg").render(
        d=descriptor,
        fill=color_for(descriptor.color_token, palette)
    ).strip()

def render_stylesheet(palette: Optional[Dict[Any, str]] = None) -> str:
    colors = get_palette(palette)
    tokens = [(f"{COLOR_TOKEN_PREFIX}{goal}", colors[goal]) for goal in known_goals() if goal in colors]
    return env.get_template("styles.css").render(tokens=tokens, fallback=FALLBACK_COLOR)

def render_gallery(descriptors: Iterable[RenderDescriptor], title: str = "UN Sustainable Development Goals",
                   palette: Optional[Dict[Any, str]] = None) -> str:
    """Renders a standalone HTML page showing every descriptor."""
    badges = [render_html(d) for d in descriptors]
    return env.get_template("gallery.html").render(
        title=title,
        badges=badges,
        stylesheet=render_stylesheet(palette)
    )
