from .models import BadgeOptions, ColorSwatch, Image, RenderDescriptor
from .goals import SDG_LABELS, ALL_GOALS, LOGO, resolve_label, goal_number, color_token_for, known_goals
from .assets import asset_path_for
from .selector import select_render, select_for
from .render import render_html, render_svg, render_stylesheet, render_gallery
from .utils import logger
