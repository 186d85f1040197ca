"""Goal identifiers and the labels they resolve to.

A goal identifier is a string: "1" through "17" for one of the UN
Sustainable Development Goals, "all" for the combined artwork, or "circle"
for the programme logo. Anything else is accepted and resolves to an empty
label.
"""
import re
from typing import List, Optional

from .utils import logger

ALL_GOALS = "all"
LOGO = "circle"

ALL_LABEL = "UN Sustainable Development Goals"
LOGO_LABEL = "UN Sustainable Development Goals Logo"

SDG_LABELS = (
    "No Poverty",
    "Zero Hunger",
    "Good Health and Well-being",
    "Quality Education",
    "Gender Equality",
    "Clean Water and Sanitation",
    "Affordable and Clean Energy",
    "Decent Work and Economic Growth",
    "Industry, Innovation, and Infrastructure",
    "Reduced Inequalities",
    "Sustainable Cities and Communities",
    "Responsible Consumption and Production",
    "Climate Action",
    "Life Below Water",
    "Life on Land",
    "Peace, Justice, and Strong Institutions",
    "Partnerships for the Goals",
)

COLOR_TOKEN_PREFIX = "--un-sdg-color-"

GOAL_NUMBER_RE = re.compile(r"[+-]?[0-9]+")
TOKEN_UNSAFE_RE = re.compile(r"[^A-Za-z0-9_-]")

def goal_number(goal) -> Optional[int]:
    """Returns the goal number 1-17 for a numeric identifier, else None."""
    if isinstance(goal, bool):
        return None
    if isinstance(goal, int):
        number = goal
    elif isinstance(goal, str):
        text = goal.strip()
        if not GOAL_NUMBER_RE.fullmatch(text):
            return None
        number = int(text)
    else:
        return None
    if 1 <= number <= len(SDG_LABELS):
        return number
    logger.debug(f"Goal number {number} is outside 1-{len(SDG_LABELS)}")
    return None

def resolve_label(goal, label: Optional[str] = "") -> str:
    """Returns the accessible label for a goal; a non-empty label always wins."""
    if label:
        return label

    number = goal_number(goal)
    if number is not None:
        return SDG_LABELS[number - 1]
    if goal == ALL_GOALS:
        return ALL_LABEL
    if goal == LOGO:
        return LOGO_LABEL

    logger.debug(f"Unrecognized goal identifier {goal!r}; using empty label")
    return ""

def color_token_for(goal) -> str:
    """Returns the CSS custom property name for a goal; only [A-Za-z0-9_-] survive."""
    return COLOR_TOKEN_PREFIX + TOKEN_UNSAFE_RE.sub("", str(goal))

def known_goals() -> List[str]:
    return [str(n) for n in range(1, len(SDG_LABELS) + 1)] + [ALL_GOALS, LOGO]
