import logging
import sys
from typing import Optional, Union

logger = logging.getLogger("unsdg")

TRUE_VALUES = ("true", "1", "yes", "on")

def setup_logging(level: Optional[Union[str, int]] = None):
    """Configures stderr logging for the command line tools."""
    if level is None:
        from .config import config
        level = config.get("logging.level", "WARNING")
    if isinstance(level, str):
        level = getattr(logging, level.upper(), logging.WARNING)
    logging.basicConfig(level=level, format="%(levelname)s: %(message)s", stream=sys.stderr)

def as_bool(value) -> bool:
    if isinstance(value, str):
        return value.strip().lower() in TRUE_VALUES
    return bool(value)
