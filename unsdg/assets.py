from typing import Optional

from .config import config

DEFAULT_ASSET_BASE = "lib/svg"

def asset_path_for(goal, base: Optional[str] = None) -> str:
    """Builds the artwork path for a goal. The file is not checked for existence."""
    if base is None:
        base = config.get("assets.base_url", DEFAULT_ASSET_BASE)
    base = str(base).rstrip("/")
    name = f"{goal}.svg"
    return f"{base}/{name}" if base else name
