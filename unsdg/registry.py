from typing import Callable, Dict, Optional

from .utils import logger

DEFAULT_TAG = "un-sdg"

class DuplicateTagError(Exception):
    """Raised when a tag name is defined twice."""
    pass

class ComponentRegistry:
    """Maps custom tag names to the callables that render them. A tag is defined once per process."""

    def __init__(self):
        self._components: Dict[str, Callable] = {}

    def define(self, tag: str, renderer: Callable):
        if tag in self._components:
            raise DuplicateTagError(f"Tag '{tag}' has already been defined")
        self._components[tag] = renderer
        logger.debug(f"Defined component <{tag}>")

    def get(self, tag: str) -> Optional[Callable]:
        return self._components.get(tag)

    def is_defined(self, tag: str) -> bool:
        return tag in self._components

# Process-wide registry used by the hosts
components = ComponentRegistry()
