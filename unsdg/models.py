from __future__ import annotations
from dataclasses import dataclass, asdict
from typing import Any, Dict, Optional, Union

@dataclass
class BadgeOptions:
    goal: str = "circle"
    label: str = ""
    width: float = 200
    color_only: Optional[bool] = False

@dataclass(frozen=True)
class ColorSwatch:
    width: float
    color_token: str
    label: str
    kind = "color"

    @property
    def height(self) -> float:
        # swatches are always square
        return self.width

    def to_dict(self) -> Dict[str, Any]:
        return {"kind": self.kind, "height": self.height, **asdict(self)}

@dataclass(frozen=True)
class Image:
    src: str
    width: float
    label: str
    color_token: str
    kind = "image"

    def to_dict(self) -> Dict[str, Any]:
        return {"kind": self.kind, **asdict(self)}

RenderDescriptor = Union[ColorSwatch, Image]
