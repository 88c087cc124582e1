"""Common types and data structures for twimg"""

import math
from dataclasses import dataclass, field
from typing import Mapping, Union


@dataclass(frozen=True)
class Breakpoint:
    """Named viewport threshold in CSS pixels"""
    name: str
    min_width: int


@dataclass(frozen=True)
class ViewportFraction:
    """Image size as a fraction of the viewport width, in (0, 1]"""
    fraction: float

    def __post_init__(self) -> None:
        if not 0.0 < self.fraction <= 1.0:
            raise ValueError(f"Viewport fraction must be in (0, 1], got {self.fraction}")

    def width_resolve(self, min_width: int) -> int:
        """Width in pixels at a breakpoint of the given minimum width"""
        return math.ceil(self.fraction * min_width)


@dataclass(frozen=True)
class PixelCount:
    """Image size as a fixed number of CSS pixels"""
    pixels: int

    def __post_init__(self) -> None:
        if self.pixels < 2:
            raise ValueError(f"Pixel count must be a whole number greater than 1, got {self.pixels}")

    def width_resolve(self, min_width: int) -> int:
        """Width in pixels; the breakpoint threshold is irrelevant"""
        return self.pixels


SizeOverride = Union[ViewportFraction, PixelCount]


@dataclass(frozen=True)
class RenderInput:
    """Per-element inputs recovered from the element's attributes"""
    base_url: str
    fallback_size: str = "100vw"
    conserve_src: bool = False
    overrides: Mapping[str, SizeOverride] = field(default_factory=dict)


@dataclass(frozen=True)
class RenderOutput:
    """Generated attribute values"""
    sizes: str
    srcset: str

    def attributes_get(self) -> dict[str, str]:
        """Attribute name to value mapping, `sizes` first"""
        return {"sizes": self.sizes, "srcset": self.srcset}

