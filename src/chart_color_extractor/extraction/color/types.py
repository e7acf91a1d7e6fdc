# chart_color_extractor/extraction/color/types.py
"""
types.py.

Does: Define the immutable value objects shared by the parser, the named-color
      extractor, the palette generator and the exporter.
Returns: Color alias, HSL, NamedColor, ColorConfig.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import NamedTuple

__all__ = ["Color", "HSL", "NamedColor", "ColorConfig"]
__docformat__ = "google"

# "#RRGGBB"; uppercase once it leaves the extraction layer
Color = str


class HSL(NamedTuple):
    """Hue in degrees [0, 360), saturation and lightness in percent [0, 100]."""

    h: int
    s: int
    l: int  # noqa: E741


@dataclass(frozen=True)
class NamedColor:
    """A declared custom property (without its `--` marker) and its color."""

    name: str
    value: Color


@dataclass(frozen=True)
class ColorConfig:
    """Light and dark chart colors. The two sequences may differ in length."""

    light: tuple[Color, ...] = field(default_factory=tuple)
    dark: tuple[Color, ...] = field(default_factory=tuple)

    def __post_init__(self) -> None:
        # accept any iterable, store tuples
        object.__setattr__(self, "light", tuple(self.light))
        object.__setattr__(self, "dark", tuple(self.dark))

    def is_empty(self) -> bool:
        return not self.light and not self.dark

    def as_dict(self) -> dict[str, list[Color]]:
        return {"light": list(self.light), "dark": list(self.dark)}
