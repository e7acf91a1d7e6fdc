"""
serializer.py.

Does: Render a ColorConfig back into stylesheet text (`--chart-N` slots under
      `:root` and `.dark`) and fit configs to a fixed number of chart slots.
Returns: generate_css(), fit_config(), active_color_count().
"""

from __future__ import annotations

from chart_color_extractor.extraction.color.constants import (
    CHART_PREFIX,
    DARK_FILL_COLOR,
    DARK_SELECTOR,
    DEFAULT_CHART_COUNT,
    LIGHT_FILL_COLOR,
    LIGHT_SELECTOR,
)
from chart_color_extractor.extraction.color.types import Color, ColorConfig

__all__ = ["generate_css", "fit_config", "active_color_count"]


def _block(selector: str, colors: tuple[Color, ...]) -> str:
    body = "\n".join(f"  --{CHART_PREFIX}-{i}: {color};" for i, color in enumerate(colors, start=1))
    return f"{selector} {{\n{body}\n}}"


def generate_css(config: ColorConfig) -> str:
    """Does: One declaration per color, 1-indexed, light block then dark block."""
    return f"{_block(LIGHT_SELECTOR, config.light)}\n\n{_block(DARK_SELECTOR, config.dark)}"


def _fit(colors: tuple[Color, ...], count: int, fill: Color) -> tuple[Color, ...]:
    return colors[:count] + (fill,) * max(0, count - len(colors))


def fit_config(
    config: ColorConfig,
    count: int = DEFAULT_CHART_COUNT,
    *,
    light_fill: Color = LIGHT_FILL_COLOR,
    dark_fill: Color = DARK_FILL_COLOR,
) -> ColorConfig:
    """Does: Truncate or pad both modes to exactly `count` colors."""
    count = max(0, count)
    return ColorConfig(
        light=_fit(config.light, count, light_fill),
        dark=_fit(config.dark, count, dark_fill),
    )


def active_color_count(config: ColorConfig) -> int:
    """Does: Number of slots usable in both modes at once."""
    return min(len(config.light), len(config.dark))
