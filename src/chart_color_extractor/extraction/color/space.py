"""
space.py
========

Does: Convert between hex colors and integer HSL triples, and validate /
      normalize hex color strings.
Used By: Stylesheet parsing, named-color extraction, palette generation,
         manual token import.
Returns: HSL triples, "#rrggbb" strings, normalized "#RRGGBB" strings.

Inputs of hsl_to_hex() are not range-checked: a hue outside [0, 360) falls
through every sector (only the lightness offset survives) and channels outside
[0, 255] are clamped by webcolors. Callers own the ranges.
"""

from __future__ import annotations

import logging
import math
import re

from webcolors import hex_to_rgb, rgb_to_hex

from chart_color_extractor.extraction.color.types import HSL, Color

__all__ = [
    "hex_to_hsl",
    "hsl_to_hex",
    "is_hex_color",
    "normalize_color",
    "colors_equal",
]
__docformat__ = "google"

logger = logging.getLogger(__name__)

HEX_COLOR_RE = re.compile(r"#[0-9A-Fa-f]{6}")


def _round_half_up(value: float) -> int:
    """Does: Round .5 away from zero for positives (builtin round() is banker's)."""
    if not math.isfinite(value):
        # only reachable with absurd out-of-range input; rgb_to_hex clamps
        return 0 if math.isnan(value) or value < 0 else 255
    return math.floor(value + 0.5)


# =============================================================================
# 1) VALIDATION
# =============================================================================

def is_hex_color(value: object) -> bool:
    """Does: True iff value is a 6-digit '#'-prefixed hex string."""
    return isinstance(value, str) and HEX_COLOR_RE.fullmatch(value) is not None


def normalize_color(value: str) -> Color | None:
    """Does: Uppercase a 6-digit hex color; None when the shape is wrong."""
    if not is_hex_color(value):
        return None
    return value.upper()


def colors_equal(a: str, b: str) -> bool:
    """Does: Case-insensitive color equality."""
    return a.lower() == b.lower()


# =============================================================================
# 2) CONVERSIONS
# =============================================================================

def hex_to_hsl(color: Color) -> HSL:
    """
    Does: Standard RGB → HSL, each component rounded to the nearest integer.
          The hue is wrapped so it stays in [0, 360).
    Returns: HSL(h, s, l).
    """
    if not color.startswith("#"):
        color = f"#{color}"
    rgb = hex_to_rgb(color)
    r, g, b = rgb.red / 255, rgb.green / 255, rgb.blue / 255

    mx = max(r, g, b)
    mn = min(r, g, b)
    h = 0.0
    s = 0.0
    l = (mx + mn) / 2  # noqa: E741

    if mx != mn:
        d = mx - mn
        s = d / (2 - mx - mn) if l > 0.5 else d / (mx + mn)
        if mx == r:
            h = (g - b) / d + (6 if g < b else 0)
        elif mx == g:
            h = (b - r) / d + 2
        else:
            h = (r - g) / d + 4
        h /= 6

    return HSL(_round_half_up(h * 360) % 360, _round_half_up(s * 100), _round_half_up(l * 100))


def hsl_to_hex(h: float, s: float, l: float) -> Color:  # noqa: E741
    """
    Does: HSL → RGB through the chroma / x / m decomposition over six 60° sectors.
    Returns: Lowercase "#rrggbb".
    """
    s /= 100
    l /= 100  # noqa: E741

    c = (1 - abs(2 * l - 1)) * s
    x = c * (1 - abs((h / 60) % 2 - 1))
    m = l - c / 2

    if 0 <= h < 60:
        r, g, b = c, x, 0.0
    elif 60 <= h < 120:
        r, g, b = x, c, 0.0
    elif 120 <= h < 180:
        r, g, b = 0.0, c, x
    elif 180 <= h < 240:
        r, g, b = 0.0, x, c
    elif 240 <= h < 300:
        r, g, b = x, 0.0, c
    elif 300 <= h < 360:
        r, g, b = c, 0.0, x
    else:
        logger.debug("hue %r outside [0, 360); using lightness offset only", h)
        r = g = b = 0.0

    return rgb_to_hex(
        (
            _round_half_up((r + m) * 255),
            _round_half_up((g + m) * 255),
            _round_half_up((b + m) * 255),
        )
    )
