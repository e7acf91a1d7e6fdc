"""
color.
=====

Does: Aggregate the color-domain building blocks: value types, constants,
      hex ↔ HSL conversion and palette generation.
Used By: Stylesheet parsing, manual token import, export, orchestrator.
Returns: Pure functions and immutable value objects; no side effects.
"""

# ── Types ────────────────────────────────────────────────────────────────────
from .types import HSL, Color, ColorConfig, NamedColor

# ── Constants ────────────────────────────────────────────────────────────────
from .constants import (
    DARK_SELECTOR,
    FALLBACK_COLOR,
    LIGHT_SELECTOR,
    SEMANTIC_COLOR_NAMES,
)

# ── Color space ──────────────────────────────────────────────────────────────
from .space import colors_equal, hex_to_hsl, hsl_to_hex, is_hex_color, normalize_color

# ── Palette ──────────────────────────────────────────────────────────────────
from .palette import (
    PaletteSettings,
    find_base_colors,
    generate_accessible_palette,
    load_palette_settings,
)

__all__ = [
    # types
    "Color",
    "HSL",
    "NamedColor",
    "ColorConfig",
    # constants
    "LIGHT_SELECTOR",
    "DARK_SELECTOR",
    "SEMANTIC_COLOR_NAMES",
    "FALLBACK_COLOR",
    # color space
    "hex_to_hsl",
    "hsl_to_hex",
    "is_hex_color",
    "normalize_color",
    "colors_equal",
    # palette
    "PaletteSettings",
    "load_palette_settings",
    "find_base_colors",
    "generate_accessible_palette",
]
