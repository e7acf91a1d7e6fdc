"""
chart_color_extractor
=====================

Does: Root package initializer for the chart color extractor.
Returns: Re-exports the main entry points (parse_colors, extract_named_colors,
         generate_accessible_palette, generate_css, import_colors, ...).
Used by: UI shells, the `chart-colors` CLI and tests.
"""

from .extraction.color import (
    HSL,
    Color,
    ColorConfig,
    NamedColor,
    PaletteSettings,
    generate_accessible_palette,
    hex_to_hsl,
    hsl_to_hex,
)
from .extraction.export import fit_config, generate_css
from .extraction.general.token import parse_hex_tokens
from .extraction.orchestrator import ImportOutcome, import_colors, suggest_palette
from .extraction.stylesheet import extract_named_colors, parse_colors

__all__: list[str] = [
    "Color",
    "HSL",
    "NamedColor",
    "ColorConfig",
    "PaletteSettings",
    "hex_to_hsl",
    "hsl_to_hex",
    "parse_colors",
    "extract_named_colors",
    "generate_accessible_palette",
    "parse_hex_tokens",
    "generate_css",
    "fit_config",
    "import_colors",
    "suggest_palette",
    "ImportOutcome",
]
__docformat__ = "google"
