"""
named.py.

Does: Extract every custom property holding an HSL triple or a hex literal,
      keeping its name, to feed the palette generator.
Returns: list[NamedColor]; HSL matches first, then hex matches, each in
         textual order. Repeated names are kept.
"""

from __future__ import annotations

from chart_color_extractor.extraction.color.types import NamedColor
from chart_color_extractor.extraction.stylesheet.scanner import (
    NAMED_HEX_DECLARATIONS,
    NAMED_HSL_DECLARATIONS,
)

__all__ = ["extract_named_colors"]


def extract_named_colors(css: str) -> list[NamedColor]:
    """Does: Collect (name, color) pairs from the whole text; never raises."""
    if not isinstance(css, str):
        return []
    named = [
        NamedColor(decl.bare_name, decl.to_hex().upper())
        for decl in NAMED_HSL_DECLARATIONS.scan(css)
    ]
    named.extend(
        NamedColor(decl.bare_name, decl.value.upper())
        for decl in NAMED_HEX_DECLARATIONS.scan(css)
    )
    return named
