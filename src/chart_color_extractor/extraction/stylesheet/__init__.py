"""
stylesheet.
===========

Does: Scan stylesheet text for color-bearing custom properties.
Returns: parse_colors() for light/dark chart colors, extract_named_colors()
         for the named pool used by palette suggestions.
"""

from __future__ import annotations

from .named import extract_named_colors
from .parser import (
    CssVariableTable,
    extract_block_colors,
    extract_css_variables,
    extract_selector_content,
    parse_color_variables,
    parse_colors,
    resolve_color_value,
)
from .scanner import Declaration, DeclarationScanner, HslDeclaration

__all__ = [
    "parse_colors",
    "extract_named_colors",
    "extract_css_variables",
    "extract_selector_content",
    "extract_block_colors",
    "parse_color_variables",
    "resolve_color_value",
    "CssVariableTable",
    "Declaration",
    "HslDeclaration",
    "DeclarationScanner",
]

__docformat__ = "google"
