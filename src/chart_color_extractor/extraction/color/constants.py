"""
constants.py.

Does: Centralize the fixed selectors, semantic names and fallback values used
      by the stylesheet parser, the token importer and the exporter.
Used By: stylesheet.parser, general.token.hex_tokens, export.serializer.
"""

from __future__ import annotations

from typing import Final

__all__ = [
    "LIGHT_SELECTOR",
    "DARK_SELECTOR",
    "CHART_PREFIX",
    "SEMANTIC_COLOR_NAMES",
    "FALLBACK_COLOR",
    "DEFAULT_CHART_COUNT",
    "LIGHT_FILL_COLOR",
    "DARK_FILL_COLOR",
]

# ── Selectors ────────────────────────────────────────────────────────────────
LIGHT_SELECTOR: Final[str] = ":root"
DARK_SELECTOR: Final[str] = ".dark"

# --chart-1, --chart-2, ...
CHART_PREFIX: Final[str] = "chart"

# Design-system tokens that usually carry the brand colors; each may also
# appear with a "-foreground" suffix.
SEMANTIC_COLOR_NAMES: Final[tuple[str, ...]] = (
    "primary",
    "secondary",
    "accent",
    "muted",
    "background",
    "foreground",
    "success",
    "warning",
    "error",
    "destructive",
    "creative",
)

# Unresolvable values
FALLBACK_COLOR: Final[str] = "#000000"

# ── Export ───────────────────────────────────────────────────────────────────
DEFAULT_CHART_COUNT: Final[int] = 8
LIGHT_FILL_COLOR: Final[str] = "#000000"
DARK_FILL_COLOR: Final[str] = "#FFFFFF"
