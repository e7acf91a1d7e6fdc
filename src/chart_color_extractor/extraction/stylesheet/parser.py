"""
parser.py
=========

Does: Turn raw stylesheet text into light/dark chart color lists.
      Custom properties are collected once over the whole text (for var()
      resolution); colors are then taken from the `:root` (light) and `.dark`
      (dark) blocks with a chart → HSL → semantic-first strategy cascade.
Used By: orchestrator.import_colors, orchestrator.suggest_palette, demo CLI.
Returns: ColorConfig; never raises on malformed input.

Block extraction is naive: a block ends at the first `}` after its selector,
so a nested rule inside `:root` / `.dark` truncates the block there.
"""

from __future__ import annotations

import logging
import math
import re
from collections.abc import Iterable, Mapping
from functools import lru_cache

from chart_color_extractor.extraction.color.constants import (
    DARK_SELECTOR,
    FALLBACK_COLOR,
    LIGHT_SELECTOR,
)
from chart_color_extractor.extraction.color.space import hsl_to_hex, normalize_color
from chart_color_extractor.extraction.color.types import Color, ColorConfig
from chart_color_extractor.extraction.stylesheet.scanner import (
    ANY_DECLARATIONS,
    CHART_DECLARATIONS,
    HSL_DECLARATIONS,
    SEMANTIC_DECLARATIONS,
)

__all__ = [
    "CssVariableTable",
    "parse_colors",
    "extract_css_variables",
    "extract_selector_content",
    "extract_block_colors",
    "parse_color_variables",
    "resolve_color_value",
]
__docformat__ = "google"

logger = logging.getLogger(__name__)

# "--name" -> raw value, for var() lookups
CssVariableTable = dict[str, str]

# Leading number of a token, the way "100%" or "220deg" still read as numbers
_LEADING_NUMBER_RE = re.compile(r"[+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?")


# =============================================================================
# 1) VARIABLE TABLE & BLOCKS
# =============================================================================

def extract_css_variables(css: str) -> CssVariableTable:
    """Does: Map every `--name` in the text to its trimmed raw value (last wins)."""
    variables: CssVariableTable = {}
    for decl in ANY_DECLARATIONS.scan(css):
        variables[decl.name] = decl.value
    return variables


@lru_cache(maxsize=32)
def _selector_block_re(selector: str) -> re.Pattern[str]:
    return re.compile(rf"{re.escape(selector)}\s*\{{([^}}]*)\}}")


def extract_selector_content(css: str, selector: str) -> str | None:
    """
    Does: Return the content of the first `<selector> { ... }` block, cut at the
          first closing brace.
    Returns: Block content, or None when the selector is absent.
    """
    m = _selector_block_re(selector).search(css)
    return m.group(1) if m else None


# =============================================================================
# 2) VALUE RESOLUTION
# =============================================================================

def _leading_float(token: str) -> float | None:
    m = _LEADING_NUMBER_RE.match(token)
    if not m:
        return None
    value = float(m.group(0))
    return value if math.isfinite(value) else None


def _hsl_triple(value: str) -> tuple[float, float, float] | None:
    parts = value.split()
    if len(parts) < 3:
        return None
    h, s, l = (_leading_float(p) for p in parts[:3])  # noqa: E741
    if h is None or s is None or l is None:
        return None
    return h, s, l


def resolve_color_value(
    value: str,
    variables: Mapping[str, str],
    _seen: frozenset[str] = frozenset(),
) -> Color:
    """
    Does: Resolve a raw declaration value to a color:
          - `var(--x)`            → resolve the value of `--x`
          - `h s% l%` (numbers)   → HSL conversion
          - `#RRGGBB`             → passed through
          - anything else         → FALLBACK_COLOR
    Returns: Uppercase "#RRGGBB". Unknown references and reference cycles
             resolve to FALLBACK_COLOR.
    """
    value = value.strip()

    if value.startswith("var("):
        ref = value[4:-1].strip()
        if ref in _seen:
            logger.debug("var() cycle through %s; using fallback", ref)
            return FALLBACK_COLOR
        raw = variables.get(ref)
        if raw:
            return resolve_color_value(raw, variables, _seen | {ref})
        logger.debug("Unresolved reference %s; using fallback", ref)
        return FALLBACK_COLOR

    if any(ch.isspace() for ch in value):
        triple = _hsl_triple(value)
        if triple is not None:
            return hsl_to_hex(*triple).upper()

    color = normalize_color(value)
    if color is not None:
        return color

    return FALLBACK_COLOR


# =============================================================================
# 3) STRATEGIES
# =============================================================================

def _dedupe(colors: Iterable[Color]) -> list[Color]:
    out: list[Color] = []
    for c in colors:
        if c not in out:
            out.append(c)
    return out


def parse_color_variables(css: str) -> list[Color]:
    """Does: Convert every `--name: h s% l%` declaration directly, deduplicated."""
    return _dedupe(decl.to_hex().upper() for decl in HSL_DECLARATIONS.scan(css))


def extract_block_colors(content: str, variables: Mapping[str, str]) -> list[Color]:
    """
    Does: Pick the colors of one selector block, first non-empty of:
          1. `--chart-N` slots (resolved, in order, duplicates kept)
          2. direct HSL declarations (deduplicated)
          3. semantic names first, then every other declaration not already
             among the semantic colors
    """
    chart = [resolve_color_value(d.value, variables) for d in CHART_DECLARATIONS.scan(content)]
    if chart:
        logger.debug("Using %d chart slot(s)", len(chart))
        return chart

    direct = parse_color_variables(content)
    if direct:
        logger.debug("Using %d direct HSL declaration(s)", len(direct))
        return direct

    semantic = _dedupe(
        resolve_color_value(d.value, variables) for d in SEMANTIC_DECLARATIONS.scan(content)
    )
    included = set(semantic)
    others = [
        color
        for color in (resolve_color_value(d.value, variables) for d in ANY_DECLARATIONS.scan(content))
        if color not in included
    ]
    logger.debug("Using %d semantic + %d other color(s)", len(semantic), len(others))
    return semantic + others


# =============================================================================
# 4) PUBLIC ENTRY POINT
# =============================================================================

def parse_colors(css: str) -> ColorConfig:
    """
    Does: Extract light (`:root`) and dark (`.dark`) chart colors from stylesheet text.
          When neither block exists, both modes fall back to a direct HSL scan
          of the whole text; when only one exists, the other mode stays empty.
    Returns: ColorConfig (empty lists for empty or unparseable input).
    """
    if not isinstance(css, str) or not css.strip():
        return ColorConfig()

    variables = extract_css_variables(css)
    light_block = extract_selector_content(css, LIGHT_SELECTOR)
    dark_block = extract_selector_content(css, DARK_SELECTOR)

    if light_block is None and dark_block is None:
        logger.debug("No %s / %s block; scanning whole text", LIGHT_SELECTOR, DARK_SELECTOR)
        colors = parse_color_variables(css)
        return ColorConfig(light=colors, dark=colors)

    light = extract_block_colors(light_block, variables) if light_block is not None else []
    dark = extract_block_colors(dark_block, variables) if dark_block is not None else []
    return ColorConfig(light=light, dark=dark)
