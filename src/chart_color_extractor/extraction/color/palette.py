"""
palette.py
==========

Does: Derive an accessible chart palette from a pool of named colors:
      one representative per color family (name prefix before the first
      hyphen), hue-rotated variants when the pool is too small, then a small
      per-position lightness ramp.
Used By: orchestrator.suggest_palette, demo CLI.
Returns: list of uppercase "#RRGGBB", exactly `count` long (empty for an
         empty pool).
"""

from __future__ import annotations

import logging
from collections.abc import Sequence
from dataclasses import asdict, dataclass, fields
from typing import Any

from chart_color_extractor.extraction.color.space import hex_to_hsl, hsl_to_hex
from chart_color_extractor.extraction.color.types import Color, NamedColor
from chart_color_extractor.extraction.general.utils.load_config import load_config

__all__ = [
    "PaletteSettings",
    "load_palette_settings",
    "find_base_colors",
    "generate_accessible_palette",
]
__docformat__ = "google"

logger = logging.getLogger(__name__)

PALETTE_SETTINGS_FILE = "palette_settings"


# ── Settings ─────────────────────────────────────────────────────────────────
@dataclass(frozen=True)
class PaletteSettings:
    """Tuning knobs of the generator; defaults reproduce the reference palette."""

    ideal_saturation: int = 65
    ideal_lightness: int = 55
    hue_step: int = 30
    lightness_step: int = 2
    min_lightness: int = 45
    max_lightness: int = 70

    def as_dict(self) -> dict[str, int]:
        return asdict(self)


def _validate_settings(data: dict[str, Any]) -> dict[str, Any]:
    known = {f.name for f in fields(PaletteSettings)}
    unknown = sorted(set(data) - known)
    if unknown:
        raise ValueError(f"unknown palette settings: {unknown}")
    for key, value in data.items():
        if isinstance(value, bool) or not isinstance(value, int):
            raise ValueError(f"{key} must be an integer, got {value!r}")
    lo = data.get("min_lightness", PaletteSettings.min_lightness)
    hi = data.get("max_lightness", PaletteSettings.max_lightness)
    if lo > hi:
        raise ValueError(f"min_lightness {lo} > max_lightness {hi}")
    return data


def load_palette_settings(file: str = PALETTE_SETTINGS_FILE) -> PaletteSettings:
    """Does: Read <data>/palette_settings.json; missing keys keep their defaults."""
    data = load_config(file, validator=_validate_settings)
    return PaletteSettings(**data)


# =============================================================================
# 1) FAMILY REPRESENTATIVES
# =============================================================================

def _family(name: str) -> str:
    return name.split("-")[0]


def find_base_colors(
    colors: Sequence[NamedColor],
    settings: PaletteSettings | None = None,
) -> list[NamedColor]:
    """
    Does: Group by family and keep, per family, the member closest (Manhattan
          distance on saturation/lightness) to the ideal point. Ties keep the
          first member seen.
    Returns: One NamedColor per family, in family first-seen order.
    """
    settings = settings or PaletteSettings()
    groups: dict[str, list[NamedColor]] = {}
    for color in colors:
        groups.setdefault(_family(color.name), []).append(color)

    def distance(color: NamedColor) -> int:
        hsl = hex_to_hsl(color.value)
        return abs(hsl.s - settings.ideal_saturation) + abs(hsl.l - settings.ideal_lightness)

    # min() keeps the first of equal keys
    return [min(group, key=distance) for group in groups.values()]


# =============================================================================
# 2) PALETTE
# =============================================================================

def generate_accessible_palette(
    colors: Sequence[NamedColor],
    count: int,
    settings: PaletteSettings | None = None,
) -> list[Color]:
    """
    Does: Pick family representatives, pad up to `count` with copies of the
          first representative rotated by hue_step (so all variants share one
          hue), then raise the lightness of position i by i * lightness_step,
          clamped to [min, max] lightness.
    Returns: `count` colors, or [] for an empty pool / non-positive count.
    """
    if not colors or count <= 0:
        return []
    settings = settings or PaletteSettings()

    base = find_base_colors(colors, settings)
    added = 0
    while len(base) < count:
        # every variant rotates the first representative, never an earlier variant
        source = base[0]
        hsl = hex_to_hsl(source.value)
        base.append(
            NamedColor(
                name=f"{source.name}-variant",
                value=hsl_to_hex((hsl.h + settings.hue_step) % 360, hsl.s, hsl.l).upper(),
            )
        )
        added += 1
    if added:
        logger.debug("Synthesized %d hue variant(s) for a %d-color palette", added, count)

    palette: list[Color] = []
    for i, color in enumerate(base[:count]):
        hsl = hex_to_hsl(color.value)
        lightness = min(
            settings.max_lightness,
            max(settings.min_lightness, hsl.l + i * settings.lightness_step),
        )
        palette.append(hsl_to_hex(hsl.h, hsl.s, lightness).upper())
    return palette
