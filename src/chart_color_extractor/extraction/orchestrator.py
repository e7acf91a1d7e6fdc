# orchestrator.py

"""
orchestrator.py
===============

Does: High-level entry points used by a presentation shell: import pasted or
      uploaded text (stylesheet first, hex list second), suggest a palette
      from the named colors of a stylesheet, and bundle everything for export.
Returns:
  - import_colors(text) -> ImportOutcome
  - suggest_palette(text, count, settings) -> list[Color]
  - analyze_stylesheet(text, count) -> {
        "source": str, "status": str, "message": str|None,
        "light": [...], "dark": [...], "named": [{name, value}, ...],
        "suggested": [...], "css": str
    }
Used by: demo CLI and any UI layer; the core itself never messages users.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Literal

from chart_color_extractor.extraction.color.constants import DEFAULT_CHART_COUNT
from chart_color_extractor.extraction.color.palette import (
    PaletteSettings,
    generate_accessible_palette,
    load_palette_settings,
)
from chart_color_extractor.extraction.color.types import Color, ColorConfig, NamedColor
from chart_color_extractor.extraction.export.serializer import (
    active_color_count,
    generate_css,
)
from chart_color_extractor.extraction.general.token.hex_tokens import (
    FAILED_IMPORT_MESSAGE,
    ImportStatus,
    parse_hex_tokens,
)
from chart_color_extractor.extraction.general.utils.log import debug
from chart_color_extractor.extraction.stylesheet import (
    extract_named_colors,
    parse_colors,
)

logger = logging.getLogger(__name__)

__all__ = [
    "ImportOutcome",
    "looks_like_stylesheet",
    "import_colors",
    "suggest_palette",
    "analyze_stylesheet",
]

ImportSource = Literal["stylesheet", "tokens", "none"]


@dataclass(frozen=True)
class ImportOutcome:
    """What an import produced and how the caller should report it."""

    config: ColorConfig
    source: ImportSource
    status: ImportStatus
    message: str | None = None
    pool: tuple[NamedColor, ...] = field(default_factory=tuple)
    skipped: tuple[str, ...] = field(default_factory=tuple)

    @property
    def ok(self) -> bool:
        return self.status != "failed"


# =============================================================================
# Import
# =============================================================================


def looks_like_stylesheet(text: str) -> bool:
    """Custom properties or hex literals mean the text is tried as a stylesheet first."""
    return "--" in text or "#" in text


def import_colors(text: str) -> ImportOutcome:
    """Import user-supplied text.

    Stylesheet-looking text is parsed first and wins when it yields any color;
    otherwise the text is read as a delimited hex list, which reports skipped
    tokens ("partial") or a total failure ("failed").
    """
    if not isinstance(text, str) or not text.strip():
        return ImportOutcome(
            config=ColorConfig(), source="none", status="failed", message=FAILED_IMPORT_MESSAGE
        )

    if looks_like_stylesheet(text):
        config = parse_colors(text)
        if not config.is_empty():
            debug(
                f"stylesheet import: {len(config.light)} light / {len(config.dark)} dark",
                topic="import",
            )
            return ImportOutcome(
                config=config,
                source="stylesheet",
                status="ok",
                pool=tuple(extract_named_colors(text)),
            )
        logger.debug("Stylesheet parse found no colors; trying hex tokens")

    result = parse_hex_tokens(text)
    debug(
        f"token import: {len(result.colors)} valid, {len(result.skipped)} skipped",
        topic="import",
    )
    return ImportOutcome(
        config=result.config,
        source="tokens",
        status=result.status,
        message=result.message,
        skipped=result.skipped,
    )


# =============================================================================
# Suggestions
# =============================================================================


def _default_count(config: ColorConfig) -> int:
    return active_color_count(config) or DEFAULT_CHART_COUNT


def suggest_palette(
    text: str,
    count: int | None = None,
    settings: PaletteSettings | None = None,
) -> list[Color]:
    """Build an accessible palette from the named colors declared in `text`.

    `count` defaults to the number of slots usable in both modes (or the
    default chart count when that is zero); settings default to the packaged
    palette_settings.json.
    """
    pool = extract_named_colors(text)
    if not pool:
        return []
    if count is None:
        count = _default_count(parse_colors(text))
    if settings is None:
        settings = load_palette_settings()
    return generate_accessible_palette(pool, count, settings)


def analyze_stylesheet(
    text: str,
    count: int | None = None,
    settings: PaletteSettings | None = None,
) -> dict[str, object]:
    """Import + suggestions + export text in one JSON-friendly dict."""
    outcome = import_colors(text)
    if count is None:
        count = _default_count(outcome.config)
    suggested = (
        generate_accessible_palette(list(outcome.pool), count, settings or load_palette_settings())
        if outcome.pool
        else []
    )
    return {
        "source": outcome.source,
        "status": outcome.status,
        "message": outcome.message,
        "light": list(outcome.config.light),
        "dark": list(outcome.config.dark),
        "named": [{"name": c.name, "value": c.value} for c in outcome.pool],
        "suggested": suggested,
        "css": generate_css(outcome.config),
    }
