# extraction/general/token/hex_tokens.py
# ──────────────────────────────────────────────────────────────
# Manual color entry: pasted hex lists
# ──────────────────────────────────────────────────────────────
"""
hex_tokens.

Does: Split pasted text (commas, semicolons, whitespace, newlines) into hex
      color tokens, repair the usual letter-O-for-zero typo, and keep the
      valid ones.
Returns: split_hex_tokens(), clean_hex_value(), parse_hex_tokens().
Used by: orchestrator.import_colors when the input is not a stylesheet.
"""

from __future__ import annotations

import re
import unicodedata
from dataclasses import dataclass
from typing import Literal

from chart_color_extractor.extraction.color.types import Color, ColorConfig

__all__ = [
    "ImportStatus",
    "HexImportResult",
    "split_hex_tokens",
    "clean_hex_value",
    "parse_hex_tokens",
    "PARTIAL_IMPORT_MESSAGE",
    "FAILED_IMPORT_MESSAGE",
]

ImportStatus = Literal["ok", "partial", "failed"]

PARTIAL_IMPORT_MESSAGE = "Some color values were invalid and have been skipped."
FAILED_IMPORT_MESSAGE = "No valid color values found. Please check your input."

_DELIMITERS_RE = re.compile(r"[\s,;]+")
_HEX6_RE = re.compile(r"[0-9A-F]{6}")


# ──────────────────────────────────────────────────────────────
# 1) TOKENS
# ──────────────────────────────────────────────────────────────


def split_hex_tokens(text: str) -> list[str]:
    """
    Does: NFKC-fold, split on delimiters, drop empties and one leading '#'.
    Returns: Raw candidate tokens in input order.
    """
    if not isinstance(text, str):
        return []
    folded = unicodedata.normalize("NFKC", text)
    tokens = [t.strip() for t in _DELIMITERS_RE.split(folded)]
    tokens = [t[1:] if t.startswith("#") else t for t in tokens]
    return [t for t in tokens if t]


def clean_hex_value(token: str) -> str | None:
    """
    Does: Uppercase, map letter 'O' to digit '0', validate six hex digits.
          Uppercasing first means a lowercase 'o' is repaired as well.
    Returns: "RRGGBB" (no '#') or None.
    """
    cleaned = token.upper().replace("O", "0")
    return cleaned if _HEX6_RE.fullmatch(cleaned) else None


# ──────────────────────────────────────────────────────────────
# 2) IMPORT
# ──────────────────────────────────────────────────────────────


@dataclass(frozen=True)
class HexImportResult:
    """Valid colors of a pasted list plus the tokens that were rejected."""

    colors: tuple[Color, ...]
    skipped: tuple[str, ...]

    @property
    def status(self) -> ImportStatus:
        if not self.colors:
            return "failed"
        return "partial" if self.skipped else "ok"

    @property
    def message(self) -> str | None:
        if self.status == "failed":
            return FAILED_IMPORT_MESSAGE
        if self.status == "partial":
            return PARTIAL_IMPORT_MESSAGE
        return None

    @property
    def config(self) -> ColorConfig:
        """Light keeps input order; dark is the same list reversed."""
        return ColorConfig(light=self.colors, dark=tuple(reversed(self.colors)))


def parse_hex_tokens(text: str) -> HexImportResult:
    """Does: Import a pasted hex list; invalid tokens are skipped, never raised."""
    colors: list[Color] = []
    skipped: list[str] = []
    for token in split_hex_tokens(text):
        cleaned = clean_hex_value(token)
        if cleaned is None:
            skipped.append(token)
        else:
            colors.append(f"#{cleaned}")
    return HexImportResult(colors=tuple(colors), skipped=tuple(skipped))
