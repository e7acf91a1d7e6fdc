"""
scanner.py
==========

Does: Tokenize stylesheet text into ordered custom-property declaration
      records, one small scanner per declaration shape (any value, chart slot,
      semantic name, HSL triple, hex literal).
Used By: stylesheet.parser, stylesheet.named.
Returns: Iterators of Declaration / HslDeclaration in textual order.

The scanners are plain regex sweeps over the whole text: they know nothing of
blocks, comments or strings. Block scoping is done by the caller by scanning a
block's content instead of the full text.
"""

from __future__ import annotations

import re
from collections.abc import Iterable, Iterator
from dataclasses import dataclass

from chart_color_extractor.extraction.color.constants import (
    CHART_PREFIX,
    SEMANTIC_COLOR_NAMES,
)
from chart_color_extractor.extraction.color.space import hsl_to_hex
from chart_color_extractor.extraction.color.types import Color

__all__ = [
    "Declaration",
    "HslDeclaration",
    "DeclarationScanner",
    "HslDeclarationScanner",
    "semantic_scanner",
    "ANY_DECLARATIONS",
    "CHART_DECLARATIONS",
    "SEMANTIC_DECLARATIONS",
    "HSL_DECLARATIONS",
    "NAMED_HSL_DECLARATIONS",
    "NAMED_HEX_DECLARATIONS",
]
__docformat__ = "google"


# ── Match records ────────────────────────────────────────────────────────────
@dataclass(frozen=True)
class Declaration:
    """One `--name: value` match. `name` keeps its `--` marker."""

    name: str
    value: str
    start: int

    @property
    def bare_name(self) -> str:
        return self.name[2:] if self.name.startswith("--") else self.name


@dataclass(frozen=True)
class HslDeclaration(Declaration):
    """A declaration whose value starts with an integer `h s% l%` triple."""

    h: int = 0
    s: int = 0
    l: int = 0  # noqa: E741

    def to_hex(self) -> Color:
        return hsl_to_hex(self.h, self.s, self.l)


# ── Scanners ─────────────────────────────────────────────────────────────────
class DeclarationScanner:
    """Sweep text with one declaration pattern (needs `name` and `value` groups)."""

    def __init__(self, pattern: str, flags: int = 0) -> None:
        self._re = re.compile(pattern, flags)
        missing = {"name", "value"} - set(self._re.groupindex)
        if missing:
            raise ValueError(f"pattern lacks named groups: {sorted(missing)}")

    @property
    def pattern(self) -> str:
        return self._re.pattern

    def _record(self, m: re.Match[str]) -> Declaration:
        return Declaration(m.group("name"), m.group("value").strip(), m.start())

    def scan(self, text: str) -> Iterator[Declaration]:
        """Does: Yield non-overlapping declarations in order of appearance."""
        if not text:
            return
        for m in self._re.finditer(text):
            yield self._record(m)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._re.pattern!r})"


class HslDeclarationScanner(DeclarationScanner):
    """Scanner whose pattern also captures integer `h`, `s` and `l` groups."""

    def _record(self, m: re.Match[str]) -> HslDeclaration:
        return HslDeclaration(
            m.group("name"),
            m.group("value").strip(),
            m.start(),
            h=int(m.group("h")),
            s=int(m.group("s")),
            l=int(m.group("l")),
        )


def semantic_scanner(names: Iterable[str]) -> DeclarationScanner:
    """Does: Build a scanner for `--<name>` / `--<name>-foreground` declarations."""
    alternation = "|".join(re.escape(n) for n in names)
    return DeclarationScanner(
        rf"(?P<name>--(?:{alternation})(?:-foreground)?):\s*(?P<value>[^;]+);"
    )


_HSL_TRIPLE = r"(?P<h>\d+)\s+(?P<s>\d+)%?\s+(?P<l>\d+)%"

ANY_DECLARATIONS = DeclarationScanner(r"(?P<name>--[\w-]+):\s*(?P<value>[^;]+);")
CHART_DECLARATIONS = DeclarationScanner(
    rf"(?P<name>--{CHART_PREFIX}-\d+):\s*(?P<value>[^;]+);"
)
SEMANTIC_DECLARATIONS = semantic_scanner(SEMANTIC_COLOR_NAMES)
HSL_DECLARATIONS = HslDeclarationScanner(
    rf"(?P<name>--[\w-]+):\s*(?P<value>{_HSL_TRIPLE})"
)

# Named-color extraction accepts ASCII names only
NAMED_HSL_DECLARATIONS = HslDeclarationScanner(
    rf"(?P<name>--[a-zA-Z0-9-]+):\s*(?P<value>{_HSL_TRIPLE})"
)
NAMED_HEX_DECLARATIONS = DeclarationScanner(
    r"(?P<name>--[a-zA-Z0-9-]+):\s*(?P<value>#[A-Fa-f0-9]{6})"
)
