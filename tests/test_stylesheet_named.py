# tests/test_stylesheet_named.py
"""Named-color extraction and the declaration scanners it relies on."""

from __future__ import annotations

import pytest

from chart_color_extractor.extraction.color.space import hsl_to_hex
from chart_color_extractor.extraction.color.types import NamedColor
from chart_color_extractor.extraction.stylesheet import scanner
from chart_color_extractor.extraction.stylesheet.named import extract_named_colors


# ---------- extract_named_colors ----------
def test_single_hex_declaration():
    assert extract_named_colors("--brand: #FF00AA;") == [NamedColor(name="brand", value="#FF00AA")]


def test_hsl_pass_runs_before_hex_pass_and_keeps_duplicates():
    css = "--a: #000000; --b: 0 100% 50%; --a: #ffffff;"
    assert extract_named_colors(css) == [
        NamedColor("b", "#FF0000"),
        NamedColor("a", "#000000"),
        NamedColor("a", "#FFFFFF"),
    ]


def test_hsl_values_are_converted():
    out = extract_named_colors(":root { --primary-500: 220 65% 55%; }")
    assert out == [NamedColor("primary-500", hsl_to_hex(220, 65, 55).upper())]


def test_saturation_percent_sign_is_optional():
    assert extract_named_colors("--x: 0 100 50%;") == [NamedColor("x", "#FF0000")]


@pytest.mark.parametrize(
    "css",
    [
        "",
        "--my_var: #123456;",  # underscores are not part of a named color
        "--short: #fff;",
        "--word: red;",
        "color: #123456;",
    ],
)
def test_no_named_colors(css):
    assert extract_named_colors(css) == []


def test_ignores_non_text_input():
    assert extract_named_colors(None) == []


# ---------- scanners ----------
def test_any_declarations_are_ordered_records():
    decls = list(scanner.ANY_DECLARATIONS.scan("--a: 1;\n  --b-2:  x y ;"))
    assert [(d.name, d.value, d.bare_name) for d in decls] == [
        ("--a", "1", "a"),
        ("--b-2", "x y", "b-2"),
    ]
    assert decls[0].start < decls[1].start


def test_chart_scanner_only_matches_numbered_slots():
    css = "--chart-1: a; --chart-x: b; --chart-12: c; --chart-3-alt: d;"
    assert [d.name for d in scanner.CHART_DECLARATIONS.scan(css)] == ["--chart-1", "--chart-12"]


def test_semantic_scanner_accepts_foreground_suffix():
    css = "--primary: a; --primary-foreground: b; --primary-2: c; --ring: d;"
    names = [d.name for d in scanner.SEMANTIC_DECLARATIONS.scan(css)]
    assert names == ["--primary", "--primary-foreground"]


def test_hsl_scanner_exposes_components():
    (decl,) = scanner.HSL_DECLARATIONS.scan("--x: 120 100% 50%;")
    assert (decl.h, decl.s, decl.l) == (120, 100, 50)
    assert decl.to_hex() == "#00ff00"


def test_scanner_requires_name_and_value_groups():
    with pytest.raises(ValueError):
        scanner.DeclarationScanner(r"--(\w+)")
