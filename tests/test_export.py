# tests/test_export.py
"""Stylesheet export and slot fitting."""

from __future__ import annotations

from chart_color_extractor.extraction.color.types import ColorConfig
from chart_color_extractor.extraction.export import active_color_count, fit_config, generate_css
from chart_color_extractor.extraction.stylesheet import parse_colors


def test_generate_css_layout():
    config = ColorConfig(light=["#FF0000", "#00FF00"], dark=["#0000FF"])
    assert generate_css(config) == (
        ":root {\n"
        "  --chart-1: #FF0000;\n"
        "  --chart-2: #00FF00;\n"
        "}\n"
        "\n"
        ".dark {\n"
        "  --chart-1: #0000FF;\n"
        "}"
    )


def test_generate_css_empty_config():
    assert generate_css(ColorConfig()) == ":root {\n\n}\n\n.dark {\n\n}"


def test_exported_text_parses_back():
    config = ColorConfig(light=["#F7F6F7", "#DEDCDF", "#F7F6F7"], dark=["#112233"])
    assert parse_colors(generate_css(config)) == config


def test_fit_config_pads_and_truncates():
    config = ColorConfig(light=["#111111"] * 10, dark=["#222222"])
    fitted = fit_config(config, 3)
    assert fitted.light == ("#111111",) * 3
    assert fitted.dark == ("#222222", "#FFFFFF", "#FFFFFF")

    default = fit_config(ColorConfig())
    assert default.light == ("#000000",) * 8
    assert default.dark == ("#FFFFFF",) * 8

    assert fit_config(config, -1) == ColorConfig()


def test_active_color_count_is_shortest_mode():
    assert active_color_count(ColorConfig(light=["#111111"] * 4, dark=["#222222"] * 2)) == 2
    assert active_color_count(ColorConfig()) == 0


def test_color_config_is_immutable_value():
    a = ColorConfig(light=["#111111"], dark=[])
    assert a == ColorConfig(light=("#111111",), dark=())
    assert a.as_dict() == {"light": ["#111111"], "dark": []}
