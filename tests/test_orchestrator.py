# tests/test_orchestrator.py
"""
orchestrator tests
==================

Does: Exercise the import dispatch (stylesheet first, hex list second),
      palette suggestions with packaged settings, the analysis bundle, and
      the `chart-colors` CLI entry point.
"""

from __future__ import annotations

import importlib
import json

import pytest

orch = importlib.import_module("chart_color_extractor.extraction.orchestrator")
demo = importlib.import_module("chart_color_extractor.demo")
from chart_color_extractor.extraction.color.palette import PaletteSettings
from chart_color_extractor.extraction.general.utils import clear_config_cache

THEME = """
:root {
  --red-500: 0 65% 50%;
  --blue-500: 220 65% 52%;
  --chart-1: var(--red-500);
  --chart-2: var(--blue-500);
  --chart-3: #22AA55;
}
.dark {
  --chart-1: 0 65% 40%;
  --chart-2: 220 65% 42%;
}
"""


@pytest.fixture(autouse=True)
def _packaged_data_dir(monkeypatch):
    """Resolve settings from the packaged data/ directory."""
    monkeypatch.delenv("DATA_DIR", raising=False)
    monkeypatch.delenv("CHART_COLORS_DATA_DIR", raising=False)
    monkeypatch.delenv("CHART_COLORS_DEBUG_TOPICS", raising=False)
    clear_config_cache()


# ──────────────────────────────────────────────────────────────────────────────
# import_colors
# ──────────────────────────────────────────────────────────────────────────────
def test_stylesheet_import():
    out = orch.import_colors(THEME)
    assert out.source == "stylesheet"
    assert out.status == "ok" and out.ok
    assert out.message is None
    assert len(out.config.light) == 3
    assert len(out.config.dark) == 2
    assert out.config.light[2] == "#22AA55"
    # HSL declarations first (both blocks), then hex ones
    assert [c.name for c in out.pool] == ["red-500", "blue-500", "chart-1", "chart-2", "chart-3"]


def test_hash_prefixed_list_falls_back_to_tokens():
    out = orch.import_colors("#F7F6F7, #DEDCDF")
    assert out.source == "tokens"
    assert out.status == "ok"
    assert out.config.light == ("#F7F6F7", "#DEDCDF")
    assert out.config.dark == ("#DEDCDF", "#F7F6F7")


def test_partial_token_import_is_reported():
    out = orch.import_colors("F7F6F7, BAD!!, DEDCDF")
    assert out.source == "tokens"
    assert out.status == "partial"
    assert out.ok
    assert out.skipped == ("BAD!!",)
    assert out.config.light == ("#F7F6F7", "#DEDCDF")
    assert out.message


@pytest.mark.parametrize("text", ["", "   ", None, "nothing here"])
def test_failed_import(text):
    out = orch.import_colors(text)
    assert out.status == "failed"
    assert not out.ok
    assert out.config.is_empty()
    assert out.message


def test_looks_like_stylesheet():
    assert orch.looks_like_stylesheet("--a: 1;")
    assert orch.looks_like_stylesheet("#fff")
    assert not orch.looks_like_stylesheet("F7F6F7, DEDCDF")


# ──────────────────────────────────────────────────────────────────────────────
# suggest_palette / analyze_stylesheet
# ──────────────────────────────────────────────────────────────────────────────
def test_suggest_palette_explicit_count_and_settings():
    out = orch.suggest_palette(THEME, count=4, settings=PaletteSettings())
    assert len(out) == 4


def test_suggest_palette_defaults_to_active_count_and_packaged_settings():
    # two slots usable in both modes
    assert len(orch.suggest_palette(THEME)) == 2


def test_suggest_palette_without_named_colors():
    assert orch.suggest_palette("body { color: red; }", count=3) == []


def test_analyze_stylesheet_bundle():
    result = orch.analyze_stylesheet(THEME, count=3)
    assert set(result) == {"source", "status", "message", "light", "dark", "named", "suggested", "css"}
    assert result["light"][2] == "#22AA55"
    assert len(result["suggested"]) == 3
    assert result["css"].startswith(":root {\n  --chart-1: ")
    json.dumps(result)


def test_analyze_tokens_has_no_suggestions():
    result = orch.analyze_stylesheet("F7F6F7 DEDCDF")
    assert result["source"] == "tokens"
    assert result["named"] == []
    assert result["suggested"] == []


# ──────────────────────────────────────────────────────────────────────────────
# CLI
# ──────────────────────────────────────────────────────────────────────────────
def test_cli_prints_json(capsys):
    rc = demo.main(["--count", "2", "--css", THEME])
    assert rc == 0
    out = json.loads(capsys.readouterr().out)
    assert out["status"] == "ok"
    assert len(out["suggested"]) == 2
    assert "css" in out


def test_cli_reads_stdin_and_reports_failure(monkeypatch, capsys):
    import io

    monkeypatch.setattr("sys.stdin", io.StringIO("not a color"))
    rc = demo.main([])
    captured = capsys.readouterr()
    assert rc == 2
    assert json.loads(captured.out)["status"] == "failed"
    assert "No valid color values" in captured.err
