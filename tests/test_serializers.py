# Copyright (c) 2026 Brandcolor
# SPDX-License-Identifier: MIT

"""Tests for the runtime serializers (palette output, design-tool export)."""

import json

import pytest

from brandcolor.convert import consolidate
from brandcolor.runtime import (
    SerializerFormat,
    any_color_to_hex,
    hex_to_unit_rgb,
    to_design_tool_colors,
    to_palette_json,
    to_palette_output,
    to_palette_text,
)
from brandcolor.schema import ColorObservation, Confidence, ConsolidatedColorEntry


@pytest.fixture
def entries():
    return consolidate([
        ColorObservation("#3b82f6", Confidence.HIGH, "primary"),
        ColorObservation("#3B82F6", Confidence.HIGH, "--brand"),
        ColorObservation("#111111", Confidence.MEDIUM),
        ColorObservation("currentColor", Confidence.LOW, "icon"),
    ])


# ---------------------------------------------------------------------------
# Palette output
# ---------------------------------------------------------------------------

class TestPaletteJson:

    def test_order_preserved(self, entries):
        data = json.loads(to_palette_json(entries))
        assert [d["hex"] for d in data] == ["#3b82f6", "#111111", "currentColor"]

    def test_roundtrip(self, entries):
        data = json.loads(to_palette_json(entries))
        assert tuple(ConsolidatedColorEntry.from_dict(d) for d in data) == entries

    def test_compact(self, entries):
        assert "\n" not in to_palette_json(entries, indent=None)

    def test_empty(self):
        assert json.loads(to_palette_json(())) == []


class TestPaletteText:

    def test_structure(self, entries):
        lines = to_palette_text(entries).splitlines()
        assert lines[0] == "Colors"
        assert lines[1] == "├─ ● #3b82f6 primary, --brand"
        assert lines[2] == "│  ├─ rgb:   rgb(59, 130, 246)"
        assert lines[5] == "├─ ◐ #111111"
        assert lines[9] == "└─ ○ currentColor icon"
        assert lines[-1] == "   └─ oklch: currentColor"

    def test_hidden_footer(self, entries):
        lines = to_palette_text(entries, hidden=7).splitlines()
        assert lines[-1] == "└─ +7 more in JSON"
        assert lines[9].startswith("├─ ")

    def test_empty(self):
        assert to_palette_text(()) == "Colors"


class TestPaletteOutput:

    def test_json_compact(self, entries):
        out = to_palette_output(entries, format=SerializerFormat.JSON)
        assert out == to_palette_json(entries, indent=None)

    def test_json_pretty(self, entries):
        out = to_palette_output(entries, format=SerializerFormat.JSON_PRETTY)
        assert out == to_palette_json(entries, indent=2)

    def test_text(self, entries):
        out = to_palette_output(entries, format=SerializerFormat.TEXT, hidden=2)
        assert out.endswith("+2 more in JSON")


# ---------------------------------------------------------------------------
# Design-tool export
# ---------------------------------------------------------------------------

class TestHexToUnitRgb:

    def test_red(self):
        assert hex_to_unit_rgb("#ff0000") == (1.0, 0.0, 0.0)

    def test_without_hash(self):
        assert hex_to_unit_rgb("000000") == (0.0, 0.0, 0.0)

    def test_values(self):
        r, g, b = hex_to_unit_rgb("#3b82f6")
        assert r == pytest.approx(59 / 255)
        assert g == pytest.approx(130 / 255)
        assert b == pytest.approx(246 / 255)

    @pytest.mark.parametrize("value", ["#fff", "red", "#3b82f680", ""])
    def test_invalid(self, value):
        with pytest.raises(ValueError, match="6-digit"):
            hex_to_unit_rgb(value)


class TestAnyColorToHex:

    def test_hex_passthrough(self):
        assert any_color_to_hex("#ABC") == "#ABC"

    def test_rgb(self):
        assert any_color_to_hex("rgb(59, 130, 246)") == "#3b82f6"

    def test_rgba_drops_alpha(self):
        assert any_color_to_hex("rgba(59,130,246,0.5)") == "#3b82f6"

    def test_other_passthrough(self):
        assert any_color_to_hex("red") == "red"


class TestDesignToolColors:

    def test_styles(self, entries):
        styles = to_design_tool_colors(entries)
        assert len(styles) == 2  # currentColor is skipped
        assert styles[0]["name"] == "primary"
        assert styles[0]["hex"] == "#3b82f6"
        assert styles[1]["name"] == "Color 2 (#111111)"
        assert styles[1]["rgb"]["r"] == pytest.approx(17 / 255)

    def test_empty(self):
        assert to_design_tool_colors(()) == []
