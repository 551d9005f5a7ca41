# Copyright (c) 2026 Brandcolor
# SPDX-License-Identifier: MIT

"""Tests for schema types and serialization roundtrips."""

import pytest

from brandcolor.schema import (
    CanonicalColorRecord,
    ColorObservation,
    ColorSource,
    Confidence,
    ConsolidatedColorEntry,
    RGBAColor,
)


class TestConfidence:

    def test_rank(self):
        assert Confidence.HIGH.rank == 3
        assert Confidence.MEDIUM.rank == 2
        assert Confidence.LOW.rank == 1

    def test_parse_name(self):
        assert Confidence.parse("high") is Confidence.HIGH
        assert Confidence.parse(" Medium ") is Confidence.MEDIUM

    def test_parse_member(self):
        assert Confidence.parse(Confidence.LOW) is Confidence.LOW

    @pytest.mark.parametrize("value", ["certain", "", None, 3])
    def test_parse_invalid(self, value):
        with pytest.raises(ValueError, match="confidence"):
            Confidence.parse(value)


class TestRGBAColor:

    def test_hex_lowercase_no_alpha(self):
        assert RGBAColor(170, 187, 204, 0.5).hex == "#aabbcc"

    def test_has_alpha(self):
        assert RGBAColor(0, 0, 0, 0.5).has_alpha
        assert not RGBAColor(0, 0, 0, 1.0).has_alpha
        assert not RGBAColor(0, 0, 0).has_alpha

    def test_frozen(self):
        c = RGBAColor(1, 2, 3)
        with pytest.raises(AttributeError):
            c.r = 4


class TestColorObservation:

    def test_defaults(self):
        obs = ColorObservation(raw="#fff", confidence=Confidence.HIGH)
        assert obs.label == ""
        assert obs.precomputed_lch is None
        assert obs.precomputed_oklch is None
        assert obs.source is None

    def test_confidence_must_be_enum(self):
        with pytest.raises(ValueError, match="confidence"):
            ColorObservation(raw="#fff", confidence="high")

    def test_raw_must_be_string(self):
        with pytest.raises(ValueError, match="raw"):
            ColorObservation(raw=None, confidence=Confidence.HIGH)

    def test_source(self):
        obs = ColorObservation(raw="#fff", confidence=Confidence.LOW, source=ColorSource.PALETTE)
        assert obs.source.value == "palette"


class TestCanonicalColorRecord:

    def test_to_dict(self):
        record = CanonicalColorRecord("#ff0000", "rgba(255, 0, 0, 0.5)", "lch(...)", "oklch(...)", True)
        assert record.to_dict() == {
            "hex": "#ff0000",
            "rgb": "rgba(255, 0, 0, 0.5)",
            "lch": "lch(...)",
            "oklch": "oklch(...)",
            "hasAlpha": True,
        }

    def test_roundtrip(self):
        record = CanonicalColorRecord("#ff0000", "rgb(255, 0, 0)", "lch(1% 2 3)", "oklch(1% 2 3)")
        assert CanonicalColorRecord.from_dict(record.to_dict()) == record

    def test_from_dict_default_alpha(self):
        record = CanonicalColorRecord.from_dict({"hex": "a", "rgb": "a", "lch": "a", "oklch": "a"})
        assert record.has_alpha is False


class TestConsolidatedColorEntry:

    def _entry(self, **overrides):
        fields = dict(
            hex="#3B82F6",
            rgb="rgb(59, 130, 246)",
            lch="lch(1% 2 3)",
            oklch="oklch(1% 2 3)",
            label="primary, --brand",
            confidence=Confidence.MEDIUM,
        )
        fields.update(overrides)
        return ConsolidatedColorEntry(**fields)

    def test_key_lowercase(self):
        assert self._entry().key == "#3b82f6"

    def test_labels(self):
        assert self._entry().labels == ("primary", "--brand")
        assert self._entry(label="").labels == ()

    def test_roundtrip(self):
        entry = self._entry()
        data = entry.to_dict()
        assert data["confidence"] == "medium"
        assert ConsolidatedColorEntry.from_dict(data) == entry

    def test_invalid_confidence(self):
        with pytest.raises(ValueError, match="confidence"):
            self._entry(confidence="medium")

    def test_frozen(self):
        entry = self._entry()
        with pytest.raises(AttributeError):
            entry.label = "other"
