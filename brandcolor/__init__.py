# Copyright (c) 2026 Brandcolor
# SPDX-License-Identifier: MIT

"""
Brandcolor -- Color normalization and consolidation for brand extraction.

Takes color strings observed on a rendered page (semantic roles,
custom properties, sampled palette colors), converts each into hex,
rgb, CIE LCH and OKLCH, and merges duplicates into a deterministic,
confidence-ranked palette.

Quick start::

    from brandcolor import collect_observations, consolidate

    observations = collect_observations(extracted["colors"])
    for entry in consolidate(observations):
        print(entry.hex, entry.oklch, entry.label)
"""

from __future__ import annotations

__version__ = "1.0.0"

from brandcolor.convert import (
    ExtractionLimits,
    ParseError,
    collect_observations,
    consolidate,
    convert_color,
    normalize_color_format,
    parse_color,
)
from brandcolor.schema import (
    CanonicalColorRecord,
    ColorObservation,
    Confidence,
    ConsolidatedColorEntry,
    RGBAColor,
)

__all__ = [
    # Core API
    "convert_color",
    "normalize_color_format",
    "parse_color",
    "consolidate",
    "collect_observations",
    "ExtractionLimits",
    "ParseError",
    # Types (commonly needed)
    "Confidence",
    "RGBAColor",
    "ColorObservation",
    "CanonicalColorRecord",
    "ConsolidatedColorEntry",
    # Version
    "__version__",
]
