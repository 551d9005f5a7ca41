# Copyright (c) 2026 Brandcolor
# SPDX-License-Identifier: MIT

"""
Schema definitions for brand color records.

All types in this module are immutable (frozen dataclasses).
Consolidation builds new entries instead of mutating old ones.
"""

from brandcolor.schema.color_record import (
    CanonicalColorRecord,
    ColorObservation,
    ColorSource,
    Confidence,
    ConsolidatedColorEntry,
    RGBAColor,
)

__all__ = [
    # Tiers and provenance
    "Confidence",
    "ColorSource",
    # Parsed color
    "RGBAColor",
    # Consolidation input
    "ColorObservation",
    # Resolved records
    "CanonicalColorRecord",
    "ConsolidatedColorEntry",
]
