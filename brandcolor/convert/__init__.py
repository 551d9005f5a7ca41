# Copyright (c) 2026 Brandcolor
# SPDX-License-Identifier: MIT

"""
Conversion core for Brandcolor.

Parsing, colorimetric conversion, canonical formatting and
consolidation. All operations are pure and perform no I/O.
"""

from brandcolor.convert.consolidation import consolidate, merge_labels
from brandcolor.convert.format import (
    convert_color,
    fallback_record,
    format_lch,
    format_oklch,
    normalize_color_format,
)
from brandcolor.convert.observations import (
    ExtractionLimits,
    collect_observations,
    hidden_count,
)
from brandcolor.convert.parse import ParseError, parse_color

__all__ = [
    "parse_color",
    "ParseError",
    "format_lch",
    "format_oklch",
    "convert_color",
    "fallback_record",
    "normalize_color_format",
    "consolidate",
    "merge_labels",
    "ExtractionLimits",
    "collect_observations",
    "hidden_count",
]
