# Copyright (c) 2026 Brandcolor
# SPDX-License-Identifier: MIT

"""
Palette serializer.

Formats consolidated entries either as JSON (for export) or as a plain
text tree listing hex, rgb, lch and oklch for each color (for logs and
terminals without color support).
"""

from __future__ import annotations

import json
from typing import Optional, Sequence

from brandcolor.runtime.serializers.base import SerializerFormat
from brandcolor.schema import Confidence, ConsolidatedColorEntry

# Filled, half, empty: high, medium, low
_CONFIDENCE_MARKERS = {
    Confidence.HIGH: "●",
    Confidence.MEDIUM: "◐",
    Confidence.LOW: "○",
}


def to_palette_output(
    entries: Sequence[ConsolidatedColorEntry],
    *,
    format: SerializerFormat = SerializerFormat.JSON,
    hidden: int = 0,
) -> str:
    """Serialize entries in the requested format.

    Args:
        entries: Consolidated palette, in output order.
        format: JSON, JSON_PRETTY, or TEXT.
        hidden: Colors left out upstream; only reported in TEXT.
    """
    if format == SerializerFormat.TEXT:
        return to_palette_text(entries, hidden=hidden)
    if format == SerializerFormat.JSON_PRETTY:
        return to_palette_json(entries, indent=2)
    return to_palette_json(entries, indent=None)


def to_palette_json(
    entries: Sequence[ConsolidatedColorEntry],
    indent: Optional[int] = 2,
) -> str:
    """JSON array of entry dicts, order preserved."""
    data = [entry.to_dict() for entry in entries]
    if indent is None:
        return json.dumps(data, separators=(",", ":"), ensure_ascii=False)
    return json.dumps(data, indent=indent, ensure_ascii=False)


def to_palette_text(
    entries: Sequence[ConsolidatedColorEntry],
    hidden: int = 0,
) -> str:
    """Plain-text tree of the palette.

    Example::

        Colors
        ├─ ● #3b82f6 primary, --brand
        │  ├─ rgb:   rgb(59, 130, 246)
        │  ├─ lch:   lch(...)
        │  └─ oklch: oklch(...)
        └─ ◐ #111111
           ├─ rgb:   rgb(17, 17, 17)
           ├─ lch:   lch(...)
           └─ oklch: oklch(...)
    """
    lines = ["Colors"]
    last = len(entries) - 1

    for index, entry in enumerate(entries):
        is_last = index == last and hidden <= 0
        branch = "└─" if is_last else "├─"
        indent = "   " if is_last else "│  "

        marker = _CONFIDENCE_MARKERS[entry.confidence]
        label = f" {entry.label}" if entry.label else ""
        lines.append(f"{branch} {marker} {entry.hex}{label}")
        lines.append(f"{indent}├─ rgb:   {entry.rgb}")
        lines.append(f"{indent}├─ lch:   {entry.lch}")
        lines.append(f"{indent}└─ oklch: {entry.oklch}")

    if hidden > 0:
        lines.append(f"└─ +{hidden} more in JSON")

    return "\n".join(lines)
