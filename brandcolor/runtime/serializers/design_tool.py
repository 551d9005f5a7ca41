# Copyright (c) 2026 Brandcolor
# SPDX-License-Identifier: MIT

"""
Design-tool export serializer.

Design tools describe fills as RGB triples on a 0..1 scale. This module
maps canonical hex strings to that form and names each exported style.
It is a separate, lossy transform: alpha and LCH/OKLCH are dropped.
"""

from __future__ import annotations

import re
from typing import Sequence

from brandcolor.schema import ConsolidatedColorEntry

_HEX6_RE = re.compile(r"#?[0-9a-fA-F]{6}")

_RGB_PREFIX_RE = re.compile(r"rgba?\(\s*(\d+)\s*,\s*(\d+)\s*,\s*(\d+)")


def hex_to_unit_rgb(hex_color: str) -> tuple[float, float, float]:
    """
    Convert ``#rrggbb`` to an (r, g, b) triple in 0..1.

    Raises:
        ValueError: If the string is not a 6-digit hex color.
    """
    if not _HEX6_RE.fullmatch(hex_color):
        raise ValueError(f"Expected a 6-digit hex color, got {hex_color!r}")
    digits = hex_color.lstrip("#")
    return (
        int(digits[0:2], 16) / 255,
        int(digits[2:4], 16) / 255,
        int(digits[4:6], 16) / 255,
    )


def any_color_to_hex(color: str) -> str:
    """
    Best-effort hex for an exported color.

    Hex passes through untouched, ``rgb()``/``rgba()`` is reduced to
    ``#rrggbb`` (alpha dropped), anything else is returned as is.
    """
    if color.startswith("#"):
        return color
    m = _RGB_PREFIX_RE.match(color)
    if m:
        r, g, b = (int(v) for v in m.groups())
        return f"#{r:02x}{g:02x}{b:02x}"
    return color


def _style_name(entry: ConsolidatedColorEntry, index: int, hex_color: str) -> str:
    if entry.labels:
        return entry.labels[0]
    return f"Color {index + 1} ({hex_color})"


def to_design_tool_colors(entries: Sequence[ConsolidatedColorEntry]) -> list[dict]:
    """
    Map consolidated entries to design-tool color styles.

    Entries whose hex is not a 6-digit hex (identity fallbacks for
    unsupported syntax) are skipped.

    Returns:
        List of ``{"name", "hex", "rgb": {"r", "g", "b"}}`` dicts
    """
    styles = []
    for entry in entries:
        hex_color = any_color_to_hex(entry.hex)
        if not _HEX6_RE.fullmatch(hex_color):
            continue
        r, g, b = hex_to_unit_rgb(hex_color)
        styles.append({
            "name": _style_name(entry, len(styles), hex_color),
            "hex": hex_color,
            "rgb": {"r": r, "g": g, "b": b},
        })
    return styles
