# Copyright (c) 2026 Brandcolor
# SPDX-License-Identifier: MIT

"""
Delivery runtime for Brandcolor.

Serialization of consolidated palettes for downstream consumers:

1. Palette output -- JSON or plain-text listing of every format
2. Design-tool export -- hex mapped to 0..1 RGB triples

The delivery layer never modifies entry content.
"""

from brandcolor.runtime.serializers import (
    SerializerFormat,
    any_color_to_hex,
    hex_to_unit_rgb,
    to_design_tool_colors,
    to_palette_json,
    to_palette_output,
    to_palette_text,
)

__all__ = [
    "to_palette_output",
    "to_palette_json",
    "to_palette_text",
    "to_design_tool_colors",
    "hex_to_unit_rgb",
    "any_color_to_hex",
    "SerializerFormat",
]
