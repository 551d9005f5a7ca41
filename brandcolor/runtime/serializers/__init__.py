# Copyright (c) 2026 Brandcolor
# SPDX-License-Identifier: MIT

"""
Serializers for consolidated palettes.

Each serializer formats consolidated entries for one consumer.
All serializers preserve entry values exactly -- no recomputation.
"""

from brandcolor.runtime.serializers.base import SerializerFormat
from brandcolor.runtime.serializers.design_tool import (
    any_color_to_hex,
    hex_to_unit_rgb,
    to_design_tool_colors,
)
from brandcolor.runtime.serializers.palette import (
    to_palette_json,
    to_palette_output,
    to_palette_text,
)

__all__ = [
    "SerializerFormat",
    "to_palette_output",
    "to_palette_json",
    "to_palette_text",
    "hex_to_unit_rgb",
    "any_color_to_hex",
    "to_design_tool_colors",
]
