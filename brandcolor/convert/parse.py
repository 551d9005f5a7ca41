# Copyright (c) 2026 Brandcolor
# SPDX-License-Identifier: MIT

"""
Color string parsing.

Accepted grammar:
- ``#rgb``       each digit duplicated (``#abc`` → aa, bb, cc)
- ``#rrggbb``
- ``#rrggbbaa``  last byte is alpha, divided by 255
- ``rgb(r, g, b)`` / ``rgba(r, g, b, a)`` with integer channels and
  optional decimal alpha (either name accepts either arity)

Everything else (named colors, ``hsl()``, gradients, ``currentColor``)
is rejected. Parsed integers are not range-checked.
"""

from __future__ import annotations

import re
from typing import Optional

from brandcolor.schema import RGBAColor


class ParseError(ValueError):
    """Raised when a color string matches neither the hex nor rgb() grammar."""

    def __init__(self, raw: str) -> None:
        super().__init__(f"Unsupported color syntax: {raw!r}")
        self.raw = raw


_HEX_RE = re.compile(r"#([0-9a-fA-F]+)")

_RGBA_RE = re.compile(
    r"rgba?\(\s*(\d+)\s*,\s*(\d+)\s*,\s*(\d+)\s*"
    r"(?:,\s*(\d+(?:\.\d*)?|\.\d+)\s*)?\)"
)


def hex_to_rgb(hex_color: str) -> Optional[RGBAColor]:
    """
    Parse a ``#`` hex color string.

    Args:
        hex_color: ``#rgb``, ``#rrggbb`` or ``#rrggbbaa``

    Returns:
        RGBAColor, or None if the string is not a supported hex form
    """
    m = _HEX_RE.fullmatch(hex_color.strip())
    if not m:
        return None
    digits = m.group(1)

    if len(digits) == 3:
        r, g, b = (int(d * 2, 16) for d in digits)
        return RGBAColor(r, g, b)

    if len(digits) == 6:
        return RGBAColor(
            int(digits[0:2], 16),
            int(digits[2:4], 16),
            int(digits[4:6], 16),
        )

    if len(digits) == 8:
        return RGBAColor(
            int(digits[0:2], 16),
            int(digits[2:4], 16),
            int(digits[4:6], 16),
            int(digits[6:8], 16) / 255,
        )

    return None


def parse_color(raw: str) -> RGBAColor:
    """
    Parse a raw color string into integer RGB plus optional alpha.

    ``rgb()``/``rgba()`` is tried first, then hex.

    Raises:
        ParseError: If ``raw`` is not a supported color string.
    """
    text = raw.strip()

    m = _RGBA_RE.fullmatch(text)
    if m:
        r, g, b = int(m.group(1)), int(m.group(2)), int(m.group(3))
        a = float(m.group(4)) if m.group(4) is not None else None
        return RGBAColor(r, g, b, a)

    color = hex_to_rgb(text)
    if color is None:
        raise ParseError(raw)
    return color
