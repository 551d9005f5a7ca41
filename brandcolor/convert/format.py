# Copyright (c) 2026 Brandcolor
# SPDX-License-Identifier: MIT

"""
Canonical color strings.

Renders colorspace coordinates as CSS-style strings with fixed rounding:

- ``lch(L% C H)``      L, C, H to 2 decimals
- ``oklch(L% C H)``    L as a percentage to 2 decimals, C to 3, H to 2
- ``/ alpha`` suffix   only when alpha is present and below 1

Rounding is half-up (as in most UI layers), and numbers are printed in
their shortest form: ``100`` rather than ``100.0``, ``0`` rather than ``-0``.
"""

from __future__ import annotations

import logging
import math
from typing import Optional, Sequence

from brandcolor.convert.colorspace import rgb_to_lch, rgb_to_oklch
from brandcolor.convert.parse import ParseError, parse_color
from brandcolor.schema import CanonicalColorRecord

logger = logging.getLogger(__name__)


def _round_half_up(value: float, scale: float, divisor: float) -> float:
    return math.floor(value * scale + 0.5) / divisor


def format_number(value: float) -> str:
    """
    Shortest string for a float: integral values drop the decimal point.

    >>> format_number(100.0)
    '100'
    >>> format_number(0.5)
    '0.5'
    >>> format_number(-0.0)
    '0'
    """
    if math.isfinite(value) and value == int(value):
        return str(int(value))
    return repr(float(value))


def _alpha_suffix(alpha: Optional[float]) -> str:
    if alpha is not None and alpha < 1:
        return f" / {format_number(alpha)}"
    return ""


def format_lch(lch: Sequence[float], alpha: Optional[float] = None) -> str:
    """
    Format CIE LCH coordinates as ``lch(L% C H)``.

    Args:
        lch: (L, C, H) with L in 0..100 and H in degrees
        alpha: Optional alpha; appended as ``/ alpha`` when below 1
    """
    L, C, H = lch
    l = _round_half_up(L, 100, 100)
    c = _round_half_up(C, 100, 100)
    h = _round_half_up(H, 100, 100)
    return (
        f"lch({format_number(l)}% {format_number(c)} {format_number(h)}"
        f"{_alpha_suffix(alpha)})"
    )


def format_oklch(oklch: Sequence[float], alpha: Optional[float] = None) -> str:
    """
    Format OKLCH coordinates as ``oklch(L% C H)``.

    Args:
        oklch: (L, C, H) with L in 0..1 (shown as a percentage)
        alpha: Optional alpha; appended as ``/ alpha`` when below 1
    """
    L, C, H = oklch
    l = _round_half_up(L, 10000, 100)
    c = _round_half_up(C, 1000, 1000)
    h = _round_half_up(H, 100, 100)
    return (
        f"oklch({format_number(l)}% {format_number(c)} {format_number(h)}"
        f"{_alpha_suffix(alpha)})"
    )


def format_rgb(r: int, g: int, b: int, alpha: Optional[float] = None) -> str:
    """``rgb(r, g, b)``, or ``rgba(r, g, b, a)`` whenever alpha is present."""
    if alpha is not None:
        return f"rgba({r}, {g}, {b}, {format_number(alpha)})"
    return f"rgb({r}, {g}, {b})"


def convert_color(raw: str) -> Optional[CanonicalColorRecord]:
    """
    Convert a hex or ``rgb()``/``rgba()`` string to all canonical formats.

    Args:
        raw: Color string as observed

    Returns:
        CanonicalColorRecord, or None if ``raw`` cannot be parsed.
        Callers that must not drop colors use ``normalize_color_format``.

    Example:
        >>> convert_color("#FFF").hex
        '#ffffff'
    """
    try:
        color = parse_color(raw)
    except ParseError:
        return None

    return CanonicalColorRecord(
        hex=color.hex,
        rgb=format_rgb(color.r, color.g, color.b, color.a),
        lch=format_lch(rgb_to_lch(color.r, color.g, color.b), color.a),
        oklch=format_oklch(rgb_to_oklch(color.r, color.g, color.b), color.a),
        has_alpha=color.has_alpha,
    )


def fallback_record(raw: str) -> CanonicalColorRecord:
    """Identity record: every format is the raw string, no alpha."""
    return CanonicalColorRecord(
        hex=raw,
        rgb=raw,
        lch=raw,
        oklch=raw,
        has_alpha=False,
    )


def normalize_color_format(raw: str) -> CanonicalColorRecord:
    """
    Total version of ``convert_color``.

    Unsupported syntax (named colors, gradients, ``currentColor``, ...)
    yields the identity fallback record instead of None.
    """
    record = convert_color(raw)
    if record is not None:
        return record
    logger.debug("Unsupported color syntax %r, using identity fallback", raw)
    return fallback_record(raw)
