# Copyright (c) 2026 Brandcolor
# SPDX-License-Identifier: MIT

"""
Color space conversions.

Conversion chains:
- sRGB → Linear RGB → CIE XYZ (D65) → CIE Lab → LCH
- sRGB → Linear RGB → OKLab → OKLCH

References:
- sRGB / XYZ: IEC 61966-2-1, Lindbloom D65 matrix
- OKLab: https://bottosson.github.io/posts/oklab/

All functions are pure NumPy, operate on a trailing axis of size 3,
and perform no range validation. Out-of-gamut input yields out-of-gamut
coordinates, never an error.
"""

from __future__ import annotations

import numpy as np
from numpy.typing import ArrayLike, NDArray


# =============================================================================
# sRGB → Linear RGB
# =============================================================================


def srgb_to_linear(srgb: ArrayLike) -> NDArray[np.float64]:
    """
    Convert sRGB values [0,1] to linear RGB.

    sRGB uses a piecewise gamma curve:
    - For values <= 0.04045: linear/12.92
    - For values > 0.04045: ((value + 0.055) / 1.055) ^ 2.4
    """
    srgb = np.asarray(srgb, dtype=np.float64)
    # Only the upper branch is raised to a power; keeps negatives out of it
    upper = np.maximum(srgb, 0.04045)
    return np.where(
        srgb <= 0.04045,
        srgb / 12.92,
        np.power((upper + 0.055) / 1.055, 2.4),
    )


# =============================================================================
# Linear RGB → CIE XYZ → CIE Lab
# =============================================================================

# Linear sRGB to XYZ, D65 white point
_RGB_TO_XYZ = np.array([
    [0.4124564, 0.3575761, 0.1804375],
    [0.2126729, 0.7151522, 0.0721750],
    [0.0193339, 0.1191920, 0.9503041],
], dtype=np.float64)

# D65 reference white (Xn, Yn, Zn)
D65_WHITE = np.array([0.95047, 1.00000, 1.08883], dtype=np.float64)

# CIE constants as published with the 1976 Lab definition
_LAB_EPSILON = 0.008856
_LAB_KAPPA = 903.3


def linear_rgb_to_xyz(rgb: ArrayLike) -> NDArray[np.float64]:
    """
    Convert linear RGB to CIE XYZ (D65).

    Args:
        rgb: Array of shape (..., 3) with linear RGB values

    Returns:
        Array of shape (..., 3) with XYZ values (Y of white ≈ 1.0)
    """
    rgb = np.asarray(rgb, dtype=np.float64)
    return np.einsum('...j,ij->...i', rgb, _RGB_TO_XYZ)


def _lab_f(t: NDArray[np.float64]) -> NDArray[np.float64]:
    return np.where(
        t > _LAB_EPSILON,
        np.cbrt(t),
        (_LAB_KAPPA * t + 16.0) / 116.0,
    )


def xyz_to_lab(xyz: ArrayLike) -> NDArray[np.float64]:
    """
    Convert CIE XYZ to CIE Lab against the D65 reference white.

    Args:
        xyz: Array of shape (..., 3) with XYZ values

    Returns:
        Array of shape (..., 3) with Lab values (L in 0..100 for sRGB)
    """
    xyz = np.asarray(xyz, dtype=np.float64)
    f = _lab_f(xyz / D65_WHITE)

    fx = f[..., 0]
    fy = f[..., 1]
    fz = f[..., 2]

    L = 116.0 * fy - 16.0
    a = 500.0 * (fx - fy)
    b = 200.0 * (fy - fz)

    return np.stack([L, a, b], axis=-1)


# =============================================================================
# Linear RGB → OKLab
# =============================================================================

# Matrices from https://bottosson.github.io/posts/oklab/

# Linear sRGB to LMS (cone responses)
_M1 = np.array([
    [0.4122214708, 0.5363325363, 0.0514459929],
    [0.2119034982, 0.6806995451, 0.1073969566],
    [0.0883024619, 0.2817188376, 0.6299787005],
], dtype=np.float64)

# LMS to OKLab
_M2 = np.array([
    [0.2104542553, 0.7936177850, -0.0040720468],
    [1.9779984951, -2.4285922050, 0.4505937099],
    [0.0259040371, 0.7827717662, -0.8086757660],
], dtype=np.float64)


def linear_rgb_to_oklab(rgb: ArrayLike) -> NDArray[np.float64]:
    """
    Convert linear RGB to OKLab.

    Args:
        rgb: Array of shape (..., 3) with linear RGB values

    Returns:
        Array of shape (..., 3) with OKLab values (L, a, b)
    """
    rgb = np.asarray(rgb, dtype=np.float64)

    # RGB to LMS
    lms = np.einsum('...j,ij->...i', rgb, _M1)

    # Real cube root, keeps out-of-gamut negatives real
    lms_cbrt = np.cbrt(lms)

    # LMS to OKLab
    return np.einsum('...j,ij->...i', lms_cbrt, _M2)


# =============================================================================
# Rectangular → Cylindrical (Lab → LCH, OKLab → OKLCH)
# =============================================================================


def _to_polar(lab: ArrayLike) -> NDArray[np.float64]:
    lab = np.asarray(lab, dtype=np.float64)

    L = lab[..., 0]
    a = lab[..., 1]
    b = lab[..., 2]

    C = np.sqrt(a**2 + b**2)
    H = np.degrees(np.arctan2(b, a)) % 360.0

    return np.stack([L, C, H], axis=-1)


def lab_to_lch(lab: ArrayLike) -> NDArray[np.float64]:
    """
    Convert CIE Lab to LCH.

    Returns:
        Array of shape (..., 3) with (L, C, H), H in degrees [0, 360)
    """
    return _to_polar(lab)


def oklab_to_oklch(lab: ArrayLike) -> NDArray[np.float64]:
    """
    Convert OKLab to OKLCH (cylindrical coordinates).

    Args:
        lab: Array of shape (..., 3) with OKLab values (L, a, b)

    Returns:
        Array of shape (..., 3) with OKLCH values (L, C, H)
        H is in degrees [0, 360)
    """
    return _to_polar(lab)


# =============================================================================
# Convenience: 0-255 sRGB → LCH / OKLCH (full chain)
# =============================================================================


def srgb255_to_lch(pixels: ArrayLike) -> NDArray[np.float64]:
    """
    Convert sRGB channels on the 0-255 scale to CIE LCH.

    Full chain: sRGB → Linear RGB → XYZ → Lab → LCH

    Input is taken as float64, so values outside 0-255 are converted
    as-is rather than wrapped.

    Returns:
        Array of shape (..., 3) with (L, C, H)
        - L: Lightness [0, 100] for in-gamut input
        - C: Chroma
        - H: Hue in degrees [0, 360)
    """
    srgb = np.asarray(pixels, dtype=np.float64) / 255.0
    linear = srgb_to_linear(srgb)
    return lab_to_lch(xyz_to_lab(linear_rgb_to_xyz(linear)))


def srgb255_to_oklch(pixels: ArrayLike) -> NDArray[np.float64]:
    """
    Convert sRGB channels on the 0-255 scale to OKLCH.

    Full chain: sRGB → Linear RGB → OKLab → OKLCH

    Returns:
        Array of shape (..., 3) with (L, C, H)
        - L: Lightness [0, 1] for in-gamut input
        - C: Chroma [0, ~0.4 for sRGB gamut]
        - H: Hue in degrees [0, 360)
    """
    srgb = np.asarray(pixels, dtype=np.float64) / 255.0
    linear = srgb_to_linear(srgb)
    return oklab_to_oklch(linear_rgb_to_oklab(linear))


def rgb_to_lch(r: float, g: float, b: float) -> tuple[float, float, float]:
    """Convert one 0-255 sRGB color to (L, C, H) in CIE LCH."""
    L, C, H = srgb255_to_lch([r, g, b])
    return float(L), float(C), float(H)


def rgb_to_oklch(r: float, g: float, b: float) -> tuple[float, float, float]:
    """Convert one 0-255 sRGB color to (L, C, H) in OKLCH, L in 0..1."""
    L, C, H = srgb255_to_oklch([r, g, b])
    return float(L), float(C), float(H)
