# Copyright (c) 2026 Brandcolor
# SPDX-License-Identifier: MIT

"""
Color record schema for brand color extraction.

Design principles:
- Immutable: All types are frozen dataclasses
- Deterministic: Same observations in the same order → same palette
- Total: Unparseable colors still yield a record (identity fallback)
- Serializable: JSON-ready via to_dict()/from_dict()

Lifecycle:
    ColorObservation        built by the extraction layer, consumed once
        ↓ convert_color()
    CanonicalColorRecord    hex / rgb / lch / oklch strings for one color
        ↓ consolidate()
    ConsolidatedColorEntry  one per unique hex, labels merged, max confidence

Channel values are never range-checked. Out-of-gamut input produces
out-of-gamut (but well-defined) coordinates rather than errors.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Optional, Union


# =============================================================================
# Confidence
# =============================================================================


class Confidence(Enum):
    """
    Ordinal extraction-certainty tier.

    Ordered high > medium > low. The ordering is exposed through ``rank``
    rather than Python comparison operators so that enum members keep
    their identity semantics.
    """
    HIGH = "high"
    MEDIUM = "medium"
    LOW = "low"

    @property
    def rank(self) -> int:
        """Numeric rank: high=3, medium=2, low=1."""
        return _CONFIDENCE_RANK[self]

    @classmethod
    def parse(cls, value: Union[Confidence, str]) -> Confidence:
        """
        Coerce an enum member or a tier name (any case) to a Confidence.

        Raises:
            ValueError: If ``value`` names no known tier.
        """
        if isinstance(value, cls):
            return value
        if isinstance(value, str):
            try:
                return cls(value.strip().lower())
            except ValueError:
                pass
        raise ValueError(f"Unknown confidence tier: {value!r}")


_CONFIDENCE_RANK = {
    Confidence.HIGH: 3,
    Confidence.MEDIUM: 2,
    Confidence.LOW: 1,
}


class ColorSource(Enum):
    """Extraction stream an observation came from, in priority order."""
    SEMANTIC = "semantic"    # role -> color (primary, background, ...)
    VARIABLE = "variable"    # stylesheet custom property
    PALETTE = "palette"      # sampled from rendered elements


# =============================================================================
# Parsed Color
# =============================================================================


@dataclass(frozen=True, slots=True)
class RGBAColor:
    """
    Integer RGB channels with optional alpha.

    Attributes:
        r, g, b: Channel values, nominally 0-255 (not validated)
        a: Alpha in 0..1, or None when the source had no alpha component
    """
    r: int
    g: int
    b: int
    a: Optional[float] = None

    @property
    def has_alpha(self) -> bool:
        """True only when alpha is present and below fully opaque."""
        return self.a is not None and self.a < 1

    @property
    def hex(self) -> str:
        """Lowercase ``#rrggbb``; alpha is never encoded."""
        return f"#{self.r:02x}{self.g:02x}{self.b:02x}"


# =============================================================================
# Observations
# =============================================================================


@dataclass(frozen=True, slots=True)
class ColorObservation:
    """
    One extracted color value plus provenance, prior to deduplication.

    Custom properties may arrive with LCH/OKLCH strings measured by the
    browser. Those are carried in ``precomputed_lch``/``precomputed_oklch``
    and take precedence over recomputed values during consolidation.

    Attributes:
        raw: Color string as observed (``#hex``, ``rgb()``, or anything else)
        confidence: Extraction certainty tier
        label: Role or property name ("" for sampled palette colors)
        precomputed_lch: Optional upstream ``lch(...)`` string
        precomputed_oklch: Optional upstream ``oklch(...)`` string
        source: Stream the observation came from, if known
    """
    raw: str
    confidence: Confidence
    label: str = ""
    precomputed_lch: Optional[str] = None
    precomputed_oklch: Optional[str] = None
    source: Optional[ColorSource] = None

    def __post_init__(self) -> None:
        """Validate field types."""
        if not isinstance(self.raw, str):
            raise ValueError(f"raw must be a string, got {type(self.raw).__name__}")
        if not isinstance(self.confidence, Confidence):
            raise ValueError(f"confidence must be a Confidence, got {self.confidence!r}")


# =============================================================================
# Records
# =============================================================================


@dataclass(frozen=True, slots=True)
class CanonicalColorRecord:
    """
    Four-format resolved representation of a single color.

    ``hex`` never carries alpha; translucency only shows up in the
    ``rgb``/``lch``/``oklch`` strings and in ``has_alpha``.

    For unparseable input every string field holds the raw input
    unchanged and ``has_alpha`` is False (see ``fallback_record``).
    """
    hex: str
    rgb: str
    lch: str
    oklch: str
    has_alpha: bool = False

    def to_dict(self) -> dict:
        """Serialize to dictionary."""
        return {
            "hex": self.hex,
            "rgb": self.rgb,
            "lch": self.lch,
            "oklch": self.oklch,
            "hasAlpha": self.has_alpha,
        }

    @classmethod
    def from_dict(cls, data: dict) -> CanonicalColorRecord:
        """Deserialize from dictionary."""
        return cls(
            hex=data["hex"],
            rgb=data["rgb"],
            lch=data["lch"],
            oklch=data["oklch"],
            has_alpha=data.get("hasAlpha", False),
        )


@dataclass(frozen=True, slots=True)
class ConsolidatedColorEntry:
    """
    A unique palette color after consolidation.

    Attributes:
        hex, rgb, lch, oklch: Formats from the first observation of this color
        label: Comma-joined, first-seen-ordered, duplicate-free labels
        confidence: Highest confidence seen for this color
    """
    hex: str
    rgb: str
    lch: str
    oklch: str
    label: str
    confidence: Confidence

    def __post_init__(self) -> None:
        """Validate field types."""
        if not isinstance(self.hex, str):
            raise ValueError(f"hex must be a string, got {type(self.hex).__name__}")
        if not isinstance(self.confidence, Confidence):
            raise ValueError(f"confidence must be a Confidence, got {self.confidence!r}")

    @property
    def key(self) -> str:
        """Deduplication key (lowercase hex)."""
        return self.hex.lower()

    @property
    def labels(self) -> tuple[str, ...]:
        """Individual labels, in first-seen order."""
        return tuple(self.label.split(", ")) if self.label else ()

    def to_dict(self) -> dict:
        """Serialize to dictionary."""
        return {
            "hex": self.hex,
            "rgb": self.rgb,
            "lch": self.lch,
            "oklch": self.oklch,
            "label": self.label,
            "confidence": self.confidence.value,
        }

    @classmethod
    def from_dict(cls, data: dict) -> ConsolidatedColorEntry:
        """Deserialize from dictionary."""
        return cls(
            hex=data["hex"],
            rgb=data["rgb"],
            lch=data["lch"],
            oklch=data["oklch"],
            label=data.get("label", ""),
            confidence=Confidence.parse(data["confidence"]),
        )
