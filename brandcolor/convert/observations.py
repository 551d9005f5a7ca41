# Copyright (c) 2026 Brandcolor
# SPDX-License-Identifier: MIT

"""
Observation builder for extracted page colors.

Turns the extraction layer's color payload into an ordered sequence of
ColorObservation values ready for ``consolidate``:

    {
        "semantic":     {"primary": "#3b82f6", ...},
        "cssVariables": {"--brand": "#3b82f6",
                         "--accent": {"value": "rgb(...)", "lch": "...", "oklch": "..."}},
        "palette":      [{"color": "#111111", "confidence": "high", "lch": "..."}, ...],
    }

Streams are emitted in priority order, each capped/filtered here so the
consolidator can stay order-driven.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Mapping, Optional, Sequence

from brandcolor.schema import ColorObservation, ColorSource, Confidence

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ExtractionLimits:
    """Caps and filters applied while building observations."""

    # Custom properties taken, in declaration order
    max_css_variables: int = 15

    # Sampled palette colors taken, after confidence filtering
    max_palette: int = 20

    # Sampled palette tiers worth showing; low-confidence samples are noise
    palette_confidences: tuple[Confidence, ...] = (Confidence.HIGH, Confidence.MEDIUM)

    def __post_init__(self) -> None:
        """Validate limits are non-negative."""
        if self.max_css_variables < 0:
            raise ValueError(f"max_css_variables must be >= 0, got {self.max_css_variables}")
        if self.max_palette < 0:
            raise ValueError(f"max_palette must be >= 0, got {self.max_palette}")


def semantic_observations(semantic: Mapping[str, Optional[str]]) -> list[ColorObservation]:
    """One high-confidence observation per non-empty role color."""
    return [
        ColorObservation(
            raw=color,
            confidence=Confidence.HIGH,
            label=role,
            source=ColorSource.SEMANTIC,
        )
        for role, color in semantic.items()
        if color
    ]


def _variable_value(name: str, value: Any) -> Optional[tuple[str, Optional[str], Optional[str]]]:
    # Custom properties arrive either as a bare string or as
    # {"value": ..., "lch": ..., "oklch": ...}
    if isinstance(value, str):
        return value, None, None
    if isinstance(value, Mapping) and isinstance(value.get("value"), str):
        return value["value"], value.get("lch") or None, value.get("oklch") or None
    logger.debug("Skipping custom property %s with unusable value %r", name, value)
    return None


def variable_observations(
    variables: Mapping[str, Any],
    limit: int = 15,
) -> list[ColorObservation]:
    """High-confidence observations for the first ``limit`` custom properties."""
    observations = []
    for name, value in list(variables.items())[:limit]:
        resolved = _variable_value(name, value)
        if resolved is None:
            continue
        raw, lch, oklch = resolved
        observations.append(ColorObservation(
            raw=raw,
            confidence=Confidence.HIGH,
            label=name,
            precomputed_lch=lch,
            precomputed_oklch=oklch,
            source=ColorSource.VARIABLE,
        ))
    return observations


def _palette_confidence(entry: Mapping[str, Any]) -> Optional[Confidence]:
    try:
        return Confidence.parse(entry.get("confidence"))
    except ValueError:
        return None


def palette_observations(
    palette: Sequence[Mapping[str, Any]],
    limits: Optional[ExtractionLimits] = None,
) -> list[ColorObservation]:
    """
    Unlabeled observations for sampled palette colors.

    Only tiers in ``limits.palette_confidences`` are kept, then the first
    ``limits.max_palette`` of those.
    """
    cfg = limits or ExtractionLimits()

    accepted = []
    for entry in palette:
        confidence = _palette_confidence(entry)
        if confidence in cfg.palette_confidences:
            accepted.append((entry, confidence))

    observations = []
    for entry, confidence in accepted[:cfg.max_palette]:
        raw = entry.get("color")
        if not isinstance(raw, str):
            logger.debug("Skipping palette entry without a color string: %r", entry)
            continue
        observations.append(ColorObservation(
            raw=raw,
            confidence=confidence,
            label="",
            precomputed_lch=entry.get("lch") or None,
            precomputed_oklch=entry.get("oklch") or None,
            source=ColorSource.PALETTE,
        ))
    return observations


def collect_observations(
    colors: Mapping[str, Any],
    limits: Optional[ExtractionLimits] = None,
) -> tuple[ColorObservation, ...]:
    """
    Build the priority-ordered observation sequence for one extraction run.

    Order: semantic roles, then custom properties, then sampled palette.

    Args:
        colors: Color payload with optional ``semantic``, ``cssVariables``
            and ``palette`` keys
        limits: Caps and filters (uses defaults if None)

    Returns:
        Observations ready for ``consolidate``
    """
    cfg = limits or ExtractionLimits()

    semantic = semantic_observations(colors.get("semantic") or {})
    variables = variable_observations(
        colors.get("cssVariables") or {}, limit=cfg.max_css_variables,
    )
    palette = palette_observations(colors.get("palette") or [], cfg)

    logger.debug(
        "Collected %d semantic, %d variable, %d palette observations",
        len(semantic), len(variables), len(palette),
    )
    return tuple(semantic + variables + palette)


def hidden_count(
    colors: Mapping[str, Any],
    limits: Optional[ExtractionLimits] = None,
) -> int:
    """
    Number of custom properties and palette samples cut by the caps.

    Counts against the raw stream sizes, so filtered-out low-confidence
    samples beyond the cap are included.
    """
    cfg = limits or ExtractionLimits()
    variables = colors.get("cssVariables") or {}
    palette = colors.get("palette") or []
    return (
        max(0, len(variables) - cfg.max_css_variables)
        + max(0, len(palette) - cfg.max_palette)
    )
