# Copyright (c) 2026 Brandcolor
# SPDX-License-Identifier: MIT

"""
Color consolidation layer.

Collapses observations that resolve to the same hex into one palette
entry. This runs AFTER extraction, BEFORE rendering/export.

Merge policy per hex:
- Labels: appended in first-seen order, never duplicated (exact match)
- Confidence: highest tier wins, ties keep the existing value
- Formats: the first observation's rgb/lch/oklch are kept

Output keeps the first-occurrence order of each hex. It is never
re-sorted, so callers must pass observations in source-priority order
(semantic roles, then custom properties, then sampled palette).
"""

from __future__ import annotations

import dataclasses
import logging
from typing import Iterable

from brandcolor.convert.format import normalize_color_format
from brandcolor.schema import (
    CanonicalColorRecord,
    ColorObservation,
    Confidence,
    ConsolidatedColorEntry,
)

logger = logging.getLogger(__name__)

LABEL_SEPARATOR = ", "

CONFIDENCE_ORDER = {c: c.rank for c in Confidence}


def resolve_record(observation: ColorObservation) -> CanonicalColorRecord:
    """
    Canonical record for one observation.

    Upstream-measured LCH/OKLCH strings replace the recomputed ones when
    present, so values shown match what the browser reported.
    """
    record = normalize_color_format(observation.raw)
    if observation.precomputed_lch:
        record = dataclasses.replace(record, lch=observation.precomputed_lch)
    if observation.precomputed_oklch:
        record = dataclasses.replace(record, oklch=observation.precomputed_oklch)
    return record


def merge_labels(existing: str, incoming: str) -> str:
    """
    Append ``incoming`` to a comma-joined label set unless already present.

    >>> merge_labels("Primary", "Accent")
    'Primary, Accent'
    >>> merge_labels("Primary, Accent", "Primary")
    'Primary, Accent'
    """
    if not incoming:
        return existing
    if not existing:
        return incoming
    if incoming in existing.split(LABEL_SEPARATOR):
        return existing
    return f"{existing}{LABEL_SEPARATOR}{incoming}"


def _max_confidence(existing: Confidence, incoming: Confidence) -> Confidence:
    if CONFIDENCE_ORDER[incoming] > CONFIDENCE_ORDER[existing]:
        return incoming
    return existing


def consolidate(
    observations: Iterable[ColorObservation],
) -> tuple[ConsolidatedColorEntry, ...]:
    """
    Deduplicate observations into an ordered palette.

    Folding is sequential: label order and entry order both depend on
    the input order.

    Args:
        observations: Observations in source-priority order

    Returns:
        One entry per unique lowercase hex, in first-occurrence order
    """
    entries: dict[str, ConsolidatedColorEntry] = {}
    seen = 0

    for obs in observations:
        seen += 1
        record = resolve_record(obs)
        key = record.hex.lower()

        existing = entries.get(key)
        if existing is None:
            entries[key] = ConsolidatedColorEntry(
                hex=record.hex,
                rgb=record.rgb,
                lch=record.lch,
                oklch=record.oklch,
                label=obs.label,
                confidence=obs.confidence,
            )
            continue

        merged = dataclasses.replace(
            existing,
            label=merge_labels(existing.label, obs.label),
            confidence=_max_confidence(existing.confidence, obs.confidence),
        )
        logger.debug(
            "Merged %s into %s (label=%r, confidence=%s)",
            obs.raw, key, merged.label, merged.confidence.value,
        )
        entries[key] = merged

    logger.debug("Consolidated %d observations into %d colors", seen, len(entries))
    return tuple(entries.values())
