"""Hue allocation on the 360 degree colour wheel."""

from __future__ import annotations

import math
from collections.abc import Iterable

HUE_CIRCLE = 360

# Anchor for the very first user. Pinned so historical allocations replay identically.
DEFAULT_HUE = 210


def normalize_hue(value: float) -> int:
    """Fold any finite number onto ``[0, 360)``."""
    if isinstance(value, float) and not math.isfinite(value):
        raise ValueError(f"hue must be finite, got {value!r}")
    return int(value) % HUE_CIRCLE


def circular_distance(a: int, b: int) -> int:
    diff = abs(normalize_hue(a) - normalize_hue(b))
    return min(diff, HUE_CIRCLE - diff)


def allocate_hue(existing_hues: Iterable[int]) -> int:
    """
    Pick the hue furthest from every hue already in use.

    The wheel is cut at each existing hue; the widest arc between two neighbours
    (the last one wrapping round to the first) is split in half. When several arcs
    share the widest span the first one in ascending order wins, so the same set
    of hues always yields the same answer. A single existing hue produces the
    opposite side of the wheel.
    """
    hues = sorted(normalize_hue(h) for h in existing_hues)
    if not hues:
        return DEFAULT_HUE

    best_start = hues[0]
    best_gap = -1
    for idx, start in enumerate(hues):
        if idx + 1 < len(hues):
            end = hues[idx + 1]
        else:
            end = hues[0] + HUE_CIRCLE
        gap = end - start
        if gap > best_gap:
            best_start, best_gap = start, gap

    return (best_start + best_gap // 2) % HUE_CIRCLE
