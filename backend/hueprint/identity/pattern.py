"""Deterministic geometric avatar patterns.

A user's ``avatar_pattern`` seed is hashed, the hash seeds a small explicit
pseudo-random generator, and the generator's draw sequence decides which of four
glyph styles is drawn and how. Nothing else feeds the drawing, so the same
``(seed, hue, size)`` always yields byte-identical SVG.

The hash and generator below are load-bearing: changing either reshuffles every
existing user's glyph. Bump ``PATTERN_ALGORITHM_VERSION`` if that ever happens
on purpose.
"""

from __future__ import annotations

import html
import math
from collections.abc import Sequence
from enum import Enum
from functools import lru_cache
from typing import TypeVar

from hueprint.identity.colors import contrast_text_color, to_background, to_light_background
from hueprint.identity.hue import normalize_hue

PATTERN_ALGORITHM_VERSION = 1

_MASK32 = 0xFFFFFFFF
_FNV_OFFSET = 0x811C9DC5
_FNV_PRIME = 0x01000193

# Every glyph is drawn on a 100x100 canvas and scaled by width/height.
_CANVAS = 100
_CENTER = _CANVAS / 2

# Lightness steps for shades of the avatar hue (saturation stays at the background's 65%).
_SHADES = (30, 38, 45, 52, 60)

T = TypeVar("T")


class PatternVariant(str, Enum):
    BLOCKS = "blocks"
    TRIANGLES = "triangles"
    CIRCLES = "circles"
    RINGS = "rings"


_VARIANTS = (
    PatternVariant.BLOCKS,
    PatternVariant.TRIANGLES,
    PatternVariant.CIRCLES,
    PatternVariant.RINGS,
)


def seed_hash(seed: str) -> int:
    """32-bit FNV-1a over the UTF-8 bytes of ``seed``."""
    h = _FNV_OFFSET
    for byte in seed.encode("utf-8"):
        h ^= byte
        h = (h * _FNV_PRIME) & _MASK32
    return h


class SeededRandom:
    """mulberry32 generator; the whole state is one 32-bit integer."""

    def __init__(self, seed: int) -> None:
        self._state = seed & _MASK32

    @classmethod
    def from_seed(cls, seed: str) -> "SeededRandom":
        return cls(seed_hash(seed))

    def next_uint32(self) -> int:
        self._state = (self._state + 0x6D2B79F5) & _MASK32
        t = self._state
        t = ((t ^ (t >> 15)) * (t | 1)) & _MASK32
        t ^= (t + (((t ^ (t >> 7)) * (t | 61)) & _MASK32)) & _MASK32
        return (t ^ (t >> 14)) & _MASK32

    def random(self) -> float:
        """Float in ``[0, 1)``."""
        return self.next_uint32() / 4294967296.0

    def randint(self, low: int, high: int) -> int:
        """Integer in ``[low, high]``, both ends inclusive."""
        if high < low:
            raise ValueError(f"empty range [{low}, {high}]")
        return low + self.next_uint32() % (high - low + 1)

    def chance(self, probability: float) -> bool:
        return self.random() < probability

    def choice(self, items: Sequence[T]) -> T:
        if not items:
            raise IndexError("cannot choose from an empty sequence")
        return items[self.next_uint32() % len(items)]


def _num(value: float) -> str:
    # Two decimals keep the markup stable across platforms' libm.
    text = f"{value:.2f}".rstrip("0").rstrip(".")
    return "0" if text in ("-0", "") else text


def _shade(hue: int, lightness: int) -> str:
    return f"hsl({hue}, 65%, {lightness}%)"


def _point(angle_deg: float, radius: float) -> tuple[float, float]:
    rad = math.radians(angle_deg)
    return _CENTER + radius * math.cos(rad), _CENTER + radius * math.sin(rad)


def _draw_blocks(rng: SeededRandom, hue: int) -> list[str]:
    grid_size = 5
    padding = 10
    cell = (_CANVAS - 2 * padding) / grid_size
    half = (grid_size + 1) // 2

    grid = [[False] * grid_size for _ in range(grid_size)]
    for row in range(grid_size):
        for col in range(half):
            filled = rng.chance(0.5)
            grid[row][col] = filled
            grid[row][grid_size - 1 - col] = filled
    if not any(any(row) for row in grid):
        grid[grid_size // 2][grid_size // 2] = True

    fill = to_background(hue)
    parts: list[str] = []
    for row in range(grid_size):
        for col in range(grid_size):
            if grid[row][col]:
                parts.append(
                    f'<rect x="{_num(padding + col * cell)}" y="{_num(padding + row * cell)}"'
                    f' width="{_num(cell)}" height="{_num(cell)}" fill="{fill}"/>'
                )
    return parts


def _draw_triangles(rng: SeededRandom, hue: int) -> list[str]:
    radius = 46
    rotation = rng.randint(0, 59)
    parts: list[str] = []
    for idx in range(6):
        start = rotation + idx * 60
        x1, y1 = _point(start, radius)
        x2, y2 = _point(start + 60, radius)
        fill = _shade(hue, rng.choice(_SHADES))
        parts.append(
            f'<polygon points="{_num(_CENTER)},{_num(_CENTER)} {_num(x1)},{_num(y1)} {_num(x2)},{_num(y2)}"'
            f' fill="{fill}"/>'
        )
    return parts


def _draw_circles(rng: SeededRandom, hue: int) -> list[str]:
    outer = 44
    ring_count = rng.randint(2, 4)
    stroke_width = rng.randint(3, 7)
    dot_radius = rng.randint(6, 12)
    spacing = (outer - dot_radius) / ring_count

    parts: list[str] = []
    for idx in range(ring_count):
        radius = outer - idx * spacing
        stroke = _shade(hue, rng.choice(_SHADES))
        parts.append(
            f'<circle cx="{_num(_CENTER)}" cy="{_num(_CENTER)}" r="{_num(radius)}"'
            f' fill="none" stroke="{stroke}" stroke-width="{stroke_width}"/>'
        )
    parts.append(
        f'<circle cx="{_num(_CENTER)}" cy="{_num(_CENTER)}" r="{dot_radius}" fill="{to_background(hue)}"/>'
    )
    return parts


def _draw_rings(rng: SeededRandom, hue: int) -> list[str]:
    core_radius = rng.randint(10, 18)
    arc_count = rng.randint(3, 6)
    arc_radius = rng.randint(28, 40)
    stroke_width = rng.randint(5, 10)
    rotation = rng.randint(0, 359)
    slot = 360 / arc_count

    parts = [
        f'<circle cx="{_num(_CENTER)}" cy="{_num(_CENTER)}" r="{core_radius}" fill="{to_background(hue)}"/>'
    ]
    for idx in range(arc_count):
        span = slot * (0.45 + 0.4 * rng.random())
        start = rotation + idx * slot
        x1, y1 = _point(start, arc_radius)
        x2, y2 = _point(start + span, arc_radius)
        large_arc = 1 if span > 180 else 0
        stroke = _shade(hue, rng.choice(_SHADES))
        parts.append(
            f'<path d="M {_num(x1)} {_num(y1)} A {arc_radius} {arc_radius} 0 {large_arc} 1 {_num(x2)} {_num(y2)}"'
            f' fill="none" stroke="{stroke}" stroke-width="{stroke_width}" stroke-linecap="round"/>'
        )
    return parts


_DRAWERS = {
    PatternVariant.BLOCKS: _draw_blocks,
    PatternVariant.TRIANGLES: _draw_triangles,
    PatternVariant.CIRCLES: _draw_circles,
    PatternVariant.RINGS: _draw_rings,
}


def _check_size(size: float) -> None:
    if isinstance(size, bool) or not isinstance(size, (int, float)):
        raise ValueError(f"size must be a number, got {size!r}")
    if not math.isfinite(size) or size <= 0:
        raise ValueError(f"size must be a positive finite number, got {size!r}")


def _svg(size: float, body: list[str], **attrs: str) -> str:
    extra = "".join(f' data-{key}="{value}"' for key, value in attrs.items())
    return (
        f'<svg xmlns="http://www.w3.org/2000/svg" width="{_num(size)}" height="{_num(size)}"'
        f' viewBox="0 0 {_CANVAS} {_CANVAS}" role="img"{extra}>'
        + "".join(body)
        + "</svg>"
    )


def pattern_variant(seed: str) -> PatternVariant:
    """The glyph style ``seed`` renders as; the generator's first draw."""
    return SeededRandom.from_seed(seed).choice(_VARIANTS)


@lru_cache(maxsize=512, typed=True)
def generate_pattern(seed: str, hue: int, size: float) -> str:
    """Render the seed's glyph as an SVG document ``size`` pixels square."""
    _check_size(size)
    hue = normalize_hue(hue)
    rng = SeededRandom.from_seed(seed)
    variant = rng.choice(_VARIANTS)

    body = [f'<rect width="{_CANVAS}" height="{_CANVAS}" fill="{to_light_background(hue)}"/>']
    body.extend(_DRAWERS[variant](rng, hue))
    return _svg(size, body, pattern=variant.value)


def generate_initials_badge(initials: str, hue: int, size: float) -> str:
    """Round badge with the initials over the avatar background colour."""
    _check_size(size)
    hue = normalize_hue(hue)
    label = html.escape(initials or "")
    font_size = 40 if len(initials or "") <= 1 else 36
    body = [
        f'<circle cx="{_num(_CENTER)}" cy="{_num(_CENTER)}" r="{_num(_CENTER)}" fill="{to_background(hue)}"/>',
        f'<text x="50" y="50" dy="0.35em" text-anchor="middle" font-size="{font_size}"'
        f' font-family="system-ui,sans-serif" font-weight="600" fill="{contrast_text_color(hue)}">{label}</text>',
    ]
    return _svg(size, body)
