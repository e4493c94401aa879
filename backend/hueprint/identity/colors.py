"""Colour derivation for a user's avatar hue."""

from __future__ import annotations

import colorsys
import math
from dataclasses import dataclass
from typing import Literal

from hueprint.identity.hue import normalize_hue

ContrastToken = Literal["light", "dark"]

# (saturation %, lightness %) per visual role
BACKGROUND_SL = (65, 45)
LIGHT_BACKGROUND_SL = (70, 90)
ACCENT_TEXT_SL = (70, 30)

# CSS values the contrast tokens stand for
LIGHT_TEXT_COLOR = "#FFFFFF"
DARK_TEXT_COLOR = "#111827"


@dataclass(frozen=True)
class IdentityColors:
    hue: int
    background: str
    light_background: str
    accent_text: str
    contrast_text: ContrastToken


def _hsl(hue: int, saturation: int, lightness: int) -> str:
    return f"hsl({normalize_hue(hue)}, {saturation}%, {lightness}%)"


def to_background(hue: int) -> str:
    return _hsl(hue, *BACKGROUND_SL)


def to_light_background(hue: int) -> str:
    return _hsl(hue, *LIGHT_BACKGROUND_SL)


def to_accent_text(hue: int) -> str:
    return _hsl(hue, *ACCENT_TEXT_SL)


def hsl_to_rgb(hue: int, saturation: int, lightness: int) -> tuple[float, float, float]:
    """Convert HSL (degrees, percent, percent) to sRGB channels in ``[0, 1]``."""
    return colorsys.hls_to_rgb(normalize_hue(hue) / 360.0, lightness / 100.0, saturation / 100.0)


def to_hex(hue: int, saturation: int, lightness: int) -> str:
    r, g, b = hsl_to_rgb(hue, saturation, lightness)
    return f"#{round(r * 255):02X}{round(g * 255):02X}{round(b * 255):02X}"


def _linearize(channel: float) -> float:
    if channel <= 0.04045:
        return channel / 12.92
    return ((channel + 0.055) / 1.055) ** 2.4


def relative_luminance(rgb: tuple[float, float, float]) -> float:
    r, g, b = (_linearize(c) for c in rgb)
    return 0.2126 * r + 0.7152 * g + 0.0722 * b


def hex_luminance(value: str) -> float:
    raw = value.lstrip("#")
    rgb = tuple(int(raw[i : i + 2], 16) / 255.0 for i in (0, 2, 4))
    return relative_luminance(rgb)  # type: ignore[arg-type]


def contrast_ratio(first: float, second: float) -> float:
    """WCAG contrast ratio between two relative luminances."""
    lighter, darker = max(first, second), min(first, second)
    return (lighter + 0.05) / (darker + 0.05)


# Background luminance at which both text tokens give the same contrast ratio:
# (L_light + 0.05) / (L + 0.05) == (L + 0.05) / (L_dark + 0.05)
# Comes out near 0.2 rather than a flat 0.5: at 65% saturation and 45% lightness no hue
# reaches 0.5 (yellow tops out near 0.48), so 0.5 would put white text on yellow at ~2:1.
CONTRAST_THRESHOLD = math.sqrt((hex_luminance(LIGHT_TEXT_COLOR) + 0.05) * (hex_luminance(DARK_TEXT_COLOR) + 0.05)) - 0.05


def background_luminance(hue: int) -> float:
    return relative_luminance(hsl_to_rgb(hue, *BACKGROUND_SL))


def to_contrast_text(hue: int) -> ContrastToken:
    """
    Choose the text token to draw on top of ``to_background(hue)``.

    Computed per hue: at the same HSL lightness saturated yellows and greens are
    far brighter than blues and reds, so they need dark text.
    """
    if background_luminance(hue) > CONTRAST_THRESHOLD:
        return "dark"
    return "light"


def contrast_text_color(hue: int) -> str:
    return DARK_TEXT_COLOR if to_contrast_text(hue) == "dark" else LIGHT_TEXT_COLOR


def derive_colors(hue: int) -> IdentityColors:
    hue = normalize_hue(hue)
    return IdentityColors(
        hue=hue,
        background=to_background(hue),
        light_background=to_light_background(hue),
        accent_text=to_accent_text(hue),
        contrast_text=to_contrast_text(hue),
    )
