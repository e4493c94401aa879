"""Identity derivation: hue allocation, colours, initials, patterns and assignee matching.

Everything here is pure; callers pass plain values in and persist what comes back.
"""

from __future__ import annotations

from hueprint.identity.colors import (
    IdentityColors,
    derive_colors,
    to_accent_text,
    to_background,
    to_contrast_text,
    to_light_background,
)
from hueprint.identity.hue import DEFAULT_HUE, allocate_hue, normalize_hue
from hueprint.identity.initials import extract_initials
from hueprint.identity.matcher import RosterEntry, match_assignee
from hueprint.identity.pattern import PatternVariant, generate_pattern, pattern_variant

__all__ = [
    "DEFAULT_HUE",
    "IdentityColors",
    "PatternVariant",
    "RosterEntry",
    "allocate_hue",
    "derive_colors",
    "extract_initials",
    "generate_pattern",
    "match_assignee",
    "normalize_hue",
    "pattern_variant",
    "to_accent_text",
    "to_background",
    "to_contrast_text",
    "to_light_background",
]
