from __future__ import annotations

import unittest

from tests._bootstrap import bootstrap_backend_imports


bootstrap_backend_imports()

from hueprint.identity.colors import (  # noqa: E402
    DARK_TEXT_COLOR,
    LIGHT_TEXT_COLOR,
    background_luminance,
    contrast_ratio,
    contrast_text_color,
    derive_colors,
    hex_luminance,
    relative_luminance,
    to_accent_text,
    to_background,
    to_contrast_text,
    to_hex,
    to_light_background,
)


class ColorStringTests(unittest.TestCase):
    def test_role_colors(self) -> None:
        self.assertEqual(to_background(210), "hsl(210, 65%, 45%)")
        self.assertEqual(to_light_background(210), "hsl(210, 70%, 90%)")
        self.assertEqual(to_accent_text(210), "hsl(210, 70%, 30%)")

    def test_hue_is_normalized(self) -> None:
        self.assertEqual(to_background(370), to_background(10))
        self.assertEqual(to_light_background(-90), to_light_background(270))

    def test_to_hex(self) -> None:
        self.assertEqual(to_hex(0, 100, 50), "#FF0000")
        self.assertEqual(to_hex(120, 100, 50), "#00FF00")
        self.assertEqual(to_hex(0, 0, 100), "#FFFFFF")

    def test_derive_colors_bundles_all_roles(self) -> None:
        colors = derive_colors(400)
        self.assertEqual(colors.hue, 40)
        self.assertEqual(colors.background, to_background(40))
        self.assertEqual(colors.light_background, to_light_background(40))
        self.assertEqual(colors.accent_text, to_accent_text(40))
        self.assertEqual(colors.contrast_text, to_contrast_text(40))

    def test_derivation_is_stable(self) -> None:
        self.assertEqual(derive_colors(123), derive_colors(123))


class ContrastTests(unittest.TestCase):
    def test_luminance_extremes(self) -> None:
        self.assertAlmostEqual(relative_luminance((1.0, 1.0, 1.0)), 1.0)
        self.assertAlmostEqual(relative_luminance((0.0, 0.0, 0.0)), 0.0)
        self.assertAlmostEqual(hex_luminance("#FFFFFF"), 1.0)

    def test_blue_gets_light_text(self) -> None:
        self.assertEqual(to_contrast_text(240), "light")
        self.assertEqual(to_contrast_text(0), "light")

    def test_yellow_gets_dark_text(self) -> None:
        self.assertEqual(to_contrast_text(60), "dark")
        self.assertEqual(contrast_text_color(60), DARK_TEXT_COLOR)

    def test_yellow_is_brighter_than_blue(self) -> None:
        self.assertGreater(background_luminance(60), background_luminance(240))

    def test_contrast_sweep_is_readable(self) -> None:
        for hue in range(0, 360, 10):
            bg = background_luminance(hue)
            chosen = contrast_text_color(hue)
            other = LIGHT_TEXT_COLOR if chosen == DARK_TEXT_COLOR else DARK_TEXT_COLOR
            chosen_ratio = contrast_ratio(bg, hex_luminance(chosen))
            other_ratio = contrast_ratio(bg, hex_luminance(other))
            self.assertGreaterEqual(chosen_ratio, 4.0, msg=f"hue={hue}")
            self.assertGreaterEqual(chosen_ratio, other_ratio, msg=f"hue={hue}")
