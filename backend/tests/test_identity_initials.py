from __future__ import annotations

import unittest

from tests._bootstrap import bootstrap_backend_imports


bootstrap_backend_imports()

from hueprint.identity.initials import extract_initials, is_cjk  # noqa: E402


class LatinInitialsTests(unittest.TestCase):
    def test_two_words(self) -> None:
        self.assertEqual(extract_initials("John Smith", None), "JS")

    def test_single_word(self) -> None:
        self.assertEqual(extract_initials("Madonna", None), "M")

    def test_only_first_two_words_count(self) -> None:
        self.assertEqual(extract_initials("mary ann van der berg", None), "MA")

    def test_surrounding_and_repeated_whitespace(self) -> None:
        self.assertEqual(extract_initials("  ada \t lovelace  ", None), "AL")

    def test_accented_letters_are_uppercased(self) -> None:
        self.assertEqual(extract_initials("élodie ørsted", None), "ÉØ")

    def test_expanding_uppercase_keeps_one_character_per_word(self) -> None:
        self.assertEqual(extract_initials("ßtraße Weg", None), "SW")
        self.assertEqual(extract_initials("ßen", None), "S")


class CjkInitialsTests(unittest.TestCase):
    def test_kanji_name_keeps_first_two_characters(self) -> None:
        self.assertEqual(extract_initials("田中太郎", None), "田中")

    def test_spaced_cjk_name(self) -> None:
        self.assertEqual(extract_initials("李 明", None), "李明")

    def test_kana(self) -> None:
        self.assertEqual(extract_initials("さくら", None), "さく")
        self.assertEqual(extract_initials("カタカナ", None), "カタ")

    def test_single_character_name(self) -> None:
        self.assertEqual(extract_initials("王", None), "王")

    def test_detection(self) -> None:
        self.assertTrue(is_cjk("Tanaka 太郎"))
        self.assertFalse(is_cjk("Tanaka Taro"))


class EmailFallbackTests(unittest.TestCase):
    def test_email_local_part(self) -> None:
        self.assertEqual(extract_initials(None, "john@example.com"), "JO")

    def test_skips_punctuation(self) -> None:
        self.assertEqual(extract_initials(None, "a.b-c@example.com"), "AB")

    def test_email_initials_stay_two_characters(self) -> None:
        self.assertEqual(extract_initials(None, "ßa@example.com"), "SA")

    def test_blank_name_falls_back_to_email(self) -> None:
        self.assertEqual(extract_initials("   ", "zoe@example.com"), "ZO")

    def test_name_wins_over_email(self) -> None:
        self.assertEqual(extract_initials("Jane Doe", "john@example.com"), "JD")

    def test_nothing_usable(self) -> None:
        self.assertEqual(extract_initials(None, None), "")
        self.assertEqual(extract_initials("", ""), "")
        self.assertEqual(extract_initials(None, "@example.com"), "")
