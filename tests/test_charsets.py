import random
import unicodedata

import pytest

from rain.charsets import CharacterSet, get_inventory, random_glyph
from conftest import FixedRandom


class TestInventories:
    def test_every_set_has_glyphs(self):
        for char_set in CharacterSet.all_sets():
            assert len(char_set.get_characters()) > 0, char_set

    def test_japanese_is_large(self):
        chars = CharacterSet.JAPANESE.get_characters()
        assert len(chars) > 100
        assert "ｱ" in chars
        assert "7" in chars

    def test_inventory_is_stable(self):
        assert get_inventory(CharacterSet.KOREAN) == CharacterSet.KOREAN.get_characters()

    def test_no_undrawable_code_points(self):
        for char_set in CharacterSet.all_sets():
            for ch in char_set.get_characters():
                assert unicodedata.category(ch) not in {"Cn", "Cc", "Cs", "Co"}

    def test_mixed_covers_every_script(self):
        mixed = set(CharacterSet.MIXED.get_characters())
        for char_set in CharacterSet.all_sets():
            if char_set is not CharacterSet.MIXED:
                assert set(char_set.get_characters()) <= mixed


class TestRandomGlyphs:
    def test_draws_come_from_inventory(self):
        rng = random.Random(7)
        for char_set in CharacterSet.all_sets():
            inventory = set(char_set.get_characters())
            for _ in range(20):
                assert random_glyph(char_set, rng) in inventory

    @pytest.mark.parametrize("roll,script", [
        (0.0, CharacterSet.JAPANESE),
        (0.49, CharacterSet.JAPANESE),
        (0.55, CharacterSet.HINDI),
        (0.65, CharacterSet.TAMIL),
        (0.75, CharacterSet.SINHALA),
        (0.85, CharacterSet.KOREAN),
        (0.95, CharacterSet.JAWI),
    ])
    def test_mixed_weights(self, roll, script):
        ch = CharacterSet.MIXED.random_character(FixedRandom(roll=roll))
        assert ch == script.get_characters()[0]


class TestCharsetNames:
    @pytest.mark.parametrize("name,expected", [
        ("jp", CharacterSet.JAPANESE),
        ("Hindi", CharacterSet.HINDI),
        ("ta", CharacterSet.TAMIL),
        ("si", CharacterSet.SINHALA),
        ("ko", CharacterSet.KOREAN),
        ("jw", CharacterSet.JAWI),
        ("mix", CharacterSet.MIXED),
    ])
    def test_aliases(self, name, expected):
        assert CharacterSet.from_name(name) is expected

    def test_unknown(self):
        with pytest.raises(ValueError, match="Unknown character set"):
            CharacterSet.from_name("klingon")

    def test_default_and_cycle(self):
        assert CharacterSet.default() is CharacterSet.JAPANESE
        assert CharacterSet.MIXED.next() is CharacterSet.JAPANESE
