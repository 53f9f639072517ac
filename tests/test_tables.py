"""Tests for the combining-class and composition oracles."""

import pytest

from unialign import canonical_combining_class, compose
from unialign._tables import decompose_char


# =============================================================================
# canonical_combining_class
# =============================================================================


class TestCombiningClass:
    def test_starters(self):
        assert canonical_combining_class("a") == 0
        assert canonical_combining_class("\u1161") == 0
        assert canonical_combining_class(" ") == 0

    def test_marks(self):
        assert canonical_combining_class("\u0301") == 230
        assert canonical_combining_class("\u0323") == 220
        assert canonical_combining_class("\u0345") == 240
        assert canonical_combining_class("\u093c") == 7


# =============================================================================
# compose
# =============================================================================


class TestCompose:
    @pytest.mark.parametrize(
        "base,mark,expected",
        [
            ("e", "\u0301", "\u00e9"),
            ("A", "\u030a", "\u00c5"),
            ("\u00fc", "\u0304", "\u01d6"),
            ("\u1ea1", "\u0302", "\u1ead"),
            ("\u03b1", "\u0345", "\u1fb3"),
            ("\u0b47", "\u0b3e", "\u0b4b"),
        ],
    )
    def test_primary_composites(self, base, mark, expected):
        assert compose(base, mark) == expected

    def test_no_composite(self):
        assert compose("e", "\u0305") is None
        assert compose("q", "\u0301") is None
        assert compose("a", "b") is None

    def test_composition_exclusion(self):
        # U+0958 decomposes to KA + NUKTA but is excluded from composition
        assert compose("\u0915", "\u093c") is None

    def test_non_starter_decomposition(self):
        # U+0344 decomposes to U+0308 U+0301 and never recomposes
        assert compose("\u0308", "\u0301") is None

    def test_singleton_not_produced(self):
        # U+212B ANGSTROM SIGN is a singleton; A + ring composes to U+00C5
        assert compose("A", "\u030a") != "\u212b"


# =============================================================================
# Hangul
# =============================================================================


class TestHangul:
    def test_lv(self):
        assert compose("\u1100", "\u1161") == "\uac00"
        assert compose("\u1112", "\u1161") == "\ud558"

    def test_lvt(self):
        assert compose("\uac00", "\u11a8") == "\uac01"
        assert compose("\ud558", "\u11ab") == "\ud55c"

    def test_lvt_is_final(self):
        assert compose("\uac01", "\u11a8") is None

    def test_vowel_then_consonant(self):
        assert compose("\u1161", "\u1100") is None


# =============================================================================
# decompose_char
# =============================================================================


class TestDecomposeChar:
    def test_canonical(self):
        assert decompose_char("\u00e9") == "e\u0301"
        assert decompose_char("\u212b") == "A\u030a"

    def test_canonical_keeps_compatibility_chars(self):
        assert decompose_char("\ufb01") == "\ufb01"

    def test_compatibility(self):
        assert decompose_char("\ufb01", True) == "fi"
        assert decompose_char("\u00bd", True) == "1\u20442"

    def test_hangul(self):
        assert decompose_char("\ud55c") == "\u1112\u1161\u11ab"

    def test_unchanged(self):
        assert decompose_char("x") == "x"
