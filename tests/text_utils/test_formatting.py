"""Tests for text_utils.formatting."""

import pytest

from text_utils import (
    capitalize,
    crop,
    ends_with,
    pad,
    strip_accents,
    wrap,
)


class TestStripAccents:
    """Tests for accent removal."""

    def test_lowercase_vowels(self):
        """Test every entry of the accent table."""
        assert strip_accents("àâä éèêë îï ôö ùûü") == "aaa eeee ii oo uuu"

    def test_uppercase_maps_to_lowercase(self):
        """Test case-insensitive matching."""
        assert strip_accents("ÀÉÎÔÛ") == "aeiou"

    def test_other_characters_kept(self):
        """Test that characters outside the table pass through."""
        assert strip_accents("ça ñ ÿ ABC") == "ça ñ ÿ ABC"

    def test_sentence(self):
        """Test a mixed sentence."""
        assert strip_accents("Élève à l'école") == "eleve a l'ecole"


class TestCapitalize:
    """Tests for capitalize."""

    def test_first_letter(self):
        """Test that only the first character changes."""
        assert capitalize("hello") == "Hello"
        assert capitalize("hello World") == "Hello World"

    def test_rest_unchanged(self):
        """Test that later characters keep their case."""
        assert capitalize("hELLO") == "HELLO"

    def test_empty(self):
        """Test the empty string."""
        assert capitalize("") == ""


class TestEndsWith:
    """Tests for ends_with."""

    def test_matches(self):
        """Test a real suffix."""
        assert ends_with("filename.txt", ".txt") is True

    def test_no_match(self):
        """Test a non-suffix."""
        assert ends_with("filename.txt", ".md") is False

    def test_empty_suffix(self):
        """Test that the empty suffix always matches."""
        assert ends_with("abc", "") is True
        assert ends_with("", "") is True

    def test_suffix_longer_than_text(self):
        """Test a suffix longer than the text."""
        assert ends_with("c", "abc") is False

    @pytest.mark.parametrize("text,suffix", [("", "x"), ("abc", "abc"), ("a b", " c"), ("xy", "")])
    def test_concatenation_always_ends_with_suffix(self, text, suffix):
        """Test ends_with(s + t, t) for a few pairs."""
        assert ends_with(text + suffix, suffix) is True


class TestWrap:
    """Tests for wrap."""

    def test_wraps(self):
        """Test wrapper on both sides."""
        assert wrap("text", "**") == "**text**"

    def test_empty_wrapper(self):
        """Test that an empty wrapper is a no-op."""
        assert wrap("text", "") == "text"


class TestPad:
    """Tests for pad."""

    def test_pads_at_end_by_default(self):
        """Test appending padding."""
        assert pad("ab", 5, ".") == "ab..."

    def test_pads_at_beginning(self):
        """Test prepending padding."""
        assert pad("7", 3, "0", True) == "007"

    def test_converts_value_to_string(self):
        """Test non-string input."""
        assert pad(42, 5, "0", at_beginning=True) == "00042"
        assert pad(None, 6, "-") == "None--"

    def test_no_op_when_long_enough(self):
        """Test that long strings are returned unchanged."""
        assert pad("abcdef", 3, "x") == "abcdef"
        assert pad("abc", 3, "x") == "abc"

    def test_multi_character_fill(self):
        """Test that the fill string is repeated once per missing character."""
        assert pad("a", 3, "xy") == "axyxy"

    @pytest.mark.parametrize("value", ["", "a", "abc", "abcdef"])
    def test_idempotent(self, value):
        """Test that padding twice equals padding once."""
        once = pad(value, 4, "*")
        assert pad(once, 4, "*") == once


class TestCrop:
    """Tests for crop."""

    def test_crops_end_by_default(self):
        """Test removing a trailing run."""
        assert crop("12000", 0, "0") == "12"

    def test_crops_beginning(self):
        """Test removing a leading run."""
        assert crop("00012", 0, "0", True) == "12"

    def test_respects_minimum_size(self):
        """Test that cropping stops at the minimum length."""
        assert crop("10000", 3, "0") == "100"
        assert crop("00001", 3, "0", True) == "001"

    def test_stops_at_other_character(self):
        """Test that only a consecutive run is removed."""
        assert crop("a0b00", 0, "0") == "a0b"
        assert crop("00a0b", 0, "0", True) == "a0b"

    def test_whole_string_of_character(self):
        """Test cropping everything."""
        assert crop("0000", 0, "0") == ""
        assert crop("0000", 0, "0", True) == ""

    def test_nothing_to_crop(self):
        """Test a string without the character at the end."""
        assert crop("abc", 0, "0") == "abc"
