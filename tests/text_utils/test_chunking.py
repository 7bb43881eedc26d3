"""Tests for text_utils.chunking."""

import pytest

from text_utils import chunk


class TestChunkInput:
    """Tests for input type handling."""

    @pytest.mark.parametrize("value", [None, 42, ["abc"], b"abc"])
    def test_non_string_returns_none(self, value):
        """Test that anything but str yields None."""
        assert chunk(value, 3) is None

    def test_empty_string(self):
        """Test that an empty string gives a single empty chunk."""
        assert chunk("", 3) == [""]
        assert chunk("", [1, 2], True) == [""]


class TestChunkNumber:
    """Tests for uniform chunk sizes."""

    def test_from_beginning(self):
        """Test left-to-right chunking leaves the short chunk last."""
        assert chunk("abcdefg", 3, True) == ["abc", "def", "g"]

    def test_from_end(self):
        """Test right-to-left chunking leaves the short chunk first."""
        assert chunk("abcdefg", 3, False) == ["a", "bcd", "efg"]

    def test_default_direction_is_from_end(self):
        """Test that at_beginning defaults to False."""
        assert chunk("abcdefg", 3) == ["a", "bcd", "efg"]

    def test_exact_multiple(self):
        """Test lengths that divide evenly."""
        assert chunk("abcdef", 2, True) == ["ab", "cd", "ef"]
        assert chunk("abcdef", 2, False) == ["ab", "cd", "ef"]

    @pytest.mark.parametrize("size", [0, -1, 7, 8, 100])
    def test_size_out_of_range_returns_whole(self, size):
        """Test that size < 1 or size >= length returns the whole string."""
        assert chunk("abcdefg", size, True) == ["abcdefg"]
        assert chunk("abcdefg", size, False) == ["abcdefg"]

    def test_size_one_splits_characters(self):
        """Test that size 1 gives one chunk per character."""
        assert chunk("abc", 1) == ["a", "b", "c"]
        assert chunk("abc", 1, True) == ["a", "b", "c"]

    def test_thousands_grouping(self):
        """Test the classic digit grouping use case."""
        assert ",".join(chunk("1234567", 3)) == "1,234,567"


class TestChunkSequence:
    """Tests for per-chunk sizes."""

    def test_from_beginning_with_remainder(self):
        """Test that leftover text becomes a final chunk."""
        assert chunk("abcdefg", [1, 2], True) == ["a", "bc", "defg"]

    def test_from_end_with_remainder(self):
        """Test right-to-left consumption, reversed into reading order."""
        assert chunk("abcdefg", [1, 2], False) == ["abcd", "ef", "g"]

    def test_stops_when_string_consumed(self):
        """Test that unused sizes are ignored."""
        assert chunk("abcde", [2, 3, 4, 5], True) == ["ab", "cde"]
        assert chunk("abcde", [2, 3, 4, 5], False) == ["abc", "de"]

    def test_last_size_overshoots(self):
        """Test a size running past the end of the string."""
        assert chunk("abcde", [2, 10], True) == ["ab", "cde"]
        assert chunk("abcde", [2, 10], False) == ["abc", "de"]

    def test_tuple_sizes(self):
        """Test that any sequence of sizes is accepted."""
        assert chunk("abcdefg", (3, 3), True) == ["abc", "def", "g"]

    def test_empty_size_list(self):
        """Test that no sizes means one chunk with everything."""
        assert chunk("abc", [], True) == ["abc"]
        assert chunk("abc", []) == ["abc"]


class TestChunkJoinProperty:
    """Joining chunks always rebuilds the input."""

    @pytest.mark.parametrize("text", ["a", "ab", "abcdefg", "hello world, chunked!", "ünïcødé"])
    @pytest.mark.parametrize("size", [-2, 0, 1, 2, 3, 5, 50, [1], [2, 1], [1, 1, 1, 1], [4, 40]])
    @pytest.mark.parametrize("at_beginning", [True, False])
    def test_join_reconstructs_input(self, text, size, at_beginning):
        """Test that "".join(chunk(...)) == text."""
        assert "".join(chunk(text, size, at_beginning)) == text
