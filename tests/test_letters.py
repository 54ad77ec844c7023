"""Tests for letter normalization."""

import pytest

from hangquest.engine.letters import contains_diacritics, normalize, normalize_word


class TestNormalize:
    """Test suite for normalize."""

    @pytest.mark.parametrize(
        "letter,expected",
        [("ą", "a"), ("ć", "c"), ("ę", "e"), ("ł", "l"), ("ń", "n"), ("ó", "o"), ("ś", "s"), ("ź", "z"), ("ż", "z")],
    )
    def test_diacritics_fold_to_base_letter(self, letter, expected):
        """Test that every diacritic maps to its base letter."""
        assert normalize(letter) == expected

    def test_uppercase_is_folded(self):
        """Test that case is folded before the diacritic mapping."""
        assert normalize("Ą") == "a"
        assert normalize("Ż") == "z"
        assert normalize("K") == "k"

    def test_plain_letters_unchanged(self):
        """Test that plain letters pass through."""
        assert normalize("k") == "k"
        assert normalize("-") == "-"

    def test_normalize_word(self):
        """Test normalizing a whole word."""
        assert normalize_word("Żółw") == "zolw"

    def test_contains_diacritics(self):
        """Test diacritic detection."""
        assert contains_diacritics("książka") is True
        assert contains_diacritics("kot") is False
        assert contains_diacritics("KOT") is False
