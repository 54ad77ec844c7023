"""Tests for InputSanitizer."""

import pytest

from hangquest.security.input_sanitizer import InputSanitizer


class TestInputSanitizer:
    """Test suite for InputSanitizer."""

    def test_sanitize_strips_whitespace(self):
        """Test that leading/trailing whitespace is stripped."""
        sanitizer = InputSanitizer()
        assert sanitizer.sanitize("   k \n") == "k"

    def test_sanitize_removes_control_characters(self):
        """Test that control characters are removed."""
        sanitizer = InputSanitizer()
        assert sanitizer.sanitize("k\x00\x1b") == "k"

    def test_sanitize_truncates_long_input(self):
        """Test that input is truncated to max length."""
        sanitizer = InputSanitizer(max_length=4)
        assert sanitizer.sanitize("abcdefgh") == "abcd"

    def test_sanitize_unicode_normalization(self):
        """Test that a letter with a combining mark becomes one letter."""
        sanitizer = InputSanitizer()
        assert sanitizer.sanitize("z\u0307") == "\u017c"

    def test_sanitize_rejects_non_string(self):
        """Test that non-string input raises TypeError."""
        sanitizer = InputSanitizer()
        with pytest.raises(TypeError):
            sanitizer.sanitize(5)

    @pytest.mark.parametrize("raw, expected", [("k", "k"), (" Ą ", "Ą"), ("ś\n", "ś")])
    def test_extract_letter(self, raw, expected):
        """Test extracting a single letter."""
        assert InputSanitizer().extract_letter(raw) == expected

    @pytest.mark.parametrize("raw", ["", "   ", "ab", "1", "?", "k!"])
    def test_extract_letter_rejects(self, raw):
        """Test that anything but one letter is rejected."""
        assert InputSanitizer().extract_letter(raw) is None

    def test_parse_option(self):
        """Test parsing menu options."""
        sanitizer = InputSanitizer()
        assert sanitizer.parse_option(" 3\n") == 3
        assert sanitizer.parse_option("x") is None
        assert sanitizer.parse_option("-1") is None
        assert sanitizer.parse_option("") is None

    def test_is_safe_normal_input(self):
        """Test is_safe with a letter."""
        is_safe, error = InputSanitizer().is_safe("k")
        assert is_safe is True
        assert error is None

    def test_is_safe_empty_input(self):
        """Test is_safe with empty input."""
        is_safe, error = InputSanitizer().is_safe("")
        assert is_safe is False
        assert "empty" in error.lower()

    def test_is_safe_too_long(self):
        """Test is_safe detects input that's too long."""
        is_safe, error = InputSanitizer(max_length=3).is_safe("abcdef")
        assert is_safe is False
        assert "exceeds" in error.lower()

    def test_is_safe_control_characters(self):
        """Test is_safe detects control characters."""
        is_safe, error = InputSanitizer().is_safe("k\x07")
        assert is_safe is False
        assert "control" in error.lower()

    def test_is_safe_not_a_letter(self):
        """Test is_safe rejects words and digits."""
        is_safe, error = InputSanitizer().is_safe("kot")
        assert is_safe is False
        assert "single letter" in error.lower()
