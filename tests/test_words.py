"""Tests for WordsManager."""

import random

import pytest

from hangquest.config import DEFAULT_WORDS_FILE
from hangquest.engine.words import WordsManager


class TestWordsManager:
    """Test suite for WordsManager."""

    def test_cleans_words(self):
        """Test that words are stripped, lowercased and blanks dropped."""
        manager = WordsManager(["  Kot ", "", "   ", "DOM"], rng=random.Random(1))
        assert len(manager) == 2
        assert manager.random_word() in {"kot", "dom"}

    def test_empty_list(self):
        """Test that an empty word list is rejected."""
        with pytest.raises(ValueError):
            WordsManager(["", "  "])

    def test_from_file(self, tmp_path):
        """Test loading one word per line."""
        path = tmp_path / "words.txt"
        path.write_text("żaba\n\nksiążka\n", encoding="utf-8")
        manager = WordsManager.from_file(path)
        assert len(manager) == 2
        assert manager.random_word() in {"żaba", "książka"}

    def test_missing_file(self, tmp_path):
        """Test that a missing file raises."""
        with pytest.raises(FileNotFoundError):
            WordsManager.from_file(tmp_path / "missing.txt")

    def test_bundled_word_list(self):
        """Test that the packaged word list loads."""
        assert len(WordsManager.from_file(DEFAULT_WORDS_FILE)) > 0
