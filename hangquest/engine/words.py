"""Word source for new rounds."""

import logging
import random
from pathlib import Path
from typing import Optional

logger = logging.getLogger(__name__.split(".")[-1])


class WordsManager:
    """Supplies random lowercase words."""

    def __init__(self, words: list[str], rng: Optional[random.Random] = None) -> None:
        """
        Initialize with a word list.

        Args:
            words: Candidate words; blank entries are dropped
            rng: Optional random generator (for reproducible tests)
        """
        cleaned = [word.strip().lower() for word in words if word.strip()]
        if not cleaned:
            raise ValueError("Word list is empty")
        self._words = cleaned
        self._rng = rng or random.Random()

    @classmethod
    def from_file(cls, file_path: str | Path, rng: Optional[random.Random] = None) -> "WordsManager":
        """Load one word per line from a UTF-8 file."""
        path = Path(file_path)
        with open(path, "r", encoding="utf-8") as f:
            words = f.read().splitlines()
        manager = cls(words, rng=rng)
        logger.info(f"Loaded {len(manager)} words from {path}")
        return manager

    def __len__(self) -> int:
        return len(self._words)

    def random_word(self) -> str:
        """Pick a random word."""
        return self._rng.choice(self._words)
